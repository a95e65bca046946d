import pytest
from pydantic import SecretStr

from gitlab_tasks.configuration.gitlab_settings import GitLabSettings
from gitlab_tasks.core.exceptions import GitLabValidationError
from gitlab_tasks.infrastructure.providers.gitlab.gitlab_endpoint_builder import build_endpoint


def test_builds_endpoint_with_default_api_path(settings):
    assert build_endpoint(settings, "issues") == "/api/v4/projects/12345/issues"
    assert build_endpoint(settings, "merge_requests") == "/api/v4/projects/12345/merge_requests"


def test_custom_api_path_trailing_slash_is_collapsed():
    settings = GitLabSettings(token=SecretStr("t"), project_id="7", api_path="/gitlab/api/v4/projects/")

    assert build_endpoint(settings, "issues") == "/gitlab/api/v4/projects/7/issues"


def test_project_path_is_url_encoded():
    settings = GitLabSettings(token=SecretStr("t"), project_id="group/sub/project")

    assert build_endpoint(settings, "issues") == "/api/v4/projects/group%2Fsub%2Fproject/issues"


def test_missing_project_id_fails():
    settings = GitLabSettings(token=SecretStr("t"))

    with pytest.raises(GitLabValidationError) as exc:
        build_endpoint(settings, "issues")

    assert exc.value.field == "project_id"
