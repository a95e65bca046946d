import pytest
from pydantic import SecretStr

from gitlab_tasks.configuration.gitlab_settings import (
    DEFAULT_API_PATH,
    DEFAULT_BASE_URL,
    GitLabSettings,
)
from gitlab_tasks.core.exceptions import GitLabValidationError


class TestGitLabSettingsFromEnv:
    def test_parses_all_fields_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITLAB_TOKEN", "glpat-env-test")
        monkeypatch.setenv("GITLAB_BASE_URL", "https://gl.corp.io")
        monkeypatch.setenv("GITLAB_PROJECT_ID", "123")
        monkeypatch.setenv("GITLAB_API_PATH", "/api/v4/custom")
        monkeypatch.setenv("GITLAB_TIMEOUT", "5")

        settings = GitLabSettings()

        assert settings.token is not None
        assert settings.token.get_secret_value() == "glpat-env-test"
        assert settings.base_url == "https://gl.corp.io"
        assert settings.project_id == "123"
        assert settings.api_path == "/api/v4/custom"
        assert settings.timeout == 5.0

    def test_defaults_when_no_env(self) -> None:
        settings = GitLabSettings()

        assert settings.token is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.api_path == DEFAULT_API_PATH
        assert settings.project_id == ""

    def test_explicit_arguments_win_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GITLAB_PROJECT_ID", "from-env")

        settings = GitLabSettings(project_id="from-args")

        assert settings.project_id == "from-args"


def test_empty_base_url_and_api_path_fall_back_to_defaults():
    settings = GitLabSettings(base_url="", api_path="", token=SecretStr("t"), project_id="1")

    assert settings.base_url == "https://gitlab.com"
    assert settings.api_path == "/api/v4/projects"


def test_numeric_project_id_is_stringified():
    settings = GitLabSettings(project_id=12345)

    assert settings.project_id == "12345"


def test_settings_are_immutable(settings):
    with pytest.raises(Exception):
        settings.project_id = "other"


def test_validate_credentials_accepts_complete_settings(settings):
    settings.validate_gitlab_credentials()


def test_validate_credentials_requires_token():
    settings = GitLabSettings(project_id="12345")

    with pytest.raises(GitLabValidationError) as exc:
        settings.validate_gitlab_credentials()

    assert exc.value.field == "token"


def test_validate_credentials_requires_project_id():
    settings = GitLabSettings(token=SecretStr("test-token"))

    with pytest.raises(GitLabValidationError) as exc:
        settings.validate_gitlab_credentials()

    assert exc.value.field == "project_id"
