import logging

import pytest
from pydantic import SecretStr

from gitlab_tasks.configuration.gitlab_settings import GitLabSettings

MOCK_BASE_URL = "http://mock"

GITLAB_ENV_VARS = (
    "GITLAB_BASE_URL",
    "GITLAB_TOKEN",
    "GITLAB_PROJECT_ID",
    "GITLAB_API_PATH",
    "GITLAB_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_gitlab_env(monkeypatch):
    # Keep a developer's real GitLab credentials out of the tests
    for var in GITLAB_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings():
    return GitLabSettings(
        base_url=MOCK_BASE_URL,
        token=SecretStr("test-token"),
        project_id="12345",
    )


@pytest.fixture
def issue_response_body():
    return {
        "id": 1,
        "iid": 1,
        "project_id": 12345,
        "title": "Test issue",
        "web_url": "https://gitlab.example.com/test-group/test-project/issues/1",
    }


@pytest.fixture
def restore_package_logger():
    # configure_logging() adds handlers to the package logger; undo that after each test
    package_logger = logging.getLogger("gitlab_tasks")
    handlers, level = list(package_logger.handlers), package_logger.level
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
