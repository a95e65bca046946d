import logging

from gitlab_tasks.configuration.gitlab_settings import GitLabSettings
from gitlab_tasks.core.entities import (
    ApiResult,
    CreatedResource,
    IssueCollection,
    IssueCreateSpec,
    IssueSearchSpec,
    MergeRequestSpec,
)
from gitlab_tasks.core.exceptions import (
    GitLabError,
    GitLabNetworkError,
    GitLabValidationError,
    MalformedResponseError,
    RemoteCallFailedError,
    TaskConfigurationError,
)
from gitlab_tasks.infrastructure.providers.gitlab.gitlab_client import GitLabClient

__all__ = [
    "ApiResult",
    "CreatedResource",
    "GitLabClient",
    "GitLabError",
    "GitLabNetworkError",
    "GitLabSettings",
    "GitLabValidationError",
    "IssueCollection",
    "IssueCreateSpec",
    "IssueSearchSpec",
    "MalformedResponseError",
    "MergeRequestSpec",
    "RemoteCallFailedError",
    "TaskConfigurationError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
