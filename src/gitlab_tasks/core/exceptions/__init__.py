from gitlab_tasks.core.exceptions.gitlab_error import GitLabError
from gitlab_tasks.core.exceptions.malformed_response_error import MalformedResponseError
from gitlab_tasks.core.exceptions.network_error import GitLabNetworkError
from gitlab_tasks.core.exceptions.remote_call_failed_error import RemoteCallFailedError
from gitlab_tasks.core.exceptions.task_configuration_error import TaskConfigurationError
from gitlab_tasks.core.exceptions.validation_error import GitLabValidationError

__all__ = [
    "GitLabError",
    "GitLabNetworkError",
    "GitLabValidationError",
    "MalformedResponseError",
    "RemoteCallFailedError",
    "TaskConfigurationError",
]
