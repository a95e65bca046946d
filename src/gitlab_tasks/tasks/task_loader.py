from typing import Any

import yaml
from pydantic import ValidationError

from gitlab_tasks.core.exceptions.task_configuration_error import TaskConfigurationError
from gitlab_tasks.tasks.base_gitlab_task import BaseGitLabTask
from gitlab_tasks.tasks.issue_create_task import IssueCreateTask
from gitlab_tasks.tasks.issue_search_task import IssueSearchTask
from gitlab_tasks.tasks.merge_request_create_task import MergeRequestCreateTask

TASK_TYPES: dict[str, type[BaseGitLabTask]] = {
    "gitlab.mergerequests.Create": MergeRequestCreateTask,
    "gitlab.issues.Create": IssueCreateTask,
    "gitlab.issues.Search": IssueSearchTask,
    # Legacy type names kept so older flows still load
    "gitlab.MergeRequest": MergeRequestCreateTask,
    "gitlab.core.MergeRequest": MergeRequestCreateTask,
    "gitlab.issues.CreateIssue": IssueCreateTask,
}


def load_tasks(source: str) -> list[BaseGitLabTask]:
    """
    Parses a flow document and instantiates its GitLab tasks in order.

    Example:
        tasks:
          - id: create_issue
            type: gitlab.issues.Create
            projectId: "123"
            title: "Bug report"
    """
    try:
        document = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise TaskConfigurationError(message=f"Invalid flow YAML: {e}") from e

    if not isinstance(document, dict) or not isinstance(document.get("tasks"), list):
        raise TaskConfigurationError(message="Flow document must contain a 'tasks' list")

    return [build_task(definition) for definition in document["tasks"]]


def build_task(definition: Any) -> BaseGitLabTask:
    if not isinstance(definition, dict):
        raise TaskConfigurationError(message=f"Task definition must be a mapping, got {type(definition).__name__}")

    task_type = definition.get("type")
    if not isinstance(task_type, str):
        raise TaskConfigurationError(
            message=f"Task '{definition.get('id')}' needs a string 'type', got {type(task_type).__name__}"
        )

    task_cls = TASK_TYPES.get(task_type)
    if task_cls is None:
        raise TaskConfigurationError(
            message=f"Unknown task type '{task_type}'. Supported: {', '.join(sorted(TASK_TYPES))}"
        )

    try:
        return task_cls.model_validate(definition)
    except ValidationError as e:
        raise TaskConfigurationError(message=f"Invalid task '{definition.get('id')}': {e}") from e

