from gitlab_tasks.tasks.base_gitlab_task import BaseGitLabTask
from gitlab_tasks.tasks.issue_create_task import IssueCreateTask
from gitlab_tasks.tasks.issue_search_task import IssueSearchTask
from gitlab_tasks.tasks.merge_request_create_task import MergeRequestCreateTask
from gitlab_tasks.tasks.task_loader import TASK_TYPES, build_task, load_tasks
from gitlab_tasks.tasks.task_outputs import (
    IssueCreateOutput,
    IssueSearchOutput,
    MergeRequestCreateOutput,
    TaskOutput,
)

__all__ = [
    "BaseGitLabTask",
    "IssueCreateOutput",
    "IssueCreateTask",
    "IssueSearchOutput",
    "IssueSearchTask",
    "MergeRequestCreateOutput",
    "MergeRequestCreateTask",
    "TASK_TYPES",
    "TaskOutput",
    "build_task",
    "load_tasks",
]
