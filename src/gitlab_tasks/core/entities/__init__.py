from gitlab_tasks.core.entities.api_result import ApiResult, CreatedResource, IssueCollection
from gitlab_tasks.core.entities.issue_create_spec import IssueCreateSpec
from gitlab_tasks.core.entities.issue_search_spec import DEFAULT_ISSUE_STATE, IssueSearchSpec
from gitlab_tasks.core.entities.merge_request_spec import MergeRequestSpec

__all__ = [
    "ApiResult",
    "CreatedResource",
    "DEFAULT_ISSUE_STATE",
    "IssueCollection",
    "IssueCreateSpec",
    "IssueSearchSpec",
    "MergeRequestSpec",
]
