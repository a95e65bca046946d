from gitlab_tasks.infrastructure.providers.gitlab.services.gitlab_issue_service import GitLabIssueService
from gitlab_tasks.infrastructure.providers.gitlab.services.gitlab_mr_service import GitLabMergeRequestService

__all__ = ["GitLabIssueService", "GitLabMergeRequestService"]
