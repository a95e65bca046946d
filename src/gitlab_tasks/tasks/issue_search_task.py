from gitlab_tasks.core.entities.issue_search_spec import DEFAULT_ISSUE_STATE, IssueSearchSpec
from gitlab_tasks.tasks.base_gitlab_task import BaseGitLabTask
from gitlab_tasks.tasks.task_outputs import IssueSearchOutput


class IssueSearchTask(BaseGitLabTask):
    """Search for issues in a GitLab project."""

    search: str | None = None
    state: str = DEFAULT_ISSUE_STATE
    labels: list[str] | None = None

    def run(self) -> IssueSearchOutput:
        spec = IssueSearchSpec(search=self.search, state=self.state, labels=self.labels)
        return IssueSearchOutput.from_result(self.build_client().search_issues(spec))
