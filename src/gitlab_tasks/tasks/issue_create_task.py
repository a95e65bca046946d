from pydantic import AliasChoices, Field

from gitlab_tasks.core.entities.issue_create_spec import IssueCreateSpec
from gitlab_tasks.tasks.base_gitlab_task import BaseGitLabTask
from gitlab_tasks.tasks.task_outputs import IssueCreateOutput


class IssueCreateTask(BaseGitLabTask):
    """Create a new issue in a GitLab project."""

    title: str | None = None
    description: str | None = Field(
        default=None,
        validation_alias=AliasChoices("description", "issueDescription"),
    )
    labels: list[str] | None = None

    def run(self) -> IssueCreateOutput:
        spec = IssueCreateSpec(title=self.title, description=self.description, labels=self.labels)
        return IssueCreateOutput.from_result(self.build_client().create_issue(spec))
