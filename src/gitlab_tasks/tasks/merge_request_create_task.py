from pydantic import AliasChoices, Field

from gitlab_tasks.core.entities.merge_request_spec import MergeRequestSpec
from gitlab_tasks.tasks.base_gitlab_task import BaseGitLabTask
from gitlab_tasks.tasks.task_outputs import MergeRequestCreateOutput


class MergeRequestCreateTask(BaseGitLabTask):
    """Create a new merge request in a GitLab project."""

    title: str | None = None
    source_branch: str | None = Field(default=None, alias="sourceBranch")
    target_branch: str | None = Field(default=None, alias="targetBranch")
    description: str | None = Field(
        default=None,
        validation_alias=AliasChoices("description", "mergeRequestDescription"),
    )

    def run(self) -> MergeRequestCreateOutput:
        spec = MergeRequestSpec(
            title=self.title,
            source_branch=self.source_branch,
            target_branch=self.target_branch,
            description=self.description,
        )
        return MergeRequestCreateOutput.from_result(self.build_client().create_merge_request(spec))
