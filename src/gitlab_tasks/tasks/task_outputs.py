from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from gitlab_tasks.core.entities.api_result import ApiResult, CreatedResource, IssueCollection


class TaskOutput(BaseModel):
    """
    Task results under the plugin's property names.
    Use `model_dump(by_alias=True)` to get e.g. {"webUrl": ..., "statusCode": ...}.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status_code: int = Field(alias="statusCode")


class MergeRequestCreateOutput(TaskOutput):
    merge_request_id: str = Field(alias="mergeReqID")
    web_url: str = Field(alias="webUrl")

    @classmethod
    def from_result(cls, result: ApiResult[CreatedResource]) -> "MergeRequestCreateOutput":
        return cls(merge_request_id=result.payload.id, web_url=result.payload.web_url, status_code=result.status_code)


class IssueCreateOutput(TaskOutput):
    issue_id: str = Field(alias="issueId")
    web_url: str = Field(alias="webUrl")

    @classmethod
    def from_result(cls, result: ApiResult[CreatedResource]) -> "IssueCreateOutput":
        return cls(issue_id=result.payload.id, web_url=result.payload.web_url, status_code=result.status_code)


class IssueSearchOutput(TaskOutput):
    issues: list[dict[str, Any]]
    count: int

    @classmethod
    def from_result(cls, result: ApiResult[IssueCollection]) -> "IssueSearchOutput":
        return cls(issues=result.payload.issues, count=result.payload.count, status_code=result.status_code)
