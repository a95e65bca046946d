from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field

PayloadT = TypeVar("PayloadT")


class CreatedResource(BaseModel):
    """A merge request or issue as returned by a create call."""

    model_config = ConfigDict(frozen=True)

    id: str
    web_url: str


class IssueCollection(BaseModel):
    model_config = ConfigDict(frozen=True)

    issues: list[dict[str, Any]]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.issues)


class ApiResult(BaseModel, Generic[PayloadT]):
    model_config = ConfigDict(frozen=True)

    status_code: int
    payload: PayloadT
