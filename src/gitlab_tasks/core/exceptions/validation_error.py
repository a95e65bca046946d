from __future__ import annotations

from dataclasses import dataclass

from gitlab_tasks.core.exceptions.gitlab_error import GitLabError


@dataclass(eq=False)
class GitLabValidationError(GitLabError):
    """Raised before any network call when a required value is empty."""

    field: str | None = None

    def __str__(self) -> str:
        suffix = f" field={self.field}" if self.field else ""
        return f"{self.message}{suffix}"
