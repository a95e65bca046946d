from __future__ import annotations

from dataclasses import dataclass

from gitlab_tasks.core.exceptions.gitlab_error import GitLabError


@dataclass(eq=False)
class MalformedResponseError(GitLabError):
    """Raised when GitLab answers 2xx but the body is not the JSON shape we expect."""

    status_code: int | None = None
    body: str = ""

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.message}{code}"
