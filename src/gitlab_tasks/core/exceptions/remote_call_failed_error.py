from __future__ import annotations

from dataclasses import dataclass

from gitlab_tasks.core.exceptions.gitlab_error import GitLabError


@dataclass(eq=False)
class RemoteCallFailedError(GitLabError):
    status_code: int | None = None
    body: str = ""

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        body = f" body={self.body}" if self.body else ""
        return f"{self.message}{code}{body}"
