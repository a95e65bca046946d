from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class GitLabError(Exception):
    """
    Base class for all exceptions raised by the GitLab tasks.
    Lets callers catch every GitLab failure with a single except clause.
    """

    message: str

    def __str__(self) -> str:
        return self.message
