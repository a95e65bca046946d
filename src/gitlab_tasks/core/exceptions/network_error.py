from __future__ import annotations

from dataclasses import dataclass

from gitlab_tasks.core.exceptions.gitlab_error import GitLabError


@dataclass(eq=False)
class GitLabNetworkError(GitLabError):
    """Raised on transport failures: connection refused, timeout, TLS errors."""
