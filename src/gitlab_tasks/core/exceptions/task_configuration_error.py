from __future__ import annotations

from dataclasses import dataclass

from gitlab_tasks.core.exceptions.gitlab_error import GitLabError


@dataclass(eq=False)
class TaskConfigurationError(GitLabError):
    """Raised when a flow document cannot be turned into GitLab tasks."""
