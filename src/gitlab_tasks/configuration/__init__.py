from gitlab_tasks.configuration.gitlab_settings import (
    DEFAULT_API_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    GitLabSettings,
)

__all__ = ["DEFAULT_API_PATH", "DEFAULT_BASE_URL", "DEFAULT_TIMEOUT_SECONDS", "GitLabSettings"]
