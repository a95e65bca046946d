from gitlab_tasks.infrastructure.providers.gitlab.gitlab_client import GitLabClient

__all__ = ["GitLabClient"]
