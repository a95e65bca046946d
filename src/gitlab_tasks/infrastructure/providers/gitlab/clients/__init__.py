from gitlab_tasks.infrastructure.providers.gitlab.clients.gitlab_http_client import GitLabHttpClient

__all__ = ["GitLabHttpClient"]
