from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from gitlab_tasks.configuration.gitlab_settings import GitLabSettings
from gitlab_tasks.infrastructure.providers.gitlab.gitlab_client import GitLabClient


class BaseGitLabTask(BaseModel):
    """
    Connection properties shared by every GitLab task.
    Unset properties fall back to GITLAB_* environment variables, then defaults.
    """

    # YAML hands us bare numbers for ids such as `projectId: 123`
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid", coerce_numbers_to_str=True)

    id: str | None = None
    type: str | None = None
    url: str | None = Field(default=None, description="GitLab URL, defaults to https://gitlab.com")
    token: SecretStr | None = Field(default=None, description="GitLab Personal Access Token")
    project_id: str | None = Field(default=None, alias="projectId", description="GitLab project ID")
    api_path: str | None = Field(default=None, alias="apiPath", description="Projects API prefix")
    timeout: float | None = Field(default=None, gt=0)

    def build_settings(self) -> GitLabSettings:
        overrides: dict[str, Any] = {
            "base_url": self.url,
            "token": self.token,
            "project_id": self.project_id,
            "api_path": self.api_path,
            "timeout": self.timeout,
        }
        return GitLabSettings(**{key: value for key, value in overrides.items() if value is not None})

    def build_client(self) -> GitLabClient:
        return GitLabClient(self.build_settings())
