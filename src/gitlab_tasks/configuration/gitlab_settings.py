from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitlab_tasks.core.exceptions.validation_error import GitLabValidationError

DEFAULT_BASE_URL = "https://gitlab.com"
DEFAULT_API_PATH = "/api/v4/projects"
DEFAULT_TIMEOUT_SECONDS = 20.0


class GitLabSettings(BaseSettings):
    """
    Settings shared by every GitLab call.
    Read from GITLAB_* environment variables; explicit arguments win.
    """

    base_url: str = Field(default=DEFAULT_BASE_URL, description="GitLab Base URL")
    token: SecretStr | None = Field(default=None, description="GitLab Personal or Project Access Token")
    project_id: str = Field(default="", description="GitLab project ID or URL path (group/project)")
    api_path: str = Field(default=DEFAULT_API_PATH, description="Projects API prefix")
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="HTTP timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="GITLAB_",
        env_file=None,
        extra="ignore",
        frozen=True,
    )

    @field_validator("base_url", mode="before")
    @classmethod
    def default_base_url(cls, value: object) -> object:
        return value or DEFAULT_BASE_URL

    @field_validator("api_path", mode="before")
    @classmethod
    def default_api_path(cls, value: object) -> object:
        return value or DEFAULT_API_PATH

    @field_validator("project_id", mode="before")
    @classmethod
    def stringify_project_id(cls, value: object) -> object:
        # YAML and env both hand us bare numbers for numeric IDs
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def token_value(self) -> str:
        return self.token.get_secret_value() if self.token else ""

    def validate_gitlab_credentials(self) -> None:
        if not self.token_value().strip():
            raise GitLabValidationError(message="GitLab token is missing in settings.", field="token")
        if not self.project_id.strip():
            raise GitLabValidationError(message="GitLab project ID is missing in settings.", field="project_id")
