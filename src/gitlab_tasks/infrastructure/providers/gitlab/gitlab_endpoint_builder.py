import urllib.parse

from gitlab_tasks.configuration.gitlab_settings import DEFAULT_API_PATH, GitLabSettings
from gitlab_tasks.core.exceptions.validation_error import GitLabValidationError

MERGE_REQUESTS_RESOURCE = "merge_requests"
ISSUES_RESOURCE = "issues"


def build_endpoint(settings: GitLabSettings, resource: str) -> str:
    """
    Builds '{api_path}/{project_id}/{resource}', e.g. '/api/v4/projects/123/issues'.
    Path-style project IDs (group/project) are percent-encoded as GitLab requires.
    """
    project_id = (settings.project_id or "").strip()
    if not project_id:
        raise GitLabValidationError(message="GitLab project ID is required to build the endpoint", field="project_id")

    api_path = (settings.api_path or DEFAULT_API_PATH).rstrip("/")
    if not api_path.startswith("/"):
        api_path = f"/{api_path}"

    encoded_project = urllib.parse.quote(project_id, safe="")
    return f"{api_path}/{encoded_project}/{resource}"
