import logging
from typing import Any

import httpx

from gitlab_tasks.configuration.gitlab_settings import GitLabSettings
from gitlab_tasks.core.exceptions.network_error import GitLabNetworkError
from gitlab_tasks.core.exceptions.validation_error import GitLabValidationError

logger = logging.getLogger(__name__)


class GitLabHttpClient:
    def __init__(self, settings: GitLabSettings):
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")

    def _get_headers(self) -> dict[str, str]:
        token = self.settings.token_value()
        if not token.strip():
            raise GitLabValidationError(message="GitLab token is required to authenticate requests", field="token")
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "PRIVATE-TOKEN": token,
        }

    def build_request(self, method: str, endpoint: str, json_data: dict[str, Any] | None = None) -> httpx.Request:
        """
        Assembles an authenticated request for '{base_url}{endpoint}'.
        No I/O happens here; the body is only attached to POST requests.
        """
        method = method.upper()
        url = f"{self.base_url}{endpoint}"
        headers = self._get_headers()
        if method == "POST" and json_data is not None:
            return httpx.Request(method, url, headers=headers, json=json_data)
        return httpx.Request(method, url, headers=headers)

    def send(self, request: httpx.Request) -> httpx.Response:
        logger.debug(f"{request.method} {request.url}")
        try:
            with httpx.Client(timeout=self.settings.timeout) as client:
                response = client.send(request)
        except httpx.TransportError as e:
            raise GitLabNetworkError(
                message=f"{request.method} {request.url} failed: {type(e).__name__}: {e}"
            ) from e
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    def get(self, endpoint: str) -> httpx.Response:
        return self.send(self.build_request("GET", endpoint))

    def post(self, endpoint: str, json_data: dict[str, Any]) -> httpx.Response:
        return self.send(self.build_request("POST", endpoint, json_data))
