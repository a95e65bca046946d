from typing import Any

import httpx

from gitlab_tasks.core.entities.api_result import ApiResult, CreatedResource, IssueCollection
from gitlab_tasks.core.exceptions.malformed_response_error import MalformedResponseError
from gitlab_tasks.core.exceptions.remote_call_failed_error import RemoteCallFailedError


class GitLabResultMapperService:
    def map_created_resource(self, response: httpx.Response) -> ApiResult[CreatedResource]:
        """
        Maps a create-merge-request or create-issue response.
        GitLab sends 'id' as a number; it is stringified so callers get one type.
        """
        data = self._decode(response)
        if not isinstance(data, dict):
            raise self._malformed(response, f"expected a JSON object, got {type(data).__name__}")

        raw_id = data.get("id")
        web_url = data.get("web_url")
        if raw_id is None or isinstance(raw_id, (dict, list, bool)):
            raise self._malformed(response, "response is missing a usable 'id'")
        if not isinstance(web_url, str) or not web_url:
            raise self._malformed(response, "response is missing 'web_url'")

        return ApiResult[CreatedResource](
            status_code=response.status_code,
            payload=CreatedResource(id=str(raw_id), web_url=web_url),
        )

    def map_issue_collection(self, response: httpx.Response) -> ApiResult[IssueCollection]:
        data = self._decode(response)
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise self._malformed(response, "expected a JSON array of issue objects")

        return ApiResult[IssueCollection](
            status_code=response.status_code,
            payload=IssueCollection(issues=data),
        )

    def _decode(self, response: httpx.Response) -> Any:
        if not response.is_success:
            raise RemoteCallFailedError(
                message=f"GitLab API call failed with HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        try:
            return response.json()
        except ValueError as e:
            raise self._malformed(response, "response body is not valid JSON") from e

    def _malformed(self, response: httpx.Response, reason: str) -> MalformedResponseError:
        return MalformedResponseError(
            message=f"Unexpected GitLab response: {reason}",
            status_code=response.status_code,
            body=response.text,
        )
