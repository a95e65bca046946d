import urllib.parse
from typing import Any

from gitlab_tasks.core.entities.issue_create_spec import IssueCreateSpec
from gitlab_tasks.core.entities.issue_search_spec import DEFAULT_ISSUE_STATE, IssueSearchSpec
from gitlab_tasks.core.entities.merge_request_spec import MergeRequestSpec


class GitLabPayloadBuilderService:
    def build_merge_request_payload(self, spec: MergeRequestSpec) -> dict[str, Any]:
        """
        Builds the JSON body for POST /projects/:id/merge_requests.
        'description' is only sent when the caller provided one.
        """
        payload: dict[str, Any] = {
            "title": spec.title,
            "source_branch": spec.source_branch,
            "target_branch": spec.target_branch,
        }
        if spec.description is not None:
            payload["description"] = spec.description
        return payload

    def build_issue_payload(self, spec: IssueCreateSpec) -> dict[str, Any]:
        payload: dict[str, Any] = {"title": spec.title}
        if spec.description is not None:
            payload["description"] = spec.description
        if spec.labels is not None:
            payload["labels"] = list(spec.labels)
        return payload

    def build_issue_search_query(self, spec: IssueSearchSpec) -> str:
        """
        Builds '?search=..&state=..&labels=..' for GET /projects/:id/issues.
        State is always present; labels are comma-joined before encoding,
        so ["bug", "critical"] becomes 'labels=bug%2Ccritical'.
        """
        params: list[str] = []
        if spec.search is not None:
            params.append(f"search={urllib.parse.quote_plus(spec.search)}")

        state = spec.state or DEFAULT_ISSUE_STATE
        params.append(f"state={urllib.parse.quote_plus(state)}")

        if spec.labels:
            params.append(f"labels={urllib.parse.quote_plus(','.join(spec.labels))}")

        return "?" + "&".join(params)
