import logging

from gitlab_tasks.core.entities.api_result import ApiResult, CreatedResource, IssueCollection
from gitlab_tasks.core.entities.issue_create_spec import IssueCreateSpec
from gitlab_tasks.core.entities.issue_search_spec import IssueSearchSpec
from gitlab_tasks.infrastructure.providers.gitlab.clients.gitlab_http_client import GitLabHttpClient
from gitlab_tasks.infrastructure.providers.gitlab.gitlab_endpoint_builder import (
    ISSUES_RESOURCE,
    build_endpoint,
)
from gitlab_tasks.infrastructure.providers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)
from gitlab_tasks.infrastructure.providers.gitlab.mappers.gitlab_result_mapper_service import (
    GitLabResultMapperService,
)

logger = logging.getLogger(__name__)


class GitLabIssueService:
    def __init__(
        self,
        client: GitLabHttpClient,
        payload_builder: GitLabPayloadBuilderService,
        result_mapper: GitLabResultMapperService,
    ):
        self.client = client
        self.payload_builder = payload_builder
        self.result_mapper = result_mapper

    def create_issue(self, spec: IssueCreateSpec) -> ApiResult[CreatedResource]:
        endpoint = build_endpoint(self.client.settings, ISSUES_RESOURCE)
        payload = self.payload_builder.build_issue_payload(spec)

        response = self.client.post(endpoint, payload)
        result = self.result_mapper.map_created_resource(response)
        logger.info(f"Created issue {result.payload.id}: {result.payload.web_url}")
        return result

    def search_issues(self, spec: IssueSearchSpec) -> ApiResult[IssueCollection]:
        """
        Lists the project's issues matching the given filters.
        The array GitLab returns is passed through untouched.
        """
        endpoint = build_endpoint(self.client.settings, ISSUES_RESOURCE)
        query = self.payload_builder.build_issue_search_query(spec)

        response = self.client.get(endpoint + query)
        result = self.result_mapper.map_issue_collection(response)
        logger.info(f"Issue search returned {result.payload.count} issue(s)")
        return result
