import logging

from gitlab_tasks.core.entities.api_result import ApiResult, CreatedResource
from gitlab_tasks.core.entities.merge_request_spec import MergeRequestSpec
from gitlab_tasks.infrastructure.providers.gitlab.clients.gitlab_http_client import GitLabHttpClient
from gitlab_tasks.infrastructure.providers.gitlab.gitlab_endpoint_builder import (
    MERGE_REQUESTS_RESOURCE,
    build_endpoint,
)
from gitlab_tasks.infrastructure.providers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)
from gitlab_tasks.infrastructure.providers.gitlab.mappers.gitlab_result_mapper_service import (
    GitLabResultMapperService,
)

logger = logging.getLogger(__name__)


class GitLabMergeRequestService:
    def __init__(
        self,
        client: GitLabHttpClient,
        payload_builder: GitLabPayloadBuilderService,
        result_mapper: GitLabResultMapperService,
    ):
        self.client = client
        self.payload_builder = payload_builder
        self.result_mapper = result_mapper

    def create_merge_request(self, spec: MergeRequestSpec) -> ApiResult[CreatedResource]:
        endpoint = build_endpoint(self.client.settings, MERGE_REQUESTS_RESOURCE)
        payload = self.payload_builder.build_merge_request_payload(spec)

        response = self.client.post(endpoint, payload)
        result = self.result_mapper.map_created_resource(response)
        logger.info(f"Created MR {result.payload.id}: {result.payload.web_url}")
        return result
