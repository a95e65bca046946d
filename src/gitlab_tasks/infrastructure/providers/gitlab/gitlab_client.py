import logging

from gitlab_tasks.configuration.gitlab_settings import GitLabSettings
from gitlab_tasks.core.entities.api_result import ApiResult, CreatedResource, IssueCollection
from gitlab_tasks.core.entities.issue_create_spec import IssueCreateSpec
from gitlab_tasks.core.entities.issue_search_spec import IssueSearchSpec
from gitlab_tasks.core.entities.merge_request_spec import MergeRequestSpec
from gitlab_tasks.core.exceptions.gitlab_error import GitLabError
from gitlab_tasks.infrastructure.providers.gitlab.clients.gitlab_http_client import GitLabHttpClient
from gitlab_tasks.infrastructure.providers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)
from gitlab_tasks.infrastructure.providers.gitlab.mappers.gitlab_result_mapper_service import (
    GitLabResultMapperService,
)
from gitlab_tasks.infrastructure.providers.gitlab.services.gitlab_issue_service import GitLabIssueService
from gitlab_tasks.infrastructure.providers.gitlab.services.gitlab_mr_service import GitLabMergeRequestService

logger = logging.getLogger(__name__)


class GitLabClient:
    """
    Entry point for the supported GitLab operations.
    Every call checks credentials first, so a missing token or project ID
    fails before any request is sent.
    """

    def __init__(
        self,
        settings: GitLabSettings,
        http_client: GitLabHttpClient | None = None,
        payload_builder: GitLabPayloadBuilderService | None = None,
        result_mapper: GitLabResultMapperService | None = None,
    ):
        self.settings = settings
        self.client = http_client or GitLabHttpClient(settings)
        self.payload_builder = payload_builder or GitLabPayloadBuilderService()
        self.result_mapper = result_mapper or GitLabResultMapperService()
        self._logger = logger

        self.mr_service = GitLabMergeRequestService(self.client, self.payload_builder, self.result_mapper)
        self.issue_service = GitLabIssueService(self.client, self.payload_builder, self.result_mapper)

    def create_merge_request(self, spec: MergeRequestSpec) -> ApiResult[CreatedResource]:
        self._logger.info(
            f"Creating MR: {spec.source_branch} -> {spec.target_branch} (Project: {self.settings.project_id})"
        )
        try:
            self.settings.validate_gitlab_credentials()
            return self.mr_service.create_merge_request(spec)
        except GitLabError as e:
            self._handle_error(e, "create_merge_request")
            raise

    def create_issue(self, spec: IssueCreateSpec) -> ApiResult[CreatedResource]:
        self._logger.info(f"Creating issue '{spec.title}' (Project: {self.settings.project_id})")
        try:
            self.settings.validate_gitlab_credentials()
            return self.issue_service.create_issue(spec)
        except GitLabError as e:
            self._handle_error(e, "create_issue")
            raise

    def search_issues(self, spec: IssueSearchSpec) -> ApiResult[IssueCollection]:
        self._logger.info(
            f"Searching issues search={spec.search!r} state={spec.state} (Project: {self.settings.project_id})"
        )
        try:
            self.settings.validate_gitlab_credentials()
            return self.issue_service.search_issues(spec)
        except GitLabError as e:
            self._handle_error(e, "search_issues")
            raise

    def _handle_error(self, error: GitLabError, context: str) -> None:
        self._logger.error(f"Error in GitLabClient [{context}]: {error}")
