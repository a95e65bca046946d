from gitlab_tasks.infrastructure.providers.gitlab.mappers.gitlab_payload_builder_service import (
    GitLabPayloadBuilderService,
)
from gitlab_tasks.infrastructure.providers.gitlab.mappers.gitlab_result_mapper_service import (
    GitLabResultMapperService,
)

__all__ = ["GitLabPayloadBuilderService", "GitLabResultMapperService"]
