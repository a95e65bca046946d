from gitlab_tasks.infrastructure.observability.logging.redaction_processor import redaction_processor

__all__ = ["redaction_processor"]
