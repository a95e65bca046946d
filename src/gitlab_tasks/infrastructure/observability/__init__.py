from gitlab_tasks.infrastructure.observability.logger_factory_service import build_formatter, configure_logging

__all__ = ["build_formatter", "configure_logging"]
