"""Structlog processor that strips GitLab credentials from every log event."""

from __future__ import annotations

from typing import Any

from gitlab_tasks.infrastructure.observability.redaction_service import redact_dict, redact_text

# Keys structlog itself manages; never treated as sensitive payload
_RESERVED_KEYS = ("event", "level", "timestamp", "logger")


def redaction_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    reserved = {key: event_dict.pop(key) for key in _RESERVED_KEYS if key in event_dict}
    result = redact_dict(event_dict)
    if isinstance(reserved.get("event"), str):
        reserved["event"] = redact_text(reserved["event"])
    result.update(reserved)
    return result
