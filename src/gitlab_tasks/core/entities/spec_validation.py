from gitlab_tasks.core.exceptions.validation_error import GitLabValidationError


def require_text(field: str, value: str | None) -> None:
    """
    Rejects None, empty and whitespace-only values for a required field.
    """
    if value is None or not str(value).strip():
        raise GitLabValidationError(message=f"'{field}' is required and cannot be empty", field=field)
