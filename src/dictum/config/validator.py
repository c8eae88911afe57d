"""Validation utilities for Dictum configuration."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten Pydantic ValidationError into human-readable messages.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of messages, one per field error, each naming the field path

    Example:
        >>> from dictum.models.config import ExtractionConfig
        >>> try:
        ...     ExtractionConfig(output_format="xml")
        ... except PydanticValidationError as e:
        ...     msgs = flatten_pydantic_errors(e)
    """
    errors: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "unknown"

        msg = error.get("msg", "Unknown error")
        input_val = error.get("input")

        if error.get("type") == "extra_forbidden":
            formatted = f"Field '{field_path}': unknown setting"
        elif input_val is not None and not isinstance(input_val, dict):
            formatted = f"Field '{field_path}': {msg} (received: {input_val!r})"
        else:
            formatted = f"Field '{field_path}': {msg}"

        errors.append(formatted)

    return errors if errors else ["Validation failed with unknown error"]
