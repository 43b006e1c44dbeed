"""Shared field validators for request schemas."""

from pydantic_core import PydanticCustomError


def require_text(value: str | None, message: str) -> str | None:
    """Reject empty or whitespace-only strings with `message`. None passes through."""
    if value is not None and not value.strip():
        raise PydanticCustomError("blank", message)
    return value
