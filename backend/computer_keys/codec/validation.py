"""Validation Error Formatting: pydantic error lists -> {"field": "message"} maps.

Invariants:
    - Field keys drop the request location ("body", "path", "query") and the
      "ssh-key" envelope when a nested field follows it
    - Missing or null required fields use the resource's "X is required" message
    - The first error reported for a field wins
"""

from collections.abc import Iterable, Mapping

from computer_keys.core import messages

_LOCATIONS = frozenset({"body", "path", "query", "header", "cookie"})
_ENVELOPES = frozenset({"ssh-key"})
_REQUIRED_TYPES = frozenset({"missing", "none_required"})


def field_name(loc: Iterable) -> str:
    """Dotted field path for an error location, e.g. ('body', 'ssh-key', 'public') -> 'public'."""
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOCATIONS:
        parts = parts[1:]
    while len(parts) > 1 and parts[0] in _ENVELOPES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def format_validation_errors(
    errors: Iterable[Mapping], required_messages: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Collapse pydantic/FastAPI errors into one message per field."""
    required_messages = required_messages or {}
    result: dict[str, str] = {}
    for error in errors:
        error_type = error.get("type", "")
        if error_type == "json_invalid":
            result.setdefault("body", messages.MALFORMED_JSON)
            continue
        name = field_name(error.get("loc", ()))
        if name == "body" and error_type == "missing":
            result.setdefault(name, messages.VALIDATION_BODY_REQUIRED)
            continue
        is_required = (
            error_type in _REQUIRED_TYPES
            or ("input" in error and error["input"] is None)
        )
        if is_required and name in required_messages:
            message = required_messages[name]
        else:
            message = error.get("msg", "Invalid value")
        result.setdefault(name, message)
    return result
