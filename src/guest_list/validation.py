"""Payload checks shared by the guest list routers.

Each check raises one of the errors from ``src.guest_list.dtos`` so the
application-level handler can render it.
"""

from typing import Any, Iterable

from src.guest_list.dtos import (
    DisallowedFieldsError,
    MissingFieldError,
    UnexpectedFieldsError,
    is_empty_value,
)


def require_fields(
    payload: dict[str, Any],
    fields: Iterable[str],
    message: str,
    status_code: int = 400,
) -> None:
    """Reject the payload when any of ``fields`` is absent or empty."""
    if any(is_empty_value(payload.get(name)) for name in fields):
        raise MissingFieldError(message, status_code=status_code)


def reject_unexpected_fields(
    payload: dict[str, Any],
    allowed: Iterable[str],
    message: str,
) -> None:
    allowed = set(allowed)
    if any(key not in allowed for key in payload):
        raise UnexpectedFieldsError(message)


def reject_disallowed_fields(payload: dict[str, Any], allowed: tuple[str, ...]) -> None:
    """Reject the payload listing both the allowed keys and the offending ones."""
    extra = [key for key in payload if key not in allowed]
    if extra:
        raise DisallowedFieldsError(allowed, extra)
