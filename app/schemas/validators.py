"""
Reusable request field rules

Each rule returns the value unchanged when it passes and raises ValueError
carrying the client-facing message otherwise. Schemas call them from their
field validators so every failing field is reported in one response.
"""
from typing import Any, Optional

from email_validator import validate_email, EmailNotValidError


def exists(value: Any, message: str) -> Any:
    """Field must be present in the body"""
    if value is None:
        raise ValueError(message)
    return value


def not_empty(value: Any, message: str) -> Any:
    """Field must be present and not blank"""
    if value is None:
        raise ValueError(message)
    if isinstance(value, str) and not value.strip():
        raise ValueError(message)
    if isinstance(value, (list, tuple, dict)) and not value:
        raise ValueError(message)
    return value


def min_length(value: Optional[str], length: int, message: str) -> str:
    """Field must be a string of at least `length` characters"""
    if value is None or len(value) < length:
        raise ValueError(message)
    return value


def is_email(value: Optional[str], message: str) -> str:
    """Field must be an email address (syntax only, no DNS lookups)"""
    if not value:
        raise ValueError(message)
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(message)
    return value.strip()


def blank_to_none(value: Any) -> Any:
    """Treat empty strings as absent"""
    if isinstance(value, str) and not value.strip():
        return None
    return value
