from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty")
    return str(value).strip()


def require_one_of(value: str, field_name: str, allowed: set[str]) -> str:
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(sorted(allowed))}")
    return value
