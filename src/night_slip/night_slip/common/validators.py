from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def normalize_email(value: str) -> str:
    return (value or "").strip()


def same_email(a: str, b: str) -> bool:
    """Case-insensitive email comparison used for ownership checks."""
    return normalize_email(a).lower() == normalize_email(b).lower()
