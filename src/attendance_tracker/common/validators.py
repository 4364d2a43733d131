from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} مطلوب")
    return value.strip()


def require_email(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    local, _, domain = value.partition("@")
    if not local or not domain:
        raise ValidationError(f"{field_name} غير صالح")
    return value
