from __future__ import annotations

from datetime import timedelta
from typing import TypeVar

from ..core.exceptions import ValidationError

T = TypeVar("T")


def require_not_none(value: T, field_name: str) -> T:
    if value is None:
        raise TypeError(f"{field_name} must not be None")
    return value


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be blank")
    return value.strip()


def require_non_negative(value: timedelta, field_name: str) -> timedelta:
    require_not_none(value, field_name)
    if value < timedelta(0):
        raise ValidationError(f"{field_name} must not be negative")
    return value
