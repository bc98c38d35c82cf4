from __future__ import annotations

import math
from enum import Enum
from typing import TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_text(value, field_name: str) -> str:
    """Optional free-form text: None reads as "", anything but a string is rejected."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value


def require_non_empty(value: str, field_name: str) -> str:
    value = require_text(value, field_name)
    if not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def require_int_in_range(value, field_name: str, low: int, high: int) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if not number.is_integer():
        raise ValidationError(f"{field_name} must be a whole number")
    if number < low or number > high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return int(number)


def require_choice(value, enum_cls: type[E], field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def contains_ci(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test. An empty needle matches everything."""
    return (needle or "").lower() in (haystack or "").lower()
