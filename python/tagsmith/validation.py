from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable


class AttributeValueError(ValueError):
    """Raised when an attribute setter receives a value outside its allowed set or range."""

    def __init__(self, value: Any, attribute: str, allowed: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for attribute {attribute!r}. Allowed: {allowed}."
        )
        self.value = value
        self.attribute = attribute
        self.allowed = allowed


def enum_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def allowed_values(allowed: Iterable[Any]) -> list[str]:
    return [str(enum_value(item)) for item in allowed]


def one_of(value: Any, allowed: Iterable[Any], attribute: str) -> None:
    if value is None:
        return
    choices = allowed_values(allowed)
    text = enum_value(value)
    if not isinstance(text, str) or text not in choices:
        raise AttributeValueError(text, attribute, ", ".join(choices))


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and re.fullmatch(r"\s*-?\d+\s*", value):
        return int(value)
    return None


def _range_text(minimum: int | None, maximum: int | None) -> str:
    if minimum is not None and maximum is not None:
        return f"{minimum} <= value <= {maximum}"
    if minimum is not None:
        return f"value >= {minimum}"
    if maximum is not None:
        return f"value <= {maximum}"
    return "an integer"


def int_like(
    value: Any,
    attribute: str,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> None:
    if value is None:
        return
    number = _as_int(value)
    if number is None:
        raise AttributeValueError(value, attribute, _range_text(minimum, maximum))
    if minimum is not None and number < minimum:
        raise AttributeValueError(value, attribute, _range_text(minimum, maximum))
    if maximum is not None and number > maximum:
        raise AttributeValueError(value, attribute, _range_text(minimum, maximum))


def matches(value: Any, pattern: str | re.Pattern[str], attribute: str, description: str) -> None:
    if value is None:
        return
    text = str(enum_value(value))
    if re.fullmatch(pattern, text) is None:
        raise AttributeValueError(text, attribute, description)
