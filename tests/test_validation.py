from __future__ import annotations

import pytest

from tagsmith.validation import AttributeValueError, int_like, matches, one_of
from tagsmith.values import Method


def test_one_of_accepts_members_values_and_none() -> None:
    one_of(Method.POST, Method, "method")
    one_of("get", Method, "method")
    one_of(None, Method, "method")


def test_one_of_error_names_value_attribute_and_allowed_set() -> None:
    with pytest.raises(AttributeValueError) as exc_info:
        one_of("put", Method, "method")
    err = exc_info.value
    assert isinstance(err, ValueError)
    assert err.value == "put"
    assert err.attribute == "method"
    message = str(err)
    assert "'put'" in message
    assert "'method'" in message
    assert "dialog, get, post" in message


def test_int_like_accepts_ints_and_integer_strings() -> None:
    int_like(3, "rows", minimum=1)
    int_like("-1", "tabindex", minimum=-1)
    int_like(None, "rows", minimum=1)


@pytest.mark.parametrize("value", [True, "1.5", "abc", 2.0])
def test_int_like_rejects_non_integers(value: object) -> None:
    with pytest.raises(AttributeValueError):
        int_like(value, "rows")


def test_int_like_range_message() -> None:
    with pytest.raises(AttributeValueError, match="value >= -1"):
        int_like(-2, "tabindex", minimum=-1)
    with pytest.raises(AttributeValueError, match="0 <= value <= 10"):
        int_like(11, "x", minimum=0, maximum=10)


def test_matches() -> None:
    matches("en-US", r"[a-z]{2}(-[A-Z]{2})?", "lang", "a language tag")
    with pytest.raises(AttributeValueError, match="a language tag"):
        matches("english", r"[a-z]{2}(-[A-Z]{2})?", "lang", "a language tag")
