from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from html import escape
from typing import Any

from .style import Style, merge_style_values, style_to_css


# Rendered ahead of every other attribute, in this order.
PRIORITY_ATTRIBUTES = ("class", "id", "name", "type")


def normalize_name(name: Any) -> str:
    if isinstance(name, Enum):
        name = name.value
    return str(name).strip().lower()


def normalize_keyword(name: str) -> str:
    """Map a Python keyword argument to its attribute name."""
    if name == "class_name":
        return "class"
    return name.rstrip("_").replace("_", "-").lower()


def normalize_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def class_tokens(value: Any) -> list[str]:
    if value is None or value is False:
        return []
    value = normalize_value(value)
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Iterable):
        tokens: list[str] = []
        for part in value:
            tokens.extend(class_tokens(part))
        return tokens
    return str(value).split()


def merge_classes(*parts: Any) -> str:
    seen: dict[str, None] = {}
    for part in parts:
        for token in class_tokens(part):
            seen.setdefault(token, None)
    return " ".join(seen)


def _is_flag_free(name: str) -> bool:
    return name.startswith("aria-") or name.startswith("data-")


class AttributeMap(Mapping[str, Any]):
    """Insertion-ordered attribute store with normalized keys."""

    def __init__(self, initial: Mapping[Any, Any] | None = None, **kwargs: Any) -> None:
        self._data: dict[str, Any] = {}
        if initial:
            self.merge(initial)
        for key, value in kwargs.items():
            self.set(normalize_keyword(key), value)

    def __getitem__(self, name: Any) -> Any:
        return self._data[normalize_name(name)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, name: object) -> bool:
        return normalize_name(name) in self._data

    def __repr__(self) -> str:
        return f"AttributeMap({self._data!r})"

    def get(self, name: Any, default: Any = None) -> Any:
        return self._data.get(normalize_name(name), default)

    def copy(self) -> "AttributeMap":
        new = AttributeMap()
        for key, value in self._data.items():
            new._data[key] = value.copy() if isinstance(value, Style) else value
        return new

    def set(self, name: Any, value: Any) -> "AttributeMap":
        key = normalize_name(name)
        if not key:
            raise ValueError("Attribute name must not be empty.")
        value = normalize_value(value)
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = value
        return self

    def remove(self, name: Any) -> "AttributeMap":
        self._data.pop(normalize_name(name), None)
        return self

    def add_class(self, value: Any, *, override: bool = False) -> "AttributeMap":
        if override:
            merged = merge_classes(value)
        else:
            merged = merge_classes(self._data.get("class"), value)
        if merged:
            self._data["class"] = merged
        else:
            self._data.pop("class", None)
        return self

    def merge_style(self, value: Any) -> "AttributeMap":
        merged = merge_style_values(self._data.get("style"), value)
        if merged is None or merged == "" or (isinstance(merged, Style) and not merged):
            self._data.pop("style", None)
        else:
            self._data["style"] = merged
        return self

    def merge(self, other: Mapping[Any, Any], *, additive: bool = False) -> "AttributeMap":
        """Merge `other` into this map.

        With `additive=True`, `class` tokens accumulate and `style` declarations
        merge per property; otherwise every key in `other` replaces ours.
        """
        for raw_key, value in other.items():
            key = normalize_name(raw_key)
            if additive and key == "class":
                self.add_class(value)
            elif additive and key == "style":
                self.merge_style(value)
            else:
                self.set(key, value)
        return self

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


def _render_value(name: str, value: Any) -> str | None:
    if name == "class":
        return merge_classes(value) or None
    if name == "style":
        return style_to_css(value) or None
    if _is_flag_free(name):
        if value is True:
            return "true"
        if value is False:
            return "false"
        if name.startswith("data-") and isinstance(value, (Mapping, list, tuple)):
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    value = normalize_value(value)
    if isinstance(value, (list, tuple)):
        return " ".join(str(normalize_value(part)) for part in value if part is not None)
    return str(value)


def ordered_items(attributes: Mapping[str, Any]) -> list[tuple[str, Any]]:
    items = [(normalize_name(k), v) for k, v in attributes.items()]
    head = [item for name in PRIORITY_ATTRIBUTES for item in items if item[0] == name]
    tail = [item for item in items if item[0] not in PRIORITY_ATTRIBUTES]
    return head + tail


def render_attributes(attributes: Mapping[str, Any] | None) -> str:
    if not attributes:
        return ""
    parts: list[str] = []
    for name, value in ordered_items(attributes):
        if value is None:
            continue
        if not _is_flag_free(name):
            if value is False:
                continue
            if value is True:
                parts.append(name)
                continue
        rendered = _render_value(name, value)
        if rendered is None:
            continue
        parts.append(f'{name}="{escape(rendered, quote=True)}"')
    return (" " + " ".join(parts)) if parts else ""
