"""Process-wide default registry and provider plumbing.

Defaults registered here are the lowest user-visible layer of attribute
resolution. They are keyed by element class; registrations on a base class
apply to every subclass, and the most specific class wins on conflicts.
"""
from __future__ import annotations

import warnings
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .base import BaseTag


class AttributeWarning(UserWarning):
    """Warning emitted when a provider or configuration contributes unusable attributes."""


@runtime_checkable
class DefaultsProvider(Protocol):
    def get_defaults(self, tag: "BaseTag") -> Mapping[str, Any]: ...


@runtime_checkable
class ThemeProvider(Protocol):
    def apply(self, tag: "BaseTag", theme: str) -> Mapping[str, Any]: ...


_DEFAULTS: dict[type, dict[str, Any]] = {}


def set_defaults(cls: type, defaults: Mapping[str, Any] | None) -> None:
    """Register global defaults for `cls`; an empty mapping clears them."""
    if not defaults:
        _DEFAULTS.pop(cls, None)
        return
    _DEFAULTS[cls] = dict(defaults)


def get_defaults(cls: type) -> dict[str, Any]:
    """Return the merged defaults for `cls`, base classes first."""
    merged: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        registered = _DEFAULTS.get(klass)
        if registered:
            merged.update(registered)
    return merged


def clear_defaults() -> None:
    _DEFAULTS.clear()


def registered_classes() -> list[type]:
    return list(_DEFAULTS)


def resolve_provider(provider: Any, protocol: type) -> Any:
    """Instantiate a provider given as a class; pass instances through."""
    instance = provider() if isinstance(provider, type) else provider
    if not isinstance(instance, protocol):
        raise TypeError(
            f"{type(instance).__name__} does not implement {protocol.__name__}"
        )
    return instance


def checked_mapping(value: Any, source: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return value
    warnings.warn(
        f"{source} returned {type(value).__name__}; expected a mapping of attributes",
        AttributeWarning,
        stacklevel=3,
    )
    return {}
