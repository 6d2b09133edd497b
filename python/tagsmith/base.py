"""Immutable element builders.

Every setter returns a new instance; the receiver is never modified. The
attributes an element renders with are resolved on demand from five layers,
lowest priority first:

1. global defaults registered in :mod:`tagsmith.factory`,
2. default providers added with :meth:`BaseTag.add_default_provider`,
3. theme providers added with :meth:`BaseTag.add_theme_provider`,
4. attributes passed to :meth:`BaseTag.tag`,
5. fluent setter calls.

Element built-ins such as the ``type`` of an input sit below all of them.
``class`` tokens and ``style`` declarations merge across layers; any other
key is replaced by the higher layer.
"""
from __future__ import annotations

import copy
import itertools
import re
from dataclasses import FrozenInstanceError
from enum import Enum
from typing import Any, ClassVar, Mapping, TypeVar

from . import factory
from .attributes import AttributeMap, normalize_keyword, normalize_name
from .html import begin_tag, element, encode, end_tag
from .template import render_template
from .validation import int_like, matches, one_of
from .values import ContentEditable, Direction, Role, Translate


_T = TypeVar("_T", bound="BaseTag")

_ID_SEQUENCE = itertools.count(1)

LANG_RE = re.compile(r"[A-Za-z]{2,3}(-[A-Za-z0-9]{1,8})*")


def generate_id(prefix: str) -> str:
    return f"{prefix}{next(_ID_SEQUENCE)}"


def _bool_token(value: Any, attribute: str) -> Any:
    if value is None or isinstance(value, bool):
        return None if value is None else ("true" if value else "false")
    one_of(value, ("true", "false"), attribute)
    return value


def _prefixed(prefix: str, name: Any) -> str:
    key = normalize_name(name)
    return key if key.startswith(prefix) else f"{prefix}{key}"


class BaseTag:
    tag_name: ClassVar[str] = ""
    default_template: ClassVar[str] = "{prefix}\n{tag}\n{suffix}"

    def __init__(self, attributes: Mapping[Any, Any] | None = None, **kwargs: Any) -> None:
        user = AttributeMap(attributes)
        for key, value in kwargs.items():
            user.set(normalize_keyword(key), value)
        self.__dict__.update(
            _builtin=AttributeMap(self.load_default()),
            _attributes=user,
            _removed=frozenset(),
            _default_providers=(),
            _themes=(),
            _template=None,
            _prefix="",
            _prefix_tag=None,
            _prefix_attributes=AttributeMap(),
            _suffix="",
            _suffix_tag=None,
            _suffix_attributes=AttributeMap(),
            _aria_describedby_suffix="",
            _resolving=False,
        )

    @classmethod
    def tag(cls: type[_T], attributes: Mapping[Any, Any] | None = None, **kwargs: Any) -> _T:
        return cls(attributes, **kwargs)

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field {name!r}")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {name!r}")

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes.to_dict()!r})"

    def _with(self: _T, **changes: Any) -> _T:
        new = copy.copy(self)
        new.__dict__.update(changes)
        return new

    def load_default(self) -> dict[str, Any]:
        """Built-in attributes of the element, below every configurable layer."""
        return {}

    # Resolution.

    def _static_attributes(self) -> AttributeMap:
        resolved = self._builtin.copy()
        resolved.merge(factory.get_defaults(type(self)), additive=True)
        return resolved

    def _apply_user_layer(self, resolved: AttributeMap) -> AttributeMap:
        for name in self._removed:
            resolved.remove(name)
        return resolved.merge(self._attributes, additive=True)

    def get_attributes(self) -> AttributeMap:
        """Resolve every layer into the attribute map the element renders with.

        Providers asking about the tag they are contributing to see the
        built-in, global and explicit layers only.
        """
        if self._resolving:
            return self._apply_user_layer(self._static_attributes())
        return self.finalize_attributes(self.resolve_layers())

    def resolve_layers(self) -> AttributeMap:
        """Merge every layer without the element-specific finishing step."""
        resolved = self._static_attributes()
        self.__dict__["_resolving"] = True
        try:
            for provider in self._default_providers:
                defaults = provider.get_defaults(self)
                resolved.merge(
                    factory.checked_mapping(defaults, type(provider).__name__), additive=True
                )
            for theme, provider in self._themes:
                fragment = provider.apply(self, theme)
                resolved.merge(
                    factory.checked_mapping(fragment, type(provider).__name__), additive=True
                )
        finally:
            self.__dict__["_resolving"] = False
        return self._apply_user_layer(resolved)

    def get_attribute(self, name: Any, default: Any = None) -> Any:
        return self.get_attributes().get(name, default)

    def finalize_attributes(self, attributes: AttributeMap) -> AttributeMap:
        described = attributes.get("aria-describedby")
        if described is True or described == "true":
            element_id = attributes.get("id")
            suffix = self._aria_describedby_suffix or "help"
            attributes.set(
                "aria-describedby",
                f"{element_id}-{suffix}" if element_id is not None else None,
            )
        return attributes

    # Generic attribute access.

    def add_attribute(self: _T, name: Any, value: Any) -> _T:
        key = normalize_name(name)
        attributes = self._attributes.copy()
        attributes.set(key, value)
        if value is None:
            return self._with(_attributes=attributes, _removed=self._removed | {key})
        return self._with(_attributes=attributes, _removed=self._removed - {key})

    def attributes(self: _T, values: Mapping[Any, Any]) -> _T:
        new = self
        for name, value in values.items():
            if normalize_name(name) == "class":
                new = new.class_name(value)
            else:
                new = new.add_attribute(name, value)
        return new

    def remove_attribute(self: _T, name: Any) -> _T:
        return self.add_attribute(name, None)

    def add_data_attribute(self: _T, name: Any, value: Any) -> _T:
        return self.add_attribute(_prefixed("data-", name), value)

    def data_attributes(self: _T, values: Mapping[Any, Any]) -> _T:
        new = self
        for name, value in values.items():
            new = new.add_data_attribute(name, value)
        return new

    def add_aria_attribute(self: _T, name: Any, value: Any) -> _T:
        return self.add_attribute(_prefixed("aria-", name), value)

    def aria_attributes(self: _T, values: Mapping[Any, Any]) -> _T:
        new = self
        for name, value in values.items():
            new = new.add_aria_attribute(name, value)
        return new

    def aria_describedby_suffix(self: _T, value: str) -> _T:
        return self._with(_aria_describedby_suffix=value)

    def add_event(self: _T, event: Any, handler: Any) -> _T:
        name = normalize_name(event)
        if name.startswith("on"):
            name = name[2:]
        return self.add_attribute(f"on{name}", handler)

    def events(self: _T, handlers: Mapping[Any, Any]) -> _T:
        new = self
        for event, handler in handlers.items():
            new = new.add_event(event, handler)
        return new

    # Global attributes.

    def id(self: _T, value: Any) -> _T:
        return self.add_attribute("id", value)

    def class_name(self: _T, value: Any, override: bool = False) -> _T:
        attributes = self._attributes.copy()
        if value is None:
            attributes.remove("class")
            removed = self._removed | {"class"} if override else self._removed
            return self._with(_attributes=attributes, _removed=removed)
        attributes.add_class(value, override=override)
        removed = self._removed | {"class"} if override else self._removed
        return self._with(_attributes=attributes, _removed=removed)

    def title(self: _T, value: Any) -> _T:
        return self.add_attribute("title", value)

    def lang(self: _T, value: Any) -> _T:
        matches(value, LANG_RE, "lang", "a BCP 47 language tag such as 'en' or 'en-US'")
        return self.add_attribute("lang", value)

    def dir(self: _T, value: Any) -> _T:
        one_of(value, Direction, "dir")
        return self.add_attribute("dir", value)

    def style(self: _T, value: Any) -> _T:
        attributes = self._attributes.copy()
        if value is None:
            attributes.remove("style")
            return self._with(_attributes=attributes, _removed=self._removed | {"style"})
        attributes.merge_style(value)
        return self._with(_attributes=attributes)

    def hidden(self: _T, value: bool | None) -> _T:
        return self.add_attribute("hidden", value)

    def tabindex(self: _T, value: Any) -> _T:
        int_like(value, "tabindex", minimum=-1)
        return self.add_attribute("tabindex", value)

    def role(self: _T, value: Any) -> _T:
        one_of(value, Role, "role")
        return self.add_attribute("role", value)

    def translate(self: _T, value: Any) -> _T:
        if isinstance(value, bool):
            value = Translate.YES if value else Translate.NO
        one_of(value, Translate, "translate")
        return self.add_attribute("translate", value)

    def accesskey(self: _T, value: Any) -> _T:
        return self.add_attribute("accesskey", value)

    def autofocus(self: _T, value: bool | None) -> _T:
        return self.add_attribute("autofocus", value)

    def contenteditable(self: _T, value: Any) -> _T:
        if isinstance(value, bool):
            value = ContentEditable.TRUE if value else ContentEditable.FALSE
        one_of(value, ContentEditable, "contenteditable")
        return self.add_attribute("contenteditable", value)

    def draggable(self: _T, value: Any) -> _T:
        return self.add_attribute("draggable", _bool_token(value, "draggable"))

    def spellcheck(self: _T, value: Any) -> _T:
        return self.add_attribute("spellcheck", _bool_token(value, "spellcheck"))

    # Providers.

    def add_default_provider(self: _T, provider: Any) -> _T:
        instance = factory.resolve_provider(provider, factory.DefaultsProvider)
        return self._with(_default_providers=self._default_providers + (instance,))

    def add_theme_provider(self: _T, theme: str | Enum, provider: Any) -> _T:
        instance = factory.resolve_provider(provider, factory.ThemeProvider)
        name = theme.value if isinstance(theme, Enum) else str(theme)
        return self._with(_themes=self._themes + ((name, instance),))

    # Structure.

    def template(self: _T, value: str) -> _T:
        return self._with(_template=value)

    def get_template(self) -> str:
        return self.default_template if self._template is None else self._template

    def prefix(self: _T, *values: Any) -> _T:
        return self._with(_prefix="".join(str(v) for v in values))

    def prefix_tag(self: _T, tag: Any) -> _T:
        return self._with(_prefix_tag=tag)

    def prefix_attributes(self: _T, values: Mapping[Any, Any]) -> _T:
        return self._with(_prefix_attributes=AttributeMap(values))

    def suffix(self: _T, *values: Any) -> _T:
        return self._with(_suffix="".join(str(v) for v in values))

    def suffix_tag(self: _T, tag: Any) -> _T:
        return self._with(_suffix_tag=tag)

    def suffix_attributes(self: _T, values: Mapping[Any, Any]) -> _T:
        return self._with(_suffix_attributes=AttributeMap(values))

    # Rendering.

    def render(self, *, a11y_mode: str | None = None) -> str:
        if a11y_mode is not None:
            from .aria import A11yContract

            A11yContract().validate(self, mode=a11y_mode)
        return self.run()

    def run(self) -> str:
        return self.build_element()

    def build_element(
        self,
        content: str = "",
        tokens: Mapping[str, str] | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> str:
        resolved = self.get_attributes() if attributes is None else attributes
        values = {
            "{prefix}": _wrap(self._prefix_tag, self._prefix, self._prefix_attributes),
            "{tag}": element(self.tag_name, content, resolved),
            "{suffix}": _wrap(self._suffix_tag, self._suffix, self._suffix_attributes),
        }
        if tokens:
            values.update(tokens)
        return render_template(self.get_template(), values)


def _wrap(tag: Any, content: str, attributes: Mapping[str, Any]) -> str:
    if not content or tag is None or tag is False:
        return content
    return element(tag, content, attributes)


class _HasContent(BaseTag):
    def __init__(self, attributes: Mapping[Any, Any] | None = None, **kwargs: Any) -> None:
        super().__init__(attributes, **kwargs)
        self.__dict__["_content"] = ""

    def content(self: _T, *values: Any) -> _T:
        """Replace the content with the HTML-escaped text of `values`."""
        return self._with(_content="".join(encode(v) for v in values))

    def html(self: _T, *values: Any) -> _T:
        """Replace the content with `values` inserted verbatim."""
        return self._with(_content="".join(str(v) for v in values))

    def get_content(self) -> str:
        return self._content

    def run(self) -> str:
        return self.build_element(self._content)


class BaseBlock(_HasContent):
    """Block-level element; content sits on its own lines."""

    def begin(self) -> str:
        return begin_tag(self.tag_name, self.get_attributes())

    def end(self) -> str:
        return end_tag(self.tag_name)


class BaseInline(_HasContent):
    """Inline element; content is rendered between the tags on one line."""


class BaseInput(BaseTag):
    """Void `<input>` element."""

    tag_name = "input"
    input_type: ClassVar[str | None] = None
    auto_id: ClassVar[bool] = True

    def load_default(self) -> dict[str, Any]:
        defaults: dict[str, Any] = {}
        if self.auto_id:
            defaults["id"] = generate_id(f"{type(self).__name__.lower()}-")
        if self.input_type is not None:
            defaults["type"] = self.input_type
        return defaults

