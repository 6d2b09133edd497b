from __future__ import annotations

from typing import Any, Mapping, TypeVar

from .attributes import AttributeMap
from .base import BaseBlock, BaseInline, BaseTag
from .html import element, encode
from .mixins import (
    CanBeDisabled,
    CanBeMultiple,
    CanBeReadonly,
    CanBeRequired,
    HasAutocapitalize,
    HasAutocomplete,
    HasAutocorrect,
    HasCommand,
    HasDirname,
    HasForm,
    HasFormOverrides,
    HasFormSubmission,
    HasLength,
    HasName,
    HasPlaceholder,
    HasPopoverTarget,
    HasSize,
    HasTarget,
    HasTextAreaSize,
    HasValue,
    array_name,
    matches_selection,
)
from .validation import AttributeValueError, one_of
from .values import ButtonType


_T = TypeVar("_T")


class Form(
    HasFormSubmission,
    HasAutocomplete,
    HasAutocapitalize,
    HasName,
    HasTarget,
    BaseBlock,
):
    """`<form>` container."""

    tag_name = "form"


class Button(
    CanBeDisabled,
    HasCommand,
    HasForm,
    HasFormOverrides,
    HasName,
    HasPopoverTarget,
    HasValue,
    BaseInline,
):
    tag_name = "button"

    def type(self: _T, value: Any) -> _T:
        one_of(value, ButtonType, "type")
        return self.add_attribute("type", value)

    def submit(self: _T) -> _T:
        return self.type(ButtonType.SUBMIT)

    def reset(self: _T) -> _T:
        return self.type(ButtonType.RESET)

    def button(self: _T) -> _T:
        return self.type(ButtonType.BUTTON)


class TextArea(
    CanBeDisabled,
    CanBeReadonly,
    CanBeRequired,
    HasAutocapitalize,
    HasAutocomplete,
    HasAutocorrect,
    HasDirname,
    HasForm,
    HasLength,
    HasName,
    HasPlaceholder,
    HasTextAreaSize,
    BaseBlock,
):
    """Multi-line text control; its content is the initial value."""

    tag_name = "textarea"

    def value(self: _T, value: Any) -> _T:
        return self.content("" if value is None else value)


class Label(HasForm, BaseInline):
    tag_name = "label"

    def for_(self: _T, value: Any) -> _T:
        return self.add_attribute("for", value)


class Select(
    CanBeDisabled,
    CanBeMultiple,
    CanBeRequired,
    HasAutocomplete,
    HasForm,
    HasName,
    HasSize,
    BaseTag,
):
    """`<select>` built from a mapping of option values to option text.

    A nested mapping becomes an `<optgroup>` labelled with its key. Options
    whose value matches :meth:`value` are marked `selected`; values compare
    by their string form, as checkbox `checked` values do. With `multiple`
    set the value must be a list and the field name gains a `[]` suffix.
    """

    tag_name = "select"

    def __init__(self, attributes: Mapping[Any, Any] | None = None, **kwargs: Any) -> None:
        super().__init__(attributes, **kwargs)
        self.__dict__.update(
            _items={},
            _groups={},
            _items_attributes={},
            _prompt=None,
            _prompt_value=None,
            _selected=None,
        )

    def items(self: _T, values: Mapping[Any, Any]) -> _T:
        return self._with(_items=dict(values))

    def groups(self: _T, values: Mapping[Any, Mapping[Any, Any]]) -> _T:
        """Extra `<optgroup>` attributes keyed by the group's key in :meth:`items`."""
        return self._with(_groups={key: AttributeMap(attrs) for key, attrs in values.items()})

    def items_attributes(self: _T, values: Mapping[Any, Mapping[Any, Any]]) -> _T:
        return self._with(
            _items_attributes={key: AttributeMap(attrs) for key, attrs in values.items()}
        )

    def prompt(self: _T, content: Any, value: Any = None) -> _T:
        """First option, shown before any choice is made; `None` removes it."""
        return self._with(_prompt=content, _prompt_value=value)

    def value(self: _T, value: Any) -> _T:
        if isinstance(value, Mapping):
            raise AttributeValueError(value, "value", "an option value or a list of option values")
        return self._with(_selected=value)

    def finalize_attributes(self, attributes: AttributeMap) -> AttributeMap:
        attributes = super().finalize_attributes(attributes)
        attributes.remove("value")
        name = attributes.get("name")
        if attributes.get("multiple") and name is not None:
            attributes.set("name", array_name(name))
        return attributes

    def render_option(self, value: Any, content: Any) -> str:
        attributes = AttributeMap(self._items_attributes.get(value))
        attributes.set("value", value)
        if self._selected is not None and matches_selection(self._selected, value):
            attributes.set("selected", True)
        return element("option", encode(content), attributes)

    def render_options(self) -> str:
        options = []
        if self._prompt is not None:
            options.append(element("option", encode(self._prompt), {"value": self._prompt_value}))
        for value, content in self._items.items():
            if isinstance(content, Mapping):
                group = AttributeMap({"label": value}).merge(self._groups.get(value, {}))
                grouped = "\n".join(self.render_option(v, c) for v, c in content.items())
                options.append(element("optgroup", grouped, group))
            else:
                options.append(self.render_option(value, content))
        return "\n".join(options)

    def run(self) -> str:
        attributes = self.get_attributes()
        selected = self._selected
        if attributes.get("multiple") and selected is not None:
            if not isinstance(selected, (list, tuple, set, frozenset)):
                raise AttributeValueError(
                    selected, "value", "a list of option values when multiple is set"
                )
        options = self.render_options()
        return self.build_element(f"\n{options}\n" if options else "", attributes=attributes)
