"""Attribute setters shared by form controls.

Each mixin expects to be combined with :class:`tagsmith.base.BaseTag`.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, TypeVar

from .attributes import AttributeMap
from .html import element, encode
from .validation import AttributeValueError, allowed_values, int_like, one_of
from .values import (
    Autocapitalize,
    Autocorrect,
    ButtonCommand,
    Capture,
    Colorspace,
    Enctype,
    Method,
    PopoverTargetAction,
    Wrap,
)

if TYPE_CHECKING:
    from .base import BaseTag

_T = TypeVar("_T", bound="BaseTag")


def _on_off(value: Any) -> Any:
    if isinstance(value, bool):
        return "on" if value else "off"
    return value


class CanBeDisabled:
    def disabled(self: _T, value: bool | None) -> _T:
        return self.add_attribute("disabled", value)


class CanBeReadonly:
    def readonly(self: _T, value: bool | None) -> _T:
        return self.add_attribute("readonly", value)


class CanBeRequired:
    def required(self: _T, value: bool | None) -> _T:
        return self.add_attribute("required", value)


class CanBeMultiple:
    def multiple(self: _T, value: bool | None) -> _T:
        return self.add_attribute("multiple", value)


class HasName:
    def name(self: _T, value: Any) -> _T:
        return self.add_attribute("name", value)


class HasValue:
    def value(self: _T, value: Any) -> _T:
        return self.add_attribute("value", value)


class HasForm:
    def form(self: _T, value: Any) -> _T:
        return self.add_attribute("form", value)


class HasPlaceholder:
    def placeholder(self: _T, value: Any) -> _T:
        return self.add_attribute("placeholder", value)


class HasAutocomplete:
    def autocomplete(self: _T, value: Any) -> _T:
        value = _on_off(value)
        if isinstance(value, str) and not value.strip():
            raise AttributeValueError(value, "autocomplete", "'on', 'off' or autofill detail tokens")
        return self.add_attribute("autocomplete", value)


class HasAutocapitalize:
    def autocapitalize(self: _T, value: Any) -> _T:
        one_of(value, Autocapitalize, "autocapitalize")
        return self.add_attribute("autocapitalize", value)


class HasAutocorrect:
    def autocorrect(self: _T, value: Any) -> _T:
        value = _on_off(value)
        one_of(value, Autocorrect, "autocorrect")
        return self.add_attribute("autocorrect", value)


class HasLength:
    def maxlength(self: _T, value: Any) -> _T:
        int_like(value, "maxlength", minimum=0)
        return self.add_attribute("maxlength", value)

    def minlength(self: _T, value: Any) -> _T:
        int_like(value, "minlength", minimum=0)
        return self.add_attribute("minlength", value)


class HasRange:
    def min(self: _T, value: Any) -> _T:
        return self.add_attribute("min", value)

    def max(self: _T, value: Any) -> _T:
        return self.add_attribute("max", value)

    def step(self: _T, value: Any) -> _T:
        if value is not None and value != "any":
            try:
                number = float(value)
            except (TypeError, ValueError):
                number = 0.0
            if isinstance(value, bool) or number <= 0:
                raise AttributeValueError(value, "step", "'any' or a number > 0")
        return self.add_attribute("step", value)


class HasList:
    def list(self: _T, value: Any) -> _T:
        return self.add_attribute("list", value)


class HasPattern:
    def pattern(self: _T, value: Any) -> _T:
        return self.add_attribute("pattern", value)


class HasSize:
    def size(self: _T, value: Any) -> _T:
        int_like(value, "size", minimum=1)
        return self.add_attribute("size", value)


class HasDirname:
    def dirname(self: _T, value: Any) -> _T:
        return self.add_attribute("dirname", value)


class HasAccept:
    def accept(self: _T, value: Any) -> _T:
        if isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        return self.add_attribute("accept", value)


class HasCapture:
    def capture(self: _T, value: Any) -> _T:
        one_of(value, Capture, "capture")
        return self.add_attribute("capture", value)


class HasColor:
    def alpha(self: _T, value: bool | None) -> _T:
        return self.add_attribute("alpha", value)

    def colorspace(self: _T, value: Any) -> _T:
        one_of(value, Colorspace, "colorspace")
        return self.add_attribute("colorspace", value)


class HasTextAreaSize:
    def cols(self: _T, value: Any) -> _T:
        int_like(value, "cols", minimum=1)
        return self.add_attribute("cols", value)

    def rows(self: _T, value: Any) -> _T:
        int_like(value, "rows", minimum=1)
        return self.add_attribute("rows", value)

    def wrap(self: _T, value: Any) -> _T:
        one_of(value, Wrap, "wrap")
        return self.add_attribute("wrap", value)


class HasImage:
    def alt(self: _T, value: Any) -> _T:
        return self.add_attribute("alt", value)

    def src(self: _T, value: Any) -> _T:
        return self.add_attribute("src", value)

    def width(self: _T, value: Any) -> _T:
        int_like(value, "width", minimum=0)
        return self.add_attribute("width", value)

    def height(self: _T, value: Any) -> _T:
        int_like(value, "height", minimum=0)
        return self.add_attribute("height", value)


class HasTarget:
    def target(self: _T, value: Any) -> _T:
        return self.add_attribute("target", value)


class HasFormSubmission:
    """`<form>` submission attributes."""

    def action(self: _T, value: Any) -> _T:
        return self.add_attribute("action", value)

    def method(self: _T, value: Any) -> _T:
        one_of(value, Method, "method")
        return self.add_attribute("method", value)

    def enctype(self: _T, value: Any) -> _T:
        one_of(value, Enctype, "enctype")
        return self.add_attribute("enctype", value)

    def accept_charset(self: _T, value: Any) -> _T:
        return self.add_attribute("accept-charset", value)

    def novalidate(self: _T, value: bool | None) -> _T:
        return self.add_attribute("novalidate", value)

    def rel(self: _T, value: Any) -> _T:
        return self.add_attribute("rel", value)


class HasFormOverrides:
    """Submission overrides carried by submit buttons."""

    def formaction(self: _T, value: Any) -> _T:
        return self.add_attribute("formaction", value)

    def formenctype(self: _T, value: Any) -> _T:
        one_of(value, Enctype, "formenctype")
        return self.add_attribute("formenctype", value)

    def formmethod(self: _T, value: Any) -> _T:
        one_of(value, Method, "formmethod")
        return self.add_attribute("formmethod", value)

    def formnovalidate(self: _T, value: bool | None) -> _T:
        return self.add_attribute("formnovalidate", value)

    def formtarget(self: _T, value: Any) -> _T:
        return self.add_attribute("formtarget", value)


class HasCommand:
    def command(self: _T, value: Any) -> _T:
        # Custom commands are spelled with a leading "--".
        text = value.value if isinstance(value, Enum) else value
        if not (isinstance(text, str) and text.startswith("--")):
            try:
                one_of(value, ButtonCommand, "command")
            except AttributeValueError:
                allowed = ", ".join(allowed_values(ButtonCommand)) + ", or a custom '--command'"
                raise AttributeValueError(text, "command", allowed) from None
        return self.add_attribute("command", value)

    def commandfor(self: _T, value: Any) -> _T:
        return self.add_attribute("commandfor", value)


class HasPopoverTarget:
    def popovertarget(self: _T, value: Any) -> _T:
        return self.add_attribute("popovertarget", value)

    def popovertargetaction(self: _T, value: Any) -> _T:
        one_of(value, PopoverTargetAction, "popovertargetaction")
        return self.add_attribute("popovertargetaction", value)


class HasLabel:
    """Label rendered next to, or around, a choice control."""

    def _label_state(self) -> dict[str, Any]:
        return {
            "_label": "",
            "_label_attributes": AttributeMap(),
            "_label_tag": "label",
            "_not_label": False,
            "_enclosed_by_label": False,
        }

    def label(self: _T, content: Any) -> _T:
        return self._with(_label="" if content is None else str(content))

    def label_attributes(self: _T, values: Mapping[Any, Any]) -> _T:
        return self._with(_label_attributes=AttributeMap(values))

    def label_class(self: _T, value: Any, override: bool = False) -> _T:
        attributes = self._label_attributes.copy()
        if value is None:
            attributes.remove("class")
        else:
            attributes.add_class(value, override=override)
        return self._with(_label_attributes=attributes)

    def label_for(self: _T, value: Any) -> _T:
        attributes = self._label_attributes.copy()
        attributes.set("for", value)
        return self._with(_label_attributes=attributes)

    def label_tag(self: _T, tag: Any) -> _T:
        return self._with(_label_tag=tag)

    def not_label(self: _T) -> _T:
        return self._with(_not_label=True)

    def enclosed_by_label(self: _T, value: bool) -> _T:
        return self._with(_enclosed_by_label=bool(value))

    def has_label(self) -> bool:
        return not self._not_label and self._label != ""

    def render_label(self, element_id: Any, inner: str = "") -> str:
        """Render the label through the `Label` builder.

        Global `Label` defaults therefore reach choice labels too. With
        `inner`, the label wraps that markup before its text.
        """
        from .form import Label

        label = Label.tag(self._label_attributes)
        if "for" not in self._label_attributes and element_id is not None:
            label = label.for_(element_id)
        text = encode(self._label)
        if inner:
            text = f"\n{inner}\n{text}\n"
        if self._label_tag != "label":
            return element(self._label_tag, text, label.get_attributes())
        return label.html(text).run()


def _checked_token(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _scalar_text(value: Any) -> str | None:
    if value is None or isinstance(value, (Mapping, list, tuple, set)):
        return None
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def matches_selection(selection: Any, value: Any) -> bool:
    """Whether `value` is `selection`, or one of its items, by string form."""
    value_text = _scalar_text(value) or ""
    if isinstance(selection, (list, tuple, set, frozenset)):
        return any(_scalar_text(_checked_token(item)) == value_text for item in selection)
    return _scalar_text(_checked_token(selection)) == value_text


def array_name(name: Any) -> str:
    """Field name submitting every selected value, e.g. `tags` -> `tags[]`."""
    text = str(name)
    return text if text.endswith("[]") else f"{text}[]"


class HasCheckedState:
    """`checked` derived from a checked value compared against `value`."""

    def checked(self: _T, value: Any) -> _T:
        return self._with(_checked=value)

    def unchecked_value(self: _T, value: Any) -> _T:
        """Value submitted through a hidden input when the control is unchecked.

        The hidden input shares the control's `name` and is skipped while the
        control has no name. `None` turns it off.
        """
        return self._with(_unchecked_value=value)

    def apply_checked(self, attributes: AttributeMap) -> AttributeMap:
        value = attributes.get("value")
        if isinstance(value, bool):
            value = 1 if value else 0
            attributes.set("value", value)

        checked = self._checked
        if isinstance(checked, (list, tuple, set, frozenset)):
            checked = [_checked_token(item) for item in checked]
        else:
            checked = _checked_token(checked)

        if checked is None or checked is False:
            return attributes
        if checked is True:
            attributes.set("checked", True)
            return attributes

        attributes.set("checked", True if matches_selection(checked, value) else None)
        return attributes
