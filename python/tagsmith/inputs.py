from __future__ import annotations

from typing import Any, ClassVar, Mapping

from .attributes import AttributeMap
from .base import BaseInput, BaseTag, generate_id
from .html import element
from .mixins import (
    CanBeDisabled,
    CanBeMultiple,
    CanBeReadonly,
    CanBeRequired,
    HasAccept,
    HasAutocomplete,
    HasCapture,
    HasCheckedState,
    HasColor,
    HasDirname,
    HasForm,
    HasFormOverrides,
    HasImage,
    HasLabel,
    HasLength,
    HasList,
    HasName,
    HasPattern,
    HasPlaceholder,
    HasPopoverTarget,
    HasRange,
    HasSize,
    HasValue,
    array_name,
)
from .validation import AttributeValueError
from .values import InputType


class _Control(CanBeDisabled, HasForm, HasName, HasValue, BaseInput):
    """Named input taking part in form submission."""


class _TextField(
    CanBeReadonly,
    CanBeRequired,
    HasAutocomplete,
    HasLength,
    HasList,
    HasPattern,
    HasPlaceholder,
    HasSize,
    _Control,
):
    pass


class _TemporalField(CanBeReadonly, CanBeRequired, HasAutocomplete, HasList, HasRange, _Control):
    pass


class InputText(HasDirname, _TextField):
    input_type = InputType.TEXT.value


class InputSearch(HasDirname, _TextField):
    input_type = InputType.SEARCH.value


class InputEmail(CanBeMultiple, _TextField):
    input_type = InputType.EMAIL.value


class InputPassword(_TextField):
    input_type = InputType.PASSWORD.value


class InputTel(_TextField):
    input_type = InputType.TEL.value


class InputUrl(_TextField):
    input_type = InputType.URL.value


class InputNumber(HasPlaceholder, _TemporalField):
    input_type = InputType.NUMBER.value


class InputRange(HasAutocomplete, HasList, HasRange, _Control):
    input_type = InputType.RANGE.value


class InputDate(_TemporalField):
    input_type = InputType.DATE.value


class InputDateTimeLocal(_TemporalField):
    input_type = InputType.DATETIME_LOCAL.value


class InputMonth(_TemporalField):
    input_type = InputType.MONTH.value


class InputWeek(_TemporalField):
    input_type = InputType.WEEK.value


class InputTime(_TemporalField):
    input_type = InputType.TIME.value


class InputColor(HasAutocomplete, HasColor, HasList, _Control):
    input_type = InputType.COLOR.value


class InputHidden(HasAutocomplete, HasForm, HasName, HasValue, BaseInput):
    input_type = InputType.HIDDEN.value


class InputFile(CanBeMultiple, CanBeRequired, HasAccept, HasCapture, _Control):
    """File picker.

    A file input never renders `value`; with `multiple` set the field name
    gains a `[]` suffix so every selected file is submitted.
    """

    input_type = InputType.FILE.value
    auto_id = False

    def finalize_attributes(self, attributes: AttributeMap) -> AttributeMap:
        attributes = super().finalize_attributes(attributes)
        attributes.remove("value")
        name = attributes.get("name")
        if attributes.get("multiple") and name is not None:
            attributes.set("name", array_name(name))
        return attributes


class InputImage(HasFormOverrides, HasImage, HasPopoverTarget, _Control):
    input_type = InputType.IMAGE.value
    auto_id = False


class InputSubmit(HasFormOverrides, HasPopoverTarget, _Control):
    input_type = InputType.SUBMIT.value
    auto_id = False


class InputReset(HasPopoverTarget, _Control):
    input_type = InputType.RESET.value


def hidden_fallback(name: Any, value: Any) -> str:
    """Hidden input submitting `value` for an unchecked control named `name`."""
    if value is None or name is None:
        return ""
    if isinstance(value, bool):
        value = 1 if value else 0
    return InputHidden.tag().id(None).name(name).value(value).run()


class BaseChoice(HasLabel, HasCheckedState, CanBeRequired, _Control):
    """Checkbox or radio button with an optional label and unchecked fallback."""

    default_template = "{prefix}\n{unchecked}\n{tag}\n{label}\n{suffix}"

    def __init__(self, attributes: Mapping[Any, Any] | None = None, **kwargs: Any) -> None:
        super().__init__(attributes, **kwargs)
        self.__dict__.update(self._label_state(), _checked=None, _unchecked_value=None)

    def finalize_attributes(self, attributes: AttributeMap) -> AttributeMap:
        return self.apply_checked(super().finalize_attributes(attributes))

    def render_unchecked(self, attributes: AttributeMap) -> str:
        return hidden_fallback(attributes.get("name"), self._unchecked_value)

    def run(self) -> str:
        attributes = self.get_attributes()
        control = element(self.tag_name, "", attributes)
        label = ""
        if self.has_label():
            if self._enclosed_by_label:
                control = self.render_label(attributes.get("id"), inner=control)
            else:
                label = self.render_label(attributes.get("id"))
        tokens = {
            "{unchecked}": self.render_unchecked(attributes),
            "{tag}": control,
            "{label}": label,
        }
        return self.build_element(tokens=tokens, attributes=attributes)


class InputCheckbox(BaseChoice):
    input_type = InputType.CHECKBOX.value


class InputRadio(BaseChoice):
    input_type = InputType.RADIO.value


class _ChoiceList(HasLabel, HasCheckedState, CanBeDisabled, CanBeRequired, HasForm, HasName, BaseTag):
    """Group of checkboxes or radio buttons submitted under one name.

    Attributes set on the list are copied onto every item, except `autofocus`
    and `tabindex`, which move to the container. Items get the ids
    `<list id>-w<index>` and the list's `checked` value.
    """

    tag_name = "div"
    default_template = "{prefix}\n{label}\n{tag}\n{suffix}"
    choice_class: ClassVar[type[BaseChoice]] = BaseChoice
    array_field: ClassVar[bool] = False

    def __init__(self, attributes: Mapping[Any, Any] | None = None, **kwargs: Any) -> None:
        super().__init__(attributes, **kwargs)
        self.__dict__.update(
            self._label_state(),
            _checked=None,
            _unchecked_value=None,
            _items=(),
            _container_tag="div",
            _container_attributes=AttributeMap(),
            _label_item_class=None,
            _label_item_override=False,
        )

    def load_default(self) -> dict[str, Any]:
        return {"id": generate_id(f"{type(self).__name__.lower()}-")}

    def items(self, *choices: BaseChoice):
        for choice in choices:
            if not isinstance(choice, self.choice_class):
                raise TypeError(
                    f"{type(self).__name__} items must be {self.choice_class.__name__} builders, "
                    f"got {type(choice).__name__}"
                )
        return self._with(_items=tuple(choices))

    def container_tag(self, tag: Any = "div"):
        """Element wrapping the items; `None` or `False` renders them bare."""
        return self._with(_container_tag=tag)

    def container_attributes(self, values: Mapping[Any, Any]):
        return self._with(_container_attributes=AttributeMap(values))

    def container_class(self, value: Any, override: bool = False):
        attributes = self._container_attributes.copy()
        attributes.add_class(value, override=override)
        return self._with(_container_attributes=attributes)

    def label_item_class(self, value: Any, override: bool = False):
        return self._with(_label_item_class=value, _label_item_override=override)

    def render_items(self, attributes: AttributeMap) -> str:
        list_id = attributes.get("id")
        name = attributes.get("name")
        if name is not None and self.array_field:
            name = array_name(name)
        shared = attributes.to_dict()
        for key in ("autofocus", "tabindex", "id", "name", "value"):
            shared.pop(key, None)

        parts = [hidden_fallback(name, self._unchecked_value)]
        for index, item in enumerate(self._items):
            choice = (
                item.attributes(shared)
                .id(None if list_id is None else f"{list_id}-w{index}")
                .name(name)
                .enclosed_by_label(self._enclosed_by_label)
            )
            if self._checked is not None:
                choice = choice.checked(self._checked)
            if self._label_item_class is not None:
                choice = choice.label_class(self._label_item_class, override=self._label_item_override)
            parts.append(choice.render())
        return "\n".join(part for part in parts if part)

    def run(self) -> str:
        attributes = self.get_attributes()
        body = self.render_items(attributes)
        if self._container_tag is None or self._container_tag is False:
            tag = body
        else:
            container = self._container_attributes.copy()
            for key in ("autofocus", "tabindex"):
                if key in attributes:
                    container.set(key, attributes.get(key))
            tag = element(self._container_tag, body, container)
        label = self.render_label(None) if self.has_label() else ""
        return self.build_element(tokens={"{label}": label, "{tag}": tag}, attributes=attributes)


class CheckboxList(_ChoiceList):
    """Checkboxes sharing one `name[]` field."""

    choice_class = InputCheckbox
    array_field = True

    def checked(self, value: Any):
        if value is not None and not isinstance(value, (list, tuple, set, frozenset)):
            raise AttributeValueError(value, "checked", "a list of values or None")
        return super().checked(value)


class RadioList(_ChoiceList):
    choice_class = InputRadio

    def checked(self, value: Any):
        if isinstance(value, (Mapping, list, tuple, set, frozenset)):
            raise AttributeValueError(value, "checked", "a single value or None")
        return super().checked(value)
