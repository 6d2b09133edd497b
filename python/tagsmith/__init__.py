# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""Fluent, immutable builders for HTML form markup.

Every builder method returns a new instance. Attributes are resolved from
global defaults, default providers, theme providers, constructor attributes
and setter calls, in that order of increasing priority.
"""
from .aria import A11yContract, A11yId, A11yValidationError, A11yWarning, AriaAttrs
from .attributes import AttributeMap, normalize_keyword, render_attributes
from .base import BaseBlock, BaseInline, BaseInput, BaseTag
from .config import Config, ConfigError, ThemeMap
from .factory import (
    AttributeWarning,
    DefaultsProvider,
    ThemeProvider,
    clear_defaults,
    get_defaults,
    set_defaults,
)
from .form import Button, Form, Label, Select, TextArea
from .html import begin_tag, element, end_tag
from .inputs import (
    BaseChoice,
    CheckboxList,
    InputCheckbox,
    InputColor,
    InputDate,
    InputDateTimeLocal,
    InputEmail,
    InputFile,
    InputHidden,
    InputImage,
    InputMonth,
    InputNumber,
    InputPassword,
    InputRadio,
    InputRange,
    InputReset,
    InputSearch,
    InputSubmit,
    InputTel,
    InputText,
    InputTime,
    InputUrl,
    InputWeek,
    RadioList,
)
from .style import Style, StyleWarning, style
from .template import render_template
from .validation import AttributeValueError
from . import values

__all__ = [
    "A11yContract",
    "A11yId",
    "A11yValidationError",
    "A11yWarning",
    "AriaAttrs",
    "AttributeMap",
    "AttributeValueError",
    "AttributeWarning",
    "BaseBlock",
    "BaseChoice",
    "BaseInline",
    "BaseInput",
    "BaseTag",
    "Button",
    "CheckboxList",
    "Config",
    "ConfigError",
    "DefaultsProvider",
    "Form",
    "InputCheckbox",
    "InputColor",
    "InputDate",
    "InputDateTimeLocal",
    "InputEmail",
    "InputFile",
    "InputHidden",
    "InputImage",
    "InputMonth",
    "InputNumber",
    "InputPassword",
    "InputRadio",
    "InputRange",
    "InputReset",
    "InputSearch",
    "InputSubmit",
    "InputTel",
    "InputText",
    "InputTime",
    "InputUrl",
    "InputWeek",
    "Label",
    "RadioList",
    "Select",
    "Style",
    "StyleWarning",
    "TextArea",
    "ThemeMap",
    "ThemeProvider",
    "begin_tag",
    "clear_defaults",
    "element",
    "end_tag",
    "get_defaults",
    "normalize_keyword",
    "render_attributes",
    "render_template",
    "set_defaults",
    "style",
    "values",
]
