from __future__ import annotations

import warnings

import pytest

from tagsmith import Button, InputCheckbox, InputHidden, InputImage, InputText, Select, TextArea
from tagsmith.aria import A11yContract, A11yId, A11yValidationError, A11yWarning, AriaAttrs


def _codes(report: dict) -> list[str]:
    return [d["code"] for d in report["diagnostics"]]


def test_aria_attrs_helpers() -> None:
    assert AriaAttrs.labelledby("a", A11yId("b"), " ") == {"aria-labelledby": "a b"}
    assert AriaAttrs.describedby() == {}
    assert AriaAttrs.merge(AriaAttrs.label("Close"), None, AriaAttrs.hidden()) == {
        "aria-label": "Close",
        "aria-hidden": True,
    }
    tag = Button.tag().attributes(AriaAttrs.merge(AriaAttrs.id(A11yId("b1")), AriaAttrs.label("Close")))
    assert tag.render() == '<button id="b1" aria-label="Close"></button>'


def test_a11y_id_rejects_blank_values() -> None:
    with pytest.raises(ValueError):
        A11yId("   ")
    assert str(A11yId(" field ").suffixed("help")) == "field-help"


def test_contract_reports_duplicate_ids() -> None:
    report = A11yContract().validate(
        [InputText.tag().id("x").aria_attributes({"label": "A"}), TextArea.tag().id("x")],
        mode=None,
    )
    assert report["ok"] is False
    assert "ID_DUPLICATE" in _codes(report)


def test_blank_aria_label_is_an_error() -> None:
    tag = InputText.tag().id("q").add_aria_attribute("label", " ")
    report = A11yContract().validate(tag, mode=None)
    assert "ARIA_LABEL_EMPTY" in _codes(report)
    with pytest.raises(A11yValidationError) as exc_info:
        A11yContract().validate(tag, mode="raise")
    assert exc_info.value.report["error_count"] >= 1


def test_image_input_without_alt_fails_in_raise_mode() -> None:
    with pytest.raises(A11yValidationError):
        InputImage.tag().src("go.png").render(a11y_mode="raise")
    html = InputImage.tag().src("go.png").alt("Go").render(a11y_mode="raise")
    assert html == '<input type="image" src="go.png" alt="Go">'


def test_empty_button_needs_a_name() -> None:
    report = A11yContract().validate(Button.tag(), mode=None)
    assert _codes(report) == ["BUTTON_NAME_MISSING"]
    assert A11yContract().validate(Button.tag().content("Save"), mode=None)["ok"] is True
    assert A11yContract().validate(Button.tag().aria_attributes({"label": "Save"}), mode=None)["ok"] is True


def test_unlabelled_control_is_a_warning_only() -> None:
    report = A11yContract().validate(InputText.tag().id("q"), mode=None)
    assert report["ok"] is True
    assert report["warning_count"] == 1
    assert _codes(report) == ["CONTROL_NAME_MISSING"]


def test_unlabelled_select_is_a_warning() -> None:
    report = A11yContract().validate(Select.tag().id("s").items({"1": "One"}), mode=None)
    assert _codes(report) == ["CONTROL_NAME_MISSING"]
    assert _codes(A11yContract().validate(Select.tag().aria_attributes({"label": "Pick"}), mode=None)) == []


def test_labelled_controls_pass() -> None:
    assert _codes(A11yContract().validate(InputCheckbox.tag().id("c").label("Agree"), mode=None)) == []
    assert _codes(A11yContract().validate(InputText.tag().title("Query"), mode=None)) == []
    assert _codes(A11yContract().validate(InputHidden.tag(), mode=None)) == []


def test_describedby_without_id_is_reported() -> None:
    tag = InputText.tag().id(None).title("Q").add_aria_attribute("describedby", True)
    assert _codes(A11yContract().validate(tag, mode=None)) == ["DESCRIBEDBY_UNRESOLVED"]


def test_warn_mode_emits_warnings_and_returns_html() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        html = Button.tag().render(a11y_mode="warn")
    assert html == "<button></button>"
    assert any(isinstance(w.message, A11yWarning) for w in caught)


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        A11yContract().validate(Button.tag(), mode="strict")
