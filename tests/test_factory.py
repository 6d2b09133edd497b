from __future__ import annotations

import warnings
from dataclasses import FrozenInstanceError

import pytest

from tagsmith import BaseBlock, BaseInline, BaseTag, Button, InputText, Label, TextArea
from tagsmith import factory
from tagsmith.factory import AttributeWarning


class DefaultProvider:
    def get_defaults(self, tag):
        if isinstance(tag, BaseBlock):
            return {"class": "default-class"}
        return {"class": "default-class", "title": "default-title"}


class ThemeStub:
    def apply(self, tag, theme):
        if theme == "muted":
            return {"class": "text-muted"}
        if theme == "highlight":
            return {"style": "background-color: yellow;"}
        return {}


class IdAwareProvider:
    def get_defaults(self, tag):
        return {"data-for": tag.get_attribute("id")}


class ClassEchoProvider:
    def get_defaults(self, tag):
        return {"data-cls": tag.get_attributes().get("class")}


class BrokenProvider:
    def get_defaults(self, tag):
        return ["not", "a", "mapping"]


def test_global_defaults_apply_to_new_instances() -> None:
    factory.set_defaults(Button, {"class": "btn", "type": "button"})
    assert Button.tag().content("x").render() == '<button class="btn" type="button">x</button>'


def test_defaults_registered_on_a_base_class_reach_subclasses() -> None:
    factory.set_defaults(BaseInline, {"class": "inline"})
    assert Button.tag().content("x").render() == '<button class="inline">x</button>'
    assert Label.tag().content("x").render() == '<label class="inline">x</label>'
    assert TextArea.tag().render() == "<textarea>\n</textarea>"


def test_most_specific_defaults_win() -> None:
    factory.set_defaults(BaseTag, {"title": "base"})
    factory.set_defaults(Button, {"title": "button"})
    assert factory.get_defaults(Button) == {"title": "button"}
    assert factory.get_defaults(Label) == {"title": "base"}


def test_empty_mapping_clears_registration() -> None:
    factory.set_defaults(Button, {"title": "x"})
    factory.set_defaults(Button, {})
    assert Button not in factory.registered_classes()


def test_constructor_attributes_override_global_defaults_and_merge_classes() -> None:
    factory.set_defaults(Button, {"title": "a", "class": "btn"})
    html = Button.tag({"title": "b", "class": "primary"}).content("x").render()
    assert html == '<button class="btn primary" title="b">x</button>'


def test_global_defaults_combine_with_user_id() -> None:
    factory.set_defaults(InputText, {"class": "form-control"})
    assert InputText.tag().id("u").render() == '<input class="form-control" id="u" type="text">'


def test_default_and_theme_providers_layer_in_order() -> None:
    tag = (
        Button.tag()
        .add_default_provider(DefaultProvider)
        .add_theme_provider("muted", ThemeStub)
        .content("x")
    )
    assert tag.render() == '<button class="default-class text-muted" title="default-title">x</button>'


def test_block_elements_receive_provider_class_only() -> None:
    tag = TextArea.tag().add_default_provider(DefaultProvider())
    assert tag.render() == '<textarea class="default-class">\n</textarea>'


def test_theme_style_fragment() -> None:
    tag = Button.tag().add_theme_provider("highlight", ThemeStub()).content("x")
    assert tag.render() == '<button style="background-color: yellow;">x</button>'


def test_setters_override_providers() -> None:
    tag = Button.tag().add_default_provider(DefaultProvider).title("mine").content("x")
    assert tag.get_attribute("title") == "mine"


def test_class_override_discards_lower_layers() -> None:
    factory.set_defaults(Button, {"class": "btn"})
    tag = Button.tag().add_default_provider(DefaultProvider).class_name("only", override=True)
    assert tag.get_attribute("class") == "only"


def test_remove_attribute_hides_lower_layers() -> None:
    factory.set_defaults(Button, {"title": "t"})
    assert Button.tag().remove_attribute("title").get_attribute("title") is None


def test_setting_a_value_after_removal_restores_it() -> None:
    tag = Button.tag().remove_attribute("title").title("back")
    assert tag.get_attribute("title") == "back"


def test_style_merges_across_layers() -> None:
    factory.set_defaults(Button, {"style": "color: red"})
    html = Button.tag().style({"font-weight": "bold"}).content("x").render()
    assert html == '<button style="color: red; font-weight: bold;">x</button>'


def test_provider_may_read_explicit_attributes() -> None:
    tag = Button.tag().id("b1").add_default_provider(IdAwareProvider()).content("x")
    assert tag.render() == '<button id="b1" data-for="b1">x</button>'


def test_provider_may_resolve_the_full_attribute_map() -> None:
    tag = Button.tag().class_name("x").add_default_provider(ClassEchoProvider())
    assert tag.render() == '<button class="x" data-cls="x"></button>'
    assert tag.get_attribute("data-cls") == "x"


def test_non_mapping_provider_result_warns_and_is_ignored() -> None:
    tag = Button.tag().add_default_provider(BrokenProvider).content("x")
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        html = tag.render()
    assert html == "<button>x</button>"
    assert any(isinstance(w.message, AttributeWarning) for w in caught)


def test_provider_without_protocol_method_is_rejected() -> None:
    with pytest.raises(TypeError):
        Button.tag().add_default_provider(object())
    with pytest.raises(TypeError):
        Button.tag().add_theme_provider("muted", DefaultProvider)


def test_builders_are_immutable() -> None:
    base = Button.tag()
    titled = base.title("x")
    assert base.get_attribute("title") is None
    assert titled.get_attribute("title") == "x"
    with pytest.raises(FrozenInstanceError):
        base.foo = 1
    with pytest.raises(FrozenInstanceError):
        del base._attributes


def test_defaults_registered_after_construction_apply_at_render() -> None:
    tag = Button.tag().content("x")
    factory.set_defaults(Button, {"class": "late"})
    assert tag.render() == '<button class="late">x</button>'
