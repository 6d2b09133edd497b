from __future__ import annotations

import warnings

from tagsmith import Button, style
from tagsmith.style import StyleWarning


def test_style_mapping_renders_inline_css_preserving_order() -> None:
    tag = Button.tag().style({"font_weight": 600, "color": "red"}).content("x")
    assert tag.render() == '<button style="font-weight: 600; color: red;">x</button>'


def test_style_fragments_merge_last_write_wins_with_order() -> None:
    tag = (
        Button.tag()
        .style({"color": "red"})
        .style("font-weight: 600;")
        .style({"color": "blue"})
        .content("x")
    )
    assert tag.render() == '<button style="font-weight: 600; color: blue;">x</button>'


def test_style_string_alone_is_kept_verbatim() -> None:
    assert Button.tag().style("color: red").content("x").render() == '<button style="color: red">x</button>'


def test_style_none_removes_inherited_declarations() -> None:
    tag = Button.tag({"style": "color: red"}).style(None).content("x")
    assert tag.render() == "<button>x</button>"


def test_style_bool_value_warns_and_is_skipped() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        css = style({"display": True, "color": "red"}).to_css()
    assert css == "color: red;"
    assert any(isinstance(w.message, StyleWarning) for w in caught)


def test_malformed_style_fragment_warns() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        css = style("color red; margin: 0").to_css()
    assert css == "margin: 0;"
    assert any(isinstance(w.message, StyleWarning) for w in caught)
