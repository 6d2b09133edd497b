from __future__ import annotations

import warnings
from pathlib import Path

import pytest

from tagsmith import Button, InputText, factory
from tagsmith.config import Config, ConfigError, element_classes, lookup_element
from tagsmith.factory import AttributeWarning


CONFIG_TEXT = """
[defaults.InputText]
class = "form-control"

[defaults.Button]
type = "button"

[themes.muted.Button]
class = "text-muted"

"""


def _write_config(tmp_path: Path, text: str = CONFIG_TEXT) -> Path:
    path = tmp_path / "tagsmith.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_element_classes_cover_every_builder() -> None:
    names = element_classes()
    assert names["InputText"] is InputText
    assert "Form" in names and "InputCheckbox" in names and "TextArea" in names
    assert lookup_element("inputtext") is InputText
    assert "InputType" not in names
    assert "Select" in names and "CheckboxList" in names and "RadioList" in names
    assert not any(name.startswith(("_", "Base")) for name in names)


def test_apply_defaults_registers_with_factory(tmp_path: Path) -> None:
    cfg = Config.load(_write_config(tmp_path))
    registered = cfg.apply_defaults()
    assert set(registered) == {InputText, Button}
    assert factory.get_defaults(InputText) == {"class": "form-control"}
    assert InputText.tag().id("a").render() == '<input class="form-control" id="a" type="text">'


def test_theme_provider_answers_from_config(tmp_path: Path) -> None:
    cfg = Config.load(_write_config(tmp_path))
    provider = cfg.theme_provider()
    assert provider.names() == ["muted"]
    tag = Button.tag().add_theme_provider("muted", provider).content("x")
    assert tag.render() == '<button class="text-muted">x</button>'


def test_unknown_theme_warns(tmp_path: Path) -> None:
    provider = Config.load(_write_config(tmp_path)).theme_provider()
    tag = Button.tag().add_theme_provider("loud", provider).content("x")
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        html = tag.render()
    assert html == "<button>x</button>"
    assert any(isinstance(w.message, AttributeWarning) for w in caught)


def test_unknown_element_name_raises(tmp_path: Path) -> None:
    cfg = Config.load(_write_config(tmp_path, "[defaults.Marquee]\nclass = 'x'\n"))
    with pytest.raises(ConfigError, match="Marquee"):
        cfg.apply_defaults()


def test_non_table_defaults_raise(tmp_path: Path) -> None:
    cfg = Config.load(_write_config(tmp_path, "[defaults]\nInputText = 'x'\n"))
    with pytest.raises(ConfigError):
        cfg.apply_defaults()


def test_parse_error_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        Config.load(_write_config(tmp_path, "[defaults\n"))


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        Config.load(tmp_path / "nope.toml")
