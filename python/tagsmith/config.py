# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
from pathlib import Path
from typing import Dict, List, Optional, Any
try:
    import tomllib
except ImportError:
    import tomli as tomllib
import warnings

from . import factory, form, inputs
from .base import BaseTag
from .factory import AttributeWarning

CONFIG_FILENAME = "tagsmith.toml"


class ConfigError(ValueError):
    """Raised for unreadable configuration files or unknown element names."""


def element_classes() -> Dict[str, type]:
    """Builders addressable by class name from configuration and the CLI."""
    classes: Dict[str, type] = {}
    for module in (form, inputs):
        for name in sorted(dir(module)):
            obj = getattr(module, name)
            if (
                isinstance(obj, type)
                and issubclass(obj, BaseTag)
                and obj.__module__ == module.__name__
                and not name.startswith(("_", "Base"))
            ):
                classes[name] = obj
    return classes


def lookup_element(name: str) -> type:
    classes = element_classes()
    if name in classes:
        return classes[name]
    # Case-insensitive fallback so `inputtext` and `InputText` both resolve.
    for key, cls in classes.items():
        if key.lower() == name.lower():
            return cls
    raise ConfigError(f"Unknown element {name!r}. Known elements: {', '.join(sorted(classes))}")


def _attribute_table(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be a table of attributes, got {type(value).__name__}")
    return dict(value)


class ThemeMap:
    """Theme provider answering from `[themes.<theme>.<Element>]` tables."""

    def __init__(self, themes: Dict[str, Dict[type, Dict[str, Any]]]):
        self.themes = themes

    def apply(self, tag: Any, theme: str) -> Dict[str, Any]:
        table = self.themes.get(theme)
        if table is None:
            warnings.warn(f"Unknown theme {theme!r}", AttributeWarning, stacklevel=2)
            return {}
        merged: Dict[str, Any] = {}
        for klass in reversed(type(tag).__mro__):
            if klass in table:
                merged.update(table[klass])
        return merged

    def names(self) -> List[str]:
        return sorted(self.themes)


class Config:
    def __init__(self, data: Dict[str, Any], path: Optional[Path] = None):
        self.data = data
        self.path = path

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from tagsmith.toml."""
        if path is None:
            path = Path.cwd() / CONFIG_FILENAME
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {path}.")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e

        return cls(data, path)

    @property
    def defaults(self) -> Dict[str, Any]:
        return self.data.get("defaults", {})

    @property
    def themes(self) -> Dict[str, Any]:
        return self.data.get("themes", {})

    def default_tables(self) -> Dict[type, Dict[str, Any]]:
        return {
            lookup_element(name): _attribute_table(table, f"[defaults.{name}]")
            for name, table in self.defaults.items()
        }

    def apply_defaults(self) -> List[type]:
        """Register every `[defaults.<Element>]` table with the factory."""
        tables = self.default_tables()
        for cls, table in tables.items():
            factory.set_defaults(cls, table)
        return list(tables)

    def theme_provider(self) -> ThemeMap:
        themes: Dict[str, Dict[type, Dict[str, Any]]] = {}
        for theme, elements in self.themes.items():
            if not isinstance(elements, dict):
                raise ConfigError(f"[themes.{theme}] must be a table of element tables")
            themes[theme] = {
                lookup_element(name): _attribute_table(table, f"[themes.{theme}.{name}]")
                for name, table in elements.items()
            }
        return ThemeMap(themes)
