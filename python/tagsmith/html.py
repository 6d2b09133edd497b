from __future__ import annotations

from enum import Enum
from html import escape
from typing import Any, Mapping

from .attributes import render_attributes


INLINE_TAGS = frozenset({
    "a",
    "abbr",
    "audio",
    "b",
    "bdi",
    "bdo",
    "br",
    "button",
    "canvas",
    "cite",
    "code",
    "data",
    "datalist",
    "del",
    "dfn",
    "em",
    "embed",
    "i",
    "iframe",
    "img",
    "input",
    "ins",
    "kbd",
    "label",
    "map",
    "mark",
    "meter",
    "noscript",
    "object",
    "option",
    "output",
    "picture",
    "progress",
    "q",
    "ruby",
    "s",
    "samp",
    "script",
    "select",
    "slot",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "svg",
    "td",
    "template",
    "th",
    "time",
    "u",
    "var",
    "video",
    "wbr",
})

VOID_TAGS = frozenset({
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "source",
    "track",
    "wbr",
})


def normalize_tag(tag: Any) -> str:
    if isinstance(tag, Enum):
        tag = tag.value
    text = str(tag).strip().lower()
    if not text:
        raise ValueError("Tag name must not be empty.")
    return text


def encode(content: Any) -> str:
    if content is None:
        return ""
    return escape(str(content), quote=True)


def begin_tag(tag: Any, attributes: Mapping[str, Any] | None = None) -> str:
    name = normalize_tag(tag)
    if name in INLINE_TAGS or name in VOID_TAGS:
        raise ValueError(f"Inline and void elements cannot be opened with begin_tag(): {name!r}")
    return f"<{name}{render_attributes(attributes)}>"


def end_tag(tag: Any) -> str:
    name = normalize_tag(tag)
    if name in INLINE_TAGS or name in VOID_TAGS:
        raise ValueError(f"Inline and void elements cannot be closed with end_tag(): {name!r}")
    return f"</{name}>"


def element(tag: Any, content: str = "", attributes: Mapping[str, Any] | None = None) -> str:
    """Render one element; `content` is inserted verbatim."""
    name = normalize_tag(tag)
    opening = f"<{name}{render_attributes(attributes)}>"
    if name in VOID_TAGS:
        return opening
    if name in INLINE_TAGS:
        return f"{opening}{content}</{name}>"
    body = f"{content}\n" if content else ""
    return f"{opening}\n{body}</{name}>"
