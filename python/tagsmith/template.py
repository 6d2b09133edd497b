from __future__ import annotations

import re
from typing import Mapping


_TOKEN_RE = re.compile(r"\{[A-Za-z_][A-Za-z0-9_]*\}")


def _split_lines(template: str) -> list[str]:
    return template.replace("\\n", "\n").split("\n")


def render_template(template: str, tokens: Mapping[str, str]) -> str:
    """Substitute `{token}` placeholders line by line.

    Template lines that end up empty are dropped, so an absent prefix or label
    leaves no blank line behind. Blank lines inside substituted values survive.
    Unknown placeholders are left untouched.
    """
    out: list[str] = []
    for line in _split_lines(template):
        rendered = _TOKEN_RE.sub(lambda m: tokens.get(m.group(0), m.group(0)), line)
        if rendered.strip():
            out.append(rendered)
    return "\n".join(out)
