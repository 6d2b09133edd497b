# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
import argparse
import json
import sys
import warnings
from pathlib import Path

from .aria import A11yWarning
from .config import Config, element_classes, lookup_element


def _parse_attr(raw):
    """`name=value`; a bare `name` sets a boolean attribute."""
    name, sep, value = raw.partition("=")
    name = name.strip()
    if not name:
        raise ValueError(f"invalid --attr {raw!r} (expected name=value)")
    if not sep:
        return name, True
    return name, value


def _build_element(args):
    cls = lookup_element(args.element)
    tag = cls.tag(dict(_parse_attr(raw) for raw in args.attr or []))
    if args.content is not None:
        if not hasattr(tag, "content"):
            raise ValueError(f"{cls.__name__} does not take content")
        tag = tag.content(args.content)
    if args.label is not None:
        if not hasattr(tag, "label"):
            raise ValueError(f"{cls.__name__} does not take a label")
        tag = tag.label(args.label)
    if args.theme:
        if args.config_obj is None:
            raise ValueError("--theme requires --config")
        tag = tag.add_theme_provider(args.theme, args.config_obj.theme_provider())
    return tag


def cmd_list(args):
    names = sorted(element_classes())
    if args.json:
        sys.stdout.write(json.dumps({"schema": "tagsmith.elements.v1", "elements": names}) + "\n")
        return
    for name in names:
        sys.stdout.write(name + "\n")


def cmd_render(args):
    args.config_obj = None
    if args.config:
        args.config_obj = Config.load(Path(args.config))
        args.config_obj.apply_defaults()
    tag = _build_element(args)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", A11yWarning)
        html = tag.render(a11y_mode=args.a11y)
    for w in caught:
        sys.stderr.write(f"[warn] {w.message}\n")
    if args.json:
        payload = {"schema": "tagsmith.render.v1", "ok": True, "element": args.element, "html": html}
        sys.stdout.write(json.dumps(payload, ensure_ascii=True) + "\n")
        return
    sys.stdout.write(html + "\n")


def _build_parser():
    parser = argparse.ArgumentParser(prog="tagsmith")
    parser.add_argument("--json", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List element builders")
    p_list.set_defaults(func=cmd_list)

    p_render = sub.add_parser("render", help="Render one element")
    p_render.add_argument("element", help="Element class name (e.g., InputText, Button)")
    p_render.add_argument("--attr", action="append", help="Attribute as name=value (repeatable)")
    p_render.add_argument("--content", help="Text content (escaped)")
    p_render.add_argument("--label", help="Label text for checkboxes and radios")
    p_render.add_argument("--theme", help="Theme name from the [themes] config table")
    p_render.add_argument("--config", help="Path to tagsmith.toml")
    p_render.add_argument("--a11y", choices=["warn", "raise"], help="Validate accessibility before rendering")
    p_render.set_defaults(func=cmd_render)

    return parser


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except Exception as exc:
        if args.json:
            err = {
                "schema": "tagsmith.error.v1",
                "ok": False,
                "code": type(exc).__name__,
                "message": str(exc),
            }
            sys.stdout.write(json.dumps(err, ensure_ascii=True) + "\n")
        else:
            sys.stderr.write(f"[error] {exc}\n")
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
