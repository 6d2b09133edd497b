from __future__ import annotations

import json
from pathlib import Path

from tagsmith.cli import main


def test_list_prints_element_names(capsys) -> None:
    assert main(["list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "InputText" in lines
    assert lines == sorted(lines)


def test_list_only_names_builders(capsys) -> None:
    assert main(["list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "InputType" not in lines
    assert "Select" in lines


def test_list_json(capsys) -> None:
    assert main(["--json", "list"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["schema"] == "tagsmith.elements.v1"
    assert "Button" in payload["elements"]


def test_render_with_attributes(capsys) -> None:
    assert main(["render", "InputText", "--attr", "id=q", "--attr", "required"]) == 0
    assert capsys.readouterr().out == '<input id="q" type="text" required>\n'


def test_render_content_and_label(capsys) -> None:
    assert main(["render", "Button", "--content", "Save <now>"]) == 0
    assert capsys.readouterr().out == "<button>Save &lt;now&gt;</button>\n"
    assert main(["render", "InputCheckbox", "--attr", "id=c", "--label", "Agree"]) == 0
    assert capsys.readouterr().out == '<input id="c" type="checkbox">\n<label for="c">Agree</label>\n'


def test_render_with_config_and_theme(tmp_path: Path, capsys) -> None:
    cfg = tmp_path / "tagsmith.toml"
    cfg.write_text(
        '[defaults.Button]\ntype = "button"\n\n[themes.muted.Button]\nclass = "text-muted"\n',
        encoding="utf-8",
    )
    code = main(["render", "Button", "--content", "Go", "--config", str(cfg), "--theme", "muted"])
    assert code == 0
    assert capsys.readouterr().out == '<button class="text-muted" type="button">Go</button>\n'


def test_render_errors_are_reported(capsys) -> None:
    assert main(["render", "Marquee"]) == 3
    assert "[error]" in capsys.readouterr().err
    assert main(["render", "InputText", "--content", "x"]) == 3
    assert main(["render", "Button", "--theme", "muted"]) == 3


def test_a11y_raise_mode_fails_render(capsys) -> None:
    assert main(["render", "InputImage", "--attr", "src=go.png", "--a11y", "raise"]) == 3
    assert "Accessibility validation failed" in capsys.readouterr().err


def test_a11y_warn_mode_reports_on_stderr(capsys) -> None:
    assert main(["render", "Button", "--a11y", "warn"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "<button></button>\n"
    assert "BUTTON_NAME_MISSING" in captured.err


def test_json_render_payload(capsys) -> None:
    assert main(["--json", "render", "Button", "--attr", "tabindex=-5"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["html"] == '<button tabindex="-5"></button>'


def test_json_error_payload_names_exception(capsys) -> None:
    assert main(["--json", "render", "Marquee"]) == 3
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is False
    assert payload["code"] == "ConfigError"
