from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from .base import BaseTag


class A11yValidationError(ValueError):
    def __init__(self, message: str, report: dict[str, Any]) -> None:
        super().__init__(message)
        self.report = report


class A11yWarning(UserWarning):
    pass


@dataclass(frozen=True)
class A11yId:
    value: str

    def __post_init__(self) -> None:
        text = str(self.value).strip()
        if not text:
            raise ValueError("A11yId value must not be empty")
        object.__setattr__(self, "value", text)

    def __str__(self) -> str:
        return self.value

    def suffixed(self, suffix: str) -> "A11yId":
        return A11yId(f"{self.value}-{suffix}")


class AriaAttrs:
    """Attribute fragments for `BaseTag.attributes()`."""

    @staticmethod
    def id(value: str | A11yId) -> dict[str, str]:
        return {"id": str(value)}

    @staticmethod
    def labelledby(*ids: str | A11yId) -> dict[str, str]:
        tokens = _join_idrefs(ids)
        return {"aria-labelledby": tokens} if tokens else {}

    @staticmethod
    def describedby(*ids: str | A11yId) -> dict[str, str]:
        tokens = _join_idrefs(ids)
        return {"aria-describedby": tokens} if tokens else {}

    @staticmethod
    def label(text: Any) -> dict[str, str]:
        return {"aria-label": str(text)}

    @staticmethod
    def hidden(value: bool = True) -> dict[str, bool]:
        return {"aria-hidden": bool(value)}

    @staticmethod
    def merge(*parts: dict[str, Any] | None) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for part in parts:
            if not part:
                continue
            out.update(part)
        return out


def _join_idrefs(values: Iterable[str | A11yId]) -> str:
    tokens = [str(v).strip() for v in values if str(v).strip()]
    return " ".join(tokens)


def _is_blank(value: Any) -> bool:
    return value is None or value is False or str(value).strip() == ""


def _id_tokens(value: Any) -> list[str]:
    if value is None or isinstance(value, bool):
        return []
    return [tok for tok in str(value).split() if tok.strip()]


def _diagnostic(code: str, severity: str, message: str, path: str, **extra: Any) -> dict[str, Any]:
    out = {
        "code": code,
        "severity": severity,
        "message": message,
        "path": path,
    }
    out.update(extra)
    return out


# Input types that are labelled by their value, alt text or not at all.
_SELF_NAMED_TYPES = {"hidden", "submit", "reset", "image", "button"}


class A11yContract:
    """Checks the resolved attributes of one or more builders."""

    def validate(self, tags: "BaseTag | Iterable[BaseTag]", *, mode: str | None = "warn") -> dict[str, Any]:
        normalized_mode = None if mode is None else str(mode).strip().lower()
        if normalized_mode not in {None, "", "warn", "raise"}:
            raise ValueError(f"Unsupported a11y validation mode {mode!r}")
        if normalized_mode == "":
            normalized_mode = None

        from .base import BaseTag

        items = [tags] if isinstance(tags, BaseTag) else list(tags)
        diagnostics: list[dict[str, Any]] = []
        ids: dict[str, str] = {}
        counts: dict[str, int] = {}

        for tag in items:
            counts[tag.tag_name] = counts.get(tag.tag_name, 0) + 1
            path = f"/{tag.tag_name}[{counts[tag.tag_name]}]"
            attrs = tag.get_attributes()

            node_id = attrs.get("id")
            if node_id is not None:
                text_id = str(node_id).strip()
                if not text_id:
                    diagnostics.append(
                        _diagnostic("ID_EMPTY", "error", "Element id must not be empty.", path)
                    )
                elif text_id in ids:
                    diagnostics.append(
                        _diagnostic(
                            "ID_DUPLICATE",
                            "error",
                            f"Duplicate id {text_id!r}.",
                            path,
                            id=text_id,
                            first_seen_path=ids[text_id],
                        )
                    )
                else:
                    ids[text_id] = path

            aria_label = attrs.get("aria-label")
            if aria_label is not None and _is_blank(aria_label):
                diagnostics.append(
                    _diagnostic("ARIA_LABEL_EMPTY", "error", "aria-label must not be empty.", path)
                )

            requested = tag.resolve_layers().get("aria-describedby")
            if (requested is True or requested == "true") and node_id is None:
                diagnostics.append(
                    _diagnostic(
                        "DESCRIBEDBY_UNRESOLVED",
                        "warning",
                        "aria-describedby=true needs an id to derive the help element id; "
                        "the attribute was dropped.",
                        path,
                    )
                )

            diagnostics.extend(self._validate_name(tag, attrs, path))

        errors = [d for d in diagnostics if d["severity"] == "error"]
        warnings_only = [d for d in diagnostics if d["severity"] != "error"]
        report = {
            "ok": not errors,
            "mode": normalized_mode,
            "error_count": len(errors),
            "warning_count": len(warnings_only),
            "errors": errors,
            "warnings": warnings_only,
            "diagnostics": diagnostics,
        }

        if normalized_mode == "warn":
            for diag in diagnostics:
                warnings.warn(
                    f"[{diag['severity']}] {diag['code']}: {diag['message']} ({diag['path']})",
                    A11yWarning,
                    stacklevel=2,
                )
        if normalized_mode == "raise" and errors:
            raise A11yValidationError("Accessibility validation failed", report)
        return report

    def _validate_name(self, tag: "BaseTag", attrs: Any, path: str) -> list[dict[str, Any]]:
        aria_label = attrs.get("aria-label")
        named = bool(
            not _is_blank(aria_label)
            or _id_tokens(attrs.get("aria-labelledby"))
            or not _is_blank(attrs.get("title"))
        )
        if attrs.get("aria-hidden") is True:
            return []

        if tag.tag_name == "button":
            if named or tag.get_content().strip():
                return []
            return [
                _diagnostic(
                    "BUTTON_NAME_MISSING",
                    "error",
                    "Button requires text content, aria-label, or aria-labelledby.",
                    path,
                )
            ]

        if tag.tag_name not in {"input", "select", "textarea"}:
            return []

        input_type = str(attrs.get("type") or "").lower()
        if input_type == "image":
            if named or not _is_blank(attrs.get("alt")):
                return []
            return [
                _diagnostic(
                    "IMAGE_ALT_MISSING",
                    "error",
                    "Image button requires a text alternative (alt, aria-label, or aria-labelledby).",
                    path,
                )
            ]
        if input_type in _SELF_NAMED_TYPES:
            return []

        has_label = getattr(tag, "has_label", None)
        if named or (has_label is not None and has_label()):
            return []
        return [
            _diagnostic(
                "CONTROL_NAME_MISSING",
                "warning",
                "Form control has no label, aria-label, aria-labelledby or title; "
                "make sure a <label for> element points at its id.",
                path,
                id=attrs.get("id"),
            )
        ]
