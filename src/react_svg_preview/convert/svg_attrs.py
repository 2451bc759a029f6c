"""Attribute extraction from SVG and JSX opening tags."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Quoted values and `{...}` expressions may legally contain `>`.
_OPENING_TAG_RE = re.compile(r"""<[A-Za-z][\w.:-]*(?:[^>"'{]|"[^"]*"|'[^']*'|\{[^}]*\})*>""")


@dataclass(frozen=True)
class SvgAttributes:
    view_box: str | None = None
    width: float | None = None
    height: float | None = None


def opening_tag(markup: str) -> str | None:
    m = _OPENING_TAG_RE.search(markup)
    if not m:
        return None
    return m.group(0)


def _extract_attr(tag: str, name: str) -> str | None:
    m = re.search(rf'(?<![\w:-]){name}\s*=\s*["\']([^"\']+)["\']', tag)
    if not m:
        return None
    return m.group(1).strip()


def _extract_jsx_attr(tag: str, name: str) -> str | None:
    """Read `name="v"`, `name={"v"}` or `name={16}` from a JSX opening tag."""
    m = re.search(
        rf"""(?<![\w:-]){name}\s*=\s*(?:["']([^"']+)["']|\{{\s*(?:["']([^"']+)["']|([0-9]+(?:\.[0-9]+)?))\s*\}})""",
        tag,
    )
    if not m:
        return None
    return next(g for g in m.groups() if g is not None).strip()


_LENGTH_RE = re.compile(r"^\s*([0-9]+(?:\.[0-9]+)?)\s*([a-zA-Z%]*)\s*$")


def _length_to_css_px(value: str) -> float | None:
    m = _LENGTH_RE.match(value)
    if not m:
        return None
    num = float(m.group(1))
    unit = (m.group(2) or "px").lower()

    if unit in ("px", ""):
        return num
    if unit == "in":
        return num * 96.0
    if unit == "pt":
        return num * (96.0 / 72.0)
    if unit == "pc":
        return num * 16.0
    if unit == "mm":
        return num * (96.0 / 25.4)
    if unit == "cm":
        return num * (96.0 / 2.54)

    # %, em, vw and friends need a layout context we don't have.
    return None


def _positive(value: float | None) -> float | None:
    if value is None or value <= 0:
        return None
    return value


def parse_view_box(value: str) -> tuple[float, float] | None:
    parts = re.split(r"[,\s]+", value.strip())
    if len(parts) != 4:
        return None
    try:
        w = float(parts[2])
        h = float(parts[3])
    except ValueError:
        return None
    if w <= 0 or h <= 0:
        return None
    return w, h


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def extract_jsx_attributes(fragment: str) -> SvgAttributes:
    """Dimensions declared on the root element of a JSX fragment.

    Accepts both quoted literals and `{16}`-style numeric expressions.
    """
    tag = opening_tag(fragment)
    if tag is None:
        return SvgAttributes()

    width_raw = _extract_jsx_attr(tag, "width")
    height_raw = _extract_jsx_attr(tag, "height")
    return SvgAttributes(
        view_box=_extract_jsx_attr(tag, "viewBox"),
        width=_positive(_length_to_css_px(width_raw)) if width_raw else None,
        height=_positive(_length_to_css_px(height_raw)) if height_raw else None,
    )


def extract_svg_attributes(svg_text: str) -> SvgAttributes:
    """Dimensions declared on the root of plain SVG markup (quoted form only)."""
    tag = opening_tag(svg_text)
    if tag is None:
        return SvgAttributes()

    width_raw = _extract_attr(tag, "width")
    height_raw = _extract_attr(tag, "height")
    return SvgAttributes(
        view_box=_extract_attr(tag, "viewBox"),
        width=_positive(_length_to_css_px(width_raw)) if width_raw else None,
        height=_positive(_length_to_css_px(height_raw)) if height_raw else None,
    )
