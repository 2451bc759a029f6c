"""Find SVG icon declarations in source text and convert them to SVG."""

from __future__ import annotations

import logging
import re
from pathlib import PurePath

from react_svg_preview.convert.jsx_to_svg import DEFAULT_FILL_COLOR, jsx_to_svg
from react_svg_preview.convert.svg_attrs import extract_jsx_attributes, extract_svg_attributes
from react_svg_preview.convert.svg_detect import (
    extract_svg_root,
    is_raw_svg_document,
    looks_like_raw_svg,
    trim_document,
)
from react_svg_preview.scan.component import ParsedComponent
from react_svg_preview.scan.patterns import PATTERNS

_log = logging.getLogger("react_svg_preview.scanner")

_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def _line_span(text: str, m: re.Match[str]) -> tuple[int, int]:
    start_line = text.count("\n", 0, m.start())
    return start_line, start_line + m.group(0).count("\n")


def scan_components(text: str, *, default_fill_color: str = DEFAULT_FILL_COLOR) -> list[ParsedComponent]:
    """Extract every icon component declared in a JS/TS source text.

    Patterns run in a fixed order and the first declaration seen for a name
    wins; later ones with the same name are ignored. A candidate whose markup
    cannot be converted is logged and skipped. The result is ordered by
    `start_line`.
    """
    components: list[ParsedComponent] = []
    seen_names: set[str] = set()

    for pattern in PATTERNS:
        for m in pattern.regex.finditer(text):
            name = m.group("name")
            if name in seen_names:
                continue

            fragment = m.group("fragment")
            try:
                attrs = extract_jsx_attributes(fragment)
                svg = jsx_to_svg(
                    fragment,
                    default_fill_color=default_fill_color,
                    width=attrs.width,
                    height=attrs.height,
                    view_box=attrs.view_box,
                )
            except Exception as e:
                _log.warning("component_skipped name=%s pattern=%s error=%s", name, pattern.kind, e)
                continue

            start_line, end_line = _line_span(text, m)
            components.append(
                ParsedComponent(
                    name=name,
                    start_line=start_line,
                    end_line=end_line,
                    raw_fragment=fragment,
                    rendered_svg=svg,
                    view_box=attrs.view_box,
                    width=attrs.width,
                    height=attrs.height,
                )
            )
            seen_names.add(name)

    components.sort(key=lambda c: c.start_line)
    _log.debug("scan_done components=%d", len(components))
    return components


def raw_file_component_name(file_name: str) -> str:
    stem = PurePath(file_name).stem or file_name
    return _NON_ALNUM_RE.sub("_", stem)


def scan_raw_file(text: str, file_name: str) -> list[ParsedComponent]:
    """Treat a whole `.svg` document as a single component.

    The markup is returned verbatim; it is already SVG.
    """
    if not looks_like_raw_svg(text):
        return []

    svg = extract_svg_root(trim_document(text))
    if svg is None:
        _log.debug("raw_svg_root_missing file=%s", file_name)
        return []

    attrs = extract_svg_attributes(svg)
    return [
        ParsedComponent(
            name=raw_file_component_name(file_name),
            start_line=0,
            end_line=text.count("\n"),
            raw_fragment=svg,
            rendered_svg=svg,
            view_box=attrs.view_box,
            width=attrs.width,
            height=attrs.height,
            is_raw_svg_file=True,
        )
    ]


def scan_document(
    text: str, file_name: str, *, default_fill_color: str = DEFAULT_FILL_COLOR
) -> list[ParsedComponent]:
    if is_raw_svg_document(text, file_name):
        return scan_raw_file(text, file_name)
    return scan_components(text, default_fill_color=default_fill_color)
