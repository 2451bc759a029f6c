"""Scan result records and line lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class ParsedComponent:
    """One SVG-rendering declaration found in a document.

    Notes:
    - `start_line`/`end_line` are 0-based, inclusive, and refer to the scanned text.
    - `rendered_svg` is standalone SVG markup; `raw_fragment` is the untouched match.
    """

    name: str
    start_line: int
    end_line: int
    raw_fragment: str
    rendered_svg: str
    view_box: str | None = None
    width: float | None = None
    height: float | None = None
    is_raw_svg_file: bool = False

    def contains_line(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "rawFragment": self.raw_fragment,
            "renderedSvg": self.rendered_svg,
            "viewBox": self.view_box,
            "width": self.width,
            "height": self.height,
            "isRawSvgFile": self.is_raw_svg_file,
        }


def find_component_at_line(components: Iterable[ParsedComponent], line: int) -> Optional[ParsedComponent]:
    for component in components:
        if component.contains_line(line):
            return component
    return None


def find_component_starting_at_line(
    components: Iterable[ParsedComponent], line: int
) -> Optional[ParsedComponent]:
    for component in components:
        if component.start_line == line:
            return component
    return None
