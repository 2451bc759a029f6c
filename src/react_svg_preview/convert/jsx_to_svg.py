"""JSX icon markup -> standalone SVG markup.

The conversion is a fixed sequence of textual rewrites (see `PIPELINE`). Later
stages rely on the shape produced by earlier ones, so the order is part of the
contract: attribute renaming runs before the `viewBox` spelling is restored,
and that happens before the root is checked for a `viewBox`.

Every stage is idempotent, which makes the whole pipeline idempotent:
`jsx_to_svg(jsx_to_svg(x)) == jsx_to_svg(x)`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable

from react_svg_preview.convert.svg_attrs import format_number, opening_tag

SVG_NS = "http://www.w3.org/2000/svg"
DEFAULT_FILL_COLOR = "#888888"
DEFAULT_SIZE = 16

# Path coordinates at or above this are treated as non-dimensional noise.
_MAX_COORD = 1000
_VIEW_BOX_BUCKETS = (16, 24, 32, 48, 64)

JSX_TO_SVG_ATTRS: dict[str, str] = {
    "className": "class",
    "fillRule": "fill-rule",
    "clipRule": "clip-rule",
    "strokeWidth": "stroke-width",
    "strokeLinecap": "stroke-linecap",
    "strokeLinejoin": "stroke-linejoin",
    "strokeMiterlimit": "stroke-miterlimit",
    "strokeDasharray": "stroke-dasharray",
    "strokeDashoffset": "stroke-dashoffset",
    "strokeOpacity": "stroke-opacity",
    "fillOpacity": "fill-opacity",
    "xlinkHref": "xlink:href",
    "xmlSpace": "xml:space",
    "xmlLang": "xml:lang",
    "xmlnsXlink": "xmlns:xlink",
    "clipPath": "clip-path",
    "fontFamily": "font-family",
    "fontSize": "font-size",
    "fontWeight": "font-weight",
    "textAnchor": "text-anchor",
    "dominantBaseline": "dominant-baseline",
    "alignmentBaseline": "alignment-baseline",
    "baselineShift": "baseline-shift",
    "stopColor": "stop-color",
    "stopOpacity": "stop-opacity",
    "colorInterpolation": "color-interpolation",
    "colorInterpolationFilters": "color-interpolation-filters",
    "floodColor": "flood-color",
    "floodOpacity": "flood-opacity",
    "lightingColor": "lighting-color",
    "markerStart": "marker-start",
    "markerMid": "marker-mid",
    "markerEnd": "marker-end",
    "paintOrder": "paint-order",
    "shapeRendering": "shape-rendering",
    "textRendering": "text-rendering",
    "imageRendering": "image-rendering",
    "vectorEffect": "vector-effect",
}


class SvgMarkupError(ValueError):
    """Raised when a fragment has no `<svg>` root to work with."""


@dataclass(frozen=True)
class NormalizeOptions:
    default_fill_color: str = DEFAULT_FILL_COLOR
    width: float | None = None
    height: float | None = None
    view_box: str | None = None

    @property
    def width_or_default(self) -> float:
        return self.width if self.width else DEFAULT_SIZE

    @property
    def height_or_default(self) -> float:
        return self.height if self.height else DEFAULT_SIZE


_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")


def camel_to_kebab(name: str) -> str:
    return _CAMEL_BOUNDARY_RE.sub(r"\1-\2", name).lower()


def convert_jsx_attr(name: str) -> str:
    """Map a JSX attribute name to its SVG spelling."""
    mapped = JSX_TO_SVG_ATTRS.get(name)
    if mapped is not None:
        return mapped
    if any(c.isupper() for c in name):
        return camel_to_kebab(name)
    return name


# --- root tag helpers -------------------------------------------------------

_ROOT_OPEN_RE = re.compile(r"<svg\b")


def _root_tag_span(svg: str) -> tuple[int, int] | None:
    m = _ROOT_OPEN_RE.search(svg)
    if not m:
        return None
    tag = opening_tag(svg[m.start() :])
    if tag is None or not svg.startswith(tag, m.start()):
        return None
    return m.start(), m.start() + len(tag)


def _root_tag(svg: str) -> str:
    span = _root_tag_span(svg)
    if span is None:
        return ""
    return svg[span[0] : span[1]]


def _rewrite_root_tag(svg: str, fn: Callable[[str], str]) -> str:
    span = _root_tag_span(svg)
    if span is None:
        return svg
    start, end = span
    return svg[:start] + fn(svg[start:end]) + svg[end:]


def _root_has_attr(svg: str, name: str) -> bool:
    return re.search(rf"\s{re.escape(name)}\s*=", _root_tag(svg)) is not None


_TAG_END_RE = re.compile(r"\s*/?>$")


def _add_root_attr(svg: str, name: str, value: str) -> str:
    def add(tag: str) -> str:
        end = _TAG_END_RE.search(tag)
        cut = end.start() if end else len(tag)
        return f'{tag[:cut]} {name}="{value}"{tag[cut:]}'

    return _rewrite_root_tag(svg, add)


# --- 1. wrapper unwrapping --------------------------------------------------

_NESTED_SVG_RE = re.compile(r"<(?:Icon|Svg)\b[^>]*>\s*(<svg\b[\s\S]*</svg>)\s*</(?:Icon|Svg)>")
_WRAPPER_VIEW_BOX_RE = re.compile(r"""<(?:Icon|Svg)\b[^>]*?\sviewBox=(?:\{\s*)?["']([^"']+)["']""")
_WRAPPER_OPEN_RE = re.compile(r"<(?:Icon|Svg)\b")
_WRAPPER_CLOSE_RE = re.compile(r"</(?:Icon|Svg)\s*>")


def unwrap_wrapper_tags(svg: str, opts: NormalizeOptions) -> str:
    nested = _NESTED_SVG_RE.search(svg)
    if nested is None:
        svg = _WRAPPER_OPEN_RE.sub("<svg", svg)
        return _WRAPPER_CLOSE_RE.sub("</svg>", svg)

    outer_view_box = _WRAPPER_VIEW_BOX_RE.search(svg)
    inner = nested.group(1)
    if outer_view_box and not _root_has_attr(inner, "viewBox"):
        inner = _add_root_attr(inner, "viewBox", outer_view_box.group(1))
    return inner


# --- 2. host-language-only attributes ---------------------------------------

_REF_RE = re.compile(r"\s+ref=\{[^}]*\}")
_SPREAD_RE = re.compile(r"\s+\{\s*\.\.\.\s*[\w.]+\s*\}")


def strip_host_only_attrs(svg: str, opts: NormalizeOptions) -> str:
    svg = _REF_RE.sub("", svg)
    return _SPREAD_RE.sub("", svg)


# --- 3. non-SVG visual attributes -------------------------------------------

_COLOR_LITERAL_RE = re.compile(r"""\s+color=["'][^"']*["']""")
_COLOR_EXPR_RE = re.compile(r"\s+color=\{[^}]*\}")
# Also catches expressions that would coerce to "none" in stage 4.
_FILL_NONE_RE = re.compile(r"""\s+fill=(?:["']none["']|\{[^}]*["']none["']\s*\})""")


def strip_non_svg_visual_attrs(svg: str, opts: NormalizeOptions) -> str:
    svg = _COLOR_LITERAL_RE.sub("", svg)
    svg = _COLOR_EXPR_RE.sub("", svg)
    # Children keep fill="none"; on the root it would hide everything.
    return _rewrite_root_tag(svg, lambda tag: _FILL_NONE_RE.sub("", tag))


# --- 4. expression -> literal coercion --------------------------------------

_NUMERIC_EXPR_RE = re.compile(r"([\w:-]+)=\{\s*(-?[0-9]+(?:\.[0-9]+)?)\s*\}")
_STRING_EXPR_RE = re.compile(r"""([\w:-]+)=\{\s*(?:"([^"]*)"|'([^']*)')\s*\}""")
_STYLE_OBJECT_RE = re.compile(r"style=\{\{([^}]*)\}\}")
_LITERAL = r"""(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<num>-?[0-9]+(?:\.[0-9]+)?))"""
_SELF_TERNARY_RE = re.compile(
    rf"([\w:-]+)=\{{\s*(?P<ref>[\w.]+)\s*\?\s*(?P=ref)\s*:\s*{_LITERAL}\s*\}}"
)
_OR_FALLBACK_RE = re.compile(rf"([\w:-]+)=\{{\s*[\w.]+\s*(?:\|\||\?\?)\s*{_LITERAL}\s*\}}")


def _split_style_entries(body: str) -> list[str]:
    """Split a style object body on top-level commas."""
    entries: list[str] = []
    depth = 0
    quote = ""
    current: list[str] = []
    for ch in body:
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'`":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            entries.append("".join(current))
            current = []
            continue
        current.append(ch)
    entries.append("".join(current))
    return [e.strip() for e in entries if e.strip()]


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'`":
        return value[1:-1]
    return value


def _style_object_to_css(m: re.Match[str]) -> str:
    declarations = []
    for entry in _split_style_entries(m.group(1)):
        key, sep, value = entry.partition(":")
        if not sep:
            continue
        key = _unquote(key)
        if not key:
            continue
        declarations.append(f"{camel_to_kebab(key)}: {_unquote(value)}")
    return 'style="{}"'.format("; ".join(declarations))


def _literal_value(m: re.Match[str]) -> str:
    for group in ("dq", "sq", "num"):
        if m.group(group) is not None:
            return m.group(group)
    return ""


def coerce_expressions(svg: str, opts: NormalizeOptions) -> str:
    svg = _NUMERIC_EXPR_RE.sub(r'\1="\2"', svg)
    svg = _STRING_EXPR_RE.sub(lambda m: '{}="{}"'.format(m.group(1), m.group(2) or m.group(3) or ""), svg)
    svg = _STYLE_OBJECT_RE.sub(_style_object_to_css, svg)
    svg = _SELF_TERNARY_RE.sub(lambda m: f'{m.group(1)}="{_literal_value(m)}"', svg)
    return _OR_FALLBACK_RE.sub(lambda m: f'{m.group(1)}="{_literal_value(m)}"', svg)


# --- 5. currentColor --------------------------------------------------------


def substitute_current_color(svg: str, opts: NormalizeOptions) -> str:
    return svg.replace("currentColor", opts.default_fill_color)


# --- 6. attribute renaming --------------------------------------------------

_ATTR_NAME_RE = re.compile(r"(\s)(\w+)=")


def rename_attributes(svg: str, opts: NormalizeOptions) -> str:
    svg = _ATTR_NAME_RE.sub(lambda m: f"{m.group(1)}{convert_jsx_attr(m.group(2))}=", svg)
    # The generic kebab rule turns viewBox into view-box; restore the SVG spelling.
    return svg.replace("view-box=", "viewBox=")


# --- 7. unresolved expressions ----------------------------------------------

# One level of nested braces, e.g. onClick={() => {}} or style={{ ...s }}.
_RESIDUAL_EXPR_RE = re.compile(r"\s+[\w:-]+=\{(?:[^{}]|\{[^{}]*\})*\}")


def strip_unresolved_expressions(svg: str, opts: NormalizeOptions) -> str:
    return _RESIDUAL_EXPR_RE.sub("", svg)


# --- 8. dimensions ----------------------------------------------------------

_PATH_DATA_RE = re.compile(r"""(?<![\w:-])d=(?:"([^"]*)"|'([^']*)')""")
_NUMBER_RE = re.compile(r"[-+]?[0-9]*\.?[0-9]+")


def _bucket_size(max_coord: float) -> int:
    for size in _VIEW_BOX_BUCKETS:
        if max_coord <= size:
            return size
    return int(math.ceil(max_coord / 10.0) * 10)


def infer_view_box_size(svg: str) -> int | None:
    """Guess a square viewBox edge from the largest path coordinate.

    Returns None when no path data carries a usable coordinate.
    """
    max_coord = 0.0
    for m in _PATH_DATA_RE.finditer(svg):
        data = m.group(1) if m.group(1) is not None else m.group(2)
        for token in _NUMBER_RE.findall(data):
            value = abs(float(token))
            if max_coord < value < _MAX_COORD:
                max_coord = value
    if max_coord <= 0:
        return None
    return _bucket_size(max_coord)


def complete_dimensions(svg: str, opts: NormalizeOptions) -> str:
    width = format_number(opts.width_or_default)
    height = format_number(opts.height_or_default)

    if not _root_has_attr(svg, "viewBox"):
        if opts.view_box:
            view_box = opts.view_box
        else:
            size = infer_view_box_size(svg)
            view_box = f"0 0 {size} {size}" if size else f"0 0 {width} {height}"
        svg = _add_root_attr(svg, "viewBox", view_box)

    if not _root_has_attr(svg, "xmlns"):
        svg = _add_root_attr(svg, "xmlns", SVG_NS)
    if not _root_has_attr(svg, "width"):
        svg = _add_root_attr(svg, "width", width)
    if not _root_has_attr(svg, "height"):
        svg = _add_root_attr(svg, "height", height)
    return svg


def _strip(svg: str, opts: NormalizeOptions) -> str:
    return svg.strip()


Stage = Callable[[str, NormalizeOptions], str]

PIPELINE: tuple[tuple[str, Stage], ...] = (
    ("unwrap_wrapper_tags", unwrap_wrapper_tags),
    ("strip_host_only_attrs", strip_host_only_attrs),
    ("strip_non_svg_visual_attrs", strip_non_svg_visual_attrs),
    ("coerce_expressions", coerce_expressions),
    ("substitute_current_color", substitute_current_color),
    ("rename_attributes", rename_attributes),
    ("strip_unresolved_expressions", strip_unresolved_expressions),
    ("complete_dimensions", complete_dimensions),
    ("strip", _strip),
)


def jsx_to_svg(
    fragment: str,
    *,
    default_fill_color: str = DEFAULT_FILL_COLOR,
    width: float | None = None,
    height: float | None = None,
    view_box: str | None = None,
) -> str:
    """Convert one SVG/Icon-rooted JSX fragment into standalone SVG markup.

    `width`, `height` and `view_box` are hints taken from the surrounding
    declaration; explicit values on the root element always win.

    Raises:
    - SvgMarkupError if no `<svg>` root remains after unwrapping.
    """
    opts = NormalizeOptions(
        default_fill_color=default_fill_color,
        width=width,
        height=height,
        view_box=view_box,
    )
    svg = fragment
    for name, stage in PIPELINE:
        svg = stage(svg, opts)
        if name == "unwrap_wrapper_tags" and _root_tag_span(svg) is None:
            raise SvgMarkupError("fragment has no <svg> root element")
    return svg
