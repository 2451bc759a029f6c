"""Raw SVG document detection."""

from __future__ import annotations

import re

_SVG_OPEN_RE = re.compile(r"<svg\b", flags=re.IGNORECASE)
_SVG_CLOSE_RE = re.compile(r"</svg\s*>", flags=re.IGNORECASE)
_BOM = "\ufeff"


def trim_document(text: str) -> str:
    """Strip surrounding whitespace and a leading byte-order mark."""
    return text.strip().lstrip(_BOM).strip()


def looks_like_raw_svg(text: str) -> bool:
    """True if the document itself is SVG (starts with `<svg` or an XML prolog)."""
    if not text:
        return False
    trimmed = trim_document(text)
    return trimmed.startswith("<svg") or trimmed.startswith("<?xml")


def is_raw_svg_document(text: str, file_name: str) -> bool:
    """Decide between raw-file scanning and JSX declaration scanning."""
    if looks_like_raw_svg(text):
        return True
    return file_name.lower().endswith(".svg")


def extract_svg_root(text: str) -> str | None:
    """Return the span from the first `<svg` to the last `</svg>` (inclusive).

    Returns None if the text does not contain a complete SVG element.
    """
    open_m = _SVG_OPEN_RE.search(text)
    if open_m is None:
        return None
    close_m = None
    for m in _SVG_CLOSE_RE.finditer(text, open_m.end()):
        close_m = m
    if close_m is None:
        return None
    return text[open_m.start() : close_m.end()]
