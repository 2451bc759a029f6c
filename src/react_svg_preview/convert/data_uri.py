"""Data URI encoding for rendered SVG markup."""

from __future__ import annotations

import base64
from urllib.parse import quote


def svg_to_data_uri(svg: str) -> str:
    # encodeURIComponent's safe set minus `'`, so the URI fits in a quoted HTML attribute.
    encoded = quote(svg, safe="-_.!~*()")
    return f"data:image/svg+xml,{encoded}"


def svg_to_base64_data_uri(svg: str) -> str:
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def placeholder_svg(size: int = 16) -> str:
    """A neutral "?" tile shown when a component cannot be previewed."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}">\n'
        f'  <rect width="{size}" height="{size}" fill="#f0f0f0" rx="2"/>\n'
        '  <text x="50%" y="50%" dominant-baseline="central" text-anchor="middle" '
        'font-size="8" fill="#999">?</text>\n'
        "</svg>"
    )
