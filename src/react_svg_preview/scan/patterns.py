"""Declaration patterns for SVG icon components.

Each pattern captures a `name` and a `fragment` group. The fragment spans the
root element from its opening tag to its closing tag; the trailing `\\s*\\)`
anchor makes the lazy body extend past a nested `</svg>` when the root is a
wrapper such as `<Icon>`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

ROOT_TAGS = ("svg", "Svg", "Icon")

_ROOT = "(?:" + "|".join(ROOT_TAGS) + ")"
_ELEMENT = rf"(?P<fragment><{_ROOT}\b[\s\S]*?</{_ROOT}>)"
# Lazy body that never runs into the next exported declaration.
_BODY = r"(?:(?!\bexport\s)[\s\S])*?"
_PARAMS = r"\([^()]*\)"
_TYPE_ANNOTATION = r"(?::\s*[^=]+)?"
_ARROW_BODY = rf"=>\s*(?:\{{{_BODY}return\s*)?\(\s*{_ELEMENT}\s*\)"


@dataclass(frozen=True)
class DeclarationPattern:
    kind: str
    regex: re.Pattern[str]


PATTERNS: tuple[DeclarationPattern, ...] = (
    # export function Name() { return (<svg>...</svg>) }
    DeclarationPattern(
        "function",
        re.compile(
            r"export\s+(?:default\s+)?function\s+(?P<name>\w+)\s*"
            rf"{_PARAMS}\s*(?::\s*[^{{]+)?\s*\{{{_BODY}return\s*\(\s*{_ELEMENT}\s*\)"
        ),
    ),
    # export const Name = () => (<svg>...</svg>)  |  () => { return (...) }
    DeclarationPattern(
        "arrow",
        re.compile(rf"export\s+const\s+(?P<name>\w+)\s*{_TYPE_ANNOTATION}\s*=\s*{_PARAMS}\s*{_ARROW_BODY}"),
    ),
    # export const Name = forwardRef<...>((props, ref) => ...)
    DeclarationPattern(
        "forward_ref",
        re.compile(
            rf"export\s+const\s+(?P<name>\w+)\s*=\s*(?:React\.)?forwardRef[^(]*\(\s*{_PARAMS}\s*{_ARROW_BODY}"
        ),
    ),
    # const Name = memo((props) => ...)
    DeclarationPattern(
        "memo",
        re.compile(
            rf"(?:export\s+)?const\s+(?P<name>\w+)\s*=\s*(?:React\.)?memo\s*\(\s*{_PARAMS}\s*{_ARROW_BODY}"
        ),
    ),
)
