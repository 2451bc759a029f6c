"""Editor-facing preview service: cached scans, gutter icons and hovers."""

from __future__ import annotations

import hashlib
import logging
import re
import time
from dataclasses import dataclass
from typing import Optional

from react_svg_preview.config import PreviewConfig
from react_svg_preview.convert.data_uri import placeholder_svg, svg_to_base64_data_uri, svg_to_data_uri
from react_svg_preview.convert.svg_attrs import format_number, parse_view_box
from react_svg_preview.scan.cache import LruCache
from react_svg_preview.scan.component import ParsedComponent, find_component_at_line
from react_svg_preview.scan.scanner import scan_document

SUPPORTED_LANGUAGES: frozenset[str] = frozenset(
    {"typescriptreact", "javascriptreact", "typescript", "javascript", "xml", "svg"}
)


_SVG_ROOT_RE = re.compile(r"<svg\b")


def is_supported_language(language_id: str) -> bool:
    return language_id in SUPPORTED_LANGUAGES


@dataclass(frozen=True)
class Document:
    """Snapshot of an open document as handed over by the editor."""

    uri: str
    file_name: str
    text: str
    language_id: str = ""


@dataclass(frozen=True)
class GutterIcon:
    line: int
    name: str
    data_uri: str
    size_px: int


@dataclass(frozen=True)
class HoverPreview:
    component: ParsedComponent
    width_px: int
    height_px: int
    data_uri: str
    markdown: str


def _text_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def preview_size(component: ParsedComponent, max_px: int) -> tuple[int, int]:
    """Fit the component into a `max_px` square, keeping its aspect ratio."""
    ratio: float | None = None
    if component.view_box:
        vb = parse_view_box(component.view_box)
        if vb is not None:
            ratio = vb[0] / vb[1]
    elif component.width and component.height:
        ratio = component.width / component.height

    w = h = int(max_px)
    if ratio is None:
        return w, h
    if ratio > 1:
        h = int(round(max_px / ratio))
    else:
        w = int(round(max_px * ratio))
    return max(1, w), max(1, h)


def _has_svg_root(component: ParsedComponent) -> bool:
    return _SVG_ROOT_RE.search(component.rendered_svg) is not None


def _previewable_svg(component: ParsedComponent, size: int) -> str:
    if _has_svg_root(component):
        return component.rendered_svg
    return placeholder_svg(size)


def _hover_markdown(component: ParsedComponent, data_uri: str, width_px: int, height_px: int) -> str:
    parts = [
        f"**{component.name}**",
        f'<img src="{data_uri}" width="{width_px}" height="{height_px}" />',
    ]
    if not _has_svg_root(component):
        parts.append("*(Preview not available)*")
    if component.view_box:
        parts.append(f"*viewBox:* `{component.view_box}`")
    if component.width and component.height:
        parts.append(f"*size:* {format_number(component.width)} × {format_number(component.height)}")
    return "\n\n".join(parts)


class PreviewService:
    """Owns the document-keyed scan cache and answers editor queries.

    The editor must call `on_document_changed` / `on_document_closed`; cached
    entries are additionally checked against a hash of the current text so a
    missed change event cannot serve stale components. Documents whose
    `language_id` is set but not supported are never scanned.
    """

    def __init__(self, config: PreviewConfig) -> None:
        self._log = logging.getLogger("react_svg_preview.preview")
        self._cfg = config
        self._cache: LruCache[str, tuple[str, tuple[ParsedComponent, ...]]] = LruCache(
            max(1, int(config.cache_max_items))
        )

    @property
    def config(self) -> PreviewConfig:
        return self._cfg

    def set_config(self, config: PreviewConfig) -> None:
        old = self._cfg
        self._cfg = config
        if int(config.cache_max_items) != int(old.cache_max_items):
            self._cache = LruCache(max(1, int(config.cache_max_items)))
        elif config.default_fill_color != old.default_fill_color or not config.enabled:
            # Rendered markup bakes in the fill color.
            self.clear_cache()

    def clear_cache(self) -> None:
        self._log.debug("cache_cleared entries=%d", len(self._cache))
        self._cache.clear()

    def on_document_changed(self, uri: str) -> None:
        self._cache.pop(uri)

    def on_document_closed(self, uri: str) -> None:
        self._cache.pop(uri)

    def components(self, document: Document) -> list[ParsedComponent]:
        if document.language_id and not is_supported_language(document.language_id):
            return []

        text_hash = _text_hash(document.text)
        cached = self._cache.get(document.uri)
        if cached is not None and cached[0] == text_hash:
            return list(cached[1])

        t0 = time.perf_counter()
        components = scan_document(
            document.text,
            document.file_name,
            default_fill_color=self._cfg.default_fill_color,
        )
        evicted = self._cache.put(document.uri, (text_hash, tuple(components)))
        self._log.info(
            "scan uri=%s components=%d ms=%.1f cached=%d",
            document.uri,
            len(components),
            (time.perf_counter() - t0) * 1000.0,
            len(self._cache),
        )
        for uri in evicted:
            self._log.debug("cache_evicted uri=%s", uri)
        return components

    def gutter_icons(self, document: Document) -> list[GutterIcon]:
        if not self._cfg.enabled or not self._cfg.show_inline_icon:
            return []
        size = int(self._cfg.icon_size)
        return [
            GutterIcon(
                line=c.start_line,
                name=c.name,
                data_uri=svg_to_data_uri(_previewable_svg(c, size)),
                size_px=size,
            )
            for c in self.components(document)
        ]

    def hover(self, document: Document, line: int) -> Optional[HoverPreview]:
        if not self._cfg.enabled or not self._cfg.show_hover_preview:
            return None
        component = find_component_at_line(self.components(document), line)
        if component is None:
            return None

        w, h = preview_size(component, int(self._cfg.hover_preview_size))
        data_uri = svg_to_base64_data_uri(_previewable_svg(component, max(w, h)))
        return HoverPreview(
            component=component,
            width_px=w,
            height_px=h,
            data_uri=data_uri,
            markdown=_hover_markdown(component, data_uri, w, h),
        )
