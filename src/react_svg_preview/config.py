"""Configuration persistence for react-svg-preview.

The configuration is stored in a JSON file under
`$XDG_CONFIG_HOME/react-svg-preview/config.json` (`~/.config` when unset).
`REACT_SVG_PREVIEW_CONFIG_DIR` overrides the directory.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

APP_DIR_NAME: Final[str] = "react-svg-preview"
CONFIG_FILE_NAME: Final[str] = "config.json"


def _default_config_dir() -> Path:
    override = os.getenv("REACT_SVG_PREVIEW_CONFIG_DIR")
    if override:
        return Path(override)
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_config_path() -> Path:
    return _default_config_dir() / CONFIG_FILE_NAME


@dataclass
class PreviewConfig:
    """User-configurable settings.

    Notes:
    - `default_fill_color` replaces `currentColor` during conversion; it is the
      only setting the scanner sees.
    - `icon_size` and `hover_preview_size` are pixel sizes for the preview surfaces.
    """

    enabled: bool = True
    show_inline_icon: bool = True
    show_hover_preview: bool = True
    icon_size: int = 16
    hover_preview_size: int = 128
    default_fill_color: str = "#888888"

    cache_max_items: int = 64

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "show_inline_icon": self.show_inline_icon,
            "show_hover_preview": self.show_hover_preview,
            "icon_size": self.icon_size,
            "hover_preview_size": self.hover_preview_size,
            "default_fill_color": self.default_fill_color,
            "cache_max_items": self.cache_max_items,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "PreviewConfig":
        cfg = cls()
        for k, v in raw.items():
            if hasattr(cfg, k):
                setattr(cfg, k, v)
        return cfg

    @classmethod
    def load(cls, path: Path | None = None) -> "PreviewConfig":
        path = path or get_config_path()
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except Exception:
            return cls()
        if not isinstance(data, dict):
            return cls()
        return cls.from_dict(data)

    def save(self, path: Path | None = None) -> None:
        path = path or get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
