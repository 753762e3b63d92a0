# linktext/link_config.py
"""
Appearance knobs for LinkedTextLabel, read from the environment.

Env knobs (optional):
- LINKTEXT_LINK_COLOR: default "#0a84ff"
- LINKTEXT_LINK_UNDERLINE: "1" or "0", default "0"
- LINKTEXT_LINE_SPACING: pixels between lines, default 4
"""

from __future__ import annotations
import os
from dataclasses import dataclass

from linktext.logger import get_logger

log = get_logger("linktext.config")

DEFAULT_FONT = "TkDefaultFont"
DEFAULT_TEXT_COLOR = "black"
DEFAULT_LINK_COLOR = "#0a84ff"
DEFAULT_LINE_SPACING = 4


@dataclass(frozen=True)
class LinkStyle:
    font: object = DEFAULT_FONT
    text_color: str = DEFAULT_TEXT_COLOR
    link_color: str = DEFAULT_LINK_COLOR
    underline: bool = False
    line_spacing: int = DEFAULT_LINE_SPACING


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return bool(int(raw))
    except ValueError:
        log.warning("Ignoring %s=%r; expected 0 or 1", name, raw)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning("Ignoring %s=%r; expected an integer", name, raw)
        return default
    if value < 0:
        log.warning("Ignoring %s=%r; must not be negative", name, raw)
        return default
    return value


def load_style(font=None, text_color=None, link_color=None,
               underline=None, line_spacing=None) -> LinkStyle:
    """Merge explicit arguments over env knobs over defaults."""
    if link_color is None:
        link_color = os.getenv("LINKTEXT_LINK_COLOR") or DEFAULT_LINK_COLOR
    if underline is None:
        underline = _env_flag("LINKTEXT_LINK_UNDERLINE", False)
    if line_spacing is None:
        line_spacing = _env_int("LINKTEXT_LINE_SPACING", DEFAULT_LINE_SPACING)
    return LinkStyle(
        font=font if font is not None else DEFAULT_FONT,
        text_color=text_color if text_color is not None else DEFAULT_TEXT_COLOR,
        link_color=link_color,
        underline=bool(underline),
        line_spacing=int(line_spacing),
    )
