"""Default appearance and behaviour settings for the menu."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

__all__ = ["Scheme", "Config", "default_config"]


class Scheme(enum.IntEnum):
    """Colour schemes used when drawing the menu."""

    NORM = 0
    SEL = 1
    OUT = 2
    SEL_OUT = 3


def _default_colors() -> dict[Scheme, tuple[str, str]]:
    # (foreground, background)
    return {
        Scheme.NORM: ("#bbbbbb", "#222222"),
        Scheme.SEL: ("#eeeeee", "#005577"),
        Scheme.OUT: ("#000000", "#00ffff"),
        Scheme.SEL_OUT: ("#00ffff", "#005577"),
    }


@dataclass
class Config:
    """Settings that command-line options may override."""

    topbar: bool = True
    min_width: int = 700
    fonts: list[str] = field(default_factory=lambda: ["IBM Plex Mono:size=13"])
    prompt: str | None = None
    colors: dict[Scheme, tuple[str, str]] = field(default_factory=_default_colors)
    lines: int = 10
    word_delimiters: str = " "
    border_width: int = 3


def default_config() -> Config:
    """Return a fresh configuration holding the default settings."""
    return Config()