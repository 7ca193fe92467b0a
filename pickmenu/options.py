"""Command-line options of the menu program."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field

from pickmenu.config import Config, Scheme, default_config

__all__ = ["MenuOptions", "MenuUsageError", "parse_options", "USAGE", "VERSION"]

VERSION = "5.4"

USAGE = (
    "usage: pickmenu [-bfiv] [-l lines] [-p prompt] [-fn font] [-m monitor]\n"
    "             [-nb color] [-nf color] [-sb color] [-sf color] [-w windowid]"
)


class MenuUsageError(Exception):
    """Raised when the command line cannot be understood."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


def _atoi(s: str) -> int:
    """Leading decimal integer of ``s``; 0 when there is none."""
    s = s.lstrip(" \t\n\v\f\r")
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    digits = ""
    for ch in s:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _strtol_auto(s: str) -> int:
    """Integer in decimal, octal (leading 0) or hex (leading 0x); 0 if none."""
    s = s.lstrip(" \t\n\v\f\r")
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s[:2].lower() == "0x" and s[2:3] and s[2].lower() in "0123456789abcdef":
        base, s, alphabet = 16, s[2:], "0123456789abcdef"
    elif s.startswith("0"):
        base, alphabet = 8, "01234567"
    else:
        base, alphabet = 10, "0123456789"
    digits = ""
    for ch in s:
        if ch.lower() not in alphabet:
            break
        digits += ch
    return sign * int(digits, base) if digits else 0


@dataclass
class MenuOptions:
    """Settings chosen on the command line."""

    config: Config = field(default_factory=default_config)
    fast: bool = False
    case_insensitive: bool = False
    monitor: int = -1
    embed: str | None = None
    show_version: bool = False

    @property
    def embed_window(self) -> int:
        """Numeric id of the window to embed into; 0 when none is given."""
        return _strtol_auto(self.embed) if self.embed else 0

    @property
    def version_text(self) -> str:
        return f"pickmenu-{VERSION}"


def _set_color(config: Config, scheme: Scheme, index: int, value: str) -> None:
    fg, bg = config.colors[scheme]
    config.colors[scheme] = (value, bg) if index == 0 else (fg, value)


def parse_options(argv: Iterable[str], config: Config | None = None) -> MenuOptions:
    """Parse arguments (without the program name) over a copy of ``config``.

    ``-v`` stops parsing at once and sets ``show_version``.
    """
    args = list(argv)
    options = MenuOptions(
        config=copy.deepcopy(config) if config is not None else default_config()
    )
    cfg = options.config
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "-v":
            options.show_version = True
            return options
        if arg == "-b":
            cfg.topbar = False
        elif arg == "-f":
            options.fast = True
        elif arg == "-i":
            options.case_insensitive = True
        elif i + 1 == len(args):
            raise MenuUsageError()
        else:
            i += 1
            value = args[i]
            if arg == "-l":
                cfg.lines = _atoi(value)
            elif arg == "-m":
                options.monitor = _atoi(value)
            elif arg == "-p":
                cfg.prompt = value
            elif arg == "-fn":
                cfg.fonts[0] = value
            elif arg == "-nb":
                _set_color(cfg, Scheme.NORM, 1, value)
            elif arg == "-nf":
                _set_color(cfg, Scheme.NORM, 0, value)
            elif arg == "-sb":
                _set_color(cfg, Scheme.SEL, 1, value)
            elif arg == "-sf":
                _set_color(cfg, Scheme.SEL, 0, value)
            elif arg == "-w":
                options.embed = value
            else:
                raise MenuUsageError()
        i += 1
    return options