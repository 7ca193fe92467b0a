"""Menu items and the rules that pick and order them against the input."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Item", "cistrstr", "read_items", "match_items"]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _fold(s: str) -> str:
    """Lower-case ASCII letters only, leaving every other character alone."""
    return s.translate(_ASCII_LOWER)


@dataclass(eq=False)
class Item:
    """One line of menu input; ``out`` marks it for multi-selection output."""

    text: str
    out: bool = False


def cistrstr(haystack: str, needle: str) -> int:
    """Return the index of ``needle`` in ``haystack`` ignoring ASCII case, or -1."""
    if not needle:
        return 0
    return _fold(haystack).find(_fold(needle))


def _contains(haystack: str, needle: str, case_insensitive: bool) -> bool:
    if case_insensitive:
        return cistrstr(haystack, needle) >= 0
    return needle in haystack


def _equal(a: str, b: str, case_insensitive: bool) -> bool:
    if case_insensitive:
        return _fold(a) == _fold(b)
    return a == b


def _starts_with(text: str, prefix: str, case_insensitive: bool) -> bool:
    if case_insensitive:
        return _fold(text).startswith(_fold(prefix))
    return text.startswith(prefix)


def read_items(stream: Iterable[str]) -> list[Item]:
    """Read one item per line, dropping the trailing newline of each."""
    items = []
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        items.append(Item(line))
    return items


def match_items(
    items: Iterable[Item], text: str, case_insensitive: bool = False
) -> list[Item]:
    """Return the items matching every space-separated token of ``text``.

    Exact matches of the whole input come first, then items starting with
    the first token, then the remaining substring matches; input order is
    kept within each group.
    """
    tokens = [token for token in text.split(" ") if token]
    exact: list[Item] = []
    prefix: list[Item] = []
    substring: list[Item] = []
    for item in items:
        if not all(_contains(item.text, token, case_insensitive) for token in tokens):
            continue
        if not tokens or _equal(text, item.text, case_insensitive):
            exact.append(item)
        elif _starts_with(item.text, tokens[0], case_insensitive):
            prefix.append(item)
        else:
            substring.append(item)
    return exact + prefix + substring