"""Interactive menu state: input text, cursor, matches, paging and keys."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable

from pickmenu.matching import Item, match_items

__all__ = ["Outcome", "Menu", "MAX_TEXT_BYTES"]

# Largest input line, in UTF-8 bytes, that the menu accepts.
MAX_TEXT_BYTES = 8191

_CTRL_REMAP = {
    "a": "Home",
    "b": "Left",
    "c": "Escape",
    "d": "Delete",
    "e": "End",
    "f": "Right",
    "g": "Escape",
    "h": "BackSpace",
    "i": "Tab",
    "n": "Down",
    "p": "Up",
}

_ALT_REMAP = {
    "g": "Home",
    "G": "End",
    "k": "Up",
    "l": "Next",
    "h": "Prior",
    "j": "Down",
}


class Outcome(enum.Enum):
    """What the caller should do after a key has been handled."""

    CONTINUE = "continue"
    ACCEPT = "accept"
    CANCEL = "cancel"
    PASTE_PRIMARY = "paste-primary"
    PASTE_CLIPBOARD = "paste-clipboard"


def _is_control(text: str) -> bool:
    if not text:
        return True
    code = ord(text[0])
    return code < 32 or code == 127


def _truncate_bytes(s: str, limit: int) -> str:
    return s.encode("utf-8")[:limit].decode("utf-8", errors="ignore")


class Menu:
    """Selection state of the menu, independent of any display.

    In vertical mode (``lines`` > 0) a page holds ``lines`` items. In
    horizontal mode a page holds as many items as fit in ``width``, each
    measured by ``text_width`` and clamped to ``width``.
    """

    word_delimiters = " "

    def __init__(
        self,
        items: Iterable[Item],
        lines: int = 0,
        case_insensitive: bool = False,
        text_width: Callable[[str], int] = len,
        width: int = 80,
    ) -> None:
        self.items: list[Item] = list(items)
        count = len(self.items)
        # A negative count behaves like a huge one: clamped to the item count.
        self.lines = count if lines < 0 else min(lines, count)
        self.case_insensitive = case_insensitive
        self.text_width = text_width
        self.width = width
        self.text = ""
        self.cursor = 0
        self.matches: list[Item] = []
        self.curr: int | None = None
        self.sel: int | None = None
        self.next: int | None = None
        self.prev: int | None = None
        self._print_input = False
        self.match()

    @property
    def selected(self) -> Item | None:
        """The highlighted item, if any."""
        return None if self.sel is None else self.matches[self.sel]

    def match(self) -> None:
        """Recompute the matches for the current input and reset the view."""
        self.matches = match_items(self.items, self.text, self.case_insensitive)
        self.curr = self.sel = 0 if self.matches else None
        self.calc_offsets()

    def _item_size(self, item: Item, limit: int) -> int:
        if self.lines > 0:
            return 1
        return min(self.text_width(item.text), limit)

    def calc_offsets(self) -> None:
        """Find where the next and previous pages begin."""
        limit = self.lines if self.lines > 0 else self.width
        self.next = None
        self.prev = self.curr
        if self.curr is None:
            return
        used = 0
        for index, item in enumerate(self.matches[self.curr:], start=self.curr):
            used += self._item_size(item, limit)
            if used > limit:
                self.next = index
                break
        used = 0
        while self.prev > 0:
            used += self._item_size(self.matches[self.prev - 1], limit)
            if used > limit:
                break
            self.prev -= 1

    def visible_items(self) -> list[Item]:
        """Items on the current page."""
        if self.curr is None:
            return []
        return self.matches[self.curr:self.next]

    def insert(self, s: str) -> None:
        """Insert ``s`` at the cursor, unless the input would grow too long."""
        if len(self.text.encode("utf-8")) + len(s.encode("utf-8")) > MAX_TEXT_BYTES:
            return
        self.text = self.text[:self.cursor] + s + self.text[self.cursor:]
        self.cursor += len(s)
        self.match()

    def delete_left(self, count: int) -> None:
        """Remove ``count`` characters before the cursor."""
        count = min(count, self.cursor)
        self.text = self.text[:self.cursor - count] + self.text[self.cursor:]
        self.cursor -= count
        self.match()

    def kill_to_end(self) -> None:
        """Remove everything from the cursor to the end of the input."""
        self.text = self.text[:self.cursor]
        self.match()

    def kill_to_start(self) -> None:
        """Remove everything before the cursor."""
        self.delete_left(self.cursor)

    def delete_word(self) -> None:
        """Remove the word (and delimiters after it) before the cursor."""
        delims = self.word_delimiters
        while self.cursor > 0 and self.text[self.cursor - 1] in delims:
            self.delete_left(1)
        while self.cursor > 0 and self.text[self.cursor - 1] not in delims:
            self.delete_left(1)

    def move_word_edge(self, direction: int) -> None:
        """Move the cursor to the start (<0) or end (>0) of a word."""
        delims = self.word_delimiters
        if direction < 0:
            while self.cursor > 0 and self.text[self.cursor - 1] in delims:
                self.cursor -= 1
            while self.cursor > 0 and self.text[self.cursor - 1] not in delims:
                self.cursor -= 1
        else:
            size = len(self.text)
            while self.cursor < size and self.text[self.cursor] in delims:
                self.cursor += 1
            while self.cursor < size and self.text[self.cursor] not in delims:
                self.cursor += 1

    def _insert_typed(self, text: str) -> Outcome:
        if not _is_control(text):
            self.insert(text)
        return Outcome.CONTINUE

    def handle_key(
        self,
        key: str | None,
        text: str = "",
        ctrl: bool = False,
        alt: bool = False,
        shift: bool = False,
    ) -> Outcome:
        """Handle one key press.

        ``key`` is a key symbol name such as ``"Return"`` or ``"a"``, or
        ``None`` for text composed by an input method; ``text`` is the
        string the key produced.
        """
        if key is None:
            return self._insert_typed(text)

        if ctrl:
            if key in _CTRL_REMAP:
                key = _CTRL_REMAP[key]
            elif key in ("j", "J", "m", "M"):
                key = "Return"
                ctrl = False
            elif key == "k":
                self.kill_to_end()
                return self._insert_typed(text)
            elif key == "u":
                self.kill_to_start()
                return self._insert_typed(text)
            elif key == "w":
                self.delete_word()
                return self._insert_typed(text)
            elif key in ("y", "Y"):
                return Outcome.PASTE_CLIPBOARD if shift else Outcome.PASTE_PRIMARY
            elif key in ("Left", "KP_Left"):
                self.move_word_edge(-1)
                return Outcome.CONTINUE
            elif key in ("Right", "KP_Right"):
                self.move_word_edge(+1)
                return Outcome.CONTINUE
            elif key == "bracketleft":
                return Outcome.CANCEL
            else:
                return Outcome.CONTINUE
        elif alt:
            if key == "b":
                self.move_word_edge(-1)
                return Outcome.CONTINUE
            if key == "f":
                self.move_word_edge(+1)
                return Outcome.CONTINUE
            if key in _ALT_REMAP:
                key = _ALT_REMAP[key]
            elif key not in ("Return", "KP_Enter"):
                return Outcome.CONTINUE

        return self._dispatch(key, text, alt, shift)

    def _dispatch(self, key: str, text: str, alt: bool, shift: bool) -> Outcome:
        if key in ("Delete", "KP_Delete"):
            if self.cursor >= len(self.text):
                return Outcome.CONTINUE
            self.cursor += 1
            key = "BackSpace"
        if key == "BackSpace":
            if self.cursor > 0:
                self.delete_left(1)
            return Outcome.CONTINUE
        if key in ("End", "KP_End"):
            self._end()
            return Outcome.CONTINUE
        if key == "Escape":
            return Outcome.CANCEL
        if key in ("Home", "KP_Home"):
            if self.sel == (0 if self.matches else None):
                self.cursor = 0
            else:
                self.sel = self.curr = 0
                self.calc_offsets()
            return Outcome.CONTINUE
        if key in ("Left", "KP_Left"):
            if self.cursor > 0 and (not self.sel or self.lines > 0):
                self.cursor -= 1
                return Outcome.CONTINUE
            if self.lines > 0:
                return Outcome.CONTINUE
            key = "Up"
        if key in ("Up", "KP_Up"):
            if self.sel:
                self.sel -= 1
                if self.sel + 1 == self.curr:
                    self.curr = self.prev
                    self.calc_offsets()
            return Outcome.CONTINUE
        if key in ("Next", "KP_Next"):
            if self.next is not None:
                self.sel = self.curr = self.next
                self.calc_offsets()
            return Outcome.CONTINUE
        if key in ("Prior", "KP_Prior"):
            if self.prev is not None:
                self.sel = self.curr = self.prev
                self.calc_offsets()
            return Outcome.CONTINUE
        if key in ("Return", "KP_Enter"):
            if shift:
                self._print_input = True
                return Outcome.ACCEPT
            if alt:
                if self.selected is not None:
                    self.selected.out = not self.selected.out
                return Outcome.CONTINUE
            return Outcome.ACCEPT
        if key in ("Right", "KP_Right"):
            if self.cursor < len(self.text):
                self.cursor += 1
                return Outcome.CONTINUE
            if self.lines > 0:
                return Outcome.CONTINUE
            key = "Down"
        if key in ("Down", "KP_Down"):
            if self.sel is not None and self.sel + 1 < len(self.matches):
                self.sel += 1
                if self.sel == self.next:
                    self.curr = self.next
                    self.calc_offsets()
            return Outcome.CONTINUE
        if key == "Tab":
            if self.selected is not None:
                self.text = _truncate_bytes(self.selected.text, MAX_TEXT_BYTES)
                self.cursor = len(self.text)
                self.match()
            return Outcome.CONTINUE
        return self._insert_typed(text)

    def _end(self) -> None:
        if self.cursor < len(self.text):
            self.cursor = len(self.text)
            return
        last = len(self.matches) - 1 if self.matches else None
        if self.next is not None:
            # Jump to the end of the list and lay pages out backwards.
            self.curr = last
            self.calc_offsets()
            self.curr = self.prev
            self.calc_offsets()
            while self.next is not None and self.curr + 1 < len(self.matches):
                self.curr += 1
                self.calc_offsets()
        self.sel = last

    def paste(self, data: str) -> None:
        """Insert pasted data up to its first newline."""
        self.insert(data.split("\n", 1)[0])

    def output_lines(self) -> list[str]:
        """Lines to print once the menu has been accepted."""
        if self._print_input:
            return [self.text]
        marked = [item.text for item in self.items if item.out]
        if marked:
            return marked
        selected = self.selected
        return [selected.text if selected is not None else self.text]