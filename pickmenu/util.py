"""Small shared helpers: fatal errors and their messages."""

from __future__ import annotations

import sys

__all__ = ["FatalError", "die"]


class FatalError(Exception):
    """An error that ends the program with a message and a non-zero status."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


def _current_error_text() -> str | None:
    error = sys.exc_info()[1]
    if error is None:
        return None
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    text = str(error)
    return text or None


def die(message: str, *args: object) -> FatalError:
    """Raise a FatalError carrying the formatted message.

    When the message ends with a colon, the text of the exception currently
    being handled (if any) is appended after a space.
    """
    text = message % args if args else message
    if message.endswith(":"):
        reason = _current_error_text()
        if reason is not None:
            text = f"{text} {reason}"
    raise FatalError(text)