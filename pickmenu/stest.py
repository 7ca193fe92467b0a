"""Filter a list of files by properties, in the manner of test(1)."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

__all__ = ["StestOptions", "StestUsageError", "parse_args", "check", "run", "main"]

_SIMPLE_FLAGS = "abcdefghlpqrsuvwx"
_PATH_MAX = 4096
_USAGE = "usage: {prog} [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]"


class StestUsageError(Exception):
    """Raised when the command line cannot be understood."""


@dataclass
class StestOptions:
    """Selected tests. ``newer_than``/``older_than`` are mtimes in seconds."""

    flags: set[str] = field(default_factory=set)
    newer_than: int | None = None
    older_than: int | None = None


def _mtime(st: os.stat_result) -> int:
    return st.st_mtime_ns // 1_000_000_000


def _reference_time(path: str) -> int | None:
    try:
        return _mtime(os.stat(path))
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
        return None


def parse_args(argv: Iterable[str]) -> tuple[StestOptions, list[str]]:
    """Parse option arguments; return the options and remaining paths."""
    args = list(argv)
    options = StestOptions()
    i = 0
    while i < len(args):
        arg = args[i]
        if not arg.startswith("-") or len(arg) == 1:
            break
        i += 1
        if arg == "--":
            break
        for pos, letter in enumerate(arg[1:], start=1):
            if letter in "no":
                rest = arg[pos + 1:]
                if rest:
                    value = rest
                elif i < len(args):
                    value = args[i]
                    i += 1
                else:
                    raise StestUsageError(f"option requires an argument -- {letter}")
                when = _reference_time(value)
                if letter == "n":
                    options.newer_than = when
                else:
                    options.older_than = when
                break
            if letter in _SIMPLE_FLAGS:
                options.flags.add(letter)
            else:
                raise StestUsageError(f"unknown option -- {letter}")
    return options, args[i:]


def _passes(path: str, name: str, options: StestOptions) -> bool:
    try:
        st = os.stat(path)
    except OSError:
        return False
    flags = options.flags
    mode = st.st_mode

    def lstat_is_link() -> bool:
        try:
            return stat.S_ISLNK(os.lstat(path).st_mode)
        except OSError:
            return False

    conditions = (
        ("a" in flags or not name.startswith(".")),
        ("b" not in flags or stat.S_ISBLK(mode)),
        ("c" not in flags or stat.S_ISCHR(mode)),
        ("d" not in flags or stat.S_ISDIR(mode)),
        ("e" not in flags or os.access(path, os.F_OK)),
        ("f" not in flags or stat.S_ISREG(mode)),
        ("g" not in flags or bool(mode & stat.S_ISGID)),
        ("h" not in flags or lstat_is_link()),
        (options.newer_than is None or _mtime(st) > options.newer_than),
        (options.older_than is None or _mtime(st) < options.older_than),
        ("p" not in flags or stat.S_ISFIFO(mode)),
        ("r" not in flags or os.access(path, os.R_OK)),
        ("s" not in flags or st.st_size > 0),
        ("u" not in flags or bool(mode & stat.S_ISUID)),
        ("w" not in flags or os.access(path, os.W_OK)),
        ("x" not in flags or os.access(path, os.X_OK)),
    )
    return all(conditions)


def check(path: str, name: str, options: StestOptions) -> bool:
    """Return whether ``path`` is selected, honouring the inverting ``-v``."""
    return _passes(path, name, options) != ("v" in options.flags)


def _candidates(
    options: StestOptions, paths: list[str], stdin: TextIO
) -> Iterator[tuple[str, str]]:
    if not paths:
        for line in stdin:
            if line.endswith("\n"):
                line = line[:-1]
            yield line, line
        return
    for arg in paths:
        if "l" in options.flags:
            try:
                with os.scandir(arg) as entries:
                    names = [".", ".."] + [entry.name for entry in entries]
            except OSError:
                names = None
            if names is not None:
                for name in names:
                    path = f"{arg}/{name}"
                    if len(os.fsencode(path)) < _PATH_MAX:
                        yield path, name
                continue
        yield arg, arg


def run(options: StestOptions, paths: list[str], stdin: TextIO, stdout: TextIO) -> int:
    """Print the names that pass; return 0 if any did, else 1."""
    matched = False
    for path, name in _candidates(options, paths, stdin):
        if check(path, name, options):
            if "q" in options.flags:
                return 0
            matched = True
            stdout.write(name + "\n")
    return 0 if matched else 1


def main(argv: list[str] | None = None) -> int:
    """Command entry point; returns the exit status."""
    if argv is None:
        prog = os.path.basename(sys.argv[0]) or "stest"
        argv = sys.argv[1:]
    else:
        prog = "stest"
    try:
        options, paths = parse_args(argv)
    except StestUsageError:
        print(_USAGE.format(prog=prog), file=sys.stderr)
        return 2
    return run(options, paths, sys.stdin, sys.stdout)