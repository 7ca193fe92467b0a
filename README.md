# pickmenu

pickmenu holds the engine of a dynamic menu: it reads a list of lines,
narrows it down as the user types, keeps track of the cursor, selection and
visible page, and reports the chosen line. It also ships `stest`, a command
that filters a list of file names by type, permissions and age, which is
handy for building the list of programs a launcher offers.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The `stest` command

`stest` takes file names as arguments, or reads one name per line from
standard input when none are given, and prints the names that pass every
test requested:

```
stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]
```

| Flag      | Passes when the file ...                  |
|-----------|-------------------------------------------|
| `-b`      | is a block special file                   |
| `-c`      | is a character special file               |
| `-d`      | is a directory                            |
| `-e`      | exists                                    |
| `-f`      | is a regular file                         |
| `-g`      | has the set-group-id bit                  |
| `-h`      | is a symbolic link                        |
| `-n file` | was modified later than `file`            |
| `-o file` | was modified earlier than `file`          |
| `-p`      | is a named pipe                           |
| `-r`      | is readable                               |
| `-s`      | is not empty                              |
| `-u`      | has the set-user-id bit                   |
| `-w`      | is writable                               |
| `-x`      | is executable                             |

A file that cannot be examined never passes. Names starting with `.` are
skipped unless one of the flags is:

- `-a` also lets hidden names (starting with `.`) pass.
- `-l` tests the entries of each directory named, including `.` and `..`,
  instead of the directory itself, and prints the entry names.
- `-v` inverts the result and prints the names that fail.
- `-q` prints nothing and exits with status 0 at the first match.

If the reference file of `-n` or `-o` cannot be examined, an error is
printed and that test is not applied. The exit status is 0 if anything
matched, 1 if nothing did, and 2 for a usage error. For example, to list
the executables in a directory:

```
stest -flx /usr/bin
```

The same steps are available from Python through `pickmenu.stest`:
`parse_args(argv)` returns a `StestOptions` and the remaining paths (or
raises `StestUsageError`), `check(path, name, options)` tests one file, and
`run(options, paths, stdin, stdout)` prints the passing names and returns
the exit status.

## Matching items

Items are read from a text stream, one per line, and matched against the
typed text. The text is split on spaces and every word must occur in an
item. Exact matches of the whole text come first, then items starting with
the first word, then the remaining items containing every word; the input
order is kept within each group.

```python
import io
from pickmenu.matching import read_items, match_items

items = read_items(io.StringIO("firefox\nfirefox-esr\nthunderbird\n"))
for item in match_items(items, "fire", case_insensitive=False):
    print(item.text)
```

`pickmenu.matching.cistrstr(haystack, needle)` returns the index of
`needle` in `haystack` ignoring the case of ASCII letters, or -1; it is the
search used when matching is case-insensitive. Each `Item` has its `text`
and an `out` flag that marks it for output.

## Menu sessions

`pickmenu.session.Menu` holds the state of one interactive session: the
input text and cursor, the current matches, the selected item and the page
being shown. With `lines` above 0 a page holds that many items; otherwise
items are laid out side by side, measured with `text_width`, until
`width` is filled.

```python
from pickmenu.matching import read_items
from pickmenu.session import Menu, Outcome

menu = Menu(read_items(["firefox", "firefox-esr", "thunderbird"]), lines=5)
menu.insert("fire")
menu.handle_key("Down")
if menu.handle_key("Return") is Outcome.ACCEPT:
    print(menu.output_lines())   # ['firefox-esr']
```

`Menu.handle_key(key, text, ctrl, alt, shift)` takes a key symbol name
such as `"Return"`, `"Tab"`, `"Left"` or `"a"` (or `None` for text from an
input method) together with the text it produced, and returns an
`Outcome`:

- `CONTINUE`: keep going.
- `ACCEPT`: the user confirmed; print `Menu.output_lines()`. These are the
  items marked with Alt+Return if any, else the selected item, else the
  typed text; Shift+Return gives the typed text alone.
- `CANCEL`: the user gave up (Escape, Ctrl+C, Ctrl+G or Ctrl+[).
- `PASTE_PRIMARY` / `PASTE_CLIPBOARD`: the user asked to paste (Ctrl+Y,
  with Shift for the clipboard); fetch that text and pass it to
  `Menu.paste`, which inserts it up to its first newline.

The usual editing keys are handled, including Ctrl+A/E/K/U/W and
Alt+B/F for word movement. The editing commands can also be called
directly: `insert`, `delete_left`, `kill_to_end`, `kill_to_start`,
`delete_word` and `move_word_edge`. `visible_items()` gives the items on
the current page and `selected` the highlighted item. The input is limited
to `MAX_TEXT_BYTES` bytes of UTF-8.

## Options and configuration

`pickmenu.options.parse_options(argv, config)` parses the menu's options
(`-b`, `-f`, `-i`, `-v`, `-l lines`, `-p prompt`, `-fn font`, `-m monitor`,
`-nb`, `-nf`, `-sb`, `-sf` colours and `-w windowid`) over a copy of
`config`, or of the defaults from `pickmenu.config.default_config()` when
none is given, and returns a `MenuOptions`. A bad or incomplete option
raises `MenuUsageError`, whose message is the usage text. `-v` stops
parsing and sets `show_version`; `version_text` gives the version line and
`embed_window` the numeric window id given with `-w`.

`pickmenu.util.die(message, *args)` raises a `FatalError` carrying the
formatted message and an exit `status`.

## What the package does not do

pickmenu does not open a window, draw the menu, load fonts, grab the
keyboard or read the clipboard, and it has no `pickmenu` command. The
colours, fonts, border and placement settings in `Config` are kept for a
front end to use; a program that shows the menu on screen has to supply
the display and feed key presses to `Menu`.