import pytest

from pickmenu.config import Scheme, default_config
from pickmenu.options import USAGE, MenuUsageError, parse_options


def test_no_arguments_keeps_defaults():
    options = parse_options([])
    assert options.config == default_config()
    assert options.fast is False
    assert options.case_insensitive is False
    assert options.monitor == -1
    assert options.embed is None
    assert options.show_version is False


def test_flags_without_arguments():
    options = parse_options(["-b", "-f", "-i"])
    assert options.config.topbar is False
    assert options.fast is True
    assert options.case_insensitive is True


def test_lines_and_monitor():
    options = parse_options(["-l", "5", "-m", "2"])
    assert options.config.lines == 5
    assert options.monitor == 2


@pytest.mark.parametrize("value,expected", [("abc", 0), ("7x", 7), (" 3", 3), ("-4", -4)])
def test_numeric_values_parse_leading_integer(value, expected):
    assert parse_options(["-l", value]).config.lines == expected


def test_prompt_font_and_embed():
    options = parse_options(["-p", "run:", "-fn", "mono:size=9", "-w", "123"])
    assert options.config.prompt == "run:"
    assert options.config.fonts[0] == "mono:size=9"
    assert options.embed == "123"
    assert options.embed_window == 123


def test_embed_window_hex():
    assert parse_options(["-w", "0x10"]).embed_window == 16


def test_embed_window_absent_is_zero():
    assert parse_options([]).embed_window == 0


def test_colors():
    options = parse_options(["-nb", "#111111", "-nf", "#222222", "-sb", "#333333", "-sf", "#444444"])
    assert options.config.colors[Scheme.NORM] == ("#222222", "#111111")
    assert options.config.colors[Scheme.SEL] == ("#444444", "#333333")
    assert options.config.colors[Scheme.OUT] == default_config().colors[Scheme.OUT]


def test_given_config_is_not_modified():
    config = default_config()
    options = parse_options(["-fn", "other", "-nb", "#000001", "-b"], config)
    assert config == default_config()
    assert options.config.fonts[0] == "other"


def test_version_stops_parsing():
    options = parse_options(["-v", "-bogus", "x"])
    assert options.show_version is True
    assert options.version_text.endswith("5.4")


@pytest.mark.parametrize("argv", [["-l"], ["-p"], ["-w"], ["-x"], ["-x", "y"], ["file"]])
def test_usage_errors(argv):
    with pytest.raises(MenuUsageError) as info:
        parse_options(argv)
    assert str(info.value) == USAGE


def test_option_argument_may_look_like_a_flag():
    assert parse_options(["-p", "-b"]).config.prompt == "-b"
    assert parse_options(["-p", "-b"]).config.topbar is True