import io
import os

import pytest

from pickmenu.stest import StestOptions, StestUsageError, check, main, parse_args, run


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "file.txt").write_text("data")
    (tmp_path / "empty").write_text("")
    (tmp_path / ".hidden").write_text("x")
    (tmp_path / "sub").mkdir()
    os.symlink(tmp_path / "file.txt", tmp_path / "link")
    return tmp_path


def opts(*flags):
    return StestOptions(flags=set(flags))


def test_parse_combined_flags_and_paths():
    options, paths = parse_args(["-fx", "-a", "one", "-d"])
    assert options.flags == {"f", "x", "a"}
    assert paths == ["one", "-d"]


def test_parse_double_dash_stops_options():
    options, paths = parse_args(["-f", "--", "-d"])
    assert options.flags == {"f"}
    assert paths == ["-d"]


def test_parse_single_dash_is_path():
    options, paths = parse_args(["-", "x"])
    assert options.flags == set()
    assert paths == ["-", "x"]


def test_parse_unknown_flag():
    with pytest.raises(StestUsageError):
        parse_args(["-z"])


def test_parse_missing_reference_file_argument():
    with pytest.raises(StestUsageError):
        parse_args(["-n"])


def test_parse_reference_file_forms(tree):
    ref = str(tree / "file.txt")
    expected = os.stat(ref).st_mtime_ns // 1_000_000_000
    attached, rest = parse_args(["-n" + ref, "p"])
    assert attached.newer_than == expected
    assert rest == ["p"]
    separate, rest = parse_args(["-fo", ref, "p"])
    assert separate.older_than == expected
    assert separate.flags == {"f"}
    assert rest == ["p"]


def test_parse_missing_reference_file_warns(tree, capsys):
    missing = str(tree / "nope")
    options, _ = parse_args(["-n", missing])
    assert options.newer_than is None
    assert missing in capsys.readouterr().err


def test_check_type_flags(tree):
    f = str(tree / "file.txt")
    d = str(tree / "sub")
    assert check(f, "file.txt", opts("f"))
    assert not check(d, "sub", opts("f"))
    assert check(d, "sub", opts("d"))
    assert not check(f, "file.txt", opts("d"))


def test_check_hidden_needs_a(tree):
    h = str(tree / ".hidden")
    assert not check(h, ".hidden", opts())
    assert check(h, ".hidden", opts("a"))


def test_check_invert_and_missing(tree):
    missing = str(tree / "absent")
    assert not check(missing, missing, opts())
    assert check(missing, missing, opts("v"))
    f = str(tree / "file.txt")
    assert not check(f, "file.txt", opts("v"))


def test_check_symlink_and_size(tree):
    assert check(str(tree / "link"), "link", opts("h"))
    assert not check(str(tree / "file.txt"), "file.txt", opts("h"))
    assert check(str(tree / "file.txt"), "file.txt", opts("s"))
    assert not check(str(tree / "empty"), "empty", opts("s"))


def test_check_fifo(tree):
    fifo = tree / "pipe"
    os.mkfifo(fifo)
    assert check(str(fifo), "pipe", opts("p"))
    assert not check(str(tree / "file.txt"), "file.txt", opts("p"))


def test_check_newer_older(tree):
    old = tree / "file.txt"
    new = tree / "empty"
    os.utime(old, (1_000_000, 1_000_000))
    os.utime(new, (2_000_000, 2_000_000))
    newer_opts, _ = parse_args(["-n", str(old)])
    older_opts, _ = parse_args(["-o", str(new)])
    assert check(str(new), "empty", newer_opts)
    assert not check(str(old), "file.txt", newer_opts)
    assert check(str(old), "file.txt", older_opts)
    assert not check(str(new), "empty", older_opts)


def test_run_paths(tree):
    out = io.StringIO()
    paths = [str(tree / "file.txt"), str(tree / "sub")]
    status = run(opts("f"), paths, io.StringIO(), out)
    assert status == 0
    assert out.getvalue() == paths[0] + "\n"


def test_run_no_match(tree):
    out = io.StringIO()
    status = run(opts("d"), [str(tree / "file.txt")], io.StringIO(), out)
    assert status == 1
    assert out.getvalue() == ""


def test_run_lists_directory(tree):
    out = io.StringIO()
    status = run(opts("l", "f"), [str(tree)], io.StringIO(), out)
    assert status == 0
    assert sorted(out.getvalue().splitlines()) == ["empty", "file.txt", "link"]


def test_run_reads_stdin(tree):
    paths = [str(tree / "sub"), str(tree / "file.txt")]
    stdin = io.StringIO("\n".join(paths) + "\n")
    out = io.StringIO()
    assert run(opts("d"), [], stdin, out) == 0
    assert out.getvalue() == paths[0] + "\n"


def test_run_quiet(tree):
    out = io.StringIO()
    assert run(opts("q", "f"), [str(tree / "file.txt")], io.StringIO(), out) == 0
    assert out.getvalue() == ""


def test_main_usage_error(capsys):
    assert main(["-z"]) == 2
    assert capsys.readouterr().err.startswith("usage: stest")


def test_main_prints_matches(tree, capsys):
    target = str(tree / "sub")
    assert main(["-d", target, str(tree / "file.txt")]) == 0
    assert capsys.readouterr().out == target + "\n"