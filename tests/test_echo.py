from conftest import NL

from unixcommand import run_echo


def test_joins_with_spaces(run):
    assert run(run_echo, ["a", "b"]) == (0, b"a b" + NL, b"")


def test_no_newline_flag(run):
    assert run(run_echo, ["-n", "a", "b"]) == (0, b"a b", b"")


def test_no_args_prints_newline(run):
    assert run(run_echo, []) == (0, NL, b"")


def test_only_no_newline_flag(run):
    assert run(run_echo, ["-n"]) == (0, b"", b"")


def test_flag_only_recognised_first(run):
    assert run(run_echo, ["a", "-n"]) == (0, b"a -n" + NL, b"")


def test_escapes_translated(run):
    assert run(run_echo, [r"a\tb", r"c\\d"]) == (0, b"a\tb c\\d" + NL, b"")


def test_stop_marker_ends_output(run):
    assert run(run_echo, [r"x\cy", "more"]) == (0, b"x", b"")


def test_stop_marker_in_later_argument(run):
    assert run(run_echo, ["a", r"b\c", "c"]) == (0, b"a b", b"")


def test_args_not_mutated(run):
    args = ["-n", "x"]
    run(run_echo, args)
    assert args == ["-n", "x"]


def test_escaped_backslash_before_c_stops_output(run):
    assert run(run_echo, [r"x\\cy", "z"]) == (0, b"x", b"")
