import pytest

from unixcommand.escapes import ESCAPES, split_stop, translate


def test_known_escapes():
    assert translate(r"a\tb\nc") == "a\tb\nc"
    assert translate(r"\e[0m") == "\x1b[0m"


def test_double_backslash_is_consumed_first():
    # "\\n" is a literal backslash followed by n, not a newline
    assert translate(r"\\n") == "\\n"


def test_unknown_escape_passes_through():
    assert translate(r"\q\z") == r"\q\z"


def test_stop_marker_left_in_place():
    assert translate(r"x\cy") == r"x\cy"


def test_trailing_backslash_kept():
    assert translate("abc\\") == "abc\\"


def test_split_at_stop_marker():
    assert split_stop(translate(r"x\cy\n")) == ("x", True)


def test_escaped_backslash_before_c_stops_too():
    assert split_stop(translate(r"x\\cy")) == ("x", True)


def test_no_stop_marker():
    assert split_stop("plain") == ("plain", False)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        ESCAPES["\\z"] = "z"
