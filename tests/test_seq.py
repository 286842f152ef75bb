import pytest

from unixcommand import run_seq


def lines(out):
    return out.decode().splitlines()


@pytest.mark.parametrize(
    "args, expected",
    [
        (["5"], ["1", "2", "3", "4", "5"]),
        (["5", "1"], ["5", "4", "3", "2", "1"]),
        (["1", "2", "9"], ["1", "3", "5", "7", "9"]),
        (["3", "3"], ["3"]),
        (["-1", "1"], ["-1", "0", "1"]),
        (["10", "-3", "1"], ["10", "7", "4", "1"]),
        (["1", "0.5", "2"], ["1.0", "1.5", "2.0"]),
        (["0.1", "0.1", "0.3"], ["0.1", "0.2", "0.3"]),
    ],
)
def test_sequences(run, args, expected):
    code, out, err = run(run_seq, args)
    assert code == 0
    assert err == b""
    assert lines(out) == expected


@pytest.mark.parametrize(
    "args, message",
    [
        (["1", "0", "5"], b"seq: zero decrement"),
        (["1", "-1", "5"], b"seq: needs positive increment"),
        (["5", "1", "1"], b"seq: needs negative decrement"),
        (["0"], b"seq: needs negative decrement"),
        (["abc"], b"seq: invalid floating point argument: 'abc'"),
        (["1", "nan"], b"seq: invalid floating point argument: 'nan'"),
    ],
)
def test_validation_errors(run, args, message):
    code, out, err = run(run_seq, args)
    assert code == 1
    assert out == b""
    assert err.startswith(message)


@pytest.mark.parametrize("args", [[], ["1", "2", "3", "4"]])
def test_wrong_arity_is_silent(run, args):
    assert run(run_seq, args) == (1, b"", b"")


def test_repeatable(run):
    assert run(run_seq, ["1", "3", "10"]) == run(run_seq, ["1", "3", "10"])


def test_step_finer_than_default_precision(run):
    code, out, err = run(run_seq, ["1", "1e-28", "1"])
    assert code == 0
    assert err == b""
    assert lines(out) == ["1." + "0" * 28]


def test_values_wider_than_default_precision(run):
    code, out, _ = run(run_seq, ["1e29", "1e29"])
    assert code == 0
    assert lines(out) == ["1" + "0" * 29]


def test_long_integers_stay_exact(run):
    big = "1" * 29
    code, out, _ = run(run_seq, [big, str(int(big) + 2)])
    assert code == 0
    assert lines(out) == [big, str(int(big) + 1), str(int(big) + 2)]
