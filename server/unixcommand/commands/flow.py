from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import IO, Any, Iterator, List, Optional

from ..streams import report, resolve, writeline


class _BadNumber(ValueError):
    pass


def _parse(arg: str) -> Decimal:
    try:
        value = Decimal(arg)
    except InvalidOperation:
        raise _BadNumber(arg) from None
    if not value.is_finite():
        raise _BadNumber(arg)
    return value


def _fraction_digits(value: Decimal) -> int:
    exponent = value.as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0


def _values(start: Decimal, step: Decimal, last: Decimal) -> Iterator[Decimal]:
    # start + i*step avoids accumulating rounding error over long runs
    i = 0
    value = start
    while (step > 0 and value <= last) or (step < 0 and value >= last):
        yield value
        i += 1
        value = start + i * step


def run_seq(
    args: list[str],
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
) -> int:
    _, stdout, stderr = resolve(stdin, stdout, stderr)
    if not 1 <= len(args) <= 3:
        return 1

    try:
        numbers: List[Decimal] = [_parse(arg) for arg in args]
    except _BadNumber as exc:
        report(stderr, "seq", f"invalid floating point argument: '{exc}'")
        return 1

    if len(numbers) == 1:
        start, step, last = Decimal(1), Decimal(1), numbers[0]
    elif len(numbers) == 2:
        start, last = numbers
        step = Decimal(-1) if start >= last else Decimal(1)
    else:
        start, step, last = numbers

    if step == 0:
        message = "zero decrement"
    elif start < last and step < 0:
        message = "needs positive increment"
    elif start > last and step > 0:
        message = "needs negative decrement"
    else:
        message = None

    if message:
        report(stderr, "seq", message)
        return 1

    precision = max(_fraction_digits(n) for n in (start, step, last))
    quantum = Decimal(1).scaleb(-precision)
    magnitude = max(n.adjusted() for n in (start, step, last))
    with localcontext() as ctx:
        # wide enough that neither start + i*step nor quantize rounds
        ctx.prec = max(ctx.prec, magnitude + precision + 3)
        for value in _values(start, step, last):
            writeline(stdout, format(value.quantize(quantum), "f"))
    return 0
