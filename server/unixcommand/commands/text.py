from __future__ import annotations

import re
from typing import IO, Any, List, NamedTuple, Optional, Union

from ..escapes import translate
from ..streams import report, resolve, write

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0]*)(?P<width>\d*)(?:\.(?P<precision>\d*))?(?P<conv>.?)",
    re.DOTALL,
)

_INT_CONVERSIONS = {"d": "d", "i": "d", "o": "o", "u": "d", "x": "x", "X": "X"}
_FLOAT_CONVERSIONS = set("eEfFgG")


class _Conversion(NamedTuple):
    flags: str
    width: str
    precision: Optional[str]
    conv: str

    def render(self, conv: str, value: Any) -> str:
        spec = "%" + self.flags + self.width
        if self.precision is not None:
            spec += "." + (self.precision or "0")
        return (spec + conv) % value


class _BadConversion(ValueError):
    pass


Token = Union[str, _Conversion]


def _tokenize(fmt: str) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    for m in _SPEC.finditer(fmt):
        if m.start() > pos:
            tokens.append(fmt[pos : m.start()])
        conv = m.group("conv")
        if conv == "%":
            tokens.append("%")
        elif conv in _INT_CONVERSIONS or conv in _FLOAT_CONVERSIONS or conv in ("c", "s"):
            tokens.append(_Conversion(m.group("flags"), m.group("width"), m.group("precision"), conv))
        else:
            raise _BadConversion(m.group(0))
        pos = m.end()
    if pos < len(fmt):
        tokens.append(fmt[pos:])
    return tokens


def _char_code(arg: str) -> Optional[int]:
    # POSIX: a leading quote yields the code of the following character
    if arg[:1] in ("'", '"'):
        return ord(arg[1]) if len(arg) > 1 else 0
    return None


def _to_int(arg: str) -> int:
    code = _char_code(arg)
    if code is not None:
        return code
    text = arg.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text[:2].lower() == "0x":
        return sign * int(text[2:], 16)
    if len(text) > 1 and text.startswith("0"):
        return sign * int(text[1:], 8)
    return sign * int(text, 10)


def _to_float(arg: str) -> float:
    code = _char_code(arg)
    if code is not None:
        return float(code)
    return float(arg)


def run_printf(
    args: list[str],
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
) -> int:
    _, stdout, stderr = resolve(stdin, stdout, stderr)
    if not args or not args[0]:
        report(stderr, "printf", "not enough arguments")
        return 1

    fmt = translate(args[0])
    try:
        tokens = _tokenize(fmt)
    except _BadConversion as exc:
        report(stderr, "printf", f"{exc}: invalid conversion specification")
        return 1

    remaining = list(args[1:])
    status = 0
    out: List[str] = []
    while True:
        consumed = 0
        for token in tokens:
            if isinstance(token, str):
                out.append(token)
                continue
            arg = None
            if remaining:
                arg = remaining.pop(0)
                consumed += 1
            if token.conv in _INT_CONVERSIONS or token.conv in _FLOAT_CONVERSIONS:
                parse = _to_int if token.conv in _INT_CONVERSIONS else _to_float
                conv = _INT_CONVERSIONS.get(token.conv, token.conv)
                value: Any = 0
                if arg:
                    try:
                        value = parse(arg)
                    except ValueError:
                        report(stderr, "printf", f"'{arg}': expected a numeric value")
                        status = 1
                out.append(token.render(conv, value))
            elif token.conv == "c":
                out.append(token._replace(precision=None).render("s", (arg or "")[:1]))
            else:
                out.append(token.render("s", arg or ""))
        if not remaining or not consumed:
            break

    write(stdout, "".join(out))
    return status
