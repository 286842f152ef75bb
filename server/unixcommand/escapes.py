from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# Marks the point where echo stops producing output.
STOP = "\\c"

ESCAPES: Mapping[str, str] = MappingProxyType(
    {
        "\\\\": "\\",
        "\\a": "\a",
        "\\b": "\b",
        "\\e": "\x1b",
        "\\f": "\f",
        "\\n": "\n",
        "\\r": "\r",
        "\\t": "\t",
        "\\v": "\v",
    }
)


def translate(text: str) -> str:
    """Replace backslash escapes in ``text`` in one left-to-right pass.

    Unknown escapes, ``\\c`` included, are copied through as-is.
    """
    out = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != "\\" or i + 1 >= n:
            out.append(ch)
            i += 1
            continue
        pair = text[i : i + 2]
        out.append(ESCAPES.get(pair, pair))
        i += 2
    return "".join(out)


def split_stop(text: str) -> Tuple[str, bool]:
    """Cut translated ``text`` at the first ``\\c`` marker.

    The marker is looked for after translation, so ``\\\\c`` also stops.
    """
    head, marker, _ = text.partition(STOP)
    return head, bool(marker)
