from __future__ import annotations

import io
from typing import Optional

MAX_INPUT_CHARS = 64_000
MAX_ARGS = 256
MAX_OUTPUT_BYTES = 50_000


def check_input_limit(stdin: str) -> None:
    if len(stdin or "") > MAX_INPUT_CHARS:
        raise ValueError(f"stdin too long (max {MAX_INPUT_CHARS})")


def check_args_limit(args: list[str]) -> None:
    if len(args) > MAX_ARGS:
        raise ValueError(f"too many arguments (max {MAX_ARGS})")
    if sum(len(a) for a in args) > MAX_INPUT_CHARS:
        raise ValueError(f"arguments too long (max {MAX_INPUT_CHARS})")


class CappedBuffer(io.BytesIO):
    """Byte sink that keeps at most ``limit`` bytes and drops the rest."""

    def __init__(self, limit: Optional[int] = None):
        super().__init__()
        self.limit = MAX_OUTPUT_BYTES if limit is None else limit
        self.overflowed = False

    def write(self, data) -> int:
        data = bytes(data)
        room = max(self.limit - self.tell(), 0)
        if len(data) > room:
            self.overflowed = True
            super().write(data[:room])
        else:
            super().write(data)
        return len(data)


def truncate_output(raw: bytes, overflowed: bool = False) -> tuple[str, bool]:
    raw = raw or b""
    if not overflowed and len(raw) <= MAX_OUTPUT_BYTES:
        return raw.decode("utf-8", errors="replace"), False
    clipped = raw[:MAX_OUTPUT_BYTES].decode("utf-8", errors="ignore")
    return clipped + "\n...(truncated)\n", True
