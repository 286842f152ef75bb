from __future__ import annotations

import io
import os
import sys
from typing import IO, Any, Optional, Tuple, Union

Data = Union[str, bytes]


def resolve(
    stdin: Optional[IO[Any]],
    stdout: Optional[IO[Any]],
    stderr: Optional[IO[Any]],
) -> Tuple[IO[Any], IO[Any], IO[Any]]:
    """Fill in the process standard streams for any handle left as None."""
    return (
        stdin if stdin is not None else _binary(sys.stdin),
        stdout if stdout is not None else _binary(sys.stdout),
        stderr if stderr is not None else _binary(sys.stderr),
    )


def _binary(stream: IO[Any]) -> IO[Any]:
    # pytest capture and some embedders replace sys.std* with text-only objects
    return getattr(stream, "buffer", stream)


def is_text(stream: IO[Any]) -> bool:
    return isinstance(stream, io.TextIOBase)


def to_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return os.fsencode(data)
    return data


def to_str(data: Data) -> str:
    if isinstance(data, bytes):
        return os.fsdecode(data)
    return data


def write(stream: IO[Any], data: Data) -> None:
    if is_text(stream):
        stream.write(to_str(data))
    else:
        stream.write(to_bytes(data))


def writeline(stream: IO[Any], data: Data = "") -> None:
    write(stream, to_str(data) + os.linesep)


def report(stderr: IO[Any], command: str, message: str) -> None:
    writeline(stderr, f"{command}: {message}")
