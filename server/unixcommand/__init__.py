from __future__ import annotations

import logging
from typing import IO, Any, Iterable, Optional

from .commands import COMMANDS, CommandFunc
from .commands.base import run_echo, run_pwd, run_whoami
from .commands.flow import run_seq
from .commands.fs_cmd import run_cat, run_cp
from .commands.text import run_printf
from .streams import resolve, writeline

__all__ = [
    "COMMANDS",
    "CommandFunc",
    "run_cat",
    "run_command",
    "run_cp",
    "run_echo",
    "run_printf",
    "run_pwd",
    "run_seq",
    "run_whoami",
]

logger = logging.getLogger(__name__)


def run_command(
    name: str,
    args: list[str],
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
    allowed: Optional[Iterable[str]] = None,
) -> int:
    """Run the command registered as ``name`` and return its status.

    ``allowed`` restricts which registered commands may run; by default all
    of them can. Unknown names give 127 and disallowed ones 126, mirroring a
    shell.
    """
    stdin, stdout, stderr = resolve(stdin, stdout, stderr)
    if allowed is not None and name not in set(allowed):
        writeline(stderr, f"command not allowed: {name}")
        return 126
    runner = COMMANDS.get(name)
    if not runner:
        writeline(stderr, f"{name}: command not found")
        return 127
    code = runner(list(args), stdin, stdout, stderr)
    logger.debug("%s %r exited with %d", name, args, code)
    return int(code)
