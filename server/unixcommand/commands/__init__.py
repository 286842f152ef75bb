from __future__ import annotations

from typing import IO, Any, Callable, Dict, Optional

from .base import run_echo, run_pwd, run_whoami
from .flow import run_seq
from .fs_cmd import run_cat, run_cp
from .text import run_printf

CommandFunc = Callable[
    [list[str], Optional[IO[Any]], Optional[IO[Any]], Optional[IO[Any]]], int
]

COMMANDS: Dict[str, CommandFunc] = {
    "cat": run_cat,
    "cp": run_cp,
    "echo": run_echo,
    "printf": run_printf,
    "pwd": run_pwd,
    "seq": run_seq,
    "whoami": run_whoami,
}
