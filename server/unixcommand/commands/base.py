from __future__ import annotations

import os
from typing import IO, Any, Optional

from ..escapes import split_stop, translate
from ..streams import resolve, write, writeline

try:
    import pwd
except ImportError:  # not available on Windows
    pwd = None


def run_echo(
    args: list[str],
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
) -> int:
    _, stdout, _ = resolve(stdin, stdout, stderr)
    words = list(args)
    newline = True
    if words and words[0] == "-n":
        newline = False
        words = words[1:]

    for i, word in enumerate(words):
        if i:
            write(stdout, " ")
        text, stop = split_stop(translate(word))
        write(stdout, text)
        if stop:
            return 0

    if newline:
        writeline(stdout)
    return 0


def run_pwd(
    args: list[str],
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
) -> int:
    # Shell-builtin semantics: trust $PWD, never call getcwd().
    _, stdout, _ = resolve(stdin, stdout, stderr)
    cwd = os.environ.get("PWD")
    if not cwd:
        return 1
    writeline(stdout, cwd)
    return 0


def run_whoami(
    args: list[str],
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
) -> int:
    _, stdout, _ = resolve(stdin, stdout, stderr)
    name = _effective_user()
    if not name:
        return 1
    writeline(stdout, name)
    return 0


def _effective_user() -> Optional[str]:
    if pwd is None or not hasattr(os, "geteuid"):
        return None
    try:
        entry = pwd.getpwuid(os.geteuid())
    except KeyError:
        return None
    return entry.pw_name or None
