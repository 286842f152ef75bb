from __future__ import annotations

import logging
import os
import shutil
from typing import IO, Any, Iterator, Optional

from ..errors import describe_os_error, retag
from ..streams import report, resolve, to_bytes, write, writeline

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def _chunks(stream: IO[Any]) -> Iterator[Any]:
    while True:
        data = stream.read(CHUNK_SIZE)
        if not data:
            return
        yield data


def run_cat(
    args: list[str],
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
) -> int:
    stdin, stdout, stderr = resolve(stdin, stdout, stderr)
    failed = False
    # stdin can only be consumed once; later "-" operands replay this copy
    stdin_content: Optional[bytes] = None

    for path in list(args) or ["-"]:
        if path == "-":
            if stdin_content is not None:
                write(stdout, stdin_content)
                continue
            seen = []
            for chunk in _chunks(stdin):
                seen.append(to_bytes(chunk))
                write(stdout, chunk)
            stdin_content = b"".join(seen)
            continue

        if not os.path.isfile(path):
            report(stderr, "cat", f"{path}: No such file or directory")
            failed = True
            continue

        try:
            with open(path, "rb") as fh:
                for chunk in _chunks(fh):
                    write(stdout, chunk)
        except OSError as exc:
            logger.debug("cat: reading %s failed", path, exc_info=True)
            report(stderr, "cat", f"{path}: {exc.strerror or exc}")
            failed = True

    return 1 if failed else 0


def _same_file(source: str, target: str) -> bool:
    if os.path.abspath(source) == os.path.abspath(target):
        return True
    if os.path.exists(target):
        return os.path.samefile(source, target)
    return False


def _check_copy(source: str, target: str) -> Optional[str]:
    """Return the diagnostic that blocks copying ``source`` to ``target``."""
    if os.path.isdir(source):
        return f"omitting directory '{source}'"
    if not os.path.isfile(source):
        return f"cannot stat '{source}': No such file or directory"
    if _same_file(source, target):
        return f"'{source}' and '{source}' are the same file"
    if not os.path.isfile(target):
        try:
            open(target, "ab").close()
        except OSError as exc:
            return f"cannot create regular file '{target}': {exc.strerror or exc}"
    elif not os.access(target, os.W_OK):
        return f"cannot create regular file '{target}': Permission denied"
    return None


def run_cp(
    args: list[str],
    stdin: Optional[IO[Any]] = None,
    stdout: Optional[IO[Any]] = None,
    stderr: Optional[IO[Any]] = None,
) -> int:
    _, _, stderr = resolve(stdin, stdout, stderr)
    sources = list(args)
    if not sources:
        report(stderr, "cp", "missing file operand")
        return 1

    dest = sources.pop()
    if not sources:
        report(stderr, "cp", f"missing destination file operand after '{dest}'")
        return 1

    dest_is_dir = os.path.isdir(dest)
    if len(sources) > 1 and not dest_is_dir:
        report(stderr, "cp", f"target '{dest}' is not a directory")
        return 1

    failed = False
    for source in sources:
        if dest_is_dir:
            target = os.path.join(dest, os.path.basename(source))
        else:
            target = dest

        message = _check_copy(source, target)
        if message is not None:
            report(stderr, "cp", message)
            failed = True
            continue

        try:
            shutil.copyfile(source, target)
        except OSError as exc:
            logger.debug("cp: copying %s to %s failed", source, target, exc_info=True)
            writeline(stderr, retag(describe_os_error(exc, "copy"), "copy", "cp"))
            failed = True

    return 1 if failed else 0
