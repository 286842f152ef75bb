from __future__ import annotations


def describe_os_error(exc: OSError, operation: str) -> str:
    """Render an OSError as ``<operation>: '<path>': <reason>``."""
    reason = exc.strerror or str(exc)
    filename = exc.filename2 or exc.filename
    if filename is None:
        return f"{operation}: {reason}"
    return f"{operation}: '{filename}': {reason}"


def retag(message: str, old: str, new: str) -> str:
    """Swap the leading command name of a diagnostic."""
    if message == old or message.startswith(old + ":"):
        return new + message[len(old) :]
    return message
