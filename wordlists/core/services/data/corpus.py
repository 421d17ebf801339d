from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ...errors.base import AppError, ErrorCode, error_from_os_error


def _io_error(path: str, exc: OSError | UnicodeError | LookupError) -> AppError:
    if isinstance(exc, UnicodeError):
        err = AppError(ErrorCode.IO_ERROR, f"bad text encoding in {path}: {exc}")
    elif isinstance(exc, LookupError):
        err = AppError(ErrorCode.CONFIG_INVALID, f"unknown encoding for {path}: {exc}")
    else:
        err = error_from_os_error(exc, path)
    logging.getLogger(__name__).error(
        "Word list I/O failed",
        extra={
            "event": "word_list_io_failed",
            "path": path,
            "error_code": err.code.value,
            "reason": err.message,
        },
    )
    return err


def iter_lines(path: str, *, encoding: str = "utf-8") -> Iterator[str]:
    """Yield every line of ``path`` without its terminator.

    Blank lines are yielded as empty strings and a last line that lacks a
    trailing newline still counts.
    """
    try:
        with open(path, encoding=encoding) as f:
            for line in f:
                yield line[:-1] if line.endswith("\n") else line
    except (OSError, UnicodeError, LookupError) as exc:
        raise _io_error(path, exc) from exc


def read_lines(path: str, *, encoding: str = "utf-8") -> list[str]:
    return list(iter_lines(path, encoding=encoding))


def count_lines(path: str, *, encoding: str = "utf-8") -> int:
    n = 0
    for _ in iter_lines(path, encoding=encoding):
        n += 1
    return n


def write_lines(path: str, lines: Iterable[str], *, encoding: str = "utf-8") -> int:
    """Overwrite ``path`` with ``lines``, one per line. Returns the count written."""
    n = 0
    try:
        with open(path, "w", encoding=encoding, newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
                n += 1
    except (OSError, UnicodeError, LookupError) as exc:
        raise _io_error(path, exc) from exc
    return n
