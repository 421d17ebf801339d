from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    IO_ERROR = "IO_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    CONFIG_INVALID = "CONFIG_INVALID"


class AppError(Exception):
    def __init__(self: AppError, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self: AppError) -> dict[str, str]:
        return {"error": self.code.value, "message": self.message}


def error_from_os_error(exc: OSError, path: str) -> AppError:
    """Map an OSError raised while touching ``path`` onto an AppError."""
    if isinstance(exc, FileNotFoundError):
        return AppError(ErrorCode.FILE_NOT_FOUND, f"no such file: {path}")
    reason = exc.strerror or str(exc)
    return AppError(ErrorCode.IO_ERROR, f"cannot access {path}: {reason}")
