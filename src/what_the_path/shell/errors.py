"""Errors raised by shell detection and rc file handling."""

from pathlib import Path
from typing import Optional


class ShellError(Exception):
    """Base class for all what-the-path errors."""


class DetectError(ShellError):
    """The environment could not be read to detect the shell.

    An unrecognized shell is not an error; it falls back to POSIX.
    """


class HomeDirUnavailable(ShellError):
    """No usable home directory to resolve rc files against."""

    def __init__(self, message: str = "Home directory not found: HOME is unset or empty"):
        super().__init__(message)


class RcFileError(ShellError):
    """File-system or encoding failure while reading or writing an rc file."""

    def __init__(self, path: Path, operation: str, cause: Optional[Exception] = None):
        self.path = Path(path)
        self.operation = operation
        self.cause = cause
        if cause is None:
            reason = "unknown error"
        else:
            reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Failed to {operation} {self.path}: {reason}")
