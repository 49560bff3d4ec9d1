"""Idempotent line edits on shell rc files.

Files are decoded as UTF-8 with surrogateescape, so bytes that are not
valid UTF-8 survive a read/write cycle unchanged. Each line keeps its own
terminator, which lets files with mixed LF and CRLF endings be edited
without touching the lines that are not removed.
"""

import os
import shutil
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Optional, Union

from .errors import RcFileError
from .logging import get_logger
from .models import EditOutcome

PathLike = Union[str, os.PathLike]

ENCODING = "utf-8"
ERRORS = "surrogateescape"

# (text, terminator); terminator is "\n", "\r\n" or "" for an unterminated last line
Line = tuple[str, str]


def _check_line(line: str) -> None:
    if "\n" in line or "\r" in line:
        raise ValueError(f"Expected a single line without line breaks, got {line!r}")


def _read(path: Path) -> Optional[str]:
    """Read the file with newline translation disabled, None if missing."""
    try:
        with open(path, "r", encoding=ENCODING, errors=ERRORS, newline="") as f:
            return f.read()
    except FileNotFoundError:
        return None


def _split_lines(content: str) -> list[Line]:
    """Split content into lines, keeping each line's own terminator."""
    parts = content.split("\n")
    last = parts.pop()

    lines: list[Line] = []
    for part in parts:
        if part.endswith("\r"):
            lines.append((part[:-1], "\r\n"))
        else:
            lines.append((part, "\n"))
    if last:
        lines.append((last, ""))
    return lines


def _line_ending(lines: list[Line]) -> str:
    """Terminator of the last terminated line, LF for files without one."""
    for _, ending in reversed(lines):
        if ending:
            return ending
    return "\n"


def _write_atomic(path: Path, content: str) -> None:
    """Replace the file content via a temporary file in the same directory."""
    target = Path(os.path.realpath(path))

    tmp_path: Optional[Path] = None
    try:
        with NamedTemporaryFile(
            mode="w",
            encoding=ENCODING,
            errors=ERRORS,
            newline="",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        shutil.copymode(target, tmp_path)
        # os.replace() is atomic on POSIX
        os.replace(tmp_path, target)
    except (OSError, UnicodeError):
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


def append_to_rcfile(path: PathLike, line: str) -> EditOutcome:
    """Append a line to an rc file unless it is already present.

    The file and any missing parent directories are created if needed.
    If the existing content does not end with a newline, one is written
    before the line so it is not joined onto the last line. The new line
    uses the terminator of the file's last terminated line.

    Args:
        path: Rc file to edit.
        line: Exact line to add, without a line terminator.

    Returns:
        EditOutcome with changed=False if the line was already present.

    Raises:
        ValueError: If line contains a line break.
        RcFileError: If the file cannot be read or written.
    """
    _check_line(line)
    path = Path(path)
    logger = get_logger()

    try:
        content = _read(path)
    except OSError as e:
        raise RcFileError(path, "read", e) from e

    lines = _split_lines(content or "")

    if any(text == line for text, _ in lines):
        logger.debug(f"Line already present in {path}: {line!r}")
        return EditOutcome(path=path, changed=False, line_count=len(lines))

    ending = _line_ending(lines)
    text = line + ending
    if lines and not lines[-1][1]:
        text = ending + text

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding=ENCODING, errors=ERRORS, newline="") as f:
            f.write(text)
    except (OSError, UnicodeError) as e:
        raise RcFileError(path, "append to", e) from e

    logger.info(f"Appended line to {path}: {line!r}")
    return EditOutcome(path=path, changed=True, line_count=len(lines) + 1)


def remove_from_rcfile(path: PathLike, line: str) -> EditOutcome:
    """Remove every line exactly equal to line from an rc file.

    All other lines, their order and their terminators are kept.
    A missing file is not an error: there is nothing to remove.

    Args:
        path: Rc file to edit.
        line: Exact line to remove, without a line terminator.

    Returns:
        EditOutcome with the number of removed lines.

    Raises:
        ValueError: If line contains a line break.
        RcFileError: If the file cannot be read or written.
    """
    _check_line(line)
    path = Path(path)
    logger = get_logger()

    try:
        content = _read(path)
    except OSError as e:
        raise RcFileError(path, "read", e) from e

    if content is None:
        logger.debug(f"Nothing to remove, {path} does not exist")
        return EditOutcome(path=path, changed=False, line_count=0)

    lines = _split_lines(content)
    kept = [(text, ending) for text, ending in lines if text != line]
    removed = len(lines) - len(kept)

    if not removed:
        logger.debug(f"Line not found in {path}: {line!r}")
        return EditOutcome(path=path, changed=False, line_count=len(lines))

    new_content = "".join(text + ending for text, ending in kept)

    try:
        _write_atomic(path, new_content)
    except (OSError, UnicodeError) as e:
        raise RcFileError(path, "write", e) from e

    logger.info(f"Removed {removed} line(s) from {path}: {line!r}")
    return EditOutcome(path=path, changed=True, line_count=len(kept), removed=removed)
