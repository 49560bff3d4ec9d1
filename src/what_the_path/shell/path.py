"""PATH membership checks."""

import os
from typing import Mapping, Optional, Union


def _normalize(entry: str) -> str:
    """Strip trailing separators, keeping the root directory intact."""
    stripped = entry.rstrip("/")
    if not stripped and entry:
        return "/"
    return stripped


def exists_in_path(
    directory: Union[str, os.PathLike],
    env: Optional[Mapping[str, str]] = None,
) -> bool:
    """Check if a directory is listed in the PATH environment variable.

    The comparison is textual: no symlink resolution and no conversion
    between relative and absolute forms. Trailing slashes are ignored, so
    '/usr/local/bin/' matches '/usr/local/bin'.

    Args:
        directory: Directory to look for.
        env: Environment mapping to read. Defaults to os.environ.

    Returns:
        True if directory is a PATH entry, False otherwise (including when
        PATH is unset).
    """
    if env is None:
        env = os.environ

    target = _normalize(os.fspath(directory))
    if not target:
        return False

    search_path = env.get("PATH") or ""
    return any(
        _normalize(entry) == target
        for entry in search_path.split(os.pathsep)
        if entry
    )
