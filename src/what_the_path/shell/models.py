"""Data models for shell module."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Shell(str, Enum):
    """Supported shell variants."""

    FISH = "fish"
    ZSH = "zsh"
    BASH = "bash"
    POSIX = "posix"


@dataclass(frozen=True)
class EditOutcome:
    """Result of an rc file edit."""

    path: Path
    changed: bool
    line_count: int
    removed: int = 0


@dataclass(frozen=True)
class PathUpdate:
    """Result of adding or removing a directory in the user's PATH setup."""

    shell: Shell
    rcfile: Path
    line: str
    already_in_path: bool = False
    outcome: Optional[EditOutcome] = None

    @property
    def changed(self) -> bool:
        """Check if the rc file was modified."""
        return self.outcome is not None and self.outcome.changed
