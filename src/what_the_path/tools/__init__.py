"""Tools package for what-the-path."""

from .setup import add_path, remove_path
from .shell import check_path, detect_shell
from .status import check_status

__all__ = [
    "detect_shell",
    "check_path",
    "add_path",
    "remove_path",
    "check_status",
]
