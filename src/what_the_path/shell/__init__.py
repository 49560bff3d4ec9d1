"""Shell package: detection, rc file lookup, PATH checks and rc file edits."""

from .detect import detect_shell
from .editor import append_to_rcfile, remove_from_rcfile
from .errors import DetectError, HomeDirUnavailable, RcFileError, ShellError
from .installer import add_to_path, path_line, primary_rcfile, remove_from_path
from .models import EditOutcome, PathUpdate, Shell
from .path import exists_in_path
from .rcfiles import get_rcfiles, home_dir, rcfiles_for

__all__ = [
    "detect_shell",
    "get_rcfiles",
    "rcfiles_for",
    "home_dir",
    "exists_in_path",
    "append_to_rcfile",
    "remove_from_rcfile",
    "add_to_path",
    "remove_from_path",
    "path_line",
    "primary_rcfile",
    "Shell",
    "EditOutcome",
    "PathUpdate",
    "ShellError",
    "DetectError",
    "HomeDirUnavailable",
    "RcFileError",
]
