"""PATH setup utilities built on shell detection and rc file editing."""

import os
from pathlib import Path
from typing import Mapping, Optional, Union

from .detect import detect_shell
from .editor import append_to_rcfile, remove_from_rcfile
from .logging import get_logger
from .models import PathUpdate, Shell
from .path import exists_in_path
from .rcfiles import get_rcfiles

PathLike = Union[str, os.PathLike]

DEFAULT_FISH_FRAGMENT = "what_the_path.fish"


def path_line(shell: Shell, directory: PathLike) -> str:
    """Build the rc file line that prepends directory to PATH.

    Args:
        shell: Shell whose syntax to use.
        directory: Directory to add. Written as given, so '$HOME/...' is
            expanded by the shell at startup.

    Returns:
        A single line of shell syntax.
    """
    directory = os.fspath(directory)
    if shell is Shell.FISH:
        return f'set -gx PATH "{directory}" $PATH'
    return f'export PATH="{directory}:$PATH"'


def primary_rcfile(
    shell: Shell,
    env: Optional[Mapping[str, str]] = None,
    fragment: str = DEFAULT_FISH_FRAGMENT,
) -> Path:
    """Get the rc file that edits should go to.

    This is always the first candidate for the shell. For fish the candidate
    is the conf.d directory, so the fragment file inside it is returned.

    Raises:
        HomeDirUnavailable: If HOME is unset or empty.
        RcFileError: If the fish conf.d directory cannot be created.
    """
    rcfile = get_rcfiles(shell, env)[0]
    if shell is Shell.FISH:
        return rcfile / fragment
    return rcfile


def _resolve_target(
    shell: Optional[Shell],
    rcfile: Optional[PathLike],
    env: Optional[Mapping[str, str]],
    fragment: str,
) -> tuple[Shell, Path]:
    if shell is None:
        shell = detect_shell(env)
    if rcfile is None:
        return shell, primary_rcfile(shell, env, fragment)
    return shell, Path(rcfile)


def add_to_path(
    directory: PathLike,
    *,
    shell: Optional[Shell] = None,
    rcfile: Optional[PathLike] = None,
    env: Optional[Mapping[str, str]] = None,
    force: bool = False,
    fragment: str = DEFAULT_FISH_FRAGMENT,
) -> PathUpdate:
    """Add a directory to PATH in the user's shell configuration.

    This function:
    1. Detects the shell unless one is given
    2. Skips the edit if the directory is already in PATH (unless force)
    3. Appends the PATH line to the primary rc file (or rcfile if given)

    Args:
        directory: Directory to add.
        shell: Shell override. Detected from the environment if None.
        rcfile: Rc file override. Defaults to the shell's primary rc file.
        env: Environment mapping to read. Defaults to os.environ.
        force: Edit the rc file even if the directory is already in PATH.
        fragment: File name used inside fish's conf.d directory.

    Returns:
        PathUpdate describing what was done.

    Raises:
        DetectError, HomeDirUnavailable, RcFileError
    """
    shell, target = _resolve_target(shell, rcfile, env, fragment)
    line = path_line(shell, directory)

    if not force and exists_in_path(directory, env):
        get_logger().info(f"{os.fspath(directory)} already in PATH, leaving {target} unchanged")
        return PathUpdate(shell=shell, rcfile=target, line=line, already_in_path=True)

    outcome = append_to_rcfile(target, line)
    return PathUpdate(shell=shell, rcfile=target, line=line, outcome=outcome)


def remove_from_path(
    directory: PathLike,
    *,
    shell: Optional[Shell] = None,
    rcfile: Optional[PathLike] = None,
    env: Optional[Mapping[str, str]] = None,
    fragment: str = DEFAULT_FISH_FRAGMENT,
) -> PathUpdate:
    """Remove the PATH line for a directory from the user's shell configuration.

    Only the line add_to_path would have written is removed. The running
    process's PATH is not touched.

    Raises:
        DetectError, HomeDirUnavailable, RcFileError
    """
    shell, target = _resolve_target(shell, rcfile, env, fragment)
    line = path_line(shell, directory)

    outcome = remove_from_rcfile(target, line)
    return PathUpdate(
        shell=shell,
        rcfile=target,
        line=line,
        already_in_path=exists_in_path(directory, env),
        outcome=outcome,
    )
