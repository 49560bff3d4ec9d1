"""PATH setup tools: add or remove a directory in the user's shell config."""

from typing import Annotated, Callable

import yaml

from ..config import get_config
from ..shell import PathUpdate, ShellError, add_to_path, remove_from_path
from ..shell.logging import get_logger


def _update_to_dict(update: PathUpdate) -> dict:
    return {
        "success": True,
        "shell": update.shell.value,
        "rcfile": str(update.rcfile),
        "line": update.line,
        "already_in_path": update.already_in_path,
        "changed": update.changed,
        "error": None,
    }


def _error_dict(directory: str, error: Exception) -> dict:
    return {
        "success": False,
        "shell": None,
        "rcfile": None,
        "line": None,
        "already_in_path": None,
        "changed": False,
        "error": str(error),
        "directory": directory,
    }


def _run(action: Callable[..., PathUpdate], directory: str, **kwargs) -> dict:
    try:
        config = get_config()
        update = action(
            directory,
            shell=config.shell,
            rcfile=config.rcfile,
            fragment=config.fish_fragment,
            **kwargs,
        )
    except (ShellError, ValueError, yaml.YAMLError) as e:
        get_logger().error(f"PATH update for {directory} failed: {e}")
        return _error_dict(directory, e)

    return _update_to_dict(update)


def add_path(
    directory: Annotated[str, "Directory to add to PATH"],
    force: Annotated[
        bool,
        "Edit the rc file even if the directory is already in PATH",
    ] = False,
) -> dict:
    """Add a directory to PATH in the user's shell configuration.

    The shell is detected from SHELL unless the config file sets one, and
    the line is appended to the shell's primary rc file unless the config
    file names another.

    Returns:
        A dictionary with:
        - success: Whether the operation succeeded
        - shell: Shell whose syntax was used
        - rcfile: Rc file that was edited
        - line: The PATH line
        - already_in_path: Whether the directory was already in PATH
        - changed: Whether the rc file was modified
        - error: Error message if failed
    """
    return _run(add_to_path, directory, force=force)


def remove_path(
    directory: Annotated[str, "Directory to remove from the shell config"],
) -> dict:
    """Remove the PATH line for a directory from the user's shell configuration.

    Returns:
        Same shape as add_path.
    """
    return _run(remove_from_path, directory)
