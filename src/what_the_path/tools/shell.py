"""Shell inspection tools."""

from ..shell import ShellError, detect_shell as detect_shell_impl, exists_in_path, get_rcfiles


def detect_shell() -> dict:
    """Detect the user's shell and list its rc files.

    Returns:
        A dictionary with:
        - success: Whether detection succeeded
        - shell: Detected shell (fish/zsh/bash/posix)
        - rcfiles: Candidate rc files, primary first
        - error: Error message if failed
    """
    try:
        shell = detect_shell_impl()
        rcfiles = get_rcfiles(shell)
    except ShellError as e:
        return {
            "success": False,
            "shell": None,
            "rcfiles": [],
            "error": str(e),
        }

    return {
        "success": True,
        "shell": shell.value,
        "rcfiles": [str(p) for p in rcfiles],
        "error": None,
    }


def check_path(directory: str) -> dict:
    """Check whether a directory is listed in PATH."""
    return {
        "directory": directory,
        "in_path": exists_in_path(directory),
    }
