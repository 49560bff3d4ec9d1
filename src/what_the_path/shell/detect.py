"""Shell detection utilities."""

import os
import sys
from typing import Mapping, Optional

from .errors import DetectError
from .logging import get_logger
from .models import Shell

# Executable base names, matched case-sensitively
SHELL_NAMES = {
    "fish": Shell.FISH,
    "zsh": Shell.ZSH,
    "bash": Shell.BASH,
}


def detect_shell(env: Optional[Mapping[str, str]] = None) -> Shell:
    """Detect the current user's shell from the SHELL environment variable.

    Only the base name of SHELL is considered, so both '/usr/bin/zsh' and
    'zsh' are recognized. Anything else, including an unset or empty
    variable, falls back to Shell.POSIX.

    Args:
        env: Environment mapping to read. Defaults to os.environ.

    Returns:
        The detected Shell.

    Raises:
        DetectError: If the environment cannot be read at all.
    """
    if sys.platform == "win32":
        raise DetectError("Shell detection is only supported on Unix platforms")

    if env is None:
        env = os.environ

    try:
        value = env.get("SHELL") or ""
    except (OSError, UnicodeError) as e:
        raise DetectError(f"Failed to read SHELL environment variable: {e}") from e

    name = os.path.basename(value)
    shell = SHELL_NAMES.get(name, Shell.POSIX)

    get_logger().debug(f"Detected shell {shell.value} from SHELL={value!r}")
    return shell
