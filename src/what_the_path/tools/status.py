"""Status check tool."""

from ..config import get_config
from ..shell import exists_in_path
from .shell import detect_shell


def check_status() -> dict:
    """Check the state of the user's shell setup.

    Returns information about:
    - The detected shell and its rc files
    - Whether the configuration is loaded
    - Which configured directories are already in PATH
    """
    shell_info = detect_shell()

    try:
        config = get_config()
        config_loaded = True
        config_error = None
        paths = {p: exists_in_path(p) for p in config.paths}
        config_file = str(config.config_file) if config.config_file else None
    except Exception as e:
        config_loaded = False
        config_error = str(e)
        paths = {}
        config_file = None

    return {
        "shell": shell_info["shell"],
        "rcfiles": shell_info["rcfiles"],
        "shell_error": shell_info["error"],
        "config_loaded": config_loaded,
        "config_file": config_file,
        "config_error": config_error,
        "paths": paths,
    }
