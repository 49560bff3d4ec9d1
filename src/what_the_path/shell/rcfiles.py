"""Catalog of rc files read by each supported shell."""

import os
from pathlib import Path
from typing import Mapping, Optional, Union

from .errors import HomeDirUnavailable, RcFileError
from .logging import get_logger
from .models import Shell

PathLike = Union[str, os.PathLike]

# Rc files relative to the base directory, primary candidate first
BASH_RCFILES = (".bashrc", ".bash_profile")
POSIX_RCFILES = (".profile",)
ZSH_PRIMARY = ".zshenv"
ZSH_SECONDARY = ".zshrc"
FISH_CONF_DIR = Path("fish") / "conf.d"


def home_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """Get the user's home directory from the HOME environment variable.

    Raises:
        HomeDirUnavailable: If HOME is unset or empty.
    """
    if env is None:
        env = os.environ
    home = env.get("HOME")
    if not home:
        raise HomeDirUnavailable()
    return Path(home)


def rcfiles_for(
    shell: Shell,
    home: PathLike,
    *,
    config_home: Optional[PathLike] = None,
    zdotdir: Optional[PathLike] = None,
) -> list[Path]:
    """Get the rc files for a shell, primary candidate first.

    Args:
        shell: Shell to look up.
        home: User's home directory.
        config_home: XDG config directory for fish. Defaults to home/.config.
        zdotdir: Directory holding zsh startup files. Defaults to home.

    Returns:
        Ordered list of rc file paths. For fish this is the conf.d
        directory, which is created if it does not exist.

    Raises:
        RcFileError: If the fish conf.d directory cannot be created.
    """
    home = Path(home)

    if shell is Shell.FISH:
        base = Path(config_home) if config_home else home / ".config"
        conf_dir = base / FISH_CONF_DIR
        try:
            conf_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RcFileError(conf_dir, "create directory", e) from e
        return [conf_dir]

    if shell is Shell.ZSH:
        base = Path(zdotdir) if zdotdir else home
        rcfiles = [base / ZSH_PRIMARY]
        if (base / ZSH_SECONDARY).is_file():
            rcfiles.append(base / ZSH_SECONDARY)
        return rcfiles

    if shell is Shell.BASH:
        return [home / name for name in BASH_RCFILES]

    return [home / name for name in POSIX_RCFILES]


def get_rcfiles(shell: Shell, env: Optional[Mapping[str, str]] = None) -> list[Path]:
    """Get the rc files for a shell using the current environment.

    Reads HOME, and XDG_CONFIG_HOME and ZDOTDIR when they are set.

    Raises:
        HomeDirUnavailable: If HOME is unset or empty.
        RcFileError: If the fish conf.d directory cannot be created.
    """
    if env is None:
        env = os.environ

    home = home_dir(env)
    rcfiles = rcfiles_for(
        shell,
        home,
        config_home=env.get("XDG_CONFIG_HOME") or None,
        zdotdir=env.get("ZDOTDIR") or None,
    )

    get_logger().debug(f"Rc files for {shell.value}: {[str(p) for p in rcfiles]}")
    return rcfiles
