"""MCP Server for inspecting and updating the user's shell PATH setup.

This server provides tools for detecting the user's shell, locating its
rc files and idempotently adding or removing PATH entries in them.
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP

from .shell.logging import configure_logging
from .tools import (
    add_path as add_path_impl,
    check_path as check_path_impl,
    check_status as check_status_impl,
    detect_shell as detect_shell_impl,
    remove_path as remove_path_impl,
)

# Initialize the MCP server
mcp = FastMCP("What The Path")


@mcp.tool()
def detect_shell() -> dict:
    """Detect the user's shell and list the rc files it reads on startup.

    Returns:
        - success: Whether detection succeeded
        - shell: Detected shell (fish/zsh/bash/posix)
        - rcfiles: Candidate rc files, primary first
        - error: Error message if failed
    """
    return detect_shell_impl()


@mcp.tool()
def check_path(
    directory: Annotated[str, "Directory to look for in PATH"],
) -> dict:
    """Check whether a directory is listed in the server's PATH."""
    return check_path_impl(directory)


@mcp.tool()
def add_path(
    directory: Annotated[str, "Directory to add to PATH"],
    force: Annotated[
        bool,
        "Edit the rc file even if the directory is already in PATH",
    ] = False,
) -> dict:
    """Add a directory to PATH in the user's shell configuration.

    Appends the PATH line to the primary rc file of the detected shell
    (.bashrc, .zshenv, .profile or a fragment in fish's conf.d). Running it
    twice does not duplicate the line.

    After running this tool, restart your terminal or source the rc file
    to apply the PATH change.
    """
    return add_path_impl(directory=directory, force=force)


@mcp.tool()
def remove_path(
    directory: Annotated[str, "Directory to remove from the shell config"],
) -> dict:
    """Remove the PATH line for a directory from the user's shell configuration."""
    return remove_path_impl(directory=directory)


@mcp.tool()
def check_status() -> dict:
    """Check the detected shell, its rc files and configured PATH entries."""
    return check_status_impl()


def main():
    """Entry point for the MCP server."""
    configure_logging()
    mcp.run()


if __name__ == "__main__":
    main()
