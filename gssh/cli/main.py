"""CLI entry point for gssh."""

from __future__ import annotations

import logging
import os
import sys

import typer

from gssh.constants import EXIT_ERROR
from gssh.logging import ConsoleFormatter
from gssh.providers import LaunchError

app = typer.Typer(
    name="gssh",
    help="Pick a GCP instance in a terminal UI and open an SSH session on it.",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def get_gssh_class() -> type:
    """Get the Gssh session class on-demand to keep CLI imports light.

    Returns
    -------
    type
        Gssh session class
    """
    from gssh.session import Gssh

    return Gssh


@app.command()
def pick() -> None:
    """Pick a GCP instance in a terminal UI and open an SSH session on it.

    The picker comes back after each session; press q or ctrl+c to leave.
    """
    Gssh = get_gssh_class()
    raise typer.Exit(Gssh().pick())


def handle_launch_error(error: LaunchError, debug_mode: bool) -> None:
    """Handle a shell session that failed to start or ended with an error.

    Parameters
    ----------
    error : LaunchError
        The launch error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    LaunchError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise error

    print(f"SSH session failed: {error}")
    sys.exit(EXIT_ERROR)


def handle_value_error(error: ValueError, debug_mode: bool) -> None:
    """Handle an invalid configuration file.

    Parameters
    ----------
    error : ValueError
        The value error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ValueError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise error

    print(f"Configuration error: {error}")
    sys.exit(EXIT_ERROR)


def handle_runtime_error(error: RuntimeError, debug_mode: bool) -> None:
    """Handle unexpected runtime error.

    Parameters
    ----------
    error : RuntimeError
        The runtime error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    RuntimeError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise error

    print(f"Unexpected error: {error}")
    sys.exit(EXIT_ERROR)


def configure_logging() -> None:
    """Send log records to stdout with level prefixes."""
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(ConsoleFormatter("%(message)s"))

    logging.basicConfig(level=logging.INFO, handlers=[stdout_handler], force=True)


def main() -> None:
    """Entry point for the Typer CLI with graceful error handling.

    Notes
    -----
    ``GSSH_DEBUG=1`` re-raises errors with their traceback instead of
    printing a one-line message.
    """
    configure_logging()

    debug_mode = os.environ.get("GSSH_DEBUG") == "1"

    try:
        app(prog_name="gssh")
    except LaunchError as e:
        handle_launch_error(e, debug_mode)
    except ValueError as e:
        handle_value_error(e, debug_mode)
    except RuntimeError as e:
        handle_runtime_error(e, debug_mode)


if __name__ == "__main__":
    main()
