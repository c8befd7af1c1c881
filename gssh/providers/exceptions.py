"""Provider-agnostic exception hierarchy.

Provider errors are shown inline in the affected panel and never end the
picker. Launch errors end the process with a non-zero exit status.
"""

from __future__ import annotations

from collections.abc import Sequence


class ProviderError(Exception):
    """Base exception for inventory provider failures."""


class ProviderNotInstalledError(ProviderError):
    """Raised when the cloud CLI executable cannot be found."""

    def __init__(self, binary: str) -> None:
        self.binary = binary
        super().__init__(f"'{binary}' not found on PATH, install the Google Cloud SDK")


class ProviderCommandError(ProviderError):
    """Raised when a cloud CLI invocation exits with a non-zero status.

    Parameters
    ----------
    command : Sequence[str]
        Command line that failed
    returncode : int
        Process exit status
    stderr : str
        Captured standard error output
    """

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        message = f"'{' '.join(self.command)}' exited with status {returncode}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


class ProviderResponseError(ProviderError):
    """Raised when cloud CLI output cannot be parsed."""


class LaunchError(Exception):
    """Raised when a remote shell session fails to start or exits with an error.

    Parameters
    ----------
    message : str
        Human readable description
    returncode : int | None
        Exit status of the shell command, if it ran
    """

    def __init__(self, message: str, returncode: int | None = None) -> None:
        self.returncode = returncode
        super().__init__(message)
