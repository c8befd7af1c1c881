"""Interactive shell sessions through ``gcloud compute ssh``."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable

from gssh.constants import GCLOUD_BINARY
from gssh.core.models import Instance
from gssh.providers.exceptions import LaunchError

logger = logging.getLogger(__name__)


def build_ssh_command(
    configuration_name: str, instance: Instance, username: str, binary: str = GCLOUD_BINARY
) -> list[str]:
    """Build the gcloud command line opening a shell on an instance.

    Parameters
    ----------
    configuration_name : str
        Configuration the instance belongs to
    instance : Instance
        Target instance
    username : str
        Remote login identity
    binary : str
        gcloud executable name or path

    Returns
    -------
    list[str]
        Command line arguments
    """
    return [
        binary,
        "compute",
        "ssh",
        "--configuration",
        configuration_name,
        f"{username}@{instance.name}",
        f"--zone={instance.zone_name}",
    ]


class GcloudShellLauncher:
    """Open blocking shell sessions that inherit the terminal.

    Parameters
    ----------
    username : str
        Remote login identity
    binary : str
        gcloud executable name or path
    run_command : Callable | None
        ``subprocess.run`` compatible callable, injectable for tests
    """

    def __init__(
        self,
        username: str,
        binary: str = GCLOUD_BINARY,
        run_command: Callable[..., subprocess.CompletedProcess] | None = None,
    ) -> None:
        self.username = username
        self.binary = binary
        self._run_command = run_command or subprocess.run

    def open_shell(self, configuration_name: str, instance: Instance) -> None:
        """Run an interactive session and block until it ends.

        Raises
        ------
        LaunchError
            If gcloud cannot be started or the session exits non-zero
        """
        command = build_ssh_command(configuration_name, instance, self.username, self.binary)
        logger.info("Connecting to %s in [%s]", instance.name, configuration_name)

        try:
            result = self._run_command(command, check=False)
        except FileNotFoundError as e:
            raise LaunchError(f"'{self.binary}' not found on PATH") from e
        except OSError as e:
            raise LaunchError(f"Failed to start shell session: {e}") from e

        if result.returncode != 0:
            raise LaunchError(
                f"Shell session to {instance.name} exited with status {result.returncode}",
                returncode=result.returncode,
            )
