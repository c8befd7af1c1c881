"""gcloud-backed inventory provider."""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Callable
from typing import Any

from gssh.constants import GCLOUD_BINARY, PROVIDER_TIMEOUT_SECONDS
from gssh.core.models import Configuration, Instance
from gssh.providers.exceptions import (
    ProviderCommandError,
    ProviderError,
    ProviderNotInstalledError,
    ProviderResponseError,
)

logger = logging.getLogger(__name__)


class GcloudProvider:
    """List configurations and instances by shelling out to gcloud.

    Parameters
    ----------
    binary : str
        gcloud executable name or path
    run_command : Callable | None
        ``subprocess.run`` compatible callable, injectable for tests
    timeout : float
        Timeout in seconds for each invocation

    Attributes
    ----------
    binary : str
        gcloud executable name or path
    timeout : float
        Timeout in seconds for each invocation
    """

    def __init__(
        self,
        binary: str = GCLOUD_BINARY,
        run_command: Callable[..., subprocess.CompletedProcess] | None = None,
        timeout: float = PROVIDER_TIMEOUT_SECONDS,
    ) -> None:
        self.binary = binary
        self.timeout = timeout
        self._run_command = run_command or subprocess.run

    def _run(self, *args: str) -> str:
        """Run a gcloud command and return its standard output.

        Raises
        ------
        ProviderNotInstalledError
            If the gcloud binary cannot be executed
        ProviderCommandError
            If gcloud exits with a non-zero status or times out
        """
        command = [self.binary, *args]
        logger.debug("Running %s", " ".join(command))

        try:
            result = self._run_command(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ProviderNotInstalledError(self.binary) from e
        except subprocess.TimeoutExpired as e:
            raise ProviderCommandError(command, -1, f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise ProviderError(f"Failed to run {self.binary}: {e}") from e

        if result.returncode != 0:
            raise ProviderCommandError(command, result.returncode, result.stderr or "")

        return result.stdout

    def _run_json(self, *args: str) -> list[dict[str, Any]]:
        output = self._run(*args, "--format=json")

        try:
            data = json.loads(output or "[]")
        except ValueError as e:
            raise ProviderResponseError(f"Invalid JSON from {self.binary}: {e}") from e

        if not isinstance(data, list):
            raise ProviderResponseError(
                f"Expected a JSON list from {self.binary}, got {type(data).__name__}"
            )

        return data

    def list_configurations(self) -> list[Configuration]:
        """List gcloud named configurations.

        Returns
        -------
        list[Configuration]
            Configurations in gcloud's order, at most one marked active

        Raises
        ------
        ProviderError
            If gcloud fails or returns malformed data
        """
        raw = self._run_json("config", "configurations", "list")

        try:
            return [Configuration.from_gcloud(entry) for entry in raw]
        except (KeyError, TypeError, AttributeError) as e:
            raise ProviderResponseError(f"Unexpected configuration entry: {e}") from e

    def list_instances(self, configuration_name: str) -> list[Instance]:
        """List compute instances of a configuration, every status included.

        Parameters
        ----------
        configuration_name : str
            gcloud configuration to query

        Returns
        -------
        list[Instance]
            Instances as reported by gcloud

        Raises
        ------
        ProviderError
            If gcloud fails or returns malformed data
        """
        raw = self._run_json(
            "compute", "instances", "list", "--configuration", configuration_name
        )

        try:
            return [Instance.from_dict(entry) for entry in raw]
        except (KeyError, TypeError, AttributeError) as e:
            raise ProviderResponseError(f"Unexpected instance entry: {e}") from e

    def activate_configuration(self, name: str) -> None:
        """Make a configuration gcloud's current one.

        Raises
        ------
        ProviderError
            If gcloud fails
        """
        self._run("config", "configurations", "activate", name)
        logger.info("Activated gcloud configuration %s", name)
