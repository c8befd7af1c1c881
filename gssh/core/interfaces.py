"""Protocols for the external collaborators of the picker."""

from __future__ import annotations

from typing import Protocol

from gssh.core.models import Configuration, Instance


class InventoryProvider(Protocol):
    """Lists and activates configurations and lists their instances.

    Every method raises ``ProviderError`` on failure.
    """

    def list_configurations(self) -> list[Configuration]: ...

    def list_instances(self, configuration_name: str) -> list[Instance]: ...

    def activate_configuration(self, name: str) -> None: ...


class ShellLauncher(Protocol):
    """Opens an interactive shell on an instance.

    ``open_shell`` blocks until the session ends and raises ``LaunchError``
    if the session could not be started or exited with an error.
    """

    def open_shell(self, configuration_name: str, instance: Instance) -> None: ...
