"""Message vocabulary exchanged between the panels and the root coordinator.

Panel-bound requests and worker results do not bubble: they are handled by
the panel they are posted to. Selection events bubble up to the app.
"""

from __future__ import annotations

from datetime import datetime

from textual.message import Message

from gssh.core.models import Configuration, Connection, Instance
from gssh.tui.layout import LayoutRegions


class RefreshInstances(Message, bubble=False):
    """Ask the instance panel to load the instances of a configuration."""

    def __init__(self, configuration_name: str, force_invalidate: bool = False) -> None:
        self.configuration_name = configuration_name
        self.force_invalidate = force_invalidate
        super().__init__()


class InstancesFetched(Message, bubble=False):
    """Worker result carrying a configuration's instances."""

    def __init__(
        self, configuration_name: str, instances: list[Instance], last_update: datetime
    ) -> None:
        self.configuration_name = configuration_name
        self.instances = instances
        self.last_update = last_update
        super().__init__()


class ConfigurationsFetched(Message, bubble=False):
    """Worker result carrying the provider's configurations."""

    def __init__(self, configurations: list[Configuration]) -> None:
        self.configurations = configurations
        super().__init__()


class RefreshConfigurations(Message, bubble=False):
    """Ask the configuration panel to reload its list."""


class RefreshHistory(Message, bubble=False):
    """Ask the history panel to re-read the history log."""


class ClearHistory(Message, bubble=False):
    """Ask the history panel to clear the history log."""


class SpeedDial(Message, bubble=False):
    """Ask the history panel to connect to the entry of a given rank."""

    def __init__(self, rank: int) -> None:
        self.rank = rank
        super().__init__()


class FetchFailed(Message, bubble=False):
    """Worker result carrying a provider error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__()


class LayoutComputed(Message, bubble=False):
    """Region sizes recomputed after a terminal resize."""

    def __init__(self, regions: LayoutRegions) -> None:
        self.regions = regions
        super().__init__()


class ConfigurationSelected(Message):
    """The highlighted configuration changed."""

    def __init__(self, configuration: Configuration) -> None:
        self.configuration = configuration
        super().__init__()


class InstanceSelected(Message):
    """An instance was chosen; ends the picker."""

    def __init__(self, configuration_name: str, instance: Instance) -> None:
        self.configuration_name = configuration_name
        self.instance = instance
        super().__init__()


class ConnectionSelected(Message):
    """A history entry was chosen; ends the picker."""

    def __init__(self, connection: Connection) -> None:
        self.connection = connection
        super().__init__()


class FilteringStateChanged(Message):
    """The instance panel entered or left filter entry."""

    def __init__(self, filtering: bool) -> None:
        self.filtering = filtering
        super().__init__()
