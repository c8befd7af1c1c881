"""Domain models shown in the picker lists.

Every model exposes the same displayable capability (``title``,
``description`` and ``filter_key``) so the panels can render and filter them
without knowing their concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Protocol

from gssh.constants import DATETIME_FORMAT, SPEED_DIAL_SLOTS, InstanceStatus


class Displayable(Protocol):
    """Capability implemented by every list item."""

    @property
    def title(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def filter_key(self) -> str: ...


def zone_name(zone: str) -> str:
    """Return the last path segment of a zone identifier.

    Parameters
    ----------
    zone : str
        Zone name or full zone URL
        (``https://.../projects/p/zones/europe-west1-b``)

    Returns
    -------
    str
        Bare zone name (``europe-west1-b``)
    """
    return zone.rstrip("/").rsplit("/", 1)[-1]


@dataclass(frozen=True)
class Configuration:
    """A gcloud named configuration (account/project pair).

    Attributes
    ----------
    name : str
        Configuration name, unique key
    account : str
        Account the configuration authenticates as
    project : str
        Default project of the configuration
    active : bool
        Whether gcloud reports this configuration as the current one
    """

    name: str
    account: str = ""
    project: str = ""
    active: bool = False

    @classmethod
    def from_gcloud(cls, raw: dict[str, Any]) -> Configuration:
        """Build a Configuration from one entry of ``configurations list`` JSON."""
        properties = raw.get("properties") or {}
        core = properties.get("core") or {}
        return cls(
            name=raw["name"],
            account=core.get("account", "") or "",
            project=core.get("project", "") or "",
            active=bool(raw.get("is_active", False)),
        )

    @property
    def title(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        return f"Account: {self.account}, Project: {self.project}"

    @property
    def filter_key(self) -> str:
        return self.name


@dataclass(frozen=True)
class Instance:
    """A remote compute instance scoped to one configuration.

    Attributes
    ----------
    name : str
        Instance name, unique within a configuration and zone
    zone : str
        Zone identifier as reported by the provider (name or URL)
    status : InstanceStatus | str
        Lifecycle status; unknown provider values are kept as plain strings
    """

    name: str
    zone: str
    status: InstanceStatus | str = InstanceStatus.RUNNING

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "status", InstanceStatus(self.status))
        except ValueError:
            object.__setattr__(self, "status", str(self.status))

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Instance:
        """Build an Instance from provider JSON or a cache snapshot entry.

        Raises
        ------
        KeyError
            If ``name`` or ``zone`` is missing
        """
        return cls(
            name=raw["name"],
            zone=raw["zone"],
            status=raw.get("status", InstanceStatus.TERMINATED.value),
        )

    def to_dict(self) -> dict[str, str]:
        status = self.status.value if isinstance(self.status, InstanceStatus) else self.status
        return {"name": self.name, "zone": self.zone, "status": status}

    @property
    def is_running(self) -> bool:
        return self.status is InstanceStatus.RUNNING

    @property
    def zone_name(self) -> str:
        return zone_name(self.zone)

    @property
    def title(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        return self.zone_name

    @property
    def filter_key(self) -> str:
        return self.name


@dataclass(frozen=True)
class Connection:
    """One recorded connection attempt.

    The instance is stored by value: it may no longer exist remotely.
    ``index`` is the recency rank assigned when the history is listed and is
    never persisted.

    Attributes
    ----------
    configuration_name : str
        Configuration the connection was made under
    instance : Instance
        Instance connected to
    timestamp : datetime
        When the user committed to connecting
    index : int | None
        0-based recency rank, or None when not yet ranked
    """

    configuration_name: str
    instance: Instance
    timestamp: datetime
    index: int | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Connection:
        return cls(
            configuration_name=raw["configuration_name"],
            instance=Instance.from_dict(raw["instance"]),
            timestamp=datetime.fromisoformat(raw["timestamp"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "configuration_name": self.configuration_name,
            "instance": self.instance.to_dict(),
            "timestamp": self.timestamp.isoformat(),
        }

    def ranked(self, index: int) -> Connection:
        return replace(self, index=index)

    @property
    def title(self) -> str:
        if self.index is not None and self.index < SPEED_DIAL_SLOTS:
            return f"[{self.index}] {self.instance.name}"
        return self.instance.name

    @property
    def description(self) -> str:
        when = self.timestamp.strftime(DATETIME_FORMAT)
        return f"{when} - {self.configuration_name} - {self.instance.zone_name}"

    @property
    def filter_key(self) -> str:
        return self.instance.name


@dataclass(frozen=True)
class ConnectionTarget:
    """Final picker result handed to the shell launcher."""

    configuration_name: str
    instance: Instance
