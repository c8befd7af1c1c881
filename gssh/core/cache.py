"""Per-configuration on-disk snapshot of the instance inventory."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from gssh.constants import CACHE_FILE_TEMPLATE
from gssh.core.exclusions import filter_excluded, normalize_exclusions
from gssh.core.interfaces import InventoryProvider
from gssh.core.models import Instance
from gssh.utils import write_json_atomic

logger = logging.getLogger(__name__)


class InventoryCache:
    """Fetch instance lists through the provider and cache them on disk.

    Snapshots hold the exclusion-filtered list with every status, so
    excluded instances never reach the cache files. Status filtering is left
    to the display layer.

    Parameters
    ----------
    provider : InventoryProvider
        Source of fresh instance lists
    cache_dir : Path
        Directory holding one snapshot file per configuration
    exclusions : Sequence[str]
        Instance name substrings to drop

    Attributes
    ----------
    provider : InventoryProvider
        Source of fresh instance lists
    cache_dir : Path
        Snapshot directory
    exclusions : tuple[str, ...]
        Normalized exclusion substrings
    """

    def __init__(
        self,
        provider: InventoryProvider,
        cache_dir: Path,
        exclusions: Sequence[str] = (),
    ) -> None:
        self.provider = provider
        self.cache_dir = Path(cache_dir)
        self.exclusions = normalize_exclusions(exclusions)

    def snapshot_path(self, configuration_name: str) -> Path:
        """Return the snapshot file path for a configuration."""
        return self.cache_dir / CACHE_FILE_TEMPLATE.format(configuration=configuration_name)

    def refresh(
        self, configuration_name: str, force_invalidate: bool = False
    ) -> tuple[list[Instance], datetime]:
        """Return the instances of a configuration, from cache when possible.

        Parameters
        ----------
        configuration_name : str
            Configuration to list instances for
        force_invalidate : bool
            Delete the snapshot and fetch from the provider

        Returns
        -------
        tuple[list[Instance], datetime]
            Exclusion-filtered instances and the time the data was fetched

        Raises
        ------
        ProviderError
            If the snapshot is unusable and the provider fails
        """
        path = self.snapshot_path(configuration_name)

        if force_invalidate:
            self.invalidate(configuration_name)

        cached = self._read_snapshot(path)

        if cached:
            instances = filter_excluded(cached, self.exclusions)
            return instances, self._snapshot_mtime(path)

        logger.debug("Fetching instances for configuration %s", configuration_name)
        fetched = self.provider.list_instances(configuration_name)
        instances = filter_excluded(fetched, self.exclusions)
        last_update = datetime.now()
        self._write_snapshot(path, instances)

        return instances, last_update

    def invalidate(self, configuration_name: str) -> None:
        """Delete the snapshot of a configuration if it exists."""
        path = self.snapshot_path(configuration_name)

        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to delete instance cache %s: %s", path, e)

    def _read_snapshot(self, path: Path) -> list[Instance]:
        """Read a snapshot, returning an empty list when it is unusable."""
        if not path.exists():
            return []

        try:
            raw = json.loads(path.read_text())
            return [Instance.from_dict(entry) for entry in raw or []]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.debug("Ignoring unusable instance cache %s: %s", path, e)
            return []

    def _snapshot_mtime(self, path: Path) -> datetime:
        try:
            return datetime.fromtimestamp(path.stat().st_mtime)
        except OSError:
            return datetime.now()

    def _write_snapshot(self, path: Path, instances: list[Instance]) -> None:
        try:
            write_json_atomic(path, [instance.to_dict() for instance in instances])
        except (OSError, TypeError) as e:
            logger.warning("Failed to write instance cache %s: %s", path, e)
