"""Persisted, ranked log of past connections."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from gssh.core.models import Connection, Instance
from gssh.utils import write_json_atomic

logger = logging.getLogger(__name__)


class HistoryLog:
    """Append-only connection history backed by a JSON file.

    The whole log is rewritten on every change. Persistence failures are
    logged and never reach the caller. An unreadable file is reported once
    per file state, not on every listing.

    Parameters
    ----------
    history_file : Path
        JSON file holding the log

    Attributes
    ----------
    history_file : Path
        JSON file holding the log
    connections : list[Connection]
        In-memory log in append order
    """

    def __init__(self, history_file: Path) -> None:
        self.history_file = Path(history_file)
        self._save_failed = False
        self._known_state: tuple[int, int] | None = None
        self.connections: list[Connection] = self._load()

    def append(self, configuration_name: str, instance: Instance) -> Connection:
        """Record a connection made now.

        Parameters
        ----------
        configuration_name : str
            Configuration the connection is made under
        instance : Instance
            Target instance

        Returns
        -------
        Connection
            The recorded connection (unranked)
        """
        connection = Connection(
            configuration_name=configuration_name,
            instance=instance,
            timestamp=datetime.now(),
        )
        self.connections.append(connection)
        self._save()
        return connection

    def list(self) -> list[Connection]:
        """Return connections newest first, each carrying its recency rank.

        The file is re-read when another gssh process changed it since the
        last load or save. While the last save failed, the in-memory log is
        authoritative and the file is not read. Equal timestamps keep their
        append order.
        """
        if not self._save_failed and self._file_state() != self._known_state:
            self.connections = self._load()

        ordered = sorted(self.connections, key=lambda c: c.timestamp, reverse=True)
        return [connection.ranked(index) for index, connection in enumerate(ordered)]

    def clear(self) -> None:
        """Remove every connection from memory and disk."""
        self.connections = []
        self._save()

    def _file_state(self) -> tuple[int, int] | None:
        try:
            stat = self.history_file.stat()
        except OSError:
            return None
        return stat.st_mtime_ns, stat.st_size

    def _load(self) -> list[Connection]:
        self._known_state = self._file_state()
        if self._known_state is None:
            return []

        try:
            raw = json.loads(self.history_file.read_text())
            return [Connection.from_dict(entry) for entry in raw or []]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("Ignoring unreadable history file %s: %s", self.history_file, e)
            return []

    def _save(self) -> None:
        try:
            write_json_atomic(self.history_file, [c.to_dict() for c in self.connections])
        except (OSError, TypeError) as e:
            self._save_failed = True
            logger.warning("Failed to write history file %s: %s", self.history_file, e)
            return

        self._save_failed = False
        self._known_state = self._file_state()
