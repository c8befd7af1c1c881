"""Utility functions for gssh."""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any

from gssh.constants import DATETIME_FORMAT, STATE_DIR_NAME


def get_state_dir() -> Path:
    """Return the directory holding config, cache and history files.

    Uses ``GSSH_HOME`` when set, otherwise ``~/.gssh``.

    Returns
    -------
    Path
        State directory path (not created)
    """
    override = os.environ.get("GSSH_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / STATE_DIR_NAME


def write_json_atomic(path: Path, data: Any) -> None:
    """Serialize data as JSON and atomically replace the target file.

    The payload is written to a temporary file in the same directory and
    moved over the target, so readers never observe a partial file.

    Parameters
    ----------
    path : Path
        Destination file
    data : Any
        JSON-serializable payload

    Raises
    ------
    OSError
        If the directory cannot be created or the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")

    try:
        with os.fdopen(fd, "w") as f:
            json.dump(data, f)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def format_timestamp(dt: datetime | None) -> str:
    """Format a timestamp for display, or a dash when unknown."""
    if dt is None:
        return "-"
    return dt.strftime(DATETIME_FORMAT)
