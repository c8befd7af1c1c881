"""Global constants for gssh.

This module contains application-wide constants shared by the inventory cache,
history log, provider shims and the TUI.
"""

from enum import Enum

REFRESH_INTERVAL_SECONDS = 1.0
"""Interval in seconds between automatic instance and history refreshes.

The refresh is served from the on-disk snapshot unless it is missing, so the
periodic tick does not hit the cloud API every second.
"""

SPEED_DIAL_DELAY_SECONDS = 0.5
"""Delay in seconds between a speed-dial keypress and the connection.

Gives the history panel time to render the highlighted entry before the
picker exits and the shell session takes over the terminal.
"""

SPEED_DIAL_SLOTS = 10
"""Number of history entries reachable with the digit keys 0-9."""

DATETIME_FORMAT = "%d/%m/%Y %H:%M:%S"
"""Display format for history timestamps and the last update footer."""

DEFAULT_SSH_USERNAME = "conductor"
"""Login identity written to a freshly created configuration file."""

DEFAULT_EXCLUSIONS = ("gke-",)
"""Instance name substrings excluded by a freshly created configuration file.

GKE node pools create many short-lived instances that are never an SSH target.
"""

STATE_DIR_NAME = ".gssh"
"""Directory under the user's home holding config, cache and history files."""

CONFIG_FILE_NAME = "config.yaml"
"""User-editable configuration file name inside the state directory."""

HISTORY_FILE_NAME = "history.json"
"""Connection history file name inside the state directory."""

CACHE_FILE_TEMPLATE = "instances_cache_{configuration}.json"
"""Per-configuration inventory snapshot file name template."""

GCLOUD_BINARY = "gcloud"
"""Name of the cloud CLI executable looked up on PATH."""

PROVIDER_TIMEOUT_SECONDS = 120
"""Timeout in seconds for non-interactive gcloud invocations.

Listing instances across all zones of a large project can take tens of
seconds; the timeout only guards against a hung CLI.
"""

EXIT_SUCCESS = 0
"""Exit code returned when the user quits the picker."""

EXIT_ERROR = 1
"""Exit code returned when a shell session or the configuration fails."""


class InstanceStatus(str, Enum):
    """Instance lifecycle status values reported by gcloud."""

    RUNNING = "RUNNING"
    STOPPED = "STOPPED"
    TERMINATED = "TERMINATED"
