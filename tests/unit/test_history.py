"""Unit tests for the connection history log."""

import json
import logging
from datetime import datetime
from unittest.mock import patch

from gssh.core.history import HistoryLog
from gssh.core.models import Connection, Instance

WEB_1 = Instance("web-1", "europe-west1-b", "RUNNING")
WEB_2 = Instance("web-2", "europe-west1-c", "RUNNING")
DB_1 = Instance("db-1", "us-central1-a", "RUNNING")


def write_history(path, connections) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps([connection.to_dict() for connection in connections]))


def test_list_ranks_newest_first(history) -> None:
    """Test that entries are ordered by timestamp, not by append order."""
    write_history(
        history.history_file,
        [
            Connection("prod", WEB_1, datetime(2024, 1, 2, 10, 0, 0)),
            Connection("prod", WEB_2, datetime(2024, 1, 3, 10, 0, 0)),
            Connection("dev", DB_1, datetime(2024, 1, 1, 10, 0, 0)),
        ],
    )

    listed = history.list()

    assert [c.instance.name for c in listed] == ["web-2", "web-1", "db-1"]
    assert [c.index for c in listed] == [0, 1, 2]
    assert listed[0].title == "[0] web-2"


def test_equal_timestamps_keep_append_order(history) -> None:
    moment = datetime(2024, 1, 1, 10, 0, 0)
    write_history(
        history.history_file,
        [Connection("prod", WEB_1, moment), Connection("prod", WEB_2, moment)],
    )

    assert [c.instance.name for c in history.list()] == ["web-1", "web-2"]


def test_append_persists_and_is_listed_first(history, isolated_state_dir) -> None:
    history.append("prod", WEB_1)
    history.append("dev", DB_1)

    reloaded = HistoryLog(isolated_state_dir / "history.json")
    listed = reloaded.list()

    assert [c.instance.name for c in listed] == ["db-1", "web-1"]
    assert listed[0].configuration_name == "dev"


def test_append_records_current_time(history) -> None:
    before = datetime.now()
    connection = history.append("prod", WEB_1)

    assert connection.timestamp >= before
    assert connection.index is None


def test_list_picks_up_entries_written_by_another_log(history, isolated_state_dir) -> None:
    other = HistoryLog(isolated_state_dir / "history.json")
    other.append("prod", WEB_2)

    assert [c.instance.name for c in history.list()] == ["web-2"]


def test_clear_empties_memory_and_disk(history) -> None:
    history.append("prod", WEB_1)

    history.clear()

    assert history.list() == []
    assert json.loads(history.history_file.read_text()) == []


def test_missing_file_loads_empty(tmp_path) -> None:
    assert HistoryLog(tmp_path / "nope" / "history.json").list() == []


def test_corrupt_file_loads_empty_with_warning(history, caplog) -> None:
    history.history_file.parent.mkdir(parents=True, exist_ok=True)
    history.history_file.write_text("[{]")

    with caplog.at_level(logging.WARNING, logger="gssh.core.history"):
        assert history.list() == []

    assert "Ignoring unreadable history file" in caplog.text


def test_corrupt_file_warns_once(history, caplog) -> None:
    history.history_file.parent.mkdir(parents=True, exist_ok=True)
    history.history_file.write_text("[{]")

    with caplog.at_level(logging.WARNING, logger="gssh.core.history"):
        history.list()
        history.list()

    warnings = [r for r in caplog.records if "Ignoring unreadable history file" in r.message]
    assert len(warnings) == 1


def test_failed_append_is_still_listed(history, caplog) -> None:
    with (
        patch("gssh.core.history.write_json_atomic", side_effect=OSError("disk full")),
        caplog.at_level(logging.WARNING, logger="gssh.core.history"),
    ):
        history.append("prod", WEB_1)

    assert [c.instance.name for c in history.list()] == ["web-1"]
    assert "Failed to write history file" in caplog.text


def test_failed_clear_still_lists_empty(history) -> None:
    history.append("prod", WEB_1)

    with patch("gssh.core.history.write_json_atomic", side_effect=OSError("disk full")):
        history.clear()

    assert history.list() == []
    assert history.list() == []


def test_successful_save_after_failure_persists_memory_log(history, isolated_state_dir) -> None:
    with patch("gssh.core.history.write_json_atomic", side_effect=OSError("disk full")):
        history.append("prod", WEB_1)

    history.append("dev", DB_1)

    reloaded = HistoryLog(isolated_state_dir / "history.json")
    assert [c.instance.name for c in reloaded.list()] == ["db-1", "web-1"]
