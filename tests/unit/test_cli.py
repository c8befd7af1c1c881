"""Unit tests for the gssh command line entry point."""

import logging
import sys
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from gssh.cli.main import app, configure_logging, main
from gssh.logging import ConsoleFormatter
from gssh.providers.exceptions import LaunchError

runner = CliRunner()


@pytest.fixture
def gssh_class():
    """Patch the lazily imported Gssh class with a mock.

    Yields
    ------
    MagicMock
        Mock class whose instances return exit code 0 from ``pick``
    """
    mock_class = MagicMock()
    mock_class.return_value.pick.return_value = 0

    with patch("gssh.cli.main.get_gssh_class", return_value=mock_class):
        yield mock_class


@pytest.fixture
def restore_root_logging():
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    yield

    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)


def run_main(argv: list[str]) -> int:
    """Run ``main`` with the given argv and return its exit code."""
    with patch.object(sys, "argv", argv), pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def test_no_arguments_starts_picker(gssh_class) -> None:
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    gssh_class.return_value.pick.assert_called_once_with()


def test_exit_code_comes_from_session(gssh_class) -> None:
    gssh_class.return_value.pick.return_value = 3

    result = runner.invoke(app, [])

    assert result.exit_code == 3


def test_extra_arguments_are_rejected(gssh_class) -> None:
    result = runner.invoke(app, ["prod"])

    assert result.exit_code == 2
    gssh_class.assert_not_called()


def test_help_describes_picker() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "Pick a GCP instance" in result.output


def test_main_exits_zero_after_quit(gssh_class, restore_root_logging) -> None:
    assert run_main(["gssh"]) == 0


def test_launch_error_prints_message_and_exits_one(
    gssh_class, restore_root_logging, capsys
) -> None:
    gssh_class.return_value.pick.side_effect = LaunchError("ssh to web-1 failed", returncode=255)

    assert run_main(["gssh"]) == 1
    assert "SSH session failed: ssh to web-1 failed" in capsys.readouterr().out


def test_value_error_prints_configuration_error(
    gssh_class, restore_root_logging, capsys
) -> None:
    gssh_class.return_value.pick.side_effect = ValueError("ssh must be a mapping")

    assert run_main(["gssh"]) == 1
    assert "Configuration error: ssh must be a mapping" in capsys.readouterr().out


def test_runtime_error_prints_unexpected_error(
    gssh_class, restore_root_logging, capsys
) -> None:
    gssh_class.return_value.pick.side_effect = RuntimeError("disk full")

    assert run_main(["gssh"]) == 1
    assert "Unexpected error: disk full" in capsys.readouterr().out


def test_debug_mode_reraises(gssh_class, restore_root_logging, monkeypatch) -> None:
    monkeypatch.setenv("GSSH_DEBUG", "1")
    gssh_class.return_value.pick.side_effect = LaunchError("ssh to web-1 failed", returncode=1)

    with patch.object(sys, "argv", ["gssh"]), pytest.raises(LaunchError):
        main()


def test_configure_logging_writes_to_stdout(restore_root_logging) -> None:
    configure_logging()

    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO
    assert len(root_logger.handlers) == 1
    handler = root_logger.handlers[0]
    assert handler.stream is sys.stdout
    assert isinstance(handler.formatter, ConsoleFormatter)
