"""Unit tests for gcloud shell sessions."""

import subprocess
from unittest.mock import Mock

import pytest

from gssh.core.models import Instance
from gssh.providers import LaunchError
from gssh.providers.gcloud import GcloudShellLauncher, build_ssh_command

INSTANCE = Instance(
    "web-1",
    "https://www.googleapis.com/compute/v1/projects/p/zones/europe-west1-b",
    "RUNNING",
)


def test_build_ssh_command() -> None:
    assert build_ssh_command("prod", INSTANCE, "conductor") == [
        "gcloud",
        "compute",
        "ssh",
        "--configuration",
        "prod",
        "conductor@web-1",
        "--zone=europe-west1-b",
    ]


def test_open_shell_inherits_terminal() -> None:
    run_command = Mock(return_value=subprocess.CompletedProcess(args=[], returncode=0))
    launcher = GcloudShellLauncher("alice", run_command=run_command)

    launcher.open_shell("prod", INSTANCE)

    run_command.assert_called_once_with(
        build_ssh_command("prod", INSTANCE, "alice"),
        check=False,
    )


def test_non_zero_exit_raises_launch_error() -> None:
    run_command = Mock(return_value=subprocess.CompletedProcess(args=[], returncode=255))
    launcher = GcloudShellLauncher("alice", run_command=run_command)

    with pytest.raises(LaunchError, match="exited with status 255") as exc_info:
        launcher.open_shell("prod", INSTANCE)

    assert exc_info.value.returncode == 255


def test_missing_binary_raises_launch_error() -> None:
    launcher = GcloudShellLauncher("alice", run_command=Mock(side_effect=FileNotFoundError()))

    with pytest.raises(LaunchError, match="not found on PATH") as exc_info:
        launcher.open_shell("prod", INSTANCE)

    assert exc_info.value.returncode is None


def test_os_error_raises_launch_error() -> None:
    launcher = GcloudShellLauncher("alice", run_command=Mock(side_effect=OSError("boom")))

    with pytest.raises(LaunchError, match="Failed to start shell session"):
        launcher.open_shell("prod", INSTANCE)
