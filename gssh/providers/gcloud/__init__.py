"""gcloud CLI implementation of the inventory provider and shell launcher."""

from gssh.providers.gcloud.compute import GcloudProvider
from gssh.providers.gcloud.ssh import GcloudShellLauncher, build_ssh_command

__all__ = ["GcloudProvider", "GcloudShellLauncher", "build_ssh_command"]
