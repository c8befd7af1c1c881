"""Test fake implementations for dependency injection testing."""

from tests.unit.fakes.fake_inventory_provider import FakeInventoryProvider
from tests.unit.fakes.fake_shell_launcher import FakeShellLauncher

__all__ = ["FakeInventoryProvider", "FakeShellLauncher"]
