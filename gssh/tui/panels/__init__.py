"""Picker panels."""

from gssh.tui.panels.base import Panel
from gssh.tui.panels.configurations import ConfigurationPanel
from gssh.tui.panels.history import HistoryPanel
from gssh.tui.panels.instances import InstancePanel

__all__ = ["ConfigurationPanel", "HistoryPanel", "InstancePanel", "Panel"]
