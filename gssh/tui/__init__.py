"""Textual TUI for gssh."""

from gssh.tui.app import GsshTUI

__all__ = ["GsshTUI"]
