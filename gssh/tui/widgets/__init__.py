"""TUI widgets module for gssh."""

from gssh.tui.widgets.selectable_list import FilterState, SelectableList, fuzzy_match

__all__ = ["FilterState", "SelectableList", "fuzzy_match"]
