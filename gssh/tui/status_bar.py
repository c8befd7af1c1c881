"""Status bar showing the shortcuts of the focused panel."""

from __future__ import annotations

from rich.console import RenderableType
from rich.table import Table
from rich.text import Text
from textual.widgets import Static

from gssh.tui.layout import PanelFocus, Region

BASE_STYLE = "on color(62)"
KEY_STYLE = "color(62) on color(5)"
ACTION_STYLE = "#bbbbbb on color(62)"
PANEL_NAME_STYLE = "color(4) on color(62)"

PANEL_ACTIONS: dict[PanelFocus, tuple[str, str]] = {
    PanelFocus.CONFIGURATIONS: ("Browse configurations", "Activate configuration"),
    PanelFocus.INSTANCES: ("Browse instances", "SSH to instance"),
    PanelFocus.HISTORY: ("Browse history", "SSH to instance"),
}


def shortcuts_for(panel: PanelFocus) -> list[tuple[str, str]]:
    """Return (key, action) hints available while a panel is focused."""
    arrows, enter = PANEL_ACTIONS[panel]
    return [
        ("↑↓", arrows),
        ("⇥", "Next panel"),
        ("/", "Filter instances"),
        ("↵", enter),
        ("0-9", "Speed dial"),
        ("R", "Reload instances"),
        ("C", "Clear history"),
        ("Q", "Quit"),
    ]


class StatusBar(Static):
    """One-line legend derived from the active panel.

    Attributes
    ----------
    active_panel : PanelFocus
        Panel whose shortcuts are shown
    """

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.active_panel = PanelFocus.CONFIGURATIONS

    def set_active_panel(self, panel: PanelFocus) -> None:
        self.active_panel = panel
        self.refresh()

    def apply_region(self, region: Region) -> None:
        self.styles.width = region.width
        self.styles.height = region.height

    def render(self) -> RenderableType:
        shortcuts = Text(style=BASE_STYLE)
        for key, action in shortcuts_for(self.active_panel):
            shortcuts.append(f"▌{key}▐", style=KEY_STYLE)
            shortcuts.append(f"{action} ", style=ACTION_STYLE)

        grid = Table.grid(expand=True)
        grid.add_column(justify="left")
        grid.add_column(justify="right")
        grid.add_row(Text(f"[{self.active_panel.label}]", style=PANEL_NAME_STYLE), shortcuts)
        return grid
