"""Panel focus order and terminal geometry partitioning."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

TOP_ROW_RATIO = 0.6
CONFIGURATIONS_WIDTH_RATIO = 1 / 3
STATUS_BAR_HEIGHT = 1

MIN_PANEL_WIDTH = 10
MIN_PANEL_HEIGHT = 5


class PanelFocus(IntEnum):
    """Focusable panels in tab order."""

    CONFIGURATIONS = 0
    INSTANCES = 1
    HISTORY = 2

    def next(self) -> PanelFocus:
        return PanelFocus((self + 1) % len(PanelFocus))

    def previous(self) -> PanelFocus:
        return PanelFocus((self - 1) % len(PanelFocus))

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Region:
    """Outer size of a screen region in cells."""

    width: int
    height: int


@dataclass(frozen=True)
class LayoutRegions:
    """Sizes of the four screen regions."""

    configurations: Region
    instances: Region
    history: Region
    status_bar: Region

    def for_panel(self, focus: PanelFocus) -> Region:
        return {
            PanelFocus.CONFIGURATIONS: self.configurations,
            PanelFocus.INSTANCES: self.instances,
            PanelFocus.HISTORY: self.history,
        }[focus]


class LayoutManager:
    """Partition the terminal into panel and status bar regions.

    The configuration and instance panels share the top row, the history
    panel spans the full width below them, and the status bar is docked to
    the last line.
    """

    def __init__(
        self,
        top_row_ratio: float = TOP_ROW_RATIO,
        configurations_width_ratio: float = CONFIGURATIONS_WIDTH_RATIO,
    ) -> None:
        self.top_row_ratio = top_row_ratio
        self.configurations_width_ratio = configurations_width_ratio

    def compute(self, width: int, height: int) -> LayoutRegions:
        """Compute region sizes for a terminal size.

        Parameters
        ----------
        width : int
            Terminal width in cells
        height : int
            Terminal height in cells

        Returns
        -------
        LayoutRegions
            Region sizes; panel regions never shrink below the minimum size
        """
        width = max(width, 2 * MIN_PANEL_WIDTH)
        panels_height = max(height - STATUS_BAR_HEIGHT, 2 * MIN_PANEL_HEIGHT)

        top_height = max(MIN_PANEL_HEIGHT, int(panels_height * self.top_row_ratio))
        history_height = max(MIN_PANEL_HEIGHT, panels_height - top_height)

        configurations_width = max(MIN_PANEL_WIDTH, int(width * self.configurations_width_ratio))
        instances_width = max(MIN_PANEL_WIDTH, width - configurations_width)

        return LayoutRegions(
            configurations=Region(configurations_width, top_height),
            instances=Region(instances_width, top_height),
            history=Region(width, history_height),
            status_bar=Region(width, STATUS_BAR_HEIGHT),
        )
