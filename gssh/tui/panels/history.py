"""History panel: past connections with speed-dial ranks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.text import Text

from gssh.constants import SPEED_DIAL_DELAY_SECONDS
from gssh.core.models import Connection
from gssh.tui.layout import PanelFocus
from gssh.tui.messages import ClearHistory, ConnectionSelected, RefreshHistory, SpeedDial
from gssh.tui.panels.base import Panel

if TYPE_CHECKING:
    from gssh.core.history import HistoryLog

logger = logging.getLogger(__name__)


class HistoryPanel(Panel):
    """Lists past connections, newest first, and reconnects to them.

    Parameters
    ----------
    history : HistoryLog
        Connection log
    speed_dial_delay : float
        Seconds between a speed-dial highlight and the connection
    """

    PANEL_FOCUS = PanelFocus.HISTORY

    def __init__(
        self,
        history: HistoryLog,
        speed_dial_delay: float = SPEED_DIAL_DELAY_SECONDS,
        *,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.history = history
        self.speed_dial_delay = speed_dial_delay

    def on_mount(self) -> None:
        self.post_message(RefreshHistory())

    def on_refresh_history(self, message: RefreshHistory) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read the history log; it is local so no worker is needed."""
        self.replace_items(self.history.list())

    def on_clear_history(self, message: ClearHistory) -> None:
        self.clear()

    def clear(self) -> None:
        self.history.clear()
        logger.debug("Cleared connection history")
        self.reload()

    def on_speed_dial(self, message: SpeedDial) -> None:
        self.speed_dial(message.rank)

    def speed_dial(self, rank: int) -> bool:
        """Highlight the entry of a rank and connect to it after a short delay.

        Parameters
        ----------
        rank : int
            0-based recency rank

        Returns
        -------
        bool
            False if no entry has this rank (nothing happens)
        """
        if not self.selection.select(rank):
            return False

        connection = self.selection.highlighted
        self.refresh()
        self.set_timer(self.speed_dial_delay, lambda: self._connect(connection))
        return True

    def _connect(self, connection: Connection) -> None:
        self.post_message(ConnectionSelected(connection))

    def select_highlighted(self) -> None:
        connection = self.selection.highlighted
        if connection is None:
            return
        self._connect(connection)

    def render_header(self) -> Text:
        return Text(" Connection history ")
