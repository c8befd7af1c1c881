"""Logging handlers for TUI integration."""

import logging
import threading
from typing import TYPE_CHECKING

from textual.message import Message

if TYPE_CHECKING:
    from textual.app import App

logger = logging.getLogger(__name__)


class TuiLogMessage(Message):
    """Message delivering a log record to the TUI as a notification."""

    def __init__(self, text: str, severity: str = "information") -> None:
        self.text = text
        self.severity = severity
        super().__init__()


def severity_for(levelno: int) -> str:
    """Map a logging level to a Textual notification severity."""
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warning"
    return "information"


class TuiLogHandler(logging.Handler):
    """Logging handler that forwards records to a running Textual app.

    Writing to stdout while the app owns the terminal would corrupt the
    screen, so records are posted to the app and shown as notifications.

    Parameters
    ----------
    app : App
        Textual app instance

    Attributes
    ----------
    app : App
        Textual app instance
    """

    def __init__(self, app: "App", level: int = logging.WARNING) -> None:
        """Initialize TuiLogHandler.

        Parameters
        ----------
        app : App
            Textual app instance
        level : int
            Minimum level forwarded to the app
        """
        super().__init__(level)
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        """Post log record to the app.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to emit
        """
        msg = self.format(record)
        message = TuiLogMessage(msg, severity_for(record.levelno))

        try:
            if not hasattr(self.app, "_running") or not self.app._running:
                return

            if self.app._thread_id == threading.get_ident():
                self.app.notify(message.text, severity=message.severity)
                return

            self.app.post_message(message)
        except (RuntimeError, AttributeError) as e:
            logger.debug("Error emitting log message to TUI: %s", e)
