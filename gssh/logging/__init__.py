"""Logging formatters and handlers for gssh."""

from gssh.logging.formatters import ConsoleFormatter
from gssh.logging.handlers import TuiLogHandler, TuiLogMessage, severity_for

__all__ = ["ConsoleFormatter", "TuiLogHandler", "TuiLogMessage", "severity_for"]
