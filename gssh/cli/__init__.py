"""Command line entry point."""

from __future__ import annotations

from gssh.cli.main import app, main, pick

__all__ = ["app", "main", "pick"]
