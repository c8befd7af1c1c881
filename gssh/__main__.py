#!/usr/bin/env python3
"""Run gssh with ``python -m gssh``."""

from __future__ import annotations

from gssh.cli.main import main

if __name__ == "__main__":
    main()
