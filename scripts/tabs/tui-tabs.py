#!/usr/bin/env python3
"""Thin entrypoint for the tab group demo host."""

from __future__ import annotations

from tui_tabs.app import main


if __name__ == "__main__":
    raise SystemExit(main())
