"""Tabbed container widget for rich-rendered terminal UIs."""

from tui_tabs.tabgroup import TabGroup, TabItem, new

__all__ = ["TabGroup", "TabItem", "new"]
