"""Key help panel built from the bindings' help metadata."""

from __future__ import annotations

from rich.console import RenderableType

from tui_tabs.keys import KeyBinding
from tui_tabs.panels import BasePanel, kv_table, panel_from_table


class KeysPanel(BasePanel):
    def __init__(self, bindings: list[KeyBinding], extra: list[tuple[str, str]] | None = None) -> None:
        super().__init__()
        self.bindings = bindings
        self.extra = extra or []

    def rows(self) -> list[tuple[str, str]]:
        rows = [(b.help_key, b.help_desc) for b in self.bindings if b.enabled]
        return rows + self.extra

    def view(self) -> RenderableType:
        return panel_from_table("Keys", "ok", kv_table(self.rows()), width=self.width)
