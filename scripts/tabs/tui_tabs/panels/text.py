"""Static text panel."""

from __future__ import annotations

from rich.console import RenderableType

from tui_tabs.panels import BasePanel, empty_panel, panel_from_text


class TextPanel(BasePanel):
    def __init__(self, title: str, body: str, status: str = "ok") -> None:
        super().__init__()
        self.title = title
        self.body = body
        self.status = status

    def view(self) -> RenderableType:
        if not self.body.strip():
            return empty_panel(self.title)
        return panel_from_text(self.title, self.status, self.body, width=self.width)
