"""Demo panels that can live inside a tab, plus rendering helpers."""

from __future__ import annotations

from typing import Optional

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tui_tabs.models import Cmd, Msg

STATUS_BORDER = {
    "ok": "cyan",
    "warn": "yellow",
    "error": "red",
}


def border_for(status: str) -> str:
    return STATUS_BORDER.get(status, "cyan")


def empty_panel(title: str, message: str = "No data") -> Panel:
    return Panel(Text(message, style="dim"), title=f"[bold]{title}[/bold]", border_style="cyan")


def kv_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(box=None, show_header=False, expand=True, pad_edge=False)
    table.add_column("key", style="bold")
    table.add_column("value", style="default")
    for key, value in rows:
        table.add_row(key, value)
    return table


def panel_from_table(title: str, status: str, table: Table, width: int | None = None) -> Panel:
    return Panel(table, title=f"[bold]{title}[/bold]", border_style=border_for(status), width=width or None)


def panel_from_text(title: str, status: str, text: str, width: int | None = None) -> Panel:
    return Panel(Text(text), title=f"[bold]{title}[/bold]", border_style=border_for(status), width=width or None)


class BasePanel:
    """No-op lifecycle; subclasses override view() and whatever else they need."""

    def __init__(self) -> None:
        self.width = 0
        self.height = 0

    def init(self) -> Optional[list[Cmd]]:
        return None

    def update(self, msg: Msg) -> tuple["BasePanel", Optional[Cmd]]:
        return self, None

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def view(self) -> RenderableType:
        raise NotImplementedError
