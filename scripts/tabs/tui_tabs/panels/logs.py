"""Log tail panel that refreshes itself on a tick effect."""

from __future__ import annotations

import itertools
import logging
import time
from pathlib import Path
from typing import Optional

from rich.console import RenderableType
from rich.table import Table

from tui_tabs.formatting import compact_relative_age, display_time, split_log_line
from tui_tabs.keys import KeyBinding, matches
from tui_tabs.models import Cmd, Msg, TickMsg, tick
from tui_tabs.panels import BasePanel, panel_from_table

logger = logging.getLogger(__name__)

MAX_LINES = 200

# Per-instance tick tags: several tabs may tail the same file.
_panel_ids = itertools.count(1)

RELOAD_KEY = KeyBinding.new("ctrl+r", help_text=("ctrl+r", "Reload log"))


def read_tail(path: Path, limit: int = MAX_LINES) -> list[str]:
    try:
        return path.read_text(errors="replace").splitlines()[-limit:]
    except OSError as exc:
        logger.debug("cannot read %s: %s", path, exc)
        return []


class LogTailPanel(BasePanel):
    def __init__(self, path: Path, refresh_seconds: float = 2.0, limit: int = 25) -> None:
        super().__init__()
        self.path = Path(path)
        self.refresh_seconds = refresh_seconds
        self.limit = limit
        self.entries: list[dict] = []
        self.loaded_at: float | None = None
        self.tag = f"logs:{next(_panel_ids)}:{self.path}"

    def _schedule(self) -> Cmd:
        return tick(self.refresh_seconds, self.tag)

    def reload(self) -> None:
        entries = []
        for raw in read_tail(self.path):
            ts, text = split_log_line(raw)
            if not text:
                continue
            entries.append({"time": display_time(ts), "message": text})
        self.entries = entries[-self.limit :]
        self.loaded_at = time.time()

    def init(self) -> Optional[list[Cmd]]:
        self.reload()
        return [self._schedule()]

    def update(self, msg: Msg) -> tuple["LogTailPanel", Optional[Cmd]]:
        if isinstance(msg, TickMsg) and msg.tag == self.tag:
            self.reload()
            return self, self._schedule()
        if matches(msg, RELOAD_KEY):
            self.reload()
        return self, None

    @property
    def status(self) -> str:
        if not self.path.exists():
            return "error"
        return "ok" if self.entries else "warn"

    def view(self) -> RenderableType:
        table = Table(box=None, expand=True)
        table.add_column("Time", no_wrap=True)
        table.add_column("Message", overflow="fold")

        if not self.entries:
            table.add_row("-", "No log lines" if self.path.exists() else f"{self.path} not found")
        else:
            for entry in self.entries:
                table.add_row(entry["time"], entry["message"])

        age = None if self.loaded_at is None else time.time() - self.loaded_at
        title = f"{self.path.name} (updated {compact_relative_age(age)})"
        return panel_from_table(title, self.status, table, width=self.width)
