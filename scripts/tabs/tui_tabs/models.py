"""Message and effect contracts shared by the widget, its panels and the host."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Iterable, Optional


@dataclass(frozen=True)
class KeyMsg:
    key: str


@dataclass(frozen=True)
class WindowSizeMsg:
    width: int
    height: int


@dataclass(frozen=True)
class TickMsg:
    tag: str
    at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class QuitMsg:
    pass


# Anything the host can route; panels may define their own message types.
Msg = Any

# A deferred unit of work. The host runs it and feeds the returned message
# (if any) back into update().
Cmd = Callable[[], Optional[Msg]]


def batch(*cmds: Cmd | Iterable[Cmd] | None) -> list[Cmd]:
    """Flatten commands and lists of commands into one list, dropping None."""
    out: list[Cmd] = []
    for cmd in cmds:
        if cmd is None:
            continue
        if callable(cmd):
            out.append(cmd)
            continue
        out.extend(c for c in cmd if c is not None)
    return out


def tick(seconds: float, tag: str) -> Cmd:
    """Command that sleeps for ``seconds`` on the host's worker and reports a TickMsg."""
    def _cmd() -> TickMsg:
        time.sleep(seconds)
        return TickMsg(tag=tag)

    return _cmd