"""Demo host for the tab group widget."""

from __future__ import annotations

import argparse
import logging
import os
import queue
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from rich.console import Console
from rich.live import Live

try:
    import termios
except ImportError:  # not a POSIX terminal
    termios = None

from tui_tabs.config import options_from, resolve_profile
from tui_tabs.keys import decode_keys
from tui_tabs.models import Cmd, KeyMsg, Msg, QuitMsg, WindowSizeMsg
from tui_tabs.panels.keys import KeysPanel
from tui_tabs.panels.logs import RELOAD_KEY, LogTailPanel
from tui_tabs.panels.text import TextPanel
from tui_tabs.tabgroup import TabGroup, TabItem

logger = logging.getLogger(__name__)

QUIT_KEYS = {"q", "ctrl+c"}
POLL_SECONDS = 0.05

WELCOME = (
    "A tab group holds an ordered set of panels.\n"
    "The navbar above shows their titles; the highlighted one is active.\n"
    "Every panel keeps receiving messages while hidden."
)


def build_group(profile: dict, tail_paths: list[str] | None = None, refresh: float | None = None) -> TabGroup:
    group = TabGroup(*options_from(profile))
    refresh_seconds = float(refresh or profile.get("refresh_seconds", 2))

    group.add_item(TabItem("Welcome", TextPanel("Welcome", WELCOME)))
    for raw in tail_paths or []:
        path = Path(raw)
        group.add_item(TabItem(path.name, LogTailPanel(path, refresh_seconds=refresh_seconds)))
    group.add_item(
        TabItem(
            "Keys",
            KeysPanel(
                group.keymap.bindings(),
                extra=[(RELOAD_KEY.help_key, RELOAD_KEY.help_desc), ("q", "Quit")],
            ),
        )
    )
    return group


class Host:
    """Runs effects on a worker pool and feeds their messages back into the group."""

    def __init__(self, group: TabGroup, max_workers: int = 4) -> None:
        self.group = group
        self.messages: queue.Queue = queue.Queue()
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="tui-tabs-cmd")
        self.running = True

    def _run(self, cmd: Cmd) -> None:
        try:
            msg = cmd()
        except Exception:
            logger.exception("effect failed: %r", cmd)
            return
        if msg is not None:
            self.messages.put(msg)

    def schedule(self, cmds: list[Cmd]) -> None:
        for cmd in cmds:
            self.executor.submit(self._run, cmd)

    def start(self, width: int, height: int) -> None:
        self.group.set_size(width, height)
        self.group.focus()
        self.schedule(self.group.init())

    def dispatch(self, msg: Msg) -> None:
        if isinstance(msg, QuitMsg) or (isinstance(msg, KeyMsg) and msg.key in QUIT_KEYS):
            self.running = False
            return
        if isinstance(msg, WindowSizeMsg):
            self.group.set_size(msg.width, msg.height)
        _, cmds = self.group.update(msg)
        self.schedule(cmds)

    def drain(self) -> int:
        handled = 0
        while self.running:
            try:
                msg = self.messages.get_nowait()
            except queue.Empty:
                break
            self.dispatch(msg)
            handled += 1
        return handled

    def close(self) -> None:
        self.running = False
        self.executor.shutdown(wait=False, cancel_futures=True)


def _read_keys(fd: int) -> list[str]:
    """Non-blocking read of whatever the terminal has buffered."""
    import select

    r, _, _ = select.select([fd], [], [], 0)
    if not r:
        return []
    try:
        data = os.read(fd, 64).decode("utf-8", errors="ignore")
    except OSError:
        return []
    return decode_keys(data)


def _enter_raw_input(fd: int) -> list | None:
    """Switch off canonical mode, echo and signals (VMIN=0/VTIME=0). Returns the old settings."""
    if termios is None:
        return None
    try:
        old_settings = termios.tcgetattr(fd)
        new = termios.tcgetattr(fd)
        new[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        new[6][termios.VMIN] = 0
        new[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSADRAIN, new)
    except termios.error as exc:
        logger.warning("keyboard input unavailable: %s", exc)
        return None
    return old_settings


def run_live(console: Console, host: Host) -> None:
    fd = sys.stdin.fileno()
    old_settings = _enter_raw_input(fd)

    size = console.size
    host.start(size.width, size.height)
    logger.info("live host started with %d tabs", len(host.group.items))

    try:
        with Live(host.group.view(), console=console, auto_refresh=False, screen=True) as live:
            while host.running:
                if console.size != size:
                    size = console.size
                    host.dispatch(WindowSizeMsg(size.width, size.height))

                if old_settings is not None:
                    for key in _read_keys(fd):
                        host.dispatch(KeyMsg(key))
                        if not host.running:
                            break

                host.drain()
                live.update(host.group.view(), refresh=True)
                time.sleep(POLL_SECONDS)
    except KeyboardInterrupt:
        pass
    finally:
        host.close()
        if old_settings is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        logger.info("live host stopped")


def print_snapshot(console: Console, group: TabGroup) -> None:
    """Print the first frame without running any effects."""
    group.set_size(console.size.width, console.size.height)
    group.focus()
    group.init()
    console.print(group.view())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tab group demo host")
    parser.add_argument("-l", "--live", action="store_true", help="Run interactive live loop (q exits)")
    parser.add_argument("--profile", help="Profile name: default|vim (env TUI_TABS_PROFILE)")
    parser.add_argument("--config", help="Optional JSON config file for key/routing overrides")
    parser.add_argument("--tail", action="append", default=[], metavar="PATH", help="Add a log tail tab (repeatable)")
    parser.add_argument("--refresh", type=float, help="Log tail refresh interval seconds override")
    parser.add_argument("--log-file", help="Write debug logs to this file")
    args = parser.parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        profile = resolve_profile(args.profile, args.config)
        group = build_group(profile, args.tail, args.refresh)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    console = Console()

    if args.live:
        run_live(console, Host(group))
        return 0

    print_snapshot(console, group)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
