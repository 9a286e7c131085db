"""Tabbed container widget: a navbar of titles above one visible panel.

The group owns an ordered list of :class:`TabItem` and the index of the
active one. ``update`` interprets the next/prev key bindings and routes every
message to the children according to the routing policy; ``view`` composes
the navbar and the active panel into one renderable sized to the width
assigned by ``set_size``.

Effects are never run here. ``init`` and ``update`` only collect the
commands their children return and hand them back to the host.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, runtime_checkable

from rich.console import Group, RenderableType
from rich.text import Text

from tui_tabs.keys import KeyMap, default_keymap, matches
from tui_tabs.models import Cmd, KeyMsg, Msg, WindowSizeMsg, batch
from tui_tabs.styles import Styles, default_styles

logger = logging.getLogger(__name__)

ROUTE_BROADCAST = "broadcast"
ROUTE_ACTIVE = "active"
ROUTING_POLICIES = (ROUTE_BROADCAST, ROUTE_ACTIVE)

DEFAULT_SEPARATOR = " • "


@runtime_checkable
class Groupable(Protocol):
    """What a panel must provide to live inside a tab."""

    def init(self) -> Optional[list[Cmd]]: ...

    def update(self, msg: Msg) -> tuple["Groupable", Optional[Cmd]]: ...

    def set_size(self, width: int, height: int) -> None: ...

    def view(self) -> RenderableType: ...


class TabItem:
    """A panel plus the title shown for it in the navbar."""

    __slots__ = ("_title", "panel")

    def __init__(self, title: str, panel: Groupable) -> None:
        if not isinstance(panel, Groupable):
            raise TypeError(f"tab panel must implement init/update/set_size/view, got {type(panel).__name__}")
        self._title = str(title)
        self.panel = panel

    @property
    def title(self) -> str:
        return self._title

    def init(self) -> list[Cmd]:
        return batch(self.panel.init())

    def update(self, msg: Msg) -> Optional[Cmd]:
        panel, cmd = self.panel.update(msg)
        if panel is not None:
            self.panel = panel
        return cmd

    def set_size(self, width: int, height: int) -> None:
        self.panel.set_size(width, height)

    def view(self) -> RenderableType:
        return self.panel.view()

    def __repr__(self) -> str:
        return f"TabItem(title={self._title!r}, panel={type(self.panel).__name__})"


Option = Callable[["TabGroup"], None]


def with_keymap(keymap: KeyMap) -> Option:
    def apply(tg: TabGroup) -> None:
        tg.keymap = keymap

    return apply


def with_styles(styles: Styles) -> Option:
    def apply(tg: TabGroup) -> None:
        tg.styles = styles

    return apply


def with_routing(policy: str) -> Option:
    if policy not in ROUTING_POLICIES:
        raise ValueError(f"unknown routing policy: {policy}")

    def apply(tg: TabGroup) -> None:
        tg.routing = policy

    return apply


def with_separator(separator: str) -> Option:
    def apply(tg: TabGroup) -> None:
        tg.separator = separator

    return apply


def with_items(*items: TabItem) -> Option:
    def apply(tg: TabGroup) -> None:
        for item in items:
            tg.add_item(item)

    return apply


class TabGroup:
    def __init__(self, *opts: Option) -> None:
        self.keymap: KeyMap = default_keymap()
        self.styles: Styles = default_styles()
        self.routing: str = ROUTE_BROADCAST
        self.separator: str = DEFAULT_SEPARATOR

        self._items: list[TabItem] = []
        self._current = 0
        self._width = 0
        self._height = 0
        self.focused = False

        for opt in opts:
            opt(self)

    # -- items -----------------------------------------------------------

    @property
    def items(self) -> tuple[TabItem, ...]:
        return tuple(self._items)

    def add_item(self, item: TabItem) -> "TabGroup":
        if not isinstance(item, TabItem):
            raise TypeError(f"expected TabItem, got {type(item).__name__}")
        self._items.append(item)
        logger.debug("tab added: %r (%d total)", item.title, len(self._items))
        return self

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def active_item(self) -> TabItem | None:
        if not self._items:
            return None
        return self._items[self._current]

    # -- selection -------------------------------------------------------

    def next_tab(self) -> None:
        if not self._items:
            return
        self._current = (self._current + 1) % len(self._items)
        logger.debug("next tab -> %d", self._current)

    def prev_tab(self) -> None:
        if not self._items:
            return
        # Python's % is non-negative for a positive divisor, so -1 wraps to n-1.
        self._current = (self._current - 1) % len(self._items)
        logger.debug("prev tab -> %d", self._current)

    def select(self, index: int) -> None:
        if not self._items:
            return
        self._current = index % len(self._items)
        logger.debug("select tab -> %d", self._current)

    # -- lifecycle -------------------------------------------------------

    def init(self) -> list[Cmd]:
        cmds: list[Cmd] = []
        for item in self._items:
            cmds.extend(item.init())
        return cmds

    def update(self, msg: Msg) -> tuple["TabGroup", list[Cmd]]:
        if isinstance(msg, KeyMsg):
            if matches(msg, self.keymap.tab_next):
                self.next_tab()
            elif matches(msg, self.keymap.tab_prev):
                self.prev_tab()

        return self, self._update_items(msg)

    def _update_items(self, msg: Msg) -> list[Cmd]:
        if self.routing == ROUTE_ACTIVE and not isinstance(msg, WindowSizeMsg):
            targets = [self._items[self._current]] if self._items else []
        else:
            targets = self._items
        return batch(*(item.update(msg) for item in targets))

    # -- focus & size ----------------------------------------------------

    def focus(self) -> Optional[Cmd]:
        self.focused = True
        return None

    def blur(self) -> None:
        self.focused = False

    def set_size(self, width: int, height: int) -> None:
        self._width = max(0, width - self.styles.focused_border.horizontal_frame_size)
        self._height = max(0, height)

        self.styles.focused_border = self.styles.focused_border.with_width(self._width)
        self.styles.blurred_border = self.styles.blurred_border.with_width(self._width)
        self.styles.navbar = self.styles.navbar.with_width(self._width)

        for item in self._items:
            item.set_size(self._width, self._height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # -- rendering -------------------------------------------------------

    def navbar(self) -> Text:
        titles = []
        for i, item in enumerate(self._items):
            style = self.styles.navbar_title_selected if i == self._current else self.styles.navbar_title_unselected
            titles.append(style.render_text(item.title))
        return Text(self.separator, end="", no_wrap=True).join(titles)

    def view(self) -> RenderableType:
        navbar = self.styles.navbar.render(self.navbar())
        border = self.styles.focused_border if self.focused else self.styles.blurred_border

        active = self.active_item
        if active is None:
            return border.render(navbar)
        return border.render(Group(navbar, active.view()))


def new(*opts: Option) -> TabGroup:
    return TabGroup(*opts)
