"""Box-model style descriptors rendered with rich."""

from __future__ import annotations

from dataclasses import dataclass, replace

from rich import box
from rich.box import Box
from rich.console import Console, RenderableType
from rich.constrain import Constrain
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

Spacing = tuple[int, int, int, int]  # top, right, bottom, left

NO_SPACING: Spacing = (0, 0, 0, 0)


def spacing(*values: int) -> Spacing:
    """CSS shorthand: (all), (vertical, horizontal) or (top, right, bottom, left)."""
    if len(values) == 1:
        return (values[0],) * 4
    if len(values) == 2:
        return (values[0], values[1], values[0], values[1])
    if len(values) == 4:
        return (values[0], values[1], values[2], values[3])
    raise ValueError(f"expected 1, 2 or 4 spacing values, got {len(values)}")


@dataclass(frozen=True)
class Style:
    style: str = ""
    padding: Spacing = NO_SPACING
    margin: Spacing = NO_SPACING
    border: Box | None = None
    border_style: str = ""
    width: int | None = None

    @property
    def horizontal_frame_size(self) -> int:
        size = self.margin[1] + self.margin[3] + self.padding[1] + self.padding[3]
        if self.border is not None:
            size += 2
        return size

    def with_width(self, width: int) -> "Style":
        return replace(self, width=max(0, width))

    def render_text(self, text: str) -> Text:
        """Render a single-line label, horizontal padding only."""
        left = " " * self.padding[3]
        right = " " * self.padding[1]
        return Text(f"{left}{text}{right}", style=self.style, no_wrap=True, end="")

    def render(self, content: RenderableType) -> RenderableType:
        if isinstance(content, str):
            content = Text(content)

        expand = self.width is not None
        out: RenderableType = Padding(content, self.padding, style=self.style, expand=expand)

        if self.border is not None:
            out = Panel(
                out,
                box=self.border,
                border_style=self.border_style,
                padding=0,
                expand=expand,
                width=self.width + 2 if expand else None,
            )
        elif expand:
            out = Constrain(out, self.width)

        if self.margin != NO_SPACING:
            out = Padding(out, self.margin, expand=False)
        return out


@dataclass
class Styles:
    focused_border: Style
    blurred_border: Style
    navbar: Style
    navbar_title_unselected: Style
    navbar_title_selected: Style


def default_styles() -> Styles:
    return Styles(
        focused_border=Style(margin=spacing(1, 0, 0, 0), border=box.ROUNDED, border_style="magenta"),
        blurred_border=Style(margin=spacing(1, 0, 0, 0), border=box.ROUNDED, border_style="bright_black"),
        navbar=Style(padding=spacing(0, 1)),
        navbar_title_unselected=Style(style="color(240) on #373b41", padding=spacing(0, 2)),
        navbar_title_selected=Style(style="bold #ffffff on color(5)", padding=spacing(0, 2)),
    )


def plain_styles() -> Styles:
    """Unpadded, borderless styles. Handy for snapshots and tests."""
    return Styles(
        focused_border=Style(),
        blurred_border=Style(),
        navbar=Style(),
        navbar_title_unselected=Style(),
        navbar_title_selected=Style(style="reverse"),
    )


def render_plain(renderable: RenderableType, width: int) -> list[str]:
    """Render to uncoloured text lines, trailing whitespace stripped."""
    console = Console(width=max(1, width), color_system=None, force_terminal=False, legacy_windows=False)
    with console.capture() as capture:
        console.print(renderable)
    return [line.rstrip() for line in capture.get().splitlines()]
