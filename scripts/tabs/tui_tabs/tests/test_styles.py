from __future__ import annotations

import unittest
from pathlib import Path
import sys

from rich import box

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from tui_tabs.styles import Style, default_styles, render_plain, spacing  # noqa: E402


class SpacingTests(unittest.TestCase):
    def test_shorthands(self):
        self.assertEqual(spacing(1), (1, 1, 1, 1))
        self.assertEqual(spacing(0, 2), (0, 2, 0, 2))
        self.assertEqual(spacing(1, 2, 3, 4), (1, 2, 3, 4))

    def test_bad_arity(self):
        with self.assertRaises(ValueError):
            spacing(1, 2, 3)


class StyleTests(unittest.TestCase):
    def test_horizontal_frame_size(self):
        self.assertEqual(Style().horizontal_frame_size, 0)
        self.assertEqual(Style(padding=spacing(0, 2)).horizontal_frame_size, 4)
        style = Style(padding=spacing(0, 1), margin=spacing(0, 3, 0, 1), border=box.ROUNDED)
        self.assertEqual(style.horizontal_frame_size, 2 + 4 + 2)

    def test_with_width_returns_copy(self):
        style = Style()
        wide = style.with_width(30)
        self.assertIsNone(style.width)
        self.assertEqual(wide.width, 30)
        self.assertEqual(style.with_width(-5).width, 0)

    def test_render_text_pads_horizontally(self):
        text = Style(style="bold", padding=spacing(1, 2)).render_text("Logs")
        self.assertEqual(text.plain, "  Logs  ")
        self.assertEqual(text.style, "bold")

    def test_render_fills_width(self):
        lines = render_plain(Style(padding=spacing(0, 1), width=12).render("hi"), 40)
        self.assertEqual(lines, [" hi"])

    def test_render_border_uses_box(self):
        lines = render_plain(Style(border=box.ASCII, width=6).render("hi"), 40)
        self.assertEqual(lines[0], "+------+")
        self.assertEqual(lines[1], "|hi    |")
        self.assertEqual(lines[-1], "+------+")

    def test_margin_adds_blank_lines(self):
        lines = render_plain(Style(margin=spacing(1, 0, 0, 0)).render("hi"), 10)
        self.assertEqual(lines, ["", "hi"])

    def test_default_styles_share_border_frame(self):
        styles = default_styles()
        self.assertEqual(
            styles.focused_border.horizontal_frame_size,
            styles.blurred_border.horizontal_frame_size,
        )
        self.assertNotEqual(styles.navbar_title_selected.style, styles.navbar_title_unselected.style)


if __name__ == "__main__":
    unittest.main()
