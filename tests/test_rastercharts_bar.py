from __future__ import annotations

import unittest

import numpy as np

from rastercharts.bar import BarStyle, draw_bar
from rastercharts.style import Box, Style
from rastercharts.surface import DrawingSurface, RasterSurface


class _CapturePathSurface:
    def __init__(self) -> None:
        self.styles: list[Style] = []
        self.points: list[tuple[int, int]] = []
        self.commits = 0

    def override_drawing_style(self, style: Style) -> None:
        self.styles.append(style)

    def override_text_style(self, style: Style) -> None:
        raise AssertionError("bars never touch the text style")

    def move_to(self, x: int, y: int) -> None:
        self.points.append((x, y))

    def line_to(self, x: int, y: int) -> None:
        self.points.append((x, y))

    def close(self) -> None:
        raise AssertionError("bar path closes itself by repeating the first point")

    def fill_stroke(self) -> None:
        self.commits += 1

    def measure_text(self, text: str, style: Style | None = None) -> Box:
        return Box()

    def text(self, text: str, x: int, y: int) -> None:
        raise AssertionError("bars never draw text")


class BarPrimitiveTests(unittest.TestCase):
    def test_capture_surface_satisfies_protocol(self) -> None:
        self.assertIsInstance(_CapturePathSurface(), DrawingSurface)
        self.assertIsInstance(RasterSurface(4, 4), DrawingSurface)

    def test_bar_traces_closed_five_point_path_and_commits_once(self) -> None:
        surface = _CapturePathSurface()
        draw_bar(surface, Box(left=0, top=0, right=10, bottom=5), BarStyle(fill_color=(1, 2, 3, 255)))
        self.assertEqual(surface.points, [(0, 0), (10, 0), (10, 5), (0, 5), (0, 0)])
        self.assertEqual(surface.commits, 1)

    def test_bar_style_uses_fill_for_stroke_with_unit_width(self) -> None:
        surface = _CapturePathSurface()
        style = BarStyle(class_name="bar", stroke_dash_array=(4.0, 2.0), fill_color=(84, 112, 198, 255))
        draw_bar(surface, Box(left=1, top=1, right=2, bottom=2), style)
        self.assertEqual(len(surface.styles), 1)
        applied = surface.styles[0]
        self.assertEqual(applied.fill_color, (84, 112, 198, 255))
        self.assertEqual(applied.stroke_color, (84, 112, 198, 255))
        self.assertEqual(applied.stroke_width, 1)
        self.assertEqual(applied.stroke_dash_array, (4.0, 2.0))
        self.assertEqual(applied.class_name, "bar")
        self.assertIsNone(applied.font_color)

    def test_bar_rasterizes_onto_canvas(self) -> None:
        surface = RasterSurface(12, 10, background=(255, 255, 255, 255))
        draw_bar(surface, Box(left=2, top=2, right=8, bottom=6), BarStyle(fill_color=(200, 0, 0, 255)))
        rgba = surface.to_rgba()
        self.assertEqual(tuple(int(c) for c in rgba[4, 5]), (200, 0, 0, 255))
        self.assertEqual(tuple(int(c) for c in rgba[2, 2]), (200, 0, 0, 255))
        self.assertEqual(tuple(int(c) for c in rgba[0, 0]), (255, 255, 255, 255))
        self.assertEqual(tuple(int(c) for c in rgba[9, 11]), (255, 255, 255, 255))
        self.assertTrue(np.all(rgba[7:, :, 0] == 255))


if __name__ == "__main__":
    unittest.main()
