from __future__ import annotations

import unittest

import numpy as np

from rastercharts import raster
from rastercharts.raster import draw_polyline, fill_polygon, new_canvas
from rastercharts.style import Style
from rastercharts.surface import RasterSurface


class RasterHelpersTests(unittest.TestCase):
    def test_new_canvas_rejects_empty_size(self) -> None:
        with self.assertRaises(ValueError):
            new_canvas(0, 10)

    def test_dashed_polyline_alternates_runs(self) -> None:
        canvas = new_canvas(10, 1, color=(0, 0, 0, 255))
        draw_polyline(canvas, [(0, 0), (9, 0)], (255, 255, 255, 255), dash=(2, 2))
        lit = (canvas[0, :, 0] == 255).tolist()
        self.assertEqual(lit, [True, True, False, False, True, True, False, False, True, True])

    def test_odd_dash_pattern_repeats_to_keep_alternating(self) -> None:
        canvas = new_canvas(11, 1, color=(0, 0, 0, 255))
        draw_polyline(canvas, [(0, 0), (10, 0)], (255, 255, 255, 255), dash=(1, 2, 1))
        lit = (canvas[0, :, 0] == 255).tolist()
        self.assertEqual(lit, [True, False, False, True, False, True, True, False, True, False, False])

    def test_package_exports_only_drawing_helpers(self) -> None:
        self.assertNotIn("draw_pixel", raster.__all__)
        self.assertNotIn("blend_mask", raster.__all__)

    def test_solid_polyline_covers_every_pixel(self) -> None:
        canvas = new_canvas(5, 5, color=(0, 0, 0, 255))
        draw_polyline(canvas, [(0, 2), (4, 2)], (0, 255, 0, 255))
        self.assertTrue(np.all(canvas[2, :, 1] == 255))
        self.assertTrue(np.all(canvas[0, :, 1] == 0))

    def test_fill_polygon_clips_to_canvas(self) -> None:
        canvas = new_canvas(4, 4, color=(0, 0, 0, 255))
        fill_polygon(canvas, [(-5, -5), (2, -5), (2, 2), (-5, 2)], (0, 0, 255, 255))
        self.assertEqual(int(canvas[1, 1, 2]), 255)
        self.assertEqual(int(canvas[3, 3, 2]), 0)


class RasterSurfaceTests(unittest.TestCase):
    def test_measure_text_uses_given_style_without_mutating_surface(self) -> None:
        surface = RasterSurface(80, 40)
        before = surface.text_style
        small = surface.measure_text("12345", Style(font_size=10.0))
        large = surface.measure_text("12345", Style(font_size=30.0))
        self.assertEqual(surface.text_style, before)
        self.assertGreater(small.width(), 0)
        self.assertGreaterEqual(large.width(), small.width())

    def test_measure_empty_text_has_zero_width(self) -> None:
        self.assertEqual(RasterSurface(10, 10).measure_text("").width(), 0)

    def test_text_draws_with_font_color(self) -> None:
        surface = RasterSurface(80, 40, background=(255, 255, 255, 255))
        surface.override_text_style(Style(font_color=(0, 0, 0, 255), font_size=16.0))
        surface.text("88", 5, 5)
        self.assertTrue(np.any(surface.to_rgba()[:, :, 0] < 255))

    def test_text_without_font_color_is_skipped(self) -> None:
        surface = RasterSurface(40, 20, background=(255, 255, 255, 255))
        surface.text("88", 2, 2)
        self.assertTrue(np.all(surface.to_rgba() == 255))

    def test_override_text_style_keeps_font_defaults(self) -> None:
        surface = RasterSurface(10, 10, default_text_style=Style(font_family="DejaVu Sans"))
        surface.override_text_style(Style(font_color=(1, 1, 1, 255), fill_color=(9, 9, 9, 255)))
        self.assertEqual(surface.text_style.font_family, "DejaVu Sans")
        self.assertIsNone(surface.text_style.fill_color)

    def test_fill_stroke_without_colors_drops_path(self) -> None:
        surface = RasterSurface(6, 6, background=(0, 0, 0, 255))
        surface.move_to(0, 0)
        surface.line_to(5, 0)
        surface.line_to(5, 5)
        surface.close()
        surface.fill_stroke()
        self.assertTrue(np.all(surface.to_rgba()[:, :, :3] == 0))

    def test_close_then_stroke_draws_closing_edge(self) -> None:
        surface = RasterSurface(6, 6, background=(0, 0, 0, 255))
        surface.override_drawing_style(Style(stroke_color=(255, 255, 255, 255), stroke_width=1, font_size=9.0))
        self.assertEqual((surface.width, surface.height), (6, 6))
        self.assertIsNone(surface.drawing_style.font_size)
        surface.move_to(0, 0)
        surface.line_to(5, 0)
        surface.line_to(5, 5)
        surface.close()
        surface.fill_stroke()
        rgba = surface.to_rgba()
        self.assertEqual(int(rgba[3, 3, 0]), 255)
        self.assertEqual(int(rgba[0, 3, 0]), 255)
        self.assertEqual(int(rgba[5, 0, 0]), 0)


if __name__ == "__main__":
    unittest.main()
