from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from rastercharts.config import DEFAULT_CONFIG, load_render_config, validate_render_config
from rastercharts.errors import ChartDataError
from rastercharts.theme import Theme


class RenderConfigTests(unittest.TestCase):
    def test_validate_defaults(self) -> None:
        config = validate_render_config()
        self.assertEqual(config, DEFAULT_CONFIG)
        self.assertEqual(config.label_distance_px, 5)
        self.assertEqual(config.label_font_size_px, 10.0)
        self.assertIs(config.resolved_theme(), Theme.LIGHT)
        self.assertEqual(config.background_rgba(), (255, 255, 255, 255))
        self.assertIsNone(config.background)

    def test_background_follows_theme_palette_unless_set(self) -> None:
        dark = validate_render_config({"theme": "dark"})
        self.assertEqual(dark.background_rgba(), (16, 12, 42, 255))
        pinned = validate_render_config({"theme": "dark", "background": "#FFFFFF"})
        self.assertEqual(pinned.background_rgba(), (255, 255, 255, 255))

    def test_partial_override(self) -> None:
        config = validate_render_config({"theme": "dark", "label_font_size_px": 12})
        self.assertIs(config.resolved_theme(), Theme.DARK)
        self.assertEqual(config.label_font_size_px, 12.0)
        self.assertEqual(config.font_family, DEFAULT_CONFIG.font_family)

    def test_rejects_unknown_key(self) -> None:
        with self.assertRaisesRegex(ChartDataError, "Unknown render config key"):
            validate_render_config({"colour": "#FFFFFF"})

    def test_rejects_bad_values(self) -> None:
        with self.assertRaisesRegex(ChartDataError, "positive number"):
            validate_render_config({"label_font_size_px": 0})
        with self.assertRaisesRegex(ChartDataError, "non-negative integer"):
            validate_render_config({"label_distance_px": -1})
        with self.assertRaisesRegex(ChartDataError, "hex color"):
            validate_render_config({"background": "white"})

    def test_load_from_toml_render_table(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "chart.toml"
            path.write_text('[render]\ntheme = "dark"\nlabel_distance_px = 8\n', encoding="utf-8")
            config = load_render_config(path)
        self.assertEqual(config.theme, "dark")
        self.assertEqual(config.label_distance_px, 8)

    def test_load_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_render_config("/nonexistent/chart.toml")


if __name__ == "__main__":
    unittest.main()
