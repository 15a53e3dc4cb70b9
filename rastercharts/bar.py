from __future__ import annotations

from dataclasses import dataclass

from rastercharts.style import Box, Style
from rastercharts.surface import DrawingSurface
from rastercharts.theme import RGBA


@dataclass(frozen=True)
class BarStyle:
    class_name: str | None = None
    stroke_dash_array: tuple[float, ...] | None = None
    fill_color: RGBA | None = None

    def style(self) -> Style:
        return Style(
            class_name=self.class_name,
            stroke_dash_array=self.stroke_dash_array,
            stroke_color=self.fill_color,
            stroke_width=1,
            fill_color=self.fill_color,
        )


def draw_bar(surface: DrawingSurface, box: Box, style: BarStyle) -> None:
    """Trace ``box`` as a closed rectangle and commit one fill-and-stroke."""

    surface.override_drawing_style(style.style().fill_and_stroke_options())
    surface.move_to(box.left, box.top)
    surface.line_to(box.right, box.top)
    surface.line_to(box.right, box.bottom)
    surface.line_to(box.left, box.bottom)
    surface.line_to(box.left, box.top)
    surface.fill_stroke()
