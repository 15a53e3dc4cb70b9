from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import numpy as np

from rastercharts.config import DEFAULT_FONT_FAMILY, DEFAULT_LABEL_FONT_SIZE_PX, RenderConfig
from rastercharts.raster import draw_polyline, draw_text, fill_polygon, new_canvas, text_size
from rastercharts.style import Box, Style, merge_style
from rastercharts.theme import RGBA

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class DrawingSurface(Protocol):
    """What the painters need from a 2D drawing backend."""

    def override_drawing_style(self, style: Style) -> None:
        ...

    def override_text_style(self, style: Style) -> None:
        ...

    def move_to(self, x: int, y: int) -> None:
        ...

    def line_to(self, x: int, y: int) -> None:
        ...

    def close(self) -> None:
        ...

    def fill_stroke(self) -> None:
        ...

    def measure_text(self, text: str, style: Style | None = None) -> Box:
        ...

    def text(self, text: str, x: int, y: int) -> None:
        ...


class RasterSurface:
    """DrawingSurface backed by an RGBA uint8 numpy canvas of shape (H, W, 4)."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: RGBA = (255, 255, 255, 255),
        default_text_style: Style | None = None,
    ) -> None:
        self._canvas = new_canvas(width, height, color=background)
        self._drawing_style = Style()
        self._text_defaults = merge_style(
            Style(font_family=DEFAULT_FONT_FAMILY, font_size=DEFAULT_LABEL_FONT_SIZE_PX),
            default_text_style,
        )
        self._text_style = self._text_defaults
        self._paths: list[list[tuple[int, int]]] = []

    @classmethod
    def from_config(cls, width: int, height: int, config: RenderConfig) -> "RasterSurface":
        return cls(
            width,
            height,
            background=config.background_rgba(),
            default_text_style=Style(font_family=config.font_family, font_size=config.label_font_size_px),
        )

    @property
    def width(self) -> int:
        return int(self._canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self._canvas.shape[0])

    @property
    def drawing_style(self) -> Style:
        return self._drawing_style

    @property
    def text_style(self) -> Style:
        return self._text_style

    def to_rgba(self) -> np.ndarray:
        return self._canvas

    def override_drawing_style(self, style: Style) -> None:
        self._drawing_style = style.fill_and_stroke_options()

    def override_text_style(self, style: Style) -> None:
        self._text_style = merge_style(self._text_defaults, style.text_options())

    def move_to(self, x: int, y: int) -> None:
        self._paths.append([(int(x), int(y))])

    def line_to(self, x: int, y: int) -> None:
        if not self._paths:
            self._paths.append([])
        self._paths[-1].append((int(x), int(y)))

    def close(self) -> None:
        if self._paths and self._paths[-1] and self._paths[-1][0] != self._paths[-1][-1]:
            self._paths[-1].append(self._paths[-1][0])

    def fill_stroke(self) -> None:
        style = self._drawing_style
        paths, self._paths = self._paths, []
        if style.fill_color is None and style.stroke_color is None:
            LOGGER.debug("fill_stroke with no fill or stroke color, %d path(s) dropped", len(paths))
            return
        for points in paths:
            if style.fill_color is not None:
                fill_polygon(self._canvas, points, style.fill_color)
            if style.stroke_color is not None:
                draw_polyline(
                    self._canvas,
                    points,
                    style.stroke_color,
                    width=max(1, int(round(style.stroke_width or 1))),
                    dash=style.stroke_dash_array,
                )

    def measure_text(self, text: str, style: Style | None = None) -> Box:
        resolved = self._text_style if style is None else merge_style(self._text_defaults, style.text_options())
        w, h = text_size(text, font_family=resolved.font_family, font_size_px=resolved.font_size)
        return Box(left=0, top=0, right=w, bottom=h)

    def text(self, text: str, x: int, y: int) -> None:
        style = self._text_style
        if style.font_color is None:
            LOGGER.debug("text %r skipped, no font color set", text)
            return
        draw_text(
            self._canvas,
            int(x),
            int(y),
            text,
            style.font_color,
            font_family=style.font_family,
            font_size_px=style.font_size,
        )
