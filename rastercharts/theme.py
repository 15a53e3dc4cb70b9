from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import re

from rastercharts.errors import ChartDataError

LOGGER = logging.getLogger(__name__)

RGBA = tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

AXIS_COLOR_LIGHT: RGBA = (110, 112, 121, 255)
GRID_COLOR_LIGHT: RGBA = (224, 230, 241, 255)
HIDDEN_COLOR: RGBA = (110, 112, 121, 0)


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ThemePalette:
    theme: Theme
    text_color: RGBA
    background_color: RGBA
    series_colors: tuple[RGBA, ...]

    def series_color(self, index: int) -> RGBA:
        return self.series_colors[index % len(self.series_colors)]


_SERIES_COLORS: tuple[RGBA, ...] = (
    (84, 112, 198, 255),
    (145, 204, 117, 255),
    (250, 200, 88, 255),
    (238, 102, 102, 255),
    (115, 192, 222, 255),
    (59, 162, 114, 255),
    (252, 132, 82, 255),
    (154, 96, 180, 255),
    (234, 124, 204, 255),
)

PALETTES: dict[Theme, ThemePalette] = {
    Theme.LIGHT: ThemePalette(
        theme=Theme.LIGHT,
        text_color=(70, 70, 70, 255),
        background_color=(255, 255, 255, 255),
        series_colors=_SERIES_COLORS,
    ),
    Theme.DARK: ThemePalette(
        theme=Theme.DARK,
        text_color=(238, 238, 238, 255),
        background_color=(16, 12, 42, 255),
        series_colors=_SERIES_COLORS,
    ),
}


def resolve_theme(theme: Theme | str | None) -> Theme:
    """Map a theme identifier onto the enumerated themes.

    Only ``"dark"`` selects the dark theme; every other identifier, including unknown
    ones, resolves to the light theme.
    """

    if isinstance(theme, Theme):
        return theme
    if theme == Theme.DARK.value:
        return Theme.DARK
    if theme not in (None, Theme.LIGHT.value):
        LOGGER.debug("unrecognized theme %r, using light", theme)
    return Theme.LIGHT


def get_palette(theme: Theme | str | None) -> ThemePalette:
    return PALETTES[resolve_theme(theme)]


def parse_color(value: str | RGBA) -> RGBA:
    """Accept ``#RRGGBB``/``#RRGGBBAA`` strings or RGBA tuples."""

    if isinstance(value, str):
        if not _HEX_COLOR.match(value):
            raise ChartDataError(f"color must be a hex color (#RRGGBB or #RRGGBBAA): {value!r}")
        raw = value[1:]
        alpha = int(raw[6:8], 16) if len(raw) == 8 else 255
        return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16), alpha)
    if isinstance(value, tuple) and len(value) == 4 and all(isinstance(c, int) and 0 <= c <= 255 for c in value):
        return (value[0], value[1], value[2], value[3])
    raise ChartDataError(f"unsupported color value: {value!r}")
