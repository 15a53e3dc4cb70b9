from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

import numpy as np

from rastercharts.errors import ChartDataError
from rastercharts.style import Style
from rastercharts.theme import AXIS_COLOR_LIGHT, GRID_COLOR_LIGHT, HIDDEN_COLOR, Theme, resolve_theme

AXIS_STROKE_WIDTH = 1


class AxisKind(str, Enum):
    VALUE = "value"
    CATEGORY = "category"
    TIME = "time"
    LOG = "log"


class YAxisPosition(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class AxisSpec:
    kind: AxisKind = AxisKind.CATEGORY
    categories: tuple[str, ...] = ()

    @classmethod
    def category(cls, categories: Sequence[str]) -> "AxisSpec":
        return cls(kind=AxisKind.CATEGORY, categories=tuple(str(c) for c in categories))


@dataclass(frozen=True)
class Tick:
    position: float
    label: str


@dataclass(frozen=True)
class XAxis:
    ticks: tuple[Tick, ...]
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class YAxis:
    position: YAxisPosition = YAxisPosition.SECONDARY
    style: Style = field(default_factory=Style)
    grid_major_style: Style = field(default_factory=Style)
    grid_minor_style: Style = field(default_factory=Style)


# The dark theme defers axis styling to the global dark palette.
_X_AXIS_STYLES: dict[Theme, Style] = {
    Theme.DARK: Style(),
    Theme.LIGHT: Style(
        font_color=AXIS_COLOR_LIGHT,
        stroke_color=AXIS_COLOR_LIGHT,
        stroke_width=AXIS_STROKE_WIDTH,
    ),
}

_GRID_STYLE_LIGHT = Style(stroke_color=GRID_COLOR_LIGHT, stroke_width=AXIS_STROKE_WIDTH)

_Y_AXES: dict[Theme, YAxis] = {
    Theme.DARK: YAxis(),
    Theme.LIGHT: YAxis(
        position=YAxisPosition.SECONDARY,
        style=Style(font_color=AXIS_COLOR_LIGHT, stroke_color=HIDDEN_COLOR, stroke_width=AXIS_STROKE_WIDTH),
        grid_major_style=_GRID_STYLE_LIGHT,
        grid_minor_style=_GRID_STYLE_LIGHT,
    ),
}


def build_x_axis(axis: AxisSpec, theme: Theme | str | None = None) -> tuple[XAxis, np.ndarray]:
    """Place one tick per category at its zero-based index.

    Returns the axis together with the parallel value array ``[0, 1, ..., n-1]`` so that
    categorical data can be plotted like numeric data.
    """

    if axis.kind is not AxisKind.CATEGORY:
        raise ChartDataError(f"tick derivation only covers category axes, got {axis.kind.value!r}")
    values = np.arange(len(axis.categories), dtype=np.float64)
    ticks = tuple(Tick(position=float(v), label=label) for v, label in zip(values.tolist(), axis.categories, strict=True))
    return XAxis(ticks=ticks, style=_X_AXIS_STYLES[resolve_theme(theme)]), values


def build_y_axis(theme: Theme | str | None = None) -> YAxis:
    return _Y_AXES[resolve_theme(theme)]
