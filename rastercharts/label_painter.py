from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rastercharts.config import DEFAULT_FONT_FAMILY, DEFAULT_LABEL_DISTANCE_PX, DEFAULT_LABEL_FONT_SIZE_PX, RenderConfig
from rastercharts.errors import ChartDataError, ChartStateError
from rastercharts.formatter import NO_PERCENT, new_value_label_formatter
from rastercharts.series import Series, SeriesLabel
from rastercharts.style import BOX_ZERO, Box, Style
from rastercharts.surface import DrawingSurface
from rastercharts.theme import ThemePalette, get_palette


@dataclass(frozen=True)
class LabelValue:
    index: int
    value: float
    x: int
    y: int


@dataclass(frozen=True)
class _LabelRenderValue:
    text: str
    style: Style
    x: int
    y: int


class SeriesLabelPainter:
    """Collects data labels first and draws them all in a second pass.

    Every text measurement happens in ``add`` so that ``render`` is the only place that
    changes the surface text style.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        series_names: Sequence[str],
        label: SeriesLabel,
        palette: ThemePalette,
        *,
        font_family: str = DEFAULT_FONT_FAMILY,
        font_size: float = DEFAULT_LABEL_FONT_SIZE_PX,
        distance_fallback: int = DEFAULT_LABEL_DISTANCE_PX,
    ) -> None:
        self._surface = surface
        self._label = label
        self._palette = palette
        self._font_family = font_family
        self._font_size = font_size
        self._distance_fallback = distance_fallback
        self._formatter = new_value_label_formatter(series_names, label.formatter)
        self._values: list[_LabelRenderValue] = []
        self._rendered = False

    @classmethod
    def from_config(
        cls,
        surface: DrawingSurface,
        series_names: Sequence[str],
        label: SeriesLabel,
        config: RenderConfig,
    ) -> "SeriesLabelPainter":
        return cls(
            surface,
            series_names,
            label,
            get_palette(config.theme),
            font_family=config.font_family,
            font_size=config.label_font_size_px,
            distance_fallback=config.label_distance_px,
        )

    def __len__(self) -> int:
        return len(self._values)

    def add(self, value: LabelValue) -> None:
        if self._rendered:
            raise ChartStateError("labels already rendered; create a new painter")
        distance = self._label.distance or self._distance_fallback
        text = self._formatter(value.index, value.value, NO_PERCENT)
        style = Style(
            font_color=self._label.color if self._label.color is not None else self._palette.text_color,
            font_size=self._font_size,
            font_family=self._font_family,
        )
        width = self._surface.measure_text(text, style).width()
        x = value.x - (width >> 1)
        if width % 2 != 0:
            x += 1
        self._values.append(_LabelRenderValue(text=text, style=style, x=x, y=value.y - distance))

    def render(self) -> Box:
        if self._rendered:
            raise ChartStateError("labels already rendered; create a new painter")
        self._rendered = True
        for item in self._values:
            self._surface.override_text_style(item.style)
            self._surface.text(item.text, item.x, item.y)
        return BOX_ZERO


def paint_series_labels(
    surface: DrawingSurface,
    series: Series,
    anchors: Sequence[tuple[int, int]],
    palette: ThemePalette,
    *,
    series_names: Sequence[str] = (),
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size: float = DEFAULT_LABEL_FONT_SIZE_PX,
) -> Box:
    """Label every point of ``series`` at its anchor. Hidden labels paint nothing."""

    if not series.label.show:
        return BOX_ZERO
    if len(anchors) != len(series.points):
        raise ChartDataError(f"anchors and points length mismatch: {len(anchors)} != {len(series.points)}")
    painter = SeriesLabelPainter(
        surface,
        series_names,
        series.label,
        palette,
        font_family=font_family,
        font_size=font_size,
    )
    for index, (point, (x, y)) in enumerate(zip(series.points, anchors, strict=True)):
        painter.add(LabelValue(index=index, value=point.value, x=int(x), y=int(y)))
    return painter.render()
