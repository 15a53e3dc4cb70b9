from rastercharts.axis import AxisKind, AxisSpec, Tick, XAxis, YAxis, build_x_axis, build_y_axis
from rastercharts.bar import BarStyle, draw_bar
from rastercharts.config import RenderConfig, load_render_config, validate_render_config
from rastercharts.errors import ChartDataError, ChartStateError
from rastercharts.formatter import (
    NO_PERCENT,
    LabelFormatter,
    new_label_formatter,
    new_pie_label_formatter,
    new_value_label_formatter,
)
from rastercharts.label_painter import LabelValue, SeriesLabelPainter, paint_series_labels
from rastercharts.series import (
    MarkKind,
    PieSeriesOption,
    Series,
    SeriesKind,
    SeriesLabel,
    SeriesList,
    SeriesMarkLine,
    SeriesMarkPoint,
    SeriesPoint,
    SeriesSummary,
    pie_series_list,
    resolve_mark_lines,
    resolve_mark_points,
    series_from_values,
    summarize,
)
from rastercharts.style import BOX_ZERO, Box, Style, merge_style
from rastercharts.surface import DrawingSurface, RasterSurface
from rastercharts.theme import Theme, ThemePalette, get_palette, resolve_theme

__all__ = [
    "AxisKind",
    "AxisSpec",
    "BOX_ZERO",
    "BarStyle",
    "Box",
    "ChartDataError",
    "ChartStateError",
    "DrawingSurface",
    "LabelFormatter",
    "LabelValue",
    "MarkKind",
    "NO_PERCENT",
    "PieSeriesOption",
    "RasterSurface",
    "RenderConfig",
    "Series",
    "SeriesKind",
    "SeriesLabel",
    "SeriesLabelPainter",
    "SeriesList",
    "SeriesMarkLine",
    "SeriesMarkPoint",
    "SeriesPoint",
    "SeriesSummary",
    "Style",
    "Theme",
    "ThemePalette",
    "Tick",
    "XAxis",
    "YAxis",
    "build_x_axis",
    "build_y_axis",
    "draw_bar",
    "get_palette",
    "load_render_config",
    "merge_style",
    "new_label_formatter",
    "new_pie_label_formatter",
    "new_value_label_formatter",
    "paint_series_labels",
    "pie_series_list",
    "resolve_mark_lines",
    "resolve_mark_points",
    "resolve_theme",
    "series_from_values",
    "summarize",
    "validate_render_config",
]
