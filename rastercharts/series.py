from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import math
from typing import Any, Sequence

from rastercharts.adapters import coerce_values
from rastercharts.config import DEFAULT_LABEL_DISTANCE_PX
from rastercharts.errors import ChartDataError
from rastercharts.style import Style
from rastercharts.theme import RGBA

LOGGER = logging.getLogger(__name__)


class SeriesKind(str, Enum):
    LINE = "line"
    BAR = "bar"
    PIE = "pie"


class MarkKind(str, Enum):
    MAX = "max"
    MIN = "min"
    # Mark lines only.
    AVERAGE = "average"


@dataclass(frozen=True)
class SeriesPoint:
    value: float
    style: Style | None = None


@dataclass(frozen=True)
class SeriesLabel:
    """Data label settings.

    ``formatter`` is a template: ``{b}`` is the item name, ``{c}`` its value and ``{d}``
    its percent (pie charts).
    """

    formatter: str = ""
    color: RGBA | None = None
    show: bool = False
    distance: int = DEFAULT_LABEL_DISTANCE_PX


@dataclass(frozen=True)
class SeriesMarkPoint:
    symbol_size: int = 30
    data: tuple[MarkKind, ...] = ()


@dataclass(frozen=True)
class SeriesMarkLine:
    data: tuple[MarkKind, ...] = ()


@dataclass(frozen=True)
class SeriesSummary:
    max_index: int
    max_value: float
    min_index: int
    min_value: float
    average_value: float


@dataclass(frozen=True)
class MarkPointValue:
    kind: MarkKind
    index: int
    value: float


@dataclass(frozen=True)
class MarkLineValue:
    kind: MarkKind
    value: float


@dataclass(frozen=True)
class Series:
    kind: SeriesKind = SeriesKind.LINE
    points: tuple[SeriesPoint, ...] = ()
    name: str = ""
    y_axis_index: int = 0
    style: Style = field(default_factory=Style)
    label: SeriesLabel = field(default_factory=SeriesLabel)
    # Pie radius, e.g. "40%".
    radius: str = ""
    mark_point: SeriesMarkPoint = field(default_factory=SeriesMarkPoint)
    mark_line: SeriesMarkLine = field(default_factory=SeriesMarkLine)

    def __post_init__(self) -> None:
        if self.y_axis_index not in (0, 1):
            raise ChartDataError(f"y_axis_index must be 0 or 1, got {self.y_axis_index!r}")

    def values(self) -> tuple[float, ...]:
        return tuple(p.value for p in self.points)

    def summary(self) -> SeriesSummary:
        return summarize(self)


class SeriesList(tuple):
    """Ordered, immutable collection of series."""

    def names(self) -> list[str]:
        return [s.name for s in self]


@dataclass(frozen=True)
class PieSeriesOption:
    radius: str = ""
    label: SeriesLabel = field(default_factory=SeriesLabel)
    names: tuple[str, ...] = ()


def series_points_from_values(values: Any) -> tuple[SeriesPoint, ...]:
    return tuple(SeriesPoint(value=v) for v in coerce_values(values).tolist())


def series_from_values(values: Any, kind: SeriesKind | str = SeriesKind.LINE, *, name: str = "") -> Series:
    return Series(kind=SeriesKind(kind), points=series_points_from_values(values), name=name)


def pie_series_list(values: Any, option: PieSeriesOption | None = None) -> SeriesList:
    """Build one single-point pie series per value, in input order."""

    opt = option or PieSeriesOption()
    result = []
    for index, value in enumerate(coerce_values(values).tolist()):
        name = opt.names[index] if index < len(opt.names) else ""
        result.append(
            Series(
                kind=SeriesKind.PIE,
                points=(SeriesPoint(value=value),),
                radius=opt.radius,
                label=opt.label,
                name=name,
            )
        )
    return SeriesList(result)


def summarize(series: Series | Sequence[SeriesPoint]) -> SeriesSummary:
    """Compute max/min/average over the current points in one pass.

    Strict comparisons keep the first occurrence when several points share the extreme
    value. An empty series reports indices of -1 and a NaN average.
    """

    points = series.points if isinstance(series, Series) else tuple(series)
    min_index = -1
    max_index = -1
    min_value = math.inf
    max_value = -math.inf
    total = 0.0
    for i, point in enumerate(points):
        if point.value < min_value:
            min_index = i
            min_value = point.value
        if point.value > max_value:
            max_index = i
            max_value = point.value
        total += point.value
    if points:
        average = total / len(points)
    else:
        LOGGER.debug("summary of empty series has no average")
        average = math.nan
    return SeriesSummary(
        max_index=max_index,
        max_value=max_value,
        min_index=min_index,
        min_value=min_value,
        average_value=average,
    )


def resolve_mark_points(series: Series) -> tuple[MarkPointValue, ...]:
    summary = summarize(series)
    out: list[MarkPointValue] = []
    for kind in series.mark_point.data:
        kind = MarkKind(kind)
        if kind is MarkKind.MAX:
            out.append(MarkPointValue(kind=kind, index=summary.max_index, value=summary.max_value))
        elif kind is MarkKind.MIN:
            out.append(MarkPointValue(kind=kind, index=summary.min_index, value=summary.min_value))
        else:
            raise ChartDataError("mark points support only `max` and `min`")
    return tuple(out)


def resolve_mark_lines(series: Series) -> tuple[MarkLineValue, ...]:
    summary = summarize(series)
    by_kind = {
        MarkKind.MAX: summary.max_value,
        MarkKind.MIN: summary.min_value,
        MarkKind.AVERAGE: summary.average_value,
    }
    return tuple(MarkLineValue(kind=MarkKind(kind), value=by_kind[MarkKind(kind)]) for kind in series.mark_line.data)
