from __future__ import annotations

from typing import Sequence

import numpy as np

from rastercharts.raster.canvas import RGBA, draw_pixel


def draw_polyline(
    dst: np.ndarray,
    points: Sequence[tuple[int, int]],
    color: RGBA,
    width: int = 1,
    dash: Sequence[float] | None = None,
) -> None:
    """Stroke connected segments. ``dash`` alternates on/off run lengths in pixels.

    An odd-length pattern is repeated once so on and off runs keep alternating.
    """

    if len(points) < 2:
        return
    pattern = [max(1, int(round(d))) for d in dash] if dash else []
    if len(pattern) % 2 == 1:
        pattern = pattern * 2
    state = _DashState(pattern)
    for (x0, y0), (x1, y1) in zip(points[:-1], points[1:]):
        _draw_line_segment(dst, int(x0), int(y0), int(x1), int(y1), color=color, width=width, state=state)


class _DashState:
    def __init__(self, pattern: list[int]) -> None:
        self._pattern = pattern
        self._slot = 0
        self._left = pattern[0] if pattern else 0

    def step(self) -> bool:
        if not self._pattern:
            return True
        on = self._slot % 2 == 0
        self._left -= 1
        if self._left <= 0:
            self._slot = (self._slot + 1) % len(self._pattern)
            self._left = self._pattern[self._slot]
        return on


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int, state: _DashState) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        if state.step():
            _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
