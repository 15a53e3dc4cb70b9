from __future__ import annotations

from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from rastercharts.raster.canvas import RGBA, blend_mask


def fill_polygon(dst: np.ndarray, points: Sequence[tuple[int, int]], color: RGBA) -> None:
    """Fill a closed polygon, rasterized through a Pillow coverage mask."""

    if len(points) < 3:
        return
    xs = [int(p[0]) for p in points]
    ys = [int(p[1]) for p in points]
    left, top = min(xs), min(ys)
    width = max(xs) - left + 1
    height = max(ys) - top + 1
    image = Image.new("L", (width, height), 0)
    ImageDraw.Draw(image).polygon([(x - left, y - top) for x, y in zip(xs, ys)], fill=255)
    blend_mask(dst, left, top, np.asarray(image, dtype=np.uint8), color)
