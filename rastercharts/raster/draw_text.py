from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from rastercharts.config import DEFAULT_FONT_FAMILY, DEFAULT_LABEL_FONT_SIZE_PX
from rastercharts.raster.canvas import RGBA, blend_mask

LOGGER = logging.getLogger(__name__)

FONT_FALLBACK_PATTERNS = (
    "roboto",
    "dejavusans",
    "dejavu sans",
    "liberationsans",
    "helvetica",
    "arial",
)


def draw_text(
    dst: np.ndarray,
    x: int,
    y: int,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_LABEL_FONT_SIZE_PX,
) -> None:
    if not text:
        return
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    blend_mask(dst, x, y, _render_mask(text=text, font=font), color)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_LABEL_FONT_SIZE_PX,
) -> tuple[int, int]:
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    if not text:
        _, top, _, bottom = font.getbbox("Ay")
        return (0, max(1, int(bottom - top)))
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


@lru_cache(maxsize=128)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        LOGGER.warning("no font file found for %r, using Pillow default font", font_family)
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError as exc:
        LOGGER.warning("failed to load font %s (%s), using Pillow default font", font_path, exc)
        return ImageFont.load_default()


def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() if font_family.strip() else DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + FONT_FALLBACK_PATTERNS

    font_dirs = [
        Path.home() / ".fonts",
        Path.home() / "Library" / "Fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        Path("C:/Windows/Fonts"),
    ]

    candidates: list[Path] = []
    for base in font_dirs:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(sorted(base.rglob(ext)))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            if p in path.stem.lower().replace(" ", ""):
                return path
    return None
