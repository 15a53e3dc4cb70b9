from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import tomllib
from typing import Any, Mapping

from rastercharts.errors import ChartDataError
from rastercharts.theme import RGBA, Theme, get_palette, parse_color, resolve_theme

DEFAULT_FONT_FAMILY = "Roboto"
DEFAULT_LABEL_FONT_SIZE_PX = 10.0
DEFAULT_LABEL_DISTANCE_PX = 5


@dataclass(frozen=True)
class RenderConfig:
    """Defaults shared by the painters and the raster surface."""

    theme: str = Theme.LIGHT.value
    font_family: str = DEFAULT_FONT_FAMILY
    label_font_size_px: float = DEFAULT_LABEL_FONT_SIZE_PX
    label_distance_px: int = DEFAULT_LABEL_DISTANCE_PX
    # Unset means the resolved theme palette background.
    background: str | None = None

    def resolved_theme(self) -> Theme:
        return resolve_theme(self.theme)

    def background_rgba(self) -> RGBA:
        if self.background is None:
            return get_palette(self.theme).background_color
        return parse_color(self.background)


DEFAULT_CONFIG = RenderConfig()


def validate_render_config(overrides: Mapping[str, Any] | None = None) -> RenderConfig:
    """Validate and merge user overrides against the render defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ChartDataError(f"Unknown render config key: {key}")
            raw[key] = value

    if not isinstance(raw["theme"], str) or not raw["theme"].strip():
        raise ChartDataError("Config `theme` must be a non-empty string")

    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ChartDataError("Config `font_family` must be a non-empty string")

    size = raw["label_font_size_px"]
    if isinstance(size, bool) or not isinstance(size, (int, float)) or float(size) <= 0:
        raise ChartDataError("Config `label_font_size_px` must be a positive number")

    distance = raw["label_distance_px"]
    if isinstance(distance, bool) or not isinstance(distance, int) or distance < 0:
        raise ChartDataError("Config `label_distance_px` must be a non-negative integer")

    background = raw["background"]
    if background is not None:
        if not isinstance(background, str):
            raise ChartDataError("Config `background` must be a hex color string")
        parse_color(background)

    return RenderConfig(
        theme=str(raw["theme"]),
        font_family=str(raw["font_family"]),
        label_font_size_px=float(size),
        label_distance_px=int(distance),
        background=background,
    )


def load_render_config(path: str | Path) -> RenderConfig:
    """Load a TOML file; keys may live at the top level or under a ``[render]`` table."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"render config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    section = raw.get("render", raw)
    if not isinstance(section, dict):
        raise ChartDataError("`render` must be a table")
    return validate_render_config(section)
