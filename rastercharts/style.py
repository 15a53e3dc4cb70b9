from __future__ import annotations

from dataclasses import dataclass, fields, replace

from rastercharts.theme import RGBA


@dataclass(frozen=True)
class Style:
    """Resolved drawing attributes. Unset fields are ``None``."""

    class_name: str | None = None
    fill_color: RGBA | None = None
    stroke_color: RGBA | None = None
    stroke_width: float | None = None
    stroke_dash_array: tuple[float, ...] | None = None
    font_family: str | None = None
    font_size: float | None = None
    font_color: RGBA | None = None

    def is_zero(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def fill_and_stroke_options(self) -> "Style":
        return Style(
            class_name=self.class_name,
            fill_color=self.fill_color,
            stroke_color=self.stroke_color,
            stroke_width=self.stroke_width,
            stroke_dash_array=self.stroke_dash_array,
        )

    def text_options(self) -> "Style":
        return Style(
            class_name=self.class_name,
            font_family=self.font_family,
            font_size=self.font_size,
            font_color=self.font_color,
        )


def merge_style(base: Style, override: Style | None) -> Style:
    if override is None:
        return base
    changes = {f.name: getattr(override, f.name) for f in fields(override) if getattr(override, f.name) is not None}
    return replace(base, **changes)


@dataclass(frozen=True)
class Box:
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top


BOX_ZERO = Box()
