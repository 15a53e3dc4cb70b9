from __future__ import annotations

from typing import Callable, Sequence

LabelFormatter = Callable[[int, float, float], str]

# Percent values below zero mean "no percent".
NO_PERCENT = -1.0

PIE_LABEL_LAYOUT = "{b}: {d}"
VALUE_LABEL_LAYOUT = "{c}"
VALUE_DIGITS = 2


def format_number(value: float, digits: int = VALUE_DIGITS) -> str:
    return f"{value:.{digits}f}"


def new_pie_label_formatter(series_names: Sequence[str], layout: str = "") -> LabelFormatter:
    return new_label_formatter(series_names, layout or PIE_LABEL_LAYOUT)


def new_value_label_formatter(series_names: Sequence[str], layout: str = "") -> LabelFormatter:
    return new_label_formatter(series_names, layout or VALUE_LABEL_LAYOUT)


def new_label_formatter(series_names: Sequence[str], layout: str) -> LabelFormatter:
    """Bind names and a template into a ``(index, value, percent) -> str`` formatter.

    Tokens are replaced literally, ``{c}`` first, then ``{d}``, then ``{b}``.
    """

    names = tuple(series_names)

    def _format(index: int, value: float, percent: float) -> str:
        percent_text = ""
        if percent >= 0:
            percent_text = format_number(percent * 100) + "%"
        name = names[index] if 0 <= index < len(names) else ""
        text = layout.replace("{c}", format_number(value))
        text = text.replace("{d}", percent_text)
        return text.replace("{b}", name)

    return _format
