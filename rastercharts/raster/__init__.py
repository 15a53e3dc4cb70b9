from .canvas import new_canvas
from .draw_lines import draw_polyline
from .draw_text import draw_text, text_size
from .fill import fill_polygon

__all__ = [
    "draw_polyline",
    "draw_text",
    "fill_polygon",
    "new_canvas",
    "text_size",
]
