from .canvas import blit, clip_columns, draw_hline, draw_vline, new_canvas
from .draw_fill import fill_polygon_gradient
from .draw_lines import draw_polyline
from .draw_markers import draw_circles
from .draw_text import draw_text, text_size

__all__ = [
    "blit",
    "clip_columns",
    "draw_circles",
    "draw_hline",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "fill_polygon_gradient",
    "new_canvas",
    "text_size",
]
