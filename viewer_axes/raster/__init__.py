from .canvas import blend_pixel, new_canvas
from .draw_lines import clip_segment, draw_line
from .draw_text import draw_text, load_font, text_size
from .surface import RasterSurface

__all__ = [
    "RasterSurface",
    "blend_pixel",
    "clip_segment",
    "draw_line",
    "draw_text",
    "load_font",
    "new_canvas",
    "text_size",
]
