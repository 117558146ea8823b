from .canvas import blit, blend_pixels, new_canvas
from .draw_lines import stroke_polyline
from .draw_shapes import draw_linear_gradient, fill_ellipse
from .draw_text import draw_text, text_size
from .surface import CanvasSurface

__all__ = [
    "CanvasSurface",
    "blend_pixels",
    "blit",
    "draw_linear_gradient",
    "draw_text",
    "fill_ellipse",
    "new_canvas",
    "stroke_polyline",
    "text_size",
]
