from .braille import BrailleCanvas
from .canvas import draw_pixel, encode_rows, new_canvas
from .draw_lines import draw_line

__all__ = [
    "BrailleCanvas",
    "draw_line",
    "draw_pixel",
    "encode_rows",
    "new_canvas",
]
