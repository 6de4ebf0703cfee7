from __future__ import annotations

import numpy as np

from termplot.raster.canvas import draw_pixel, encode_rows, new_canvas
from termplot.raster.draw_lines import draw_line


class BrailleCanvas:
    """Dot-matrix grid rasterized to braille characters.

    Coordinates are integer pixels with the origin at the top-left corner.
    Each character cell packs 2x4 pixels, so ``rows()`` returns
    ``ceil(height / 4)`` strings of ``ceil(width / 2)`` characters each.
    """

    def __init__(self, width: int, height: int) -> None:
        self._dots = new_canvas(width, height)

    @property
    def width(self) -> int:
        return int(self._dots.shape[1])

    @property
    def height(self) -> int:
        return int(self._dots.shape[0])

    def set(self, x: int, y: int) -> None:
        draw_pixel(self._dots, x, y)

    def line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        draw_line(self._dots, x0, y0, x1, y1)

    def dots(self) -> np.ndarray:
        return self._dots.copy()

    def rows(self) -> list[str]:
        return encode_rows(self._dots)
