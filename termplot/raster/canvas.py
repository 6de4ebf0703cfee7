from __future__ import annotations

import numpy as np

from termplot.defaults import DOT_HEIGHT, DOT_WIDTH
from termplot.errors import InvalidArgument


BRAILLE_BASE = 0x2800
# Bit of each dot inside a braille cell, indexed [row][col].
BRAILLE_DOT_BITS = np.asarray(
    [
        [0x01, 0x08],
        [0x02, 0x10],
        [0x04, 0x20],
        [0x40, 0x80],
    ],
    dtype=np.int32,
)


def new_canvas(width: int, height: int) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise InvalidArgument(f"canvas width/height must be > 0, got {width}x{height}")
    return np.zeros((height, width), dtype=bool)


def draw_pixel(dst: np.ndarray, x: int, y: int) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    dst[y, x] = True


def encode_rows(dots: np.ndarray) -> list[str]:
    h, w = dots.shape
    rows = -(-h // DOT_HEIGHT)
    cols = -(-w // DOT_WIDTH)
    padded = np.zeros((rows * DOT_HEIGHT, cols * DOT_WIDTH), dtype=np.int32)
    padded[:h, :w] = dots
    cells = padded.reshape(rows, DOT_HEIGHT, cols, DOT_WIDTH)
    codes = (cells * BRAILLE_DOT_BITS[None, :, None, :]).sum(axis=(1, 3))
    return ["".join(chr(BRAILLE_BASE + int(code)) if code else " " for code in row) for row in codes.tolist()]
