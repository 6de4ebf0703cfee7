from __future__ import annotations


# Size of the view in sub-character pixels.
DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 100
DEFAULT_ASPECT_RATIO = 2.0

DEFAULT_DOMAIN = (-10.0, 10.0)
DEFAULT_CODOMAIN = (-10.0, 10.0)

# One terminal character cell is DOT_WIDTH x DOT_HEIGHT braille dots.
DOT_WIDTH = 2
DOT_HEIGHT = 4

TICK_DECIMALS = 1
