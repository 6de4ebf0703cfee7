from __future__ import annotations

from termplot.defaults import DEFAULT_ASPECT_RATIO, DEFAULT_HEIGHT, DEFAULT_WIDTH
from termplot.errors import InvalidArgument
from termplot.figure import Plot
from termplot.view import Size, View


def plot(
    width: int | None = None,
    height: int | None = None,
    *,
    title: str = "",
    x_label: str = "",
    y_label: str = "",
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> Plot:
    if aspect_ratio <= 0:
        raise InvalidArgument("aspect_ratio must be > 0")
    if width is None and height is None:
        width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT
    elif width is None and height is not None:
        if height <= 0:
            raise InvalidArgument("height must be > 0")
        width = max(1, int(round(height * aspect_ratio)))
    elif width is not None and height is None:
        if width <= 0:
            raise InvalidArgument("width must be > 0")
        height = max(1, int(round(width / aspect_ratio)))
    assert width is not None and height is not None
    return Plot(title=title, x_label=x_label, y_label=y_label, view=View(size=Size(width, height)))
