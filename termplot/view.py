from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Protocol, Union, runtime_checkable

import numpy as np

from termplot.defaults import DEFAULT_CODOMAIN, DEFAULT_DOMAIN, DEFAULT_HEIGHT, DEFAULT_WIDTH
from termplot.domain import Domain
from termplot.errors import InvalidArgument
from termplot.raster import BrailleCanvas
from termplot.ticks import XTicks, YTicks


LOGGER = logging.getLogger(__name__)


@runtime_checkable
class DrawView(Protocol):
    """A drawable component of a view.

    ``draw`` receives the view for context (domain, codomain, size) and draws
    lines and points on the canvas in plotting-space coordinates. For example
    a square centered on the origin::

        class Rect:
            def draw(self, view, canvas):
                canvas.line(-2.0, 2.0, 2.0, 2.0)
                canvas.line(2.0, 2.0, 2.0, -2.0)
                canvas.line(-2.0, -2.0, 2.0, -2.0)
                canvas.line(-2.0, 2.0, -2.0, -2.0)
    """

    def draw(self, view: "View", canvas: "ViewCanvas") -> None: ...


@dataclass(frozen=True)
class Size:
    """Size of a view in pixels. A terminal character is 2 by 4 pixels."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidArgument(f"size {name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidArgument(f"size {name} must be > 0, got {value}")
            object.__setattr__(self, name, int(value))

    @classmethod
    def from_value(cls, size: "SizeLike") -> "Size":
        if isinstance(size, Size):
            return size
        try:
            width, height = size
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"size must be a Size or a (width, height) pair, got {size!r}") from exc
        return cls(width, height)


SizeLike = Union[Size, tuple[int, int]]


def _to_pixel(value: float, size: float) -> int:
    # Clamp before rounding: scaling huge finite coordinates can overflow to +-inf.
    clamped = min(max(value, 0.0), size - 1.0)
    return int(math.floor(clamped + 0.5))


@dataclass
class View:
    """Where plots are drawn: domain, codomain, pixel size and plot layers.

    The view does not include decorations (title, labels, border). Plots are
    drawn in insertion order, later ones over earlier ones.
    """

    domain: Domain = field(default_factory=lambda: Domain(*DEFAULT_DOMAIN))
    codomain: Domain = field(default_factory=lambda: Domain(*DEFAULT_CODOMAIN))
    size: Size = field(default_factory=Size)
    plots: list[DrawView] = field(default_factory=list)

    def add_plot(self, plot: DrawView) -> "View":
        if not isinstance(plot, DrawView):
            raise InvalidArgument(f"plot must provide draw(view, canvas), got {type(plot)!r}")
        self.plots.append(plot)
        return self

    def draw_axis(self, canvas: "ViewCanvas") -> None:
        canvas.line(self.domain.min(), 0.0, self.domain.max(), 0.0)
        canvas.line(0.0, self.codomain.min(), 0.0, self.codomain.max())

    def draw_plots(self, canvas: "ViewCanvas") -> None:
        for plot in self.plots:
            plot.draw(self, canvas)

    def drawing(self, with_decoration: bool) -> list[str]:
        """Draw axes and plots on a fresh canvas and return its text rows.

        With decoration, a right-aligned y tick column prefixes every row and a
        final row carries the x tick labels.
        """
        canvas = ViewCanvas(self)
        self.draw_axis(canvas)
        self.draw_plots(canvas)
        rows = canvas.rows()
        LOGGER.debug(
            "rendered view %dx%d px into %d rows, %d plot(s)",
            self.size.width,
            self.size.height,
            len(rows),
            len(self.plots),
        )
        if not with_decoration:
            return rows

        width = len(rows[0])
        y_ticks = YTicks(self.codomain, len(rows))
        offset = y_ticks.display_width()
        x_ticks = XTicks(self.domain, width)
        out = [f"{y_ticks.get(index):>{offset}}{row}" for index, row in enumerate(rows)]
        out.append(" " * offset + str(x_ticks))
        return out


class ViewCanvas:
    """Canvas addressed in plotting-space coordinates.

    Coordinates passed to ``line`` and ``point`` are domain/codomain values,
    not pixels. They are projected on the pixel grid of the view and clamped to
    its edges.
    """

    def __init__(self, view: View) -> None:
        if view.domain.range() == 0.0:
            raise InvalidArgument("domain span must be > 0")
        if view.codomain.range() == 0.0:
            raise InvalidArgument("codomain span must be > 0")
        self.view = view
        self.canvas = BrailleCanvas(view.size.width, view.size.height)

    def project(self, x: float, y: float) -> tuple[int, int]:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidArgument(f"cannot project non-finite point ({x}, {y})")
        view = self.view

        height = float(view.size.height)
        y_tmp = (y - view.codomain.min()) / view.codomain.range()
        py = _to_pixel(height - y_tmp * height, height)

        width = float(view.size.width)
        x_tmp = (x - view.domain.min()) / view.domain.range()
        px = _to_pixel(x_tmp * width, width)

        return px, py

    def line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        px0, py0 = self.project(x0, y0)
        px1, py1 = self.project(x1, y1)
        self.canvas.line(px0, py0, px1, py1)

    def point(self, x: float, y: float) -> None:
        px, py = self.project(x, y)
        self.canvas.set(px, py)

    draw_line = line
    draw_point = point

    def rows(self) -> list[str]:
        return self.canvas.rows()
