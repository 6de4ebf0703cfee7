"""Plots and graphs that can be drawn onto a view.

Any object with a ``draw(view, canvas)`` method can be added to a plot; see
:class:`termplot.view.DrawView`.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Callable, Iterable, NamedTuple, Sequence

import numpy as np

from termplot.adapters import normalize_values
from termplot.errors import InvalidArgument
from termplot.view import View, ViewCanvas


LOGGER = logging.getLogger(__name__)


def _contiguous_true_runs(mask: np.ndarray) -> list[tuple[int, int]]:
    idx = np.flatnonzero(mask)
    if idx.size == 0:
        return []
    runs: list[tuple[int, int]] = []
    start = int(idx[0])
    prev = int(idx[0])
    for v in idx[1:]:
        iv = int(v)
        if iv == prev + 1:
            prev = iv
            continue
        runs.append((start, prev + 1))
        start = iv
        prev = iv
    runs.append((start, prev + 1))
    return runs


class Graph:
    """A continuous function graphed over the whole domain.

    The domain is sampled once per pixel column. Samples where the function is
    not finite (NaN, infinity, or a math error such as a division by zero) are
    dropped and the curve is left broken around them.

    Example::

        plot.add_plot(Graph(lambda x: math.sin(x) / x))
    """

    def __init__(self, function: Callable[[float], float]) -> None:
        if not callable(function):
            raise InvalidArgument(f"function must be callable, got {type(function)!r}")
        self.function = function

    def evaluate(self, xs: np.ndarray) -> np.ndarray:
        ys = np.empty(xs.size, dtype=np.float64)
        for i, x in enumerate(xs.tolist()):
            try:
                ys[i] = float(self.function(x))
            except (ZeroDivisionError, OverflowError, ValueError):
                ys[i] = np.nan
        return ys

    def draw(self, view: View, canvas: ViewCanvas) -> None:
        xs = view.domain.sample(view.size.width).to_array()
        ys = self.evaluate(xs)
        mask = np.isfinite(ys)
        dropped = int(xs.size - np.count_nonzero(mask))
        if dropped:
            LOGGER.debug("graph dropped %d non-finite sample(s) of %d", dropped, xs.size)
        for start, end in _contiguous_true_runs(mask):
            for i in range(start, end - 1):
                canvas.line(float(xs[i]), float(ys[i]), float(xs[i + 1]), float(ys[i + 1]))


@dataclass(frozen=True)
class Bar:
    """A bar of a bar graph or histogram: both sides and the top, based on ``y = 0``."""

    x: float
    width: float
    height: float

    def draw(self, view: View, canvas: ViewCanvas) -> None:
        canvas.line(self.x, 0.0, self.x, self.height)
        canvas.line(self.x + self.width, 0.0, self.x + self.width, self.height)
        canvas.line(self.x, self.height, self.x + self.width, self.height)


class Bars:
    """A bar graph. Bar ``i`` is one unit wide, starts at ``x = i`` and is ``heights[i]`` tall."""

    def __init__(self, heights: Any) -> None:
        values = normalize_values(heights, label="heights")
        if not np.all(np.isfinite(values)):
            raise InvalidArgument("bar heights must be finite")
        self.bars = [Bar(x=float(i), width=1.0, height=float(h)) for i, h in enumerate(values.tolist())]

    def heights(self) -> list[float]:
        return [bar.height for bar in self.bars]

    def draw(self, view: View, canvas: ViewCanvas) -> None:
        for bar in self.bars:
            bar.draw(view, canvas)


class Bucket(NamedTuple):
    """Half-open interval ``[start, end)`` of a histogram."""

    start: float
    end: float

    @property
    def width(self) -> float:
        return self.end - self.start

    def mask(self, values: np.ndarray) -> np.ndarray:
        return (values >= self.start) & (values < self.end)


def _coerce_buckets(buckets: Iterable[Sequence[float]]) -> list[Bucket]:
    out: list[Bucket] = []
    for index, raw in enumerate(buckets):
        try:
            start, end = raw
            bucket = Bucket(float(start), float(end))
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"bucket {index} must be a (start, end) pair, got {raw!r}") from exc
        if not (math.isfinite(bucket.start) and math.isfinite(bucket.end)):
            raise InvalidArgument(f"bucket {index} bounds must be finite, got {raw!r}")
        if bucket.end < bucket.start:
            raise InvalidArgument(f"bucket {index} end must be >= start, got {raw!r}")
        out.append(bucket)
    return out


class Histogram:
    """An approximation of the distribution of data.

    Each bucket is the half-open interval ``[start, end)`` and its bar height is
    the number of values it contains. Buckets are taken as given: they may
    overlap (a value then counts in each of them) or leave gaps (values there
    are not counted at all).

    Example::

        Histogram(values, [(0.0, 2.0), (2.0, 4.0), (4.0, 6.0)])
    """

    def __init__(self, values: Any, buckets: Iterable[Sequence[float]]) -> None:
        data = normalize_values(values)
        self._buckets = _coerce_buckets(buckets)
        self.bars: list[Bar] = []
        for bucket in self._buckets:
            count = int(np.count_nonzero(bucket.mask(data)))
            self.bars.append(Bar(x=bucket.start, width=bucket.width, height=float(count)))

    @classmethod
    def with_bucket_count(cls, values: Any, count: int) -> "Histogram":
        """Histogram with ``count`` equal-width buckets spanning ``[min, max)`` of the values.

        The max value itself falls outside the last half-open bucket and is
        not counted.
        """
        if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count <= 0:
            raise InvalidArgument(f"bucket count must be a positive integer, got {count!r}")
        data = normalize_values(values)
        finite = data[np.isfinite(data)]
        if finite.size == 0:
            raise InvalidArgument("cannot derive buckets from an empty set of values")
        vmin = float(np.min(finite))
        vmax = float(np.max(finite))
        width = (vmax - vmin) / int(count)
        if width <= 0.0:
            raise InvalidArgument(f"all values equal {vmin}; buckets would have zero width")
        buckets = [(vmin + width * i, vmin + width * (i + 1)) for i in range(int(count))]
        LOGGER.debug("histogram buckets: %d of width %g from %g", count, width, vmin)
        return cls(data, buckets)

    def buckets(self) -> list[Bucket]:
        return list(self._buckets)

    def counts(self) -> list[int]:
        return [int(bar.height) for bar in self.bars]

    def draw(self, view: View, canvas: ViewCanvas) -> None:
        for bar in self.bars:
            bar.draw(view, canvas)
