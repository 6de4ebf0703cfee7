from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterator, Union

import numpy as np

from termplot.errors import InvalidArgument


@dataclass(frozen=True)
class Domain:
    """Domain or codomain of a view.

    ``start`` may be larger than ``end``. Such a reversed domain is valid, but
    sampling it yields no values since samples only advance towards ``end``
    with a positive step.
    """

    start: float = -10.0
    end: float = 10.0

    def __post_init__(self) -> None:
        try:
            start = float(self.start)
            end = float(self.end)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"domain bounds must be numbers, got ({self.start!r}, {self.end!r})") from exc
        if not (math.isfinite(start) and math.isfinite(end)):
            raise InvalidArgument(f"domain bounds must be finite, got ({self.start}, {self.end})")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @classmethod
    def from_bounds(cls, bounds: "DomainLike") -> "Domain":
        if isinstance(bounds, Domain):
            return bounds
        try:
            start, end = bounds
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"domain must be a Domain or a (start, end) pair, got {bounds!r}") from exc
        return cls(start, end)

    def min(self) -> float:
        return self.start

    def max(self) -> float:
        return self.end

    def range(self) -> float:
        """Absolute span of the domain: ``Domain(8, -8).range() == 16``."""
        return abs(self.end - self.start)

    def sample(self, steps: int) -> "DomainIterator":
        """Evenly spaced values from ``start`` towards ``end`` (exclusive).

        The step is ``range() / steps``. The returned iterable is lazy and can
        be iterated more than once.
        """
        if isinstance(steps, bool) or not isinstance(steps, (int, np.integer)):
            raise InvalidArgument(f"steps must be an integer, got {steps!r}")
        if steps <= 0:
            raise InvalidArgument(f"steps must be > 0, got {steps}")
        return DomainIterator(self, self.range() / int(steps), int(steps))

    def iter(self, steps: int) -> "DomainIterator":
        return self.sample(steps)


DomainLike = Union[Domain, tuple[float, float]]


class DomainIterator:
    """Lazy evenly spaced samples over a domain."""

    def __init__(self, domain: Domain, step_by: float, steps: int) -> None:
        self.domain = domain
        self.step_by = step_by
        self.steps = steps

    def __iter__(self) -> Iterator[float]:
        start = self.domain.start
        end = self.domain.end
        for index in range(self.steps):
            # Never more than `steps` values.
            current = start + self.step_by * index
            if current >= end:
                return
            yield current

    def to_array(self) -> np.ndarray:
        return np.fromiter(iter(self), dtype=np.float64)
