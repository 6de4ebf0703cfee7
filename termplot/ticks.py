from __future__ import annotations

from termplot.defaults import TICK_DECIMALS
from termplot.domain import Domain
from termplot.errors import InvalidArgument


def format_tick(value: float, decimals: int = TICK_DECIMALS) -> str:
    return f"{value:.{decimals}f}"


class XTicks:
    """Labels of the x axis: the domain bounds, min flush left and max after a single gap."""

    def __init__(self, domain: Domain, width: int) -> None:
        self.labels = [format_tick(domain.min()), format_tick(domain.max())]
        self.width = int(width)
        labels_width = self.labels_width()
        if labels_width > self.width:
            raise InvalidArgument(
                f"x tick labels need {labels_width} columns but only {self.width} are available"
            )

    def labels_width(self) -> int:
        return sum(len(label) for label in self.labels)

    def spacing(self) -> int:
        return (self.width - self.labels_width()) // (len(self.labels) - 1)

    def __str__(self) -> str:
        spacing = self.spacing()
        parts: list[str] = []
        for index, label in enumerate(self.labels):
            space = 0 if index == 0 else spacing
            parts.append(" " * space + label)
        fill = self.width - spacing * (len(self.labels) - 1) - self.labels_width()
        parts.append(" " * fill)
        return "".join(parts)


class YTicks:
    """Labels of the y axis.

    The top row shows the codomain max and the bottom row the codomain min;
    every other row has an empty label.
    """

    def __init__(self, codomain: Domain, row_count: int) -> None:
        if row_count <= 0:
            raise InvalidArgument(f"row_count must be > 0, got {row_count}")
        self.labels = [format_tick(codomain.max()), format_tick(codomain.min())]
        self.row_indexes = [0, int(row_count) - 1]

    def display_width(self) -> int:
        """The width required for the widest label."""
        return max((len(label) for label in self.labels), default=0)

    def get(self, row_index: int) -> str:
        # With a single row both labels land on row 0; the max label wins.
        for index, label in zip(self.row_indexes, self.labels):
            if index == row_index:
                return label
        return ""

    def label_for_row(self, row_index: int) -> str:
        return self.get(row_index)
