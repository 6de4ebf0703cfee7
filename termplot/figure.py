from __future__ import annotations

from dataclasses import dataclass, field

from termplot.domain import Domain, DomainLike
from termplot.view import DrawView, Size, SizeLike, View


@dataclass
class Plot:
    """A view framed with a title, axis labels and a border.

    Setters return the plot so configuration can be chained::

        plot = Plot()
        plot.set_domain(Domain(-10.0, 10.0)) \\
            .set_codomain(Domain(-0.3, 1.2)) \\
            .set_title("Graph title") \\
            .set_size(Size(50, 25)) \\
            .add_plot(Graph(lambda x: math.sin(x) / x))
        print(plot)

    A plot is meant to be configured and rendered by a single owner.
    """

    title: str = ""
    x_label: str = ""
    y_label: str = ""
    view: View = field(default_factory=View)
    with_decoration: bool = True

    def add_plot(self, plot: DrawView) -> "Plot":
        """Add a plot or graph on top of the ones already added."""
        self.view.add_plot(plot)
        return self

    def set_domain(self, domain: DomainLike) -> "Plot":
        """Set the range of the x axis. Defaults to -10..10."""
        self.view.domain = Domain.from_bounds(domain)
        return self

    def set_codomain(self, codomain: DomainLike) -> "Plot":
        """Set the range of the y axis. Defaults to -10..10."""
        self.view.codomain = Domain.from_bounds(codomain)
        return self

    def set_title(self, title: str) -> "Plot":
        self.title = str(title)
        return self

    def set_x_label(self, label: str) -> "Plot":
        self.x_label = str(label)
        return self

    def set_y_label(self, label: str) -> "Plot":
        self.y_label = str(label)
        return self

    def set_size(self, size: SizeLike) -> "Plot":
        """Set the size of the view in pixels, decorations excluded.

        A terminal character is 2 pixels wide and 4 pixels tall.
        """
        self.view.size = Size.from_value(size)
        return self

    def set_decoration(self, with_decoration: bool) -> "Plot":
        self.with_decoration = bool(with_decoration)
        return self

    def rows(self) -> list[str]:
        return self.view.drawing(self.with_decoration)

    def render(self) -> str:
        rows = self.rows()
        if not self.with_decoration:
            return "\n".join(rows)
        width = len(rows[0])
        lines = [f"╭{self.title:─^{width}}╮"]
        lines.extend(f"│{row}│" for row in rows)
        lines.append(f"╰{'':─<{width}}╯")
        lines.append(f" {self.x_label:^{width}} ")
        lines.append(f" {self.y_label:^{width}} ")
        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.render()
