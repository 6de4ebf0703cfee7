from __future__ import annotations

import math

from termplot import Domain, Graph, Plot, Size


def build_plot() -> Plot:
    plot = Plot()
    plot.set_domain(Domain(-10.0, 10.0)) \
        .set_codomain(Domain(-0.3, 1.2)) \
        .set_title("Graph title") \
        .set_x_label("X axis") \
        .set_y_label("Y axis") \
        .set_size(Size(50, 25)) \
        .add_plot(Graph(lambda x: math.sin(x) / x))
    return plot


def main() -> None:
    print(build_plot())


if __name__ == "__main__":
    main()
