from __future__ import annotations

import numpy as np

from termplot import Domain, Histogram, Plot, Size


def build_plot(seed: int = 7) -> Plot:
    rng = np.random.default_rng(seed)
    values = rng.uniform(0.0, 10.0, size=100)

    plot = Plot()
    plot.set_domain(Domain(0.0, 11.0)) \
        .set_codomain(Domain(0.0, 45.0)) \
        .set_title("Graph title") \
        .set_x_label("X axis") \
        .set_y_label("Y axis") \
        .set_size(Size(50, 25)) \
        .add_plot(Histogram(values, [(0.0, 2.0), (2.0, 4.0), (4.0, 6.0), (6.0, 8.0), (8.0, 10.0)]))
    return plot


def main() -> None:
    print(build_plot())


if __name__ == "__main__":
    main()
