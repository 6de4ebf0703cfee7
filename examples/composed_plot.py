from __future__ import annotations

import numpy as np

from termplot import Graph, Histogram, plot as new_plot
from termplot.figure import Plot


def build_plot(seed: int = 7) -> Plot:
    rng = np.random.default_rng(seed)
    values = rng.uniform(0.0, 10.0, size=100)

    # Histogram first so the parabola is painted over it.
    return (
        new_plot(100, 50, title="Graph title", x_label="X axis", y_label="Y axis")
        .set_domain((0.0, 11.0))
        .set_codomain((0.0, 45.0))
        .add_plot(Histogram.with_bucket_count(values, 5))
        .add_plot(Graph(lambda x: -2.0 * (x - 5.0) ** 2 + 40.0))
    )


def main() -> None:
    print(build_plot())


if __name__ == "__main__":
    main()
