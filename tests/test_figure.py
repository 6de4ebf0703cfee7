from __future__ import annotations

import math
import unittest

from termplot import Bars, Domain, Graph, InvalidArgument, Plot, Size, plot


def _sinc_plot() -> Plot:
    out = Plot()
    out.set_domain(Domain(-10.0, 10.0)) \
        .set_codomain(Domain(-0.3, 1.2)) \
        .set_title("Graph title") \
        .set_x_label("X axis") \
        .set_y_label("Y axis") \
        .set_size(Size(50, 25)) \
        .add_plot(Graph(lambda x: math.sin(x) / x))
    return out


class PlotRenderTests(unittest.TestCase):
    def test_framed_output_layout(self) -> None:
        lines = _sinc_plot().render().split("\n")
        # Trailing newline after the last caption.
        self.assertEqual(lines[-1], "")
        lines = lines[:-1]
        # title + 7 canvas rows + tick row + bottom border + 2 captions
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[0], "╭" + "─" * 9 + "Graph title" + "─" * 9 + "╮")
        content = lines[1:9]
        for row in content:
            self.assertTrue(row.startswith("│"))
            self.assertTrue(row.endswith("│"))
        self.assertEqual({len(row) for row in content}, {31})
        self.assertEqual(lines[9], "╰" + "─" * 29 + "╯")
        self.assertEqual(lines[10].strip(), "X axis")
        self.assertEqual(lines[11].strip(), "Y axis")
        self.assertEqual(len(lines[10]), 31)

    def test_tick_labels_in_frame(self) -> None:
        lines = _sinc_plot().render().splitlines()
        self.assertEqual(lines[1][1:5], " 1.2")
        self.assertEqual(lines[7][1:5], "-0.3")
        self.assertEqual(lines[8], "│" + " " * 4 + "-10.0" + " " * 16 + "10.0" + "│")

    def test_curve_is_drawn(self) -> None:
        with_curve = _sinc_plot().set_decoration(False).rows()
        axes_only = Plot().set_domain((-10.0, 10.0)).set_codomain((-0.3, 1.2)).set_size((50, 25))
        self.assertNotEqual(with_curve, axes_only.set_decoration(False).rows())

    def test_render_is_idempotent(self) -> None:
        fig = _sinc_plot()
        self.assertEqual(fig.render(), fig.render())
        self.assertEqual(str(fig), fig.render())

    def test_without_decoration_rows_are_joined(self) -> None:
        out = _sinc_plot().set_decoration(False).render()
        self.assertNotIn("╭", out)
        self.assertFalse(out.endswith("\n"))
        rows = out.split("\n")
        self.assertEqual(len(rows), 7)
        self.assertEqual({len(row) for row in rows}, {25})

    def test_huge_values_are_clipped_not_rejected(self) -> None:
        steep = Plot().set_codomain((-0.3, 1.2)).set_size((50, 25)).add_plot(Graph(lambda x: x * 1e307))
        tall = Plot().set_codomain((0, 10)).add_plot(Bars([1e308]))
        for fig in (steep, tall):
            lines = fig.render().splitlines()
            self.assertEqual(len({len(row) for row in lines[1:-3]}), 1)

    def test_title_longer_than_frame_is_kept(self) -> None:
        out = _sinc_plot().set_size((20, 8)).set_title("a very long plot title").render()
        self.assertIn("a very long plot title", out.splitlines()[0])

    def test_decoration_needs_room_for_ticks(self) -> None:
        fig = Plot().set_size((8, 8))
        with self.assertRaises(InvalidArgument):
            fig.render()
        self.assertEqual(len(fig.set_decoration(False).render().split("\n")), 2)


class PlotConfigurationTests(unittest.TestCase):
    def test_setters_chain(self) -> None:
        fig = Plot()
        self.assertIs(fig.set_title("t"), fig)
        self.assertIs(fig.set_x_label("x").set_y_label("y"), fig)
        self.assertIs(fig.add_plot(Bars([1.0])), fig)

    def test_setters_accept_pairs(self) -> None:
        fig = Plot().set_domain((0, 6)).set_codomain((0, 10)).set_size((50, 25))
        self.assertEqual(fig.view.domain, Domain(0.0, 6.0))
        self.assertEqual(fig.view.codomain, Domain(0.0, 10.0))
        self.assertEqual(fig.view.size, Size(50, 25))

    def test_invalid_size_rejected(self) -> None:
        with self.assertRaises(InvalidArgument):
            Plot().set_size((0, 10))

    def test_layers_keep_insertion_order(self) -> None:
        first = Bars([1.0])
        second = Graph(lambda x: x)
        fig = Plot().add_plot(first).add_plot(second)
        self.assertEqual(fig.view.plots, [first, second])

    def test_defaults(self) -> None:
        fig = Plot()
        self.assertTrue(fig.with_decoration)
        self.assertEqual(fig.view.domain, Domain(-10.0, 10.0))
        self.assertEqual(fig.view.size, Size(100, 100))


class PlotFactoryTests(unittest.TestCase):
    def test_default_size(self) -> None:
        self.assertEqual(plot().view.size, Size(100, 100))

    def test_derives_missing_dimension(self) -> None:
        self.assertEqual(plot(width=80).view.size, Size(80, 40))
        self.assertEqual(plot(height=30).view.size, Size(60, 30))

    def test_labels(self) -> None:
        fig = plot(60, 20, title="t", x_label="x", y_label="y")
        self.assertEqual((fig.title, fig.x_label, fig.y_label), ("t", "x", "y"))

    def test_rejects_invalid_dimensions(self) -> None:
        with self.assertRaises(InvalidArgument):
            plot(height=0)
        with self.assertRaises(InvalidArgument):
            plot(width=-5)
        with self.assertRaises(InvalidArgument):
            plot(aspect_ratio=0.0)


if __name__ == "__main__":
    unittest.main()
