from __future__ import annotations

import math
import unittest

from graphdrawer.config import GraphParams
from graphdrawer.graph import Graph


def _graph(**overrides: float) -> Graph:
    values = dict(width=400.0, height=300.0, margin=90.0, top_border=30.0, bottom_border=80.0, max_value=6.0)
    values.update(overrides)
    return Graph(**values)


class GraphMappingTests(unittest.TestCase):
    def test_column_endpoints_land_on_margin_boundary(self) -> None:
        graph = _graph()
        for n in (2, 3, 5, 17):
            self.assertAlmostEqual(graph.column_x(n, 0), graph.margin + 2)
            self.assertAlmostEqual(graph.column_x(n, n - 1), graph.width - graph.margin - 2)

    def test_columns_are_evenly_spaced(self) -> None:
        graph = _graph()
        xs = [graph.column_x(5, c) for c in range(5)]
        self.assertEqual(xs, [92.0, 146.0, 200.0, 254.0, 308.0])

    def test_single_point_series_has_no_spacing(self) -> None:
        with self.assertRaises(ZeroDivisionError):
            _graph().column_x(1, 0)

    def test_value_axis_boundaries(self) -> None:
        graph = _graph()
        self.assertAlmostEqual(graph.value_y(graph.max_value), graph.top_border)
        self.assertAlmostEqual(graph.value_y(0.0), graph.height - graph.bottom_border)
        self.assertAlmostEqual(graph.value_y(0.0), graph.graph_height + graph.top_border)

    def test_value_axis_is_flipped(self) -> None:
        graph = _graph()
        values = [0.0, 0.5, 1.0, 2.5, 4.0, 6.0]
        ys = [graph.value_y(v) for v in values]
        for upper, lower in zip(ys, ys[1:]):
            self.assertGreater(upper, lower)

    def test_value_axis_accepts_values_outside_range(self) -> None:
        graph = _graph()
        self.assertAlmostEqual(graph.value_y(-1.0), 220.0 + 190.0 / 6.0)
        self.assertLess(graph.value_y(7.0), graph.top_border)

    def test_rejects_non_positive_max_value(self) -> None:
        with self.assertRaisesRegex(ValueError, "max_value"):
            _graph(max_value=0.0)

    def test_from_params_starts_with_empty_viewport(self) -> None:
        graph = Graph.from_params(GraphParams(margin=10.0))
        self.assertEqual((graph.width, graph.height), (0.0, 0.0))
        self.assertEqual(graph.margin, 10.0)
        self.assertEqual(graph.max_value, 6.0)

    def test_resize_updates_layout(self) -> None:
        graph = _graph()
        graph.resize(800, 600)
        self.assertEqual(graph.width, 800.0)
        self.assertEqual(graph.graph_height, 490.0)
        self.assertTrue(math.isclose(graph.column_x(2, 1), 708.0))

    def test_resize_warns_when_no_room_for_columns(self) -> None:
        graph = _graph()
        with self.assertLogs("graphdrawer.graph", level="WARNING") as logs:
            graph.resize(150, 300)
        self.assertIn("no room for columns", logs.output[0])


if __name__ == "__main__":
    unittest.main()
