from __future__ import annotations

import math
import unittest

from graphdrawer.colors import Color, color_at, hex_to_color
from graphdrawer.drawing import DASH_PATTERN, GraphDrawer, validate_series
from graphdrawer.errors import GraphDataError, GraphDomainError
from graphdrawer.geometry import Point
from graphdrawer.graph import Graph
from graphdrawer.labels import Label
from graphdrawer.path import BezierPath
from graphdrawer.surface import FillOvalCommand, LinearGradientCommand, RecordingSurface, StrokePathCommand


SCENARIO = [0.1, 2, 3.4, 1, 0.34]


def _drawer() -> tuple[GraphDrawer, RecordingSurface]:
    graph = Graph(width=400, height=300, margin=90, top_border=30, bottom_border=80, max_value=6)
    surface = RecordingSurface(width=400, height=300)
    return GraphDrawer(graph, surface), surface


class SeriesMappingTests(unittest.TestCase):
    def test_scenario_points(self) -> None:
        drawer, _ = _drawer()
        points = drawer.map_series(SCENARIO)
        self.assertEqual([p.x for p in points], [92.0, 146.0, 200.0, 254.0, 308.0])
        for point, value in zip(points, SCENARIO):
            self.assertAlmostEqual(point.y, 220.0 - math.log10(value) / 6.0 * 190.0)
            self.assertFalse(math.isnan(point.y))
        self.assertAlmostEqual(points[0].y, 220.0 + 190.0 / 6.0)
        self.assertAlmostEqual(points[3].y, 220.0)

    def test_zero_value_is_rejected(self) -> None:
        drawer, surface = _drawer()
        with self.assertRaisesRegex(GraphDomainError, "column 0"):
            drawer.draw_colored_single_line([0.0, 1.0], color_at(0))
        self.assertEqual(surface.commands, [])

    def test_negative_and_nan_values_are_rejected(self) -> None:
        with self.assertRaises(GraphDomainError):
            validate_series([1.0, -2.0])
        with self.assertRaises(GraphDomainError):
            validate_series([1.0, float("nan")])
        with self.assertRaises(GraphDomainError):
            validate_series([1.0, float("inf")])

    def test_short_series_is_rejected(self) -> None:
        with self.assertRaisesRegex(GraphDomainError, "at least 2"):
            validate_series([3.0])
        with self.assertRaises(GraphDomainError):
            validate_series([])
        with self.assertRaises(GraphDomainError):
            validate_series([[1.0, 2.0], [3.0, 4.0]])

    def test_domain_error_is_a_value_error(self) -> None:
        self.assertTrue(issubclass(GraphDomainError, GraphDataError))
        self.assertTrue(issubclass(GraphDomainError, ValueError))


class GraphDrawerTests(unittest.TestCase):
    def test_single_line_strokes_one_curve(self) -> None:
        drawer, surface = _drawer()
        color = color_at(1)
        points = drawer.draw_colored_single_line(SCENARIO, color)
        self.assertEqual(len(surface.commands), 1)
        command = surface.commands[0]
        self.assertIsInstance(command, StrokePathCommand)
        self.assertEqual(command.style.color, color)
        self.assertEqual(command.style.width, 1.5)
        self.assertEqual(command.style.dash, ())
        self.assertEqual(len(command.subpaths), 1)
        # move_to the first corner, then line_to every corner including the first.
        self.assertEqual(command.subpaths[0], (points[0],) + points)

    def test_multi_lines_assign_palette_colors_in_order(self) -> None:
        drawer, surface = _drawer()
        series = [[1.0 + i, 2.0, 3.0] for i in range(6)]
        mapped = drawer.draw_colored_multi_lines(series)
        self.assertEqual(len(mapped), 6)
        colors = [c.style.color for c in surface.commands]
        self.assertEqual(colors, [color_at(i) for i in range(6)])
        self.assertEqual(colors[5], colors[0])
        self.assertEqual(surface.commands[2].subpaths[0][1:], mapped[2])

    def test_multi_lines_validate_before_drawing(self) -> None:
        drawer, surface = _drawer()
        with self.assertRaises(GraphDomainError):
            drawer.draw_colored_multi_lines([[1.0, 2.0], [0.0, 1.0]])
        self.assertEqual(surface.commands, [])

    def test_dash_line_style(self) -> None:
        drawer, surface = _drawer()
        color = Color(1.0, 1.0, 1.0, 0.5)
        drawer.draw_dash_line(Point(90, 30), Point(310, 30), color)
        (command,) = surface.commands
        self.assertEqual(command.subpaths, ((Point(90, 30), Point(310, 30)),))
        self.assertEqual(command.style.dash, DASH_PATTERN)
        self.assertEqual(command.style.dash, (5.0, 5.0))
        self.assertEqual(command.style.dash_phase, 0.0)
        self.assertEqual(command.style.width, 1.5)
        self.assertEqual(command.style.color, color)

    def test_start_marker_is_offset_but_end_marker_is_not(self) -> None:
        drawer, surface = _drawer()
        drawer.draw_circles_start_end(Point(92, 100), Point(308, 50))
        self.assertEqual(len(surface.commands), 2)
        start, end = surface.commands
        self.assertIsInstance(start, FillOvalCommand)
        self.assertEqual((start.x, start.y), (89.5, 97.5))
        self.assertEqual((end.x, end.y), (308.0, 50.0))
        self.assertEqual((start.width, start.height), (7.0, 7.0))
        self.assertEqual(start.color, hex_to_color(0xDD2D2D, 1.0))
        self.assertEqual(end.color, start.color)

    def test_gradient_spans_viewport_height(self) -> None:
        drawer, surface = _drawer()
        top = hex_to_color(0xFA4B2A)
        bottom = hex_to_color(0xFC9D2A)
        drawer.draw_gradient(top, bottom)
        (command,) = surface.commands
        self.assertIsInstance(command, LinearGradientCommand)
        self.assertEqual(command.start, Point(0, 0))
        self.assertEqual(command.end, Point(0, 300))
        self.assertEqual([(s.offset, s.color) for s in command.stops], [(0.0, top), (1.0, bottom)])
        self.assertTrue(command.draws_before_start)

    def test_label_factory_has_no_side_effects(self) -> None:
        drawer, surface = _drawer()
        label = drawer.draw_graph_line_labels(Point(100, 40), "12")
        self.assertIsInstance(label, Label)
        self.assertEqual(label.frame, (75.0, 31.0, 50.0, 18.0))
        self.assertEqual(label.alignment, "center")
        self.assertTrue(label.bold)
        self.assertEqual(label.font_size_px, 12.0)
        self.assertEqual(surface.commands, [])

    def test_batch_preserves_issue_order(self) -> None:
        drawer, surface = _drawer()
        drawer.draw_gradient(color_at(0), color_at(1))
        drawer.draw_colored_single_line([1.0, 10.0], color_at(2))
        drawer.draw_circles_start_end(Point(0, 0), Point(1, 1))
        kinds = [type(c).__name__ for c in surface.batch().commands]
        self.assertEqual(
            kinds,
            ["LinearGradientCommand", "StrokePathCommand", "FillOvalCommand", "FillOvalCommand"],
        )


class BezierPathTests(unittest.TestCase):
    def test_line_to_requires_current_point(self) -> None:
        path = BezierPath(RecordingSurface(10, 10))
        with self.assertRaises(GraphDataError):
            path.line_to(Point(1, 1))

    def test_move_to_starts_new_subpath(self) -> None:
        surface = RecordingSurface(10, 10)
        path = BezierPath(surface)
        path.move_to(Point(0, 0))
        path.line_to(Point(1, 0))
        path.move_to(Point(0, 5))
        path.line_to(Point(1, 5))
        self.assertEqual(path.current_point, Point(1, 5))
        path.stroke()
        (command,) = surface.commands
        self.assertEqual(len(command.subpaths), 2)

    def test_empty_path_strokes_nothing(self) -> None:
        surface = RecordingSurface(10, 10)
        BezierPath(surface).stroke()
        self.assertEqual(surface.commands, [])

    def test_rejects_negative_dash(self) -> None:
        with self.assertRaises(ValueError):
            BezierPath(RecordingSurface(10, 10)).set_line_dash([5.0, -1.0])


if __name__ == "__main__":
    unittest.main()
