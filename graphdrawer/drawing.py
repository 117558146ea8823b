from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from graphdrawer.colors import Color, PaletteColor, color_at, hex_to_color
from graphdrawer.drawable import Circle, Curve, Diagram, Line
from graphdrawer.errors import GraphDomainError
from graphdrawer.geometry import ZERO, Point
from graphdrawer.graph import Graph
from graphdrawer.labels import Label
from graphdrawer.path import BezierPath
from graphdrawer.surface import GradientStop, PaintSurface


LOGGER = logging.getLogger(__name__)

DASH_PATTERN = (5.0, 5.0)
LINE_WIDTH = 1.5
MARKER_DIAMETER = 7.0
# Start markers shift up-left by this amount; end markers are anchored at the raw point.
MARKER_OFFSET = 5.0 / 2


def validate_series(series: Sequence[float]) -> np.ndarray:
    """Return `series` as float64 values ready for the log10 column mapping."""
    values = np.asarray(series, dtype=np.float64)
    if values.ndim != 1:
        raise GraphDomainError(f"series must be one-dimensional, got shape {values.shape}")
    if values.size < 2:
        raise GraphDomainError(f"series needs at least 2 values for column spacing, got {values.size}")
    bad = ~np.isfinite(values) | (values <= 0)
    if np.any(bad):
        idx = int(np.flatnonzero(bad)[0])
        raise GraphDomainError(f"series value {values[idx]!r} at column {idx} is outside the log10 domain (> 0)")
    return values


class GraphDrawer:
    """Draws graph elements onto a paint surface using the current graph layout.

    Every call builds its own path, so calls are independent of each other; the
    graph's width/height must not change while a pass is in progress.
    """

    def __init__(self, graph: Graph, surface: PaintSurface) -> None:
        self.graph = graph
        self.surface = surface

    def draw_dash_line(self, start: Point, end: Point, color: Color) -> None:
        """Draws a dashed line from `start` to `end`."""
        line_path = BezierPath(self.surface)
        diagram = Diagram([Line(start=start, end=end, color=color)])
        diagram.draw(line_path)

        line_path.set_line_dash(DASH_PATTERN, phase=0.0)
        line_path.line_width = LINE_WIDTH
        line_path.stroke()

    def draw_colored_multi_lines(self, series_list: Sequence[Sequence[float]]) -> list[tuple[Point, ...]]:
        """Draws each series with the palette color matching its position.

        Every series is validated before the first one is drawn.
        """
        mapped = [self.map_series(series) for series in series_list]
        self.draw_mapped_lines(mapped)
        return mapped

    def draw_mapped_lines(self, mapped: Sequence[tuple[Point, ...]]) -> None:
        """Draws already-mapped point sequences with their palette colors."""
        for i, points in enumerate(mapped):
            self._draw_curve(points, color_at(i))

    def draw_colored_single_line(self, series: Sequence[float], color: Color) -> tuple[Point, ...]:
        points = self.map_series(series)
        self._draw_curve(points, color)
        return points

    def map_series(self, series: Sequence[float]) -> tuple[Point, ...]:
        """Map a series to pixel points: one column per value, log10 on the value axis."""
        values = validate_series(series)
        n = int(values.size)
        logs = np.log10(values)
        return tuple(
            Point(self.graph.column_x(n, column), self.graph.value_y(float(logs[column])))
            for column in range(n)
        )

    def draw_circles_start_end(self, start: Point, end: Point) -> None:
        """Draws markers on the start and end of a line."""
        color = hex_to_color(PaletteColor.COLOR_ONE, 1.0)
        start_origin = start.offset(-MARKER_OFFSET, -MARKER_OFFSET)
        diagram = Diagram(
            [
                Circle(origin=start_origin, diameter=MARKER_DIAMETER, color=color),
                Circle(origin=end, diameter=MARKER_DIAMETER, color=color),
            ]
        )
        diagram.draw(BezierPath(self.surface))

    def draw_graph_line_labels(self, center: Point, text: str) -> Label:
        return Label(text=text, center=center)

    def draw_gradient(self, start_color: Color, end_color: Color) -> None:
        """Draws the graph background as a vertical gradient over the full height."""
        stops = (GradientStop(0.0, start_color), GradientStop(1.0, end_color))
        self.surface.draw_linear_gradient(ZERO, Point(0.0, self.graph.height), stops, draws_before_start=True)

    def _draw_curve(self, points: tuple[Point, ...], color: Color) -> None:
        LOGGER.debug("drawing curve of %d points", len(points))
        line_path = BezierPath(self.surface)
        diagram = Diagram([Curve(corners=points, color=color)])
        diagram.draw(line_path)

        line_path.line_width = LINE_WIDTH
        line_path.stroke()
