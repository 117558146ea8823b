from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from graphdrawer.colors import Color
from graphdrawer.config import DEFAULT_PARAMS, GraphParams
from graphdrawer.drawing import GraphDrawer
from graphdrawer.geometry import Point
from graphdrawer.graph import Graph
from graphdrawer.labels import Label
from graphdrawer.raster import CanvasSurface
from graphdrawer.raster.canvas import RGBA, TRANSPARENT
from graphdrawer.surface import PaintSurface


LOGGER = logging.getLogger(__name__)

DEFAULT_GUIDE_COLOR = Color(1.0, 1.0, 1.0, 0.6)
LABEL_LIFT = 15.0


class GraphView:
    """Host view for a log-scale line graph.

    The view owns one long-lived `Graph`. Each `draw_rect` call first lays the
    graph out for the surface size and then draws the background, guide lines,
    series and markers in that order. Value labels produced by the pass are kept
    in `labels` for the caller (or `render`) to composite.
    """

    def __init__(
        self,
        params: GraphParams = DEFAULT_PARAMS,
        series: Sequence[Sequence[float]] = (),
        *,
        gradient: tuple[Color, Color] | None = None,
        guide_color: Color = DEFAULT_GUIDE_COLOR,
        show_guides: bool = True,
        show_markers: bool = True,
        show_labels: bool = False,
    ) -> None:
        self.params = params
        self.graph = Graph.from_params(params)
        self.series: list[list[float]] = [list(s) for s in series]
        self.gradient = gradient
        self.guide_color = guide_color
        self.show_guides = show_guides
        self.show_markers = show_markers
        self.show_labels = show_labels
        self.labels: list[Label] = []

    def set_series(self, series: Sequence[Sequence[float]]) -> None:
        self.series = [list(s) for s in series]

    def layout(self, width: float, height: float) -> None:
        self.graph.resize(width, height)

    def draw_rect(self, surface: PaintSurface) -> None:
        self.layout(surface.width, surface.height)
        drawer = GraphDrawer(self.graph, surface)
        # Map everything up front so bad input fails before anything is painted.
        mapped = [drawer.map_series(s) for s in self.series]
        self.labels = []

        if self.gradient is not None:
            drawer.draw_gradient(*self.gradient)
        if self.show_guides:
            self._draw_guides(drawer)
        if mapped:
            drawer.draw_mapped_lines(mapped)
        for values, points in zip(self.series, mapped):
            if self.show_markers:
                drawer.draw_circles_start_end(points[0], points[-1])
            if self.show_labels:
                self.labels.append(_value_label(drawer, points[0], values[0]))
                self.labels.append(_value_label(drawer, points[-1], values[-1]))
        LOGGER.debug("drew %d series into %dx%d", len(mapped), surface.width, surface.height)

    def render(self, width: int, height: int, background: RGBA = TRANSPARENT) -> np.ndarray:
        surface = CanvasSurface(width, height, background=background)
        self.draw_rect(surface)
        for label in self.labels:
            label.render(surface.canvas)
        return surface.canvas

    def _draw_guides(self, drawer: GraphDrawer) -> None:
        g = self.graph
        x0 = g.margin
        x1 = g.width - g.margin
        top = g.top_border
        bottom = g.height - g.bottom_border
        for y in (top, top + g.graph_height / 2, bottom):
            drawer.draw_dash_line(Point(x0, y), Point(x1, y), self.guide_color)


def _value_label(drawer: GraphDrawer, point: Point, value: float) -> Label:
    return drawer.draw_graph_line_labels(Point(point.x, point.y - LABEL_LIFT), f"{value:g}")
