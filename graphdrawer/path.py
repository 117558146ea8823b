from __future__ import annotations

from typing import Sequence

from graphdrawer.colors import BLACK, Color
from graphdrawer.errors import GraphDataError
from graphdrawer.geometry import Point
from graphdrawer.surface import PaintSurface, StrokeStyle


class BezierPath:
    """Path builder bound to a paint surface.

    Implements the `Renderer` pen protocol plus the paint effects shapes apply
    after emitting geometry. Colors set here are the current stroke and fill
    colors of the path, used by `stroke()` and `fill_oval()`.
    """

    def __init__(self, surface: PaintSurface) -> None:
        self._surface = surface
        self._subpaths: list[list[Point]] = []
        self._current: Point | None = None
        self.line_width = 1.0
        self.stroke_color: Color = BLACK
        self.fill_color: Color = BLACK
        self._dash: tuple[float, ...] = ()
        self._dash_phase = 0.0

    @property
    def current_point(self) -> Point | None:
        return self._current

    @property
    def is_empty(self) -> bool:
        return not self._subpaths

    @property
    def subpaths(self) -> tuple[tuple[Point, ...], ...]:
        return tuple(tuple(sp) for sp in self._subpaths)

    def move_to(self, point: Point) -> None:
        self._subpaths.append([point])
        self._current = point

    def line_to(self, point: Point) -> None:
        if self._current is None:
            raise GraphDataError("line_to requires a current point; call move_to first")
        self._subpaths[-1].append(point)
        self._current = point

    def set_line_dash(self, pattern: Sequence[float], phase: float = 0.0) -> None:
        if any(v < 0 for v in pattern):
            raise ValueError("dash pattern lengths must be >= 0")
        self._dash = tuple(float(v) for v in pattern)
        self._dash_phase = float(phase)

    def set_stroke_color(self, color: Color) -> None:
        self.stroke_color = color

    def set_fill_color(self, color: Color) -> None:
        self.fill_color = color

    def stroke(self) -> None:
        if self.is_empty:
            return
        style = StrokeStyle(
            color=self.stroke_color,
            width=self.line_width,
            dash=self._dash,
            dash_phase=self._dash_phase,
        )
        self._surface.stroke_path(self.subpaths, style)

    def fill_oval(self, origin: Point, width: float, height: float) -> None:
        self._surface.fill_oval(origin.x, origin.y, width, height, self.fill_color)
