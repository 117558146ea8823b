from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Union

from graphdrawer.colors import BLACK, Color
from graphdrawer.geometry import Point


Subpath = tuple[Point, ...]


@dataclass(frozen=True)
class StrokeStyle:
    color: Color = BLACK
    width: float = 1.0
    dash: tuple[float, ...] = ()
    dash_phase: float = 0.0

    @property
    def dashed(self) -> bool:
        return bool(self.dash) and sum(self.dash) > 0


@dataclass(frozen=True)
class GradientStop:
    offset: float
    color: Color


@dataclass(frozen=True)
class StrokePathCommand:
    """Stroke every subpath (move-to followed by line-tos) with one style."""

    subpaths: tuple[Subpath, ...]
    style: StrokeStyle


@dataclass(frozen=True)
class FillOvalCommand:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True)
class LinearGradientCommand:
    start: Point
    end: Point
    stops: tuple[GradientStop, ...]
    draws_before_start: bool = True


PaintCommand = Union[StrokePathCommand, FillOvalCommand, LinearGradientCommand]


@dataclass(frozen=True)
class PaintBatch:
    """Paint commands of one draw pass, in the order they were issued."""

    commands: tuple[PaintCommand, ...]


class PaintSurface(Protocol):
    """Backend that turns finished paths and fills into pixels."""

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def stroke_path(self, subpaths: tuple[Subpath, ...], style: StrokeStyle) -> None:
        ...

    def fill_oval(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        ...

    def draw_linear_gradient(
        self,
        start: Point,
        end: Point,
        stops: tuple[GradientStop, ...],
        *,
        draws_before_start: bool = True,
    ) -> None:
        ...


@dataclass
class RecordingSurface:
    """Surface that keeps the issued commands instead of painting them."""

    width: int
    height: int
    commands: list[PaintCommand] = field(default_factory=list)

    def stroke_path(self, subpaths: tuple[Subpath, ...], style: StrokeStyle) -> None:
        self.commands.append(StrokePathCommand(subpaths=subpaths, style=style))

    def fill_oval(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        self.commands.append(FillOvalCommand(x=x, y=y, width=width, height=height, color=color))

    def draw_linear_gradient(
        self,
        start: Point,
        end: Point,
        stops: tuple[GradientStop, ...],
        *,
        draws_before_start: bool = True,
    ) -> None:
        self.commands.append(
            LinearGradientCommand(start=start, end=end, stops=stops, draws_before_start=draws_before_start)
        )

    def batch(self) -> PaintBatch:
        return PaintBatch(commands=tuple(self.commands))
