from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from graphdrawer.colors import Color
from graphdrawer.errors import EmptyCurveError
from graphdrawer.geometry import Point


class Renderer(Protocol):
    """Pen-based drawing target."""

    def move_to(self, point: Point) -> None:
        """Moves the pen to `point` without drawing anything."""
        ...

    def line_to(self, point: Point) -> None:
        """Draws a line from the pen's current position to `point`, updating the pen position."""
        ...


@runtime_checkable
class PaintContext(Protocol):
    """Paint effects a renderer may offer on top of the pen protocol."""

    def set_stroke_color(self, color: Color) -> None:
        ...

    def set_fill_color(self, color: Color) -> None:
        ...

    def fill_oval(self, origin: Point, width: float, height: float) -> None:
        ...


class Drawable(Protocol):
    def draw(self, renderer: Renderer | None) -> None:
        """Issues drawing commands to `renderer` to represent `self`.

        Drawing without a renderer does nothing.
        """
        ...


def _apply_color(renderer: Renderer, color: Color) -> None:
    if isinstance(renderer, PaintContext):
        renderer.set_stroke_color(color)
        renderer.set_fill_color(color)


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color

    def draw(self, renderer: Renderer | None) -> None:
        if renderer is None:
            return
        renderer.move_to(self.start)
        renderer.line_to(self.end)
        _apply_color(renderer, self.color)


@dataclass(frozen=True)
class Circle:
    """Filled circle inside the square at `origin` with side `diameter`.

    Circles fill their oval directly and never move the renderer's pen.
    """

    origin: Point
    diameter: float
    color: Color

    def draw(self, renderer: Renderer | None) -> None:
        if not isinstance(renderer, PaintContext):
            return
        renderer.set_fill_color(self.color)
        renderer.fill_oval(self.origin, self.diameter, self.diameter)


@dataclass(frozen=True)
class Curve:
    corners: tuple[Point, ...]
    color: Color

    def __post_init__(self) -> None:
        object.__setattr__(self, "corners", tuple(self.corners))

    def draw(self, renderer: Renderer | None) -> None:
        if renderer is None:
            return
        if not self.corners:
            raise EmptyCurveError("curve has no corners to draw")
        renderer.move_to(self.corners[0])
        for p in self.corners:
            renderer.line_to(p)
        _apply_color(renderer, self.color)


@dataclass
class Diagram:
    """A group of drawables, drawn in insertion order."""

    elements: list[Drawable] = field(default_factory=list)

    def draw(self, renderer: Renderer | None) -> None:
        if renderer is None:
            return
        for element in self.elements:
            element.draw(renderer)

    def add(self, other: Drawable) -> None:
        self.elements.append(other)

    def __len__(self) -> int:
        return len(self.elements)
