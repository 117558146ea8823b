from __future__ import annotations

import numpy as np
from PIL import Image

from graphdrawer.colors import Color
from graphdrawer.geometry import Point
from graphdrawer.raster.canvas import RGBA, TRANSPARENT, new_canvas
from graphdrawer.raster.draw_lines import stroke_polyline
from graphdrawer.raster.draw_shapes import draw_linear_gradient, fill_ellipse
from graphdrawer.surface import GradientStop, StrokeStyle, Subpath


class CanvasSurface:
    """Paint surface backed by an RGBA uint8 array of shape (height, width, 4)."""

    def __init__(self, width: int, height: int, background: RGBA = TRANSPARENT) -> None:
        self.canvas = new_canvas(width, height, color=background)

    @property
    def width(self) -> int:
        return int(self.canvas.shape[1])

    @property
    def height(self) -> int:
        return int(self.canvas.shape[0])

    def stroke_path(self, subpaths: tuple[Subpath, ...], style: StrokeStyle) -> None:
        color = style.color.to_rgba8()
        dash = style.dash if style.dashed else ()
        for subpath in subpaths:
            stroke_polyline(
                self.canvas,
                [p.as_tuple() for p in subpath],
                color,
                width=style.width,
                dash=dash,
                dash_phase=style.dash_phase,
            )

    def fill_oval(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        fill_ellipse(self.canvas, x, y, width, height, color.to_rgba8())

    def draw_linear_gradient(
        self,
        start: Point,
        end: Point,
        stops: tuple[GradientStop, ...],
        *,
        draws_before_start: bool = True,
    ) -> None:
        draw_linear_gradient(
            self.canvas,
            start.as_tuple(),
            end.as_tuple(),
            [(s.offset, s.color.to_rgba8()) for s in stops],
            draws_before_start=draws_before_start,
        )

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.canvas))
