from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal

import numpy as np

from graphdrawer.colors import WHITE, Color
from graphdrawer.geometry import Point
from graphdrawer.raster.canvas import blit, new_canvas
from graphdrawer.raster.draw_text import draw_text, text_size


TextAlignment = Literal["left", "center", "right"]

LABEL_WIDTH = 50.0
LABEL_HEIGHT = 18.0


@dataclass(frozen=True)
class Label:
    """Fixed-size text tag positioned by its center point.

    Labels are plain values; the owning view decides when to paint them.
    """

    text: str
    center: Point
    width: float = LABEL_WIDTH
    height: float = LABEL_HEIGHT
    text_color: Color = WHITE
    alignment: TextAlignment = "center"
    font_size_px: float = 12.0
    bold: bool = True

    @property
    def origin(self) -> Point:
        return Point(self.center.x - self.width / 2, self.center.y - self.height / 2)

    @property
    def frame(self) -> tuple[float, float, float, float]:
        origin = self.origin
        return (origin.x, origin.y, self.width, self.height)

    def render(self, canvas: np.ndarray) -> None:
        """Paint the text onto `canvas`, clipped to the label frame."""
        if not self.text:
            return
        embolden = 2 if self.bold else 1
        tw, th = text_size(self.text, font_size_px=self.font_size_px, embolden_px=embolden)
        x0, y0, w, h = self.frame
        if self.alignment == "left":
            x = 0.0
        elif self.alignment == "right":
            x = w - tw
        else:
            x = (w - tw) / 2
        y = (h - th) / 2
        patch = new_canvas(max(1, int(math.ceil(w))), max(1, int(math.ceil(h))))
        draw_text(
            patch,
            int(round(x)),
            int(round(y)),
            self.text,
            self.text_color.to_rgba8(),
            font_size_px=self.font_size_px,
            embolden_px=embolden,
        )
        blit(canvas, patch, int(round(x0)), int(round(y0)))
