from __future__ import annotations

from dataclasses import dataclass
import logging

from graphdrawer.config import GraphParams


LOGGER = logging.getLogger(__name__)

# Columns are inset by this many pixels on each side of the margin.
COLUMN_INSET = 2.0


@dataclass
class Graph:
    """Maps series columns and logical values to pixel coordinates.

    `width` and `height` follow the viewport and are reassigned on every layout
    pass; the remaining fields describe the plot layout. The vertical axis is
    flipped so larger values land closer to the top of the viewport.
    """

    width: float
    height: float
    margin: float
    top_border: float
    bottom_border: float
    max_value: float

    def __post_init__(self) -> None:
        if self.max_value <= 0:
            raise ValueError("max_value must be > 0")

    @classmethod
    def from_params(cls, params: GraphParams, width: float = 0.0, height: float = 0.0) -> "Graph":
        return cls(
            width=width,
            height=height,
            margin=params.margin,
            top_border=params.top_border,
            bottom_border=params.bottom_border,
            max_value=params.max_value,
        )

    @property
    def graph_height(self) -> float:
        return self.height - self.top_border - self.bottom_border

    @property
    def plot_width(self) -> float:
        return self.width - self.margin * 2 - COLUMN_INSET * 2

    def resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        if self.plot_width <= 0:
            LOGGER.warning("graph width %.1f leaves no room for columns (margin %.1f)", self.width, self.margin)
        if self.graph_height <= 0:
            LOGGER.warning(
                "graph height %.1f leaves no room between borders (top %.1f, bottom %.1f)",
                self.height,
                self.top_border,
                self.bottom_border,
            )

    def column_x(self, series_length: int, column: int) -> float:
        """X position of `column` in a series of `series_length` points.

        A one-point series has no spacing and raises ZeroDivisionError.
        """
        spacer = self.plot_width / (series_length - 1)
        return column * spacer + self.margin + COLUMN_INSET

    def value_y(self, value: float) -> float:
        graph_height = self.graph_height
        y = value / self.max_value * graph_height
        return graph_height + self.top_border - y
