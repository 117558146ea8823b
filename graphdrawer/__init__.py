from graphdrawer.colors import COLORS, Color, PaletteColor, color_at, hex_to_color
from graphdrawer.config import DEFAULT_PARAMS, GraphParams, validate_graph_params
from graphdrawer.drawable import Circle, Curve, Diagram, Drawable, Line, PaintContext, Renderer
from graphdrawer.drawing import GraphDrawer, validate_series
from graphdrawer.errors import EmptyCurveError, GraphDataError, GraphDomainError
from graphdrawer.geometry import Point
from graphdrawer.graph import Graph
from graphdrawer.labels import Label
from graphdrawer.path import BezierPath
from graphdrawer.surface import PaintBatch, PaintSurface, RecordingSurface
from graphdrawer.view import GraphView

__all__ = [
    "BezierPath",
    "COLORS",
    "Circle",
    "Color",
    "Curve",
    "DEFAULT_PARAMS",
    "Diagram",
    "Drawable",
    "EmptyCurveError",
    "Graph",
    "GraphDataError",
    "GraphDomainError",
    "GraphDrawer",
    "GraphParams",
    "GraphView",
    "Label",
    "Line",
    "PaintBatch",
    "PaintContext",
    "PaintSurface",
    "PaletteColor",
    "Point",
    "RecordingSurface",
    "Renderer",
    "color_at",
    "hex_to_color",
    "validate_graph_params",
    "validate_series",
]
