from __future__ import annotations


class GraphDataError(ValueError):
    """Raised when graph input cannot be mapped or drawn."""


class GraphDomainError(GraphDataError):
    """Series values fall outside the domain of the column or log mapping."""


class EmptyCurveError(GraphDataError):
    """A curve without corners was asked to draw itself."""
