from __future__ import annotations

from dataclasses import asdict, dataclass
import math
from typing import Any, Mapping


@dataclass(frozen=True)
class GraphParams:
    """Layout parameters shared by every graph drawn in a view."""

    margin: float = 90.0
    top_border: float = 30.0
    bottom_border: float = 80.0
    # log10(10**6): values up to a million fit the vertical axis.
    max_value: float = 6.0


DEFAULT_PARAMS = GraphParams()


def validate_graph_params(overrides: Mapping[str, Any] | None = None) -> GraphParams:
    """Validate and merge layout overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_PARAMS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown graph parameter: {key}")
            if value is not None:
                raw[key] = value

    for key in ("margin", "top_border", "bottom_border", "max_value"):
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Parameter `{key}` must be a number")
        if not math.isfinite(float(value)) or float(value) < 0:
            raise ValueError(f"Parameter `{key}` must be a finite number >= 0")

    if float(raw["max_value"]) <= 0:
        raise ValueError("Parameter `max_value` must be a positive number")

    return GraphParams(
        margin=float(raw["margin"]),
        top_border=float(raw["top_border"]),
        bottom_border=float(raw["bottom_border"]),
        max_value=float(raw["max_value"]),
    )
