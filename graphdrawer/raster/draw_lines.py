from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from graphdrawer.raster.canvas import RGBA, blend_pixels


def stroke_polyline(
    dst: np.ndarray,
    points: Sequence[tuple[float, float]],
    color: RGBA,
    width: float = 1.0,
    dash: Sequence[float] = (),
    dash_phase: float = 0.0,
) -> None:
    """Stroke connected segments through `points` with a square brush.

    A dash pattern alternates on/off lengths measured along the whole polyline,
    starting `dash_phase` pixels into the pattern. Segments are clipped to the
    canvas before sampling; dash distance still counts the clipped-away length.
    Each covered pixel is painted once, so translucent strokes do not darken
    where samples overlap.
    """
    if len(points) < 2:
        return
    pts = np.asarray(points, dtype=np.float64)
    radius = _brush_radius(width)
    h, w = dst.shape[:2]
    bounds = (-radius - 1.0, -radius - 1.0, w + radius + 1.0, h + radius + 1.0)
    xs_parts: list[np.ndarray] = []
    ys_parts: list[np.ndarray] = []
    travelled = 0.0
    for i in range(len(pts) - 1):
        x0, y0 = pts[i]
        x1, y1 = pts[i + 1]
        length = math.hypot(x1 - x0, y1 - y0)
        if not math.isfinite(length):
            continue
        clipped = _clip_segment(x0, y0, x1, y1, bounds)
        if clipped is not None:
            t0, t1 = clipped
            steps = max(1, int(math.ceil(length * (t1 - t0) * 2)))
            ts = np.linspace(t0, t1, steps + 1)
            sx = x0 + ts * (x1 - x0)
            sy = y0 + ts * (y1 - y0)
            if dash:
                on = _dash_mask(travelled + ts * length, dash, dash_phase)
                sx = sx[on]
                sy = sy[on]
            xs_parts.append(sx)
            ys_parts.append(sy)
        travelled += length
    if not xs_parts:
        return
    _stamp(dst, np.concatenate(xs_parts), np.concatenate(ys_parts), color, radius)


def _clip_segment(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    bounds: tuple[float, float, float, float],
) -> tuple[float, float] | None:
    """Liang-Barsky: parameter range [t0, t1] of the segment inside `bounds`, or None."""
    xmin, ymin, xmax, ymax = bounds
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        r = q / p
        if p < 0:
            if r > t1:
                return None
            t0 = max(t0, r)
        else:
            if r < t0:
                return None
            t1 = min(t1, r)
    return t0, t1


def _brush_radius(width: float) -> int:
    return max(0, int(round(width)) // 2)


def _dash_mask(distance: np.ndarray, dash: Sequence[float], phase: float) -> np.ndarray:
    pattern = np.asarray(dash, dtype=np.float64)
    if pattern.size % 2 == 1:
        pattern = np.concatenate([pattern, pattern])
    period = float(pattern.sum())
    if period <= 0:
        return np.ones(distance.shape, dtype=bool)
    bounds = np.cumsum(pattern)
    pos = np.mod(distance + phase, period)
    # Even slots of the pattern are "on", odd slots are gaps.
    slot = np.searchsorted(bounds, pos, side="right")
    return slot % 2 == 0


def _stamp(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, radius: int) -> None:
    cx = np.floor(xs).astype(np.int64)
    cy = np.floor(ys).astype(np.int64)
    offsets = np.arange(-radius, radius + 1, dtype=np.int64)
    px = (cx[:, None, None] + offsets[None, None, :]).repeat(offsets.size, axis=1).ravel()
    py = (cy[:, None, None] + offsets[None, :, None]).repeat(offsets.size, axis=2).ravel()
    h, w = dst.shape[:2]
    inside = (px >= 0) & (px < w) & (py >= 0) & (py < h)
    flat = np.unique(py[inside] * w + px[inside])
    blend_pixels(dst, flat // w, flat % w, color)
