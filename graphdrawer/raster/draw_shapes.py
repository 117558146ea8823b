from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from graphdrawer.raster.canvas import RGBA, blend_pixels


def fill_ellipse(dst: np.ndarray, x: float, y: float, width: float, height: float, color: RGBA) -> None:
    """Fill the ellipse inscribed in the rectangle (x, y, width, height)."""
    if width <= 0 or height <= 0:
        return
    h, w = dst.shape[:2]
    x0 = max(0, int(math.floor(x)))
    y0 = max(0, int(math.floor(y)))
    x1 = min(w, int(math.ceil(x + width)))
    y1 = min(h, int(math.ceil(y + height)))
    if x1 <= x0 or y1 <= y0:
        return
    rx = width / 2.0
    ry = height / 2.0
    cx = x + rx
    cy = y + ry
    yy, xx = np.mgrid[y0:y1, x0:x1]
    inside = ((xx + 0.5 - cx) / rx) ** 2 + ((yy + 0.5 - cy) / ry) ** 2 <= 1.0
    blend_pixels(dst, yy[inside], xx[inside], color)


def draw_linear_gradient(
    dst: np.ndarray,
    start: tuple[float, float],
    end: tuple[float, float],
    stops: Sequence[tuple[float, RGBA]],
    *,
    draws_before_start: bool = True,
    draws_after_end: bool = False,
) -> None:
    """Paint a linear gradient behind the existing canvas content.

    Pixels are projected onto the start->end axis; `stops` are (offset, color)
    pairs over [0, 1]. Outside the axis range the end colors are extended only
    when the matching `draws_*` flag is set.
    """
    if not stops:
        return
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length_sq = dx * dx + dy * dy
    if length_sq <= 0:
        return
    h, w = dst.shape[:2]
    yy, xx = np.mgrid[0:h, 0:w].astype(np.float64)
    t = ((xx + 0.5 - start[0]) * dx + (yy + 0.5 - start[1]) * dy) / length_sq
    mask = np.ones(t.shape, dtype=bool)
    if not draws_before_start:
        mask &= t >= 0.0
    if not draws_after_end:
        mask &= t <= 1.0
    if not np.any(mask):
        return

    ordered = sorted(stops, key=lambda s: s[0])
    offsets = np.asarray([s[0] for s in ordered], dtype=np.float64)
    colors = np.asarray([s[1] for s in ordered], dtype=np.float64)
    tv = t[mask]
    grad = np.stack([np.interp(tv, offsets, colors[:, c]) for c in range(4)], axis=-1)

    region = dst[mask].astype(np.float64)
    top_a = region[:, 3] / 255.0
    grad_a = grad[:, 3] / 255.0
    out_a = top_a + grad_a * (1.0 - top_a)
    num = region[:, :3] * top_a[:, None] + grad[:, :3] * grad_a[:, None] * (1.0 - top_a[:, None])
    safe = np.where(out_a > 1e-6, out_a, 1.0)
    out = np.empty(region.shape, dtype=np.uint8)
    out[:, :3] = np.clip(np.rint(num / safe[:, None]), 0, 255).astype(np.uint8)
    out[:, 3] = np.clip(np.rint(out_a * 255.0), 0, 255).astype(np.uint8)
    dst[mask] = out
