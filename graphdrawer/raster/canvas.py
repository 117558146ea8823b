from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]

TRANSPARENT: RGBA = (0, 0, 0, 0)


def new_canvas(width: int, height: int, color: RGBA = TRANSPARENT) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def blit(dst: np.ndarray, src: np.ndarray, x0: int = 0, y0: int = 0) -> None:
    """Composite `src` over `dst` with its top-left corner at (x0, y0)."""
    h, w, _ = src.shape
    sx0 = max(0, -x0)
    sy0 = max(0, -y0)
    x0 = max(0, x0)
    y0 = max(0, y0)
    y1 = min(dst.shape[0], y0 + h - sy0)
    x1 = min(dst.shape[1], x0 + w - sx0)
    if y0 >= y1 or x0 >= x1:
        return

    view = dst[y0:y1, x0:x1]
    patch = src[sy0 : sy0 + (y1 - y0), sx0 : sx0 + (x1 - x0)]
    view[:] = _over(
        patch[:, :, :3].astype(np.float32),
        patch[:, :, 3].astype(np.float32) / 255.0,
        view[:, :, :3].astype(np.float32),
        view[:, :, 3].astype(np.float32) / 255.0,
    )


def blend_pixels(dst: np.ndarray, ys: np.ndarray, xs: np.ndarray, color: RGBA) -> None:
    """Composite a solid color over the pixels at (ys, xs); coordinates must be in bounds."""
    if ys.size == 0 or color[3] <= 0:
        return
    current = dst[ys, xs]
    src_rgb = np.broadcast_to(np.asarray(color[:3], dtype=np.float32), current[:, :3].shape)
    src_a = np.full(ys.shape, color[3] / 255.0, dtype=np.float32)
    dst[ys, xs] = _over(src_rgb, src_a, current[:, :3].astype(np.float32), current[:, 3].astype(np.float32) / 255.0)


def _over(src_rgb: np.ndarray, src_a: np.ndarray, dst_rgb: np.ndarray, dst_a: np.ndarray) -> np.ndarray:
    out_a = src_a + dst_a * (1.0 - src_a)
    num = src_rgb * src_a[..., None] + dst_rgb * dst_a[..., None] * (1.0 - src_a[..., None])
    safe = np.where(out_a > 1e-6, out_a, 1.0)
    out = np.empty(src_rgb.shape[:-1] + (4,), dtype=np.uint8)
    out[..., :3] = np.clip(np.rint(num / safe[..., None]), 0, 255).astype(np.uint8)
    out[..., 3] = np.clip(np.rint(out_a * 255.0), 0, 255).astype(np.uint8)
    return out
