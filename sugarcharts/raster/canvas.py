from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def composite_over(patch: np.ndarray, src_rgb: np.ndarray, src_alpha: np.ndarray) -> None:
    """Source-over `src_rgb` (float, 0-255) with per-pixel `src_alpha` (0-1) onto `patch` in place."""
    dst_rgb = patch[..., :3].astype(np.float32)
    dst_alpha = patch[..., 3].astype(np.float32) / 255.0
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    num = src_rgb * src_alpha[..., None] + dst_rgb * (dst_alpha * (1.0 - src_alpha))[..., None]
    safe = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    patch[..., :3] = np.clip(np.rint(num / safe[..., None]), 0, 255).astype(np.uint8)
    patch[..., 3] = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)


def blit(dst: np.ndarray, src: np.ndarray, x0: int = 0, y0: int = 0) -> None:
    """Alpha-composite `src` onto `dst` with its top-left at (x0, y0)."""
    h, w, _ = src.shape
    dx0 = max(0, x0)
    dy0 = max(0, y0)
    dx1 = min(dst.shape[1], x0 + w)
    dy1 = min(dst.shape[0], y0 + h)
    if dx0 >= dx1 or dy0 >= dy1:
        return
    patch = src[dy0 - y0 : dy1 - y0, dx0 - x0 : dx1 - x0]
    alpha = patch[:, :, 3].astype(np.float32) / 255.0
    composite_over(dst[dy0:dy1, dx0:dx1], patch[:, :, :3].astype(np.float32), alpha)


def clip_columns(layer: np.ndarray, right: int) -> None:
    """Make every column at or beyond `right` fully transparent."""
    right = max(0, min(layer.shape[1], int(right)))
    layer[:, right:, 3] = 0


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    _blend(dst[y : y + 1, x], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA, width: int = 1) -> None:
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    for yy in range(y - (width - 1) // 2, y + width // 2 + 1):
        if 0 <= yy < dst.shape[0]:
            _blend(dst[yy, xa : xb + 1], color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA, width: int = 1) -> None:
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    for xx in range(x - (width - 1) // 2, x + width // 2 + 1):
        if 0 <= xx < dst.shape[1]:
            _blend(dst[ya : yb + 1, xx], color)


def _blend(segment: np.ndarray, color: RGBA) -> None:
    src_rgb = np.asarray(color[0:3], dtype=np.float32)
    src_alpha = np.full(segment.shape[:-1], color[3] / 255.0, dtype=np.float32)
    composite_over(segment, src_rgb, src_alpha)
