from __future__ import annotations

import numpy as np

from sugarcharts.raster.canvas import RGBA, draw_pixel


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: int = 1) -> None:
    if xs.size < 2:
        return
    offsets = _round_brush(width)
    radius = max(0, width // 2)
    bounds = (-radius - 1.0, -radius - 1.0, dst.shape[1] + radius + 1.0, dst.shape[0] + radius + 1.0)
    visited: set[tuple[int, int]] = set()
    for i in range(xs.size - 1):
        clipped = _clip_segment(float(xs[i]), float(ys[i]), float(xs[i + 1]), float(ys[i + 1]), bounds)
        if clipped is None:
            continue
        x0, y0, x1, y1 = (int(round(v)) for v in clipped)
        for x, y in _segment_pixels(x0, y0, x1, y1):
            for ox, oy in offsets:
                key = (x + ox, y + oy)
                if key in visited:
                    continue
                visited.add(key)
                draw_pixel(dst, key[0], key[1], color)


def _clip_segment(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    bounds: tuple[float, float, float, float],
) -> tuple[float, float, float, float] | None:
    """Liang-Barsky clip of a segment to `(xmin, ymin, xmax, ymax)`; None when fully outside."""
    xmin, ymin, xmax, ymax = bounds
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - xmin), (dx, xmax - x0), (-dy, y0 - ymin), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy)


def _segment_pixels(x0: int, y0: int, x1: int, y1: int) -> list[tuple[int, int]]:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    out: list[tuple[int, int]] = []
    while True:
        out.append((x0, y0))
        if x0 == x1 and y0 == y1:
            return out
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _round_brush(width: int) -> list[tuple[int, int]]:
    radius = max(0, width // 2)
    r2 = radius * radius + radius
    return [
        (ox, oy)
        for oy in range(-radius, radius + 1)
        for ox in range(-radius, radius + 1)
        if ox * ox + oy * oy <= r2
    ]
