from __future__ import annotations

import numpy as np

from sugarcharts.raster.canvas import RGBA, draw_hline


def draw_circles(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, radius: float = 8.0) -> None:
    for x, y in zip(xs.tolist(), ys.tolist(), strict=False):
        _draw_filled_circle(dst, float(x), float(y), color=color, radius=radius)


def _draw_filled_circle(dst: np.ndarray, cx: float, cy: float, color: RGBA, radius: float) -> None:
    r = max(0.0, radius)
    top = int(np.floor(cy - r))
    bottom = int(np.ceil(cy + r))
    for yy in range(top, bottom + 1):
        dy = yy - cy
        if abs(dy) > r:
            continue
        half = float(np.sqrt(r * r - dy * dy))
        draw_hline(dst, int(round(cx - half)), int(round(cx + half)), yy, color)
