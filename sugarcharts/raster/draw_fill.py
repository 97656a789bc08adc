from __future__ import annotations

import numpy as np
from PIL import Image, ImageDraw

from sugarcharts.raster.canvas import RGBA, composite_over


def fill_polygon_gradient(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    color: RGBA,
    *,
    top_alpha: float = 0.4,
    bottom_alpha: float = 0.0,
) -> None:
    """Fill a polygon with `color`, fading alpha from the top to the bottom of its bounds."""
    if xs.size < 3:
        return
    height, width = dst.shape[0], dst.shape[1]
    mask_img = Image.new("L", (width, height), 0)
    ImageDraw.Draw(mask_img).polygon(list(zip(xs.tolist(), ys.tolist(), strict=False)), fill=255)
    mask = np.asarray(mask_img, dtype=np.float32) / 255.0
    if not np.any(mask > 0):
        return

    y_top = max(0, int(np.floor(float(np.min(ys)))))
    y_bottom = min(height - 1, int(np.ceil(float(np.max(ys)))))
    rows = np.arange(height, dtype=np.float32)
    span = max(1.0, float(y_bottom - y_top))
    frac = np.clip((rows - y_top) / span, 0.0, 1.0)
    row_alpha = (top_alpha + (bottom_alpha - top_alpha) * frac) * (color[3] / 255.0)
    src_alpha = mask * row_alpha[:, None]
    composite_over(dst, np.asarray(color[:3], dtype=np.float32), src_alpha)
