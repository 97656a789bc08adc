from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from sugarcharts.errors import DegenerateScaleError, EmptySeriesError
from sugarcharts.series import Entry
from sugarcharts.surface import SurfaceSize, as_surface


@dataclass(frozen=True)
class ScaleInfo:
    scale_y: float
    step_x: float
    max_value: float


def compute_scale(entries: Sequence[Entry], size: SurfaceSize | tuple[float, float]) -> ScaleInfo:
    """Vertical scale factor and horizontal step for `entries` on `size`.

    Raises `DegenerateScaleError` when the maximum value is zero; the error
    carries a baseline fallback with `scale_y == 0`.
    """
    if not entries:
        raise EmptySeriesError()
    surface = as_surface(size)
    max_value = max(float(entry.value) for entry in entries)
    step_x = surface.width / (len(entries) + 1)
    if max_value == 0:
        raise DegenerateScaleError(ScaleInfo(scale_y=0.0, step_x=step_x, max_value=0.0))
    return ScaleInfo(scale_y=surface.height / max_value, step_x=step_x, max_value=max_value)


def point_x(scale: ScaleInfo, index: int) -> float:
    return scale.step_x * (index + 1)


def point_y(scale: ScaleInfo, value: float, size: SurfaceSize | tuple[float, float]) -> float:
    return as_surface(size).height - float(value) * scale.scale_y


def map_points(
    entries: Sequence[Entry],
    size: SurfaceSize | tuple[float, float],
    *,
    scale: ScaleInfo | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    surface = as_surface(size)
    if scale is None:
        scale = compute_scale(entries, surface)
    values = np.asarray([entry.value for entry in entries], dtype=np.float64)
    xs = scale.step_x * np.arange(1, values.size + 1, dtype=np.float64)
    ys = surface.height - values * scale.scale_y
    return xs, ys
