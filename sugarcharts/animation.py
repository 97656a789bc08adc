from __future__ import annotations

from dataclasses import dataclass

from sugarcharts.surface import SurfaceSize, as_surface


DEFAULT_REVEAL_DURATION_MS = 3000.0


@dataclass(frozen=True)
class CubicBezierEasing:
    """Easing curve through (0, 0), (x1, y1), (x2, y2), (1, 1)."""

    x1: float
    y1: float
    x2: float
    y2: float
    tolerance: float = 1e-6

    def __post_init__(self) -> None:
        if not (0.0 <= self.x1 <= 1.0 and 0.0 <= self.x2 <= 1.0):
            raise ValueError("easing control x values must be in [0, 1]")

    def __call__(self, fraction: float) -> float:
        if fraction <= 0.0:
            return 0.0
        if fraction >= 1.0:
            return 1.0
        lo, hi = 0.0, 1.0
        t = fraction
        # x(t) is monotonic for x1, x2 in [0, 1]
        for _ in range(64):
            t = (lo + hi) * 0.5
            x = _cubic(t, self.x1, self.x2)
            if abs(x - fraction) < self.tolerance:
                break
            if x < fraction:
                lo = t
            else:
                hi = t
        return _cubic(t, self.y1, self.y2)


def _cubic(t: float, p1: float, p2: float) -> float:
    mt = 1.0 - t
    return 3.0 * mt * mt * t * p1 + 3.0 * mt * t * t * p2 + t * t * t


FAST_OUT_SLOW_IN = CubicBezierEasing(0.4, 0.0, 0.2, 1.0)
LINEAR = CubicBezierEasing(0.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True)
class RevealAnimation:
    duration_ms: float = DEFAULT_REVEAL_DURATION_MS
    easing: CubicBezierEasing = FAST_OUT_SLOW_IN

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError("duration_ms must be > 0")

    def progress(self, elapsed_ms: float) -> float:
        if elapsed_ms <= 0:
            return 0.0
        linear = min(1.0, float(elapsed_ms) / self.duration_ms)
        return max(0.0, min(1.0, self.easing(linear)))

    def is_finished(self, elapsed_ms: float) -> bool:
        return elapsed_ms >= self.duration_ms


@dataclass(frozen=True)
class ClipBound:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left


def reveal_clip(reveal_fraction: float, size: SurfaceSize | tuple[float, float]) -> ClipBound:
    if not 0.0 <= reveal_fraction <= 1.0:
        raise ValueError("reveal_fraction must be in [0, 1]")
    surface = as_surface(size)
    return ClipBound(left=0.0, top=0.0, right=surface.width * reveal_fraction, bottom=surface.height)
