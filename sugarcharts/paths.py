from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal, Sequence, Union

import numpy as np

from sugarcharts.errors import EmptySeriesError
from sugarcharts.scales import ScaleInfo, compute_scale, point_x, point_y
from sugarcharts.series import Entry
from sugarcharts.surface import SurfaceSize, as_surface


LOGGER = logging.getLogger(__name__)

PathMode = Literal["linear", "smooth"]
PATH_MODES: tuple[str, ...] = ("linear", "smooth")

Point = tuple[float, float]


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo:
    c1: Point
    c2: Point
    x: float
    y: float


@dataclass(frozen=True)
class Close:
    pass


Segment = Union[LineTo, CubicTo, Close]


@dataclass(frozen=True)
class Path:
    start: Point
    segments: tuple[Segment, ...]
    mode: PathMode
    closed: bool = False

    @property
    def vertices(self) -> tuple[Point, ...]:
        return tuple((seg.x, seg.y) for seg in self.segments if not isinstance(seg, Close))

    @property
    def point_count(self) -> int:
        return len(self.vertices)

    @property
    def end(self) -> Point:
        verts = self.vertices
        return verts[-1] if verts else self.start

    def flatten(self, samples_per_curve: int = 16) -> tuple[np.ndarray, np.ndarray]:
        """Polyline approximation of the path, starting at `start`.

        Cubic segments are sampled at `samples_per_curve` evenly spaced
        parameters; a closed path repeats its start point at the end.
        """
        if samples_per_curve < 1:
            raise ValueError("samples_per_curve must be >= 1")
        xs: list[float] = [self.start[0]]
        ys: list[float] = [self.start[1]]
        t = np.linspace(0.0, 1.0, samples_per_curve + 1, dtype=np.float64)[1:]
        for seg in self.segments:
            if isinstance(seg, LineTo):
                xs.append(seg.x)
                ys.append(seg.y)
            elif isinstance(seg, CubicTo):
                p0x, p0y = xs[-1], ys[-1]
                bx = _bernstein(t, p0x, seg.c1[0], seg.c2[0], seg.x)
                by = _bernstein(t, p0y, seg.c1[1], seg.c2[1], seg.y)
                xs.extend(bx.tolist())
                ys.extend(by.tolist())
            else:
                xs.append(self.start[0])
                ys.append(self.start[1])
        return np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64)

    def to_svg_d(self, precision: int = 2) -> str:
        def fmt(value: float) -> str:
            out = f"{value:.{precision}f}"
            if "." in out:
                out = out.rstrip("0").rstrip(".")
            return "0" if out == "-0" else out

        parts = [f"M{fmt(self.start[0])},{fmt(self.start[1])}"]
        for seg in self.segments:
            if isinstance(seg, LineTo):
                parts.append(f"L{fmt(seg.x)},{fmt(seg.y)}")
            elif isinstance(seg, CubicTo):
                parts.append(
                    f"C{fmt(seg.c1[0])},{fmt(seg.c1[1])} {fmt(seg.c2[0])},{fmt(seg.c2[1])} {fmt(seg.x)},{fmt(seg.y)}"
                )
            else:
                parts.append("Z")
        return " ".join(parts)


def _bernstein(t: np.ndarray, p0: float, p1: float, p2: float, p3: float) -> np.ndarray:
    mt = 1.0 - t
    return (mt**3) * p0 + 3.0 * (mt**2) * t * p1 + 3.0 * mt * (t**2) * p2 + (t**3) * p3


def anchor_point(
    entries: Sequence[Entry],
    size: SurfaceSize | tuple[float, float],
    scale: ScaleInfo,
    *,
    anchor_uses_raw_value: bool = True,
) -> Point:
    surface = as_surface(size)
    first = float(entries[0].value)
    if anchor_uses_raw_value:
        # Unscaled on purpose: matches the established chart output.
        return (0.0, surface.height - first)
    return (0.0, point_y(scale, first, surface))


def build_path(
    entries: Sequence[Entry],
    size: SurfaceSize | tuple[float, float],
    mode: str = "linear",
    *,
    anchor_uses_raw_value: bool = True,
    scale: ScaleInfo | None = None,
) -> Path:
    if mode not in PATH_MODES:
        raise ValueError(f"unsupported path mode: {mode}")
    if not entries:
        raise EmptySeriesError()
    surface = as_surface(size)
    if scale is None:
        scale = compute_scale(entries, surface)
    start = anchor_point(entries, surface, scale, anchor_uses_raw_value=anchor_uses_raw_value)

    segments: list[Segment] = []
    prev_x, prev_y = 0.0, surface.height
    for i, entry in enumerate(entries):
        x = point_x(scale, i)
        y = point_y(scale, entry.value, surface)
        if mode == "smooth":
            mid_x = (x + prev_x) / 2.0
            segments.append(CubicTo(c1=(mid_x, prev_y), c2=(mid_x, y), x=x, y=y))
        else:
            segments.append(LineTo(x=x, y=y))
        LOGGER.debug("path vertex %d: x=%s y=%s height=%s", i, x, y, surface.height)
        prev_x, prev_y = x, y
    return Path(start=start, segments=tuple(segments), mode=mode)  # type: ignore[arg-type]


def build_fill_path(
    entries: Sequence[Entry],
    size: SurfaceSize | tuple[float, float],
    mode: str = "linear",
    *,
    anchor_uses_raw_value: bool = True,
    scale: ScaleInfo | None = None,
) -> Path:
    """Closed area under the stroke path, bounded below by the baseline.

    The stroke is rebuilt here rather than shared with the caller's path.
    """
    surface = as_surface(size)
    stroke = build_path(entries, surface, mode, anchor_uses_raw_value=anchor_uses_raw_value, scale=scale)
    last_x, _ = stroke.end
    closing: tuple[Segment, ...] = (
        LineTo(x=last_x, y=surface.height),
        LineTo(x=0.0, y=surface.height),
        Close(),
    )
    return Path(start=stroke.start, segments=stroke.segments + closing, mode=stroke.mode, closed=True)
