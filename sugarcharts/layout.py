from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from sugarcharts.errors import EmptySeriesError
from sugarcharts.scales import ScaleInfo, compute_scale, point_x, point_y
from sugarcharts.series import Entry
from sugarcharts.surface import SurfaceSize, as_surface


LEGACY_OFFSCREEN_LABEL_X = -80.0
DEFAULT_LEGEND_OFFSET = 30.0


@dataclass(frozen=True)
class GridLines:
    verticals: tuple[float, ...]
    horizontals: tuple[float, ...]


@dataclass(frozen=True)
class LegendLabel:
    label: str
    x: float
    y: float


@dataclass(frozen=True)
class ValueLabel:
    text: str
    x: float
    y: float


@dataclass(frozen=True)
class LabelPlacement:
    """Where value labels go: over each marker, nowhere, or a fixed x."""

    kind: Literal["on_marker", "hidden", "custom"] = "on_marker"
    x: float | None = None

    def __post_init__(self) -> None:
        if self.kind not in {"on_marker", "hidden", "custom"}:
            raise ValueError(f"unsupported label placement: {self.kind}")
        if self.kind == "custom" and self.x is None:
            raise ValueError("custom label placement requires x")

    @classmethod
    def on_marker(cls) -> "LabelPlacement":
        return cls(kind="on_marker")

    @classmethod
    def hidden(cls) -> "LabelPlacement":
        return cls(kind="hidden")

    @classmethod
    def custom(cls, x: float) -> "LabelPlacement":
        return cls(kind="custom", x=float(x))

    @classmethod
    def from_flag(cls, draw_values_on_markers: bool) -> "LabelPlacement":
        if draw_values_on_markers:
            return cls.on_marker()
        return cls.custom(LEGACY_OFFSCREEN_LABEL_X)


def layout_grid_lines(entries: Sequence[Entry], size: SurfaceSize | tuple[float, float]) -> GridLines:
    if not entries:
        raise EmptySeriesError()
    surface = as_surface(size)
    count = len(entries)
    step_x = surface.width / (count + 1)
    section_h = surface.height / (count + 1)
    return GridLines(
        verticals=tuple(step_x * (i + 1) for i in range(count)),
        horizontals=tuple(section_h * (i + 1) for i in range(count)),
    )


def layout_markers(
    entries: Sequence[Entry],
    size: SurfaceSize | tuple[float, float],
    *,
    scale: ScaleInfo | None = None,
) -> tuple[tuple[float, float], ...]:
    surface = as_surface(size)
    if scale is None:
        scale = compute_scale(entries, surface)
    return tuple((point_x(scale, i), point_y(scale, entry.value, surface)) for i, entry in enumerate(entries))


def layout_legends(
    entries: Sequence[Entry],
    size: SurfaceSize | tuple[float, float],
    *,
    offset: float = DEFAULT_LEGEND_OFFSET,
) -> tuple[LegendLabel, ...]:
    if not entries:
        raise EmptySeriesError()
    surface = as_surface(size)
    step_x = surface.width / (len(entries) + 1)
    y = surface.height + offset
    return tuple(LegendLabel(label=entry.label, x=step_x * (i + 1), y=y) for i, entry in enumerate(entries))


def distinct_entries(entries: Sequence[Entry]) -> tuple[Entry, ...]:
    seen: set[Entry] = set()
    out: list[Entry] = []
    for entry in entries:
        if entry in seen:
            continue
        seen.add(entry)
        out.append(entry)
    return tuple(out)


def format_value(value: float) -> str:
    return str(float(value))


def layout_value_labels(
    entries: Sequence[Entry],
    size: SurfaceSize | tuple[float, float],
    *,
    placement: LabelPlacement | None = None,
    dedupe: bool = True,
    scale: ScaleInfo | None = None,
) -> tuple[ValueLabel, ...]:
    """Value text positions.

    With `dedupe`, entries equal in both label and value collapse to their
    first occurrence and the remaining ones are laid out by their position
    in the collapsed list. Markers and legends never collapse.
    """
    placement = LabelPlacement.on_marker() if placement is None else placement
    surface = as_surface(size)
    if scale is None:
        scale = compute_scale(entries, surface)
    if placement.kind == "hidden":
        return ()
    items = distinct_entries(entries) if dedupe else tuple(entries)
    labels: list[ValueLabel] = []
    for k, entry in enumerate(items):
        x = point_x(scale, k) if placement.kind == "on_marker" else float(placement.x)  # type: ignore[arg-type]
        labels.append(ValueLabel(text=format_value(entry.value), x=x, y=point_y(scale, entry.value, surface)))
    return tuple(labels)
