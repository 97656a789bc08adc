from __future__ import annotations

from dataclasses import asdict, dataclass
import re
from typing import Any, Mapping

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class ChartColors:
    """Six-colour palette for a line chart."""

    background: str = "#6650A4"
    path: str = "#0AF814"
    axis: str = "#FFFFFF"
    grid: str = "#949191"
    marker: str = "#949191"
    legend_text: str = "#FFFFFF"

    def __post_init__(self) -> None:
        for key, value in asdict(self).items():
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                raise ValueError(f"Color `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    def rgba(self, key: str) -> RGBA:
        return hex_to_rgba(getattr(self, key))


DEFAULT_COLORS = ChartColors()


def validate_chart_colors(overrides: Mapping[str, Any] | None = None) -> ChartColors:
    """Merge colour overrides onto the default palette."""

    raw: dict[str, Any] = asdict(DEFAULT_COLORS)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown chart color: {key}")
            raw[key] = value
    return ChartColors(**raw)


def hex_to_rgba(value: str) -> RGBA:
    if not _HEX_COLOR.match(value):
        raise ValueError(f"not a hex color: {value!r}")
    r = int(value[1:3], 16)
    g = int(value[3:5], 16)
    b = int(value[5:7], 16)
    a = int(value[7:9], 16) if len(value) == 9 else 255
    return (r, g, b, a)
