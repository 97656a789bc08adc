from sugarcharts.animation import FAST_OUT_SLOW_IN, ClipBound, CubicBezierEasing, RevealAnimation, reveal_clip
from sugarcharts.api import line_chart
from sugarcharts.chart import ChartConfig, ChartGeometry, LineChart
from sugarcharts.errors import ChartDataError, DegenerateScaleError, EmptySeriesError
from sugarcharts.layout import (
    GridLines,
    LabelPlacement,
    LegendLabel,
    ValueLabel,
    layout_grid_lines,
    layout_legends,
    layout_markers,
    layout_value_labels,
)
from sugarcharts.paths import Path, build_fill_path, build_path
from sugarcharts.scales import ScaleInfo, compute_scale, map_points
from sugarcharts.series import Entry, normalize_entries
from sugarcharts.surface import Padding, SurfaceSize
from sugarcharts.theme import ChartColors, validate_chart_colors

__all__ = [
    "FAST_OUT_SLOW_IN",
    "ChartColors",
    "ChartConfig",
    "ChartDataError",
    "ChartGeometry",
    "ClipBound",
    "CubicBezierEasing",
    "DegenerateScaleError",
    "EmptySeriesError",
    "Entry",
    "GridLines",
    "LabelPlacement",
    "LegendLabel",
    "LineChart",
    "Padding",
    "Path",
    "RevealAnimation",
    "ScaleInfo",
    "SurfaceSize",
    "ValueLabel",
    "build_fill_path",
    "build_path",
    "compute_scale",
    "layout_grid_lines",
    "layout_legends",
    "layout_markers",
    "layout_value_labels",
    "line_chart",
    "map_points",
    "normalize_entries",
    "reveal_clip",
    "validate_chart_colors",
]
