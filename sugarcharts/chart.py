from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
import logging
from pathlib import Path as FilePath
from typing import Any

import numpy as np
from PIL import Image

from sugarcharts.animation import DEFAULT_REVEAL_DURATION_MS, RevealAnimation, reveal_clip
from sugarcharts.errors import ChartDataError, DegenerateScaleError
from sugarcharts.layout import (
    DEFAULT_LEGEND_OFFSET,
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
from sugarcharts.raster import (
    blit,
    clip_columns,
    draw_circles,
    draw_hline,
    draw_polyline,
    draw_text,
    draw_vline,
    fill_polygon_gradient,
    new_canvas,
    text_size,
)
from sugarcharts.scales import ScaleInfo, compute_scale
from sugarcharts.series import Entry, normalize_entries
from sugarcharts.surface import DEFAULT_ASPECT_RATIO, Padding, SurfaceSize, fit_surface
from sugarcharts.theme import ChartColors


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartConfig:
    enable_grids: bool = True
    enable_animation: bool = False
    smooth_lines: bool = True
    label_placement: LabelPlacement = field(default_factory=LabelPlacement.on_marker)
    dedupe_value_labels: bool = True
    anchor_uses_raw_value: bool = True
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    # bottom padding leaves room for legends drawn below the baseline
    padding: Padding = field(default_factory=lambda: Padding(top=16.0, right=16.0, bottom=40.0, left=16.0))
    colors: ChartColors = field(default_factory=ChartColors)
    marker_radius: float = 8.0
    line_width: int = 2
    legend_offset: float = DEFAULT_LEGEND_OFFSET
    font_size_px: float = 10.0
    fill_alpha: float = 0.4
    animation_duration_ms: float = DEFAULT_REVEAL_DURATION_MS

    def __post_init__(self) -> None:
        if self.aspect_ratio <= 0:
            raise ValueError("aspect_ratio must be > 0")
        if self.marker_radius < 0:
            raise ValueError("marker_radius must be >= 0")
        if self.line_width <= 0:
            raise ValueError("line_width must be > 0")
        if self.font_size_px <= 0:
            raise ValueError("font_size_px must be > 0")
        if not 0.0 <= self.fill_alpha <= 1.0:
            raise ValueError("fill_alpha must be in [0, 1]")
        if self.animation_duration_ms <= 0:
            raise ValueError("animation_duration_ms must be > 0")

    @classmethod
    def from_flags(
        cls,
        *,
        enable_grids: bool = True,
        enable_animation: bool = False,
        smooth_lines: bool = True,
        draw_values_on_markers: bool = True,
        aspect_ratio: float = DEFAULT_ASPECT_RATIO,
        padding: Padding | None = None,
        colors: ChartColors | None = None,
        **extra: Any,
    ) -> "ChartConfig":
        options: dict[str, Any] = dict(extra)
        if padding is not None:
            options["padding"] = padding
        if colors is not None:
            options["colors"] = colors
        return cls(
            enable_grids=enable_grids,
            enable_animation=enable_animation,
            smooth_lines=smooth_lines,
            label_placement=LabelPlacement.from_flag(draw_values_on_markers),
            aspect_ratio=aspect_ratio,
            **options,
        )

    @property
    def path_mode(self) -> str:
        return "smooth" if self.smooth_lines else "linear"


@dataclass(frozen=True)
class ChartGeometry:
    surface: SurfaceSize
    scale: ScaleInfo
    degenerate: bool
    stroke: Path
    fill: Path
    grid: GridLines
    markers: tuple[tuple[float, float], ...]
    value_labels: tuple[ValueLabel, ...]
    legends: tuple[LegendLabel, ...]


class LineChart:
    """Single-series line chart rendered to an RGBA numpy frame."""

    def __init__(self, entries: Any, config: ChartConfig | None = None) -> None:
        self.entries: tuple[Entry, ...] = normalize_entries(entries)
        self.config = ChartConfig() if config is None else config
        self.animation = RevealAnimation(duration_ms=self.config.animation_duration_ms)

    def surface_for(self, width: int) -> SurfaceSize:
        surface, _ = fit_surface(width, aspect_ratio=self.config.aspect_ratio, padding=self.config.padding)
        return surface

    def canvas_size(self, width: int) -> tuple[int, int]:
        _, canvas = fit_surface(width, aspect_ratio=self.config.aspect_ratio, padding=self.config.padding)
        return canvas

    def geometry(self, surface: SurfaceSize) -> ChartGeometry:
        cfg = self.config
        degenerate = False
        try:
            scale = compute_scale(self.entries, surface)
        except DegenerateScaleError as exc:
            LOGGER.warning("%s; drawing points on the baseline", exc)
            scale = exc.fallback
            degenerate = True
        return ChartGeometry(
            surface=surface,
            scale=scale,
            degenerate=degenerate,
            stroke=build_path(
                self.entries, surface, cfg.path_mode, anchor_uses_raw_value=cfg.anchor_uses_raw_value, scale=scale
            ),
            fill=build_fill_path(
                self.entries, surface, cfg.path_mode, anchor_uses_raw_value=cfg.anchor_uses_raw_value, scale=scale
            ),
            grid=layout_grid_lines(self.entries, surface),
            markers=layout_markers(self.entries, surface, scale=scale),
            value_labels=layout_value_labels(
                self.entries,
                surface,
                placement=cfg.label_placement,
                dedupe=cfg.dedupe_value_labels,
                scale=scale,
            ),
            legends=layout_legends(self.entries, surface, offset=cfg.legend_offset),
        )

    def reveal_fraction_for(self, elapsed_ms: float | None) -> float:
        if not self.config.enable_animation or elapsed_ms is None:
            return 1.0
        return self.animation.progress(elapsed_ms)

    def render(
        self,
        width: int,
        *,
        reveal_fraction: float | None = None,
        elapsed_ms: float | None = None,
    ) -> np.ndarray:
        if reveal_fraction is not None and not 0.0 <= float(reveal_fraction) <= 1.0:
            raise ValueError("reveal_fraction must be in [0, 1]")
        cfg = self.config
        colors = cfg.colors
        surface, (canvas_w, canvas_h) = fit_surface(width, aspect_ratio=cfg.aspect_ratio, padding=cfg.padding)
        frame = new_canvas(canvas_w, canvas_h, color=colors.rgba("background"))
        try:
            geo = self.geometry(surface)
        except ChartDataError as exc:
            LOGGER.warning("skipping chart render: %s", exc)
            return frame

        ox = int(round(cfg.padding.left))
        oy = int(round(cfg.padding.top))
        plot_w = int(round(surface.width))
        plot_h = int(round(surface.height))

        axis_color = colors.rgba("axis")
        draw_vline(frame, ox, oy, oy + plot_h, axis_color)
        draw_hline(frame, ox, ox + plot_w, oy + plot_h, axis_color)

        if cfg.enable_grids:
            grid_color = colors.rgba("grid")
            for gx in geo.grid.verticals:
                draw_vline(frame, ox + int(round(gx)), oy, oy + plot_h, grid_color)
            for gy in geo.grid.horizontals:
                draw_hline(frame, ox, ox + plot_w, oy + int(round(gy)), grid_color)

        fraction = self.reveal_fraction_for(elapsed_ms) if reveal_fraction is None else float(reveal_fraction)
        data_layer = new_canvas(canvas_w, canvas_h, color=(0, 0, 0, 0))
        path_color = colors.rgba("path")
        fill_xs, fill_ys = geo.fill.flatten()
        fill_polygon_gradient(data_layer, fill_xs + ox, fill_ys + oy, path_color, top_alpha=cfg.fill_alpha)
        stroke_xs, stroke_ys = geo.stroke.flatten()
        draw_polyline(data_layer, stroke_xs + ox, stroke_ys + oy, path_color, width=cfg.line_width)
        if fraction < 1.0:
            clip = reveal_clip(fraction, surface)
            clip_columns(data_layer, ox + int(round(clip.right)))
        blit(frame, data_layer)

        if geo.markers:
            mx = np.asarray([x for x, _ in geo.markers], dtype=np.float64) + ox
            my = np.asarray([y for _, y in geo.markers], dtype=np.float64) + oy
            draw_circles(frame, mx, my, colors.rgba("marker"), radius=cfg.marker_radius)

        text_color = colors.rgba("legend_text")
        for label in geo.value_labels:
            _, th = text_size(label.text, font_size_px=cfg.font_size_px)
            draw_text(
                frame,
                ox + int(round(label.x)),
                oy + int(round(label.y)) - th,
                label.text,
                text_color,
                font_size_px=cfg.font_size_px,
                embolden_px=2,
            )
        for legend in geo.legends:
            _, th = text_size(legend.label, font_size_px=cfg.font_size_px)
            draw_text(
                frame,
                ox + int(round(legend.x)),
                oy + int(round(legend.y)) - th,
                legend.label,
                text_color,
                font_size_px=cfg.font_size_px,
                embolden_px=2,
            )
        return frame

    def animation_frames(self, width: int, *, fps: int = 30) -> Iterator[tuple[float, np.ndarray]]:
        """Yield `(elapsed_ms, frame)` pairs across one reveal animation."""
        if fps <= 0:
            raise ValueError("fps must be > 0")
        dt_ms = 1000.0 / float(fps)
        total = int(np.ceil(self.animation.duration_ms / dt_ms))
        for i in range(total + 1):
            elapsed = min(self.animation.duration_ms, i * dt_ms)
            yield elapsed, self.render(width, reveal_fraction=self.animation.progress(elapsed))

    def to_image(self, width: int, **render_kwargs: Any) -> Image.Image:
        return Image.fromarray(self.render(width, **render_kwargs))

    def save_png(self, path: str | FilePath, width: int, **render_kwargs: Any) -> FilePath:
        out = FilePath(path)
        self.to_image(width, **render_kwargs).save(out, format="PNG")
        return out
