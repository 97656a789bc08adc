from __future__ import annotations

from pathlib import Path
import tempfile
import time
import unittest
from unittest import mock

import numpy as np
from PIL import Image

from chart_fixtures import QUARTER_ENTRIES, SAMPLE_ENTRIES
from sugarcharts import line_chart
from sugarcharts.chart import ChartConfig, LineChart
from sugarcharts.errors import ChartDataError, EmptySeriesError
from sugarcharts.layout import LabelPlacement
from sugarcharts.series import Entry
from sugarcharts.surface import Padding, SurfaceSize
from sugarcharts.theme import ChartColors


BACKGROUND = (0x66, 0x50, 0xA4, 255)
MARKER = (0x94, 0x91, 0x91, 255)


class ChartConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = ChartConfig()
        self.assertTrue(cfg.enable_grids)
        self.assertFalse(cfg.enable_animation)
        self.assertTrue(cfg.smooth_lines)
        self.assertEqual(cfg.path_mode, "smooth")
        self.assertEqual(cfg.label_placement, LabelPlacement.on_marker())
        self.assertTrue(cfg.anchor_uses_raw_value)
        self.assertAlmostEqual(cfg.aspect_ratio, 1.5)
        self.assertEqual(cfg.animation_duration_ms, 3000.0)

    def test_from_flags_maps_boolean_surface(self) -> None:
        cfg = ChartConfig.from_flags(
            smooth_lines=False,
            draw_values_on_markers=False,
            padding=Padding.all(8),
            colors=ChartColors(path="#FF0000"),
            marker_radius=4.0,
        )
        self.assertEqual(cfg.path_mode, "linear")
        self.assertEqual(cfg.label_placement, LabelPlacement.custom(-80.0))
        self.assertEqual(cfg.padding, Padding.all(8))
        self.assertEqual(cfg.colors.path, "#FF0000")
        self.assertEqual(cfg.marker_radius, 4.0)

    def test_validation(self) -> None:
        with self.assertRaisesRegex(ValueError, "aspect_ratio"):
            ChartConfig(aspect_ratio=0.0)
        with self.assertRaisesRegex(ValueError, "fill_alpha"):
            ChartConfig(fill_alpha=1.5)
        with self.assertRaisesRegex(ValueError, "line_width"):
            ChartConfig(line_width=0)


class LineChartGeometryTests(unittest.TestCase):
    def test_geometry_for_quarter_example(self) -> None:
        chart = LineChart(QUARTER_ENTRIES, ChartConfig(smooth_lines=False))
        geo = chart.geometry(SurfaceSize(300.0, 200.0))
        self.assertFalse(geo.degenerate)
        self.assertAlmostEqual(geo.scale.scale_y, 200.0 / 35.0)
        self.assertEqual(geo.scale.step_x, 75.0)
        self.assertEqual(geo.grid.verticals, (75.0, 150.0, 225.0))
        self.assertEqual(geo.stroke.mode, "linear")
        self.assertEqual(geo.fill.point_count, geo.stroke.point_count + 2)
        self.assertEqual(geo.markers, geo.stroke.vertices)
        self.assertEqual([legend.label for legend in geo.legends], ["jan", "feb", "mar"])

    def test_degenerate_series_falls_back_to_baseline(self) -> None:
        chart = LineChart([("a", 0), ("b", 0)])
        with self.assertLogs("sugarcharts.chart", level="WARNING") as logs:
            geo = chart.geometry(SurfaceSize(300.0, 200.0))
        self.assertTrue(geo.degenerate)
        self.assertEqual(geo.scale.scale_y, 0.0)
        self.assertEqual(geo.markers, ((100.0, 200.0), (200.0, 200.0)))
        self.assertIn("baseline", logs.output[0])

    def test_empty_series_rejected_at_construction(self) -> None:
        with self.assertRaises(EmptySeriesError):
            LineChart([])

    def test_surface_and_canvas_sizes(self) -> None:
        chart = LineChart(SAMPLE_ENTRIES)
        self.assertEqual(chart.surface_for(320), SurfaceSize(288.0, 192.0))
        self.assertEqual(chart.canvas_size(320), (320, 248))


class LineChartRenderTests(unittest.TestCase):
    def test_render_shape_background_and_marker(self) -> None:
        chart = LineChart(SAMPLE_ENTRIES)
        frame = chart.render(320)
        self.assertEqual(frame.shape, (248, 320, 4))
        self.assertEqual(frame.dtype, np.uint8)
        self.assertEqual(tuple(int(v) for v in frame[0, 0]), BACKGROUND)
        # "out" is the maximum: x = 28.8 * 9 -> 259, y = 0, offset by padding (16, 16)
        self.assertEqual(tuple(int(v) for v in frame[16, 275]), MARKER)

    def test_render_is_deterministic(self) -> None:
        chart = LineChart(SAMPLE_ENTRIES)
        self.assertTrue(np.array_equal(chart.render(320), chart.render(320)))

    def test_grids_toggle_changes_output(self) -> None:
        with_grids = LineChart(QUARTER_ENTRIES, ChartConfig(enable_grids=True)).render(300)
        without_grids = LineChart(QUARTER_ENTRIES, ChartConfig(enable_grids=False)).render(300)
        self.assertFalse(np.array_equal(with_grids, without_grids))

    def test_reveal_fraction_clips_only_right_of_bound(self) -> None:
        chart = LineChart(SAMPLE_ENTRIES, ChartConfig(enable_animation=True))
        full = chart.render(320, reveal_fraction=1.0)
        half = chart.render(320, reveal_fraction=0.5)
        bound = 16 + int(round(288 * 0.5))
        self.assertTrue(np.array_equal(full[:, :bound], half[:, :bound]))
        self.assertFalse(np.array_equal(full[:, bound:], half[:, bound:]))

    def test_elapsed_time_only_matters_when_animation_enabled(self) -> None:
        static = LineChart(SAMPLE_ENTRIES, ChartConfig(enable_animation=False))
        self.assertEqual(static.reveal_fraction_for(0.0), 1.0)
        animated = LineChart(SAMPLE_ENTRIES, ChartConfig(enable_animation=True))
        self.assertEqual(animated.reveal_fraction_for(0.0), 0.0)
        self.assertEqual(animated.reveal_fraction_for(None), 1.0)
        self.assertFalse(np.array_equal(animated.render(320, elapsed_ms=0.0), animated.render(320)))

    def test_animation_frames_cover_duration(self) -> None:
        chart = LineChart(QUARTER_ENTRIES, ChartConfig(enable_animation=True, animation_duration_ms=100.0))
        frames = list(chart.animation_frames(240, fps=20))
        self.assertEqual([elapsed for elapsed, _ in frames], [0.0, 50.0, 100.0])
        self.assertTrue(np.array_equal(frames[-1][1], chart.render(240)))
        with self.assertRaises(ValueError):
            next(chart.animation_frames(240, fps=0))

    def test_degenerate_series_still_renders(self) -> None:
        chart = LineChart([Entry("a", 0.0), Entry("b", 0.0)])
        with self.assertLogs("sugarcharts.chart", level="WARNING"):
            frame = chart.render(300)
        self.assertEqual(frame.shape[1], 300)

    def test_core_error_yields_placeholder_frame(self) -> None:
        chart = LineChart(QUARTER_ENTRIES)
        with mock.patch("sugarcharts.chart.build_path", side_effect=ChartDataError("boom")):
            with self.assertLogs("sugarcharts.chart", level="WARNING") as logs:
                frame = chart.render(300)
        self.assertTrue(np.all(frame == np.asarray(BACKGROUND, dtype=np.uint8)))
        self.assertIn("boom", logs.output[0])

    def test_large_values_render_in_bounded_time(self) -> None:
        chart = LineChart([("a", 1e7), ("b", 5e6)], ChartConfig(smooth_lines=False))
        started = time.perf_counter()
        frame = chart.render(320)
        self.assertLess(time.perf_counter() - started, 2.0)
        self.assertEqual(frame.shape, (248, 320, 4))

    def test_reveal_fraction_must_be_unit_interval(self) -> None:
        chart = LineChart(QUARTER_ENTRIES)
        for fraction in (1.5, -0.1):
            with self.subTest(fraction=fraction):
                with self.assertRaisesRegex(ValueError, r"\[0, 1\]"):
                    chart.render(300, reveal_fraction=fraction)

    def test_single_entry_renders(self) -> None:
        frame = LineChart([("only", 5.0)]).render(200)
        self.assertEqual(frame.shape[1], 200)

    def test_save_png_round_trips_size(self) -> None:
        chart = line_chart(QUARTER_ENTRIES, smooth_lines=False)
        with tempfile.TemporaryDirectory() as tmp:
            out = chart.save_png(Path(tmp) / "chart.png", 300)
            with Image.open(out) as img:
                self.assertEqual(img.size, chart.canvas_size(300))
                self.assertEqual(img.mode, "RGBA")


class LineChartApiTests(unittest.TestCase):
    def test_line_chart_uses_flag_options(self) -> None:
        chart = line_chart(QUARTER_ENTRIES, smooth_lines=False, draw_values_on_markers=False)
        self.assertEqual(chart.config.path_mode, "linear")
        self.assertEqual(chart.config.label_placement.x, -80.0)

    def test_line_chart_rejects_config_and_options(self) -> None:
        with self.assertRaisesRegex(ValueError, "either config"):
            line_chart(QUARTER_ENTRIES, config=ChartConfig(), smooth_lines=False)


if __name__ == "__main__":
    unittest.main()
