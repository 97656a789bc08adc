from __future__ import annotations

from typing import Any

from sugarcharts.chart import ChartConfig, LineChart


def line_chart(entries: Any, *, config: ChartConfig | None = None, **options: Any) -> LineChart:
    """Build a `LineChart`; keyword options are `ChartConfig.from_flags` arguments."""
    if config is not None and options:
        raise ValueError("pass either config or keyword options, not both")
    if config is None:
        config = ChartConfig.from_flags(**options)
    return LineChart(entries, config)
