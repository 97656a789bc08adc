from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sugarcharts.scales import ScaleInfo


class ChartDataError(ValueError):
    """Raised when chart input cannot be turned into geometry."""


class EmptySeriesError(ChartDataError):
    def __init__(self, message: str = "empty series") -> None:
        super().__init__(message)


class DegenerateScaleError(ChartDataError):
    """Maximum value is zero, so no vertical scale factor exists.

    `fallback` is a usable scale that places every point on the baseline.
    """

    def __init__(self, fallback: "ScaleInfo", message: str = "maximum value is 0; vertical scale is undefined") -> None:
        super().__init__(message)
        self.fallback = fallback
