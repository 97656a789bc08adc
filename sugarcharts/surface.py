from __future__ import annotations

from dataclasses import dataclass


DEFAULT_ASPECT_RATIO = 3.0 / 2.0


@dataclass(frozen=True)
class SurfaceSize:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("surface width and height must be > 0")


@dataclass(frozen=True)
class Padding:
    top: float = 16.0
    right: float = 16.0
    bottom: float = 16.0
    left: float = 16.0

    def __post_init__(self) -> None:
        if min(self.top, self.right, self.bottom, self.left) < 0:
            raise ValueError("padding values must be >= 0")

    @classmethod
    def all(cls, value: float) -> "Padding":
        return cls(top=value, right=value, bottom=value, left=value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


def as_surface(size: SurfaceSize | tuple[float, float]) -> SurfaceSize:
    if isinstance(size, SurfaceSize):
        return size
    width, height = size
    return SurfaceSize(width=float(width), height=float(height))


def fit_surface(canvas_width: int, *, aspect_ratio: float, padding: Padding) -> tuple[SurfaceSize, tuple[int, int]]:
    """Size the plot surface inside a canvas of the given width.

    Returns the plot surface and the full canvas size in pixels; the plot
    surface keeps `aspect_ratio` and the canvas grows to hold the padding.
    """
    if aspect_ratio <= 0:
        raise ValueError("aspect_ratio must be > 0")
    if canvas_width <= 0:
        raise ValueError("width must be > 0")
    plot_w = float(canvas_width) - padding.horizontal
    if plot_w <= 1:
        raise ValueError("width too small for padding")
    plot_h = max(1.0, float(int(round(plot_w / aspect_ratio))))
    canvas_h = max(1, int(round(plot_h + padding.vertical)))
    return SurfaceSize(width=plot_w, height=plot_h), (int(canvas_width), canvas_h)
