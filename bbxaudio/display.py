"""Geometry for drawing sample data on a chart."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DisplayContext:
    """A window's size, centred coordinates and chart padding."""

    width: float = 1280.0
    height: float = 720.0
    buffer_size: int = 256
    domain: tuple[float, float] = field(init=False)
    range: tuple[float, float] = field(init=False)
    padding: tuple[float, float] = field(init=False)

    def __post_init__(self) -> None:
        half_width = self.width / 2.0
        half_height = self.height / 2.0
        object.__setattr__(self, "domain", (-half_width, half_width))
        object.__setattr__(self, "range", (-half_height, half_height))
        object.__setattr__(self, "padding", (self.width * 0.05, self.height * 0.05))

    @property
    def x_axis(self) -> tuple[float, float]:
        """The horizontal extent of the chart, inside the padding."""
        return (self.domain[0] + self.padding[0], self.domain[1] - self.padding[0])

    @property
    def y_axis(self) -> tuple[float, float]:
        """The vertical extent of the chart, inside the padding."""
        return (self.range[0] + self.padding[1], self.range[1] - self.padding[1])


def scale_number(
    n: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Map ``n`` linearly from [in_min, in_max] onto [out_min, out_max]."""
    proportion = (n - in_min) / (in_max - in_min)
    return out_min + proportion * (out_max - out_min)


def map_sample_to_point(
    sample_value: float, sample_index: int, display_context: DisplayContext
) -> tuple[float, float]:
    """Place a sample on the chart: index along x, value in [-1, 1] along y."""
    x_min, x_max = display_context.x_axis
    y_min, y_max = display_context.y_axis
    x = scale_number(
        float(sample_index), 0.0, float(display_context.buffer_size), x_min, x_max
    )
    y = scale_number(sample_value, -1.0, 1.0, y_min, y_max)
    return (x, y)