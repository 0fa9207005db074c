"""
Math-space to pixel-space mapping.

A ScaleTransform is derived from the sample range and the current viewport and
is recomputed from scratch on every render pass.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from functionplot import config
from functionplot.model.sampler import Sample


@dataclass(frozen=True)
class Viewport:
    """Size of the drawing area in pixels and the padding around the plot frame."""
    width: float
    height: float
    padding: float = config.PADDING

    @property
    def plot_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def plot_height(self) -> float:
        return self.height - 2 * self.padding


@dataclass(frozen=True)
class ScreenPoint:
    px: float
    py: float


def data_bounds(samples: Sequence[Sample]) -> tuple[float, float, float, float]:
    """
    Scan the samples for their range.

    Returns:
        (min_x, max_x, min_y, max_y)

    Raises:
        ValueError: If there are no samples.
    """
    if not samples:
        raise ValueError("Cannot compute bounds of an empty sample set.")

    pts = np.array([(s.x, s.y) for s in samples], dtype=np.float64).reshape(-1, 2)
    x_min, y_min = pts.min(axis=0)
    x_max, y_max = pts.max(axis=0)
    return float(x_min), float(x_max), float(y_min), float(y_max)


def guard_range(
    lo: float,
    hi: float,
    eps: float = config.RANGE_EPSILON,
    offset: float = config.RANGE_NUDGE,
) -> float:
    """Return ``hi``, moved up by ``offset`` when the range [lo, hi] is degenerate."""
    if abs(hi - lo) < eps:
        return hi + offset
    return hi


@dataclass(frozen=True)
class ScaleTransform:
    """Affine map from math space into the padded plot area, Y axis flipped."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    scale_x: float
    scale_y: float
    viewport: Viewport

    @classmethod
    def fit(cls, samples: Sequence[Sample], viewport: Viewport) -> ScaleTransform:
        """
        Fit the sample range into the viewport.

        Args:
            samples: Non-empty sample set.
            viewport: Current drawing area.

        Returns:
            A new ScaleTransform.
        """
        min_x, max_x, min_y, max_y = data_bounds(samples)

        # protect against division by zero when all values are equal
        max_x = guard_range(min_x, max_x)
        max_y = guard_range(min_y, max_y)

        scale_x = viewport.plot_width / (max_x - min_x)
        scale_y = viewport.plot_height / (max_y - min_y)

        return cls(
            min_x=min_x,
            max_x=max_x,
            min_y=min_y,
            max_y=max_y,
            scale_x=scale_x,
            scale_y=scale_y,
            viewport=viewport,
        )

    def project(self, sample: Sample) -> ScreenPoint:
        """Map one sample into pixel coordinates."""
        vp = self.viewport
        px = vp.padding + (sample.x - self.min_x) * self.scale_x
        # screen Y grows downwards, so measure from the bottom edge of the frame
        py = (vp.height - vp.padding) - (sample.y - self.min_y) * self.scale_y
        return ScreenPoint(px, py)

    def project_all(self, samples: Sequence[Sample]) -> list[ScreenPoint]:
        return [self.project(s) for s in samples]
