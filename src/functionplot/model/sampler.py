"""
Function Sampler
================
Evaluates y = tan(0.5x) / (x^3 + 7.5) on a regular grid of x values.

The grid is accumulated in ``decimal.Decimal`` so that steps like 0.1 land
exactly on the decimal grid points and the inclusive end point is neither
skipped nor duplicated.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable

import numpy as np

from functionplot import config

if TYPE_CHECKING:
    import numpy.typing as npt


logger = logging.getLogger(__name__)

FORMULA_TEXT = "y = tan(0.5x) / (x^3 + 7.5)"


@dataclass(frozen=True)
class Sample:
    """One (x, y) point in math space."""
    x: float
    y: float


def tan_ratio(x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
    """
    Evaluate y = tan(0.5x) / (x^3 + 7.5).

    Args:
        x: A scalar or an array of x values.

    Returns:
        y values with the same shape as ``x``.
    """
    return np.tan(0.5 * x) / (np.power(x, 3) + 7.5)


def _to_decimal(value: float) -> Decimal:
    # repr() gives the shortest string that round-trips, e.g. 0.1 -> "0.1"
    return Decimal(repr(float(value)))


def samples_from_pairs(pairs: Iterable[tuple[float, float]]) -> tuple[Sample, ...]:
    """
    Build an ordered sample set from (x, y) pairs.

    Samples are keyed by x: a repeated x overwrites the earlier y.
    The result is sorted by ascending x.
    """
    points: dict[float, float] = {}
    for x, y in pairs:
        points[float(x)] = float(y)
    return tuple(Sample(x, y) for x, y in sorted(points.items()))


class FunctionSampler:
    """Samples the plotted function on [start, end] with a fixed step."""

    def __init__(
        self,
        start: float = config.DOMAIN_START,
        end: float = config.DOMAIN_END,
        step: float = config.DOMAIN_STEP,
    ) -> None:
        if step <= 0:
            raise ValueError(f"Step must be positive, got {step}.")
        if start > end:
            raise ValueError(f"Start ({start}) must not be greater than end ({end}).")

        self._start = start
        self._end = end
        self._step = step

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def step(self) -> float:
        return self._step

    def grid(self) -> npt.NDArray[np.float64]:
        """
        Return the x grid: start, start + step, ... while x <= end.
        """
        x = _to_decimal(self._start)
        end = _to_decimal(self._end)
        step = _to_decimal(self._step)

        xs: list[float] = []
        while x <= end:
            xs.append(float(x))
            x += step

        return np.array(xs, dtype=np.float64)

    def get_points(self) -> dict[float, float]:
        """
        Evaluate the function on the grid.

        Returns:
            Mapping x -> y in ascending x order.
        """
        xs = self.grid()

        # x^3 + 7.5 == 0 only for x = -1.957..., outside the default domain
        with np.errstate(divide="ignore", invalid="ignore"):
            ys = tan_ratio(xs)

        non_finite = ~np.isfinite(ys)
        if np.any(non_finite):
            logger.warning(
                "Function is undefined at x = %s", ", ".join(f"{x:g}" for x in xs[non_finite])
            )

        return {float(x): float(y) for x, y in zip(xs, ys)}

    def generate(self) -> tuple[Sample, ...]:
        """Return the immutable, x-ordered sample set."""
        samples = samples_from_pairs(self.get_points().items())
        logger.debug(
            "Sampled %d points on [%g; %g] with step %g",
            len(samples), self._start, self._end, self._step,
        )
        return samples


def generate(
    start: float = config.DOMAIN_START,
    end: float = config.DOMAIN_END,
    step: float = config.DOMAIN_STEP,
) -> tuple[Sample, ...]:
    """Sample the function on [start, end] with the given step."""
    return FunctionSampler(start, end, step).generate()
