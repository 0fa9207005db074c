"""
Unit tests for model/sampler.py

Pure numeric checks, no Qt.
"""

import math

import numpy as np
import pytest

from functionplot.model.sampler import (
    FORMULA_TEXT,
    FunctionSampler,
    Sample,
    generate,
    samples_from_pairs,
    tan_ratio,
)


def reference(x: float) -> float:
    return math.tan(0.5 * x) / (x ** 3 + 7.5)


# ── Grid ────────────────────────────────────────────────────────────────────

class TestGrid:

    def test_default_domain_has_twelve_points(self):
        assert len(generate()) == 12

    def test_default_domain_x_values(self):
        xs = [s.x for s in generate()]
        for k, x in enumerate(xs, start=1):
            assert abs(x - 0.1 * k) < 1e-9

    def test_end_point_included_once(self):
        xs = [s.x for s in generate(0.1, 1.2, 0.1)]
        assert xs[-1] == pytest.approx(1.2, abs=1e-9)
        assert sum(1 for x in xs if abs(x - 1.2) < 1e-9) == 1

    def test_x_values_are_exact_decimal_grid_points(self):
        xs = FunctionSampler(0.1, 1.2, 0.1).grid()
        assert xs[2] == 0.3
        assert xs[-1] == 1.2

    def test_end_not_on_grid(self):
        xs = [s.x for s in generate(0.0, 1.0, 0.3)]
        assert xs == pytest.approx([0.0, 0.3, 0.6, 0.9])

    def test_single_point_domain(self):
        samples = generate(0.5, 0.5, 0.1)
        assert len(samples) == 1
        assert samples[0].x == 0.5

    def test_x_strictly_increasing(self):
        xs = [s.x for s in generate()]
        assert all(a < b for a, b in zip(xs, xs[1:]))


# ── Values ──────────────────────────────────────────────────────────────────

class TestValues:

    def test_matches_reference(self):
        for s in generate():
            expected = reference(s.x)
            assert abs(s.y - expected) <= 1e-9 * abs(expected)

    def test_tan_ratio_scalar(self):
        assert float(tan_ratio(1.0)) == pytest.approx(reference(1.0), rel=1e-12)

    def test_tan_ratio_array(self):
        xs = np.array([0.1, 0.5, 1.2])
        np.testing.assert_allclose(tan_ratio(xs), [reference(x) for x in xs], rtol=1e-12)

    def test_values_are_plain_floats(self):
        s = generate()[0]
        assert type(s.x) is float
        assert type(s.y) is float

    def test_formula_text(self):
        assert FORMULA_TEXT == "y = tan(0.5x) / (x^3 + 7.5)"

    def test_undefined_point_is_logged(self, caplog, monkeypatch):
        monkeypatch.setattr(
            "functionplot.model.sampler.tan_ratio",
            lambda xs: np.where(xs > 0.15, np.inf, 1.0),
        )
        with caplog.at_level("WARNING", logger="functionplot"):
            points = FunctionSampler(0.1, 0.2, 0.1).get_points()
        assert len(points) == 2
        assert math.isinf(points[0.2])
        assert "undefined at x = 0.2" in caplog.text


# ── Validation and mapping semantics ────────────────────────────────────────

class TestValidation:

    @pytest.mark.parametrize("step", [0.0, -0.1])
    def test_non_positive_step(self, step):
        with pytest.raises(ValueError, match="Step must be positive"):
            FunctionSampler(0.1, 1.2, step)

    def test_start_after_end(self):
        with pytest.raises(ValueError, match="must not be greater"):
            FunctionSampler(2.0, 1.0, 0.1)

    def test_properties(self):
        sampler = FunctionSampler(0.2, 0.8, 0.2)
        assert (sampler.start, sampler.end, sampler.step) == (0.2, 0.8, 0.2)


class TestSamplesFromPairs:

    def test_duplicate_x_overwrites(self):
        samples = samples_from_pairs([(1.0, 5.0), (2.0, 6.0), (1.0, 7.0)])
        assert samples == (Sample(1.0, 7.0), Sample(2.0, 6.0))

    def test_sorted_by_x(self):
        samples = samples_from_pairs([(3.0, 0.0), (1.0, 0.0), (2.0, 0.0)])
        assert [s.x for s in samples] == [1.0, 2.0, 3.0]

    def test_samples_are_immutable(self):
        s = Sample(1.0, 2.0)
        with pytest.raises(AttributeError):
            s.x = 3.0  # type: ignore[misc]
