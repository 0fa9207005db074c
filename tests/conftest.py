"""
Root conftest — headless Qt setup and shared sample fixtures.
"""

import os

import pytest

# ── Qt must run without a display in CI ─────────────────────────────────────
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from functionplot.model.sampler import Sample, generate  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication shared by every Qt test."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def default_samples() -> tuple[Sample, ...]:
    """The 12 samples of the default domain [0.1; 1.2], step 0.1."""
    return generate()


@pytest.fixture
def flat_samples() -> tuple[Sample, ...]:
    """Samples with equal y values (degenerate Y range)."""
    return tuple(Sample(x, 2.0) for x in (1.0, 2.0, 3.0, 4.0))
