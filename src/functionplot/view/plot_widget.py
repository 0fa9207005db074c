from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from PySide6.QtGui import QImage, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from functionplot import config
from functionplot.model.sampler import Sample
from functionplot.model.scaling import Viewport
from functionplot.view.painter import paint_plot
from functionplot.view.renderer import DEFAULT_STYLE, PlotStyle


logger = logging.getLogger(__name__)


class PlotWidget(QWidget):
    """
    Widget that draws the sample set scaled to its current size.

    Qt schedules a repaint on every resize, and each paintEvent rebuilds the
    scale from scratch, so the plot always fills the widget.
    """
    def __init__(
        self,
        samples: Iterable[Sample] = (),
        padding: float = config.PADDING,
        style: PlotStyle = DEFAULT_STYLE,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent=parent)
        self._samples: tuple[Sample, ...] = tuple(samples)
        self._padding = padding
        self._style = style

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def samples(self) -> tuple[Sample, ...]:
        return self._samples

    def set_samples(self, samples: Iterable[Sample]) -> None:
        """Replace the cached sample set and schedule a repaint."""
        self._samples = tuple(samples)
        self.update()

    def current_viewport(self) -> Viewport:
        """Viewport matching the widget size right now."""
        return Viewport(float(self.width()), float(self.height()), self._padding)

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent, /) -> None:
        viewport = self.current_viewport()
        logger.debug("Repaint at %gx%g", viewport.width, viewport.height)

        painter = QPainter(self)
        try:
            paint_plot(painter, self._samples, viewport, self._style)
        finally:
            painter.end()


def render_to_image(
    samples: Iterable[Sample],
    width: int,
    height: int,
    path: str | Path | None = None,
    padding: float = config.PADDING,
    style: PlotStyle = DEFAULT_STYLE,
) -> QImage:
    """
    Render the plot off-screen.

    Args:
        samples: Sample set to draw.
        width: Image width in pixels.
        height: Image height in pixels.
        path: Optional file to save the image to. The format follows the extension.
        padding: Plot frame padding in pixels.
        style: Pens and brushes.

    Returns:
        The rendered image.

    Raises:
        OSError: If the image could not be saved.
    """
    image = QImage(width, height, QImage.Format.Format_ARGB32)

    painter = QPainter(image)
    try:
        paint_plot(painter, tuple(samples), Viewport(float(width), float(height), padding), style)
    finally:
        painter.end()

    if path is not None:
        if not image.save(str(path)):
            raise OSError(f"Could not save image to {path}")
        logger.info("Plot exported to %s", path)

    return image
