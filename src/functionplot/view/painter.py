"""QPainter drawing surface for renderer commands."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPen, QPolygonF

from functionplot import config
from functionplot.model.sampler import Sample
from functionplot.model.scaling import Viewport
from functionplot.view.renderer import (
    DEFAULT_STYLE,
    DrawCommand,
    DrawPolyline,
    DrawRect,
    DrawText,
    FillEllipse,
    PlotStyle,
    Stroke,
    render,
)


logger = logging.getLogger(__name__)


def label_font() -> QFont:
    return QFont(config.LABEL_FONT_FAMILY, config.LABEL_FONT_SIZE)


class QPainterSurface:
    """Replays draw commands on an active QPainter."""

    def __init__(self, painter: QPainter, font: QFont | None = None) -> None:
        self.painter = painter
        self.font = font if font is not None else label_font()

    def draw_all(self, commands: Iterable[DrawCommand]) -> None:
        for command in commands:
            self.draw(command)

    def draw(self, command: DrawCommand) -> None:
        """
        Draw a single command.

        Raises:
            TypeError: If the command type is not supported.
        """
        if isinstance(command, DrawRect):
            self._draw_rect(command)
        elif isinstance(command, DrawPolyline):
            self._draw_polyline(command)
        elif isinstance(command, FillEllipse):
            self._fill_ellipse(command)
        elif isinstance(command, DrawText):
            self._draw_text(command)
        else:
            raise TypeError(f"Unsupported draw command: {type(command).__name__}")

    # ---- primitives ----

    @staticmethod
    def _pen(stroke: Stroke) -> QPen:
        pen = QPen(QColor(*stroke.color))
        pen.setWidthF(stroke.width)
        return pen

    def _draw_rect(self, cmd: DrawRect) -> None:
        self.painter.setPen(self._pen(cmd.stroke))
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawRect(QRectF(cmd.x, cmd.y, cmd.width, cmd.height))

    def _draw_polyline(self, cmd: DrawPolyline) -> None:
        self.painter.setPen(self._pen(cmd.stroke))
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawPolyline(QPolygonF([QPointF(p.px, p.py) for p in cmd.points]))

    def _fill_ellipse(self, cmd: FillEllipse) -> None:
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QBrush(QColor(*cmd.fill.color)))
        self.painter.drawEllipse(QPointF(cmd.center.px, cmd.center.py), cmd.radius, cmd.radius)

    def _draw_text(self, cmd: DrawText) -> None:
        self.painter.setPen(QPen(QColor(*cmd.fill.color)))
        self.painter.setFont(self.font)
        # commands position the top-left corner, QPainter draws from the baseline
        ascent = QFontMetricsF(self.font).ascent()
        self.painter.drawText(QPointF(cmd.x, cmd.y + ascent), cmd.text)


def paint_plot(
    painter: QPainter,
    samples: Sequence[Sample],
    viewport: Viewport,
    style: PlotStyle = DEFAULT_STYLE,
) -> None:
    """Clear the viewport and draw one render pass with ``painter``."""
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.fillRect(QRectF(0.0, 0.0, viewport.width, viewport.height), QColor(*config.BACKGROUND_COLOR))

    commands = render(samples, viewport, style)
    QPainterSurface(painter).draw_all(commands)
