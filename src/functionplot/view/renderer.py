"""
Plot Renderer
=============
Turns a sample set and a viewport into an ordered list of draw commands.

The renderer has no Qt dependency: commands are plain immutable values that a
drawing surface (see ``functionplot.view.painter``) replays. Rendering is a
pure function of (samples, viewport), so it can be re-run on every resize.

Draw order:
    1. border rectangle around the plot area
    2. polyline through all points (only with 2 or more points)
    3. filled circular marker at each point
    4. "x:<value>" label above each marker
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

from functionplot import config
from functionplot.model.sampler import Sample
from functionplot.model.scaling import ScaleTransform, ScreenPoint, Viewport


logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


# -------------------------------------------------------------------------------
# Styles
# -------------------------------------------------------------------------------

@dataclass(frozen=True)
class Stroke:
    color: RGB
    width: float = 1.0


@dataclass(frozen=True)
class Fill:
    color: RGB


@dataclass(frozen=True)
class PlotStyle:
    """Pens, brushes and marker geometry used by the renderer."""
    border: Stroke = Stroke(config.BORDER_COLOR, config.BORDER_WIDTH)
    line: Stroke = Stroke(config.LINE_COLOR, config.LINE_WIDTH)
    marker: Fill = Fill(config.MARKER_COLOR)
    label: Fill = Fill(config.LABEL_COLOR)
    marker_radius: float = config.MARKER_RADIUS
    label_offset: tuple[float, float] = config.LABEL_OFFSET


DEFAULT_STYLE = PlotStyle()


# -------------------------------------------------------------------------------
# Draw commands
# -------------------------------------------------------------------------------

@dataclass(frozen=True)
class DrawRect:
    x: float
    y: float
    width: float
    height: float
    stroke: Stroke


@dataclass(frozen=True)
class DrawPolyline:
    points: tuple[ScreenPoint, ...]
    stroke: Stroke


@dataclass(frozen=True)
class FillEllipse:
    center: ScreenPoint
    radius: float
    fill: Fill


@dataclass(frozen=True)
class DrawText:
    """Text whose top-left corner is at (x, y)."""
    x: float
    y: float
    text: str
    fill: Fill = Fill(config.LABEL_COLOR)


DrawCommand = Union[DrawRect, DrawPolyline, FillEllipse, DrawText]


# -------------------------------------------------------------------------------
# Rendering
# -------------------------------------------------------------------------------

def format_label(x: float) -> str:
    return f"x:{x:.1f}"


def screen_points(samples: Sequence[Sample], viewport: Viewport) -> list[ScreenPoint]:
    """Project the samples into the viewport. Empty input gives an empty list."""
    if not samples:
        return []
    return ScaleTransform.fit(samples, viewport).project_all(samples)


def render(
    samples: Sequence[Sample],
    viewport: Viewport,
    style: PlotStyle = DEFAULT_STYLE,
) -> list[DrawCommand]:
    """
    Build the draw commands for one render pass.

    Args:
        samples: x-ordered sample set. May be empty.
        viewport: Current size of the drawing area.
        style: Pens, brushes and marker geometry.

    Returns:
        Draw commands in painting order. Empty when there are no samples.
    """
    if not samples:
        logger.debug("Nothing to render: empty sample set")
        return []

    points = screen_points(samples, viewport)
    pad = viewport.padding

    commands: list[DrawCommand] = [
        DrawRect(pad, pad, viewport.plot_width, viewport.plot_height, style.border)
    ]

    if len(points) >= 2:
        commands.append(DrawPolyline(tuple(points), style.line))

    for p in points:
        commands.append(FillEllipse(p, style.marker_radius, style.marker))

    dx, dy = style.label_offset
    for sample, p in zip(samples, points):
        commands.append(DrawText(p.px + dx, p.py + dy, format_label(sample.x), style.label))

    logger.debug(
        "Rendered %d points into %gx%g viewport (%d commands)",
        len(points), viewport.width, viewport.height, len(commands),
    )
    return commands
