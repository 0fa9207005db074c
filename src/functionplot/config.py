"""
Configuration & Constants
=========================
This module serves as the central registry for the plotting constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (padding, marker radius, sampling
   domain) from being scattered throughout the model and view code.
2. Consistency: The sampler, the renderer and the window all read the same
   values, so the plot looks the same on screen and in exported images.

Exports:
    DOMAIN_START, DOMAIN_END, DOMAIN_STEP: The sampled interval of x.
    PADDING (float): Distance in pixels between the window edge and the plot frame.
    RANGE_EPSILON, RANGE_NUDGE: Degenerate axis range protection.
"""
from __future__ import annotations

# Sampling domain: [0.1; 1.2] with step 0.1
DOMAIN_START: float = 0.1
DOMAIN_END: float = 1.2
DOMAIN_STEP: float = 0.1

# Layout in pixels
PADDING: float = 50.0
MARKER_RADIUS: float = 3.0
LABEL_OFFSET: tuple[float, float] = (-10.0, -20.0)

# Axis range narrower than RANGE_EPSILON gets its maximum moved by RANGE_NUDGE
RANGE_EPSILON: float = 0.0001
RANGE_NUDGE: float = 1.0

# Pens and brushes (RGB)
BORDER_COLOR: tuple[int, int, int] = (128, 128, 128)
BORDER_WIDTH: float = 1.0
LINE_COLOR: tuple[int, int, int] = (0, 0, 255)
LINE_WIDTH: float = 2.5
MARKER_COLOR: tuple[int, int, int] = (255, 0, 0)
LABEL_COLOR: tuple[int, int, int] = (0, 0, 0)
BACKGROUND_COLOR: tuple[int, int, int] = (255, 255, 255)

LABEL_FONT_FAMILY: str = "Arial"
LABEL_FONT_SIZE: int = 8

# Window
WINDOW_SIZE: tuple[int, int] = (800, 600)
MINIMUM_WINDOW_SIZE: tuple[int, int] = (400, 300)

# Environment variable that overrides the log level (DEBUG, INFO, 1, ...)
LOG_LEVEL_ENV: str = "FUNCTIONPLOT_LOG"
