"""Plot y = tan(0.5x) / (x^3 + 7.5) in a resizable Qt window."""

__version__ = "1.0.0"
