"""Visualization module."""

from .chart import ChartDisplay, HAND_MATRIX, display_chart

__all__ = [
    "ChartDisplay",
    "HAND_MATRIX",
    "display_chart",
]
