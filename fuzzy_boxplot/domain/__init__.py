"""
Domain Package

Comparator registry, value types and the box-plot engine.
"""

from .exceptions import BoxPlotError, BoxPlotNotInitializedError, UnsupportedOperatorError

__all__ = [
    "BoxPlotError",
    "BoxPlotNotInitializedError",
    "UnsupportedOperatorError",
]
