"""
Domain Models Package

Pure value types with no service dependencies.
"""

from .boxplot import BoxPlotStats, ValueBand

__all__ = [
    "BoxPlotStats",
    "ValueBand",
]
