"""
fuzzy_boxplot

Tukey box-plot statistics with fuzzy value-band classification.

Package layout:

    fuzzy_boxplot/
    ├── config/               # Settings loaded from the environment
    └── domain/
        ├── config/           # Comparator registry (==, <, <=, >, >=)
        ├── models/           # ValueBand, BoxPlotStats
        ├── services/         # Percentiles, quartiles and the BoxPlot engine
        └── exceptions.py     # Error taxonomy
"""

from fuzzy_boxplot.domain.exceptions import (
    BoxPlotError,
    BoxPlotNotInitializedError,
    UnsupportedOperatorError,
)
from fuzzy_boxplot.domain.models import BoxPlotStats, ValueBand
from fuzzy_boxplot.domain.services import BoxPlot, TUKEY

__version__ = "0.1.0"

__all__ = [
    "BoxPlot",
    "BoxPlotError",
    "BoxPlotNotInitializedError",
    "BoxPlotStats",
    "TUKEY",
    "UnsupportedOperatorError",
    "ValueBand",
]
