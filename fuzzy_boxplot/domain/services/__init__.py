"""
Domain Services

Order statistics and the box-plot engine built on them.
"""

from .boxplot import BoxPlot, MIN_SAMPLE_COUNT, PADDED_SAMPLE_COUNT, PADDING_KEY
from .percentiles import (
    TUKEY,
    lower_quartile,
    percentile,
    sort_values,
    tukey_bounds,
    upper_quartile,
)

__all__ = [
    "BoxPlot",
    "MIN_SAMPLE_COUNT",
    "PADDED_SAMPLE_COUNT",
    "PADDING_KEY",
    "TUKEY",
    "lower_quartile",
    "percentile",
    "sort_values",
    "tukey_bounds",
    "upper_quartile",
]
