"""
Box-Plot Bands and Statistics

Defines the value bands an entry can fall into and the snapshot of
derived statistics produced by a box-plot initialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ValueBand(Enum):
    """
    Value bands ordered from lowest to highest.

    Bands are soft: with a non-zero fuzziness an entry near a boundary
    belongs to both neighbouring bands.
    """
    LOW_OUTLIER = "low_outlier"
    LOW_VALUE = "low_value"
    NORMAL = "normal"
    HIGH_VALUE = "high_value"
    HIGH_OUTLIER = "high_outlier"

    @property
    def numeric(self) -> int:
        """Numeric rank (higher = larger values)."""
        return {
            "low_outlier": 1,
            "low_value": 2,
            "normal": 3,
            "high_value": 4,
            "high_outlier": 5,
        }[self.value]

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class BoxPlotStats:
    """
    Derived statistics of an initialized box plot.

    ``fuzziness`` is the absolute tolerance, i.e. the configured percentage
    already rescaled by the value range.
    """
    name: str
    nb_values: int
    median: float
    lower_quartile: float       # Q1, Minitab index
    upper_quartile: float       # Q3, Minitab index (0.0 when out of range)
    inter_quartile_range: float
    min_bound: float            # max(0, Q1 - 1.5×IQR)
    max_bound: float            # Q3 + 1.5×IQR
    lower_outlier: float        # smallest value
    higher_outlier: float       # largest value
    fuzziness: float
    fuzziness_pct: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "nb_values": self.nb_values,
            "median": round(self.median, 6),
            "lower_quartile": round(self.lower_quartile, 6),
            "upper_quartile": round(self.upper_quartile, 6),
            "inter_quartile_range": round(self.inter_quartile_range, 6),
            "min_bound": round(self.min_bound, 6),
            "max_bound": round(self.max_bound, 6),
            "lower_outlier": round(self.lower_outlier, 6),
            "higher_outlier": round(self.higher_outlier, 6),
            "fuzziness": round(self.fuzziness, 6),
            "fuzziness_pct": self.fuzziness_pct,
        }

    def describe_thresholds(self) -> str:
        """Human-readable threshold description."""
        return (
            f"HIGH_OUTLIER>{self.max_bound:.4f}, "
            f"HIGH_VALUE>={self.upper_quartile:.4f}, "
            f"LOW_VALUE<={self.lower_quartile:.4f}, "
            f"LOW_OUTLIER<={self.min_bound:.4f} "
            f"(±{self.fuzziness:.4f})"
        )
