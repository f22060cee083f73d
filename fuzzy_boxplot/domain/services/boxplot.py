"""
Box-Plot Engine

Tukey box plot over a named set of ``id -> value`` samples, with fuzzy
classification of every sample into value bands.

    LOW OUTLIER   LOW VALUE        NORMAL         HIGH VALUE   HIGH OUTLIER
    |-------------|----------------|--------------|------------|------------
    0      Min Bound          Q1            Q3          Max Bound

Where:
- Q1 / Q3 use the Minitab index method, the median uses SAS Method 4
- IQR = Q3 - Q1
- Min Bound = max(0, Q1 - 1.5 * IQR)
- Max Bound = Q3 + 1.5 * IQR

Every boundary is widened by the fuzziness, an absolute tolerance derived
from a percentage of the value range (max - min). Bands therefore overlap:
a value close to a boundary is reported in both neighbouring bands.

Samples with fewer than four entries are padded with zero-valued entries
up to five, so the order statistics always have enough values to index.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

import numpy as np

from fuzzy_boxplot.domain.config.operators import get_comparator
from fuzzy_boxplot.domain.exceptions import BoxPlotNotInitializedError
from fuzzy_boxplot.domain.models.boxplot import BoxPlotStats, ValueBand
from fuzzy_boxplot.domain.services.percentiles import (
    TUKEY,
    lower_quartile,
    percentile,
    sort_values,
    tukey_bounds,
    upper_quartile,
)

MIN_SAMPLE_COUNT = 4
PADDED_SAMPLE_COUNT = 5
PADDING_KEY = "FakeValue"


class BoxPlot:
    """
    Named box plot with fuzzy band classification.

    Usage:
        box = BoxPlot("LOC")
        box.init({"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}, fuzziness=10)

        box.get_median()          # 3.0
        box.get_high_outliers()   # {id: value, ...}
        print(box)                # text report

    The engine keeps its own copy of the samples; dictionaries passed to
    ``init`` are never modified. It is not thread-safe.
    """

    def __init__(self, name: str, padding_key: str = PADDING_KEY) -> None:
        self.name = name
        self.padding_key = padding_key
        self.logger = logging.getLogger(__name__)

        self._entries: Dict[str, float] = {}
        self._fuzziness_pct: float = 0.0
        self._initialized = False

        # Derived statistics
        self._sorted_values: np.ndarray = np.empty(0)
        self._nb_values = 0
        self._median = 0.0
        self._lower_quartile = 0.0
        self._upper_quartile = 0.0
        self._inter_quartile_range = 0.0
        self._min_bound = 0.0
        self._max_bound = 0.0
        self._fuzziness = 0.0

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def get_entries(self) -> Dict[str, float]:
        """Copy of the samples, padding entries included once initialized."""
        return dict(self._entries)

    def add_entry(self, entry_id: str, value: float) -> None:
        """Add or replace a sample. Derived statistics go stale until ``init()``."""
        self._entries[entry_id] = float(value)
        self._initialized = False

    def is_initialized(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def init(self, entries: Optional[Mapping[str, float]] = None,
             fuzziness: Optional[float] = None) -> None:
        """
        Derive all statistics from the current samples.

        Args:
            entries: Replacement samples (copied). Keeps the current ones if None.
            fuzziness: Tolerance as a percentage of the value range.
                       Keeps the current percentage if None.
        """
        if entries is not None:
            self._entries = {k: float(v) for k, v in entries.items()}
        if fuzziness is not None:
            self._fuzziness_pct = float(fuzziness)

        if len(self._entries) < MIN_SAMPLE_COUNT:
            self._pad_entries()

        self._sorted_values = sort_values(self._entries.values())
        self._nb_values = len(self._sorted_values)

        self._median = percentile(self._sorted_values, 0.5)
        self._lower_quartile = lower_quartile(self._sorted_values)
        self._upper_quartile = upper_quartile(self._sorted_values)
        self._inter_quartile_range = self._upper_quartile - self._lower_quartile
        self._min_bound, self._max_bound = tukey_bounds(
            self._lower_quartile, self._upper_quartile, TUKEY
        )

        value_range = float(self._sorted_values[-1] - self._sorted_values[0])
        self._fuzziness = self._fuzziness_pct * value_range / 100
        self._initialized = True

        self.logger.info(f"Box plot '{self.name}' initialized with {self._nb_values} values")
        self.logger.info(f"Statistics: median={self._median:.4f}, Q1={self._lower_quartile:.4f}, "
                         f"Q3={self._upper_quartile:.4f}, IQR={self._inter_quartile_range:.4f}, "
                         f"Bounds=[{self._min_bound:.4f}, {self._max_bound:.4f}], "
                         f"fuzziness={self._fuzziness:.4f}")

    def _pad_entries(self) -> None:
        """Add zero-valued entries under unused sentinel keys until there are five."""
        suffix = 0
        while len(self._entries) < PADDED_SAMPLE_COUNT:
            key = self.padding_key if suffix == 0 else f"{self.padding_key}{suffix}"
            suffix += 1
            if key in self._entries:
                continue
            self._entries[key] = 0.0
            self.logger.debug(f"Padded box plot '{self.name}' with '{key}'")

    def _require_init(self) -> None:
        if not self._initialized:
            raise BoxPlotNotInitializedError(self.name)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def get_sorted_values(self) -> List[float]:
        self._require_init()
        return [float(v) for v in self._sorted_values]

    def get_nb_values(self) -> int:
        self._require_init()
        return self._nb_values

    def get_percentile(self, p: float) -> float:
        """Value of the p-th sample percentile (``p`` in [0, 1]), SAS Method 4."""
        self._require_init()
        return percentile(self._sorted_values, p)

    def get_median(self) -> float:
        self._require_init()
        return self._median

    def get_lower_quartile(self) -> float:
        self._require_init()
        return self._lower_quartile

    def get_upper_quartile(self) -> float:
        self._require_init()
        return self._upper_quartile

    def get_inter_quartile_range(self) -> float:
        self._require_init()
        return self._inter_quartile_range

    def get_min_bound(self) -> float:
        self._require_init()
        return self._min_bound

    def get_max_bound(self) -> float:
        self._require_init()
        return self._max_bound

    def get_fuzziness(self) -> float:
        """Absolute fuzziness (percentage rescaled by the value range)."""
        self._require_init()
        return self._fuzziness

    def get_lower_outlier(self) -> float:
        """Smallest value. Unrelated to the fence-based outlier queries."""
        self._require_init()
        return float(self._sorted_values[0])

    def get_higher_outlier(self) -> float:
        """Largest value. Unrelated to the fence-based outlier queries."""
        self._require_init()
        return float(self._sorted_values[-1])

    def statistics(self) -> BoxPlotStats:
        self._require_init()
        return BoxPlotStats(
            name=self.name,
            nb_values=self._nb_values,
            median=self._median,
            lower_quartile=self._lower_quartile,
            upper_quartile=self._upper_quartile,
            inter_quartile_range=self._inter_quartile_range,
            min_bound=self._min_bound,
            max_bound=self._max_bound,
            lower_outlier=self.get_lower_outlier(),
            higher_outlier=self.get_higher_outlier(),
            fuzziness=self._fuzziness,
            fuzziness_pct=self._fuzziness_pct,
        )

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def get_values(self, op: str, threshold: float,
                   initial: Optional[Mapping[str, float]] = None) -> Dict[str, float]:
        """
        Entries whose value satisfies ``value <op> threshold``.

        Filters *initial* instead of all entries when given, so chained
        calls intersect.
        """
        source = self._entries if initial is None else initial
        predicate = get_comparator(op)
        return {key: value for key, value in source.items() if predicate(value, threshold)}

    def get_high_outliers(self) -> Dict[str, float]:
        """Values above the max bound."""
        self._require_init()
        return self.get_values(">", self._max_bound - self._fuzziness)

    def get_high_values(self) -> Dict[str, float]:
        """Values between the upper quartile and the max bound."""
        self._require_init()
        upper = self.get_values(">=", self._upper_quartile - self._fuzziness)
        return self.get_values("<=", self._max_bound + self._fuzziness, upper)

    def get_low_outliers(self) -> Dict[str, float]:
        """Values at or below the min bound."""
        self._require_init()
        return self.get_values("<=", self._min_bound + self._fuzziness)

    def get_low_values(self) -> Dict[str, float]:
        """Values between the min bound and the lower quartile."""
        self._require_init()
        lower = self.get_values("<=", self._lower_quartile + self._fuzziness)
        return self.get_values(">", self._min_bound - self._fuzziness, lower)

    def get_normal_values(self) -> Dict[str, float]:
        """Values strictly between the quartiles."""
        self._require_init()
        above = self.get_values(">", self._lower_quartile - self._fuzziness)
        return self.get_values("<", self._upper_quartile + self._fuzziness, above)

    def get_equal(self, threshold: float) -> Dict[str, float]:
        self._require_init()
        above = self.get_values(">=", threshold - self._fuzziness)
        return self.get_values("<=", threshold + self._fuzziness, above)

    def get_greater(self, threshold: float) -> Dict[str, float]:
        self._require_init()
        return self.get_values(">", threshold - self._fuzziness)

    def get_greater_or_equal(self, threshold: float) -> Dict[str, float]:
        self._require_init()
        return self.get_values(">=", threshold - self._fuzziness)

    def get_less(self, threshold: float) -> Dict[str, float]:
        self._require_init()
        return self.get_values("<", threshold + self._fuzziness)

    def get_less_or_equal(self, threshold: float) -> Dict[str, float]:
        self._require_init()
        return self.get_values("<=", threshold + self._fuzziness)

    def classify(self) -> Dict[ValueBand, Dict[str, float]]:
        """Members of every band, lowest band first."""
        self._require_init()
        if not self._entries:
            self.logger.warning(f"Box plot '{self.name}' has no entries to classify")
        return {
            ValueBand.LOW_OUTLIER: self.get_low_outliers(),
            ValueBand.LOW_VALUE: self.get_low_values(),
            ValueBand.NORMAL: self.get_normal_values(),
            ValueBand.HIGH_VALUE: self.get_high_values(),
            ValueBand.HIGH_OUTLIER: self.get_high_outliers(),
        }

    def bands_of(self, entry_id: str) -> List[ValueBand]:
        """All bands containing *entry_id* (several near a boundary)."""
        self._require_init()
        if entry_id not in self._entries:
            raise KeyError(entry_id)
        return [band for band, members in self.classify().items() if entry_id in members]

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------

    def to_report(self) -> str:
        self._require_init()
        lines = [f"# Results of the Boxplot {self.name} ###### {self._nb_values} values : "]
        lines.extend(f"{key} {value}" for key, value in self._entries.items())
        lines.extend([
            "",
            " ###### ",
            f" Median        : {self._median} ",
            f" LowerQuartile : {self._lower_quartile} ",
            f" UpperQuartile : {self._upper_quartile} ",
            f" InterQuartile : {self._inter_quartile_range} ",
            f" MinBound      : {self._min_bound} ",
            f" MaxBound      : {self._max_bound} ",
            "",
            f" Fuzziness   : {self._fuzziness} ",
        ])
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_report() if self._initialized else repr(self)

    def __repr__(self) -> str:
        return (f"BoxPlot(name={self.name!r}, entries={len(self._entries)}, "
                f"initialized={self._initialized})")
