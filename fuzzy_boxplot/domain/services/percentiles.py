"""
Percentiles and Quartiles

Order statistics used by the box-plot engine. All functions expect values
already sorted in ascending order.

Percentile: SAS Method 4
    (n + 1) * p = j + g
    y = (1 - g) * x(j) + g * x(j + 1)      (1-indexed, x(n + 1) taken as x(n))

Quartiles: Minitab index method (0-indexed, integer division)
    Q1 = x[(n + 1) // 4]
    Q3 = x[(3n + 3) // 4], or 0.0 when that index falls past the end
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

import numpy as np

TUKEY = 1.5

logger = logging.getLogger(__name__)


def sort_values(values) -> np.ndarray:
    """Return the values as an ascending float array."""
    return np.sort(np.asarray(list(values), dtype=float))


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """
    p-th sample percentile (``p`` in [0, 1]) using SAS Method 4.

    The edge branches collapse both interpolation endpoints onto one index:
    ``x[j - 1]`` when ``j`` reaches ``n`` and ``x[0]`` when ``j`` is 0.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Percentile fraction must be within [0, 1], got {p}")

    n = len(sorted_values)
    if n == 0:
        raise ValueError("Cannot compute a percentile of an empty sample")

    a = (n + 1) * p
    j = int(a)
    g = a - j

    if j >= n:
        # p == 1 gives j == n + 1; clamp onto the same branch
        j = n
        return float((1 - g) * sorted_values[j - 1] + g * sorted_values[j - 1])
    if j == 0:
        return float((1 - g) * sorted_values[j] + g * sorted_values[j])
    return float((1 - g) * sorted_values[j - 1] + g * sorted_values[j])


def lower_quartile(sorted_values: Sequence[float]) -> float:
    return float(sorted_values[(len(sorted_values) + 1) // 4])


def upper_quartile(sorted_values: Sequence[float]) -> float:
    """
    Third quartile by index. Small samples (n <= 3) push the index past the
    last value; 0.0 is returned in that case.
    """
    n = len(sorted_values)
    index = (3 * n + 3) // 4
    if index < n:
        return float(sorted_values[index])
    logger.debug(f"Upper quartile index {index} out of range for {n} values, using 0.0")
    return 0.0


def tukey_bounds(q1: float, q3: float, k: float = TUKEY) -> Tuple[float, float]:
    """
    Fences ``(max(0, Q1 - k×IQR), Q3 + k×IQR)``.

    Values are assumed to be non-negative magnitudes, so the lower fence is
    clamped at zero.
    """
    iqr = q3 - q1
    lower = q1 - k * iqr
    return (0.0 if lower < 0 else lower), q3 + k * iqr
