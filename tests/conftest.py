"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the fuzzy_boxplot test suite.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ -k "percentile"    # Run only percentile tests
"""

import pytest
from pathlib import Path
from typing import Dict

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from fuzzy_boxplot.domain.services.boxplot import BoxPlot


# =============================================================================
# Sample Fixtures
# =============================================================================

@pytest.fixture
def five_values() -> Dict[str, float]:
    """a..e = 1..5"""
    return {"a": 1.0, "b": 2.0, "c": 3.0, "d": 4.0, "e": 5.0}


@pytest.fixture
def outlier_values() -> Dict[str, float]:
    """v1..v10 = 1..10 plus one far value.

    Sorted: [1, 2, ..., 10, 100]  (n = 11)
    Q1 = x[3] = 4, Q3 = x[9] = 10, IQR = 6
    Bounds = [0, 19], median = x[5] = 6
    """
    values = {f"v{i}": float(i) for i in range(1, 11)}
    values["big"] = 100.0
    return values


@pytest.fixture
def box(five_values) -> BoxPlot:
    """Initialized box plot over a..e with no fuzziness."""
    plot = BoxPlot("demo")
    plot.init(five_values, 0)
    return plot


@pytest.fixture
def outlier_box(outlier_values) -> BoxPlot:
    plot = BoxPlot("outliers")
    plot.init(outlier_values, 0)
    return plot
