"""
Comparison Operators

Canonical registry of the comparison predicates used to filter box-plot
entries. Each symbol maps to a binary predicate over two floats:

    ==  → a == b
    <   → a < b
    <=  → a <= b
    >   → a > b
    >=  → a >= b

The registry is built once at import time and is read-only.
"""

from __future__ import annotations

import operator
from types import MappingProxyType
from typing import Callable, List, Mapping

from fuzzy_boxplot.domain.exceptions import UnsupportedOperatorError

Comparator = Callable[[float, float], bool]


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

COMPARATORS: Mapping[str, Comparator] = MappingProxyType({
    "==": operator.eq,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
})


def get_comparator(symbol: str) -> Comparator:
    """Look up the predicate registered for *symbol*."""
    try:
        return COMPARATORS[symbol]
    except KeyError:
        raise UnsupportedOperatorError(symbol, COMPARATORS) from None


def compare(symbol: str, a: float, b: float) -> bool:
    """Evaluate ``a <symbol> b``."""
    return bool(get_comparator(symbol)(a, b))


def list_comparators() -> List[str]:
    return list(COMPARATORS)
