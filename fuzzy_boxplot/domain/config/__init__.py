"""
Domain Configuration

Static registries shared by the domain services.
"""

from .operators import COMPARATORS, Comparator, compare, get_comparator, list_comparators

__all__ = [
    "COMPARATORS",
    "Comparator",
    "compare",
    "get_comparator",
    "list_comparators",
]
