"""
Box-Plot Errors

Failures raised by the comparator registry and the box-plot engine.
Both are programming errors: callers are expected to let them propagate.
"""


class BoxPlotError(Exception):
    """Base class for all box-plot errors."""


class UnsupportedOperatorError(BoxPlotError, ValueError):
    """Raised when a comparison symbol has no registered predicate."""

    def __init__(self, symbol: str, valid) -> None:
        self.symbol = symbol
        self.valid = list(valid)
        super().__init__(f"Unsupported operator '{symbol}'. Valid: {self.valid}")


class BoxPlotNotInitializedError(BoxPlotError, RuntimeError):
    """Raised when derived statistics are read before ``init()`` has run."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Box plot '{name}' has no derived statistics; call init() first"
        )
