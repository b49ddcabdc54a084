"""Mini README: Domain errors raised by the loader and the query engine.

Both errors subclass ``ValueError`` so callers that only care about bad input
can catch them together, while the presentation layers tell them apart.
"""

from __future__ import annotations


class TransactionDataError(ValueError):
    """Raised when a transaction export cannot be read or validated."""


class EmptyDatasetError(ValueError):
    """Raised when a query needs at least one transaction and none are loaded."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot compute {operation}: no transactions are loaded")
        self.operation = operation
