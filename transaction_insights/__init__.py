"""Mini README: Core package initializer for Transaction Insights.

Re-exports the pieces most callers need: the query engine, the record type,
the JSON loader and the domain errors. Presentation code (CLI and web API)
lives in ``transaction_insights_cli`` and ``transaction_insights.interface``.
"""

from .analytics import TransactionDataFetcher
from .errors import EmptyDatasetError, TransactionDataError
from .logging_utils import get_logger
from .records import Transaction, load_transactions, parse_transactions

__all__ = [
    "EmptyDatasetError",
    "Transaction",
    "TransactionDataError",
    "TransactionDataFetcher",
    "get_logger",
    "load_transactions",
    "parse_transactions",
]
