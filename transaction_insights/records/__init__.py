"""Mini README: Transaction records and the JSON loader that produces them.

The ``transaction`` module defines the immutable record consumed by the query
engine; ``loader`` validates exported JSON arrays into those records.
"""

from .loader import TransactionPayload, load_transactions, parse_transactions
from .transaction import Transaction

__all__ = ["Transaction", "TransactionPayload", "load_transactions", "parse_transactions"]
