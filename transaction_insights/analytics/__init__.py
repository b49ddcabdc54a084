"""Mini README: Analytics over loaded transaction exports.

The ``fetcher`` module holds the read-only query engine used by both the
command line report and the JSON API.
"""

from .fetcher import TransactionDataFetcher

__all__ = ["TransactionDataFetcher"]
