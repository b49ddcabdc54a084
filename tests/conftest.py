"""Mini README: Shared fixtures for the Transaction Insights test-suite.

Structure:
    * reference_path - path to the bundled reference export.
    * reference_transactions - records loaded from that export.
    * fetcher - query engine built over the reference records.
    * make_transaction - factory for ad-hoc records with sensible defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

from transaction_insights.analytics import TransactionDataFetcher
from transaction_insights.configuration import get_settings
from transaction_insights.records import Transaction, load_transactions

DATA_DIRECTORY = Path(__file__).parent / "data"


@pytest.fixture()
def reference_path() -> Path:
    return DATA_DIRECTORY / "transactions.json"


@pytest.fixture()
def reference_transactions(reference_path: Path) -> List[Transaction]:
    return load_transactions(reference_path)


@pytest.fixture()
def fetcher(reference_transactions: List[Transaction]) -> TransactionDataFetcher:
    return TransactionDataFetcher(reference_transactions)


@pytest.fixture()
def make_transaction() -> Callable[..., Transaction]:
    """Build records while only spelling out the fields a test cares about."""

    def _make(mtn: int, amount: float, sender: str = "Alice", beneficiary: str = "Bob", **extra) -> Transaction:
        return Transaction(
            mtn=mtn,
            amount=amount,
            sender_full_name=sender,
            sender_age=extra.pop("sender_age", 30),
            beneficiary_full_name=beneficiary,
            beneficiary_age=extra.pop("beneficiary_age", 40),
            **extra,
        )

    return _make


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; tests that patch the environment need a reset."""

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
