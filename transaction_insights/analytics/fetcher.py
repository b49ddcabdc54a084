"""Mini README: Read-only query engine over a fixed set of transaction records.

Structure:
    * TransactionDataFetcher - answers aggregate and lookup queries.

Exports routinely contain the same transfer several times under one ``mtn``
(one row per compliance issue, retransmissions). Amount-based queries
therefore work on one representative per ``mtn``: the first record seen in
load order. Name filters compare case-folded names; stored names keep their
original casing. Ties in rankings resolve to the earliest representative.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..errors import EmptyDatasetError
from ..logging_utils import get_logger
from ..records import Transaction

LOGGER = get_logger(__name__)


def _first_per_mtn(transactions: Iterable[Transaction]) -> Tuple[Transaction, ...]:
    """Keep the first record for every ``mtn`` in encounter order."""

    representatives: Dict[int, Transaction] = {}
    for transaction in transactions:
        representatives.setdefault(transaction.mtn, transaction)
    return tuple(representatives.values())


class TransactionDataFetcher:
    """Answer analytics questions about a transaction export loaded once."""

    def __init__(self, transactions: Iterable[Transaction]) -> None:
        self._transactions: Tuple[Transaction, ...] = tuple(transactions)
        self._representatives = _first_per_mtn(self._transactions)
        LOGGER.info(
            "Query engine ready with %s records covering %s distinct transactions",
            len(self._transactions),
            len(self._representatives),
        )

    def __len__(self) -> int:
        return len(self._transactions)

    @property
    def distinct_transaction_count(self) -> int:
        return len(self._representatives)

    def total_transaction_amount(self) -> float:
        """Sum of amounts over distinct transactions."""

        return math.fsum(transaction.amount for transaction in self._representatives)

    def total_transaction_amount_sent_by(self, sender_full_name: str) -> float:
        """Sum of distinct transaction amounts sent by ``sender_full_name``, ignoring case."""

        folded = sender_full_name.casefold()
        total = math.fsum(
            transaction.amount
            for transaction in self._representatives
            if transaction.sender_full_name.casefold() == folded
        )
        LOGGER.debug("Total sent by %r: %.2f", sender_full_name, total)
        return total

    def max_transaction_amount(self) -> float:
        """Largest single transaction amount.

        Raises:
            EmptyDatasetError: when no transactions are loaded.
        """

        if not self._representatives:
            raise EmptyDatasetError("the maximum transaction amount")
        return max(transaction.amount for transaction in self._representatives)

    def count_unique_clients(self) -> int:
        """Number of distinct names that sent or received a transaction."""

        names: Set[str] = set()
        for transaction in self._transactions:
            names.add(transaction.sender_full_name)
            names.add(transaction.beneficiary_full_name)
        return len(names)

    def has_open_compliance_issues(self, client_full_name: str) -> bool:
        """Whether the client, as sender or beneficiary, has an unsolved issue."""

        folded = client_full_name.casefold()
        return any(
            transaction.has_open_issue
            for transaction in self._transactions
            if transaction.involves(folded)
        )

    def transactions_by_beneficiary_name(self) -> Dict[str, Set[Transaction]]:
        """All records grouped by beneficiary name."""

        grouped: Dict[str, Set[Transaction]] = {}
        for transaction in self._transactions:
            grouped.setdefault(transaction.beneficiary_full_name, set()).add(transaction)
        return grouped

    def unsolved_issue_ids(self) -> Set[int]:
        """Identifiers of every open compliance issue."""

        return {
            transaction.issue_id
            for transaction in self._transactions
            if transaction.has_open_issue
        }

    def all_solved_issue_messages(self) -> List[str]:
        """Messages of solved issues in record order, repeats included."""

        return [
            transaction.issue_message
            for transaction in self._transactions
            if transaction.issue_solved and transaction.issue_message is not None
        ]

    def top3_transactions_by_amount(self, *, limit: int = 3) -> List[Transaction]:
        """Distinct transactions with the highest amounts, largest first."""

        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        # sorted() is stable, so equal amounts keep their encounter order.
        ranked = sorted(
            self._representatives,
            key=lambda transaction: transaction.amount,
            reverse=True,
        )
        return ranked[:limit]

    def top_sender(self) -> Optional[str]:
        """Sender with the largest total across distinct transactions, if any."""

        totals: Dict[str, float] = {}
        for transaction in self._representatives:
            totals[transaction.sender_full_name] = (
                totals.get(transaction.sender_full_name, 0.0) + transaction.amount
            )
        if not totals:
            return None
        # max() returns the first maximal key, i.e. the earliest sender seen.
        return max(totals, key=totals.__getitem__)

    def summarise(self, client_name: Optional[str] = None) -> Dict[str, object]:
        """Bundle every query result into a JSON-friendly dictionary."""

        try:
            max_amount: Optional[float] = self.max_transaction_amount()
        except EmptyDatasetError:
            LOGGER.warning("Summary requested for an empty dataset")
            max_amount = None

        summary: Dict[str, object] = {
            "records": len(self._transactions),
            "distinct_transactions": len(self._representatives),
            "total_amount": self.total_transaction_amount(),
            "max_amount": max_amount,
            "unique_clients": self.count_unique_clients(),
            "unsolved_issue_ids": sorted(self.unsolved_issue_ids()),
            "solved_issue_messages": self.all_solved_issue_messages(),
            "top_transactions": [
                transaction.as_dict() for transaction in self.top3_transactions_by_amount()
            ],
            "top_sender": self.top_sender(),
        }
        if client_name is not None:
            summary["client"] = {
                "name": client_name,
                "total_sent": self.total_transaction_amount_sent_by(client_name),
                "has_open_compliance_issues": self.has_open_compliance_issues(client_name),
            }
        return summary
