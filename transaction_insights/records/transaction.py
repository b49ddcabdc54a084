"""Mini README: Immutable transaction record shared by every layer.

Structure:
    * Transaction - frozen dataclass for one raw record of a transfer export.

Records are hashable so the engine can place them in sets, and ``as_dict``
turns them back into the camelCase interchange shape used by the JSON export.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True, slots=True)
class Transaction:
    """One raw transfer record; records sharing ``mtn`` describe the same transfer."""

    mtn: int
    amount: float
    sender_full_name: str
    sender_age: int
    beneficiary_full_name: str
    beneficiary_age: int
    issue_id: Optional[int] = None
    issue_solved: bool = False
    issue_message: Optional[str] = None

    @property
    def has_open_issue(self) -> bool:
        """True when an issue is attached and still unresolved."""

        return self.issue_id is not None and not self.issue_solved

    def involves(self, folded_name: str) -> bool:
        """Whether an already case-folded name is the sender or the beneficiary."""

        return folded_name in (
            self.sender_full_name.casefold(),
            self.beneficiary_full_name.casefold(),
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the record using the interchange field names."""

        return {
            "mtn": self.mtn,
            "amount": self.amount,
            "senderFullName": self.sender_full_name,
            "senderAge": self.sender_age,
            "beneficiaryFullName": self.beneficiary_full_name,
            "beneficiaryAge": self.beneficiary_age,
            "issueId": self.issue_id,
            "issueSolved": self.issue_solved,
            "issueMessage": self.issue_message,
        }
