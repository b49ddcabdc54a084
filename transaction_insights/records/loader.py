"""Mini README: JSON loader turning transaction exports into records.

Structure:
    * TransactionPayload - Pydantic model mirroring one exported JSON object.
    * parse_transactions - validate a JSON string into ``Transaction`` records.
    * load_transactions - read a file from disk and delegate to the parser.

Every failure surfaces as ``TransactionDataError`` with the underlying cause
chained, so the CLI and web layers only need to handle one error type.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from ..errors import TransactionDataError
from ..logging_utils import get_logger
from .transaction import Transaction

LOGGER = get_logger(__name__)


class TransactionPayload(BaseModel):
    """Validated shape of one element in the exported JSON array."""

    mtn: int
    amount: float = Field(..., allow_inf_nan=False)
    sender_full_name: str = Field(..., alias="senderFullName")
    sender_age: int = Field(..., alias="senderAge")
    beneficiary_full_name: str = Field(..., alias="beneficiaryFullName")
    beneficiary_age: int = Field(..., alias="beneficiaryAge")
    issue_id: Optional[int] = Field(None, alias="issueId")
    issue_solved: bool = Field(False, alias="issueSolved")
    issue_message: Optional[str] = Field(None, alias="issueMessage")

    def to_record(self) -> Transaction:
        return Transaction(
            mtn=self.mtn,
            amount=self.amount,
            sender_full_name=self.sender_full_name,
            sender_age=self.sender_age,
            beneficiary_full_name=self.beneficiary_full_name,
            beneficiary_age=self.beneficiary_age,
            issue_id=self.issue_id,
            issue_solved=self.issue_solved,
            issue_message=self.issue_message,
        )


def parse_transactions(payload: str) -> List[Transaction]:
    """Decode a JSON array of transaction objects, preserving their order."""

    try:
        raw_records = json.loads(payload)
    except json.JSONDecodeError as error:
        raise TransactionDataError("Transaction export is not valid JSON") from error

    if not isinstance(raw_records, list):
        raise TransactionDataError(
            f"Transaction export must be a JSON array, got {type(raw_records).__name__}"
        )

    records: List[Transaction] = []
    for index, raw in enumerate(raw_records):
        if not isinstance(raw, dict):
            raise TransactionDataError(f"Transaction #{index} must be a JSON object")
        try:
            records.append(TransactionPayload(**raw).to_record())
        except ValidationError as error:
            raise TransactionDataError(f"Transaction #{index} is invalid: {error}") from error
    return records


def load_transactions(path: Union[str, Path]) -> List[Transaction]:
    """Read and parse a transaction export stored as UTF-8 JSON."""

    source = Path(path)
    try:
        payload = source.read_text(encoding="utf-8")
    except OSError as error:
        raise TransactionDataError(f"Unable to read transaction export {source}") from error

    records = parse_transactions(payload)
    LOGGER.info("Loaded %s transaction records from %s", len(records), source)
    return records
