"""Mini README: Value types describing ledger entries.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - immutable dataclass storing a single ledger entry.

Amounts are ``Decimal`` values kept at the precision they were entered with;
rounding to cents happens only when amounts are displayed. ``as_dict`` is the
serialisable form shared by the JSON API and the export download, and
``from_dict`` reads it back.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Mapping

from .errors import InvalidTransactionInput


class TransactionType(str, Enum):
    """Enumerate the supported transaction types."""

    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error
        for member in cls:
            if member.value.lower() == normalised:
                return member
        raise ValueError(f"Unsupported transaction type: {value}")

    @property
    def sign(self) -> int:
        """Return +1 for income and -1 for expenses."""

        return 1 if self is TransactionType.INCOME else -1


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a ledger entry. Updates replace the whole value."""

    transaction_id: int
    occurred_on: date
    amount: Decimal
    transaction_type: TransactionType
    category: str

    @property
    def signed_amount(self) -> Decimal:
        return self.amount * self.transaction_type.sign

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable, lossless values."""

        return {
            "id": self.transaction_id,
            "date": self.occurred_on.isoformat(),
            "amount": str(self.amount),
            "type": self.transaction_type.value,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "Transaction":
        """Rebuild a transaction from the structure produced by ``as_dict``."""

        # Local import avoids a cycle: drafts depends on this module.
        from .drafts import TransactionDraft

        if "id" not in payload:
            raise InvalidTransactionInput("Field 'id' is required.", field="id")
        raw_id = payload["id"]
        if isinstance(raw_id, bool):
            raise InvalidTransactionInput("Field 'id' must be an integer.", field="id")
        try:
            transaction_id = int(raw_id)  # type: ignore[arg-type]
        except (TypeError, ValueError) as error:
            raise InvalidTransactionInput("Field 'id' must be an integer.", field="id") from error
        draft = TransactionDraft.from_form(payload)
        return draft.to_transaction(transaction_id)
