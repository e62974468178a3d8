"""Mini README: Error types raised by the finance ledger.

Structure:
    * LedgerError - common base class so callers can catch every ledger failure.
    * TransactionNotFound - an update, edit or strict delete targeted an unknown id.
    * InvalidTransactionInput - a submission or patch failed validation.

Neither error leaves the ledger modified; the interface layer turns them into
notices or HTTP status codes.
"""

from __future__ import annotations

from typing import Optional


class LedgerError(Exception):
    """Base class for ledger failures."""


class TransactionNotFound(LedgerError):
    """Raised when no transaction carries the requested identifier."""

    def __init__(self, transaction_id: object) -> None:
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} not found")


class InvalidTransactionInput(LedgerError, ValueError):
    """Raised when a field is missing or cannot be parsed."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)
