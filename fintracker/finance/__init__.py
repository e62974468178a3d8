"""Mini README: Transaction ledger, filters and balance for the tracker.

This package holds the logic behind the tracker page: the ordered in-memory
ledger with its edit cursor, the parsing of submitted fields, the
type/category/date filters applied before rendering and the balance computed
over every record. Everything here is synchronous and free of web framework
imports so it can be tested directly.
"""

from .balance import format_amount, total_balance
from .drafts import TransactionDraft
from .errors import InvalidTransactionInput, LedgerError, TransactionNotFound
from .filters import FilterSpec, filter_transactions
from .models import Transaction, TransactionType
from .store import LedgerStore, demo_transactions

__all__ = [
    "FilterSpec",
    "InvalidTransactionInput",
    "LedgerError",
    "LedgerStore",
    "Transaction",
    "TransactionDraft",
    "TransactionNotFound",
    "TransactionType",
    "demo_transactions",
    "filter_transactions",
    "format_amount",
    "total_balance",
]
