"""Mini README: In-memory ledger store for income and expense entries.

Structure:
    * LedgerStore - ordered transactions, id allocation, edits and the edit cursor.
    * demo_transactions - the records a fresh store starts with.

The store is the single source of truth; filtered views and balances are
derived from ``snapshot()`` and never write back. Records keep their insertion
order: an update replaces an entry in place and a delete removes it.

Identifiers come from a monotonic counter that remembers the highest id ever
seen, so an id is never handed out twice, even after the record holding it
has been deleted.

The edit cursor stores an id rather than a copy. ``editing`` resolves it
against the current ledger, so the form always shows the latest values.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Collection, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..logging_utils import get_logger
from .drafts import TransactionDraft, coerce_patch
from .errors import InvalidTransactionInput, TransactionNotFound
from .models import Transaction, TransactionType

LOGGER = get_logger(__name__)

Patch = Union[TransactionDraft, Mapping[str, object]]


def demo_transactions() -> List[Transaction]:
    """Return deterministic demo data shown on first launch."""

    return [
        Transaction(
            transaction_id=1,
            occurred_on=date(2023, 4, 1),
            amount=Decimal("200.0"),
            transaction_type=TransactionType.INCOME,
            category="Salary",
        ),
        Transaction(
            transaction_id=2,
            occurred_on=date(2023, 4, 2),
            amount=Decimal("50.0"),
            transaction_type=TransactionType.EXPENSE,
            category="Groceries",
        ),
    ]


class LedgerStore:
    """Manage the ordered collection of transactions and the edit cursor."""

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        *,
        categories: Optional[Collection[str]] = None,
        strict_remove: bool = False,
    ) -> None:
        self._transactions: List[Transaction] = []
        self._sequence = 0
        self._editing_id: Optional[int] = None
        self._categories: Optional[Tuple[str, ...]] = (
            tuple(categories) if categories is not None else None
        )
        self._strict_remove = strict_remove
        if transactions is None:
            transactions = demo_transactions()
        for transaction in transactions:
            self._register(transaction)
        LOGGER.debug("Ledger store initialised with %s transactions", len(self._transactions))

    @property
    def categories(self) -> Optional[Tuple[str, ...]]:
        """Category labels accepted by this store, or ``None`` for any label."""

        return self._categories

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))

    def _next_id(self) -> int:
        self._sequence += 1
        return self._sequence

    def _register(self, transaction: Transaction) -> None:
        """Append a pre-built transaction ensuring identifiers remain unique."""

        if self._find_index(transaction.transaction_id) is not None:
            raise InvalidTransactionInput(
                f"Transaction {transaction.transaction_id} already exists.", field="id"
            )
        self._transactions.append(transaction)
        self._sequence = max(self._sequence, transaction.transaction_id)

    def _find_index(self, transaction_id: int) -> Optional[int]:
        for index, transaction in enumerate(self._transactions):
            if transaction.transaction_id == transaction_id:
                return index
        return None

    def _index_of(self, transaction_id: int) -> int:
        index = self._find_index(transaction_id)
        if index is None:
            raise TransactionNotFound(transaction_id)
        return index

    def snapshot(self) -> List[Transaction]:
        """Return a copy of every transaction in ledger order."""

        return list(self._transactions)

    def get(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising ``TransactionNotFound`` when missing."""

        return self._transactions[self._index_of(transaction_id)]

    def add(self, draft: TransactionDraft) -> Transaction:
        """Store a new transaction under a fresh id and return it."""

        if self._categories is not None and draft.category not in self._categories:
            raise InvalidTransactionInput(
                f"Unknown category {draft.category!r}.", field="category"
            )
        transaction = draft.to_transaction(self._next_id())
        self._transactions.append(transaction)
        LOGGER.info(
            "Added transaction %s (%s %s, %s)",
            transaction.transaction_id,
            transaction.transaction_type.value,
            transaction.amount,
            transaction.category,
        )
        return transaction

    def update(self, transaction_id: int, patch: Patch) -> Transaction:
        """Replace the fields of an existing transaction, keeping its id and position."""

        index = self._index_of(transaction_id)
        if isinstance(patch, TransactionDraft):
            fields = patch.as_fields()
            if self._categories is not None and patch.category not in self._categories:
                raise InvalidTransactionInput(
                    f"Unknown category {patch.category!r}.", field="category"
                )
        else:
            patch = dict(patch)
            for key in ("id", "transaction_id"):
                if key in patch and patch.pop(key) != transaction_id:
                    raise InvalidTransactionInput(
                        "Transaction identifiers cannot be changed.", field="id"
                    )
            fields = coerce_patch(patch, self._categories)
        updated = replace(self._transactions[index], **fields)
        self._transactions[index] = updated
        LOGGER.info("Updated transaction %s fields=%s", transaction_id, sorted(fields))
        return updated

    def remove(self, transaction_id: int) -> Optional[Transaction]:
        """Delete a transaction and return it.

        Unknown ids are ignored unless the store was created with
        ``strict_remove=True``, in which case ``TransactionNotFound`` is raised.
        """

        index = self._find_index(transaction_id)
        if index is None:
            if self._strict_remove:
                raise TransactionNotFound(transaction_id)
            LOGGER.debug("Ignoring delete of unknown transaction %s", transaction_id)
            return None
        removed = self._transactions.pop(index)
        if self._editing_id == transaction_id:
            self._editing_id = None
        LOGGER.info("Removed transaction %s", transaction_id)
        return removed

    @property
    def editing(self) -> Optional[Transaction]:
        """Return the transaction under edit, if any."""

        if self._editing_id is None:
            return None
        index = self._find_index(self._editing_id)
        return None if index is None else self._transactions[index]

    def set_edit_cursor(self, transaction_id: Optional[int]) -> Optional[Transaction]:
        """Point the edit cursor at an existing transaction, or clear it with ``None``."""

        if transaction_id is None:
            self.clear_edit_cursor()
            return None
        transaction = self.get(transaction_id)
        self._editing_id = transaction_id
        LOGGER.debug("Editing transaction %s", transaction_id)
        return transaction

    def clear_edit_cursor(self) -> None:
        self._editing_id = None

    def submit(self, draft: TransactionDraft) -> Tuple[Transaction, bool]:
        """Apply a form submission: update under the cursor, otherwise add.

        Returns the stored transaction and whether it was newly created. The
        cursor is cleared only when the submission succeeds.
        """

        if self._editing_id is None:
            transaction, created = self.add(draft), True
        else:
            transaction, created = self.update(self._editing_id, draft), False
        self._editing_id = None
        return transaction, created
