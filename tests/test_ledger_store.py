"""Mini README: Tests covering the in-memory ledger store.

Structure:
    * id allocation - fresh ids never collide, even after deletes.
    * update/remove - in-place replacement, position and length guarantees.
    * edit cursor - submit routes to add or update and clears the cursor.
    * walkthrough - the add/update/remove sequence on the demo ledger.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from fintracker.finance import (
    InvalidTransactionInput,
    LedgerStore,
    TransactionDraft,
    TransactionNotFound,
    TransactionType,
    total_balance,
)


def _draft(category: str = "Misc", amount: str = "10", kind: str = "Income") -> TransactionDraft:
    return TransactionDraft.from_form(
        {"date": "2023-04-03", "amount": amount, "type": kind, "category": category}
    )


def test_default_store_is_seeded_with_demo_transactions() -> None:
    store = LedgerStore()

    assert [transaction.transaction_id for transaction in store] == [1, 2]
    assert store.get(1).category == "Salary"
    assert store.get(2).transaction_type is TransactionType.EXPENSE


def test_empty_iterable_creates_empty_store() -> None:
    assert len(LedgerStore([])) == 0


def test_add_assigns_unique_ids_and_appends() -> None:
    """Every add appends at the end under an id no other record holds."""

    store = LedgerStore([])
    added = [store.add(_draft()) for _ in range(25)]

    ids = [transaction.transaction_id for transaction in store]
    assert len(set(ids)) == 25
    assert ids == [transaction.transaction_id for transaction in added]


def test_ids_are_not_reused_after_removing_the_latest_record() -> None:
    store = LedgerStore([])
    first = store.add(_draft())
    second = store.add(_draft())
    store.remove(second.transaction_id)

    third = store.add(_draft())

    assert third.transaction_id not in {first.transaction_id, second.transaction_id}


def test_update_preserves_identity_position_and_length() -> None:
    store = LedgerStore()
    store.add(_draft())

    updated = store.update(2, {"amount": "75.5", "category": "Bills"})

    snapshot = store.snapshot()
    assert len(snapshot) == 3
    assert snapshot[1] is updated
    assert updated.transaction_id == 2
    assert updated.amount == Decimal("75.5")
    assert updated.category == "Bills"
    assert updated.occurred_on == date(2023, 4, 2)


def test_update_with_draft_replaces_every_field() -> None:
    store = LedgerStore()

    updated = store.update(1, _draft(category="Misc", amount="3.25", kind="Expense"))

    assert updated.transaction_id == 1
    assert updated.transaction_type is TransactionType.EXPENSE
    assert updated.occurred_on == date(2023, 4, 3)
    assert store.snapshot()[0] == updated


def test_update_unknown_id_raises_and_leaves_ledger_unchanged() -> None:
    store = LedgerStore()
    before = store.snapshot()

    with pytest.raises(TransactionNotFound) as caught:
        store.update(99, {"amount": 1})

    assert caught.value.transaction_id == 99
    assert store.snapshot() == before


def test_update_rejects_identifier_changes_and_bad_values() -> None:
    store = LedgerStore(categories=("Salary", "Groceries"))
    before = store.snapshot()

    with pytest.raises(InvalidTransactionInput):
        store.update(1, {"id": 5})
    with pytest.raises(InvalidTransactionInput):
        store.update(1, {"amount": "-3"})
    with pytest.raises(InvalidTransactionInput):
        store.update(1, {"category": "Travel"})
    with pytest.raises(InvalidTransactionInput):
        store.update(1, {"colour": "red"})

    assert store.snapshot() == before


def test_add_rejects_categories_outside_configured_set() -> None:
    store = LedgerStore([], categories=("Salary",))

    with pytest.raises(InvalidTransactionInput):
        store.add(_draft(category="Misc"))
    assert len(store) == 0


def test_remove_deletes_only_the_target() -> None:
    store = LedgerStore()

    removed = store.remove(2)

    assert removed is not None and removed.transaction_id == 2
    assert [transaction.transaction_id for transaction in store] == [1]


def test_remove_unknown_id_is_a_no_op_by_default() -> None:
    store = LedgerStore()

    assert store.remove(42) is None
    assert len(store) == 2


def test_remove_unknown_id_raises_in_strict_mode() -> None:
    store = LedgerStore(strict_remove=True)

    with pytest.raises(TransactionNotFound):
        store.remove(42)
    assert len(store) == 2


def test_submit_adds_without_cursor_and_updates_with_cursor() -> None:
    store = LedgerStore()

    added, created = store.submit(_draft())
    assert created is True
    assert len(store) == 3

    store.set_edit_cursor(1)
    assert store.editing == store.get(1)
    updated, created = store.submit(_draft(category="Salary", amount="300"))

    assert created is False
    assert updated.transaction_id == 1
    assert store.snapshot()[0].amount == Decimal("300")
    assert store.editing is None
    assert len(store) == 3


def test_cursor_reflects_current_record_and_clears_on_remove() -> None:
    store = LedgerStore()
    store.set_edit_cursor(2)
    store.update(2, {"amount": "60"})

    assert store.editing is not None
    assert store.editing.amount == Decimal("60")

    store.remove(2)
    assert store.editing is None


def test_cursor_transitions_do_not_mutate_ledger() -> None:
    store = LedgerStore()
    before = store.snapshot()

    store.set_edit_cursor(1)
    store.clear_edit_cursor()
    store.set_edit_cursor(2)
    store.set_edit_cursor(None)

    assert store.editing is None
    assert store.snapshot() == before
    with pytest.raises(TransactionNotFound):
        store.set_edit_cursor(7)


def test_snapshot_is_a_copy() -> None:
    store = LedgerStore()
    snapshot = store.snapshot()
    snapshot.clear()

    assert len(store) == 2


def test_demo_ledger_walkthrough() -> None:
    """Balance, update, remove and add on the two demo records."""

    store = LedgerStore()
    assert total_balance(store.snapshot()) == Decimal("150")

    store.update(1, {"amount": 300.0})
    assert store.snapshot()[0].amount == Decimal("300.0")
    assert store.snapshot()[0].transaction_id == 1
    assert len(store) == 2
    assert total_balance(store.snapshot()) == Decimal("250")

    store.remove(2)
    assert [transaction.transaction_id for transaction in store] == [1]

    added = store.add(
        TransactionDraft.from_form(
            {"date": "2023-04-03", "amount": 10, "type": "Income", "category": "Misc"}
        )
    )
    assert added.transaction_id != 1
    assert len(store) == 2
