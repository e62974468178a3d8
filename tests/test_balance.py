"""Mini README: Tests for balance totals and amount formatting."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from fintracker.finance import (
    FilterSpec,
    LedgerStore,
    Transaction,
    TransactionDraft,
    TransactionType,
    filter_transactions,
    format_amount,
    total_balance,
)


def test_empty_ledger_balance_is_zero() -> None:
    assert total_balance([]) == Decimal("0")


def test_demo_balance_formats_to_two_decimals() -> None:
    balance = total_balance(LedgerStore().snapshot())

    assert balance == Decimal("150")
    assert format_amount(balance, "$") == "$150.00"


def test_balance_keeps_full_precision() -> None:
    store = LedgerStore([])
    for amount in ("0.1", "0.1", "0.1"):
        store.add(
            TransactionDraft.from_form(
                {"date": "2024-01-01", "amount": amount, "type": "Income", "category": "Misc"}
            )
        )

    assert total_balance(store.snapshot()) == Decimal("0.3")


def test_balance_ignores_filters() -> None:
    """The total always covers the whole ledger, whatever view is active."""

    store = LedgerStore()
    full = total_balance(store.snapshot())
    filter_transactions(store.snapshot(), FilterSpec(transaction_type=TransactionType.INCOME))

    assert total_balance(store.snapshot()) == full


def test_format_amount_rounds_half_up_and_handles_negatives() -> None:
    assert format_amount(Decimal("2.005")) == "2.01"
    assert format_amount(Decimal("-12.5"), "$") == "-$12.50"
    assert format_amount(Decimal("-0.001"), "$") == "$0.00"


def test_balance_stays_exact_beyond_default_precision() -> None:
    """Sums needing more than 28 digits are neither rounded nor rejected."""

    def entry(identifier: int, amount: str, kind: TransactionType) -> Transaction:
        return Transaction(
            transaction_id=identifier,
            occurred_on=date(2024, 1, 1),
            amount=Decimal(amount),
            transaction_type=kind,
            category="Misc",
        )

    ledger = [
        entry(1, "1e27", TransactionType.INCOME),
        entry(2, "0.01", TransactionType.INCOME),
        entry(3, "0.005", TransactionType.EXPENSE),
    ]

    balance = total_balance(ledger)

    assert balance == Decimal("1000000000000000000000000000.005")
    assert format_amount(balance, "$") == "$1000000000000000000000000000.01"
    assert format_amount(balance.copy_negate()) == "-1000000000000000000000000000.01"


def test_balance_of_largest_accepted_amounts_formats() -> None:
    store = LedgerStore([])
    for _ in range(3):
        store.add(
            TransactionDraft.from_form(
                {
                    "date": "2024-01-01",
                    "amount": "999999999999999.99999999",
                    "type": "Income",
                    "category": "Misc",
                }
            )
        )

    balance = total_balance(store.snapshot())

    assert balance == Decimal("2999999999999999.99999997")
    assert format_amount(balance) == "3000000000000000.00"
