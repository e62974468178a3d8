"""Mini README: Balance calculation over the full ledger.

``total_balance`` adds income and subtracts expenses starting from zero. Pass it
the unfiltered snapshot: the balance reports the real financial position
whatever the table is currently showing. ``format_amount`` rounds to cents for
display only.

Both run in a local decimal context wider than the default 28 digits so sums
stay exact and rounding never overflows the coefficient.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable

from .models import Transaction

CENT = Decimal("0.01")
SUM_PRECISION = 60


def total_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Return the signed sum of all transactions."""

    with localcontext() as context:
        context.prec = SUM_PRECISION
        return sum((transaction.signed_amount for transaction in transactions), Decimal("0"))


def format_amount(value: Decimal, currency_symbol: str = "") -> str:
    """Render an amount with two decimal places, e.g. ``$150.00`` or ``-$12.50``."""

    with localcontext() as context:
        # Integer digits plus two decimals.
        context.prec = max(context.prec, value.adjusted() + 3)
        rounded = value.quantize(CENT, rounding=ROUND_HALF_UP)
        magnitude = abs(rounded)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{currency_symbol}{magnitude}"
