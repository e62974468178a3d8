"""Mini README: Filtering of ledger snapshots for display.

Structure:
    * FilterSpec - four optional predicates (type, category, date range).
    * filter_transactions - stable, side-effect free filtering of a sequence.

Filtering runs on every page render over the full snapshot; ledgers are small
so no index or cache is kept. Dates are compared as ``date`` values, never as
strings, and both bounds are inclusive.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from ..logging_utils import get_logger
from .drafts import parse_date, parse_type
from .models import Transaction, TransactionType

LOGGER = get_logger(__name__)


def _unset(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Query used to derive the visible subset of the ledger."""

    transaction_type: Optional[TransactionType] = None
    category: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    @classmethod
    def from_query(
        cls,
        transaction_type: Optional[str] = None,
        category: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> "FilterSpec":
        """Build a spec from raw query values, treating empty strings as unset.

        Raises ``InvalidTransactionInput`` for unknown types or malformed dates.
        """

        return cls(
            transaction_type=None if _unset(transaction_type) else parse_type(transaction_type),
            category=None if _unset(category) else category.strip(),  # type: ignore[union-attr]
            date_from=None if _unset(date_from) else parse_date(date_from, field="date_from"),
            date_to=None if _unset(date_to) else parse_date(date_to, field="date_to"),
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.transaction_type is None
            and self.category is None
            and self.date_from is None
            and self.date_to is None
        )

    def matches(self, transaction: Transaction) -> bool:
        if self.transaction_type is not None and transaction.transaction_type is not self.transaction_type:
            return False
        if self.category is not None and transaction.category != self.category:
            return False
        if self.date_from is not None and transaction.occurred_on < self.date_from:
            return False
        if self.date_to is not None and transaction.occurred_on > self.date_to:
            return False
        return True

    def as_query(self) -> dict[str, str]:
        """Return the spec as query parameters, empty strings for unset predicates."""

        return {
            "type": self.transaction_type.value if self.transaction_type else "",
            "category": self.category or "",
            "date_from": self.date_from.isoformat() if self.date_from else "",
            "date_to": self.date_to.isoformat() if self.date_to else "",
        }


def filter_transactions(
    transactions: Iterable[Transaction], spec: FilterSpec
) -> List[Transaction]:
    """Return the transactions matching every predicate, in their original order."""

    visible = [transaction for transaction in transactions if spec.matches(transaction)]
    LOGGER.debug("Filter %s kept %s transactions", spec, len(visible))
    return visible
