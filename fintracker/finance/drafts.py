"""Mini README: Parsing of submitted transaction fields.

Structure:
    * TransactionDraft - the four editable fields of a transaction, without an id.
    * coerce_patch - validates partial updates before they reach the ledger.
    * parse_date / parse_amount - shared field parsers.

Form posts, JSON bodies and export payloads all arrive as loose mappings of
strings and numbers. Everything is parsed here so that the ledger only ever
receives typed values; a failure raises ``InvalidTransactionInput`` naming the
offending field and nothing is stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Collection, Dict, Mapping, Optional

from .errors import InvalidTransactionInput
from .models import Transaction, TransactionType

# Public (form/export) names first, dataclass names second.
FIELD_ALIASES: Dict[str, str] = {
    "date": "occurred_on",
    "occurred_on": "occurred_on",
    "amount": "amount",
    "type": "transaction_type",
    "transaction_type": "transaction_type",
    "category": "category",
}
MAX_AMOUNT = Decimal("1e15")
MAX_DECIMAL_PLACES = 8
SMALLEST_UNIT = Decimal(1).scaleb(-MAX_DECIMAL_PLACES)

_PUBLIC_NAMES: Dict[str, str] = {
    "occurred_on": "date",
    "amount": "amount",
    "transaction_type": "type",
    "category": "category",
}


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_date(value: object, *, field: str = "date") -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise InvalidTransactionInput(
                f"Field '{field}' must be an ISO date (YYYY-MM-DD), got {value!r}.",
                field=field,
            ) from error
    raise InvalidTransactionInput(
        f"Field '{field}' must be an ISO string or a date instance.", field=field
    )


def parse_amount(value: object) -> Decimal:
    """Parse a non-negative, finite amount keeping its full precision."""

    if isinstance(value, bool):
        raise InvalidTransactionInput("Field 'amount' must be a number.", field="amount")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as error:
            raise InvalidTransactionInput(
                f"Field 'amount' must be a number, got {value!r}.", field="amount"
            ) from error
    else:
        raise InvalidTransactionInput("Field 'amount' must be a number.", field="amount")
    if not amount.is_finite():
        raise InvalidTransactionInput("Field 'amount' must be finite.", field="amount")
    if amount < 0:
        raise InvalidTransactionInput("Field 'amount' must not be negative.", field="amount")
    if amount >= MAX_AMOUNT:
        raise InvalidTransactionInput(
            f"Field 'amount' must be less than {MAX_AMOUNT:f}.", field="amount"
        )
    # Bounded by MAX_AMOUNT, so the quantized coefficient fits the default context.
    if amount != amount.quantize(SMALLEST_UNIT):
        raise InvalidTransactionInput(
            f"Field 'amount' allows at most {MAX_DECIMAL_PLACES} decimal places.",
            field="amount",
        )
    return amount


def parse_type(value: object) -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    try:
        return TransactionType.from_str(value)  # type: ignore[arg-type]
    except ValueError as error:
        raise InvalidTransactionInput(str(error), field="type") from error


def parse_category(value: object, categories: Optional[Collection[str]] = None) -> str:
    label = str(value).strip()
    if categories is not None and label not in categories:
        raise InvalidTransactionInput(
            f"Unknown category {label!r}; expected one of {', '.join(categories)}.",
            field="category",
        )
    return label


def _coerce_field(name: str, value: object, categories: Optional[Collection[str]]) -> object:
    """Parse a single value addressed by its dataclass field name."""

    public = _PUBLIC_NAMES[name]
    if _is_blank(value):
        raise InvalidTransactionInput(f"Field '{public}' is required.", field=public)
    if name == "occurred_on":
        return parse_date(value)
    if name == "amount":
        return parse_amount(value)
    if name == "transaction_type":
        return parse_type(value)
    return parse_category(value, categories)


def coerce_patch(
    patch: Mapping[str, object], categories: Optional[Collection[str]] = None
) -> Dict[str, object]:
    """Validate a partial update, returning values keyed by dataclass field.

    ``None`` values mean "leave unchanged" and are skipped. Unknown keys,
    including identifiers, are rejected.
    """

    coerced: Dict[str, object] = {}
    for key, value in patch.items():
        name = FIELD_ALIASES.get(key)
        if name is None:
            raise InvalidTransactionInput(f"Update of field '{key}' is not supported.", field=key)
        if value is None:
            continue
        coerced[name] = _coerce_field(name, value, categories)
    return coerced


@dataclass(frozen=True, slots=True)
class TransactionDraft:
    """A validated transaction that has not been assigned an id yet."""

    occurred_on: date
    amount: Decimal
    transaction_type: TransactionType
    category: str

    @classmethod
    def from_form(
        cls,
        form: Mapping[str, object],
        categories: Optional[Collection[str]] = None,
    ) -> "TransactionDraft":
        """Build a draft from submitted fields, rejecting missing or malformed values.

        Keys may use the public names (``date``, ``amount``, ``type``,
        ``category``) or the dataclass names. Other keys are ignored.
        """

        values: Dict[str, object] = {}
        for name, public in _PUBLIC_NAMES.items():
            raw = form.get(public)
            if raw is None:
                raw = form.get(name)
            values[name] = _coerce_field(name, raw, categories)
        return cls(**values)  # type: ignore[arg-type]

    def as_fields(self) -> Dict[str, object]:
        return {
            "occurred_on": self.occurred_on,
            "amount": self.amount,
            "transaction_type": self.transaction_type,
            "category": self.category,
        }

    def to_transaction(self, transaction_id: int) -> Transaction:
        return Transaction(transaction_id=transaction_id, **self.as_fields())  # type: ignore[arg-type]
