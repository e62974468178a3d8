"""Mini README: Export the ledger as a JSON document.

Structure:
    * LedgerExporter - serialises snapshots to bytes, parses them back and
      writes them to disk.

The payload is a JSON list of ``Transaction.as_dict`` entries in ledger order.
Amounts are written as decimal strings so reading the file back yields the
exact stored values.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from ..finance import InvalidTransactionInput, Transaction
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class LedgerExporter:
    """Serialise transaction snapshots for download or archiving."""

    media_type = "application/json"

    def __init__(self, filename: str = "transactions.json") -> None:
        self.filename = filename

    def export(self, transactions: Iterable[Transaction]) -> bytes:
        """Return the UTF-8 encoded JSON payload for the transactions."""

        records = [transaction.as_dict() for transaction in transactions]
        LOGGER.info("Exporting %s transactions", len(records))
        return json.dumps(records, indent=2).encode("utf-8")

    def parse(self, payload: bytes) -> List[Transaction]:
        """Rebuild transactions from a payload produced by ``export``."""

        try:
            records = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as error:
            raise InvalidTransactionInput("Export payload is not valid JSON") from error
        if not isinstance(records, list):
            raise InvalidTransactionInput("Export payload must be a list of transactions")
        transactions: List[Transaction] = []
        for record in records:
            if not isinstance(record, dict):
                raise InvalidTransactionInput("Each exported transaction must be an object")
            transactions.append(Transaction.from_dict(record))
        return transactions

    def write(self, transactions: Iterable[Transaction], destination: Path) -> Path:
        """Write the payload to ``destination``, creating parent directories."""

        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(self.export(transactions))
        LOGGER.info("Wrote ledger export to %s", destination)
        return destination
