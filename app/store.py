import threading
from typing import Iterable

from app.models import Transaction


class DataStore:
    """In-memory collection of sale transactions.

    The collection is only ever replaced wholesale; readers get a snapshot
    list and never see a half-replaced collection.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._transactions: list[Transaction] = []

    # ── writes ────────────────────────────────────────────────────────────────

    def replace_all(self, records: Iterable[Transaction]) -> int:
        loaded = list(records)
        # records without an id get the next integers after the largest given id
        next_id = max((t.id for t in loaded if t.id is not None), default=0) + 1
        for i, record in enumerate(loaded):
            if record.id is None:
                loaded[i] = record.model_copy(update={"id": next_id})
                next_id += 1
        with self._lock:
            self._transactions = loaded
        return len(loaded)

    def clear(self) -> None:
        with self._lock:
            self._transactions = []

    # ── reads ─────────────────────────────────────────────────────────────────

    def list_transactions(self) -> list[Transaction]:
        with self._lock:
            return list(self._transactions)

    def get_transactions_for_month(self, month: int) -> list[Transaction]:
        return [t for t in self.list_transactions() if t.sale_date.month == month]

    def count(self) -> int:
        with self._lock:
            return len(self._transactions)
