import logging
from typing import Any, List, Mapping, Sequence, Tuple

from expense_tracker.client.models import ALL_CATEGORIES, Transaction
from expense_tracker.client.store import StoreAccessor
from expense_tracker.client.aggregation import Summary, filter_by_category, summarize

logger = logging.getLogger(__name__)


class TransactionLedger:
    """Client-side projection of the stored transactions.

    The store stays authoritative. The list is replaced wholesale by
    :meth:`load` and otherwise patched only after the store confirms a
    write, so a failed call leaves it exactly as it was.
    """

    def __init__(self, store: StoreAccessor):
        self.store = store
        self._transactions: List[Transaction] = []
        self.filter_category = ALL_CATEGORIES

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def visible(self) -> Sequence[Transaction]:
        return filter_by_category(self.transactions, self.filter_category)

    def set_filter(self, category: str) -> None:
        self.filter_category = category

    def summary(self) -> Summary:
        return summarize(self.visible)

    def load(self) -> None:
        self._transactions = self.store.list()
        logger.debug(f"Loaded {len(self._transactions)} transactions")

    def add(self, candidate: Mapping[str, Any]) -> Transaction:
        created = self.store.create(candidate)
        self._transactions.insert(0, created)
        return created

    def edit(self, transaction_id: str, fields: Mapping[str, Any]) -> Transaction:
        updated = self.store.update(transaction_id, fields)
        self._transactions = [
            updated if t.id == transaction_id else t for t in self._transactions
        ]
        return updated

    def remove(self, transaction_id: str) -> None:
        self.store.delete(transaction_id)
        self._transactions = [t for t in self._transactions if t.id != transaction_id]
