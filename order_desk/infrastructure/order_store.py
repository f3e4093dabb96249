from collections.abc import Iterable
from datetime import datetime
from itertools import count
from threading import Lock

from loguru import logger

from order_desk.domain.order import Order


class InMemoryOrderStore:
    """Process-local order store.

    Rows are immutable once visible: ``insert`` keeps its own copy with the
    assigned id, and queries hand out the stored (frozen) models. Failures
    propagate as raised; the service turns them into ``StoreError``.
    """

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._ids = count(1)
        self._lock = Lock()

    def insert(self, order: Order) -> Order:
        """Assign the next id to ``order``, store it, and return the stored row."""
        with self._lock:
            stored = order.model_copy(update={"id": next(self._ids)})
            self._orders.append(stored)
        logger.debug(f"[OrderStore] Inserted order {stored.id} ({stored.name})")
        return stored

    def query_by_entry_date(
        self, lower_bound: datetime, include_deleted: bool = False
    ) -> list[Order]:
        """Return orders entered at or after ``lower_bound``, newest first."""
        with self._lock:
            snapshot = list(self._orders)

        matches = [
            order
            for order in snapshot
            if order.entry_date is not None
            and order.entry_date >= lower_bound
            and (include_deleted or not order.is_deleted)
        ]
        matches.sort(key=lambda order: order.entry_date, reverse=True)
        logger.debug(
            f"[OrderStore] {len(matches)} order(s) since {lower_bound.isoformat()}"
        )
        return matches

    def seed(self, orders: Iterable[Order]) -> list[Order]:
        """Store pre-built orders as-is (entry dates and flags included)."""
        return [self.insert(order) for order in orders]
