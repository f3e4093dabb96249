from datetime import datetime
from typing import Protocol

from .order import Order, OrderSubmission


class IOrderStore(Protocol):
    def insert(self, order: Order) -> Order:
        """Persist ``order`` and return it with its assigned ``id``."""
        ...

    def query_by_entry_date(
        self, lower_bound: datetime, include_deleted: bool = False
    ) -> list[Order]:
        """Return orders with ``entry_date >= lower_bound``, newest first."""
        ...


class IOrderService(Protocol):
    def submit(self, submission: OrderSubmission) -> Order: ...

    def list_recent(self) -> list[Order]: ...

    def list_after_business_days(self, days: int) -> list[Order]: ...
