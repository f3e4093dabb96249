from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from loguru import logger
from pydantic import ValidationError

from order_desk.domain.business_days import HolidaySet, compute_cutoff
from order_desk.domain.errors import (
    InvalidArgumentError,
    OrdersNotFoundError,
    OrderValidationError,
)
from order_desk.domain.interfaces import IOrderStore
from order_desk.domain.order import Order, OrderSubmission
from order_desk.shared.decorators import store_errors

RECENT_WINDOW = timedelta(hours=24)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _field_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "__root__"
        errors.setdefault(field, []).append(error["msg"])
    return errors


class OrderService:
    """Application service for submitting and listing orders."""

    def __init__(
        self,
        store: IOrderStore,
        holidays: HolidaySet,
        clock: Callable[[], datetime] = _utc_now,
        recent_window: timedelta = RECENT_WINDOW,
    ) -> None:
        self._store = store
        self._holidays = holidays
        self._clock = clock
        self._recent_window = recent_window

    def submit(self, submission: OrderSubmission) -> Order:
        """Validate and persist a new order, returning it with its assigned id.

        The entry date is stamped here and the invoiced/deleted flags are
        forced; whatever the caller sent for them (or for ``id``) is ignored.

        Raises:
            OrderValidationError: if name or description is missing, blank or
                longer than 100 characters.
            StoreError: if the store fails to persist the order.
        """
        try:
            order = Order(
                name=submission.name,
                description=submission.description,
                entry_date=self._clock(),
                is_invoiced=True,
                is_deleted=False,
            )
        except ValidationError as exc:
            errors = _field_errors(exc)
            logger.info(f"[OrderService] Rejected submission: {errors}")
            raise OrderValidationError(errors) from exc

        created = self._insert(order)
        logger.info(f"[OrderService] Order {created.id} submitted")
        return created

    def list_recent(self) -> list[Order]:
        """Return non-deleted orders entered within the recent window, newest first.

        Raises:
            OrdersNotFoundError: if there are none.
            StoreError: if the store query fails.
        """
        orders = self._query_recent(self._clock() - self._recent_window)
        if not orders:
            raise OrdersNotFoundError("No recent orders found")
        return orders

    def list_after_business_days(self, days: int) -> list[Order]:
        """Return non-deleted orders entered within the last ``days`` business days.

        An empty result is returned as an empty list, unlike ``list_recent``.

        Raises:
            InvalidArgumentError: if ``days`` is negative.
            StoreError: if the store query fails.
        """
        if days < 0:
            raise InvalidArgumentError("Days must be a non-negative number.")

        cutoff = compute_cutoff(self._clock(), days, self._holidays)
        logger.debug(f"[OrderService] {days} business day(s) back -> {cutoff.isoformat()}")
        return self._query_since(cutoff)

    # Store boundary: every store call goes through one of these

    @store_errors("Error adding new order")
    def _insert(self, order: Order) -> Order:
        return self._store.insert(order)

    @store_errors("Error getting recent orders")
    def _query_recent(self, since: datetime) -> list[Order]:
        return self._store.query_by_entry_date(since)

    @store_errors("Error getting orders after days")
    def _query_since(self, cutoff: datetime) -> list[Order]:
        return self._store.query_by_entry_date(cutoff)
