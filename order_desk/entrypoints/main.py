from datetime import UTC, datetime, timedelta

import uvicorn
from fastapi import FastAPI
from loguru import logger

from order_desk.application.order_service import OrderService
from order_desk.domain.order import Order
from order_desk.entrypoints.api import create_app
from order_desk.entrypoints.settings import Config, config
from order_desk.infrastructure.order_store import InMemoryOrderStore
from order_desk.shared.logging import configure_logging


def _demo_orders(now: datetime) -> list[Order]:
    """A handful of orders spread over the last two weeks, one soft-deleted."""
    return [
        Order(name="Office chairs", description="12 ergonomic chairs", entry_date=now - timedelta(hours=2)),
        Order(name="Printer toner", description="Black, 4 cartridges", entry_date=now - timedelta(hours=20)),
        Order(name="Standing desks", description="3 electric desks", entry_date=now - timedelta(days=3)),
        Order(name="Monitors", description="27 inch, 6 units", entry_date=now - timedelta(days=9)),
        Order(name="Cancelled laptops", description="Replaced by order 4", entry_date=now - timedelta(days=1), is_deleted=True),
    ]


def build_app(settings: Config = config) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    holidays = settings.holiday_set()
    logger.info(
        f"Loaded {len(holidays.dates)} holiday(s), recurrence={holidays.recurrence}"
    )

    store = InMemoryOrderStore()
    if settings.SEED_DEMO_ORDERS:
        seeded = store.seed(_demo_orders(datetime.now(UTC)))
        logger.info(f"Seeded {len(seeded)} demo order(s)")

    service = OrderService(
        store=store,
        holidays=holidays,
        recent_window=timedelta(hours=settings.RECENT_WINDOW_HOURS),
    )
    return create_app(service)


def main() -> None:
    app = build_app()
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
