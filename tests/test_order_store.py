"""Tests for InMemoryOrderStore."""

from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime, timedelta

import pytest

from order_desk.domain.order import Order
from order_desk.infrastructure.order_store import InMemoryOrderStore

NOW = datetime(2025, 6, 16, 10, 0, 0, tzinfo=UTC)


def _order(hours_ago: float, **kwargs) -> Order:
    return Order(
        name=kwargs.pop("name", f"{hours_ago}h ago"),
        description="Description",
        entry_date=NOW - timedelta(hours=hours_ago),
        **kwargs,
    )


def test_insert_assigns_increasing_ids() -> None:
    store = InMemoryOrderStore()

    first = store.insert(_order(1))
    second = store.insert(_order(2))

    assert (first.id, second.id) == (1, 2)


def test_insert_leaves_input_untouched() -> None:
    store = InMemoryOrderStore()
    order = _order(1)

    stored = store.insert(order)

    assert order.id is None
    assert stored is not order


def test_query_returns_newest_first_with_inclusive_bound() -> None:
    store = InMemoryOrderStore()
    store.seed([_order(5, name="five"), _order(1, name="one"), _order(3, name="three"), _order(9, name="nine")])

    result = store.query_by_entry_date(NOW - timedelta(hours=5))

    assert [order.name for order in result] == ["one", "three", "five"]


def test_query_excludes_deleted_unless_asked() -> None:
    store = InMemoryOrderStore()
    store.seed([_order(1, name="live"), _order(2, name="gone", is_deleted=True)])
    since = NOW - timedelta(days=1)

    assert [o.name for o in store.query_by_entry_date(since)] == ["live"]
    assert [o.name for o in store.query_by_entry_date(since, include_deleted=True)] == [
        "live",
        "gone",
    ]


def test_empty_store_returns_empty_list() -> None:
    assert InMemoryOrderStore().query_by_entry_date(NOW) == []


def test_concurrent_inserts_get_unique_ids() -> None:
    store = InMemoryOrderStore()

    with ThreadPoolExecutor(max_workers=8) as pool:
        stored = list(pool.map(lambda i: store.insert(_order(i)), range(200)))

    assert sorted(order.id for order in stored) == list(range(1, 201))


def test_mixed_naive_and_aware_dates_raise() -> None:
    """Comparison failures propagate unchanged for the service to wrap."""
    store = InMemoryOrderStore()
    store.insert(_order(1))

    with pytest.raises(TypeError):
        store.query_by_entry_date(datetime(2025, 6, 16, 10, 0, 0))

