"""Integration tests for the SalesSummary use case."""

from datetime import datetime, timedelta, timezone

from retail.application.create_order import CreateOrderHandler
from retail.application.dto import OrderItemSpec
from retail.application.sales_summary import SalesSummaryHandler
from retail.infrastructure.persistence.memory_unit_of_work import MemoryUnitOfWork
from tests.fakes import FakeClock, make_customer, make_product

TODAY = datetime(2024, 5, 10, 15, 0, tzinfo=timezone.utc)


def _setup():
    uow = MemoryUnitOfWork(
        products=[make_product("p1", price="10.00", stock=100), make_product("p2", sku="MS-1")],
        customers=[make_customer("c1")],
    )
    clock = FakeClock()
    create = CreateOrderHandler(uow, clock=clock)

    clock.set(TODAY - timedelta(days=2))
    create.handle("c1", "Paid", [OrderItemSpec("p1", 3)])  # $30, two days ago
    clock.set(TODAY - timedelta(days=9))
    create.handle("c1", "Paid", [OrderItemSpec("p1", 1)])  # $10, outside the chart
    clock.set(TODAY - timedelta(hours=1))
    create.handle("c1", "Pending", [OrderItemSpec("p1", 5)])  # not revenue
    create.handle("c1", "Paid", [OrderItemSpec("p1", 2)])  # $20, today
    create.handle("c1", "Canceled", [OrderItemSpec("p1", 1)])  # not revenue

    return SalesSummaryHandler(uow, clock=FakeClock(start=TODAY))


def test_counts_and_revenue():
    summary = _setup().handle()
    assert summary.total_products == 2
    assert summary.total_customers == 1
    assert summary.total_orders == 5
    assert summary.revenue == "$60.00"


def test_daily_sales_cover_last_seven_days():
    summary = _setup().handle()
    days = [point.day for point in summary.daily_sales]
    assert days[0] == "2024-05-04"
    assert days[-1] == "2024-05-10"
    totals = {point.day: point.total for point in summary.daily_sales}
    assert totals["2024-05-08"] == "$30.00"
    assert totals["2024-05-10"] == "$20.00"
    assert totals["2024-05-09"] == "$0.00"


def test_recent_orders_are_the_latest_four():
    summary = _setup().handle()
    assert [o.id for o in summary.recent_orders] == ["ORD-005", "ORD-004", "ORD-003", "ORD-001"]


def test_empty_store():
    summary = SalesSummaryHandler(MemoryUnitOfWork(), clock=FakeClock(start=TODAY)).handle()
    assert summary.total_orders == 0
    assert summary.revenue == "$0.00"
    assert len(summary.daily_sales) == 7
    assert summary.recent_orders == []
