"""Test doubles and builders shared by the test suite.

The in-memory unit of work is a production class; the doubles here only
add control over time and a way to make a write fail half-way.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from retail.domain.clock import Clock
from retail.domain.model.customer import Customer
from retail.domain.model.order import Order, OrderLineItem, OrderStatus
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money, Quantity
from retail.infrastructure.persistence.memory_repositories import (
    InMemoryOrderRepository,
    StoreState,
)
from retail.infrastructure.persistence.memory_unit_of_work import MemoryUnitOfWork

START = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock(Clock):
    """Returns ``start``, then advances by ``step`` on every call."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(minutes=1)) -> None:
        self._now = start
        self._step = step

    def now(self) -> datetime:
        current = self._now
        self._now = self._now + self._step
        return current

    def set(self, moment: datetime) -> None:
        self._now = moment


class BrokenInsertOrderRepository(InMemoryOrderRepository):
    """Fails every insert, as a full disk or lost connection would."""

    def insert(self, order: Order) -> None:
        raise OSError("disk full")


class BrokenInsertUnitOfWork(MemoryUnitOfWork):

    def _open(self, state: StoreState) -> None:
        super()._open(state)
        self.orders = BrokenInsertOrderRepository(state)


def make_product(
    product_id: str = "p1",
    name: str = "Keyboard",
    sku: str = "KB-001",
    price: str = "10.00",
    stock: int = 10,
    active: bool = True,
) -> Product:
    return Product(
        id=product_id,
        name=name,
        sku=sku,
        price=Money.of(price),
        stock=stock,
        active=active,
        created_at=START,
    )


def make_customer(customer_id: str = "c1", name: str = "Ana Silva") -> Customer:
    return Customer(id=customer_id, name=name, email=f"{customer_id}@example.com", created_at=START)


def stock_of(uow: MemoryUnitOfWork, product_id: str) -> int:
    with uow:
        return uow.products.get_by_id(product_id).stock


def make_order(
    order_id: str = "ORD-001",
    created_at: datetime = START,
    status: OrderStatus = OrderStatus.PENDING,
    product_id: str = "p1",
    qty: int = 1,
) -> Order:
    return Order(
        id=order_id,
        customer_id="c1",
        customer_name="Ana Silva",
        items=[OrderLineItem(product_id, "Keyboard", Quantity(qty), Money.of("10.00"))],
        status=status,
        created_at=created_at,
    )
