"""In-process store behind the UnitOfWork interface.

Each block works on a deep copy of the committed state; ``commit()``
swaps the copy in.  Rolling back is simply dropping the copy.
"""

from __future__ import annotations

import copy
import threading

from retail.domain.model.customer import Customer
from retail.domain.model.order import Order, order_number
from retail.domain.model.product import Product
from retail.domain.repository.unit_of_work import UnitOfWork
from retail.infrastructure.persistence.memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    StoreState,
)


class MemoryUnitOfWork(UnitOfWork):
    """Unit of work over state held in this object.

    Safe to share between threads: every access to the working copy
    happens while the store lock is held.
    """

    def __init__(
        self,
        products: list[Product] | None = None,
        customers: list[Customer] | None = None,
        orders: list[Order] | None = None,
    ) -> None:
        orders = list(orders or [])
        numbers = [n for n in (order_number(o.id) for o in orders) if n is not None]
        self._committed = StoreState(
            products=list(products or []),
            customers=list(customers or []),
            orders=orders,
            last_order_number=max(numbers, default=0),
        )
        self._working: StoreState | None = None
        self._mutex = threading.Lock()

    def commit(self) -> None:
        self._committed = self._working
        self._open(copy.deepcopy(self._committed))

    def _lock(self) -> threading.Lock:
        return self._mutex

    def _begin(self) -> None:
        self._open(copy.deepcopy(self._committed))

    def _discard(self) -> None:
        self._working = None

    def _open(self, state: StoreState) -> None:
        self._working = state
        self.products = InMemoryProductRepository(state)
        self.customers = InMemoryCustomerRepository(state)
        self.orders = InMemoryOrderRepository(state)
