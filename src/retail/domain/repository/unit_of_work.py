"""Abstract unit of work: the transaction boundary of the order core.

Usage::

    with uow:
        product = uow.products.get_by_id(pid)
        ...
        uow.commit()

Entering the block takes the store lock and opens a private working copy
of the store; ``commit()`` publishes it.  Leaving the block discards
anything not committed, so an exception raised half-way through an
operation leaves both stock and orders as they were.

The lock is held for the whole block: the stock check-then-decrement and
the order write can never interleave with another caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from retail.domain.repository.customer_repository import CustomerRepository
from retail.domain.repository.order_repository import OrderRepository
from retail.domain.repository.product_repository import ProductRepository


class StoreLock(Protocol):

    def acquire(self) -> bool: ...

    def release(self) -> None: ...


class UnitOfWork(ABC):

    products: ProductRepository
    customers: CustomerRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        lock = self._lock()
        lock.acquire()
        try:
            self._begin()
        except BaseException:
            lock.release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self._discard()
        finally:
            self._lock().release()

    @abstractmethod
    def commit(self) -> None:
        """Publish every change made since the block was entered."""

    # --- Hooks for concrete stores --------------------------------------------

    @abstractmethod
    def _lock(self) -> StoreLock:
        """The lock shared by every unit of work over the same store."""

    @abstractmethod
    def _begin(self) -> None:
        """Open a working copy and bind the repositories to it."""

    @abstractmethod
    def _discard(self) -> None:
        """Drop the working copy; uncommitted changes are lost."""
