"""Abstract repository for Order aggregate.

The store keeps a logical ordering in which ``insert`` puts a record in
front.  That ordering is not chronological; callers sort by ``created_at``
for display.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from retail.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Consume the next order number and return its display id.

        Numbers are never reused, even after the newest order is deleted.
        """

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every stored order in store order."""

    @abstractmethod
    def insert(self, order: Order) -> None:
        """Add a new order in front of the existing ones."""

    @abstractmethod
    def update(self, order: Order) -> None:
        """Replace the stored order with the same ID.

        Raises NotFoundError if there is none.
        """

    @abstractmethod
    def delete(self, order_id: str) -> None:
        """Remove an order.  Unknown ids are ignored."""

    def search(self, term: str) -> list[Order]:
        """Orders whose id, customer name or status contains ``term``."""
        return [order for order in self.list_all() if order.matches(term)]
