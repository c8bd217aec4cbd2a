"""Application service: List Orders use case (query)."""

from __future__ import annotations

from retail.application.dto import OrderDTO, order_to_dto
from retail.domain.repository.unit_of_work import UnitOfWork


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, search: str | None = None) -> list[OrderDTO]:
        """All orders, or those whose id, customer or status contains ``search``.

        Most recent first, whatever order the store keeps them in.
        """
        with self._uow as uow:
            if search and search.strip():
                orders = uow.orders.search(search)
            else:
                orders = uow.orders.list_all()

        # sorted() is stable: equal timestamps keep store order (newest insert first)
        orders = sorted(orders, key=lambda o: o.created_at, reverse=True)
        return [order_to_dto(order) for order in orders]
