"""Application service: Show Order use case (query)."""

from __future__ import annotations

from retail.application.dto import OrderDTO, order_to_dto
from retail.domain.exceptions import NotFoundError
from retail.domain.repository.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: str) -> OrderDTO:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order {order_id} not found")
        return order_to_dto(order)
