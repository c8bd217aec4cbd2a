"""Application service: List Customers use case (query)."""

from __future__ import annotations

from retail.application.dto import CustomerDTO, customer_to_dto
from retail.domain.repository.unit_of_work import UnitOfWork


class ListCustomersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, search: str | None = None) -> list[CustomerDTO]:
        """Every customer, or those whose name, document or email contains ``search``."""
        with self._uow as uow:
            customers = uow.customers.list_all()
        if search and search.strip():
            customers = [c for c in customers if c.matches(search)]
        return [customer_to_dto(c) for c in customers]
