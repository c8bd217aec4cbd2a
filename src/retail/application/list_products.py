"""Application service: List Products use case (query)."""

from __future__ import annotations

from retail.application.dto import ProductDTO, product_to_dto
from retail.domain.repository.unit_of_work import UnitOfWork


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, search: str | None = None) -> list[ProductDTO]:
        """Every product, or those whose name or SKU contains ``search``."""
        with self._uow as uow:
            products = uow.products.list_all()
        if search and search.strip():
            products = [p for p in products if p.matches(search)]
        return [product_to_dto(p) for p in products]
