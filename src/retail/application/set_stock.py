"""Application service: Set Stock use case.

Replaces the catalog form's direct stock edit: the new level goes
through the stock ledger like every other stock movement.
"""

from __future__ import annotations

from retail.application.dto import ProductDTO, product_to_dto
from retail.domain.repository.unit_of_work import UnitOfWork
from retail.domain.service.stock_ledger import StockLedger


class SetStockHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str, stock: int) -> ProductDTO:
        """Set the absolute stock level of a product."""
        with self._uow as uow:
            product = StockLedger(uow.products).set_level(product_id, stock)
            uow.commit()
        return product_to_dto(product)
