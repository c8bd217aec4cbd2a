"""Application service: Delete Order use case.

Deleting an order that still holds stock counts as cancelling it first,
so its stock is returned.  A Canceled order already returned its stock
and is removed without touching the catalog.  Unknown ids are a no-op,
which makes the operation safe to repeat.
"""

from __future__ import annotations

import logging

from retail.domain.repository.unit_of_work import UnitOfWork
from retail.domain.service.stock_ledger import StockLedger, order_stock_lines

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: str) -> None:
        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                logger.debug("Delete of unknown order %s ignored", order_id)
                return

            if order.holds_stock:
                StockLedger(uow.products).release(order_stock_lines(order))

            uow.orders.delete(order_id)
            uow.commit()

        logger.info("Order %s deleted", order_id)
