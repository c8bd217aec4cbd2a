"""Application service: Update Order Status use case.

Any status may move to any other status.  Only one edge has a side
effect: moving *into* Canceled from Pending or Paid returns the order's
stock.  Moving back out of Canceled does not take the stock again, so a
later cancel or delete of that order returns stock a second time.  This
asymmetry is long-standing observed behavior and is kept on purpose.
"""

from __future__ import annotations

import logging

from retail.domain.exceptions import NotFoundError
from retail.domain.model.order import OrderStatus
from retail.domain.repository.unit_of_work import UnitOfWork
from retail.domain.service.stock_ledger import StockLedger, order_stock_lines

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: str, new_status: OrderStatus | str) -> None:
        status = OrderStatus.parse(new_status)

        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise NotFoundError(f"Order {order_id} not found")

            if status == OrderStatus.CANCELED and order.holds_stock:
                StockLedger(uow.products).release(order_stock_lines(order))
                logger.info("Order %s canceled, stock released", order_id)

            previous = order.change_status(status)
            uow.orders.update(order)
            uow.commit()

        logger.info("Order %s status %s -> %s", order_id, previous.value, status.value)
