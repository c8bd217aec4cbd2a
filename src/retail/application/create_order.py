"""Application service: Create Order use case.

Orchestrates the flow between repositories, the stock ledger and the
domain model.  Customer and product lookups, the stock reservation and
the order insert all run in one unit of work: if any step fails, no
order is stored and no stock moves.
"""

from __future__ import annotations

import logging

from retail.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from retail.domain.clock import Clock, SystemClock
from retail.domain.exceptions import ValidationError
from retail.domain.model.order import Order, OrderLineItem, OrderStatus
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Quantity
from retail.domain.repository.unit_of_work import UnitOfWork
from retail.domain.service.stock_ledger import StockLedger, StockLine

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork, clock: Clock | None = None) -> None:
        self._uow = uow
        self._clock = clock or SystemClock()

    def handle(
        self,
        customer_id: str,
        status: OrderStatus | str,
        item_specs: list[OrderItemSpec],
    ) -> OrderDTO:
        """Create a new sales order and reserve its stock.

        Steps:
        1. Resolve the customer (snapshot of the display name).
        2. Resolve each product to snapshot its *current* name and price.
        3. Validate quantities, then reserve stock through the ledger.
        4. Number, timestamp and insert the order; commit.
        """
        initial_status = OrderStatus.parse(status)

        with self._uow as uow:
            customer = uow.customers.get_by_id(customer_id)
            if customer is None:
                raise ValidationError("invalid customer")

            if not item_specs:
                raise ValidationError("empty cart")

            products: list[Product] = []
            for spec in item_specs:
                product = uow.products.get_by_id(spec.product_id)
                if product is None:
                    raise ValidationError("invalid product")
                products.append(product)

            line_items = [
                OrderLineItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=Quantity(spec.quantity),
                    unit_price=product.price,  # <-- price snapshot
                )
                for spec, product in zip(item_specs, products)
            ]

            StockLedger(uow.products).reserve(
                StockLine(spec.product_id, spec.quantity) for spec in item_specs
            )

            order = Order.create(
                order_id=uow.orders.next_id(),
                customer_id=customer.id,
                customer_name=customer.name,
                status=initial_status,
                items=line_items,
                created_at=self._clock.now(),
            )
            uow.orders.insert(order)
            uow.commit()

        logger.info(
            "Order %s created for %s (%s, total %s)",
            order.id, order.customer_name, order.status.value, order.total,
        )
        return order_to_dto(order)
