"""Application service: List Receivables use case (query).

Receivables are not stored.  Each order that is not Canceled is money
owed by its customer: received once the order is Paid, pending before.
"""

from __future__ import annotations

from retail.application.dto import TIMESTAMP_FORMAT, ReceivableDTO
from retail.domain.model.order import Order, OrderStatus
from retail.domain.repository.unit_of_work import UnitOfWork

RECEIVABLE_PREFIX = "CR"
RECEIVED = "RECEIVED"
PENDING = "PENDING"


class ListReceivablesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ReceivableDTO]:
        """One receivable per live order, most recent first."""
        with self._uow as uow:
            orders = uow.orders.list_all()

        orders = sorted(orders, key=lambda o: o.created_at, reverse=True)
        return [_to_receivable(o) for o in orders if o.status != OrderStatus.CANCELED]


def _to_receivable(order: Order) -> ReceivableDTO:
    return ReceivableDTO(
        id=f"{RECEIVABLE_PREFIX}-{order.id}",
        order_id=order.id,
        customer=order.customer_name,
        description=f"Sale {order.id}",
        due_date=order.created_at.date().isoformat(),
        amount=str(order.total),
        status=RECEIVED if order.status == OrderStatus.PAID else PENDING,
        created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
    )
