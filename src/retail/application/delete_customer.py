"""Application service: Delete Customer use case.

Existing orders keep the customer name they captured; only new orders
need the customer to exist.
"""

from __future__ import annotations

import logging

from retail.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteCustomerHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, customer_id: str) -> None:
        with self._uow as uow:
            if not uow.customers.exists(customer_id):
                return
            uow.customers.delete(customer_id)
            uow.commit()
        logger.info("Customer %s deleted", customer_id)
