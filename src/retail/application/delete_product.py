"""Application service: Delete Product use case.

Orders that reference the product keep their snapshot; releasing their
stock later simply skips the missing product.
"""

from __future__ import annotations

import logging

from retail.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str) -> None:
        with self._uow as uow:
            if uow.products.get_by_id(product_id) is None:
                return
            uow.products.delete(product_id)
            uow.commit()
        logger.info("Product %s deleted", product_id)
