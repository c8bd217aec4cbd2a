"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from retail.application.dto import ProductDTO, product_to_dto
from retail.domain.clock import Clock, SystemClock
from retail.domain.exceptions import ValidationError
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from retail.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork, clock: Clock | None = None) -> None:
        self._uow = uow
        self._clock = clock or SystemClock()

    def handle(
        self,
        name: str,
        sku: str,
        price: str,
        stock: int = 0,
        active: bool = True,
    ) -> ProductDTO:
        """Add a new product to the catalog with an opening stock level."""
        with self._uow as uow:
            if sku and uow.products.get_by_sku(sku) is not None:
                raise ValidationError(f"Product with SKU '{sku.strip()}' already exists")

            product = Product.create(
                name=name,
                sku=sku,
                price=Money.of(price),
                stock=stock,
                active=active,
                created_at=self._clock.now(),
            )
            uow.products.save(product)
            uow.commit()

        logger.info("Product %s '%s' added with stock %d", product.sku, product.name, product.stock)
        return product_to_dto(product)
