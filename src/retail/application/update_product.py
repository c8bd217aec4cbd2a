"""Application service: Update Product use case."""

from __future__ import annotations

from retail.application.dto import ProductDTO, product_to_dto
from retail.domain.exceptions import NotFoundError, ValidationError
from retail.domain.model.value_objects import Money
from retail.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        product_id: str,
        *,
        name: str | None = None,
        sku: str | None = None,
        price: str | None = None,
        active: bool | None = None,
    ) -> ProductDTO:
        """Edit catalog fields of a product.

        This does NOT affect any existing orders; they captured a
        name and price snapshot at creation time.  Stock is changed only
        through SetStockHandler.
        """
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product '{product_id}' not found")

            if name is not None:
                product.rename(name)
            if sku is not None:
                clash = uow.products.get_by_sku(sku)
                if clash is not None and clash.id != product.id:
                    raise ValidationError(f"Product with SKU '{sku.strip()}' already exists")
                product.change_sku(sku)
            if price is not None:
                product.update_price(Money.of(price))
            if active is not None:
                product.active = active

            uow.products.save(product)
            uow.commit()

        return product_to_dto(product)
