"""Domain service: Stock Ledger.

The ledger is the only code allowed to change ``Product.stock``.  It
guarantees that stock never drops below zero and that a reservation over
several products happens entirely or not at all.

The ledger works on the product repository of an open unit of work, so
the store lock serializes it against every other reservation and release.

The two-phase approach (validate-then-mutate) ensures we never leave
stock in a partially-reserved state if one product fails validation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from retail.domain.exceptions import ConflictError, NotFoundError, ValidationError
from retail.domain.model.order import Order
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Quantity
from retail.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockLine:
    """A demand (or return) of ``qty`` units of one product."""

    product_id: str
    qty: int


def order_stock_lines(order: Order) -> list[StockLine]:
    """The stock an order took at creation, one line per order item."""
    return [StockLine(item.product_id, item.quantity.value) for item in order.items]


class StockLedger:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def reserve(self, lines: Iterable[StockLine]) -> None:
        """Take stock for every line, or for none of them.

        Lines naming the same product are summed first: a cart that asks
        for the same product twice is one combined demand.

          Phase 1 — validate: every quantity is positive, every product
                    exists, is active and has enough stock.
          Phase 2 — mutate and persist each product.
        """
        demand = self._aggregate(lines)

        # Phase 1: load every product and validate against the snapshot
        reservations: list[tuple[Product, int]] = []
        for product_id, qty in demand.items():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise NotFoundError(f"Product '{product_id}' not found")
            if not product.active:
                raise ConflictError(f"Product is inactive: {product.name}")
            if product.stock < qty:
                raise ConflictError(
                    f"Insufficient stock for {product.name} "
                    f"(need {qty}, have {product.stock} available)"
                )
            reservations.append((product, qty))

        # Phase 2: mutate and persist
        for product, qty in reservations:
            product.withdraw(qty)
            self._product_repo.save(product)
            logger.debug("Reserved %d x %s (stock now %d)", qty, product.sku, product.stock)

    def release(self, lines: Iterable[StockLine]) -> None:
        """Return stock for every line.

        Products deleted since the reservation are skipped, as are
        non-positive quantities.
        """
        for line in lines:
            if not Quantity.is_valid(line.qty):
                logger.debug("Skipping release of %r for %s", line.qty, line.product_id)
                continue
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.debug("Skipping release for missing product %s", line.product_id)
                continue
            product.restock(line.qty)
            self._product_repo.save(product)
            logger.debug("Released %d x %s (stock now %d)", line.qty, product.sku, product.stock)

    def set_level(self, product_id: str, stock: int) -> Product:
        """Set an absolute stock level, e.g. after a physical count."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product '{product_id}' not found")
        product.set_stock(stock)
        self._product_repo.save(product)
        logger.info("Stock for %s set to %d", product.sku, stock)
        return product

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _aggregate(lines: Iterable[StockLine]) -> dict[str, int]:
        """Sum quantities per product, keeping first-appearance order."""
        demand: dict[str, int] = {}
        for line in lines:
            if not Quantity.is_valid(line.qty):
                raise ValidationError(
                    f"Quantity must be a positive integer, got {line.qty!r} "
                    f"for product '{line.product_id}'"
                )
            demand[line.product_id] = demand.get(line.product_id, 0) + line.qty
        return demand
