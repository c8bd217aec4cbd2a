"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are deactivated, and removed from the catalog.
Orders only ever hold a snapshot of a product's name and price.

The ``stock`` counter is special: only the StockLedger domain service may
change it, through ``withdraw``, ``restock`` and ``set_stock``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from retail.domain.exceptions import ConflictError, ValidationError
from retail.domain.model.value_objects import Money, Quantity

MIN_NAME_LENGTH = 2
MIN_SKU_LENGTH = 2


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``stock`` is an integer and never drops below zero
    - ``price`` is a non-negative Money (enforced by Money itself)
    """

    id: str
    name: str
    sku: str
    price: Money
    stock: int = 0
    active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        sku: str,
        price: Money,
        stock: int = 0,
        active: bool = True,
        created_at: datetime | None = None,
    ) -> Product:
        """Create a new catalog entry, enforcing the catalog form rules."""
        product = Product(
            id=uuid4().hex,
            name=_validated_text(name, "name", MIN_NAME_LENGTH),
            sku=_validated_text(sku, "SKU", MIN_SKU_LENGTH),
            price=price,
            active=active,
            created_at=created_at or datetime.now(timezone.utc),
        )
        product.set_stock(stock)
        return product

    # --- Catalog edits --------------------------------------------------------

    def rename(self, name: str) -> None:
        self.name = _validated_text(name, "name", MIN_NAME_LENGTH)

    def change_sku(self, sku: str) -> None:
        self.sku = _validated_text(sku, "SKU", MIN_SKU_LENGTH)

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price

    # --- Stock movements (StockLedger only) -----------------------------------

    def withdraw(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock for a reservation."""
        _require_positive(quantity, "Withdraw")
        if not self.active:
            raise ConflictError(f"Product is inactive: {self.name}")
        if quantity > self.stock:
            raise ConflictError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.stock} available)"
            )
        self.stock -= quantity

    def restock(self, quantity: int) -> None:
        """Return ``quantity`` units to stock.  There is no upper bound."""
        _require_positive(quantity, "Restock")
        self.stock += quantity

    def set_stock(self, stock: int) -> None:
        if isinstance(stock, bool) or not isinstance(stock, int):
            raise ValidationError(
                f"Stock must be an integer, got {type(stock).__name__}"
            )
        if stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {stock}")
        self.stock = stock

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name or SKU."""
        needle = term.strip().lower()
        return needle in self.name.lower() or needle in self.sku.lower()


def _validated_text(value: str, label: str, min_length: int) -> str:
    cleaned = (value or "").strip()
    if len(cleaned) < min_length:
        raise ValidationError(
            f"Product {label} must have at least {min_length} characters"
        )
    return cleaned


def _require_positive(quantity: int, action: str) -> None:
    if not Quantity.is_valid(quantity):
        raise ValidationError(f"{action} quantity must be a positive integer")
