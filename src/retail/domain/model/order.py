"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.  Its status may
move freely between Pending, Paid and Canceled; the stock side effects of a
move are coordinated by the application handlers, not by the Order itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from retail.domain.exceptions import ValidationError
from retail.domain.model.value_objects import Money, Quantity

ORDER_ID_PREFIX = "ORD"


class OrderStatus(Enum):
    PENDING = "Pending"
    PAID = "Paid"
    CANCELED = "Canceled"

    @staticmethod
    def parse(value: OrderStatus | str) -> OrderStatus:
        """Accept an OrderStatus or its name/value in any letter case."""
        if isinstance(value, OrderStatus):
            return value
        wanted = (value or "").strip().lower()
        for status in OrderStatus:
            if wanted in (status.value.lower(), status.name.lower()):
                return status
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(f"Unknown order status '{value}' (expected one of {allowed})")


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product name and price at order-creation time.

    Frozen: later catalog edits never reach an existing order.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


def format_order_id(number: int) -> str:
    """Render a sequence number as a display id, e.g. ``ORD-007``."""
    return f"{ORDER_ID_PREFIX}-{number:03d}"


def order_number(order_id: str) -> int | None:
    """Inverse of ``format_order_id``; None for ids in any other shape."""
    prefix, _, digits = order_id.partition("-")
    if prefix != ORDER_ID_PREFIX or not digits.isdigit():
        return None
    return int(digits)


@dataclass
class Order:
    """Aggregate root for sales orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str
    customer_id: str
    customer_name: str
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer_id: str,
        customer_name: str,
        status: OrderStatus,
        items: list[OrderLineItem],
        created_at: datetime,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_id:
            raise ValidationError("invalid customer")
        if not items:
            raise ValidationError("empty cart")
        return Order(
            id=order_id,
            customer_id=customer_id,
            customer_name=customer_name,
            items=list(items),
            status=status,
            created_at=created_at,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> OrderStatus:
        """Move to ``new_status`` and return the previous status.

        Every transition is allowed, including to the current status.
        """
        previous = self.status
        self.status = new_status
        return previous

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return Money.total([item.line_total for item in self.items])

    @property
    def holds_stock(self) -> bool:
        """True while the order's items count against product stock.

        A Canceled order has already returned its stock.
        """
        return self.status != OrderStatus.CANCELED

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on id, customer name or status."""
        needle = term.strip().lower()
        return (
            needle in self.id.lower()
            or needle in self.customer_name.lower()
            or needle in self.status.value.lower()
        )
