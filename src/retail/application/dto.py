"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from retail.domain.model.customer import Customer
from retail.domain.model.order import Order
from retail.domain.model.product import Product

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    customer_name: str
    status: str
    items: list[OrderLineItemDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    sku: str
    price: str
    stock: int
    active: bool


@dataclass(frozen=True)
class CustomerDTO:
    id: str
    name: str
    document: str
    email: str
    phone: str
    active: bool


@dataclass(frozen=True)
class DailySalesDTO:
    day: str  # ISO date
    total: str


@dataclass(frozen=True)
class SalesSummaryDTO:
    """Output: the headline figures of the dashboard page."""

    total_products: int
    total_customers: int
    total_orders: int
    revenue: str
    daily_sales: list[DailySalesDTO]
    recent_orders: list[OrderDTO]


@dataclass(frozen=True)
class ReceivableDTO:
    """Output: money owed for one order."""

    id: str
    order_id: str
    customer: str
    description: str
    due_date: str  # ISO date
    amount: str
    status: str  # RECEIVED or PENDING
    created_at: str


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        customer_name=order.customer_name,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        sku=product.sku,
        price=str(product.price),
        stock=product.stock,
        active=product.active,
    )


def customer_to_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id,
        name=customer.name,
        document=customer.document,
        email=customer.email,
        phone=customer.phone,
        active=customer.active,
    )
