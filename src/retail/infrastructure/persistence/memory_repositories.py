"""In-memory repositories over a shared ``StoreState``.

Both unit-of-work implementations bind these repositories to a private
working copy of the state; they never touch committed data directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from retail.domain.exceptions import NotFoundError
from retail.domain.model.customer import Customer
from retail.domain.model.order import Order, format_order_id
from retail.domain.model.product import Product
from retail.domain.repository.customer_repository import CustomerRepository
from retail.domain.repository.order_repository import OrderRepository
from retail.domain.repository.product_repository import ProductRepository


@dataclass
class StoreState:
    """Everything a store holds.  Lists are kept newest first."""

    products: list[Product] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)
    last_order_number: int = 0


class InMemoryProductRepository(ProductRepository):

    def __init__(self, state: StoreState) -> None:
        self._state = state

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self._state.products:
            if product.id == product_id:
                return product
        return None

    def get_by_sku(self, sku: str) -> Product | None:
        wanted = sku.strip().lower()
        for product in self._state.products:
            if product.sku.lower() == wanted:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._state.products)

    def save(self, product: Product) -> None:
        for i, existing in enumerate(self._state.products):
            if existing.id == product.id:
                self._state.products[i] = product
                return
        self._state.products.insert(0, product)

    def delete(self, product_id: str) -> None:
        self._state.products = [p for p in self._state.products if p.id != product_id]


class InMemoryCustomerRepository(CustomerRepository):

    def __init__(self, state: StoreState) -> None:
        self._state = state

    def get_by_id(self, customer_id: str) -> Customer | None:
        for customer in self._state.customers:
            if customer.id == customer_id:
                return customer
        return None

    def list_all(self) -> list[Customer]:
        return list(self._state.customers)

    def save(self, customer: Customer) -> None:
        for i, existing in enumerate(self._state.customers):
            if existing.id == customer.id:
                self._state.customers[i] = customer
                return
        self._state.customers.insert(0, customer)

    def delete(self, customer_id: str) -> None:
        self._state.customers = [c for c in self._state.customers if c.id != customer_id]


class InMemoryOrderRepository(OrderRepository):

    def __init__(self, state: StoreState) -> None:
        self._state = state

    def next_id(self) -> str:
        self._state.last_order_number += 1
        return format_order_id(self._state.last_order_number)

    def get_by_id(self, order_id: str) -> Order | None:
        for order in self._state.orders:
            if order.id == order_id:
                return order
        return None

    def list_all(self) -> list[Order]:
        return list(self._state.orders)

    def insert(self, order: Order) -> None:
        self._state.orders.insert(0, order)

    def update(self, order: Order) -> None:
        for i, existing in enumerate(self._state.orders):
            if existing.id == order.id:
                self._state.orders[i] = order
                return
        raise NotFoundError(f"Order {order.id} not found")

    def delete(self, order_id: str) -> None:
        self._state.orders = [o for o in self._state.orders if o.id != order_id]
