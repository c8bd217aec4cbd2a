"""JSON-file-backed implementation of UnitOfWork.

The whole store is one file in the data directory::

    store.json  {"last_number": n,
                 "products": [ {product}, ... ],
                 "customers": [ {customer}, ... ],
                 "orders": [ {order}, ... ]}

Entering a block takes the directory lock and loads the file into
in-memory repositories; ``commit()`` writes a temporary sibling and
renames it into place, so a commit lands whole or not at all.

The directory lock is a thread lock plus ``filelock`` on
``<data_dir>/.lock``: separate processes (every CLI call is one) wait
for each other for the whole unit of work.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from filelock import FileLock

from retail.domain.model.customer import Customer
from retail.domain.model.order import Order, OrderLineItem, OrderStatus, order_number
from retail.domain.model.product import Product
from retail.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from retail.domain.repository.unit_of_work import UnitOfWork
from retail.infrastructure.persistence.memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    StoreState,
)

logger = logging.getLogger(__name__)

STORE_FILE = "store.json"
LOCK_FILE = ".lock"

_EMPTY_STORE = {"last_number": 0, "products": [], "customers": [], "orders": []}


class DirectoryLock:
    """Exclusive access to one data directory, across threads and processes."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._mutex = threading.Lock()
        self._file_lock = FileLock(str(data_dir / LOCK_FILE))

    def acquire(self) -> bool:
        self._mutex.acquire()
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            self._file_lock.acquire()
        except BaseException:
            self._mutex.release()
            raise
        return True

    def release(self) -> None:
        try:
            self._file_lock.release()
        finally:
            self._mutex.release()


_LOCKS: dict[Path, DirectoryLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(data_dir: Path) -> DirectoryLock:
    with _LOCKS_GUARD:
        if data_dir not in _LOCKS:
            _LOCKS[data_dir] = DirectoryLock(data_dir)
        return _LOCKS[data_dir]


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir).resolve()
        self._store_path = self._data_dir / STORE_FILE
        self._dir_lock = _lock_for(self._data_dir)
        self._working: StoreState | None = None

    # --- UnitOfWork interface -------------------------------------------------

    def commit(self) -> None:
        state = self._working
        self._write(
            self._store_path,
            {
                "last_number": state.last_order_number,
                "products": [self._product_to_raw(p) for p in state.products],
                "customers": [self._customer_to_raw(c) for c in state.customers],
                "orders": [self._order_to_raw(o) for o in state.orders],
            },
        )
        logger.debug("Committed store in %s", self._data_dir)

    def _lock(self) -> DirectoryLock:
        return self._dir_lock

    def _begin(self) -> None:
        raw = self._read(self._store_path, _EMPTY_STORE)
        orders = [self._order_to_domain(o) for o in raw.get("orders", [])]
        numbers = [n for n in (order_number(o.id) for o in orders) if n is not None]
        state = StoreState(
            products=[self._product_to_domain(p) for p in raw.get("products", [])],
            customers=[self._customer_to_domain(c) for c in raw.get("customers", [])],
            orders=orders,
            last_order_number=max([raw.get("last_number", 0), *numbers]),
        )
        self._working = state
        self.products = InMemoryProductRepository(state)
        self.customers = InMemoryCustomerRepository(state)
        self.orders = InMemoryOrderRepository(state)

    def _discard(self) -> None:
        self._working = None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _product_to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "sku": product.sku,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "active": product.active,
            "created_at": product.created_at.isoformat(),
        }

    @staticmethod
    def _product_to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            sku=raw["sku"],
            price=Money(Decimal(raw["price"]), raw.get("currency", DEFAULT_CURRENCY)),
            stock=raw.get("stock", 0),
            active=raw.get("active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    @staticmethod
    def _customer_to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "name": customer.name,
            "document": customer.document,
            "email": customer.email,
            "phone": customer.phone,
            "active": customer.active,
            "created_at": customer.created_at.isoformat(),
        }

    @staticmethod
    def _customer_to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            name=raw["name"],
            document=raw.get("document", ""),
            email=raw.get("email", ""),
            phone=raw.get("phone", ""),
            active=raw.get("active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    @staticmethod
    def _order_to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "customer_name": order.customer_name,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _order_to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", DEFAULT_CURRENCY)),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            customer_name=raw["customer_name"],
            items=items,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _read(path: Path, default: dict) -> dict:
        if not path.exists():
            return default
        return json.loads(path.read_text(encoding="utf-8"))

    @staticmethod
    def _write(path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
