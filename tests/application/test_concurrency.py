"""Concurrent callers against one store must never oversell."""

from concurrent.futures import ThreadPoolExecutor

from retail.application.create_order import CreateOrderHandler
from retail.application.dto import OrderItemSpec
from retail.application.list_orders import ListOrdersHandler
from retail.application.update_order_status import UpdateOrderStatusHandler
from retail.domain.exceptions import ConflictError
from retail.infrastructure.persistence.memory_unit_of_work import MemoryUnitOfWork
from tests.fakes import make_customer, make_product, stock_of


def _buy(uow: MemoryUnitOfWork, product_id: str, qty: int) -> str:
    try:
        CreateOrderHandler(uow).handle("c1", "Pending", [OrderItemSpec(product_id, qty)])
    except ConflictError:
        return "conflict"
    return "ok"


def test_concurrent_orders_never_oversell():
    uow = MemoryUnitOfWork(products=[make_product("p1", stock=5)], customers=[make_customer("c1")])

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: _buy(uow, "p1", 1), range(20)))

    assert results.count("ok") == 5
    assert results.count("conflict") == 15
    assert stock_of(uow, "p1") == 0
    assert len(ListOrdersHandler(uow).handle()) == 5


def test_concurrent_ids_are_unique():
    uow = MemoryUnitOfWork(products=[make_product("p1", stock=1000)], customers=[make_customer("c1")])

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: _buy(uow, "p1", 1), range(50)))

    ids = [o.id for o in ListOrdersHandler(uow).handle()]
    assert len(ids) == 50
    assert len(set(ids)) == 50
    assert stock_of(uow, "p1") == 950


def test_concurrent_cancels_release_once():
    uow = MemoryUnitOfWork(products=[make_product("p1", stock=10)], customers=[make_customer("c1")])
    dto = CreateOrderHandler(uow).handle("c1", "Pending", [OrderItemSpec("p1", 4)])
    handler = UpdateOrderStatusHandler(uow)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda _: handler.handle(dto.id, "Canceled"), range(10)))

    assert stock_of(uow, "p1") == 10
