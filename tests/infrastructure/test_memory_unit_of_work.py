"""Tests for the in-memory unit of work's transaction semantics."""

import pytest

from retail.domain.exceptions import NotFoundError
from retail.infrastructure.persistence.memory_unit_of_work import MemoryUnitOfWork
from tests.fakes import make_customer, make_order, make_product, stock_of


def test_committed_changes_are_visible_to_the_next_block():
    uow = MemoryUnitOfWork(products=[make_product("p1", stock=10)])
    with uow:
        uow.products.get_by_id("p1").withdraw(4)
        uow.commit()
    assert stock_of(uow, "p1") == 6


def test_uncommitted_changes_are_discarded():
    uow = MemoryUnitOfWork(products=[make_product("p1", stock=10)])
    with uow:
        uow.products.get_by_id("p1").withdraw(4)
    assert stock_of(uow, "p1") == 10


def test_exception_rolls_back_and_propagates():
    uow = MemoryUnitOfWork(customers=[make_customer("c1")])
    with pytest.raises(RuntimeError):
        with uow:
            uow.customers.save(make_customer("c2"))
            raise RuntimeError("boom")
    with uow:
        assert not uow.customers.exists("c2")


def test_changes_after_commit_need_another_commit():
    uow = MemoryUnitOfWork(products=[make_product("p1", stock=10)])
    with uow:
        uow.products.get_by_id("p1").withdraw(1)
        uow.commit()
        uow.products.get_by_id("p1").withdraw(1)
    assert stock_of(uow, "p1") == 9


def test_seed_objects_are_not_shared_with_the_store():
    product = make_product("p1", stock=10)
    uow = MemoryUnitOfWork(products=[product])
    with uow:
        uow.products.get_by_id("p1").withdraw(3)
        uow.commit()
    assert product.stock == 10


def test_order_update_of_unknown_order_rejected():
    uow = MemoryUnitOfWork()
    with pytest.raises(NotFoundError):
        with uow:
            uow.orders.update(make_order("ORD-001"))


def test_sequence_continues_after_seeded_orders():
    uow = MemoryUnitOfWork(orders=[make_order("ORD-007")])
    with uow:
        assert uow.orders.next_id() == "ORD-008"
