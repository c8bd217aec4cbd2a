"""Integration tests for the catalog and customer directory use cases."""

import pytest

from retail.application.add_customer import AddCustomerHandler
from retail.application.add_product import AddProductHandler
from retail.application.delete_customer import DeleteCustomerHandler
from retail.application.delete_product import DeleteProductHandler
from retail.application.list_customers import ListCustomersHandler
from retail.application.list_products import ListProductsHandler
from retail.application.set_stock import SetStockHandler
from retail.application.update_customer import UpdateCustomerHandler
from retail.application.update_product import UpdateProductHandler
from retail.domain.exceptions import NotFoundError, ValidationError
from retail.infrastructure.persistence.memory_unit_of_work import MemoryUnitOfWork
from tests.fakes import FakeClock, make_customer, make_order, make_product, stock_of


class TestAddProduct:

    def test_adds_product_with_opening_stock(self):
        uow = MemoryUnitOfWork()
        dto = AddProductHandler(uow, clock=FakeClock()).handle(
            name="Mechanical Keyboard", sku="TEC-001", price="199.90", stock=12
        )
        assert dto.price == "$199.90"
        assert dto.stock == 12
        assert dto.active is True
        assert stock_of(uow, dto.id) == 12

    def test_duplicate_sku_rejected(self):
        uow = MemoryUnitOfWork(products=[make_product(sku="TEC-001")])
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(uow).handle(name="Other", sku="tec-001", price="1.00")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            AddProductHandler(MemoryUnitOfWork()).handle(name="Mouse", sku="MS-1", price="-1")


class TestUpdateProduct:

    def test_updates_given_fields_only(self):
        uow = MemoryUnitOfWork(products=[make_product("p1", name="Keyboard", price="10.00", stock=5)])
        dto = UpdateProductHandler(uow).handle("p1", price="12.50", active=False)
        assert dto.name == "Keyboard"
        assert dto.price == "$12.50"
        assert dto.active is False
        assert dto.stock == 5

    def test_sku_clash_rejected(self):
        uow = MemoryUnitOfWork(products=[
            make_product("p1", sku="KB-001"),
            make_product("p2", sku="MS-010"),
        ])
        with pytest.raises(ValidationError, match="already exists"):
            UpdateProductHandler(uow).handle("p2", sku="kb-001")

    def test_unknown_product_rejected(self):
        with pytest.raises(NotFoundError):
            UpdateProductHandler(MemoryUnitOfWork()).handle("ghost", name="Anything")


class TestSetStock:

    def test_sets_level(self):
        uow = MemoryUnitOfWork(products=[make_product("p1", stock=5)])
        assert SetStockHandler(uow).handle("p1", 40).stock == 40
        assert stock_of(uow, "p1") == 40

    def test_negative_level_rejected_and_nothing_written(self):
        uow = MemoryUnitOfWork(products=[make_product("p1", stock=5)])
        with pytest.raises(ValidationError):
            SetStockHandler(uow).handle("p1", -3)
        assert stock_of(uow, "p1") == 5


class TestDeleteAndListProducts:

    def test_delete_is_idempotent(self):
        uow = MemoryUnitOfWork(products=[make_product("p1")])
        DeleteProductHandler(uow).handle("p1")
        DeleteProductHandler(uow).handle("p1")
        assert ListProductsHandler(uow).handle() == []

    def test_search_by_name_or_sku(self):
        uow = MemoryUnitOfWork(products=[
            make_product("p1", name="Mechanical Keyboard", sku="TEC-001"),
            make_product("p2", name="Gaming Mouse", sku="MOU-010"),
        ])
        handler = ListProductsHandler(uow)
        assert [p.id for p in handler.handle("keyboard")] == ["p1"]
        assert [p.id for p in handler.handle("mou")] == ["p2"]
        assert len(handler.handle()) == 2


class TestCustomers:

    def test_add_and_list(self):
        uow = MemoryUnitOfWork()
        add = AddCustomerHandler(uow, clock=FakeClock())
        ana = add.handle("Ana Silva", document="123.456.789-00", email="ana@email.com")
        add.handle("João Pedro", email="joao@email.com")

        handler = ListCustomersHandler(uow)
        assert [c.name for c in handler.handle()] == ["João Pedro", "Ana Silva"]
        assert [c.id for c in handler.handle("123.456")] == [ana.id]
        assert [c.name for c in handler.handle("JOAO@")] == ["João Pedro"]

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Customer name is required"):
            AddCustomerHandler(MemoryUnitOfWork()).handle("  ")

    def test_exists(self):
        uow = MemoryUnitOfWork()
        dto = AddCustomerHandler(uow).handle("Ana Silva")
        with uow:
            assert uow.customers.exists(dto.id)
            assert not uow.customers.exists("nobody")

    def test_update_given_fields_only(self):
        uow = MemoryUnitOfWork(customers=[make_customer("c1", "Ana Silva")])
        dto = UpdateCustomerHandler(uow).handle("c1", name=" Ana S. Costa ", phone="(11) 99999-1111", active=False)
        assert dto.name == "Ana S. Costa"
        assert dto.phone == "(11) 99999-1111"
        assert dto.email == "c1@example.com"
        assert dto.active is False

    def test_update_unknown_customer_rejected(self):
        with pytest.raises(NotFoundError, match="not found"):
            UpdateCustomerHandler(MemoryUnitOfWork()).handle("ghost", name="Anyone")

    def test_update_to_blank_name_rejected_and_nothing_written(self):
        uow = MemoryUnitOfWork(customers=[make_customer("c1", "Ana Silva")])
        with pytest.raises(ValidationError):
            UpdateCustomerHandler(uow).handle("c1", name=" ", email="new@example.com")
        assert ListCustomersHandler(uow).handle()[0].email == "c1@example.com"

    def test_delete_is_idempotent_and_keeps_orders(self):
        uow = MemoryUnitOfWork(customers=[make_customer("c1")], orders=[make_order("ORD-001")])
        DeleteCustomerHandler(uow).handle("c1")
        DeleteCustomerHandler(uow).handle("c1")
        assert ListCustomersHandler(uow).handle() == []
        with uow:
            assert uow.orders.get_by_id("ORD-001").customer_name == "Ana Silva"
