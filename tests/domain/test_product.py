"""Unit tests for the Product aggregate."""

import pytest

from retail.domain.exceptions import ConflictError, ValidationError
from retail.domain.model.product import Product
from retail.domain.model.value_objects import Money
from tests.fakes import make_product


class TestProductCreation:

    def test_happy_path(self):
        product = Product.create(" Mouse ", "MOU-010", Money.of("129.90"), stock=25)
        assert product.name == "Mouse"
        assert product.sku == "MOU-010"
        assert product.stock == 25
        assert product.active is True
        assert product.id  # opaque, generated

    def test_ids_are_unique(self):
        a = Product.create("Mouse", "MOU-010", Money.of("1.00"))
        b = Product.create("Mouse", "MOU-011", Money.of("1.00"))
        assert a.id != b.id

    def test_short_name_rejected(self):
        with pytest.raises(ValidationError, match="name must have at least 2"):
            Product.create("M", "MOU-010", Money.of("1.00"))

    def test_short_sku_rejected(self):
        with pytest.raises(ValidationError, match="SKU must have at least 2"):
            Product.create("Mouse", " x ", Money.of("1.00"))

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create("Mouse", "MOU-010", Money.of("1.00"), stock=-1)


class TestStockMovements:

    def test_withdraw_decrements(self):
        product = make_product(stock=10)
        product.withdraw(4)
        assert product.stock == 6

    def test_withdraw_down_to_zero(self):
        product = make_product(stock=3)
        product.withdraw(3)
        assert product.stock == 0

    def test_withdraw_more_than_stock_rejected(self):
        product = make_product(stock=2)
        with pytest.raises(ConflictError, match="Insufficient stock"):
            product.withdraw(3)
        assert product.stock == 2

    def test_withdraw_from_inactive_rejected(self):
        product = make_product(stock=10, active=False)
        with pytest.raises(ConflictError, match="inactive"):
            product.withdraw(1)

    def test_restock_has_no_ceiling(self):
        product = make_product(stock=10)
        product.restock(1_000_000)
        assert product.stock == 1_000_010

    @pytest.mark.parametrize("qty", [0, -2])
    def test_non_positive_movements_rejected(self, qty):
        product = make_product(stock=10)
        with pytest.raises(ValidationError):
            product.withdraw(qty)
        with pytest.raises(ValidationError):
            product.restock(qty)

    def test_set_stock_rejects_non_integer(self):
        product = make_product()
        with pytest.raises(ValidationError, match="must be an integer"):
            product.set_stock(2.5)


class TestProductEdits:

    def test_update_price_to_zero_allowed(self):
        product = make_product(price="10.00")
        product.update_price(Money.of("0"))
        assert product.price == Money.of("0")

    def test_matches_name_or_sku_case_insensitively(self):
        product = make_product(name="Mechanical Keyboard", sku="KB-001")
        assert product.matches("keyboard")
        assert product.matches("kb-0")
        assert not product.matches("mouse")
