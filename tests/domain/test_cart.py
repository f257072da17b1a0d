"""Unit tests for the Cart and its add-time rules."""

import pytest

from shop.domain.exceptions import ExpiredProductError, InsufficientStockError
from shop.domain.model.cart import Cart
from shop.domain.model.catalog_item import CatalogItem
from shop.domain.model.value_objects import Money


def _items() -> tuple[CatalogItem, CatalogItem, CatalogItem]:
    laptop = CatalogItem(
        id="1", name="Laptop", price=Money.of("1000"),
        stock_quantity=10, weight=2.5, perishable=False,
    )
    tablet = CatalogItem(
        id="2", name="Tablet", price=Money.of("500"),
        stock_quantity=20, weight=0.8, perishable=False,
    )
    cheese = CatalogItem(
        id="3", name="Cheese", price=Money.of("5.2"),
        stock_quantity=100, weight=0.1, perishable=True,
    )
    return laptop, tablet, cheese


class TestCartAdd:

    def test_total_accumulates_across_lines(self):
        laptop, tablet, cheese = _items()
        cart = Cart()

        cart.add(laptop, 1)
        cart.add(tablet, 2)
        cart.add(cheese, 3)

        assert cart.get_total() == Money.of("2015.6")
        assert cart.total == Money.of("2015.6")

    def test_lines_keep_insertion_order(self):
        laptop, tablet, cheese = _items()
        cart = Cart()
        cart.add(cheese, 3)
        cart.add(laptop, 1)
        cart.add(tablet, 2)

        assert [line.item_name for line in cart.lines] == ["Cheese", "Laptop", "Tablet"]

    def test_lines_store_item_id_not_item(self):
        laptop, _, _ = _items()
        cart = Cart()
        cart.add(laptop, 2)

        line = cart.lines[0]
        assert line.item_id == "1"
        assert line.quantity.value == 2
        assert line.line_total == Money.of("2000")

    def test_same_item_twice_makes_two_lines(self):
        laptop, _, _ = _items()
        cart = Cart()
        cart.add(laptop, 1)
        cart.add(laptop, 1)

        assert len(cart.lines) == 2
        assert cart.total == Money.of("2000")

    def test_add_does_not_touch_stock(self):
        laptop, _, _ = _items()
        cart = Cart()
        cart.add(laptop, 4)
        assert laptop.stock_quantity == 10

    def test_add_exact_stock_allowed(self):
        laptop, _, _ = _items()
        cart = Cart()
        cart.add(laptop, 10)
        assert not cart.is_empty()

    def test_lines_view_is_read_only(self):
        laptop, _, _ = _items()
        cart = Cart()
        cart.add(laptop, 1)
        with pytest.raises(AttributeError):
            cart.lines.append(None)


class TestCartAddRejections:

    @pytest.mark.parametrize("quantity", [0, -1, -100])
    def test_non_positive_quantity_rejected_regardless_of_stock(self, quantity):
        laptop, _, _ = _items()
        cart = Cart()
        with pytest.raises(InsufficientStockError, match="Insufficient stock for product: Laptop"):
            cart.add(laptop, quantity)
        assert cart.is_empty()

    @pytest.mark.parametrize("quantity", [1.5, "2", True])
    def test_non_integer_quantity_rejected_as_stock_error(self, quantity):
        laptop, _, _ = _items()
        cart = Cart()
        with pytest.raises(InsufficientStockError, match="must be an integer"):
            cart.add(laptop, quantity)
        assert cart.is_empty()
        assert cart.total == Money.zero()

    def test_more_than_stock_rejected(self):
        laptop, _, _ = _items()
        cart = Cart()
        with pytest.raises(InsufficientStockError):
            cart.add(laptop, 11)
        assert cart.total == Money.zero()

    def test_expired_perishable_rejected_even_with_stock(self):
        _, _, cheese = _items()
        cheese.mark_expired()
        cart = Cart()
        with pytest.raises(ExpiredProductError, match="Cheese has expired"):
            cart.add(cheese, 1)
        assert cart.is_empty()

    def test_expired_flag_ignored_for_non_perishable(self):
        laptop, _, _ = _items()
        laptop.expired = True
        cart = Cart()
        cart.add(laptop, 1)
        assert len(cart.lines) == 1

    def test_stock_checked_before_expiry(self):
        _, _, cheese = _items()
        cheese.mark_expired()
        cart = Cart()
        with pytest.raises(InsufficientStockError):
            cart.add(cheese, 0)


class TestCartPriceSnapshot:

    def test_price_change_after_add_does_not_change_total(self):
        laptop, _, _ = _items()
        cart = Cart()
        cart.add(laptop, 1)

        laptop.set_price(Money.of("1200"))

        assert cart.total == Money.of("1000")
        assert cart.lines[0].unit_price == Money.of("1000")

    def test_price_change_applies_to_later_adds(self):
        laptop, _, _ = _items()
        cart = Cart()
        cart.add(laptop, 1)
        laptop.set_price(Money.of("1200"))
        cart.add(laptop, 1)

        assert cart.total == Money.of("2200")


class TestCartQueries:

    def test_new_cart_is_empty(self):
        cart = Cart()
        assert cart.is_empty()
        assert cart.total == Money.zero()
        assert cart.lines == ()

    def test_clear_resets_lines_and_total(self):
        laptop, _, _ = _items()
        cart = Cart()
        cart.add(laptop, 1)
        cart.clear()
        assert cart.is_empty()
        assert cart.total == Money.zero()
