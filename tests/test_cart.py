import pytest

from cart import Cart, Wishlist
from errors import InvalidInputError, NotFoundError
from schemas import ProductPatch


@pytest.fixture
def bananas(store):
    return store.get_product("1")


@pytest.fixture
def milk(store):
    return store.get_product("6")


def test_add_same_product_increments_quantity(bananas):
    cart = Cart("c1")
    cart.add_to_cart(bananas, 2)
    cart.add_to_cart(bananas, 3)

    assert len(cart) == 1
    assert cart.items[0].quantity == 5


def test_totals(bananas, milk):
    cart = Cart("c1")
    cart.add_to_cart(bananas, 2)
    cart.add_to_cart(milk, 1)

    assert cart.get_total_items() == 3
    assert cart.get_total_price() == pytest.approx(89 * 2 + 75)


def test_update_quantity_to_zero_removes_line(bananas, milk):
    cart = Cart("c1")
    cart.add_to_cart(bananas, 2)
    cart.add_to_cart(milk, 1)

    assert cart.update_quantity("1", 0) is None
    assert [i.product.id for i in cart.items] == ["6"]
    assert cart.get_total_price() == pytest.approx(75)

    cart.update_quantity("6", -4)
    assert len(cart) == 0
    assert cart.get_total_items() == 0


def test_update_quantity_sets_value_and_ignores_unknown(bananas):
    cart = Cart("c1")
    cart.add_to_cart(bananas)
    assert cart.update_quantity("1", 7).quantity == 7
    assert cart.update_quantity("42", 3) is None
    assert cart.get_total_items() == 7


def test_add_rejects_non_positive_quantity(bananas):
    with pytest.raises(InvalidInputError):
        Cart("c1").add_to_cart(bananas, 0)


def test_remove_and_clear(bananas, milk):
    cart = Cart("c1")
    cart.add_to_cart(bananas)
    cart.add_to_cart(milk)

    assert cart.remove_from_cart("1") is True
    assert cart.remove_from_cart("1") is False
    cart.clear_cart()
    assert cart.items == []


def test_cart_keeps_price_from_insertion(store, alice):
    store.add_to_cart(alice.id, "1", 1)
    store.update_product("1", ProductPatch(price=120))

    line = store.cart_for(alice.id).items[0]
    assert line.product.price == 89
    assert store.cart_for(alice.id).get_total_price() == 89


def test_store_add_to_cart_unknown_product(store, alice):
    with pytest.raises(NotFoundError):
        store.add_to_cart(alice.id, "999")


def test_carts_are_per_customer(store):
    store.add_to_cart("a", "1", 2)
    store.add_to_cart("b", "6", 1)
    assert store.cart_for("a").get_total_items() == 2
    assert [i.product.id for i in store.cart_for("b").items] == ["6"]


def test_wishlist_is_deduplicated(clock, bananas):
    wishlist = Wishlist("c1", clock)
    wishlist.add_to_wishlist(bananas)
    clock.advance(minutes=5)
    wishlist.add_to_wishlist(bananas)

    assert len(wishlist) == 1
    assert wishlist.items[0].added_at == clock.now.replace(minute=0)


def test_wishlist_membership(clock, bananas, milk):
    wishlist = Wishlist("c1", clock)
    wishlist.add_to_wishlist(bananas)
    wishlist.add_to_wishlist(milk)

    assert wishlist.is_in_wishlist("6")
    assert wishlist.remove_from_wishlist("6") is True
    assert not wishlist.is_in_wishlist("6")
    wishlist.clear_wishlist()
    assert len(wishlist) == 0


def test_returned_cart_lines_are_detached(bananas):
    cart = Cart("c1")
    line = cart.add_to_cart(bananas, 2)
    line.quantity = 40
    line.product.price = 1

    updated = cart.update_quantity("1", 3)
    updated.quantity = 99

    assert cart.items[0].quantity == 3
    assert cart.items[0].product.price == 89
    assert cart.get_total_price() == pytest.approx(89 * 3)


def test_returned_wishlist_entries_are_detached(clock, bananas):
    wishlist = Wishlist("c1", clock)
    wishlist.add_to_wishlist(bananas).product.name = "Renamed"
    wishlist.add_to_wishlist(bananas).product.price = 1

    assert wishlist.items[0].product.name == "Fresh Bananas"
    assert wishlist.items[0].product.price == 89


def test_store_add_to_cart_returns_copy(store, alice):
    store.add_to_cart(alice.id, "1", 1).quantity = 12
    assert store.cart_for(alice.id).get_total_items() == 1
