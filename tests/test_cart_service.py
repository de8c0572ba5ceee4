import pytest

from storefront.services import CartService, InvalidArgument
from storefront.utils.latency import SimulatedLatency


def test_add_same_product_twice_increments_quantity(services):
    cart = services.cart
    cart.add_item(1)
    items = cart.add_item(1, 3)
    assert len(items) == 1
    assert items[0].product_id == 1
    assert items[0].quantity == 4
    assert items[0].saved_for_later is False


def test_add_has_no_service_level_upper_bound(services):
    services.cart.add_item(1, 8)
    items = services.cart.add_item(1, 8)
    assert items[0].quantity == 16


def test_cart_count_excludes_saved_for_later(services):
    cart = services.cart
    cart.add_item(1, 2)
    assert cart.get_cart_count() == 2
    cart.save_for_later(1)
    assert cart.get_cart_count() == 0
    cart.add_item(2, 1)
    assert cart.get_cart_count() == 1


def test_save_for_later_and_move_back_keep_single_entry(services):
    cart = services.cart
    cart.add_item(5, 2)
    items = cart.save_for_later(5)
    assert [(i.product_id, i.saved_for_later) for i in items] == [(5, True)]
    items = cart.move_to_cart(5)
    assert [(i.product_id, i.saved_for_later, i.quantity) for i in items] == [(5, False, 2)]
    assert [i.product_id for i in cart.get_active_items()] == [5]
    assert cart.get_saved_items() == []


def test_update_quantity_sets_value_and_ignores_unknown(services):
    cart = services.cart
    cart.add_item(1, 1)
    items = cart.update_quantity(1, 7)
    assert items[0].quantity == 7
    items = cart.update_quantity(99, 3)
    assert [i.product_id for i in items] == [1]


def test_remove_item_is_idempotent(services):
    cart = services.cart
    cart.add_item(1)
    cart.add_item(2)
    assert [i.product_id for i in cart.remove_item(1)] == [2]
    assert [i.product_id for i in cart.remove_item(1)] == [2]


def test_clear_cart_drops_saved_items_too(services):
    cart = services.cart
    cart.add_item(1)
    cart.add_item(2)
    cart.save_for_later(2)
    assert cart.clear_cart() == []
    assert cart.get_cart_items() == []
    assert cart.get_cart_count() == 0


def test_returned_snapshot_is_a_copy(services):
    cart = services.cart
    items = cart.add_item(1, 2)
    items[0].quantity = 99
    items.append(items[0])
    fresh = cart.get_cart_items()
    assert len(fresh) == 1
    assert fresh[0].quantity == 2


def test_services_sharing_a_store_see_the_same_cart(store):
    first = CartService(store)
    second = CartService(store)
    first.add_item(3, 2)
    assert second.get_cart_count() == 2


def test_simulated_latency_scales_delay(store):
    calls = []
    cart = CartService(store, delay=SimulatedLatency(0.5, sleep=calls.append))
    cart.add_item(1)
    cart.get_cart_count()
    assert calls == [0.15, 0.05]


def test_zero_latency_never_sleeps(store):
    calls = []
    cart = CartService(store, delay=SimulatedLatency(0, sleep=calls.append))
    cart.add_item(1)
    assert calls == []


def test_string_and_int_ids_share_one_line_item(services):
    cart = services.cart
    cart.add_item("5", 1)
    items = cart.add_item("5", 1)
    assert [(i.product_id, i.quantity) for i in items] == [(5, 2)]
    items = cart.add_item(5, 1)
    assert [(i.product_id, i.quantity) for i in items] == [(5, 3)]
    items = cart.save_for_later("5")
    assert items[0].saved_for_later is True
    assert cart.remove_item(5.0) == []


@pytest.mark.parametrize("bad_id", [True, "abc", 2.5, None])
def test_non_numeric_ids_rejected(services, bad_id):
    with pytest.raises(InvalidArgument):
        services.cart.add_item(bad_id)
    assert services.cart.get_cart_items() == []
