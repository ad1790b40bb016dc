from __future__ import annotations

import itertools
from decimal import Decimal

import pytest

from lunchtray.order import OrderState, UnknownItemError


def assert_consistent(order: OrderState) -> None:
    expected = sum((item.price for item in order.selections().values() if item is not None), Decimal("0"))
    assert order.subtotal == expected
    assert order.tax == order.subtotal * order.tax_rate
    assert order.total == order.subtotal + order.tax


def test_new_order_is_empty(order):
    assert order.entree is None
    assert order.side is None
    assert order.accompaniment is None
    assert order.is_empty
    assert (order.subtotal, order.tax, order.total) == (0, 0, 0)


def test_lunch_scenario(order):
    order.set_entree("big")
    assert (order.subtotal, order.tax, order.total) == (Decimal("7.00"), Decimal("0.56"), Decimal("7.56"))

    order.set_side("fries")
    assert (order.subtotal, order.tax, order.total) == (Decimal("10.00"), Decimal("0.80"), Decimal("10.80"))

    order.set_entree("small")
    assert (order.subtotal, order.tax, order.total) == (Decimal("8.00"), Decimal("0.64"), Decimal("8.64"))
    assert order.entree.item_id == "small"

    order.reset()
    assert (order.subtotal, order.tax, order.total) == (0, 0, 0)
    assert order.selections() == {"entree": None, "side": None, "accompaniment": None}


def test_replacing_selection_leaves_no_residual(order):
    for item_id in ["big", "small", "big", "big", "small"]:
        order.set_category("entree", item_id)
        assert_consistent(order)
    assert order.subtotal == Decimal("5.00")


def test_any_selection_sequence_stays_consistent(order):
    moves = [("entree", "big"), ("side", "slaw"), ("accompaniment", "roll"), ("side", "fries"), ("entree", "small")]
    for sequence in itertools.permutations(moves, 4):
        order.reset()
        for category, item_id in sequence:
            order.set_category(category, item_id)
            assert_consistent(order)


def test_selection_returns_item(order):
    item = order.set_accompaniment("roll")
    assert item.name == "Roll"
    assert order.selection("accompaniment") is item


def test_unknown_item_leaves_state_unchanged(order):
    order.set_entree("big")
    order.set_side("slaw")
    before = (order.selections(), order.subtotal, order.tax, order.total)

    with pytest.raises(UnknownItemError) as excinfo:
        order.set_side("lobster")

    assert excinfo.value.item_id == "lobster"
    assert (order.selections(), order.subtotal, order.tax, order.total) == before


def test_unknown_item_is_lookup_error(order):
    with pytest.raises(LookupError):
        order.set_entree("nope")


def test_unknown_category_rejected(order):
    with pytest.raises(ValueError):
        order.set_category("dessert", "big")
    with pytest.raises(ValueError):
        order.selection("dessert")


def test_reset_is_idempotent(order):
    order.set_entree("big")
    order.reset()
    once = (order.selections(), order.subtotal, order.tax, order.total)
    order.reset()
    assert (order.selections(), order.subtotal, order.tax, order.total) == once
    assert_consistent(order)


def test_custom_tax_rate(catalog):
    order = OrderState(catalog, tax_rate=Decimal("0.10"))
    order.set_side("slaw")
    assert order.tax == Decimal("0.125")
    assert order.total == Decimal("1.375")


def test_zero_tax_rate(catalog):
    order = OrderState(catalog, tax_rate=Decimal("0"))
    order.set_entree("big")
    assert order.total == order.subtotal == Decimal("7.00")


def test_negative_tax_rate_rejected(catalog):
    with pytest.raises(ValueError):
        OrderState(catalog, tax_rate=Decimal("-0.01"))


def test_listeners_see_consistent_state(order):
    seen = []
    order.subscribe(lambda state: seen.append((state.subtotal, state.total)))

    order.set_entree("big")
    order.set_side("fries")
    order.reset()

    assert seen == [
        (Decimal("7.00"), Decimal("7.56")),
        (Decimal("10.00"), Decimal("10.80")),
        (0, 0),
    ]


def test_failed_selection_does_not_notify(order):
    calls = []
    order.subscribe(calls.append)
    with pytest.raises(UnknownItemError):
        order.set_entree("ghost")
    assert calls == []


def test_unsubscribe_stops_notifications(order):
    calls = []
    unsubscribe = order.subscribe(calls.append)
    order.set_entree("big")
    unsubscribe()
    unsubscribe()
    order.set_entree("small")
    assert calls == [order]


def test_default_order_uses_menu_and_default_rate():
    order = OrderState()
    order.set_entree("cauliflower")
    order.set_side("soup")
    order.set_accompaniment("bread")
    assert order.tax_rate == Decimal("0.08")
    assert order.subtotal == Decimal("10.50")
    assert order.total == Decimal("11.34")
