import pytest

from designdemos.pizza_order import OrderLockedError, PizzaOrder, main
from designdemos.pizza_states import (
    TOPPING_PRICE,
    CancelledState,
    DeliveredState,
    ProcessingPaymentState,
)


def test_new_order_starts_in_payment():
    order = PizzaOrder("John Doe", 101)
    assert isinstance(order.state, ProcessingPaymentState)
    assert order.current_state() == "Processing Payment"
    assert order.total_price == 0.0
    assert order.is_cancelled is False
    assert order.toppings == ()
    assert order.can_modify_order() is True
    assert order.can_cancel() is True
    assert order.estimated_time() == 25


def test_add_topping_adds_price(capsys):
    order = PizzaOrder("John Doe", 101)
    order.add_topping("Pepperoni")
    assert order.toppings == ("Pepperoni",)
    assert order.total_price == pytest.approx(TOPPING_PRICE)
    assert "Added Pepperoni to order. New total: $2.5" in capsys.readouterr().out


def test_toppings_keep_order():
    order = PizzaOrder("Jane Smith", 102)
    order.add_topping("Sausage")
    order.add_topping("Bell Peppers")
    assert order.toppings == ("Sausage", "Bell Peppers")
    assert order.total_price == pytest.approx(2 * TOPPING_PRICE)


def test_add_topping_after_payment_raises():
    order = PizzaOrder("John Doe", 101)
    order.add_topping("Pepperoni")
    order.process_order()
    price = order.total_price
    with pytest.raises(OrderLockedError) as info:
        order.add_topping("Olives")
    assert str(info.value) == "Cannot modify order in current state: Prepping Ingredients"
    assert order.toppings == ("Pepperoni",)
    assert order.total_price == price


def test_full_lifecycle_reaches_delivered():
    order = PizzaOrder("John Doe", 101)
    names = [order.current_state()]
    for _ in range(5):
        order.process_order()
        names.append(order.current_state())
    assert names == [
        "Processing Payment",
        "Prepping Ingredients",
        "Assembling Pizza",
        "Baking",
        "Ready for Delivery",
        "Delivered",
    ]
    assert isinstance(order.state, DeliveredState)
    assert order.estimated_time() == 0
    assert order.can_cancel() is False


def test_estimated_time_decreases_through_stages():
    order = PizzaOrder("John Doe", 101)
    times = [order.estimated_time()]
    for _ in range(5):
        order.process_order()
        times.append(order.estimated_time())
    assert times == sorted(times, reverse=True)


def test_cancel_during_baking_is_ignored():
    order = PizzaOrder("John Doe", 101)
    for _ in range(3):
        order.process_order()
    order.cancel_order()
    assert order.current_state() == "Baking"
    assert order.is_cancelled is False


def test_cancel_early():
    order = PizzaOrder("Jane Smith", 102)
    order.cancel_order()
    assert isinstance(order.state, CancelledState)
    assert order.is_cancelled is True
    assert order.can_modify_order() is False
    with pytest.raises(OrderLockedError):
        order.add_topping("Sausage")


def test_order_info_new_order():
    order = PizzaOrder("John Doe", 101)
    lines = order.order_info().splitlines()
    assert lines == [
        "Order #101 for John Doe",
        "Current State: Processing Payment",
        "Total Price: $0",
        "Estimated Time: 25 minutes",
        "Can Modify: Yes",
        "Can Cancel: Yes",
        "Toppings: None",
        "------------------------",
    ]


def test_order_info_lists_toppings():
    order = PizzaOrder("Jane Smith", 102)
    order.add_topping("Sausage")
    order.add_topping("Bell Peppers")
    assert "Toppings: Sausage, Bell Peppers" in order.order_info()


def test_display_status_delegates_to_state(capsys):
    order = PizzaOrder("John Doe", 101)
    order.display_status()
    assert "Order #101 - Payment being processed..." in capsys.readouterr().out


def test_display_order_info_prints_info(capsys):
    order = PizzaOrder("John Doe", 101)
    order.display_order_info()
    assert capsys.readouterr().out == order.order_info() + "\n"


def test_main_runs_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Cannot modify order in current state: Prepping Ingredients" in out
    assert "Cannot cancel order #101 - pizza is already in the oven!" in out
    assert "Current State: Delivered" in out
    assert "Current State: Cancelled" in out