"""A pizza order whose behaviour follows the stage it is in."""

from __future__ import annotations

import sys

from designdemos.pizza_states import (
    TOPPING_PRICE,
    OrderState,
    ProcessingPaymentState,
    format_price,
)


class OrderLockedError(RuntimeError):
    """Raised when an order is changed in a stage that no longer allows it."""

    def __init__(self, state_name: str) -> None:
        super().__init__(f"Cannot modify order in current state: {state_name}")
        self.state_name = state_name


class PizzaOrder:
    """One customer's pizza, moved from payment to delivery by its states."""

    def __init__(self, customer_name: str, order_id: int) -> None:
        self.customer_name = customer_name
        self.order_id = order_id
        self.total_price = 0.0
        self.is_cancelled = False
        self.state: OrderState = ProcessingPaymentState()
        self._toppings: list[str] = []

    @property
    def toppings(self) -> tuple[str, ...]:
        """The toppings chosen so far, in the order they were added."""
        return tuple(self._toppings)

    def process_order(self) -> None:
        self.state.process_order(self)

    def cancel_order(self) -> None:
        self.state.cancel_order(self)

    def display_status(self) -> None:
        self.state.display_status(self)

    def current_state(self) -> str:
        """The name of the stage the order is in."""
        return self.state.name

    def can_modify_order(self) -> bool:
        return self.state.can_modify_order

    def can_cancel(self) -> bool:
        return self.state.can_cancel

    def estimated_time(self) -> int:
        """Minutes left until delivery."""
        return self.state.estimated_time

    def add_topping(self, topping: str) -> None:
        """Add a topping at extra cost.

        Raises OrderLockedError once the order can no longer be modified.
        """
        if not self.can_modify_order():
            raise OrderLockedError(self.current_state())
        self._toppings.append(topping)
        self.total_price += TOPPING_PRICE
        print(f"Added {topping} to order. New total: ${format_price(self.total_price)}")

    def order_info(self) -> str:
        """A summary of the order, one field per line."""
        return "\n".join(
            (
                f"Order #{self.order_id} for {self.customer_name}",
                f"Current State: {self.current_state()}",
                f"Total Price: ${format_price(self.total_price)}",
                f"Estimated Time: {self.estimated_time()} minutes",
                f"Can Modify: {'Yes' if self.can_modify_order() else 'No'}",
                f"Can Cancel: {'Yes' if self.can_cancel() else 'No'}",
                f"Toppings: {', '.join(self._toppings) or 'None'}",
                "------------------------",
            )
        )

    def display_order_info(self) -> None:
        """Print the summary, one field per line."""
        for line in self.order_info().splitlines():
            print(line)


def _try_add_topping(order: PizzaOrder, topping: str) -> None:
    try:
        order.add_topping(topping)
    except OrderLockedError as exc:
        print(exc)


def main(argv: list[str] | None = None) -> int:
    """Walk one order from payment to delivery and cancel another early."""
    print("=== Pizza Place Order System ===")
    print()

    order = PizzaOrder("John Doe", 101)
    print("Adding toppings to order:")
    for topping in ("Pepperoni", "Mushrooms", "Extra Cheese"):
        _try_add_topping(order, topping)
    print()

    print("Initial order details:")
    order.display_order_info()
    print()

    print("Processing order through states:")
    print("===============================")

    print("\n=== STEP 1: Payment Processing ===")
    order.display_status()
    print("\nProcessing payment...")
    order.process_order()

    print("\n=== STEP 2: Ingredient Preparation ===")
    order.display_status()
    print("\nTrying to add extra topping now:")
    _try_add_topping(order, "Olives")
    print("\nContinuing preparation...")
    order.process_order()

    print("\n=== STEP 3: Pizza Assembly ===")
    order.display_status()
    print("\nAssembling pizza...")
    order.process_order()

    print("\n=== STEP 4: Baking ===")
    order.display_status()
    print("\nCustomer trying to cancel order:")
    order.cancel_order()
    print("\nContinuing baking...")
    order.process_order()

    print("\n=== STEP 5: Ready for Delivery ===")
    order.display_status()
    print("\nDispatching for delivery...")
    order.process_order()

    print("\n=== STEP 6: Delivery Complete ===")
    order.display_status()

    print("\nFinal order summary:")
    order.display_order_info()

    print("\n")
    print("=== Demonstration of Cancellation ===")

    early = PizzaOrder("Jane Smith", 102)
    _try_add_topping(early, "Sausage")
    _try_add_topping(early, "Bell Peppers")

    print("\nNew order created:")
    early.display_order_info()

    print("\nCustomer decides to cancel early:")
    early.cancel_order()

    print("\nCancelled order status:")
    early.display_order_info()
    return 0


if __name__ == "__main__":
    sys.exit(main())