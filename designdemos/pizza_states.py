"""The stages a pizza order passes through, each deciding what the order may do."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from designdemos.pizza_order import PizzaOrder

BASE_PRICE = 12.99
TOPPING_PRICE = 2.50


def format_price(amount: float) -> str:
    """A price the way the order messages show it, without trailing zeros."""
    return f"{amount:g}"


class OrderState(ABC):
    """One stage of an order's life.

    Each stage names itself and says whether the order may still be changed
    or cancelled and how many minutes are left until delivery.
    """

    name: ClassVar[str]
    can_modify_order: ClassVar[bool] = False
    can_cancel: ClassVar[bool] = False
    estimated_time: ClassVar[int] = 0

    @abstractmethod
    def process_order(self, order: PizzaOrder) -> None:
        """Carry out this stage and move the order on."""

    @abstractmethod
    def cancel_order(self, order: PizzaOrder) -> None:
        """Cancel the order if this stage allows it."""

    @abstractmethod
    def display_status(self, order: PizzaOrder) -> None:
        """Print what is happening to the order at this stage."""

    def _cancel(self, order: PizzaOrder, detail: str) -> None:
        print(f"Cancelling order #{order.order_id} - {detail}")
        order.is_cancelled = True
        order.state = CancelledState()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ProcessingPaymentState(OrderState):
    name = "Processing Payment"
    can_modify_order = True
    can_cancel = True
    estimated_time = 25

    def process_order(self, order: PizzaOrder) -> None:
        print(f"Processing payment for order #{order.order_id}")
        order.total_price = BASE_PRICE + len(order.toppings) * TOPPING_PRICE
        print(f"Payment of ${format_price(order.total_price)} processed successfully!")
        print("Moving to ingredient preparation...")
        order.state = PreppingIngredientsState()

    def cancel_order(self, order: PizzaOrder) -> None:
        self._cancel(order, "refund processed")

    def display_status(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} - Payment being processed...")
        print("Please wait while we verify your payment details.")


class PreppingIngredientsState(OrderState):
    name = "Prepping Ingredients"
    can_cancel = True
    estimated_time = 20

    def process_order(self, order: PizzaOrder) -> None:
        print(f"Kitchen staff preparing ingredients for {order.customer_name}'s pizza...")
        print("Checking inventory and gathering fresh ingredients...")
        print("All ingredients ready! Moving to pizza assembly...")
        order.state = AssemblingPizzaState()

    def cancel_order(self, order: PizzaOrder) -> None:
        self._cancel(order, "minimal ingredients used, partial refund")

    def display_status(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} - Kitchen preparing your ingredients")
        print("Fresh ingredients are being gathered for your pizza.")


class AssemblingPizzaState(OrderState):
    name = "Assembling Pizza"
    can_cancel = True
    estimated_time = 15

    def process_order(self, order: PizzaOrder) -> None:
        toppings = ", ".join(order.toppings) or "Plain cheese pizza"
        print(f"Chef assembling pizza with toppings: {toppings}")
        print("Spreading sauce, adding cheese, and carefully placing toppings...")
        print("Pizza assembled perfectly! Moving to oven...")
        order.state = BakingState()

    def cancel_order(self, order: PizzaOrder) -> None:
        self._cancel(order, "pizza partially assembled, limited refund")

    def display_status(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} - Pizza being assembled by our chef")
        print("Your pizza is being carefully crafted with your selected toppings.")


class BakingState(OrderState):
    name = "Baking"
    estimated_time = 8

    def process_order(self, order: PizzaOrder) -> None:
        print("Pizza in the oven - baking at 450°F...")
        print("Monitoring for perfect golden crust and melted cheese...")
        print("Pizza baked to perfection! Cooling and ready for delivery...")
        order.state = ReadyForDeliveryState()

    def cancel_order(self, order: PizzaOrder) -> None:
        print(f"Cannot cancel order #{order.order_id} - pizza is already in the oven!")
        print("Order will proceed to completion.")

    def display_status(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} - Pizza baking in our wood-fired oven")
        print("Your pizza is cooking to golden perfection!")


class ReadyForDeliveryState(OrderState):
    name = "Ready for Delivery"
    estimated_time = 5

    def process_order(self, order: PizzaOrder) -> None:
        print(f"Pizza packaged and ready for delivery to {order.customer_name}")
        print("Delivery driver assigned and en route!")
        print("Estimated delivery time: 5-10 minutes")
        order.state = DeliveredState()

    def cancel_order(self, order: PizzaOrder) -> None:
        print(
            f"Cannot cancel order #{order.order_id} - "
            "pizza is ready and being delivered!"
        )

    def display_status(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} - Fresh, hot pizza ready for delivery")
        print("Your pizza is boxed and our driver will be there soon!")


class DeliveredState(OrderState):
    name = "Delivered"

    def process_order(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} has been successfully delivered!")
        print(f"Thank you {order.customer_name} for choosing our pizza place!")
        print("We hope you enjoy your delicious pizza!")

    def cancel_order(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} has already been delivered.")
        print("Please call customer service if you have any issues.")

    def display_status(self, order: PizzaOrder) -> None:
        print(
            f"Order #{order.order_id} - Successfully delivered to "
            f"{order.customer_name}"
        )
        print("Order completed! We hope you enjoyed your pizza!")


class CancelledState(OrderState):
    name = "Cancelled"

    def process_order(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} is cancelled and cannot be processed.")

    def cancel_order(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} is already cancelled.")

    def display_status(self, order: PizzaOrder) -> None:
        print(f"Order #{order.order_id} - CANCELLED")
        print("This order has been cancelled. Refund processed if applicable.")