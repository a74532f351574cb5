"""Interchangeable arithmetic strategies used through a context."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Calculator(ABC):
    """An operation on two integers."""

    @abstractmethod
    def execute(self, a: int, b: int) -> int:
        """Apply the operation to a and b."""


class Add(Calculator):
    def execute(self, a: int, b: int) -> int:
        return a + b


class Multiply(Calculator):
    def execute(self, a: int, b: int) -> int:
        return a * b


class Subtract(Calculator):
    def execute(self, a: int, b: int) -> int:
        return a - b


class Context:
    """Delegates calculations to whichever strategy it currently holds."""

    def __init__(self, strategy: Calculator | None) -> None:
        self.strategy = strategy

    def calculate(self, a: int, b: int) -> int:
        """Run the current strategy; 0 when there is none."""
        if self.strategy is None:
            return 0
        return self.strategy.execute(a, b)


def main(argv: list[str] | None = None) -> int:
    """Show the context switching between strategies."""
    context = Context(Add())
    print("=== Strategy Pattern Demo ===\n")
    print(f"Using Add strategy: 5 + 3 = {context.calculate(5, 3)}")
    context.strategy = Multiply()
    print(f"Using Multiply strategy: 5 * 3 = {context.calculate(5, 3)}")
    context.strategy = Subtract()
    print(f"Using Subtract strategy: 5 - 3 = {context.calculate(5, 3)}")
    print("\nChanging back to Add strategy: ", end="")
    context.strategy = Add()
    print(f"10 + 7 = {context.calculate(10, 7)}")
    print("\n=== Demo Complete ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())