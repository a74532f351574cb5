"""A canvas of shapes made by factories and copied as prototypes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator

from designdemos.shapes import (
    RectangleFactory,
    Shape,
    ShapeFactory,
    SquareFactory,
    Textbox,
    TextboxFactory,
)

DUPLICATE_OFFSET = 2


class Canvas:
    """An ordered collection of shapes."""

    def __init__(self) -> None:
        self._shapes: list[Shape] = []

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._shapes):
            raise IndexError(f"invalid shape index {index}")

    def add_shape(self, shape: Shape) -> None:
        """Append a shape; raises TypeError for None."""
        if shape is None:
            raise TypeError("cannot add None to the canvas")
        self._shapes.append(shape)
        print(f"Added {shape.type_name} to canvas.")

    def duplicate_shape(self, index: int) -> Shape:
        """Clone the shape at index, shift the copy and append it.

        Raises IndexError if there is no shape at index.
        """
        try:
            self._check(index)
        except IndexError:
            print("Invalid index for duplication.")
            raise
        original = self._shapes[index]
        cloned = original.clone()
        cloned.set_position(
            cloned.position_x + DUPLICATE_OFFSET, cloned.position_y + DUPLICATE_OFFSET
        )
        self._shapes.append(cloned)
        print(f"Cloned {original.type_name} using Prototype pattern.")
        return cloned

    def render(self) -> str:
        """The canvas contents as text, one shape per line."""
        lines = ["", "=== Canvas Contents ==="]
        if not self._shapes:
            lines.append("Canvas is empty.")
        lines.extend(f"[{i}] {shape.describe()}" for i, shape in enumerate(self._shapes))
        lines.append("======================")
        return "\n".join(lines)

    def display_all(self) -> str:
        """Print the canvas contents and return the printed text."""
        text = self.render()
        print(text)
        return text

    def remove_shape(self, index: int) -> Shape:
        """Remove and return the shape at index; raises IndexError if absent."""
        self._check(index)
        shape = self._shapes.pop(index)
        print(f"Removed shape at index {index}")
        return shape

    def clear(self) -> None:
        self._shapes.clear()
        print("Canvas cleared.")

    def __len__(self) -> int:
        return len(self._shapes)

    def __getitem__(self, index: int) -> Shape:
        self._check(index)
        return self._shapes[index]

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes))


def _demonstrate_factory_method(canvas: Canvas) -> None:
    print("\n=== FACTORY METHOD PATTERN DEMO ===")
    print("\nCreating shapes using Factory Method:")
    factories: tuple[ShapeFactory, ...] = (RectangleFactory(), SquareFactory(), TextboxFactory())
    for factory in factories:
        canvas.add_shape(factory.create_shape())
    canvas.display_all()


def _demonstrate_prototype_pattern(canvas: Canvas) -> None:
    print("\n=== PROTOTYPE PATTERN DEMO ===")
    print("\nModifying properties of existing shapes:")
    if len(canvas) > 0:
        canvas[0].colour = "green"
        canvas[0].set_position(5, 10)
        print("Modified rectangle color to green and position to (5,10)")
    if len(canvas) > 1:
        canvas[1].colour = "purple"
        canvas[1].set_position(15, 20)
        print("Modified square color to purple and position to (15,20)")
    if len(canvas) > 2 and isinstance(canvas[2], Textbox):
        box = canvas[2]
        box.text = "Hello Prototype!"
        box.colour = "orange"
        box.set_position(25, 30)
        print("Modified textbox text, color, and position")

    print("\nShapes after modification:")
    canvas.display_all()

    print("\nCloning shapes using Prototype Pattern:")
    for index in range(min(3, len(canvas))):
        canvas.duplicate_shape(index)

    print("\nCanvas after cloning:")
    canvas.display_all()


def _demonstrate_both_patterns() -> None:
    print("\n=== COMPARING BOTH PATTERNS ===")
    canvas = Canvas()

    print("\nFactory Method - Creating new Rectangle:")
    new_rect = RectangleFactory().create_shape()
    new_rect.colour = "blue"
    new_rect.set_position(0, 0)
    canvas.add_shape(new_rect)
    new_rect.display()

    print("\nPrototype Pattern - Cloning existing Rectangle:")
    cloned = new_rect.clone()
    cloned.set_position(10, 10)
    canvas.add_shape(cloned)
    cloned.display()

    print("\nBoth rectangles:")
    canvas.display_all()


def _full_demo() -> None:
    print("=== DESIGN PATTERNS DEMONSTRATION ===")
    print("Demonstrating Factory Method and Prototype Patterns")
    canvas = Canvas()
    _demonstrate_factory_method(canvas)
    _demonstrate_prototype_pattern(canvas)
    _demonstrate_both_patterns()
    print("\n=== SUMMARY ===")
    print("Factory Method Pattern: Creates new objects from scratch using factories")
    print("Prototype Pattern: Creates new objects by cloning existing ones")
    print("Both patterns work together to provide flexible object creation!")


def main(argv: list[str] | None = None) -> int:
    """Make a rectangle through its factory; with --full, run the whole demonstration."""
    parser = argparse.ArgumentParser(description="Shape factory and prototype demo.")
    parser.add_argument(
        "--full", action="store_true", help="run the complete demonstration"
    )
    args = parser.parse_args(argv)
    if args.full:
        _full_demo()
    else:
        factory: ShapeFactory = RectangleFactory()
        factory.create_shape().display()
    return 0


if __name__ == "__main__":
    sys.exit(main())