"""Shapes that can be copied, and factories that make them from scratch."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod


class Shape:
    """A rectangle-like figure with a colour and a position on a canvas."""

    def __init__(
        self,
        length: int = 0,
        width: int = 0,
        colour: str = "white",
        x: int = 0,
        y: int = 0,
    ) -> None:
        self.length = length
        self.width = width
        self.colour = colour
        self.position_x = x
        self.position_y = y

    @property
    def type_name(self) -> str:
        """The name of the concrete kind of shape."""
        return type(self).__name__

    def clone(self) -> Shape:
        """Return an independent copy with the same field values."""
        return copy.copy(self)

    def set_position(self, x: int, y: int) -> None:
        """Move the shape to (x, y)."""
        self.position_x = x
        self.position_y = y

    def describe(self) -> str:
        """A one-line description of the shape."""
        return (
            f"{self.type_name}: {self.length}x{self.width}, "
            f"Color: {self.colour}, "
            f"Position: ({self.position_x},{self.position_y})"
        )

    def display(self) -> None:
        """Print the description, one line at a time."""
        for line in self.describe().splitlines():
            print(line)


class Rectangle(Shape):
    """A rectangle, 10x5 and blue unless told otherwise."""

    def __init__(
        self,
        length: int = 10,
        width: int = 5,
        colour: str = "blue",
        x: int = 0,
        y: int = 0,
    ) -> None:
        super().__init__(length, width, colour, x, y)


class Square(Shape):
    """A square whose length and width always stay equal."""

    def __init__(self, size: int = 8, colour: str = "red", x: int = 0, y: int = 0) -> None:
        self._size = size
        super().__init__(size, size, colour, x, y)

    @property
    def length(self) -> int:  # type: ignore[override]
        return self._size

    @length.setter
    def length(self, value: int) -> None:
        self._size = value

    @property
    def width(self) -> int:  # type: ignore[override]
        return self._size

    @width.setter
    def width(self, value: int) -> None:
        self._size = value

    def set_size(self, size: int) -> None:
        """Set both sides to size."""
        self._size = size


class Textbox(Shape):
    """A box holding a line of text."""

    def __init__(
        self,
        length: int = 15,
        width: int = 3,
        colour: str = "yellow",
        x: int = 0,
        y: int = 0,
        text: str = "Default Text",
    ) -> None:
        super().__init__(length, width, colour, x, y)
        self.text = text

    def describe(self) -> str:
        return f'{super().describe()}, Text: "{self.text}"'


class ShapeFactory(ABC):
    """Makes new shapes of one kind with that kind's default settings."""

    @abstractmethod
    def create_shape(self) -> Shape:
        """Return a freshly made shape."""


class RectangleFactory(ShapeFactory):
    def create_shape(self) -> Rectangle:
        return Rectangle()

    def __str__(self) -> str:
        return "Rectangle Factory"


class SquareFactory(ShapeFactory):
    def create_shape(self) -> Square:
        return Square()

    def __str__(self) -> str:
        return "Square Factory"


class TextboxFactory(ShapeFactory):
    def create_shape(self) -> Textbox:
        return Textbox()

    def __str__(self) -> str:
        return "Textbox Factory"