"""A square grid of integer cells that notifies observers on every change."""

from __future__ import annotations

from collections.abc import Iterator

from designdemos.subject import Subject


class InvalidPositionError(IndexError):
    """Raised when a cell position lies outside the grid."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"invalid position ({row},{col})")
        self.row = row
        self.col = col


class Spreadsheet(Subject):
    """A size x size grid of optional integer values."""

    def __init__(self, size: int) -> None:
        super().__init__()
        self.size = size
        self._cells: dict[tuple[int, int], int] = {}

    def is_valid_position(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the grid."""
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, row: int, col: int) -> None:
        if not self.is_valid_position(row, col):
            raise InvalidPositionError(row, col)

    def set_value(self, row: int, col: int, value: int) -> None:
        """Store a value in a cell and notify observers."""
        self._check(row, col)
        self._cells[(row, col)] = value
        print(f"Cell ({row},{col}) set to {value}")
        self.notify()

    def clear_value(self, row: int, col: int) -> None:
        """Empty a cell and notify observers."""
        self._check(row, col)
        self._cells.pop((row, col), None)
        print(f"Cell ({row},{col}) cleared")
        self.notify()

    def get_value(self, row: int, col: int) -> int:
        """The value of a cell; 0 for empty cells and positions off the grid."""
        return self._cells.get((row, col), 0)

    def has_value_at(self, row: int, col: int) -> bool:
        """Whether the cell holds a value; False for positions off the grid."""
        return (row, col) in self._cells

    def filled_values(self) -> Iterator[tuple[int, int, int]]:
        """Yield (row, col, value) for every filled cell in row-major order."""
        for row, col in sorted(self._cells):
            yield row, col, self._cells[(row, col)]

    def render_grid(self) -> str:
        """The grid as text, one line per row."""
        lines = ["", "=== SPREADSHEET GRID ==="]
        lines.append("   " + "".join(f"  {col} " for col in range(self.size)))
        for row in range(self.size):
            cells = []
            for col in range(self.size):
                if (row, col) in self._cells:
                    value = self._cells[(row, col)]
                    cells.append(f"[{value}]" + (" " if value < 10 else ""))
                else:
                    cells.append("[ ] ")
            lines.append(f"{row}: " + "".join(cells))
        lines.append("========================")
        return "\n".join(lines)

    def display_grid(self) -> str:
        """Print the grid and return the printed text."""
        text = self.render_grid()
        print(text)
        return text