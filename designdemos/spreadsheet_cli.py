"""Interactive menu around a spreadsheet watched by several observers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from designdemos.observers import (
    AverageCalculator,
    CellLinker,
    StatisticsDisplay,
    SumCalculator,
)
from designdemos.spreadsheet import InvalidPositionError, Spreadsheet

GRID_SIZE = 5

_MENU = (
    "\n=== SPREADSHEET OBSERVER DEMO ===",
    "1. Set cell value",
    "2. Clear cell value",
    "3. Display grid",
    "4. Display all statistics",
    "5. Add pre-defined test data",
    "6. Create cell link (A=B)",
    "7. Remove cell link",
    "8. Display all cell links",
    "9. Toggle cell link active/inactive",
    "0. Exit",
)

_TEST_DATA = ((0, 0, 10), (0, 1, 20), (1, 0, 5), (1, 1, 15), (2, 2, 100))


class _EndOfInput(Exception):
    pass


class SpreadsheetSession:
    """A spreadsheet with its sum, average and statistics observers and cell links."""

    def __init__(self, size: int = GRID_SIZE) -> None:
        self.size = size
        self.spreadsheet = Spreadsheet(size)
        self.sum_calculator = SumCalculator()
        self.average_calculator = AverageCalculator()
        self.statistics = StatisticsDisplay()
        self.links: list[CellLinker] = []
        for observer in (self.sum_calculator, self.average_calculator, self.statistics):
            self.spreadsheet.attach(observer)

    def add_test_data(self) -> None:
        """Fill a few cells with fixed sample values."""
        print("\nAdding test data...")
        for row, col, value in _TEST_DATA:
            self.spreadsheet.set_value(row, col, value)
        print("Test data added!")

    def create_link(self, src_row: int, src_col: int, tgt_row: int, tgt_col: int) -> CellLinker:
        """Link a target cell to a source cell and return the new linker.

        Raises InvalidPositionError if either cell lies off the grid.
        """
        for row, col in ((src_row, src_col), (tgt_row, tgt_col)):
            if not self.spreadsheet.is_valid_position(row, col):
                raise InvalidPositionError(row, col)
        linker = CellLinker(src_row, src_col, tgt_row, tgt_col)
        self.spreadsheet.attach(linker)
        self.links.append(linker)
        print(f"Cell link created: ({tgt_row},{tgt_col}) = ({src_row},{src_col})")
        if self.spreadsheet.has_value_at(src_row, src_col):
            linker.update()
        return linker

    def _link_at(self, index: int) -> CellLinker:
        if not 0 <= index < len(self.links):
            raise IndexError(f"invalid link index {index}")
        return self.links[index]

    def remove_link(self, index: int) -> CellLinker:
        """Detach and forget the link at index; raises IndexError if there is none."""
        linker = self._link_at(index)
        self.spreadsheet.detach(linker)
        del self.links[index]
        print("Cell link removed.")
        return linker

    def toggle_link(self, index: int) -> bool:
        """Flip the link at index between active and inactive; return the new state."""
        linker = self._link_at(index)
        linker.active = not linker.active
        print(f"Link {'activated' if linker.active else 'deactivated'}.")
        return linker.active

    def display_all_statistics(self) -> None:
        print("\n=== ALL STATISTICS ===")
        self.sum_calculator.display_summary()
        self.average_calculator.display_average()
        self.statistics.display_statistics()
        print("======================")

    def display_all_links(self) -> None:
        print("\n=== CELL LINKS ===")
        if not self.links:
            print("No cell links created.")
        for index, linker in enumerate(self.links):
            print(f"{index}: {linker.describe()}")
        print("==================")

    def run(self, lines: Iterable[str]) -> None:
        """Drive the menu from whitespace-separated tokens read from lines."""
        tokens = (token for line in lines for token in line.split())
        try:
            while True:
                print("\n".join(_MENU))
                print("Choice: ", end="")
                choice = _next_token(tokens)
                if choice == "0":
                    print("Exiting...")
                    return
                self._dispatch(choice, tokens)
        except _EndOfInput:
            print()

    def _prompt_int(self, tokens: Iterator[str], prompt: str) -> int:
        print(prompt, end="")
        token = _next_token(tokens)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not a number: {token!r}") from None

    def _cell_prompt(self, what: str) -> str:
        return f"Enter {what} (0-{self.size - 1}): "

    def _dispatch(self, choice: str, tokens: Iterator[str]) -> None:
        try:
            if choice == "1":
                row = self._prompt_int(tokens, self._cell_prompt("row"))
                col = self._prompt_int(tokens, self._cell_prompt("column"))
                value = self._prompt_int(tokens, "Enter value: ")
                try:
                    self.spreadsheet.set_value(row, col, value)
                except InvalidPositionError:
                    print("Invalid position!")
            elif choice == "2":
                row = self._prompt_int(tokens, self._cell_prompt("row"))
                col = self._prompt_int(tokens, self._cell_prompt("column"))
                try:
                    self.spreadsheet.clear_value(row, col)
                except InvalidPositionError:
                    print("Invalid position!")
            elif choice == "3":
                self.spreadsheet.display_grid()
            elif choice == "4":
                self.display_all_statistics()
            elif choice == "5":
                self.add_test_data()
            elif choice == "6":
                cells = [
                    self._prompt_int(tokens, self._cell_prompt(what))
                    for what in (
                        "source cell row",
                        "source cell column",
                        "target cell row",
                        "target cell column",
                    )
                ]
                try:
                    self.create_link(*cells)
                except InvalidPositionError:
                    print("Invalid cell positions!")
            elif choice == "7":
                if not self.links:
                    print("No cell links to remove.")
                    return
                self.display_all_links()
                index = self._prompt_int(tokens, "Enter link index to remove: ")
                try:
                    self.remove_link(index)
                except IndexError:
                    print("Invalid link index!")
            elif choice == "8":
                self.display_all_links()
            elif choice == "9":
                if not self.links:
                    print("No cell links available.")
                    return
                self.display_all_links()
                index = self._prompt_int(tokens, "Enter link index to toggle: ")
                try:
                    self.toggle_link(index)
                except IndexError:
                    print("Invalid link index!")
            else:
                print("Invalid choice! Please try again.")
        except ValueError as exc:
            print(f"Invalid input: {exc}")


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise _EndOfInput from None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive spreadsheet menu on standard input."""
    session = SpreadsheetSession()
    print("Spreadsheet Observer Pattern Demo")
    print(f"Grid size: {GRID_SIZE}x{GRID_SIZE}")
    print("Observers attached: SumCalculator, AverageCalculator, StatisticsDisplay")
    session.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())