"""Observers that summarise or link cells of a spreadsheet."""

from __future__ import annotations

from designdemos.spreadsheet import Spreadsheet
from designdemos.subject import Observer


class _SheetObserver(Observer):
    def _sheet(self) -> Spreadsheet | None:
        return self.subject if isinstance(self.subject, Spreadsheet) else None


class SumCalculator(_SheetObserver):
    """Keeps the total of all filled cells and how many there are."""

    def __init__(self) -> None:
        super().__init__()
        self.total_sum = 0
        self.cell_count = 0

    def update(self) -> None:
        print("SumCalculator: Recalculating...")
        sheet = self._sheet()
        if sheet is None:
            return
        values = [value for _, _, value in sheet.filled_values()]
        self.total_sum = sum(values)
        self.cell_count = len(values)
        self.display_summary()

    def summary(self) -> str:
        return (
            f"SUM CALCULATOR: Total = {self.total_sum}, "
            f"Cells with values = {self.cell_count}"
        )

    def display_summary(self) -> str:
        """Print the summary and return the printed text."""
        text = self.summary()
        print(text)
        return text


class AverageCalculator(_SheetObserver):
    """Keeps the average of all filled cells."""

    def __init__(self) -> None:
        super().__init__()
        self.average = 0.0
        self.total_sum = 0
        self.cell_count = 0

    def update(self) -> None:
        print("AverageCalculator: Recalculating...")
        sheet = self._sheet()
        if sheet is None:
            return
        values = [value for _, _, value in sheet.filled_values()]
        self.total_sum = sum(values)
        self.cell_count = len(values)
        self.average = self.total_sum / self.cell_count if values else 0.0
        self.display_average()

    def summary(self) -> str:
        if self.cell_count > 0:
            return (
                f"AVERAGE CALCULATOR: Average = {self.average:g} "
                f"(from {self.cell_count} cells)"
            )
        return "AVERAGE CALCULATOR: No data available"

    def display_average(self) -> str:
        """Print the average line and return the printed text."""
        text = self.summary()
        print(text)
        return text


class StatisticsDisplay(_SheetObserver):
    """Keeps the minimum, maximum and count of filled cells."""

    def __init__(self) -> None:
        super().__init__()
        self._min = 0
        self._max = 0
        self.total_cells = 0
        self.has_data = False

    @property
    def min_value(self) -> int:
        return self._min if self.has_data else 0

    @property
    def max_value(self) -> int:
        return self._max if self.has_data else 0

    def update(self) -> None:
        print("StatisticsDisplay: Updating statistics...")
        sheet = self._sheet()
        if sheet is None:
            return
        values = [value for _, _, value in sheet.filled_values()]
        self.total_cells = len(values)
        self.has_data = bool(values)
        if values:
            self._min = min(values)
            self._max = max(values)
        self.display_statistics()

    def summary(self) -> str:
        if self.has_data:
            return (
                f"STATISTICS: Min = {self.min_value}, Max = {self.max_value}, "
                f"Total cells = {self.total_cells}"
            )
        return "STATISTICS: No data available"

    def display_statistics(self) -> str:
        """Print the statistics line and return the printed text."""
        text = self.summary()
        print(text)
        return text


class CellLinker(_SheetObserver):
    """Keeps a target cell equal to a source cell."""

    def __init__(self, src_row: int, src_col: int, tgt_row: int, tgt_col: int) -> None:
        super().__init__()
        self.source_row = src_row
        self.source_col = src_col
        self.target_row = tgt_row
        self.target_col = tgt_col
        self.active = True

    def update(self) -> None:
        if not self.active:
            return
        sheet = self._sheet()
        if sheet is None:
            return
        source = (self.source_row, self.source_col)
        target = (self.target_row, self.target_col)
        # Switched off while writing so the resulting notification does not recurse.
        self.active = False
        try:
            if sheet.has_value_at(*source):
                value = sheet.get_value(*source)
                print(
                    f"CellLinker: Linking cell ({target[0]},{target[1]}) to value "
                    f"{value} from cell ({source[0]},{source[1]})"
                )
                sheet.set_value(*target, value)
            else:
                print(
                    f"CellLinker: Clearing linked cell ({target[0]},{target[1]}) "
                    f"because source cell ({source[0]},{source[1]}) was cleared"
                )
                sheet.clear_value(*target)
        finally:
            self.active = True

    def describe(self) -> str:
        state = "ACTIVE" if self.active else "INACTIVE"
        return (
            f"CELL LINK: ({self.target_row},{self.target_col}) = "
            f"({self.source_row},{self.source_col}) [{state}]"
        )

    def display_link(self) -> str:
        """Print the link description and return the printed text."""
        text = self.describe()
        print(text)
        return text