import pytest

from designdemos.observers import (
    AverageCalculator,
    CellLinker,
    StatisticsDisplay,
    SumCalculator,
)
from designdemos.spreadsheet import Spreadsheet


@pytest.fixture
def sheet():
    return Spreadsheet(5)


def test_sum_single_cell(sheet):
    calc = SumCalculator()
    sheet.attach(calc)
    sheet.set_value(0, 0, 10)
    assert calc.total_sum == 10
    assert calc.cell_count == 1


def test_sum_matches_filled_values(sheet):
    calc = SumCalculator()
    sheet.attach(calc)
    for row, col, value in [(0, 0, 10), (0, 1, 20), (1, 0, 5), (2, 2, 100)]:
        sheet.set_value(row, col, value)
    values = [v for _, _, v in sheet.filled_values()]
    assert calc.total_sum == sum(values)
    assert calc.cell_count == len(values)


def test_sum_summary_text(sheet):
    calc = SumCalculator()
    sheet.attach(calc)
    sheet.set_value(3, 3, 7)
    assert calc.summary() == "SUM CALCULATOR: Total = 7, Cells with values = 1"


def test_sum_after_clear_returns_to_zero(sheet):
    calc = SumCalculator()
    sheet.attach(calc)
    sheet.set_value(1, 1, 8)
    sheet.clear_value(1, 1)
    assert (calc.total_sum, calc.cell_count) == (0, 0)


def test_unattached_observer_keeps_defaults(capsys):
    calc = SumCalculator()
    calc.update()
    assert (calc.total_sum, calc.cell_count) == (0, 0)
    assert capsys.readouterr().out == "SumCalculator: Recalculating...\n"


def test_average_of_two_values(sheet):
    calc = AverageCalculator()
    sheet.attach(calc)
    sheet.set_value(0, 0, 4)
    sheet.set_value(0, 1, 9)
    assert calc.average == pytest.approx(6.5)
    assert calc.summary() == "AVERAGE CALCULATOR: Average = 6.5 (from 2 cells)"


def test_average_agrees_with_sum(sheet):
    total = SumCalculator()
    average = AverageCalculator()
    sheet.attach(total)
    sheet.attach(average)
    for col, value in enumerate([3, 11, 25]):
        sheet.set_value(2, col, value)
    assert average.average == pytest.approx(total.total_sum / total.cell_count)


def test_average_without_data(sheet):
    calc = AverageCalculator()
    sheet.attach(calc)
    sheet.set_value(0, 0, 5)
    sheet.clear_value(0, 0)
    assert calc.average == 0.0
    assert calc.summary() == "AVERAGE CALCULATOR: No data available"


def test_statistics_min_max(sheet):
    stats = StatisticsDisplay()
    sheet.attach(stats)
    for col, value in enumerate([15, -3, 40, 7]):
        sheet.set_value(1, col, value)
    assert stats.min_value == -3
    assert stats.max_value == 40
    assert stats.total_cells == 4
    assert stats.summary() == "STATISTICS: Min = -3, Max = 40, Total cells = 4"


def test_statistics_without_data(sheet):
    stats = StatisticsDisplay()
    sheet.attach(stats)
    sheet.clear_value(0, 0)
    assert (stats.min_value, stats.max_value, stats.total_cells) == (0, 0, 0)
    assert stats.summary() == "STATISTICS: No data available"


def test_display_methods_print_summary(sheet, capsys):
    stats = StatisticsDisplay()
    sheet.attach(stats)
    sheet.set_value(0, 0, 2)
    capsys.readouterr()
    stats.display_statistics()
    assert capsys.readouterr().out == stats.summary() + "\n"


def test_linker_copies_source_to_target(sheet):
    linker = CellLinker(0, 0, 4, 4)
    sheet.attach(linker)
    sheet.set_value(0, 0, 33)
    assert sheet.get_value(4, 4) == 33
    assert linker.active is True


def test_linker_clears_target_when_source_cleared(sheet):
    linker = CellLinker(0, 0, 1, 1)
    sheet.attach(linker)
    sheet.set_value(0, 0, 12)
    sheet.clear_value(0, 0)
    assert sheet.has_value_at(1, 1) is False


def test_linked_value_reaches_other_observers(sheet):
    calc = SumCalculator()
    sheet.attach(calc)
    sheet.attach(CellLinker(0, 0, 2, 2))
    sheet.set_value(0, 0, 6)
    assert sheet.get_value(2, 2) == 6
    assert calc.cell_count == 2
    assert calc.total_sum == sheet.get_value(0, 0) + sheet.get_value(2, 2)


def test_inactive_linker_does_nothing(sheet):
    linker = CellLinker(0, 0, 3, 3)
    sheet.attach(linker)
    linker.active = False
    sheet.set_value(0, 0, 50)
    assert sheet.has_value_at(3, 3) is False


def test_linker_prints_link_message(sheet, capsys):
    sheet.attach(CellLinker(0, 1, 2, 3))
    sheet.set_value(0, 1, 9)
    out = capsys.readouterr().out
    assert "CellLinker: Linking cell (2,3) to value 9 from cell (0,1)" in out


def test_linker_describe():
    linker = CellLinker(1, 2, 3, 4)
    assert linker.describe() == "CELL LINK: (3,4) = (1,2) [ACTIVE]"
    linker.active = False
    assert linker.describe() == "CELL LINK: (3,4) = (1,2) [INACTIVE]"


def test_linker_retargeting(sheet):
    linker = CellLinker(0, 0, 1, 1)
    sheet.attach(linker)
    linker.target_row, linker.target_col = 4, 0
    sheet.set_value(0, 0, 21)
    assert sheet.get_value(4, 0) == 21
    assert sheet.has_value_at(1, 1) is False