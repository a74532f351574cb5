# designdemos

A collection of small, self-contained programs, each showing one classic
object-oriented design pattern at work. Every demo prints a narrated trace to
standard output, and every piece can also be imported and used from Python.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The demos

| Command                    | Pattern                      | What it shows |
|----------------------------|------------------------------|---------------|
| `designdemos-spreadsheet`  | Observer                     | An interactive 5x5 spreadsheet whose sum, average and statistics observers recalculate on every change, plus cell links that copy one cell into another |
| `designdemos-strategy`     | Strategy                     | A calculator context whose operation (add, multiply, subtract) is swapped at run time |
| `designdemos-boardgames`   | Template Method              | Chess and checkers sessions played through the same fixed game loop |
| `designdemos-pizza`        | State                        | A pizza order moving from payment to delivery, and a second order cancelled early |
| `designdemos-prototypes`   | Prototype                    | A registry of enemy templates that are cloned to spawn new enemies |
| `designdemos-canvas`       | Factory Method and Prototype | Shapes made by factories and duplicated by cloning on a canvas |

### Spreadsheet (Observer)

`designdemos-spreadsheet` reads whitespace-separated answers from standard
input and shows this menu:

```
1. Set cell value
2. Clear cell value
3. Display grid
4. Display all statistics
5. Add pre-defined test data
6. Create cell link (A=B)
7. Remove cell link
8. Display all cell links
9. Toggle cell link active/inactive
0. Exit
```

Changing a cell notifies every attached observer. A cell link keeps a target
cell equal to a source cell and clears it when the source is cleared. The
session ends on `0` or at the end of input, so it can also be driven from a
pipe:

```
printf '5\n4\n0\n' | designdemos-spreadsheet
```

### Canvas (Factory Method and Prototype)

`designdemos-canvas` on its own makes one rectangle through its factory and
prints it. `designdemos-canvas --full` runs the complete demonstration: shapes
made by factories, modified, cloned onto the canvas, and a side-by-side
comparison of the two ways of making a shape.

## Using the library

```python
from designdemos.spreadsheet import Spreadsheet
from designdemos.observers import SumCalculator, CellLinker

sheet = Spreadsheet(5)
total = SumCalculator()
sheet.attach(total)
sheet.attach(CellLinker(0, 0, 4, 4))

sheet.set_value(0, 0, 10)      # cell (4,4) follows (0,0)
print(sheet.get_value(4, 4))   # 10
print(total.summary())
print(sheet.render_grid())
```

`SpreadsheetSession` in `designdemos.spreadsheet_cli` bundles a spreadsheet
with its observers and links (`create_link`, `remove_link`, `toggle_link`,
`add_test_data`) and its `run()` method accepts any iterable of input lines.

```python
from designdemos.strategy import Context, Add, Multiply

context = Context(Add())
context.calculate(5, 3)        # 8
context.strategy = Multiply()
context.calculate(5, 3)        # 15
```

```python
from designdemos.boardgames import Chess, Checkers

Checkers().play_game()         # same loop, game-specific steps
```

```python
from designdemos.pizza_order import PizzaOrder

order = PizzaOrder("John Doe", 101)
order.add_topping("Pepperoni")
order.process_order()          # payment taken, now prepping ingredients
print(order.current_state())   # "Prepping Ingredients"
print(order.order_info())
```

```python
from designdemos.prototype_manager import PrototypeManager
from designdemos.enemies import OrcEnemy

manager = PrototypeManager()
manager.add("eliteOrc", OrcEnemy("Elite Orc", 150, 35, "Steel Mace", 5))
spawned = manager.get("eliteOrc").clone()
print(spawned.describe())
```

```python
from designdemos.canvas import Canvas
from designdemos.shapes import RectangleFactory

canvas = Canvas()
canvas.add_shape(RectangleFactory().create_shape())
canvas.duplicate_shape(0)      # clone placed two units right and down
print(canvas.render())
```

## Errors

Errors are raised as exceptions:

- writing to or clearing a cell outside the grid raises `InvalidPositionError`
  (an `IndexError`);
- adding a topping once the order has left the payment stage raises
  `OrderLockedError`;
- adding to a prototype registry whose 50 slots are all used raises
  `RegistryFullError`, and removing an unknown key raises `KeyError`;
- duplicating, removing or indexing a canvas shape that does not exist raises
  `IndexError`.

## What it does not do

These are teaching demos. The chess and checkers games are scripted: there is
no board model, move validation or opponent. The spreadsheet lives in memory
only and is not saved anywhere, and its cells hold integers, not formulas.