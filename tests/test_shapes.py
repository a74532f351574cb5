import pytest

from designdemos.shapes import (
    Rectangle,
    RectangleFactory,
    Shape,
    ShapeFactory,
    Square,
    SquareFactory,
    Textbox,
    TextboxFactory,
)


def test_base_shape_defaults():
    shape = Shape()
    assert (shape.length, shape.width, shape.colour) == (0, 0, "white")
    assert (shape.position_x, shape.position_y) == (0, 0)


def test_rectangle_default_description():
    assert Rectangle().describe() == "Rectangle: 10x5, Color: blue, Position: (0,0)"


def test_square_default_description():
    assert Square().describe() == "Square: 8x8, Color: red, Position: (0,0)"


def test_textbox_default_description():
    assert (
        Textbox().describe()
        == 'Textbox: 15x3, Color: yellow, Position: (0,0), Text: "Default Text"'
    )


def test_set_position_changes_description():
    rect = Rectangle()
    rect.set_position(5, 10)
    assert (rect.position_x, rect.position_y) == (5, 10)
    assert rect.describe().endswith("Position: (5,10)")


def test_clone_has_same_fields_but_is_independent():
    box = Textbox(4, 2, "orange", 25, 30, "Hello Prototype!")
    copy_ = box.clone()
    assert copy_ is not box
    assert type(copy_) is Textbox
    assert copy_.describe() == box.describe()
    copy_.set_position(1, 1)
    copy_.text = "changed"
    assert (box.position_x, box.position_y) == (25, 30)
    assert box.text == "Hello Prototype!"


def test_square_keeps_sides_equal():
    square = Square(3, "green", 0, 0)
    square.length = 7
    assert square.width == 7
    square.width = 4
    assert square.length == 4
    square.set_size(9)
    assert (square.length, square.width) == (9, 9)


def test_square_clone_is_independent():
    square = Square()
    twin = square.clone()
    twin.set_size(2)
    assert square.length == 8
    assert twin.length == 2


@pytest.mark.parametrize(
    "factory, kind, label",
    [
        (RectangleFactory(), Rectangle, "Rectangle Factory"),
        (SquareFactory(), Square, "Square Factory"),
        (TextboxFactory(), Textbox, "Textbox Factory"),
    ],
)
def test_factories_make_their_kind(factory, kind, label):
    first = factory.create_shape()
    second = factory.create_shape()
    assert type(first) is kind
    assert first is not second
    assert first.describe() == kind().describe()
    assert str(factory) == label


def test_shape_factory_is_abstract():
    with pytest.raises(TypeError):
        ShapeFactory()


def test_display_prints_description(capsys):
    Square().display()
    assert capsys.readouterr().out == "Square: 8x8, Color: red, Position: (0,0)\n"