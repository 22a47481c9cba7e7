import pytest

from tile2048.ui import CELL_AREA, DEFAULT_STYLE, cell_size, cell_style


@pytest.mark.parametrize(
    "value, expected",
    [
        (2, ("#fbfced", "black")),
        (4, ("#ecefc6", "black")),
        (16, ("#ff7373", "black")),
        (32, ("#f6546a", "white")),
        (512, ("#297A76", "white")),
        (2048, ("#1C9F4E", "white")),
    ],
)
def test_cell_style_known_values(value, expected):
    assert cell_style(value) == expected


@pytest.mark.parametrize("value", [0, 3, 4096])
def test_cell_style_falls_back_to_default(value):
    assert cell_style(value) == DEFAULT_STYLE
    assert cell_style(value) == ("lightgray", "black")


def test_large_tiles_use_white_text():
    assert all(cell_style(2 ** power)[1] == "white" for power in range(5, 12))
    assert all(cell_style(2 ** power)[1] == "black" for power in range(1, 5))


def test_cell_size_square_board():
    assert cell_size(4, 4) == (50, 50)


@pytest.mark.parametrize("rows, cols", [(4, 4), (4, 10), (7, 5), (10, 10)])
def test_cell_size_fits_area(rows, cols):
    width, height = cell_size(rows, cols)
    assert width * rows <= CELL_AREA
    assert height * cols <= CELL_AREA
    assert (width + 1) * rows > CELL_AREA
    assert (height + 1) * cols > CELL_AREA


def test_cell_size_width_follows_rows():
    narrow_rows = cell_size(10, 4)
    assert narrow_rows[0] < narrow_rows[1]
    assert cell_size(4, 10) == tuple(reversed(narrow_rows))