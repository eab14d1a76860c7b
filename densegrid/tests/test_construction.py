import pytest

from densegrid.errors import ArraySizeMismatch, InvalidSize
from densegrid.grid import Grid


def test_default_fills_every_cell():
    g = Grid(3, 2, ".")

    assert g.width == 3
    assert g.height == 2
    assert g.shape == (2, 3)
    assert g.to_list() == [
        [".", ".", "."],
        [".", ".", "."],
    ]


def test_default_is_none_when_omitted():
    g = Grid(2, 2)

    assert g.default is None
    assert all(g.get(r, c) is None for r in range(2) for c in range(2))


@pytest.mark.parametrize("width, height", [(-1, 2), (2, -1), (-1, -1)])
def test_negative_size_rejected(width, height):
    with pytest.raises(InvalidSize):
        Grid(width, height, 0)


def test_invalid_size_is_value_error():
    with pytest.raises(ValueError):
        Grid(-1, 0)


def test_zero_sized_grids():
    assert Grid(0, 0).shape == (0, 0)
    assert Grid(0, 3).shape == (3, 0)
    assert Grid(4, 0).shape == (0, 4)


def test_sequence_default_is_stored_not_broadcast():
    g = Grid(2, 2, [1, 2])

    assert g.get(1, 1) == [1, 2]
    assert g.shape == (2, 2)


def test_from_rows():
    g = Grid.from_rows([
        [1, 2, 3],
        [4, 5, 6],
    ], default=0)

    assert g.width == 3
    assert g.height == 2
    assert g.get(1, 0) == 4
    assert g.default == 0


def test_from_rows_empty():
    assert Grid.from_rows([]).shape == (0, 0)


def test_from_rows_ragged():
    with pytest.raises(ArraySizeMismatch):
        Grid.from_rows([[1, 2], [3]])
