import pytest

from densegrid.bounds import exclusive_invalid, inclusive_invalid
from densegrid.errors import OutOfBounds
from densegrid.grid import Grid


@pytest.fixture
def grid():
    return Grid.from_rows([
        [1, 2, 3],
        [4, 5, 6],
    ], default=0)


def test_inclusive_invalid():
    assert inclusive_invalid(-1, 3)
    assert not inclusive_invalid(0, 3)
    assert not inclusive_invalid(2, 3)
    assert inclusive_invalid(3, 3)
    assert inclusive_invalid(0, 0)


def test_exclusive_invalid():
    assert exclusive_invalid(-1, 3)
    assert not exclusive_invalid(3, 3)
    assert exclusive_invalid(4, 3)
    assert not exclusive_invalid(0, 0)


def test_set_changes_only_target(grid):
    before = grid.to_list()
    grid.set(1, 2, 60)

    assert grid.get(1, 2) == 60
    for r in range(grid.height):
        for c in range(grid.width):
            if (r, c) != (1, 2):
                assert grid.get(r, c) == before[r][c]


def test_item_access(grid):
    grid[0, 1] = "x"

    assert grid[0, 1] == "x"
    assert grid.get(0, 1) == "x"


@pytest.mark.parametrize("row, col", [(2, 0), (0, 3), (-1, 0), (0, -1)])
def test_get_out_of_bounds(grid, row, col):
    with pytest.raises(OutOfBounds):
        grid.get(row, col)


@pytest.mark.parametrize("row, col", [(2, 0), (0, 3), (-1, 0), (0, -1)])
def test_set_out_of_bounds(grid, row, col):
    with pytest.raises(OutOfBounds):
        grid.set(row, col, 9)
    assert grid.to_list() == [[1, 2, 3], [4, 5, 6]]


def test_out_of_bounds_is_index_error(grid):
    with pytest.raises(IndexError):
        grid[5, 5]


def test_exports_are_copies(grid):
    rows = grid.to_list()
    rows[0][0] = 100
    arr = grid.to_array()
    arr[0, 0] = 100

    assert grid.get(0, 0) == 1
    assert list(grid) == [[1, 2, 3], [4, 5, 6]]
