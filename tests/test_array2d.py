import pytest

from algokit.array2d import Array2D


def test_dimensions():
    grid = Array2D(3, 5)
    assert grid.rows() == 3
    assert grid.cols() == 5


def test_fill_and_set_get():
    grid = Array2D(2, 3, fill=0)
    assert grid[1, 2] == 0
    grid[1, 2] = 7
    assert grid[1, 2] == 7
    assert grid[0, 2] == 0


def test_row_access_returns_row_contents():
    grid = Array2D(2, 3, fill=0)
    grid[1, 0] = "a"
    grid[1, 2] = "c"
    assert grid[1] == ["a", 0, "c"]
    assert grid[0] == [0, 0, 0]


def test_clear_sets_all():
    grid = Array2D(4, 4, fill=False)
    grid[2, 3] = True
    grid.clear(True)
    assert all(grid[r, c] for r in range(4) for c in range(4))


def test_out_of_range_read_raises():
    grid = Array2D(2, 2, fill=0)
    with pytest.raises(IndexError) as excinfo:
        grid[2, 0]
    assert excinfo.type is IndexError
    assert grid[1, 1] == 0


def test_out_of_range_write_raises_and_leaves_grid_unchanged():
    grid = Array2D(2, 2, fill=0)
    with pytest.raises(IndexError) as excinfo:
        grid[0, 5] = 1
    assert excinfo.type is IndexError
    assert [grid[r, c] for r in range(2) for c in range(2)] == [0, 0, 0, 0]


def test_out_of_range_row_raises():
    grid = Array2D(2, 2, fill=0)
    with pytest.raises(IndexError) as excinfo:
        grid[3]
    assert excinfo.type is IndexError
    assert grid[1] == [0, 0]


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Array2D(-1, 2)