import pytest

from hexcolony.coordinate import Coordinate, Offset
from hexcolony.minimap import Minimap


class Grid(Minimap):
    def __init__(self, rows, columns):
        self.rows = rows
        self.columns = columns

    def get(self, coordinate):
        return coordinate


def test_size_is_width_times_height():
    assert len(Minimap.minimap(Grid(10, 10), 4, 6)) == 24


def test_centre_is_origin():
    width, height = 4, 4
    result = Grid(4, 4).minimap(width, height)
    assert result[(height // 2) * width + width // 2] == Coordinate(0, 0)


def test_first_is_top_left_offset():
    result = Grid(4, 4).minimap(4, 4)
    assert result[0] == Coordinate.from_offset(Offset(-2, -2))


def test_scaled_sampling():
    result = Grid(8, 8).minimap(4, 4)
    assert result[-1] == Coordinate.from_offset(Offset(2, 2))


def test_empty_sizes():
    assert Minimap.minimap(Grid(5, 5), 0, 4) == []
    assert Minimap.minimap(Grid(5, 5), 4, 1) == []


def test_odd_width_rejected():
    with pytest.raises(ValueError):
        Minimap.minimap(Grid(5, 5), 3, 4)


def test_size_out_of_range_rejected():
    with pytest.raises(ValueError):
        Minimap.minimap(Grid(5, 5), -2, 4)


def test_get_range_keeps_order():
    coordinates = [Coordinate(1, 2), Coordinate(-3, 0), Coordinate(0, 0)]
    assert Grid(1, 1).get_range(coordinates) == coordinates