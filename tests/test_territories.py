from hexcolony.coordinate import Coordinate
from hexcolony.territories import Territories, TerritoryJoined, TerritoryLeft


class Recorder:
    def __init__(self):
        self.events = []

    def notify(self, event):
        self.events.append(event)


def test_create_assigns_increasing_ids():
    territories = Territories(10, 10)
    first = territories.create(Coordinate(0, 0).circle(1))
    second = territories.create(Coordinate(5, 0).circle(1))
    assert first == 0
    assert second == first + 1
    assert territories.get(Coordinate(0, 0)) == first
    assert territories.get(Coordinate(5, 0)) == second
    assert territories.get(Coordinate(-5, 0)) is None


def test_get_territory_and_range_at():
    territories = Territories()
    area = Coordinate(0, 0).circle(2)
    territory_id = territories.create(area)
    assert territories.get_territory(territory_id) == frozenset(area)
    assert territories.range_at(Coordinate(1, 0)) == frozenset(area)
    assert territories.range_at(Coordinate(9, 9)) is None
    assert territories.get_territory(territory_id + 1) is None


def test_create_does_not_steal_owned_coordinates():
    territories = Territories()
    first_area = Coordinate(0, 0).circle(1)
    second_area = Coordinate(1, 0).circle(1)
    first = territories.create(first_area)
    second = territories.create(second_area)
    assert territories.get_territory(first) == frozenset(first_area)
    assert territories.get_territory(second) == frozenset(second_area - first_area)


def test_extend_adds_only_free_coordinates():
    territories = Territories()
    first = territories.create({Coordinate(0, 0)})
    second = territories.create({Coordinate(1, 0)})
    territories.extend(first, {Coordinate(1, 0), Coordinate(2, 0)})
    assert territories.get(Coordinate(1, 0)) == second
    assert territories.get(Coordinate(2, 0)) == first


def test_set_none_releases_coordinate():
    territories = Territories()
    territory_id = territories.create({Coordinate(0, 0), Coordinate(1, 0)})
    territories.set(Coordinate(0, 0), None)
    assert territories.get(Coordinate(0, 0)) is None
    assert territories.get_territory(territory_id) == frozenset({Coordinate(1, 0)})


def test_events_on_join_and_move():
    territories = Territories()
    joined = Recorder()
    left = Recorder()
    territories.joiners.register(joined)
    territories.leavers.register(left)
    territories.set(Coordinate(0, 0), 4)
    territories.set(Coordinate(0, 0), 7)
    territories.set(Coordinate(0, 0), None)
    assert territories.joiners.flush(5)
    assert territories.leavers.flush(5)
    assert joined.events == [
        TerritoryJoined(Coordinate(0, 0), 4),
        TerritoryJoined(Coordinate(0, 0), 7),
    ]
    assert left.events == [
        TerritoryLeft(Coordinate(0, 0), 4),
        TerritoryLeft(Coordinate(0, 0), 7),
    ]


def test_releasing_free_coordinate_is_silent():
    territories = Territories()
    left = Recorder()
    territories.leavers.register(left)
    territories.set(Coordinate(3, 3), None)
    assert territories.leavers.flush(5)
    assert left.events == []


def test_fill_and_minimap():
    territories = Territories(4, 4)
    assert territories.minimap(4, 4) == [None] * 16
    territories.fill(Coordinate(0, 0).circle(6), 2)
    assert set(territories.minimap(4, 4)) == {2}
    assert territories.get_range([Coordinate(0, 0), Coordinate(20, 0)]) == [2, None]