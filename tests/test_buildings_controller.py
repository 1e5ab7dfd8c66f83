import pytest

from hexcolony.buildings import Buildings
from hexcolony.buildings_controller import (
    BuildingsController,
    ConstructionError,
    ConstructionErrorKind,
)
from hexcolony.coordinate import Coordinate
from hexcolony.fow import FOW
from hexcolony.good import ImmaterialGood
from hexcolony.map import MapStorage
from hexcolony.terrain_type import TerrainType
from hexcolony.territories import Territories
from hexcolony.territories_state import freeze
from hexcolony.tile import TileName, get_tile

MONEY = ImmaterialGood.MONEY


class _UniformTerrain:
    def __init__(self, terrain_type):
        self.terrain_type = terrain_type

    def get(self, coordinate):
        return self.terrain_type


def _storage(terrain_type=TerrainType.GRASSLAND):
    return MapStorage(
        terrain=_UniformTerrain(terrain_type),
        territories=Territories(),
        fow=FOW(),
        buildings=Buildings(),
    )


def test_first_warehouse_founds_territory():
    storage = _storage()
    BuildingsController(storage).try_construct(Coordinate(), TileName.WAREHOUSE)
    instance = storage.buildings.get(Coordinate())
    assert instance.tile.name is TileName.WAREHOUSE
    assert instance.state[MONEY] == 1000
    territory_id = storage.territories.get(Coordinate())
    assert territory_id is not None
    assert storage.territories.get_territory(territory_id) == frozenset(Coordinate().circle(6))
    assert storage.fow.get(Coordinate(2, -1))


def test_occupied_coordinate():
    storage = _storage()
    controller = BuildingsController(storage)
    controller.try_construct(Coordinate(), TileName.WAREHOUSE)
    with pytest.raises(ConstructionError) as info:
        controller.try_construct(Coordinate(), TileName.WAREHOUSE)
    assert info.value.kind is ConstructionErrorKind.COORDINATE_OCCUPIED


def test_pioneer_outside_territory():
    with pytest.raises(ConstructionError) as info:
        BuildingsController(_storage()).try_construct(Coordinate(), TileName.PIONEER)
    assert info.value.kind is ConstructionErrorKind.INVALID_TERRITORY


def test_pioneer_inside_territory_is_not_allowed():
    storage = _storage()
    controller = BuildingsController(storage)
    controller.try_construct(Coordinate(), TileName.WAREHOUSE)
    with pytest.raises(ConstructionError) as info:
        controller.try_construct(Coordinate(1, 0), "Pioneer")
    assert info.value.kind is ConstructionErrorKind.INVALID_TERRAIN
    assert storage.buildings.get(Coordinate(1, 0)) is None


def test_warehouse_on_ocean():
    storage = _storage(TerrainType.OCEAN)
    with pytest.raises(ConstructionError) as info:
        BuildingsController(storage).try_construct(Coordinate(), TileName.WAREHOUSE)
    assert info.value.kind is ConstructionErrorKind.INVALID_TERRAIN
    assert storage.territories.get(Coordinate()) is None


def test_second_warehouse_is_paid_from_territory():
    storage = _storage()
    controller = BuildingsController(storage)
    controller.try_construct(Coordinate(), TileName.WAREHOUSE)
    controller.try_construct(Coordinate(1, 1), TileName.WAREHOUSE)
    cost = get_tile(TileName.WAREHOUSE).costs[MONEY]
    assert storage.buildings.get(Coordinate(1, 1)).tile.name is TileName.WAREHOUSE
    assert freeze(storage, storage.territories.get(Coordinate()))[MONEY] == 1000 - cost


def test_territory_without_warehouse_lacks_resources():
    storage = _storage()
    storage.territories.create([Coordinate()])
    with pytest.raises(ConstructionError) as info:
        BuildingsController(storage).try_construct(Coordinate(), TileName.WAREHOUSE)
    assert info.value.kind is ConstructionErrorKind.INSUFFICIENT_RESOURCES
    assert str(info.value) == "InsufficientResources"
    assert storage.buildings.get(Coordinate()) is None