import pytest

from hexcolony.coordinate import Coordinate
from hexcolony.terrain import Terrain, TerrainFactory, TerrainMeta
from hexcolony.terrain_type import TerrainType
from hexcolony.yields import Yield

COORDINATES = [Coordinate(x, y) for x in range(-6, 7, 3) for y in range(-6, 7, 3)]


def test_get_matches_meta_type():
    terrain = Terrain(40, 40, 4.0)
    for coordinate in COORDINATES:
        assert terrain.get(coordinate) is terrain.meta(coordinate).terrain_type


def test_factory_quick_type_matches_full_create():
    factory = TerrainFactory(1234, 4.0)
    for nx in (-0.9, -0.3, 0.0, 0.4, 0.8):
        for ny in (-0.95, -0.2, 0.0, 0.5, 0.99):
            assert factory.create_terrain_type(nx, ny) is factory.create(nx, ny).terrain_type


def test_same_seed_gives_same_terrain():
    first = Terrain.new_seeded(3, 20, 20, 0.0)
    second = Terrain.new_seeded(3, 20, 20, 0.0)
    for coordinate in COORDINATES:
        assert first.get(coordinate) is second.get(coordinate)
        assert first.meta(coordinate).yields == second.meta(coordinate).yields


def test_meta_values_are_sane():
    terrain = Terrain(100, 100, 4.0)
    for coordinate in COORDINATES:
        meta = terrain.meta(coordinate)
        assert float(meta.moisture) >= 0.0
        assert float(meta.elevation) >= 0.0
        assert isinstance(meta.terrain_type, TerrainType)
        assert all(isinstance(value, Yield) for value in meta.yields.values())


def test_minimap_size():
    terrain = Terrain(30, 30, 4.0)
    picture = terrain.minimap(10, 6)
    assert len(picture) == 60
    assert all(isinstance(value, TerrainType) for value in picture)


def test_default_meta():
    meta = TerrainMeta()
    assert meta.terrain_type is TerrainType.BARE
    assert float(meta.moisture) == 0.0
    assert dict(meta.yields) == {}


@pytest.mark.parametrize("rows,columns", [(0, 10), (10, 0)])
def test_empty_terrain_rejected(rows, columns):
    with pytest.raises(ValueError):
        Terrain(rows, columns, 4.0)