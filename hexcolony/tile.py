"""Tiles that can be built on the map, and their running instances."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from hexcolony.coordinate import Coordinate, Range
from hexcolony.good import BuildingMaterial, Good, ImmaterialGood, ProductionGood, Weapon
from hexcolony.inventory import Consumes, Costs, Inventory
from hexcolony.terrain_type import TerrainType

MAX_AMOUNT = 2**32 - 1

_Entries = Union[Mapping[Good, Any], Iterable[Tuple[Good, Any]]]


def _pairs(entries: _Entries) -> Iterable[Tuple[Good, Any]]:
    if isinstance(entries, Mapping):
        return entries.items()
    return entries


class TileName(Enum):
    PIONEER = "Pioneer"
    WAREHOUSE = "Warehouse"

    def __str__(self) -> str:
        return self.value


DEFAULT_TILE_NAME = TileName.WAREHOUSE


class State(Inventory[int]):
    """The goods a tile instance currently holds."""

    @classmethod
    def combine(
        cls, consumes: Optional[Consumes], produces: Optional[Produces]
    ) -> Optional[State]:
        """An empty state for every good consumed or produced, or None if neither."""
        if consumes is None and produces is None:
            return None
        state = cls()
        for source in (consumes, produces):
            if source is not None:
                for good in source:
                    state[good] = 0
        return state

    def blueprint_zero(self) -> State:
        """A state with the same goods, all at zero."""
        return type(self).fromkeys(self, 0)

    def blueprint(self, other: Mapping[Good, int]) -> State:
        """The amounts of ``other`` restricted to the goods of this state."""
        converted = self.blueprint_zero()
        converted += dict(other)
        return converted

    def blueprint_from_iter(self, entries: _Entries) -> State:
        return self.blueprint(Inventory(_pairs(entries)))


class Produces(Inventory[Consumes]):
    """Production formulas: for each produced good, the ingredients one unit needs."""

    @classmethod
    def from_consumes(cls, consumes: Mapping[Good, int], entries: _Entries) -> Produces:
        """Build formulas whose ingredients must all be among ``consumes``."""
        produces = cls()
        for good, ingredients in _pairs(entries):
            if not all(ingredient in consumes for ingredient in ingredients):
                raise ValueError(
                    f"production formula for {good} uses a good that is not consumed"
                )
            produces[good] = ingredients
        return produces


class Tile(ABC):
    """A kind of building; tiles are equal when their names are."""

    def __init__(
        self,
        name: TileName,
        *,
        costs: Optional[Costs] = None,
        consumes: Optional[Consumes] = None,
        produces: Optional[Produces] = None,
    ) -> None:
        self.name = name
        self.costs = costs
        self.consumes = consumes
        self.produces = produces

    @abstractmethod
    def allowed(self, at: Coordinate, map_storage: Any) -> bool:
        """Whether this tile may be built at ``at``."""

    @abstractmethod
    def influence_at(self, at: Coordinate) -> Range:
        """The coordinates a tile built at ``at`` reaches."""

    def influence(self) -> Range:
        return self.influence_at(Coordinate())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


class Pioneer(Tile):
    """A settler home that eats fish; it cannot be built directly."""

    def __init__(self) -> None:
        super().__init__(TileName.PIONEER, consumes=Consumes({ProductionGood.FISH: 3}))

    def allowed(self, at: Coordinate, map_storage: Any) -> bool:
        return False

    def influence_at(self, at: Coordinate) -> Range:
        return at.circle(2)


class Warehouse(Tile):
    """Stores goods and claims territory; only built on grassland."""

    def __init__(self) -> None:
        consumes = Consumes(
            (good, 100)
            for category in (ProductionGood, Weapon, BuildingMaterial)
            for good in category
        )
        consumes[ImmaterialGood.MONEY] = MAX_AMOUNT
        super().__init__(
            TileName.WAREHOUSE,
            consumes=consumes,
            costs=Costs({ImmaterialGood.MONEY: 10}),
        )

    def allowed(self, at: Coordinate, map_storage: Any) -> bool:
        return map_storage.terrain.get(at) is TerrainType.GRASSLAND

    def influence_at(self, at: Coordinate) -> Range:
        return at.circle(6)


_INSTANCES: Dict[TileName, Tile] = {
    TileName.PIONEER: Pioneer(),
    TileName.WAREHOUSE: Warehouse(),
}


def get_tile(tile_name: Union[TileName, str]) -> Tile:
    """The shared tile for a name; a string is taken as the name's value."""
    return _INSTANCES[TileName(tile_name)]


@dataclass(eq=False)
class TileInstance:
    """A built tile together with the goods it holds."""

    tile: Tile
    state: Optional[State] = None

    @classmethod
    def from_tile(cls, tile: Tile) -> TileInstance:
        return cls(tile, State.combine(tile.consumes, tile.produces))

    @classmethod
    def from_name(cls, tile_name: Union[TileName, str]) -> TileInstance:
        return cls.from_tile(get_tile(tile_name))

    def consume(self, other: TileInstance) -> None:
        """Take from ``other`` the produced goods this tile consumes, up to its limits."""
        consumes = self.tile.consumes
        state = self.state
        other_produces = other.tile.produces
        other_state = other.state
        if consumes is None or state is None or other_produces is None or other_state is None:
            return
        for good, limit in consumes.items():
            if good not in other_produces:
                continue
            wanted = max(limit - state[good], 0)
            moved = min(other_state[good], wanted)
            if moved > 0:
                state[good] += moved
                other_state[good] -= moved

    def produce(self) -> None:
        """Run the production formulas until no formula has enough ingredients."""
        produces = self.tile.produces
        state = self.state
        if produces is None or state is None:
            return
        for good, ingredients in produces.items():
            if not ingredients:
                raise ValueError(f"production formula for {good} has no ingredients")
        while True:
            some_produced = False
            for good, ingredients in produces.items():
                consumed = state.blueprint_zero()
                sufficient = True
                for ingredient, amount in ingredients.items():
                    if state[ingredient] >= amount:
                        state[ingredient] -= amount
                        consumed[ingredient] = amount
                    else:
                        sufficient = False
                        break
                if sufficient:
                    some_produced = True
                    state[good] += 1
                else:
                    # give back what this attempt took
                    state += consumed
            if not some_produced:
                break