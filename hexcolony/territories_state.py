"""Combined view of the warehouse stock of a territory, with fair updates."""

from __future__ import annotations

from typing import Any, Iterable, List

from hexcolony.good import Good
from hexcolony.territories_storage import TerritoryID
from hexcolony.tile import MAX_AMOUNT, State, TileInstance, TileName


def _empty_warehouse_state() -> State:
    state = TileInstance.from_name(TileName.WAREHOUSE).state
    assert state is not None
    return state


class _Frozen:
    """The summed state of a set of warehouse instances."""

    def __init__(self, instances: Iterable[TileInstance]) -> None:
        self._instances: List[TileInstance] = list(instances)
        self._frozen = self._collect()

    def _collect(self) -> State:
        frozen = _empty_warehouse_state()
        for instance in self._instances:
            if instance.state is not None:
                frozen += instance.state
        return frozen

    def __getitem__(self, good: Good) -> int:
        return self._frozen[good]

    def __contains__(self, good: object) -> bool:
        return good in self._frozen

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Frozen):
            return NotImplemented
        return self._frozen == other._frozen

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: _Frozen) -> bool:
        return self._frozen < other._frozen

    def __le__(self, other: _Frozen) -> bool:
        return self._frozen <= other._frozen

    def __gt__(self, other: _Frozen) -> bool:
        return self._frozen > other._frozen

    def __ge__(self, other: _Frozen) -> bool:
        return self._frozen >= other._frozen


class FrozenState(_Frozen):
    """A read-only snapshot of a territory's warehouse stock."""

    def state(self) -> State:
        """The goods of all warehouses added up."""
        return self._frozen


class FrozenMutState(_Frozen):
    """A territory's warehouse stock that spreads changes fairly over the warehouses."""

    def __init__(self, instances: Iterable[TileInstance]) -> None:
        instances = list(instances)
        for instance in instances:
            if instance.tile.name is not TileName.WAREHOUSE:
                raise ValueError("only warehouses can be combined into a territory state")
        super().__init__(instances)

    def state(self) -> State:
        """The goods of all warehouses added up."""
        return self._frozen

    def update(self) -> None:
        """Recompute the sum from the warehouses."""
        self._frozen = self._collect()

    def _match(self, target: State) -> None:
        changed = False
        current = self._frozen
        for good, amount in target.items():
            if good not in current:
                raise KeyError(f"cannot match difference, unknown good {good}")
            diff = amount - current[good]
            step = 1 if diff < 0 else -1
            while diff != 0:
                moved = False
                for instance in self._instances:
                    state = instance.state
                    if state is None or good not in state:
                        continue
                    if step < 0 and state[good] < MAX_AMOUNT:
                        state[good] += 1
                    elif step > 0 and state[good] > 0:
                        state[good] -= 1
                    else:
                        continue
                    diff += step
                    moved = changed = True
                    if diff == 0:
                        break
                if not moved:
                    raise ValueError(
                        f"the warehouses cannot satisfy the change of {good}"
                    )
        if changed:
            self.update()

    def __iadd__(self, other: State) -> FrozenMutState:
        target = self._frozen.copy()
        target += other
        self._match(target)
        return self

    def __isub__(self, other: State) -> FrozenMutState:
        target = self._frozen.copy()
        target -= other
        self._match(target)
        return self


def _warehouses(map_storage: Any, territory_id: TerritoryID) -> List[TileInstance]:
    territory = map_storage.territories.get_territory(territory_id)
    if territory is None:
        raise KeyError(f"unknown territory {territory_id}")
    warehouses = []
    for coordinate in sorted(territory):
        instance = map_storage.buildings.get(coordinate)
        if instance is not None and instance.tile.name is TileName.WAREHOUSE:
            warehouses.append(instance)
    return warehouses


def freeze(map_storage: Any, territory_id: TerritoryID) -> FrozenState:
    """A snapshot of the warehouses of a territory; the caller holds the map lock."""
    return FrozenState(_warehouses(map_storage, territory_id))


def freeze_mut(map_storage: Any, territory_id: TerritoryID) -> FrozenMutState:
    """A modifiable view of the warehouses of a territory; the caller holds the map lock."""
    return FrozenMutState(_warehouses(map_storage, territory_id))