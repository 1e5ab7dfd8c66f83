# hexcolony

hexcolony is the core of a colony-building simulation on a hexagonal grid. It is a library with no dependencies beyond the standard library.

## What it contains

- **`hexcolony.coordinate`**: cube coordinates on a hex grid. `Coordinate(x, y)` has an implicit `z = -x - y`.
  - Coordinates convert to and from even-q `Offset(column, row)` positions with `from_offset` and `to_offset`.
  - They support `+`, `-` and scaling by a number with `*`.
  - `dist` gives the hex distance. `touching_face` returns a `Face`.
  - The module-level `neighbors`, `ring`, `circle` and `rectangle` build sets of coordinates. `ring(center, r)` and `circle(center, r)` both return every coordinate within `r` of the centre. The `Coordinate.ring`, `Coordinate.circle` and `Coordinate.rectangle_to` methods call them.
- **`hexcolony.observable`**: `Observers`, a set of weakly held observers. An observer is any object with a `notify(event)` method.
  - `publish` queues an event, and a background thread delivers it. `flush(timeout)` waits until delivery has finished.
  - Because observers are held weakly, the caller must keep a reference to each observer.
- **`hexcolony.clock`**: `Clock`. Each `tick()` raises the epoch by one, publishes a `Tick` to `clock.tickers` and then publishes a `Tock` to `clock.tockers`.
- **Goods** (`hexcolony.good`): the goods come as the enums `NaturalGood`, `BuildingMaterial`, `HarvestableGood`, `ProductionGood`, `Weapon` and `ImmaterialGood`.
  - `all_goods()` lists every good.
  - `good_name()` gives the qualified name, for example `ImmaterialGood::Money`.
- **Inventories** (`hexcolony.inventory`): `Inventory` is a dict from good to amount.
  - It is partially ordered (`partial_cmp`, `<`, `<=`, `>`, `>=`).
  - `+=` and `-=` only change goods the inventory already holds.
  - `Costs` and `Consumes` are kinds of inventory.
- **`hexcolony.yields`**: `Yield`, a byte-sized productivity value in which 127 stands for 100 %.
- **Terrain**:
  - `hexcolony.relief` holds a seeded `Perlin` noise, `Elevation` and `Moisture`, and their factories.
  - `hexcolony.latlon` holds `Latitude` and `Longitude`.
  - `hexcolony.terrain_type` holds `TerrainType` and the rules that choose a biome.
  - `hexcolony.terrain_yields` works out the resources each location yields.
  - `hexcolony.terrain` combines them in `Terrain`. `Terrain.get(coordinate)` returns the `TerrainType`, and `Terrain.meta(coordinate)` returns a `TerrainMeta` with elevation, moisture, type and yields.
- **Minimaps** (`hexcolony.minimap`): `Minimap.minimap(width, height)` samples a map into a flat list of values, one row after another.
- **`hexcolony.fow`**: `FOW`, the fog of war. It records the set of uncovered coordinates and publishes `Uncover` events.
- **Territories**:
  - `hexcolony.territories_storage` holds `TerritoriesStorage`, which maps coordinates to territory ids and back.
  - `hexcolony.territories` holds `Territories`, which publishes `TerritoryJoined` and `TerritoryLeft` events.
- **Tiles** (`hexcolony.tile`): there are two tiles, `Pioneer` and `Warehouse`.
  - `get_tile(TileName...)` returns one of them.
  - `TileInstance` pairs a tile with its `State`, the goods it holds. `consume` and `produce` move goods.
  - A `Warehouse` can only be built on grassland. A `Pioneer` can never be built directly.
- **Buildings** (`hexcolony.buildings`): `Buildings` maps coordinates to tile instances. It publishes `BuildingCreated` and `BuildingDestroyed` events.
- **`hexcolony.buildings_controller`**: `BuildingsController.try_construct` checks territory, occupancy, terrain and costs, and raises `ConstructionError` if a check fails. The error's `kind` is a `ConstructionErrorKind`. If the checks pass, it pays and builds.
  - The first warehouse outside any territory founds a new territory, and its stock starts with 1000 money.
- **`hexcolony.territories_state`**: `freeze` and `freeze_mut` add up the stock of all warehouses in a territory. Changes made through `freeze_mut` are spread over the warehouses one unit at a time.
- **`hexcolony.buildings_updater`**: `BuildingsUpdater` listens to a clock.
  - On each `Tick`, every building consumes from the buildings within its influence.
  - On each `Tock`, every building runs its production formulas.
  - Neither built-in tile has production formulas.
- **`hexcolony.map`**: `Map` owns a `MapStorage`, which holds terrain, territories, fog of war and buildings behind one lock, together with the controller and the updater.
- **`hexcolony.game`**:
  - `Game` builds a clock and a map from a `Configuration(rows, columns, island_noise)`.
  - `GameController` holds one running game for the whole process.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Usage

```python
from hexcolony.buildings_controller import ConstructionError
from hexcolony.coordinate import Coordinate
from hexcolony.game import Configuration, Game
from hexcolony.tile import TileName

game = Game(Configuration(rows=100, columns=100, island_noise=4.0))

origin = Coordinate(0, 0)
print(game.map.terrain.get(origin))           # a TerrainType
print(game.map.terrain.meta(origin).moisture)

try:
    game.map.buildings_controller.try_construct(origin, TileName.WAREHOUSE)
except ConstructionError as error:
    print("cannot build:", error.kind)


class TickPrinter:
    def notify(self, event):
        print(event)


printer = TickPrinter()  # keep a reference: observers are held weakly
game.clock.tickers.register(printer)
game.clock.tick()
game.clock.tickers.flush(1.0)
```

The process-wide game:

```python
from hexcolony.game import Configuration, GameController

GameController.start(Configuration(rows=50, columns=50, island_noise=2.0))
game = GameController.game()
```

## What it does not do

hexcolony is only the simulation model. It has no limits beyond those listed here, and it leaves the following out:

- It has no command-line program, no screen or rendering, and no user input handling.
- It cannot save or load a game. All state lives in memory.
- It does not model players or units. Territory is founded by the first warehouse rather than by a settler.

A front end has to drive the clock, call the controllers and listen to the published events itself.

## Running the tests

```
pytest
```