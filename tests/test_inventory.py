import math

import pytest

from hexcolony.good import ImmaterialGood, ProductionGood, Weapon
from hexcolony.inventory import Consumes, Costs, Inventory

MONEY = ImmaterialGood.MONEY
FISH = ProductionGood.FISH
SWORD = Weapon.SWORD


def test_construction_from_pairs_and_lookup():
    inventory = Inventory([(MONEY, 10), (FISH, 3)])
    assert inventory[MONEY] == 10
    assert inventory[FISH] == 3
    assert SWORD not in inventory
    with pytest.raises(KeyError):
        inventory[SWORD]


def test_iadd_only_touches_existing_goods():
    inventory = Inventory({MONEY: 10})
    result = inventory
    result += {MONEY: 5, FISH: 3}
    assert result is inventory
    assert inventory[MONEY] == 15
    assert FISH not in inventory


def test_isub_only_touches_existing_goods():
    inventory = Inventory({MONEY: 10, FISH: 4})
    inventory -= Inventory({FISH: 4, SWORD: 1})
    assert inventory[FISH] == 0
    assert inventory[MONEY] == 10
    assert SWORD not in inventory


def test_add_then_subtract_round_trip():
    original = Inventory({MONEY: 7, FISH: 2})
    working = original.copy()
    delta = Inventory({MONEY: 3, FISH: 9, SWORD: 1})
    working += delta
    working -= delta
    assert working == original


def test_copy_keeps_type_and_is_independent():
    costs = Costs({MONEY: 10})
    duplicate = costs.copy()
    assert type(duplicate) is Costs
    duplicate[MONEY] = 1
    assert costs[MONEY] == 10


def test_specialized_inventories_compare_equal_to_plain():
    assert Costs({MONEY: 10}) == Inventory({MONEY: 10})
    assert Consumes([(FISH, 3)]) == Inventory({FISH: 3})


def test_strictly_smaller_values():
    small = Inventory({MONEY: 1, FISH: 2})
    large = Inventory({MONEY: 2, FISH: 3})
    assert small < large
    assert small <= large
    assert large > small
    assert large >= small
    assert not small > large
    assert not large < small


def test_partly_smaller_values_still_less():
    small = Inventory({MONEY: 1, FISH: 2})
    large = Inventory({MONEY: 2, FISH: 2})
    assert small < large
    assert large > small


def test_mixed_values_are_incomparable():
    a = Inventory({MONEY: 1, FISH: 3})
    b = Inventory({MONEY: 2, FISH: 2})
    assert a.partial_cmp(b) is None
    assert not a < b
    assert not a > b
    assert not a <= b
    assert not a >= b


def test_equal_inventories():
    a = Inventory({MONEY: 4, FISH: 4})
    b = Inventory({MONEY: 4, FISH: 4})
    assert a.partial_cmp(b) == 0
    assert a <= b
    assert a >= b
    assert not a < b


def test_subset_with_equal_values_is_less():
    subset = Inventory({MONEY: 1})
    superset = Inventory({MONEY: 1, FISH: 0})
    assert subset < superset
    assert superset > subset


def test_subset_with_larger_values_is_incomparable():
    subset = Inventory({MONEY: 5})
    superset = Inventory({MONEY: 1, FISH: 0})
    assert subset.partial_cmp(superset) is None


def test_disjoint_inventories_are_incomparable():
    a = Inventory({MONEY: 1})
    b = Inventory({FISH: 1})
    assert a.partial_cmp(b) is None
    assert b.partial_cmp(a) is None


def test_empty_inventories():
    empty = Inventory()
    assert empty.partial_cmp(Inventory()) == 0
    assert empty < Inventory({MONEY: 0})


def test_nan_amounts_are_incomparable():
    a = Inventory({MONEY: math.nan})
    b = Inventory({MONEY: 1.0})
    assert a.partial_cmp(b) is None


def test_costs_compare_with_state_like_inventory():
    costs = Costs({MONEY: 10})
    funds = Inventory({MONEY: 1000, FISH: 0})
    assert costs < funds
    assert not funds < costs


def test_comparison_with_non_inventory_raises():
    with pytest.raises(TypeError):
        Inventory({MONEY: 1}) < 5