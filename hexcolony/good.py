"""Goods, grouped into categories, and their qualified names."""

from __future__ import annotations

from enum import Enum
from typing import Union


class _GoodEnum(Enum):
    def __str__(self) -> str:
        return self.value


class NaturalGood(_GoodEnum):
    COAL_REPO = "CoalRepo"
    COPPER_ORE_REPO = "CopperOreRepo"
    FRESH_WATER = "FreshWater"
    GEM_STONE_REPO = "GemStoneRepo"
    IRON_ORE_REPO = "IronOreRepo"
    MARBLE_REPO = "MarbleRepo"
    SALT_REPO = "SaltRepo"
    SILVER_ORE_REPO = "SilverOreRepo"
    GOLD_ORE_REPO = "GoldOreRepo"
    STONE_REPO = "StoneRepo"
    CLAY_REPO = "ClayRepo"
    WHALE = "Whale"
    WILD_FISH = "WildFish"


class BuildingMaterial(_GoodEnum):
    BELLS = "Bells"
    BRICK = "Brick"
    ENGINEER = "Engineer"
    MARBLE = "Marble"
    STONE = "Stone"
    TOOL = "Tool"
    WOOD = "Wood"


class HarvestableGood(_GoodEnum):
    CATTLE = "Cattle"
    COCOA_PLANT = "CocoaPlant"
    COTTON_PLANT = "CottonPlant"
    EARS = "Ears"
    FLOWER_PLANT = "FlowerPlant"
    GAME = "Game"
    GRAPE = "Grape"
    HEMP_PLANT = "HempPlant"
    HOPS_PLANT = "HopsPlant"
    INDIGO_PLANT = "IndigoPlant"
    PELT_ANIMAL = "PeltAnimal"
    POTATO_PLANT = "PotatoPlant"
    SHEEP = "Sheep"
    SILK_WORM = "SilkWorm"
    SPICE_PLANT = "SpicePlant"
    SUGAR_CANE_PLANT = "SugarCanePlant"
    TOBACCO_PLANT = "TobaccoPlant"
    TREE = "Tree"
    UNTAMED_HORSE = "UntamedHorse"


class ProductionGood(_GoodEnum):
    ALCOHOL = "Alcohol"
    AMBER = "Amber"
    BEER = "Beer"
    BEES = "Bees"
    BOOK = "Book"
    BREAD = "Bread"
    BRONZE_BAR = "BronzeBar"
    CERAMIC = "Ceramic"
    CLAY = "Clay"
    CLOTH = "Cloth"
    CLOTHES = "Clothes"
    COAL = "Coal"
    COCOA = "Cocoa"
    COPPER_BAR = "CopperBar"
    COPPER_ORE = "CopperOre"
    COTTON = "Cotton"
    FINERY = "Finery"
    FISH = "Fish"
    FLOUR = "Flour"
    FLOWERS = "Flowers"
    FOOD = "Food"
    GEM_STONE = "GemStone"
    GOLD_BAR = "GoldBar"
    GUN_POWDER = "GunPowder"
    HEMP = "Hemp"
    HONEY = "Honey"
    HOPS = "Hops"
    HORSE = "Horse"
    INDIGO = "Indigo"
    INK = "Ink"
    INSTRUMENT = "Instrument"
    IRON_BAR = "IronBar"
    IRON_ORE = "IronOre"
    JEWELLERY = "Jewellery"
    LAMP_OIL = "LampOil"
    LEATHER = "Leather"
    MEAT = "Meat"
    PAPER = "Paper"
    PELT = "Pelt"
    PERFUME = "Perfume"
    PIGMENT = "Pigment"
    PORCELAIN = "Porcelain"
    POTATO = "Potato"
    RAW_HIDE = "RawHide"
    ROPE = "Rope"
    SAILS = "Sails"
    SALT = "Salt"
    SILK = "Silk"
    SILVER_BAR = "SilverBar"
    SILVER_ORE = "SilverOre"
    SLAG = "Slag"
    SPICES = "Spices"
    SPIRIT = "Spirit"
    SUGAR = "Sugar"
    SUGAR_CANE = "SugarCane"
    TIN_BAR = "TinBar"
    TOBACCO = "Tobacco"
    TOBACCO_LEAF = "TobaccoLeaf"
    WHALE_TALLOW = "WhaleTallow"
    WHEAT = "Wheat"
    WINE = "Wine"
    WOOL = "Wool"


class Weapon(_GoodEnum):
    ARMOR = "Armor"
    CANNON = "Cannon"
    MORTAR = "Mortar"
    MUSKET = "Musket"
    PIKE = "Pike"
    SWORD = "Sword"
    WAR_HORSE = "WarHorse"


class ImmaterialGood(_GoodEnum):
    CULTURE = "Culture"
    EDUCATION = "Education"
    FAITH = "Faith"
    HYGIENE = "Hygiene"
    MONEY = "Money"
    PRESTIGE = "Prestige"


Good = Union[
    BuildingMaterial,
    HarvestableGood,
    ImmaterialGood,
    NaturalGood,
    ProductionGood,
    Weapon,
]

GOOD_CATEGORIES = (
    BuildingMaterial,
    HarvestableGood,
    ImmaterialGood,
    NaturalGood,
    ProductionGood,
    Weapon,
)

DEFAULT_GOOD = ImmaterialGood.MONEY


def all_goods() -> tuple[Good, ...]:
    """Every good, category by category, each in declaration order."""
    return tuple(good for category in GOOD_CATEGORIES for good in category)


def good_name(good: Good) -> str:
    """Qualified name such as ``ImmaterialGood::Money``."""
    if not isinstance(good, _GoodEnum):
        raise TypeError(f"not a good: {good!r}")
    return f"{type(good).__name__}::{good.value}"