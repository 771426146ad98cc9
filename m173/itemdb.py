"""The built-in item definitions."""

from __future__ import annotations

from typing import Optional

from m173.helper import ArmorType
from m173.items import (
    Item,
    ItemArmor,
    ItemBow,
    ItemFishingRod,
    ItemLighter,
    ItemMap,
    ItemRegistry,
    ItemSign,
    ItemSnowball,
    ItemSword,
)
from m173.toolmaterial import ToolMaterialIndex

__all__ = ["build_item_database"]

_M = ToolMaterialIndex
_A = ArmorType

_ITEMS = [
    ("iron_shovel", 0, Item, ()),
    ("iron_pickaxe", 1, Item, ()),
    ("iron_axe", 2, Item, ()),
    ("lighter", 3, ItemLighter, ()),
    ("apple", 4, Item, ()),
    ("bow", 5, ItemBow, ()),
    ("arrow", 6, Item, ()),
    ("coal", 7, Item, ()),
    ("diamond", 8, Item, ()),
    ("iron_ingot", 9, Item, ()),
    ("gold_ingot", 10, Item, ()),
    ("iron_sword", 11, ItemSword, (_M.IRON,)),
    ("wooden_sword", 12, ItemSword, (_M.WOOD,)),
    ("wooden_shovel", 13, Item, ()),
    ("wooden_pickaxe", 14, Item, ()),
    ("wooden_axe", 15, Item, ()),
    ("stone_sword", 16, Item, ()),
    ("stone_shovel", 17, Item, ()),
    ("stone_pickaxe", 18, Item, ()),
    ("stone_axe", 19, Item, ()),
    ("diamond_sword", 20, ItemSword, (_M.DIAMOND,)),
    ("diamond_shovel", 21, Item, ()),
    ("diamond_pickaxe", 22, Item, ()),
    ("diamond_axe", 23, Item, ()),
    ("stick", 24, Item, ()),
    ("bowl", 25, Item, ()),
    ("soup", 26, Item, ()),
    ("golden_sword", 27, ItemSword, (_M.GOLD,)),
    ("golden_shovel", 28, Item, ()),
    ("golden_pickaxe", 29, Item, ()),
    ("golden_axe", 30, Item, ()),
    ("string", 31, Item, ()),
    ("feather", 32, Item, ()),
    ("gunpowder", 33, Item, ()),
    ("wooden_hoe", 34, Item, ()),
    ("stone_hoe", 35, Item, ()),
    ("iron_hoe", 36, Item, ()),
    ("diamond_hoe", 37, Item, ()),
    ("golden_hoe", 38, Item, ()),
    ("seeds", 39, Item, ()),
    ("wheat", 40, Item, ()),
    ("bread", 41, Item, ()),
    ("leather_helmet", 42, ItemArmor, (_A.HEAD,)),
    ("leather_chest", 43, ItemArmor, (_A.CHEST,)),
    ("leather_leggings", 44, ItemArmor, (_A.PANTS,)),
    ("leather_boots", 45, ItemArmor, (_A.BOOTS,)),
    ("chain_helmet", 46, ItemArmor, (_A.HEAD,)),
    ("chain_chest", 47, ItemArmor, (_A.CHEST,)),
    ("chain_leggings", 48, ItemArmor, (_A.PANTS,)),
    ("chain_boots", 49, ItemArmor, (_A.BOOTS,)),
    ("iron_helmet", 50, ItemArmor, (_A.HEAD,)),
    ("iron_chest", 51, ItemArmor, (_A.CHEST,)),
    ("iron_leggings", 52, ItemArmor, (_A.PANTS,)),
    ("iron_boots", 53, ItemArmor, (_A.BOOTS,)),
    ("diamond_helmet", 54, ItemArmor, (_A.HEAD,)),
    ("diamond_chest", 55, ItemArmor, (_A.CHEST,)),
    ("diamond_leggings", 56, ItemArmor, (_A.PANTS,)),
    ("diamond_boots", 57, ItemArmor, (_A.BOOTS,)),
    ("golden_helmet", 58, ItemArmor, (_A.HEAD,)),
    ("golden_chest", 59, ItemArmor, (_A.CHEST,)),
    ("golden_leggings", 60, ItemArmor, (_A.PANTS,)),
    ("golden_boots", 61, ItemArmor, (_A.BOOTS,)),
    ("flint", 62, Item, ()),
    ("raw_pork", 63, Item, ()),
    ("cooked_pork", 64, Item, ()),
    ("painting", 65, Item, ()),
    ("golden_apple", 66, Item, ()),
    ("sign", 67, ItemSign, ()),
    ("door", 68, Item, ()),
    ("bucket", 69, Item, ()),
    ("water_bucket", 70, Item, ()),
    ("lava_bucket", 71, Item, ()),
    ("minecart", 72, Item, ()),
    ("saddle", 73, Item, ()),
    ("iron_door", 74, Item, ()),
    ("redstone_powder", 75, Item, ()),
    ("snowball", 76, ItemSnowball, ()),
    ("boat", 77, Item, ()),
    ("leather", 78, Item, ()),
    ("milk_bucket", 79, Item, ()),
    ("brick", 80, Item, ()),
    ("clay", 81, Item, ()),
    ("sugar_cane", 82, Item, ()),
    ("paper", 83, Item, ()),
    ("book", 84, Item, ()),
    ("slime", 85, Item, ()),
    ("chest_minecart", 86, Item, ()),
    ("furnace_minecart", 87, Item, ()),
    ("egg", 88, Item, ()),
    ("compass", 89, Item, ()),
    ("fishing_rod", 90, ItemFishingRod, ()),
    ("clock", 91, Item, ()),
    ("glow_dust", 92, Item, ()),
    ("fish", 93, Item, ()),
    ("cooked_fish", 94, Item, ()),
    ("generic_dye", 95, Item, ()),
    ("bone", 96, Item, ()),
    ("sugar", 97, Item, ()),
    ("cake", 98, Item, ()),
    ("bed", 99, Item, ()),
    ("redstone_repeater", 100, Item, ()),
    ("cookie", 101, Item, ()),
    ("map", 102, ItemMap, ()),
    ("shears", 103, Item, ()),
]


def build_item_database(registry: Optional[ItemRegistry] = None) -> dict[str, Item]:
    """Create every built-in item in the registry, keyed by name in id order."""
    return {
        name: cls(item_id, *extra, registry=registry)
        for name, item_id, cls, extra in _ITEMS
    }