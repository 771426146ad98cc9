"""The built-in block definitions."""

from __future__ import annotations

from typing import Optional

from m173.blocks import (
    BasicBlock,
    Block,
    BlockRegistry,
    NoteBlock,
    SaplingBlock,
    TorchBlock,
    WoolBlock,
    WorkbenchBlock,
)
from m173.items import ItemRegistry

__all__ = ["build_block_database"]

_SOFT = 0.0

_BLOCKS = [
    ("air", 0, BasicBlock, None),
    ("stone", 1, BasicBlock, None),
    ("grass_block", 2, BasicBlock, None),
    ("dirt", 3, BasicBlock, None),
    ("cobblestone", 4, BasicBlock, None),
    ("planks", 5, BasicBlock, None),
    ("sapling", 6, SaplingBlock, None),
    ("bedrock", 7, BasicBlock, None),
    ("water", 8, BasicBlock, None),
    ("water_still", 9, BasicBlock, None),
    ("lava", 10, BasicBlock, None),
    ("lava_still", 11, BasicBlock, None),
    ("sand", 12, BasicBlock, None),
    ("gravel", 13, BasicBlock, None),
    ("gold_ore", 14, BasicBlock, None),
    ("iron_ore", 15, BasicBlock, None),
    ("coal_ore", 16, BasicBlock, None),
    ("log", 17, BasicBlock, None),
    ("leaves", 18, BasicBlock, None),
    ("sponge", 19, BasicBlock, None),
    ("glass", 20, BasicBlock, None),
    ("lapis_ore", 21, BasicBlock, None),
    ("lapis_block", 22, BasicBlock, None),
    ("dispenser", 23, BasicBlock, None),
    ("sandstone", 24, BasicBlock, None),
    ("note_block", 25, NoteBlock, None),
    ("bed", 26, BasicBlock, None),
    ("powered_rail", 27, BasicBlock, None),
    ("button_rail", 28, BasicBlock, None),
    ("sticky_piston", 29, BasicBlock, None),
    ("cobweb", 30, BasicBlock, None),
    ("tall_grass", 31, BasicBlock, _SOFT),
    ("dead_bush", 32, BasicBlock, _SOFT),
    ("piston", 33, BasicBlock, None),
    ("piston_extension", 34, BasicBlock, None),
    ("wool", 35, WoolBlock, None),
    ("piston_mover", 36, BasicBlock, _SOFT),
    ("yellow_flower", 37, BasicBlock, _SOFT),
    ("red_flower", 38, BasicBlock, _SOFT),
    ("mushroom", 39, BasicBlock, _SOFT),
    ("mushroom2", 40, BasicBlock, _SOFT),
    ("gold_block", 41, BasicBlock, None),
    ("iron_block", 42, BasicBlock, None),
    ("slab_block", 43, BasicBlock, None),
    ("slab", 44, BasicBlock, None),
    ("brick", 45, BasicBlock, None),
    ("tnt", 46, BasicBlock, _SOFT),
    ("bookshelf", 47, BasicBlock, None),
    ("mossy_stone", 48, BasicBlock, None),
    ("obsidian", 49, BasicBlock, None),
    ("torch", 50, TorchBlock, None),
    ("fire", 51, BasicBlock, None),
    ("spawner", 52, BasicBlock, None),
    ("stairs", 53, BasicBlock, None),
    ("chest", 54, BasicBlock, None),
    ("redstone", 55, BasicBlock, _SOFT),
    ("diamond_ore", 56, BasicBlock, None),
    ("diamond_block", 57, BasicBlock, None),
    ("workbench", 58, WorkbenchBlock, None),
    ("crops", 59, BasicBlock, _SOFT),
    ("shov_dirt", 60, BasicBlock, None),
    ("furnace", 61, BasicBlock, None),
    ("furnace_active", 62, BasicBlock, None),
    ("sign", 63, BasicBlock, None),
    ("wood_door_frame", 64, BasicBlock, None),
    ("ladder", 65, BasicBlock, None),
    ("rail", 66, BasicBlock, None),
    ("stone_stairs", 67, BasicBlock, None),
    ("sign_wall", 68, BasicBlock, None),
    ("lever", 69, BasicBlock, _SOFT),
    ("stone_pressure_plate", 70, BasicBlock, None),
    ("iron_door_frame", 71, BasicBlock, None),
    ("wood_pressure_plate", 72, BasicBlock, None),
    ("act_redstone_ore", 73, BasicBlock, None),
    ("redstone_ore", 74, BasicBlock, None),
    ("unlit_redstone_torch", 75, BasicBlock, _SOFT),
    ("redstone_torch", 76, BasicBlock, _SOFT),
    ("stone_button", 77, BasicBlock, None),
    ("snow", 78, BasicBlock, None),
    ("ice_block", 79, BasicBlock, None),
    ("snow_block", 80, BasicBlock, None),
    ("cactus", 81, BasicBlock, None),
    ("clay_block", 82, BasicBlock, None),
    ("sugarcane", 83, BasicBlock, _SOFT),
    ("jukebox", 84, BasicBlock, None),
    ("fence", 85, BasicBlock, None),
    ("pumpkin", 86, BasicBlock, None),
    ("netherrack", 87, BasicBlock, None),
    ("soulsand", 88, BasicBlock, None),
    ("glowstone", 89, BasicBlock, None),
    ("portal", 90, BasicBlock, None),
    ("lit_pumpkin", 91, BasicBlock, None),
    ("cake", 92, BasicBlock, None),
    ("redstone_repeater", 93, BasicBlock, _SOFT),
    ("redstone_repeater_activated", 94, BasicBlock, _SOFT),
    ("locked_chest", 95, BasicBlock, _SOFT),
    ("trapdoor", 96, BasicBlock, None),
]


def build_block_database(
    block_registry: Optional[BlockRegistry] = None,
    item_registry: Optional[ItemRegistry] = None,
) -> dict[str, Block]:
    """Create every built-in block and its item form, keyed by name in id order."""
    database: dict[str, Block] = {}
    for name, block_id, cls, hardness in _BLOCKS:
        if hardness is not None:
            block = cls(block_id, hardness, block_registry, item_registry)
        else:
            block = cls(block_id, registry=block_registry, item_registry=item_registry)
        database[name] = block
    return database