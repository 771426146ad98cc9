"""Tool materials and their mining and combat properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

__all__ = ["ToolMaterialIndex", "ToolMaterial", "select", "NONE_MATERIAL"]


class ToolMaterialIndex(IntEnum):
    WOOD = 0
    STONE = 1
    IRON = 2
    GOLD = 3
    DIAMOND = 4


@dataclass(frozen=True)
class ToolMaterial:
    """Properties shared by all tools made of one material."""

    harvest_level: int
    max_uses: int
    efficiency: float
    damage_vs_entity: int


NONE_MATERIAL = ToolMaterial(0, 0, 0.0, 0)

_MATERIALS = {
    ToolMaterialIndex.WOOD: ToolMaterial(0, 59, 2.0, 0),
    ToolMaterialIndex.STONE: ToolMaterial(1, 131, 4.0, 1),
    ToolMaterialIndex.IRON: ToolMaterial(2, 250, 6.0, 2),
    ToolMaterialIndex.GOLD: ToolMaterial(0, 32, 12.0, 0),
    ToolMaterialIndex.DIAMOND: ToolMaterial(3, 1561, 8.0, 3),
}


def select(index: Union[ToolMaterialIndex, int]) -> ToolMaterial:
    """The material for an index; unknown indices give an empty material."""
    try:
        return _MATERIALS[ToolMaterialIndex(index)]
    except ValueError:
        return NONE_MATERIAL