import dataclasses

import pytest

from m173.toolmaterial import NONE_MATERIAL, ToolMaterialIndex, select


def test_pinned_values():
    assert select(ToolMaterialIndex.DIAMOND).max_uses == 1561
    assert select(ToolMaterialIndex.IRON).max_uses == 250
    assert select(ToolMaterialIndex.GOLD).efficiency == pytest.approx(12.0)


def test_unknown_index_gives_none_material():
    assert select(99) is NONE_MATERIAL
    assert select(-5) is NONE_MATERIAL
    for index in ToolMaterialIndex:
        assert NONE_MATERIAL.max_uses < select(index).max_uses


def test_int_index_matches_enum():
    for index in ToolMaterialIndex:
        assert select(int(index)) is select(index)


def test_harvest_levels_ordered():
    levels = [
        select(ToolMaterialIndex.WOOD).harvest_level,
        select(ToolMaterialIndex.STONE).harvest_level,
        select(ToolMaterialIndex.IRON).harvest_level,
        select(ToolMaterialIndex.DIAMOND).harvest_level,
    ]
    assert levels == sorted(levels)
    assert len(set(levels)) == len(levels)


def test_gold_harvests_like_wood_but_wears_faster():
    wood = select(ToolMaterialIndex.WOOD)
    gold = select(ToolMaterialIndex.GOLD)
    assert gold.harvest_level == wood.harvest_level
    assert gold.max_uses < wood.max_uses
    assert gold.efficiency > select(ToolMaterialIndex.DIAMOND).efficiency


def test_damage_follows_harvest_level():
    for index in ToolMaterialIndex:
        material = select(index)
        assert material.damage_vs_entity == material.harvest_level


def test_materials_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        select(ToolMaterialIndex.WOOD).max_uses = 1