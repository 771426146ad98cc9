"""A stack of items of one kind, as held in inventory slots."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from m173.helper import IntVector3, VsDamageInfo
from m173.items import DEFAULT_REGISTRY, Item, ItemRegistry

__all__ = ["ItemStack"]


@dataclass
class ItemStack:
    """Item id, count and damage; an id of -1 or a count of zero means empty."""

    item_id: int = -1
    stack_size: Optional[int] = None
    damage: int = 0
    registry: ItemRegistry = field(default=DEFAULT_REGISTRY, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.stack_size is None:
            self.stack_size = 0 if self.item_id == -1 else 1

    def _item(self) -> Item:
        return self.registry.get_by_id(self.item_id)

    def _assign(self, other: ItemStack) -> None:
        self.item_id = other.item_id
        self.stack_size = other.stack_size
        self.damage = other.damage
        self.registry = other.registry

    def _clear(self) -> None:
        self.item_id = -1
        self.stack_size = 0
        self.damage = 0

    def copy(self) -> ItemStack:
        return ItemStack(self.item_id, self.stack_size, self.damage, self.registry)

    def validate(self) -> bool:
        """Whether the stack refers to a registered item."""
        return self.registry.exists(self.item_id)

    def decrement_by(self, size: int) -> bool:
        """Take items away; an emptied stack is cleared."""
        if size < 1 or self.stack_size < size or self.item_id < 0:
            return False
        self.stack_size -= size
        if self.stack_size == 0:
            self._clear()
        return self.stack_size >= 0

    def increment_by(self, size: int) -> bool:
        """Add items if they fit under the item's stack limit."""
        if size < 1 or self.item_id < 0:
            return False
        if self._item().stack_limit < self.stack_size + size:
            return False
        self.stack_size += size
        return True

    def avail_stack_room(self) -> int:
        return max(self._item().stack_limit - self.stack_size, 0)

    def is_full(self) -> bool:
        return self.avail_stack_room() == 0

    def is_empty(self) -> bool:
        return self.item_id == -1 or self.stack_size == 0

    def is_similar_to(self, other: ItemStack) -> bool:
        return self.item_id == other.item_id and self.damage == other.damage

    def move_to(self, other: ItemStack, count: Optional[int] = None) -> bool:
        """Move items into another stack; the whole stack when no count is given."""
        if count is None:
            count = self.stack_size
        if other.is_empty():
            other._assign(ItemStack(self.item_id, count, self.damage, self.registry))
        elif not self.is_similar_to(other) or not other.increment_by(count):
            return False
        self.stack_size -= count
        if self.stack_size == 0:
            self._clear()
        return True

    def swap_with(self, other: ItemStack) -> None:
        mine = self.copy()
        self._assign(other)
        other._assign(mine)

    def is_damageable(self) -> bool:
        return self._item().is_damageable()

    def max_damage(self) -> int:
        return self._item().max_damage

    def damage_item(self, damage: int, damager: Any) -> bool:
        """Wear the item; returns False when it breaks or cannot be damaged."""
        if not self.is_damageable():
            return False
        self.damage += damage
        if self.damage > self.max_damage():
            self.stack_size -= 1
            if self.stack_size < 0:
                self._clear()
            return False
        return True

    def split_stack(self, count: int) -> ItemStack:
        """Take a number of items off into a new stack."""
        taken = ItemStack(self.item_id, count, self.damage, self.registry)
        self.stack_size -= count
        if self.stack_size == 0:
            self._clear()
        return taken

    def damage_vs_entity(self, entity: Any) -> VsDamageInfo:
        return self._item().damage_vs_entity(entity)

    def hit_entity(self, attacker: Any, victim: Any) -> None:
        self._item().hit_entity(self, attacker, victim)

    def on_destroy_block(self, pos: IntVector3, block_id: int, destroyer: Any) -> None:
        self._item().on_block_destroyed(self, pos, block_id, destroyer)