"""Item definitions and the registry that maps item ids to them."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, Union

from m173.helper import ArmorType, IntVector3, VsDamageInfo
from m173.toolmaterial import ToolMaterialIndex, select

if TYPE_CHECKING:
    from m173.itemstack import ItemStack

__all__ = [
    "InvalidItemIdError",
    "ItemRegistry",
    "DEFAULT_REGISTRY",
    "ITEM_SLOTS",
    "ITEM_ID_SHIFT",
    "Item",
    "ItemArmor",
    "ItemSword",
    "ItemBlock",
    "ItemBow",
    "ItemFishingRod",
    "ItemLighter",
    "ItemMap",
    "ItemSapling",
    "ItemSign",
    "ItemSnowball",
    "ItemTorch",
    "WoolColour",
    "ItemWool",
]

_log = logging.getLogger(__name__)

ITEM_SLOTS = 512
ITEM_ID_SHIFT = 256

ItemHandler = Callable[..., bool]


def _to_int8(value: int) -> int:
    return ((int(value) + 128) % 256) - 128


class InvalidItemIdError(LookupError):
    """Raised when an item id does not refer to a registered item."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Unknown item id {item_id}")
        self.item_id = item_id


class ItemRegistry:
    """Maps item ids to item definitions."""

    def __init__(self) -> None:
        self._items: dict[int, Item] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items[key] for key in sorted(self._items))

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def register(self, item: Item) -> None:
        """Add an item under its id; a later item replaces an earlier one."""
        index = item.id
        if not 0 <= index < ITEM_SLOTS:
            raise InvalidItemIdError(index)
        if index in self._items:
            _log.warning("Items conflict %d", index - ITEM_ID_SHIFT)
        self._items[index] = item

    def unregister(self, item: Item) -> None:
        """Remove an item if it is the one registered under its id."""
        if self._items.get(item.id) is item:
            del self._items[item.id]

    def exists(self, item_id: int) -> bool:
        """Whether a positive id refers to a registered item."""
        return 0 < item_id < ITEM_SLOTS and item_id in self._items

    def get_by_id(self, item_id: int) -> Item:
        """The item with this id; -1 refers to the item in slot zero."""
        if item_id == -1:
            item_id = 0
        elif item_id < 0 or item_id >= ITEM_SLOTS:
            raise InvalidItemIdError(item_id)
        try:
            return self._items[item_id]
        except KeyError:
            raise InvalidItemIdError(item_id) from None


DEFAULT_REGISTRY = ItemRegistry()


class Item:
    """An item kind; its id is the given number shifted past the block ids.

    Interaction hooks without a built-in behaviour consult ``handlers``, a
    mapping from event name (``right_click``, ``equipped``, ``use_on_block``)
    to a callable returning whether the event was handled.
    """

    max_damage: int = 0
    max_stack_size: int = 64
    full_3d: bool = False
    has_subtypes: bool = False
    metadata_from_damage: bool = False

    def __init__(self, item_id: int, registry: Optional[ItemRegistry] = None) -> None:
        self._id = ITEM_ID_SHIFT + item_id
        self.handlers: dict[str, ItemHandler] = {}
        self.registry = DEFAULT_REGISTRY if registry is None else registry
        self.registry.register(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def stack_limit(self) -> int:
        return self.max_stack_size

    def _handle(self, event: str, default: bool, *args: Any) -> bool:
        handler = self.handlers.get(event)
        if handler is None:
            return default
        return bool(handler(*args))

    def get_metadata(self, damage: int) -> int:
        """Block metadata derived from the item's damage value."""
        return _to_int8(damage) if self.metadata_from_damage else 0

    def is_damageable(self) -> bool:
        return self.max_damage > 0 and not self.has_subtypes

    def on_item_right_click(
        self, stack: ItemStack, clicker: Any, pos: IntVector3, direction: int
    ) -> bool:
        return self._handle("right_click", False, stack, clicker, pos, direction)

    def on_equipped_by_entity(self, stack: ItemStack, equipper: Any) -> bool:
        return self._handle("equipped", True, stack, equipper)

    def on_use_item_on_block(
        self, stack: ItemStack, user: Any, pos: IntVector3, direction: int
    ) -> bool:
        return self._handle("use_on_block", False, stack, user, pos, direction)

    def hit_entity(self, stack: ItemStack, attacker: Any, victim: Any) -> bool:
        """Called when the item is used to hit an entity."""
        return False

    def on_block_destroyed(
        self, stack: ItemStack, pos: IntVector3, block_id: int, destroyer: Any
    ) -> bool:
        """Called when a block is broken while holding the item."""
        return True

    def damage_vs_entity(self, entity: Any) -> VsDamageInfo:
        """Damage and knockback the item deals to an entity."""
        return VsDamageInfo(1, 0.1)


class ItemArmor(Item):
    max_stack_size = 1

    def __init__(
        self, item_id: int, armor_type: ArmorType, registry: Optional[ItemRegistry] = None
    ) -> None:
        super().__init__(item_id, registry)
        self.armor_type = ArmorType(armor_type)

    def is_valid_type(self, armor_type: ArmorType) -> bool:
        return self.armor_type == armor_type


class ItemSword(Item):
    max_stack_size = 1

    def __init__(
        self,
        item_id: int,
        material: Union[ToolMaterialIndex, int],
        registry: Optional[ItemRegistry] = None,
    ) -> None:
        super().__init__(item_id, registry)
        self.material = select(material)
        dmg = self.material.damage_vs_entity
        self._damage = VsDamageInfo(4 + dmg * 2, 0.08 + dmg / 15.0)
        self.max_damage = self.material.max_uses

    def hit_entity(self, stack: ItemStack, attacker: Any, victim: Any) -> bool:
        stack.damage_item(1, attacker)
        return True

    def damage_vs_entity(self, entity: Any) -> VsDamageInfo:
        return self._damage

    def on_block_destroyed(
        self, stack: ItemStack, pos: IntVector3, block_id: int, destroyer: Any
    ) -> bool:
        stack.damage_item(2, destroyer)
        return True


class ItemBlock(Item):
    """The item form of a block; its id equals the block id."""

    max_stack_size = 64

    def __init__(self, block_id: int, registry: Optional[ItemRegistry] = None) -> None:
        super().__init__((block_id & 0xFF) - ITEM_ID_SHIFT, registry)
        self.block_id = block_id & 0xFF


class ItemBow(Item):
    max_stack_size = 1


class ItemFishingRod(Item):
    max_stack_size = 1
    max_damage = 64


class ItemLighter(Item):
    max_stack_size = 1
    max_damage = 64


class ItemMap(Item):
    max_stack_size = 1
    max_damage = 0


class ItemSapling(ItemBlock):
    max_stack_size = 64
    max_damage = 0
    metadata_from_damage = True


class ItemSign(Item):
    max_stack_size = 1
    max_damage = 0


class ItemSnowball(Item):
    max_stack_size = 16


class ItemTorch(ItemBlock):
    pass


class WoolColour(IntEnum):
    WHITE = 0
    ORANGE = 1
    MAGENTA = 2
    LIGHT_BLUE = 3
    YELLOW = 4
    LIME = 5
    PINK = 6
    GRAY = 7
    LIGHT_GRAY = 8
    CYAN = 9
    PURPLE = 10
    BLUE = 11
    BROWN = 12
    GREEN = 13
    RED = 14
    BLACK = 15


class ItemWool(ItemBlock):
    max_stack_size = 64
    max_damage = 0
    metadata_from_damage = True