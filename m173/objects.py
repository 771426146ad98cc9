"""Concrete entities: pigs, dropped items, projectiles and lightning."""

from __future__ import annotations

from typing import Any, Callable, Optional

from m173.entities import Entity, EntityType, Mob, MobType, ObjectEntity, ObjectType
from m173.helper import DoubleVector3
from m173.itemstack import ItemStack

__all__ = ["Pig", "Pickup", "Arrow", "Snowball", "Thunderbolt", "FishFloat"]

SADDLE_META_INDEX = 16
PICKUP_LIFETIME = 5.0 * 60.0
ARROW_LIFETIME = 6.0
SNOWBALL_LIFETIME = 3.3
THUNDERBOLT_LIFETIME = 3.0


def _place(entity: Entity, pos: DoubleVector3) -> None:
    entity.position = pos
    entity.prev_position = pos


class Pig(Mob):
    def __init__(self, pos: DoubleVector3) -> None:
        super().__init__(MobType.PIG)
        self.id_name = "Mob::Pig"
        self.has_saddle = False
        _place(self, pos)

    def set_saddle(self, active: bool) -> None:
        if self.has_saddle == active:
            return
        self.has_saddle = active
        self.meta_updated = False

    def metadata(self) -> dict:
        return {SADDLE_META_INDEX: 1 if self.has_saddle else 0}

    def tick(self, delta: float) -> None:
        self.refresh_meta()


class _Expiring:
    """Mixin that marks an entity for destruction once its lifetime passes."""

    lifetime_limit: float = 0.0

    def _age(self, delta: float) -> None:
        self.lifetime += delta
        self.marked_for_destruction = self.lifetime > self.lifetime_limit


class Pickup(_Expiring, Entity):
    """A dropped item stack lying in the world."""

    lifetime_limit = PICKUP_LIFETIME

    def __init__(self, pos: DoubleVector3, stack: ItemStack) -> None:
        super().__init__(EntityType.PICKUP)
        self.stack = stack.copy()
        self.lifetime = 0.0
        _place(self, pos)

    def tick(self, delta: float) -> None:
        self._age(delta)


class Arrow(_Expiring, ObjectEntity):
    lifetime_limit = ARROW_LIFETIME

    def __init__(self, pos: DoubleVector3, owner: int, motion: DoubleVector3) -> None:
        super().__init__(ObjectType.ARROW, owner, motion)
        self.lifetime = 0.0
        _place(self, pos)

    def tick(self, delta: float) -> None:
        self._age(delta)


class Snowball(_Expiring, ObjectEntity):
    lifetime_limit = SNOWBALL_LIFETIME

    def __init__(self, pos: DoubleVector3, owner: int, motion: DoubleVector3) -> None:
        super().__init__(ObjectType.SNOWBALL, owner, motion)
        self.lifetime = 0.0
        _place(self, pos)

    def tick(self, delta: float) -> None:
        self._age(delta)


class Thunderbolt(_Expiring, Entity):
    lifetime_limit = THUNDERBOLT_LIFETIME

    def __init__(self, pos: DoubleVector3) -> None:
        super().__init__(EntityType.THUNDERBOLT)
        self.lifetime = 0.0
        _place(self, pos)

    def tick(self, delta: float) -> None:
        self._age(delta)


class FishFloat(ObjectEntity):
    """A fishing float that stays alive while attached to its owning player."""

    def __init__(
        self,
        pos: DoubleVector3,
        owner: int,
        motion: DoubleVector3,
        lookup: Callable[[int], Optional[Any]],
    ) -> None:
        super().__init__(ObjectType.FISHING_FLOAT, owner, motion)
        self._lookup = lookup
        _place(self, pos)

    def _owner_player(self) -> Optional[Any]:
        owner = self._lookup(self.owner)
        if owner is None or not owner.is_player:
            return None
        return owner

    def tick(self, delta: float) -> None:
        owner = self._owner_player()
        if owner is not None and owner.set_attached_entity(self):
            return
        self.marked_for_destruction = True

    def lure(self) -> None:
        self.marked_for_destruction = True

    def on_destroyed(self) -> None:
        owner = self._owner_player()
        if owner is not None:
            owner.set_attached_entity(self, True)