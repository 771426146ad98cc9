"""Entity base classes: common state, creatures, mobs and thrown objects."""

from __future__ import annotations

import math
from enum import IntEnum, IntFlag
from typing import Any, Callable, Optional

from m173.helper import DoubleVector3, Dimension, FloatAngle, IntVector2

__all__ = [
    "EntityType",
    "EntityFlags",
    "Entity",
    "CreatureType",
    "Creature",
    "MobType",
    "Mob",
    "ObjectType",
    "ObjectEntity",
    "to_chunk_coords",
    "MetaSink",
    "EntityListener",
]

CHUNK_SHIFT = 4

MetaSink = Callable[["Entity", dict], None]
EntityListener = Callable[["Entity", str, tuple], None]


def to_chunk_coords(pos: IntVector2) -> IntVector2:
    """The chunk that holds a horizontal block position."""
    return IntVector2(pos.x >> CHUNK_SHIFT, pos.z >> CHUNK_SHIFT)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class EntityType(IntEnum):
    UNSPECIFIED = -1
    CREATURE = 0
    OBJECT = 1
    THUNDERBOLT = 2
    PICKUP = 3


class EntityFlags(IntFlag):
    NONE = 0
    ON_FIRE = 1 << 0
    CROUCHING = 1 << 1
    RIDING = 1 << 2


class Entity:
    """State shared by everything that lives in the world.

    Lifecycle hooks report to listeners added with ``subscribe``; each
    listener is called with the entity, the event name and its arguments.
    """

    is_player: bool = False
    eye_height: float = 1.6

    def __init__(self, entity_type: EntityType = EntityType.UNSPECIFIED) -> None:
        self.entity_id = -1
        self.type = EntityType(entity_type)
        self.dimension = Dimension.OVERWORLD
        self.health = 20
        self.max_health = 1
        self.on_ground = False
        self.marked_for_destruction = False
        self.meta_updated = False
        self.flags = int(EntityFlags.NONE)
        self.prev_flags = int(EntityFlags.NONE)
        self.id_name = "EntityBase"
        self.prev_position = DoubleVector3()
        self.position = DoubleVector3()
        self.forward = DoubleVector3()
        self.rotation = FloatAngle()
        self.meta_sink: Optional[MetaSink] = None
        self._listeners: list[EntityListener] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.entity_id})"

    def subscribe(self, listener: EntityListener) -> None:
        """Add a listener for this entity's lifecycle events."""
        self._listeners.append(listener)

    def _emit(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners):
            listener(self, event, args)

    def on_spawned(self) -> None:
        """Called once the entity has been added to the world."""
        self._emit("spawned")

    def on_destroyed(self) -> None:
        """Called once the entity has been removed from the world."""
        self._emit("destroyed")

    def set_position(self, pos: DoubleVector3) -> None:
        self.prev_position = self.position
        self.position = pos

    def set_rotation(self, rotation: FloatAngle) -> None:
        """Store the rotation and recompute the forward direction."""
        yaw = rotation.yaw / 180.0 * 3.1415
        pitch = rotation.pitch / 180.0 * 3.1415
        self.rotation = rotation
        self.forward = DoubleVector3(
            -math.sin(yaw) * math.cos(pitch),
            -math.sin(pitch),
            math.cos(yaw) * math.cos(pitch),
        )

    def set_crouching(self, value: bool) -> None:
        self.prev_flags = self.flags
        if value:
            self.flags |= EntityFlags.CROUCHING
        else:
            self.flags &= ~EntityFlags.CROUCHING

    def _position_diff(self) -> DoubleVector3:
        return self.position - self.prev_position

    def pop_position_diff(self) -> DoubleVector3:
        """The movement since the last pop; the previous position catches up."""
        diff = self._position_diff()
        self.prev_position = self.position
        return diff

    def move_distance(self) -> float:
        """Squared length of the movement since the previous position."""
        diff = self._position_diff()
        return diff.x * diff.x + diff.y * diff.y + diff.z * diff.z

    def is_flags_changed(self) -> bool:
        return self.prev_flags != self.flags

    def pop_flags(self) -> int:
        """The flags if they changed since the last pop, otherwise 0."""
        if self.prev_flags == self.flags:
            return 0
        self.prev_flags = self.flags
        return self.flags

    def metadata(self) -> dict:
        """Entity metadata entries sent to clients, keyed by index."""
        return {}

    def refresh_meta(self) -> bool:
        """Publish metadata to the sink if it changed; True if it was published."""
        if self.meta_updated:
            return False
        if self.meta_sink is not None:
            self.meta_sink(self, self.metadata())
        self.meta_updated = True
        return True

    def tick(self, delta: float) -> None:
        """Advance the entity by ``delta`` seconds."""


class CreatureType(IntEnum):
    PLAYER = 0
    MOB = 1


class Creature(Entity):
    """A living entity with health that may fall and change chunks."""

    def __init__(self, creature_type: CreatureType) -> None:
        super().__init__(EntityType.CREATURE)
        self.creature_type = CreatureType(creature_type)
        self.max_health = 20
        self.id_name = "CreatureBase"
        self._last_ground = -1.0

    def _chunk_of(self, pos: DoubleVector3) -> IntVector2:
        return to_chunk_coords(IntVector2(_round_half_away(pos.x), _round_half_away(pos.z)))

    def current_chunk(self) -> IntVector2:
        return self._chunk_of(self.position)

    def previous_chunk(self) -> IntVector2:
        return self._chunk_of(self.prev_position)

    def on_move(self, direction: DoubleVector3) -> None:
        """Called after every position change with the movement vector."""
        self._emit("move", direction)

    def on_chunk_changed(self, previous: IntVector2, current: IntVector2) -> None:
        """Called when the creature crosses into another chunk."""
        self._emit("chunk_changed", previous, current)

    def on_health_changed(self, diff: int, is_dead: bool) -> None:
        """Called after every health change with the difference."""
        self._emit("health_changed", diff, is_dead)

    def on_fall(self, distance: float) -> None:
        """Apply fall damage: one point per block beyond three."""
        self.set_health(self.health - int(max(0.0, math.ceil(distance - 3.0))))

    def add_velocity(self, motion: DoubleVector3) -> bool:
        """Push the creature; reports the motion and always succeeds."""
        self._emit("velocity", motion)
        return True

    def set_position(self, pos: DoubleVector3) -> None:
        super().set_position(pos)
        self.on_move(self.position - self.prev_position)
        previous = self.previous_chunk()
        current = self.current_chunk()
        if previous != current:
            self.on_chunk_changed(previous, current)

    def set_health(self, health: int) -> None:
        """Set health clamped to ``0..max_health`` and report the change."""
        previous = self.health
        self.health = max(0, min(int(health), self.max_health))
        self.on_health_changed(self.health - previous, self.health == 0)

    def update_ground_state(self, ground: bool) -> None:
        """Track landing and take-off; landing after a fall of over two blocks hurts."""
        if self._last_ground < 0.0:
            self._last_ground = self.position.y
        if self.on_ground == ground:
            return
        self.on_ground = ground
        if ground:
            fall = self._last_ground - self.position.y
            if fall > 2.0:
                self.on_fall(fall)
        else:
            self._last_ground = self.position.y


class MobType(IntEnum):
    UNKNOWN = -1
    CREEPER = 50
    SKELETON = 51
    SPIDER = 52
    GIANT_ZOMBIE = 53
    ZOMBIE = 54
    SLIME = 55
    GHAST = 56
    ZOMBIE_PIGMEN = 57
    PIG = 90
    SHEEP = 91
    COW = 92
    CHICKEN = 93
    SQUID = 94
    WOLF = 95


class Mob(Creature):
    def __init__(self, mob_type: MobType) -> None:
        super().__init__(CreatureType.MOB)
        self.mob_type = MobType(mob_type)
        self.id_name = "MobBase"


class ObjectType(IntEnum):
    UNKNOWN = 0
    BOAT = 1
    STORAGE_CART = 11
    POWERED_CART = 12
    ACTIVATED_TNT = 50
    ARROW = 60
    SNOWBALL = 61
    EGG = 62
    FALLING_SAND = 70
    FALLING_GRAVEL = 71
    FISHING_FLOAT = 90


class ObjectEntity(Entity):
    """A non-living object, optionally thrown by an owner with a start motion."""

    def __init__(
        self,
        object_type: ObjectType,
        owner: int = 0,
        motion: Optional[DoubleVector3] = None,
    ) -> None:
        super().__init__(EntityType.OBJECT)
        self.object_type = ObjectType(object_type)
        self.owner = owner
        self.start_motion = DoubleVector3() if motion is None else motion