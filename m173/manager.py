"""The entity manager: id allocation, lookup and ticking of all entities."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Iterator, Optional

from m173.entities import Entity
from m173.helper import stricmp

__all__ = ["EntityCounterOverflowError", "EntityManager", "UINT32_MAX"]

UINT32_MAX = 0xFFFFFFFF
TICK_INTERVAL = 0.01


class EntityCounterOverflowError(OverflowError):
    """Raised when no more entity ids can be allocated."""

    def __init__(self) -> None:
        super().__init__("EntityId counter overflow")


class EntityManager:
    """Holds the loaded entities, hands out ids and ticks them."""

    def __init__(
        self,
        on_entity_destroyed: Optional[Callable[[Entity], None]] = None,
        id_limit: int = UINT32_MAX,
    ) -> None:
        self._lock = threading.RLock()
        self._entities: dict[int, Entity] = {}
        self._free_ids: list[int] = []
        self._counter = 0
        self._id_limit = id_limit
        self._players_count = 0
        self._on_destroyed = on_entity_destroyed
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    def add_entity(self, entity: Entity) -> Entity:
        """Give the entity an id, start tracking it and return it."""
        with self._lock:
            if self._free_ids:
                entity_id = self._free_ids.pop()
            else:
                if self._counter >= self._id_limit:
                    raise EntityCounterOverflowError()
                self._counter += 1
                entity_id = self._counter

            self._entities[entity_id] = entity
            entity.entity_id = entity_id

            if entity.is_player:
                self._players_count += 1
            else:
                for player in self.players():
                    player.add_tracked_entity(entity)

            entity.on_spawned()
            return entity

    def get_entity(self, entity_id: int) -> Optional[Entity]:
        with self._lock:
            return self._entities.get(entity_id)

    def remove_entity(self, entity_id: int) -> bool:
        """Mark an entity for destruction on the next tick."""
        with self._lock:
            entity = self._entities.get(entity_id)
            if entity is None:
                return False
            entity.marked_for_destruction = True
            if entity.is_player:
                self._players_count -= 1
            return True

    def players(self) -> Iterator[Any]:
        """The loaded player entities."""
        with self._lock:
            snapshot = [e for e in self._entities.values() if e.is_player]
        return iter(snapshot)

    def entities(self) -> Iterator[Entity]:
        """All loaded entities."""
        with self._lock:
            snapshot = list(self._entities.values())
        return iter(snapshot)

    def player_by_name(self, name: str) -> Optional[Any]:
        """The player with this name, compared without regard to case."""
        return next((p for p in self.players() if stricmp(p.name, name)), None)

    def do_entity_ticks(self, delta: float) -> None:
        """Tick every entity and remove those marked for destruction."""
        with self._lock:
            for entity_id, entity in list(self._entities.items()):
                entity.tick(delta)
                if not entity.marked_for_destruction:
                    continue
                if entity.is_player:
                    for player in self.players():
                        player.remove_tracked_entity(entity)
                if self._on_destroyed is not None:
                    self._on_destroyed(entity)
                self._free_ids.append(entity_id)
                del self._entities[entity_id]
                entity.on_destroyed()

    def players_count(self) -> int:
        return self._players_count

    def start(self) -> None:
        """Tick entities in a background thread until finish() is called."""
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="Entity ticker", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        current = time.monotonic()
        while not self._stop.is_set():
            previous, current = current, time.monotonic()
            self.do_entity_ticks(current - previous)
            self._stop.wait(TICK_INTERVAL)

    def finish(self) -> None:
        """Stop the background ticker and wait for it."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None