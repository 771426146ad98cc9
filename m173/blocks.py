"""Block definitions and the registry that maps block ids to them."""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Iterator, Optional

from m173.helper import IntVector3
from m173.items import ItemBlock, ItemRegistry, ItemSapling, ItemTorch, ItemWool

__all__ = [
    "BLOCK_SLOTS",
    "DEFAULT_BLOCK_REGISTRY",
    "BlockRegistry",
    "Block",
    "BasicBlock",
    "NoteBlock",
    "SaplingBlock",
    "TorchBlock",
    "WoolBlock",
    "WorkbenchBlock",
]

_log = logging.getLogger(__name__)

BLOCK_SLOTS = 256

ActivationHandler = Callable[[IntVector3, Any], bool]


def _check_id(block_id: int) -> int:
    if not 0 <= block_id < BLOCK_SLOTS:
        raise ValueError(f"Unknown block id {block_id}")
    return block_id


class BlockRegistry:
    """Maps block ids to block definitions."""

    def __init__(self) -> None:
        self._blocks: dict[int, Block] = {}

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks[key] for key in sorted(self._blocks))

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._blocks

    def register(self, block: Block) -> None:
        """Add a block under its id; a later block replaces an earlier one."""
        block_id = _check_id(block.id)
        if block_id in self._blocks:
            _log.warning("Block id conflict %d!", block_id)
        self._blocks[block_id] = block

    def unregister(self, block: Block) -> None:
        """Remove a block if it is the one registered under its id."""
        if self._blocks.get(block.id) is block:
            del self._blocks[block.id]

    def get_by_id(self, block_id: int) -> Optional[Block]:
        """The block with this id, or None when no block has it."""
        return self._blocks.get(_check_id(block_id))


DEFAULT_BLOCK_REGISTRY = BlockRegistry()


class Block:
    """A block kind in the world.

    ``on_activate`` may hold a callable taking the position and the
    activator; without one, activation is not handled.
    """

    hardness: float = 0.1

    def __init__(self, block_id: int, registry: Optional[BlockRegistry] = None) -> None:
        self._id = _check_id(block_id)
        self.on_activate: Optional[ActivationHandler] = None
        self.registry = DEFAULT_BLOCK_REGISTRY if registry is None else registry
        self.registry.register(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"

    @property
    def id(self) -> int:
        return self._id

    def block_activated(self, pos: IntVector3, activator: Any) -> bool:
        """Called when an entity right-clicks the block; True if it reacted."""
        if self.on_activate is None:
            return False
        return bool(self.on_activate(pos, activator))


class BasicBlock(Block):
    """A block with a plain item form."""

    def __init__(
        self,
        block_id: int,
        hardness: float = 1.0,
        registry: Optional[BlockRegistry] = None,
        item_registry: Optional[ItemRegistry] = None,
    ) -> None:
        super().__init__(block_id, registry)
        self.hardness = hardness
        self.item = ItemBlock(block_id, item_registry)


class NoteBlock(BasicBlock):
    """Plays a note of random pitch to the activating player."""

    HARP = 0
    PITCHES = 24

    def __init__(
        self,
        block_id: int,
        registry: Optional[BlockRegistry] = None,
        item_registry: Optional[ItemRegistry] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(block_id, registry=registry, item_registry=item_registry)
        self._rng = rng if rng is not None else random.Random()

    def block_activated(self, pos: IntVector3, activator: Any) -> bool:
        pitch = self._rng.randrange(self.PITCHES)
        activator.play_note(pos, self.HARP, pitch)
        return True


class SaplingBlock(Block):
    hardness = 0.0

    def __init__(
        self,
        block_id: int,
        registry: Optional[BlockRegistry] = None,
        item_registry: Optional[ItemRegistry] = None,
    ) -> None:
        super().__init__(block_id, registry)
        self.item = ItemSapling(block_id, item_registry)


class TorchBlock(Block):
    hardness = 0.0

    def __init__(
        self,
        block_id: int,
        registry: Optional[BlockRegistry] = None,
        item_registry: Optional[ItemRegistry] = None,
    ) -> None:
        super().__init__(block_id, registry)
        self.item = ItemTorch(block_id, item_registry)


class WoolBlock(Block):
    def __init__(
        self,
        block_id: int,
        registry: Optional[BlockRegistry] = None,
        item_registry: Optional[ItemRegistry] = None,
    ) -> None:
        super().__init__(block_id, registry)
        self.item = ItemWool(block_id, item_registry)


class WorkbenchBlock(BasicBlock):
    """Opens the crafting window for the activating player."""

    def __init__(
        self,
        block_id: int,
        registry: Optional[BlockRegistry] = None,
        item_registry: Optional[ItemRegistry] = None,
    ) -> None:
        super().__init__(block_id, registry=registry, item_registry=item_registry)

    def block_activated(self, pos: IntVector3, activator: Any) -> bool:
        activator.open_workbench()
        return True