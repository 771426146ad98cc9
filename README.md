# m173

The game model behind a server for the Minecraft Beta 1.7.3 protocol,
as a plain Python library with no dependencies outside the standard
library.

## Modules

- `m173.helper`: vectors (`IntVector2`, `IntVector3`, `DoubleVector3`),
  angles (`FloatAngle`, with `yaw_to_byte` and friends packing an angle
  into a signed byte), `VsDamageInfo`, `Dimension`, `ArmorType`,
  ASCII case-insensitive comparison (`stricmp`) and the conversions the
  protocol needs: `to_ucs2(bytes) -> str` decodes UTF-8 and
  `to_utf8(str) -> bytes` encodes it. Anything that does not fit in
  UCS-2 (four-byte sequences, broken sequences, surrogates) becomes `?`.
- `m173.config`: a typed key/value configuration file (`Config`,
  `ConfigItem`, `ConfigType`). Integer values are clamped to their
  limits, strings are cut to 32 characters, unknown keys in the file are
  ignored, and the file is rewritten when an entry is missing from it.
  `default_items()` gives the server's stock settings.
- `m173.toolmaterial`: wood, stone, iron, gold and diamond tool
  materials (`select`, `ToolMaterialIndex`, `ToolMaterial`); an unknown
  index gives an empty material.
- `m173.items`: `Item` and its kinds (`ItemArmor`, `ItemSword`,
  `ItemBlock`, `ItemBow`, `ItemFishingRod`, `ItemLighter`, `ItemMap`,
  `ItemSapling`, `ItemSign`, `ItemSnowball`, `ItemTorch`, `ItemWool`,
  `WoolColour`) and `ItemRegistry`. An item's id is the number it is
  created with plus 256; an `ItemBlock` has the id of its block.
- `m173.itemstack`: `ItemStack` with splitting, moving, merging,
  swapping and wear (`damage_item`).
- `m173.itemdb`: `build_item_database(registry)` creates the whole stock
  item table and returns it as a dict keyed by name.
- `m173.blocks`: `Block`, `BasicBlock`, `NoteBlock`, `SaplingBlock`,
  `TorchBlock`, `WoolBlock`, `WorkbenchBlock` and `BlockRegistry`. Each
  block kind also creates its item form in an item registry.
- `m173.blockdb`: `build_block_database(block_registry, item_registry)`
  creates the stock block table.
- `m173.commands`: `Command`, `CommandFlags`, `CommandResult`,
  `CommandHandler` (registration, permission checks, argument splitting,
  paged help) and `HelpCommand`.
- `m173.entities`: `Entity`, `Creature` (health, fall damage, chunk
  changes), `Mob`, `ObjectEntity`, their type enums and
  `to_chunk_coords`.
- `m173.objects`: `Pig`, `Pickup`, `Arrow`, `Snowball`, `Thunderbolt`
  and `FishFloat`. Pickups expire after five minutes, arrows after six
  seconds, snowballs after 3.3 seconds and lightning after three.
- `m173.manager`: `EntityManager`, which hands out ids, reuses freed
  ones, ticks every entity and drops those marked for destruction.

Both registries have module-level defaults (`DEFAULT_REGISTRY`,
`DEFAULT_BLOCK_REGISTRY`) used when no registry is passed; pass your own
to keep separate worlds or tests apart.

## Items and stacks

```python
from m173.items import ItemRegistry
from m173.itemdb import build_item_database
from m173.itemstack import ItemStack

registry = ItemRegistry()
items = build_item_database(registry)

sword = registry.get_by_id(267)       # iron sword
print(sword.is_damageable())          # True

stack = ItemStack(267, 1, registry=registry)
stack.damage_item(1, None)            # True while the sword holds up
```

Looking up an id that has no item raises `InvalidItemIdError`.
Behaviour that needs a world or a player (right-clicking, equipping,
using an item on a block) is left to callables placed in
`item.handlers` under `"right_click"`, `"equipped"` and
`"use_on_block"`.

## Configuration

```python
from m173.config import Config, default_items

with Config(default_items(), "system.cfg") as config:
    port = config["bind.port"].value
```

`Config` loads the file when it is created (writing it if it does not
exist) and saves it on leaving the `with` block if any value changed.
Asking for a key that is not defined raises `ConfigUnknownEntryError`;
setting a value of the wrong type raises `ConfigInvalidTypeError`. Both
derive from `ConfigError`.

## Commands

```python
from m173.commands import CommandHandler, HelpCommand

handler = CommandHandler()
handler.register(HelpCommand(handler))
result = handler.execute(None, "/help")
print(result.success, result.output)
```

A caller of `None` stands for the server console, which may run every
command except player-only ones. Any other caller needs an
`is_operator` attribute. Unknown commands produce an "Unknown command"
result rather than an error. Only `HelpCommand` is provided; other
commands are written by subclassing `Command`.

## Entities

```python
from m173.helper import DoubleVector3
from m173.manager import EntityManager
from m173.objects import Thunderbolt

manager = EntityManager()
bolt = manager.add_entity(Thunderbolt(DoubleVector3(0.0, 64.0, 0.0)))
manager.do_entity_ticks(3.5)          # the bolt has expired and is gone
```

`EntityManager.start()` ticks entities in a background thread until
`finish()` is called. Entities report lifecycle events (`spawned`,
`destroyed`, `move`, `chunk_changed`, `health_changed`, `velocity`) to
listeners added with `Entity.subscribe`.

## What this package does not do

It has no network code, no command to start a server, no world or
chunk storage, no crafting and no player entity. Where the model
reaches a player, it uses whatever object it is given: the entity
manager calls `add_tracked_entity`, `remove_tracked_entity` and reads
`name` and `is_player`; `NoteBlock` calls `play_note` and
`WorkbenchBlock` calls `open_workbench` on the activator; `FishFloat`
calls `set_attached_entity` on its owner.