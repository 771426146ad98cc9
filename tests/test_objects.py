import pytest

from m173.entities import CreatureType, EntityType, MobType, ObjectType
from m173.helper import DoubleVector3
from m173.items import Item, ItemRegistry
from m173.itemstack import ItemStack
from m173.objects import Arrow, FishFloat, Pickup, Pig, Snowball, Thunderbolt

POS = DoubleVector3(1.0, 64.0, 2.0)
MOTION = DoubleVector3(0.0, 0.0, 1.0)


class FakeOwner:
    is_player = True

    def __init__(self, accept=True):
        self.accept = accept
        self.calls = []

    def set_attached_entity(self, ent, reset=False):
        self.calls.append((ent, reset))
        return self.accept


def test_pig_placement_and_kind():
    pig = Pig(POS)
    assert pig.position == POS
    assert pig.prev_position == POS
    assert pig.mob_type == MobType.PIG
    assert pig.creature_type == CreatureType.MOB
    assert pig.id_name == "Mob::Pig"


def test_pig_saddle_metadata():
    pig = Pig(POS)
    assert pig.metadata() == {16: 0}
    pig.meta_updated = True
    pig.set_saddle(True)
    assert pig.meta_updated is False
    assert pig.metadata() == {16: 1}


def test_pig_tick_publishes_metadata_once():
    pig = Pig(POS)
    sent = []
    pig.meta_sink = lambda e, meta: sent.append(meta)
    pig.set_saddle(True)
    pig.tick(0.1)
    pig.tick(0.1)
    assert sent == [{16: 1}]


def test_set_saddle_same_value_keeps_meta_state():
    pig = Pig(POS)
    pig.meta_updated = True
    pig.set_saddle(False)
    assert pig.meta_updated is True


@pytest.mark.parametrize(
    "factory, limit",
    [
        (lambda: Arrow(POS, 1, MOTION), 6.0),
        (lambda: Snowball(POS, 1, MOTION), 3.3),
        (lambda: Thunderbolt(POS), 3.0),
    ],
)
def test_projectile_lifetime(factory, limit):
    ent = factory()
    ent.tick(limit)
    assert ent.marked_for_destruction is False
    ent.tick(0.01)
    assert ent.marked_for_destruction is True


def test_projectile_kinds():
    assert Arrow(POS, 3, MOTION).object_type == ObjectType.ARROW
    assert Snowball(POS, 3, MOTION).object_type == ObjectType.SNOWBALL
    assert Thunderbolt(POS).type == EntityType.THUNDERBOLT


def test_pickup_holds_stack_and_expires():
    registry = ItemRegistry()
    item = Item(5, registry)
    stack = ItemStack(item.id, 3, 0, registry)
    pickup = Pickup(POS, stack)
    assert pickup.stack == stack
    assert pickup.type == EntityType.PICKUP
    pickup.tick(5.0 * 60.0)
    assert pickup.marked_for_destruction is False
    pickup.tick(1.0)
    assert pickup.marked_for_destruction is True


def test_fish_float_survives_while_attached():
    owner = FakeOwner(accept=True)
    ff = FishFloat(POS, 4, MOTION, lambda eid: owner if eid == 4 else None)
    ff.tick(0.1)
    assert ff.marked_for_destruction is False
    assert owner.calls == [(ff, False)]
    assert ff.object_type == ObjectType.FISHING_FLOAT


def test_fish_float_destroyed_without_owner():
    ff = FishFloat(POS, 4, MOTION, lambda eid: None)
    ff.tick(0.1)
    assert ff.marked_for_destruction is True


def test_fish_float_destroyed_when_attach_refused():
    owner = FakeOwner(accept=False)
    ff = FishFloat(POS, 4, MOTION, lambda eid: owner)
    ff.tick(0.1)
    assert ff.marked_for_destruction is True


def test_fish_float_lure_and_detach():
    owner = FakeOwner()
    ff = FishFloat(POS, 4, MOTION, lambda eid: owner)
    ff.lure()
    assert ff.marked_for_destruction is True
    ff.on_destroyed()
    assert owner.calls == [(ff, True)]