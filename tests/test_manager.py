import pytest

from m173.entities import Creature, CreatureType
from m173.helper import DoubleVector3
from m173.manager import EntityCounterOverflowError, EntityManager
from m173.objects import Arrow, FishFloat, Pig, Thunderbolt

POS = DoubleVector3(0.0, 64.0, 0.0)


class FakePlayer(Creature):
    is_player = True

    def __init__(self, name):
        super().__init__(CreatureType.PLAYER)
        self.name = name
        self.tracked = []
        self.attached = None

    def add_tracked_entity(self, ent):
        self.tracked.append(ent)
        return True

    def remove_tracked_entity(self, ent):
        if ent in self.tracked:
            self.tracked.remove(ent)
            return True
        return False

    def set_attached_entity(self, ent, reset=False):
        if not reset and self.attached is None:
            self.attached = ent
            return True
        if reset and self.attached is ent:
            self.attached = None
            return True
        return self.attached is ent


def test_ids_start_at_one_and_increase():
    mgr = EntityManager()
    a = mgr.add_entity(Thunderbolt(POS))
    b = mgr.add_entity(Thunderbolt(POS))
    assert (a.entity_id, b.entity_id) == (1, 2)
    assert mgr.get_entity(2) is b
    assert len(mgr) == 2


def test_get_unknown_entity():
    mgr = EntityManager()
    assert mgr.get_entity(42) is None
    assert mgr.remove_entity(42) is False


def test_removed_entity_is_dropped_and_id_reused():
    mgr = EntityManager()
    pig = mgr.add_entity(Pig(POS))
    old_id = pig.entity_id
    assert mgr.remove_entity(old_id) is True
    mgr.do_entity_ticks(0.0)
    assert mgr.get_entity(old_id) is None
    again = mgr.add_entity(Pig(POS))
    assert again.entity_id == old_id


def test_ticks_expire_entities_and_notify():
    destroyed = []
    mgr = EntityManager(on_entity_destroyed=destroyed.append)
    arrow = mgr.add_entity(Arrow(POS, 0, POS))
    mgr.do_entity_ticks(1.0)
    assert mgr.get_entity(arrow.entity_id) is arrow
    mgr.do_entity_ticks(10.0)
    assert destroyed == [arrow]
    assert list(mgr.entities()) == []


def test_players_track_new_entities():
    mgr = EntityManager()
    player = mgr.add_entity(FakePlayer("Steve"))
    pig = mgr.add_entity(Pig(POS))
    assert player.tracked == [pig]
    assert list(mgr.players()) == [player]
    assert mgr.players_count() == 1


def test_removed_player_untracked_by_others():
    mgr = EntityManager()
    alex = mgr.add_entity(FakePlayer("Alex"))
    steve = mgr.add_entity(FakePlayer("Steve"))
    alex.tracked.append(steve)
    mgr.remove_entity(steve.entity_id)
    assert mgr.players_count() == 1
    mgr.do_entity_ticks(0.0)
    assert steve not in alex.tracked
    assert list(mgr.players()) == [alex]


def test_player_by_name_ignores_case():
    mgr = EntityManager()
    player = mgr.add_entity(FakePlayer("Notch"))
    assert mgr.player_by_name("nOTCH") is player
    assert mgr.player_by_name("Herobrine") is None


def test_counter_overflow():
    mgr = EntityManager(id_limit=2)
    mgr.add_entity(Thunderbolt(POS))
    mgr.add_entity(Thunderbolt(POS))
    with pytest.raises(EntityCounterOverflowError):
        mgr.add_entity(Thunderbolt(POS))


def test_fish_float_detaches_on_removal():
    mgr = EntityManager()
    player = mgr.add_entity(FakePlayer("Angler"))
    ff = mgr.add_entity(FishFloat(POS, player.entity_id, POS, mgr.get_entity))
    mgr.do_entity_ticks(0.1)
    assert player.attached is ff
    ff.lure()
    mgr.do_entity_ticks(0.1)
    assert player.attached is None
    assert mgr.get_entity(ff.entity_id) is None


def test_background_ticker_runs_and_stops():
    mgr = EntityManager()
    bolt = mgr.add_entity(Thunderbolt(POS))
    bolt.marked_for_destruction = True
    bolt.lifetime = 100.0
    mgr.start()
    try:
        for _ in range(200):
            if mgr.get_entity(bolt.entity_id) is None:
                break
            import time

            time.sleep(0.01)
    finally:
        mgr.finish()
    assert mgr.get_entity(bolt.entity_id) is None