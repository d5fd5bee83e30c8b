import pytest

from dungeoncrawl import rng
from dungeoncrawl.room import Room
from dungeoncrawl.world import Dungeon, Level


def test_level_without_room_raises():
    with pytest.raises(RuntimeError):
        Level(0).current_room


def test_entering_rooms_counts_them():
    rng.seed(8)
    level = Level(2)
    level.enter_new_room()
    first = level.current_room
    level.enter_new_room()
    assert isinstance(first, Room)
    assert level.current_room is not first
    assert level.room_number == 2


def test_dungeon_without_level_raises():
    with pytest.raises(RuntimeError):
        Dungeon().current_level


def test_levels_descend_in_order():
    dungeon = Dungeon()
    dungeon.enter_new_level()
    assert dungeon.current_level.dungeon_level == 0
    dungeon.enter_new_level()
    assert dungeon.current_level.dungeon_level == 1
    assert dungeon.level_number == 2


def test_new_level_starts_fresh():
    dungeon = Dungeon()
    dungeon.enter_new_level()
    dungeon.current_level.enter_new_room()
    dungeon.enter_new_level()
    assert dungeon.current_level.room_number == 0
    with pytest.raises(RuntimeError):
        dungeon.current_level.current_room