import io

import pytest

from dungeoncrawl import rng
from dungeoncrawl.characters import Enemy, Player
from dungeoncrawl.console import Console
from dungeoncrawl.controllers import DungeonController, LevelController, RoomController
from dungeoncrawl.items import Item
from dungeoncrawl.room import Room
from dungeoncrawl.stats import StatType
from dungeoncrawl.views import DungeonView, LevelView, RoomView
from dungeoncrawl.world import Dungeon, Level


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def hero():
    return Player({StatType.HP: 100, StatType.STR: 10, StatType.DEX: 10, StatType.CON: 10}, "Hero")


def goblin():
    return Enemy({StatType.HP: 10, StatType.STR: 3, StatType.DEX: 2, StatType.CON: 1}, "Goblin")


def run_room(text, room, player):
    console, out = make_console(text)
    RoomController(console).run(room, RoomView(console), player)
    return out.getvalue()


def test_room_exit_immediately():
    room = Room([goblin()], [Item("Stick")])
    text = run_room("exit\n", room, hero())
    assert text.count("You are in a room.") == 1
    assert len(room.enemies) == 1
    assert len(room.loot) == 1


def test_room_attack_damages_first_enemy():
    room = Room([goblin(), goblin()])
    text = run_room("attack\n\nexit\n", room, hero())
    assert room.enemies[0].stats[StatType.HP] == 1
    assert len(room.enemies) == 2
    assert "Enemy HP is now: 1" in text


def test_room_attack_twice_removes_enemy():
    room = Room([goblin()])
    text = run_room("attack\n\nattack\n\nexit\n", room, hero())
    assert room.enemies == []
    assert "Enemy defeated!" in text


def test_room_attack_without_enemies():
    text = run_room("attack\n\nexit\n", Room(), hero())
    assert "No enemies to attack." in text


def test_room_take_moves_first_item_to_inventory():
    first, second = Item("Stick"), Item("Stone")
    room = Room(loot=[first, second])
    player = hero()
    run_room("take\nexit\n", room, player)
    assert player.inventory == [first]
    assert room.loot == [second]


def test_room_take_from_empty_room():
    player = hero()
    run_room("take\nexit\n", Room(), player)
    assert player.inventory == []


def test_room_look_then_exit():
    text = run_room("look\n\nexit\n", Room([goblin()]), hero())
    assert "- Goblin (HP: 10)" in text


def test_room_invalid_command():
    text = run_room("dance\nexit\n", Room(), hero())
    assert "Invalid command." in text


def test_room_end_of_input_raises():
    with pytest.raises(EOFError):
        run_room("look\n", Room(), hero())


def test_level_go_enters_rooms():
    rng.seed(3)
    level = Level(0)
    console, out = make_console("go\nexit\ngo\nexit\nexit\n")
    LevelController(console).run(level, LevelView(console), hero())
    assert level.room_number == 2
    assert out.getvalue().count("You are in a room.") == 2


def test_level_invalid_command():
    level = Level(0)
    console, out = make_console("jump\nexit\n")
    LevelController(console).run(level, LevelView(console), hero())
    assert "Invalid command." in out.getvalue()
    assert level.room_number == 0


def test_dungeon_exit_without_entering():
    dungeon = Dungeon()
    console, out = make_console("exit\n")
    DungeonController(console).run(dungeon, DungeonView(console), hero())
    assert dungeon.level_number == 0
    assert "You are in a level." not in out.getvalue()


def test_dungeon_enter_returns_after_level():
    rng.seed(11)
    dungeon = Dungeon()
    console, out = make_console("enter\ngo\nexit\nexit\nleftover\n")
    DungeonController(console).run(dungeon, DungeonView(console), hero())
    assert dungeon.level_number == 1
    assert dungeon.current_level.room_number == 1
    assert console.read_line() == "leftover"


def test_dungeon_invalid_command():
    console, out = make_console("nope\nexit\n")
    DungeonController(console).run(Dungeon(), DungeonView(console), hero())
    assert out.getvalue().count("Invalid command.") == 1