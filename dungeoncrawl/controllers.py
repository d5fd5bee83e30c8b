"""Command loops driving the dungeon, its levels and rooms."""

from .characters import Player
from .console import Console
from .room import Room
from .stats import StatType
from .views import DungeonView, LevelView, RoomView
from .world import Dungeon, Level

_INVALID = "Invalid command."


class _Controller:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()


class DungeonController(_Controller):
    """Handles commands at the dungeon entrance."""

    def run(self, dungeon: Dungeon, view: DungeonView, player: Player) -> None:
        """Loop until the player enters a level (and leaves it) or exits."""
        while True:
            view.display()
            command = self.console.read_line()
            if command == "enter":
                dungeon.enter_new_level()
                LevelController(self.console).run(
                    dungeon.current_level, LevelView(self.console), player
                )
                return
            if command == "exit":
                return
            view.display_message(_INVALID)


class LevelController(_Controller):
    """Handles commands on a dungeon level."""

    def run(self, level: Level, view: LevelView, player: Player) -> None:
        """Loop, moving into new rooms, until the player exits."""
        while True:
            view.display()
            command = self.console.read_line()
            if command == "go":
                level.enter_new_room()
                RoomController(self.console).run(
                    level.current_room, RoomView(self.console), player
                )
            elif command == "exit":
                return
            else:
                view.display_message(_INVALID)


class RoomController(_Controller):
    """Handles commands inside a room."""

    def run(self, room: Room, view: RoomView, player: Player) -> None:
        """Loop over look, attack and take commands until the player exits."""
        while True:
            view.display(room)
            command = self.console.read_line()
            if command == "look":
                view.display_look(room)
            elif command == "attack":
                self._attack(room, view, player)
            elif command == "take":
                if room.loot:
                    player.add_item(room.take_loot(0))
            elif command == "exit":
                return
            else:
                view.display_message(_INVALID)

    @staticmethod
    def _attack(room: Room, view: RoomView, player: Player) -> None:
        if not room.enemies:
            view.display_attack(False, 0)
            return
        enemy = room.enemies[0]
        player.attack(enemy)
        enemy_hp = enemy.stats[StatType.HP]
        if enemy_hp <= 0:
            room.remove_enemy(0)
        view.display_attack(True, enemy_hp)