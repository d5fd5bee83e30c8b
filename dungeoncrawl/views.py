"""Text views of the dungeon, its levels and rooms."""

from .console import Console
from .room import Room
from .stats import StatType


class _View:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()


class DungeonView(_View):
    """The screen shown at the dungeon entrance."""

    def display(self) -> None:
        """Show the dungeon screen and its commands."""
        self.console.clear_screen()
        self.console.write_line("You are in the dungeon.")
        self.console.write_line("Available commands: enter, exit")

    def display_message(self, message: str) -> None:
        """Show a one-line message."""
        self.console.write_line(message)


class LevelView(_View):
    """The screen shown on a dungeon level."""

    def display(self) -> None:
        """Show the level screen and its commands."""
        self.console.clear_screen()
        self.console.write_line("You are in a level.")
        self.console.write_line("Available commands: go, exit")

    def display_message(self, message: str) -> None:
        """Show a one-line message."""
        self.console.write_line(message)


class RoomView(_View):
    """The screen shown inside a room; remembers whether it was looked at."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__(console)
        self.looked = False

    def display(self, room: Room) -> None:
        """Show the room, its contents once looked at, and its commands."""
        self.console.clear_screen()
        self.console.write_line("You are in a room.")
        if self.looked:
            self._display_enemies(room)
            self._display_loot(room)
        self.console.write_line("Available commands: look, attack, take, exit")

    def display_look(self, room: Room) -> None:
        """Describe the room's contents the first time, then wait."""
        if self.looked:
            self.console.write_line("You have already looked around.")
        else:
            self._display_enemies(room)
            self._display_loot(room)
            self.looked = True
        self.console.wait_for_keypress()

    def display_attack(self, enemy_present: bool, enemy_hp: int) -> None:
        """Report the outcome of an attack, then wait."""
        if not enemy_present:
            self.console.write_line("No enemies to attack.")
        else:
            self.console.write_line("Attacking enemy.")
            if enemy_hp <= 0:
                self.console.write_line("Enemy defeated!")
            else:
                self.console.write_line(f"Enemy HP is now: {enemy_hp}")
        self.console.wait_for_keypress()

    def display_message(self, message: str) -> None:
        """Show a one-line message."""
        self.console.write_line(message)

    def _display_enemies(self, room: Room) -> None:
        if not room.enemies:
            self.console.write_line("No enemies in the room.")
            return
        self.console.write_line("Enemies in the room:")
        for enemy in room.enemies:
            self.console.write_line(f"- {enemy.name} (HP: {enemy.stats[StatType.HP]})")

    def _display_loot(self, room: Room) -> None:
        if not room.loot:
            self.console.write_line("No loot in the room.")
            return
        self.console.write_line("Loot in the room:")
        for item in room.loot:
            self.console.write_line(f"- {item.name}")