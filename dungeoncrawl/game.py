"""The top-level game loop and its command-line entry point."""

import argparse

from .characters import Player
from .console import Console
from .controllers import DungeonController
from .stats import StatType
from .views import DungeonView
from .world import Dungeon

HERO_NAME = "Hero"
HERO_STATS = {StatType.HP: 100, StatType.STR: 10, StatType.DEX: 10, StatType.CON: 10}


class Game:
    """Main menu: start a new dungeon run or exit."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    def run(self) -> None:
        """Run the menu loop until the player exits or input ends."""
        try:
            self._loop()
        except EOFError:
            return

    def _loop(self) -> None:
        while True:
            self.console.clear_screen()
            self.console.write("Enter command (start/exit): ")
            command = self.console.read_line()
            if command == "start":
                DungeonController(self.console).run(
                    Dungeon(), DungeonView(self.console), Player(HERO_STATS, HERO_NAME)
                )
            elif command == "exit":
                self.console.write_line("Exiting game.")
                return
            else:
                self.console.write_line("Invalid command.")


def main(argv: list[str] | None = None) -> int:
    """Play the game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="dungeoncrawl", description="A small text dungeon crawler."
    )
    parser.parse_args(argv)
    Game().run()
    return 0