"""A single room with its enemies and loot."""

from collections.abc import Iterable

from .characters import Enemy
from .items import Item


def _check_index(items: list, index: int, what: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} out of range")


class Room:
    """A room holding enemies to fight and loot to take."""

    def __init__(
        self,
        enemies: Iterable[Enemy] = (),
        loot: Iterable[Item] = (),
    ) -> None:
        self.enemies: list[Enemy] = list(enemies)
        self.loot: list[Item] = list(loot)

    def take_loot(self, index: int) -> Item:
        """Remove and return the loot item at ``index``."""
        _check_index(self.loot, index, "loot")
        return self.loot.pop(index)

    def remove_enemy(self, index: int) -> None:
        """Remove the enemy at ``index``."""
        _check_index(self.enemies, index, "enemy")
        del self.enemies[index]

    def __repr__(self) -> str:
        return f"Room(enemies={self.enemies!r}, loot={self.loot!r})"