"""The dungeon and its levels."""

from .room import Room
from .room_generator import generate_room


class Level:
    """One level of the dungeon, explored room by room."""

    def __init__(self, dungeon_level: int) -> None:
        self.dungeon_level = dungeon_level
        self.room_number = 0
        self._current_room: Room | None = None

    @property
    def current_room(self) -> Room:
        """The room the player is in; fails before the first room is entered."""
        if self._current_room is None:
            raise RuntimeError("no room has been entered yet")
        return self._current_room

    def enter_new_room(self) -> None:
        """Generate a fresh room and move into it."""
        self._current_room = generate_room(self.dungeon_level)
        self.room_number += 1


class Dungeon:
    """The whole dungeon, descended level by level."""

    def __init__(self) -> None:
        self.level_number = 0
        self._current_level: Level | None = None

    @property
    def current_level(self) -> Level:
        """The level the player is on; fails before the first level is entered."""
        if self._current_level is None:
            raise RuntimeError("no level has been entered yet")
        return self._current_level

    def enter_new_level(self) -> None:
        """Descend to the next level."""
        self._current_level = Level(self.level_number)
        self.level_number += 1