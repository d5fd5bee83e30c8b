"""Random generation of rooms: enemies and loot."""

from . import loot, rng
from .characters import Enemy
from .room import Room
from .stats import StatType

ENEMY_CHANCE = 0.5
ENEMY_COUNT_RANGE = (1, 3)
LOOT_CHANCE = 0.3
LOOT_COUNT_RANGE = (1, 5)

GOBLIN_STATS = {StatType.HP: 10, StatType.STR: 3, StatType.DEX: 2, StatType.CON: 1}


def _goblin() -> Enemy:
    return Enemy(GOBLIN_STATS, "Goblin")


def generate_room(dungeon_level: int) -> Room:
    """Generate a room that may hold goblins and loot for ``dungeon_level``."""
    enemies = []
    if rng.roll_chance(ENEMY_CHANCE):
        enemies = [_goblin() for _ in range(rng.randint(*ENEMY_COUNT_RANGE))]

    items = []
    if rng.roll_chance(LOOT_CHANCE):
        items = [loot.generate_item(dungeon_level) for _ in range(rng.randint(*LOOT_COUNT_RANGE))]

    return Room(enemies, items)