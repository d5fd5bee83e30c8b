"""Random loot, currently weapons with prefixes, materials and suffixes."""

from . import rng
from .items import Item, Weapon
from .stats import StatModifier, StatType

PREFIX_BONUS: dict[str, int] = {
    "Rusty": 0,
    "Sharp": 2,
    "Heavy": 3,
    "Balanced": 2,
    "Enchanted": 5,
    "Cursed": -2,
    "Legendary": 7,
}

PREFIX_WEIGHTS: list[tuple[str, float]] = [
    ("Rusty", 0.30),
    ("Sharp", 0.25),
    ("Heavy", 0.20),
    ("Balanced", 0.15),
    ("Enchanted", 0.06),
    ("Cursed", 0.03),
    ("Legendary", 0.01),
]

MATERIAL_BONUS: dict[str, int] = {
    "Wooden": 1,
    "Iron": 2,
    "Steel": 3,
    "Mithril": 5,
    "Adamantine": 7,
    "Dragonbone": 10,
}

MATERIAL_WEIGHTS: list[tuple[str, float]] = [
    ("Wooden", 0.30),
    ("Iron", 0.30),
    ("Steel", 0.20),
    ("Mithril", 0.12),
    ("Adamantine", 0.07),
    ("Dragonbone", 0.01),
]

TYPE_WEIGHTS: list[tuple[str, float]] = [
    ("Sword", 0.25),
    ("Axe", 0.20),
    ("Bow", 0.20),
    ("Dagger", 0.15),
    ("Mace", 0.15),
    ("Spear", 0.05),
]

SUFFIX_BONUS: dict[str, StatModifier] = {
    "of Strength": StatModifier(StatType.STR, 2),
    "of Agility": StatModifier(StatType.DEX, 2),
    "of Vitality": StatModifier(StatType.CON, 2),
    "of the Phoenix": StatModifier(StatType.HP, 10),
    "of Precision": StatModifier(StatType.DEX, 4),
    "of Titans": StatModifier(StatType.STR, 5),
}

SUFFIX_WEIGHTS: list[tuple[str, float]] = [
    ("of Strength", 0.35),
    ("of Agility", 0.30),
    ("of Vitality", 0.25),
    ("of the Phoenix", 0.05),
    ("of Precision", 0.03),
    ("of Titans", 0.02),
]

SUFFIX_CHANCE = 0.3
BASE_DAMAGE_RANGE = (5, 10)
DAMAGE_PER_LEVEL = 2


def generate_item(dungeon_level: int) -> Item:
    """Generate a random loot item suited to ``dungeon_level``."""
    return generate_weapon(dungeon_level)


def generate_weapon(dungeon_level: int) -> Weapon:
    """Generate a random weapon whose damage grows with ``dungeon_level``."""
    prefix = rng.weighted_choice(PREFIX_WEIGHTS)
    material = rng.weighted_choice(MATERIAL_WEIGHTS)
    kind = rng.weighted_choice(TYPE_WEIGHTS)
    name = f"{prefix} {material} {kind}"

    base_damage = rng.randint(*BASE_DAMAGE_RANGE) + dungeon_level * DAMAGE_PER_LEVEL
    damage = base_damage + PREFIX_BONUS[prefix] + MATERIAL_BONUS[material]

    modifiers: list[StatModifier] = []
    if rng.roll_chance(SUFFIX_CHANCE):
        suffix = rng.weighted_choice(SUFFIX_WEIGHTS)
        name = f"{name} {suffix}"
        modifiers.append(SUFFIX_BONUS[suffix])

    return Weapon(name, modifiers, damage)