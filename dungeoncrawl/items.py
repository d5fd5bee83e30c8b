"""Items that can be found as loot and carried by the player."""

from dataclasses import dataclass, field

from .stats import StatModifier


@dataclass
class Item:
    """A named item granting zero or more stat modifiers."""

    name: str
    stat_modifiers: list[StatModifier] = field(default_factory=list)


@dataclass(init=False)
class Weapon(Item):
    """An item that deals ``damage`` when used to attack."""

    damage: int

    def __init__(self, name: str, stat_modifiers: list[StatModifier], damage: int) -> None:
        super().__init__(name, list(stat_modifiers))
        self.damage = damage