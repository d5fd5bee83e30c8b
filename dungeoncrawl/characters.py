"""Characters: the player and the enemies they fight."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from .items import Item, Weapon
from .stats import StatType


def _hit(target: "Character", damage: int) -> None:
    remaining = max(0, target.stats[StatType.HP] - damage)
    target.modify_stat(StatType.HP, remaining)


class Character(ABC):
    """A named creature with a set of statistics."""

    def __init__(self, stats: Mapping[StatType, int], name: str) -> None:
        self.stats: dict[StatType, int] = dict(stats)
        self.name = name

    @abstractmethod
    def attack(self, target: "Character") -> None:
        """Deal damage to ``target``."""

    def modify_stat(self, stat: StatType, value: int) -> None:
        """Set ``stat`` to ``value``."""
        self.stats[stat] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, stats={self.stats!r})"


class Enemy(Character):
    """A hostile creature found in rooms."""

    def attack(self, target: Character) -> None:
        damage = self.stats[StatType.STR] - target.stats[StatType.CON]
        _hit(target, damage)


class Player(Character):
    """The hero: carries an inventory and may wield a weapon."""

    def __init__(self, stats: Mapping[StatType, int], name: str) -> None:
        super().__init__(stats, name)
        self.equipped_weapon: Weapon | None = None
        self.inventory: list[Item] = []

    def attack(self, target: Character) -> None:
        strength = self.stats[StatType.STR]
        if self.equipped_weapon is not None:
            strength += self.equipped_weapon.damage
        _hit(target, strength - target.stats[StatType.CON])

    def equip_weapon(self, weapon: Weapon | None) -> None:
        """Wield ``weapon``, replacing any weapon already held."""
        self.equipped_weapon = weapon

    def add_item(self, item: Item) -> None:
        """Put ``item`` in the inventory."""
        self.inventory.append(item)

    def remove_item(self, index: int) -> None:
        """Drop the inventory item at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.inventory):
            del self.inventory[index]