"""Character statistics and the modifiers items apply to them."""

from dataclasses import dataclass
from enum import Enum


class StatType(Enum):
    """The statistics every character carries."""

    HP = "HP"
    STR = "STR"
    CON = "CON"
    DEX = "DEX"


@dataclass(frozen=True)
class StatModifier:
    """A bonus (or penalty) of ``value`` to one statistic."""

    stat: StatType
    value: int