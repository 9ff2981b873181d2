"""Creatures: their statistics and the ready-made kinds."""

from __future__ import annotations

from dataclasses import dataclass, field

from roguest.dice import random_between
from roguest.values import U8_MAX, U16_MAX, RangeConfig, RangeValue


@dataclass
class CreatureConfig:
    """Settings from which a :class:`Creature` is built."""

    name: str = "NPC"
    level: RangeConfig = field(
        default_factory=lambda: RangeConfig(value=1, minimum=1, maximum=5, ceiling=U8_MAX)
    )
    gold: RangeConfig = field(default_factory=lambda: RangeConfig(value=0))
    hp: RangeConfig = field(default_factory=lambda: RangeConfig(value=100, maximum=100))
    attack: RangeConfig = field(default_factory=lambda: RangeConfig(value=10))


class Creature:
    """A player or a monster."""

    def __init__(self, config: CreatureConfig | None = None) -> None:
        if config is None:
            config = CreatureConfig()
        self.name = config.name
        self.level = RangeValue(config.level)
        self.gold = RangeValue(config.gold)
        self.hp = RangeValue(config.hp)
        self.attack = RangeValue(config.attack)

    def __repr__(self) -> str:
        return f"Creature(name={self.name!r}, level={self.level.value}, hp={self.hp.value})"

    def calculate_attack(self) -> int:
        """Roll the attack range and scale it by the creature's level."""
        if self.level.maximum == 0:
            return 0
        roll = random_between(self.attack.minimum, self.attack.maximum)
        factor = 1.0 + self.level.value / self.level.maximum
        return min(int(roll * factor), U16_MAX)


def goblin() -> Creature:
    """A goblin of random level, gold and health."""
    return Creature(
        CreatureConfig(
            name="Гоблин",
            level=RangeConfig(value=random_between(1, 3), ceiling=U8_MAX),
            gold=RangeConfig(value=random_between(1, 10)),
            hp=RangeConfig(value=random_between(10, 30)),
            attack=RangeConfig(value=0, minimum=5, maximum=15),
        )
    )


def player(name: str) -> Creature:
    """The hero, starting at level one."""
    return Creature(
        CreatureConfig(
            name=name,
            level=RangeConfig(value=1, minimum=1, maximum=100, ceiling=U8_MAX),
            attack=RangeConfig(value=0, minimum=10, maximum=20),
        )
    )