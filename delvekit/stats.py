"""Character statistics, modifiers and health."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .component import Component
import logging

logger = logging.getLogger(__name__)


class StatType(Enum):
    STRENGTH = 0
    INTELLECT = 1
    SPEED = 2
    DEXTERITY = 3
    CONSTITUTION = 4
    DEFENSE = 5
    LUCK = 6


@dataclass(frozen=True)
class _Modifier:
    value: int
    duration: int  # turns left; negative means permanent


def _trunc_div10(numerator: int) -> int:
    quotient = abs(numerator) // 10
    return quotient if numerator >= 0 else -quotient


class StatsComponent(Component):
    """Base stats, timed modifiers and the health derived from them."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__()
        self._rng = rng if rng is not None else random.Random()
        self._base: Dict[StatType, int] = {stat: 0 for stat in StatType}
        self._modifiers: Dict[StatType, List[_Modifier]] = {}
        self.max_health = 0
        self.current_health = 0

    def initialize(
        self,
        strength: int,
        intellect: int,
        speed: int,
        dexterity: int,
        constitution: int,
        defense: int,
        luck: int,
    ) -> None:
        """Set all base stats and restore full health."""
        values = (strength, intellect, speed, dexterity, constitution, defense, luck)
        self._base = dict(zip(StatType, values))
        self._recalculate()
        self.current_health = self.max_health

    def start(self) -> None:
        self._recalculate()

    def get_base_stat(self, stat: StatType) -> int:
        return self._base.get(stat, 0)

    def set_base_stat(self, stat: StatType, value: int) -> None:
        self._base[stat] = value
        self._recalculate()

    def get_current_stat(self, stat: StatType) -> int:
        """Base value plus the sum of active modifiers."""
        return self.get_base_stat(stat) + sum(m.value for m in self._modifiers.get(stat, ()))

    def add_modifier(self, stat: StatType, value: int, duration: int = -1) -> None:
        """Add a modifier lasting ``duration`` turns; a negative duration is permanent."""
        self._modifiers.setdefault(stat, []).append(_Modifier(value, duration))
        self._recalculate()

    def clear_modifiers(self) -> None:
        self._modifiers.clear()
        self._recalculate()

    def update_modifiers(self) -> None:
        """Tick timed modifiers down by one turn, dropping the expired ones."""
        changed = False
        for stat, mods in self._modifiers.items():
            kept: List[_Modifier] = []
            for mod in mods:
                if mod.duration < 0:
                    kept.append(mod)
                elif mod.duration - 1 > 0:
                    kept.append(_Modifier(mod.value, mod.duration - 1))
                else:
                    changed = True
            self._modifiers[stat] = kept
        if changed:
            self._recalculate()

    def calculate_max_health(self) -> int:
        return 10 + self.get_current_stat(StatType.CONSTITUTION) * 5

    def calculate_damage(self, base_damage: int) -> int:
        """Base damage plus half of strength and three tenths of dexterity, truncated."""
        total = (
            base_damage * 10
            + self.get_current_stat(StatType.STRENGTH) * 5
            + self.get_current_stat(StatType.DEXTERITY) * 3
        )
        return _trunc_div10(total)

    def dodge_chance(self) -> int:
        return min(40, self.get_current_stat(StatType.DEXTERITY) * 2)

    def block_chance(self) -> int:
        return min(50, self.get_current_stat(StatType.DEFENSE) * 3)

    def critical_chance(self) -> int:
        return min(30, self.get_current_stat(StatType.LUCK) * 2)

    def set_current_health(self, health: int) -> None:
        self.current_health = min(health, self.max_health)

    def heal(self, amount: int) -> None:
        self.current_health = min(self.current_health + amount, self.max_health)

    def take_damage(self, damage: int) -> bool:
        """Apply damage unless blocked; return True if this leaves the owner dead."""
        if self._rng.randrange(100) < self.block_chance():
            logger.debug("Attack blocked!")
            return False
        self.current_health = max(0, self.current_health - damage)
        return self.is_dead()

    def is_dead(self) -> bool:
        return self.current_health <= 0

    @staticmethod
    def stat_name(stat: StatType) -> str:
        if isinstance(stat, StatType):
            return stat.name.capitalize()
        return "Unknown"

    def _recalculate(self) -> None:
        old_max = self.max_health
        self.max_health = self.calculate_max_health()
        if old_max > 0 and self.max_health != old_max:
            self.current_health = int(self.max_health * (self.current_health / old_max))
        if self.current_health > self.max_health:
            self.current_health = self.max_health