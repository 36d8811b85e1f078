"""Status effects (poison, stun, stat buffs) and the component that tracks them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, List, Optional, Tuple

from .component import Component
from .stats import StatsComponent, StatType

logger = logging.getLogger(__name__)


class StatusEffectType(Enum):
    POISON = 0
    STUN = 1
    BUFF = 2
    DEBUFF = 3
    BURNING = 4
    FREEZING = 5
    BLEEDING = 6
    CONFUSION = 7
    BLIND = 8
    SHIELD = 9


def _has_stats(entity: Any) -> bool:
    return entity is not None and entity.has_component(StatsComponent)


class StatusEffect(ABC):
    """An effect lasting a number of turns on an entity."""

    blocks_turn = False

    def __init__(self, effect_type: StatusEffectType, duration: int, name: str) -> None:
        self.type = effect_type
        self.duration = duration
        self.name = name
        self.description = ""

    @abstractmethod
    def on_turn_start(self, entity: Any) -> None:
        """Apply the effect at the start of the entity's turn."""

    @abstractmethod
    def on_turn_end(self, entity: Any) -> None:
        """Apply the effect at the end of the entity's turn."""

    def on_new_turn(self, entity: Any) -> bool:
        """Return whether the entity may act this turn."""
        return not self.blocks_turn

    def has_expired(self) -> bool:
        return self.duration <= 0

    def _decrease_duration(self) -> None:
        if self.duration > 0:
            self.duration -= 1


class StatusEffectsComponent(Component):
    """Holds the active status effects of an entity, at most one per name."""

    def __init__(self) -> None:
        super().__init__()
        self._effects: List[StatusEffect] = []

    @property
    def effects(self) -> Tuple[StatusEffect, ...]:
        return tuple(self._effects)

    def add_effect(self, effect: Optional[StatusEffect]) -> None:
        """Add an effect, replacing any active effect with the same name."""
        if effect is None:
            return
        for index, existing in enumerate(self._effects):
            if existing.name == effect.name:
                self._effects[index] = effect
                logger.debug("Status effect %s refreshed.", effect.name)
                return
        logger.debug("Status effect %s applied.", effect.name)
        self._effects.append(effect)

    def remove_effect(self, effect_name: str) -> None:
        kept = [effect for effect in self._effects if effect.name != effect_name]
        if len(kept) != len(self._effects):
            logger.debug("Status effect %s removed.", effect_name)
            self._effects = kept

    def clear_effects(self) -> None:
        logger.debug("All status effects cleared.")
        self._effects.clear()

    def has_effect(self, effect_type: StatusEffectType) -> bool:
        return any(effect.type == effect_type for effect in self._effects)

    def has_effect_named(self, effect_name: str) -> bool:
        return any(effect.name == effect_name for effect in self._effects)

    def process_turn_start(self) -> None:
        if not self._effects:
            return
        for effect in list(self._effects):
            effect.on_turn_start(self.owner)
        self._remove_expired()

    def process_turn_end(self) -> None:
        if not self._effects:
            return
        for effect in list(self._effects):
            effect.on_turn_end(self.owner)
        self._remove_expired()

    def process_new_turn(self) -> bool:
        """Return False if any active effect prevents the owner from acting."""
        for effect in self._effects:
            if not effect.on_new_turn(self.owner):
                owner_name = getattr(self.owner, "name", "Entity")
                logger.debug("%s cannot take a turn due to %s!", owner_name, effect.name)
                return False
        return True

    def _remove_expired(self) -> None:
        for effect in self._effects:
            if effect.has_expired():
                logger.debug("Status effect %s expired.", effect.name)
        self._effects = [effect for effect in self._effects if not effect.has_expired()]


class PoisonEffect(StatusEffect):
    """Deals fixed damage each turn, never taking the last hit point."""

    def __init__(self, duration: int, damage_per_turn: int) -> None:
        super().__init__(StatusEffectType.POISON, duration, "Poison")
        self.damage_per_turn = damage_per_turn
        self.description = f"Deals {damage_per_turn} damage per turn."

    def on_turn_start(self, entity: Any) -> None:
        if not _has_stats(entity):
            return
        stats = entity.get_component(StatsComponent)
        logger.debug("%s takes %d poison damage!", entity.name, self.damage_per_turn)
        damage = min(stats.current_health - 1, self.damage_per_turn)
        if damage > 0:
            stats.take_damage(damage)
        else:
            logger.debug("Poison damage prevented to avoid death.")

    def on_turn_end(self, entity: Any) -> None:
        self._decrease_duration()


class StunEffect(StatusEffect):
    """Prevents the entity from acting while it lasts."""

    blocks_turn = True

    def __init__(self, duration: int) -> None:
        super().__init__(StatusEffectType.STUN, duration, "Stun")
        self.description = f"Cannot take actions for {duration} turns."

    def on_turn_start(self, entity: Any) -> None:
        if entity is not None:
            logger.debug("%s is stunned!", entity.name)

    def on_turn_end(self, entity: Any) -> None:
        self._decrease_duration()

    def on_new_turn(self, entity: Any) -> bool:
        """A stunned entity never acts."""
        return not self.blocks_turn


class StatBuffEffect(StatusEffect):
    """Raises or lowers one stat for the effect's duration."""

    def __init__(self, duration: int, stat: StatType, modifier_value: int) -> None:
        positive = modifier_value > 0
        super().__init__(
            StatusEffectType.BUFF if positive else StatusEffectType.DEBUFF,
            duration,
            "Buff" if positive else "Debuff",
        )
        self.stat = stat
        self.modifier_value = modifier_value
        self._applied = False
        stat_name = StatsComponent.stat_name(stat)
        self.name = f"{'+' if positive else ''}{modifier_value} {stat_name}"
        self.description = (
            f"Modifies {stat_name} by {modifier_value} for {duration} turns."
        )

    def on_turn_start(self, entity: Any) -> None:
        if not _has_stats(entity) or self._applied:
            return
        stats = entity.get_component(StatsComponent)
        stats.add_modifier(self.stat, self.modifier_value, self.duration)
        self._applied = True
        logger.debug("%s's %s", entity.name, self.description)

    def on_turn_end(self, entity: Any) -> None:
        self._decrease_duration()


def create_status_effect(
    effect_type: StatusEffectType, duration: int, magnitude: int = 0
) -> StatusEffect:
    """Build an effect of the given type; buffs and debuffs act on strength."""
    if effect_type is StatusEffectType.POISON:
        return PoisonEffect(duration, magnitude)
    if effect_type is StatusEffectType.STUN:
        return StunEffect(duration)
    if effect_type is StatusEffectType.BUFF:
        return StatBuffEffect(duration, StatType.STRENGTH, abs(magnitude))
    if effect_type is StatusEffectType.DEBUFF:
        return StatBuffEffect(duration, StatType.STRENGTH, -abs(magnitude))
    raise ValueError(f"Unknown status effect type requested: {effect_type}")