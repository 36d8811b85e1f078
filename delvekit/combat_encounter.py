"""Combat encounters: a fight between the player's team and generated enemies."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence, Tuple

from .encounter import Encounter, EncounterResult, EncounterType
from .entity import Entity
from .position import PositionComponent
from .stats import StatsComponent, StatType
from .status_effects import StatusEffectsComponent

logger = logging.getLogger(__name__)


class CombatResult(Enum):
    """Outcome reported by a combat system."""

    NONE = 0
    PLAYER_VICTORY = 1
    PLAYER_DEFEAT = 2
    ESCAPE = 3


class CombatSystem(Protocol):
    """What a combat encounter needs from the system running the fight."""

    def start_combat(self, player_team: Sequence[Entity], enemy_team: Sequence[Entity]) -> Any:
        ...

    def check_combat_result(self) -> CombatResult:
        ...


_RESULT_MAP = {
    CombatResult.PLAYER_VICTORY: EncounterResult.VICTORY,
    CombatResult.PLAYER_DEFEAT: EncounterResult.DEFEAT,
    CombatResult.ESCAPE: EncounterResult.SKIPPED,
}

# Per enemy kind: name, stat offsets (str, int, spd, dex, con, def, lck),
# and target health as (base, per level).
_ENEMY_KINDS = (
    ("Quick Scout", (0, -2, 5, 3, -1, -2, 2), (18, 4)),
    ("Brute Warrior", (5, -3, -1, 0, 3, 1, -2), (20, 5)),
    ("Dark Mage", (-2, 5, 1, -1, 0, -2, 3), (18, 4)),
)


def _describe_difficulty(difficulty: int) -> str:
    if difficulty <= 1:
        return "A small group of weak enemies blocks your path."
    if difficulty <= 3:
        return "Several enemies stand in your way. They look dangerous."
    if difficulty <= 5:
        return "A large group of strong enemies prepares to attack!"
    return "An extremely powerful enemy force threatens your very existence!"


class CombatEncounter(Encounter):
    """A fight whose enemies scale with the encounter's difficulty."""

    def __init__(
        self,
        name: str,
        difficulty: int,
        combat_system: Optional[CombatSystem] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(EncounterType.COMBAT, name)
        self.difficulty = max(1, difficulty)
        self.description = _describe_difficulty(difficulty)
        self.combat_system = combat_system
        self._rng = rng if rng is not None else random.Random()
        self._player_team: List[Entity] = []
        self._enemy_team: List[Entity] = []
        self._active = False
        self.time_elapsed = 0.0

    @property
    def enemies(self) -> Tuple[Entity, ...]:
        return tuple(self._enemy_team)

    @property
    def player_team(self) -> Tuple[Entity, ...]:
        return tuple(self._player_team)

    def start(self) -> None:
        """Begin the fight, generating enemies if none were added."""
        if self.completed or self._active:
            return
        if self.combat_system is None:
            raise RuntimeError("combat encounter has no combat system")
        logger.debug("Starting combat encounter: %s", self.name)
        if not self._enemy_team:
            self.generate_enemies(1 + self.difficulty // 2)
        self.combat_system.start_combat(list(self._player_team), list(self._enemy_team))
        self._active = True
        self.time_elapsed = 0.0

    def update(self, delta_time: float) -> None:
        """Advance time and complete the encounter once the fight is decided."""
        if self.completed or not self._active:
            return
        self.time_elapsed += delta_time
        assert self.combat_system is not None
        outcome = _RESULT_MAP.get(self.combat_system.check_combat_result())
        if outcome is not None:
            self.complete(outcome)

    def is_active(self) -> bool:
        return self._active and not self.completed

    def complete(self, result: EncounterResult) -> None:
        super().complete(result)
        self._active = False

    def set_player_team(self, team: Sequence[Entity]) -> None:
        self._player_team = list(team)

    def add_enemy(self, enemy: Optional[Entity]) -> None:
        if enemy is not None:
            self._enemy_team.append(enemy)

    def generate_enemies(self, count: int) -> None:
        """Replace the enemy team with ``count`` random enemies."""
        self._enemy_team = [self._random_enemy(self.difficulty) for _ in range(count)]
        logger.debug(
            "Generated %d enemies for encounter: %s", len(self._enemy_team), self.name
        )

    def _random_enemy(self, level: int) -> Entity:
        kind_name, offsets, (health_base, health_per_level) = _ENEMY_KINDS[
            self._rng.randint(0, 2)
        ]
        enemy_number = self._rng.randint(1, 1000)
        enemy = Entity(f"{kind_name} #{enemy_number}")

        stats = enemy.add_component(StatsComponent(self._rng))
        base = 5 + level
        stats.initialize(*(base + offset for offset in offsets))

        # Max health is 10 + CON * 5, so choose CON to reach the target health.
        desired_health = health_base + level * health_per_level
        stats.set_base_stat(StatType.CONSTITUTION, (desired_health - 10) // 5)
        stats.set_current_health(stats.max_health)

        enemy.add_component(PositionComponent()).set_position(7)
        enemy.add_component(StatusEffectsComponent())
        return enemy