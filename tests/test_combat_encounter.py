import random

import pytest

from delvekit.combat_encounter import CombatEncounter, CombatResult
from delvekit.encounter import EncounterResult, EncounterType
from delvekit.entity import Entity
from delvekit.position import PositionComponent
from delvekit.stats import StatsComponent
from delvekit.status_effects import StatusEffectsComponent


class FakeCombat:
    def __init__(self, result=CombatResult.NONE):
        self.result = result
        self.started = []

    def start_combat(self, player_team, enemy_team):
        self.started.append((list(player_team), list(enemy_team)))

    def check_combat_result(self):
        return self.result


def make(difficulty=2, result=CombatResult.NONE, seed=7):
    combat = FakeCombat(result)
    encounter = CombatEncounter("fight", difficulty, combat, rng=random.Random(seed))
    return encounter, combat


@pytest.mark.parametrize(
    "difficulty, text",
    [
        (1, "A small group of weak enemies blocks your path."),
        (3, "Several enemies stand in your way. They look dangerous."),
        (5, "A large group of strong enemies prepares to attack!"),
        (8, "An extremely powerful enemy force threatens your very existence!"),
    ],
)
def test_description_depends_on_difficulty(difficulty, text):
    assert CombatEncounter("fight", difficulty).description == text


def test_difficulty_is_at_least_one():
    encounter = CombatEncounter("fight", 0)
    assert encounter.difficulty == 1
    assert encounter.type is EncounterType.COMBAT


def test_start_without_combat_system_raises():
    with pytest.raises(RuntimeError):
        CombatEncounter("fight", 1).start()


def test_start_generates_enemies_and_starts_combat():
    encounter, combat = make(difficulty=4)
    player = Entity("Player")
    encounter.set_player_team([player])
    encounter.start()
    assert len(encounter.enemies) == 3
    assert encounter.is_active() is True
    assert combat.started == [([player], list(encounter.enemies))]


def test_start_uses_added_enemies():
    encounter, combat = make()
    foe = Entity("Foe")
    encounter.add_enemy(foe)
    encounter.add_enemy(None)
    encounter.start()
    assert encounter.enemies == (foe,)
    assert combat.started[0][1] == [foe]


@pytest.mark.parametrize("level", [1, 2, 5, 9])
def test_generated_enemies_are_complete(level):
    encounter, _ = make(difficulty=level, seed=level)
    encounter.generate_enemies(6)
    assert len(encounter.enemies) == 6
    for enemy in encounter.enemies:
        assert enemy.name.startswith(("Quick Scout #", "Brute Warrior #", "Dark Mage #"))
        stats = enemy.get_component(StatsComponent)
        assert stats.current_health == stats.max_health
        assert stats.max_health > 0
        assert enemy.get_component(PositionComponent).position == 7
        assert enemy.has_component(StatusEffectsComponent)


def test_generate_enemies_replaces_existing():
    encounter, _ = make()
    encounter.add_enemy(Entity("Old"))
    encounter.generate_enemies(2)
    assert all(enemy.name != "Old" for enemy in encounter.enemies)
    assert len(encounter.enemies) == 2


@pytest.mark.parametrize(
    "combat_result, expected",
    [
        (CombatResult.PLAYER_VICTORY, EncounterResult.VICTORY),
        (CombatResult.PLAYER_DEFEAT, EncounterResult.DEFEAT),
        (CombatResult.ESCAPE, EncounterResult.SKIPPED),
    ],
)
def test_update_maps_combat_result(combat_result, expected):
    encounter, combat = make()
    encounter.start()
    combat.result = combat_result
    encounter.update(0.1)
    assert encounter.completed is True
    assert encounter.result is expected
    assert encounter.is_active() is False


def test_update_without_result_keeps_running():
    encounter, _ = make()
    encounter.start()
    encounter.update(0.5)
    assert encounter.completed is False
    assert encounter.is_active() is True
    assert encounter.time_elapsed == pytest.approx(0.5)


def test_start_after_completion_does_nothing():
    encounter, combat = make()
    encounter.complete(EncounterResult.SKIPPED)
    encounter.start()
    assert combat.started == []
    assert encounter.is_active() is False