import pytest

from delvekit.entity import Entity
from delvekit.stats import StatsComponent, StatType
from delvekit.status_effects import (
    PoisonEffect,
    StatBuffEffect,
    StatusEffectsComponent,
    StatusEffectType,
    StunEffect,
    create_status_effect,
)


def _make_entity(constitution=4, strength=5):
    entity = Entity("Hero")
    stats = entity.add_component(StatsComponent())
    # Defense 0 means no block chance, so damage always lands.
    stats.initialize(strength, 0, 0, 0, constitution, 0, 0)
    effects = entity.add_component(StatusEffectsComponent())
    return entity, stats, effects


def test_poison_deals_damage_on_turn_start():
    entity, stats, _ = _make_entity()
    before = stats.current_health
    PoisonEffect(2, 3).on_turn_start(entity)
    assert stats.current_health == before - 3


def test_poison_never_kills():
    entity, stats, _ = _make_entity()
    stats.set_current_health(1)
    PoisonEffect(2, 5).on_turn_start(entity)
    assert stats.current_health == 1


def test_poison_leaves_one_hit_point():
    entity, stats, _ = _make_entity()
    stats.set_current_health(3)
    PoisonEffect(2, 10).on_turn_start(entity)
    assert stats.current_health == 1


def test_poison_description():
    assert PoisonEffect(2, 3).description == "Deals 3 damage per turn."


def test_duration_ticks_down_and_expires():
    effect = PoisonEffect(2, 1)
    effect.on_turn_end(None)
    assert effect.duration == 1
    assert not effect.has_expired()
    effect.on_turn_end(None)
    assert effect.has_expired()
    effect.on_turn_end(None)
    assert effect.duration == 0


def test_stun_blocks_turn():
    effect = StunEffect(2)
    assert effect.on_new_turn(None) is False
    assert effect.type is StatusEffectType.STUN
    assert effect.description == "Cannot take actions for 2 turns."


def test_component_process_new_turn():
    _, _, effects = _make_entity()
    assert effects.process_new_turn() is True
    effects.add_effect(PoisonEffect(2, 1))
    assert effects.process_new_turn() is True
    effects.add_effect(StunEffect(1))
    assert effects.process_new_turn() is False


def test_buff_naming_and_type():
    buff = StatBuffEffect(3, StatType.STRENGTH, 4)
    assert buff.name == "+4 Strength"
    assert buff.type is StatusEffectType.BUFF
    debuff = StatBuffEffect(3, StatType.DEFENSE, -2)
    assert debuff.name == "-2 Defense"
    assert debuff.type is StatusEffectType.DEBUFF


def test_buff_applies_modifier_once():
    entity, stats, _ = _make_entity(strength=5)
    buff = StatBuffEffect(3, StatType.STRENGTH, 4)
    buff.on_turn_start(entity)
    buff.on_turn_start(entity)
    assert stats.get_current_stat(StatType.STRENGTH) == 5 + 4


def test_add_effect_replaces_same_name():
    _, _, effects = _make_entity()
    effects.add_effect(PoisonEffect(2, 1))
    effects.add_effect(PoisonEffect(5, 1))
    assert len(effects.effects) == 1
    assert effects.effects[0].duration == 5


def test_add_none_is_ignored():
    _, _, effects = _make_entity()
    effects.add_effect(None)
    assert effects.effects == ()


def test_remove_and_clear():
    _, _, effects = _make_entity()
    effects.add_effect(PoisonEffect(2, 1))
    effects.add_effect(StunEffect(2))
    assert effects.has_effect(StatusEffectType.STUN)
    assert effects.has_effect_named("Poison")
    effects.remove_effect("Poison")
    assert not effects.has_effect_named("Poison")
    assert effects.has_effect_named("Stun")
    effects.clear_effects()
    assert effects.effects == ()


def test_turn_end_removes_expired():
    _, _, effects = _make_entity()
    effects.add_effect(StunEffect(1))
    effects.add_effect(PoisonEffect(3, 1))
    effects.process_turn_end()
    assert [e.name for e in effects.effects] == ["Poison"]


def test_process_turn_start_uses_owner():
    _, stats, effects = _make_entity()
    before = stats.current_health
    effects.add_effect(PoisonEffect(2, 2))
    effects.process_turn_start()
    assert stats.current_health == before - 2


def test_factory_builds_matching_effects():
    assert isinstance(create_status_effect(StatusEffectType.POISON, 2, 3), PoisonEffect)
    assert isinstance(create_status_effect(StatusEffectType.STUN, 2), StunEffect)
    buff = create_status_effect(StatusEffectType.BUFF, 2, -3)
    assert buff.modifier_value == 3
    debuff = create_status_effect(StatusEffectType.DEBUFF, 2, 3)
    assert debuff.modifier_value == -3
    assert debuff.stat is StatType.STRENGTH


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError):
        create_status_effect(StatusEffectType.BURNING, 2, 1)