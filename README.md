# delvekit

delvekit provides building blocks for a turn-based roguelike:

- an entity–component model
- character stats and battlefield positions
- status effects
- room encounters
- a procedural dungeon floor generator

It uses only the standard library. Progress messages go to the standard
`logging` module under the `delvekit.*` loggers.

## Installation

```
pip install delvekit
```

## Entities and components

An `Entity` (in `delvekit.entity`) is a named container with an `active` flag
and at most one component of each type. If you add a component whose type is
already attached, the existing one is returned. `get_component` raises
`KeyError` when the entity has no component of the requested type.
`remove_component` detaches a component. `start`, `update(delta_time)` and
`render` pass the call on to every component, and do nothing while the entity
is inactive.

```python
from delvekit.entity import Entity
from delvekit.stats import StatsComponent, StatType
from delvekit.position import PositionComponent

hero = Entity("Hero")
stats = hero.add_component(StatsComponent())
stats.initialize(15, 10, 12, 10, 20, 8, 5)
hero.add_component(PositionComponent()).set_position(3)

print(stats.max_health)                           # 10 + CON * 5 = 110
print(stats.get_current_stat(StatType.STRENGTH))  # 15
print(hero.has_component(PositionComponent))      # True
```

`delvekit.component` defines the base `Component` class. It also defines
`TransformComponent`, which holds position, rotation, scale and velocity. Its
`update` moves the position by velocity × `delta_time`.

### Stats

`StatsComponent` (in `delvekit.stats`) holds seven base stats, listed in the
`StatType` enum: strength, intellect, speed, dexterity, constitution, defense
and luck. A stat's current value is its base value plus any modifiers.

- `add_modifier(stat, value, duration=-1)` adds a modifier. A negative
  duration makes it permanent.
- `update_modifiers()` counts timed modifiers down by one turn and drops the
  ones that have expired.
- Maximum health is `10 + CON * 5`. When the maximum changes, current health is
  rescaled in proportion.
- `calculate_damage`, `dodge_chance`, `block_chance` and `critical_chance` give
  the derived combat figures.
- `take_damage` first rolls against the block chance. It returns `True` if the
  damage leaves the entity dead.
- `heal` and `set_current_health` never raise health above the maximum.
- You can pass a `random.Random` to the constructor to make the block rolls
  reproducible.

### Battlefield position

`PositionComponent` (in `delvekit.position`) places an entity on a line of
tiles, eight by default (positions 0–7).

- `move_forward` and `move_backward` return `False` and refuse any move that
  would leave the field.
- `set_position` clamps an out-of-range value to the nearest edge.
- `set_battlefield_size` resizes the field to at least two tiles.
- `distance_to`, `is_within_range` and `direction_to` compare two positions.

### Status effects

```python
from delvekit.status_effects import (
    StatusEffectsComponent, StatusEffectType, create_status_effect,
)

effects = hero.add_component(StatusEffectsComponent())
effects.add_effect(create_status_effect(StatusEffectType.POISON, 3, 4))
effects.process_turn_start()   # poison deals damage but never takes the last hit point
effects.process_turn_end()     # durations tick down; expired effects drop off
print(effects.process_new_turn())  # False if any effect (such as a stun) prevents acting
```

The concrete effects are:

- `PoisonEffect`
- `StunEffect`
- `StatBuffEffect`, which adds a stat modifier the first time its turn starts

An effect added under a name that is already active replaces the old one.

`create_status_effect` builds poison, stun, buff and debuff effects. Buffs and
debuffs it creates act on strength. It raises `ValueError` for other effect
types.

## Rooms

`Room` (in `delvekit.room`) has:

- an id and a `RoomType`: normal, treasure, boss, entrance or exit
- a description and a grid position
- visited and cleared flags
- an optional encounter
- string properties

`add_connection` and `remove_connection` always work in both directions.

## Encounters

`delvekit.encounter` defines the abstract `Encounter`, along with the
`EncounterType` and `EncounterResult` enums. `complete(result)` records the
first result only.

`TreasureEncounter` (in `delvekit.treasure`) behaves as follows:

- On `start`, it fills itself with `1 + quality // 2` random `TreasureItem`s,
  unless items were already added.
- It completes itself once `update` has accumulated more than five seconds.

`CombatEncounter` (in `delvekit.combat_encounter`) behaves as follows:

- On `start`, it generates `1 + difficulty // 2` random enemies if none were
  added. Each enemy is an `Entity` with stats, a position on tile 7 and a
  status-effects component.
- It hands both teams to a combat system.
- On each `update`, it maps the system's `CombatResult` to an
  `EncounterResult`.

The combat system is any object with `start_combat(player_team, enemy_team)`
and `check_combat_result()` methods, as described by the `CombatSystem`
protocol. It is passed as `combat_system=`. `start` raises `RuntimeError` when
no combat system is given.

## Dungeon floors

```python
from delvekit.dungeon import DungeonGenerator, DungeonGenerationParams

generator = DungeonGenerator()
rooms = generator.generate_floor(DungeonGenerationParams(width=6, height=5, num_rooms=14))
for room in rooms:
    print(room.id, room.type.name, (room.x, room.y), room.description)
```

`DungeonGenerationParams` clamps its values when it is created:

- the grid is at least 3×3
- there are at least five rooms
- there are no more treasure rooms than a third of the rooms
- difficulty is at least 1
- the loop chance lies between 0 and 1

`generate_floor` works in these steps:

1. It takes a random walk across the grid from an entrance on the left edge.
2. It places an exit, and a boss room if one is requested. If the walk never
   reached their cells, it converts existing normal rooms instead.
3. It adds extra connections between neighbouring rooms to form loops.
4. It turns some normal rooms into treasure rooms.
5. It gives normal, treasure and boss rooms encounters scaled to the
   difficulty.
6. It checks that the exit can be reached from the entrance, and adds a link
   if it cannot.

After generation, the generator offers:

- `entrance_room`, `exit_room` and `boss_room`
- `rooms`
- `get_room(room_id)`, which returns `None` for an unknown id

Pass a seeded `random.Random` to `DungeonGenerator(rng=...)` for reproducible
floors.

## What delvekit does not do

delvekit is a library of game-state objects, not a game. It does not include:

- a window, renderer, input handling or game loop
- a battlefield or turn manager
- a combat system that resolves attacks
- actions or item data loaded from files
- a saved-game format

A `CombatEncounter` can only be started with a combat system that you supply.