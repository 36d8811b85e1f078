"""Procedural generation of dungeon floors on a room grid."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .combat_encounter import CombatEncounter
from .room import Room, RoomType
from .treasure import TreasureEncounter

logger = logging.getLogger(__name__)

# Right, down, left, up.
_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))

_MIN_ROOMS = 5

_FIXED_DESCRIPTIONS: Dict[RoomType, str] = {
    RoomType.ENTRANCE: "The entrance to the dungeon floor. A cold draft blows from deeper within.",
    RoomType.EXIT: "A staircase leading to the next floor of the dungeon awaits.",
    RoomType.BOSS: "An imposing chamber with strange markings. Something powerful lurks here.",
    RoomType.TREASURE: "A room filled with glittering gold and valuable treasures. What riches await?",
}

_NORMAL_DESCRIPTIONS: Tuple[str, ...] = (
    "A damp chamber with water dripping from the ceiling.",
    "Ancient runes cover the walls of this mysterious room.",
    "Cobwebs fill the corners of this neglected area.",
    "The remnants of a camp suggest others have passed through recently.",
    "Broken furniture and debris litter this once-inhabited room.",
    "A standard dungeon chamber with stone walls and flickering torches.",
)


@dataclass
class DungeonGenerationParams:
    """Settings for one generated floor; out-of-range values are clamped."""

    width: int = 5
    height: int = 5
    num_rooms: int = 12
    min_rooms_per_floor: int = 10
    max_rooms_per_floor: int = 20
    num_treasure_rooms: int = 2
    has_boss_room: bool = True
    difficulty: int = 1
    loop_chance: float = 0.2

    def __post_init__(self) -> None:
        self.width = max(3, self.width)
        self.height = max(3, self.height)
        self.num_rooms = max(_MIN_ROOMS, self.num_rooms)
        self.num_treasure_rooms = min(self.num_treasure_rooms, self.num_rooms // 3)
        self.difficulty = max(1, self.difficulty)
        self.loop_chance = min(1.0, max(0.0, self.loop_chance))


def _manhattan(a: Room, b: Room) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


class DungeonGenerator:
    """Builds a floor of connected rooms by a random walk over a grid."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._rooms: List[Room] = []
        self._grid: List[List[Optional[Room]]] = []
        self.entrance_room: Optional[Room] = None
        self.exit_room: Optional[Room] = None
        self.boss_room: Optional[Room] = None

    @property
    def rooms(self) -> Tuple[Room, ...]:
        return tuple(self._rooms)

    def clear(self) -> None:
        """Forget the current floor."""
        self._rooms = []
        self._grid = []
        self.entrance_room = None
        self.exit_room = None
        self.boss_room = None

    def get_room(self, room_id: int) -> Optional[Room]:
        """Return the room with this id, or None if there is none."""
        return next((room for room in self._rooms if room.id == room_id), None)

    def generate_floor(
        self, params: Optional[DungeonGenerationParams] = None
    ) -> List[Room]:
        """Generate a new floor and return its rooms in creation order."""
        if params is None:
            params = DungeonGenerationParams()
        self.clear()
        logger.info(
            "Generating dungeon floor: width=%d height=%d rooms=%d treasure=%d "
            "boss=%s difficulty=%d loop_chance=%s",
            params.width,
            params.height,
            params.num_rooms,
            params.num_treasure_rooms,
            "Yes" if params.has_boss_room else "No",
            params.difficulty,
            params.loop_chance,
        )

        width, height = params.width, params.height
        self._grid = [[None] * width for _ in range(height)]
        num_rooms = max(_MIN_ROOMS, min(params.num_rooms, width * height))

        entrance_pos = (0, height // 2)
        self.entrance_room = self._place_new(RoomType.ENTRANCE, *entrance_pos)

        exit_pos = (width - 1, height // 2)
        boss_pos = (width - 2, height // 2)

        path: List[Tuple[int, int]] = [entrance_pos]
        while len(self._rooms) < num_rooms and path:
            cx, cy = path[-1]
            directions = list(_DIRECTIONS)
            self._rng.shuffle(directions)
            for dx, dy in directions:
                nx, ny = cx + dx, cy + dy
                if not self._in_bounds(nx, ny) or self._grid[ny][nx] is not None:
                    continue
                if (nx, ny) == exit_pos:
                    room_type = RoomType.EXIT
                elif params.has_boss_room and (nx, ny) == boss_pos:
                    room_type = RoomType.BOSS
                else:
                    room_type = RoomType.NORMAL
                room = self._place_new(room_type, nx, ny)
                current = self._grid[cy][cx]
                assert current is not None
                current.add_connection(room)
                if room_type is RoomType.EXIT:
                    self.exit_room = room
                elif room_type is RoomType.BOSS:
                    self.boss_room = room
                path.append((nx, ny))
                break
            else:
                path.pop()

        if self.exit_room is None:
            self._place_fallback_exit()
        if params.has_boss_room and self.boss_room is None and self.exit_room is not None:
            self._place_fallback_boss()

        self._create_random_loops(params.loop_chance)
        self._create_treasure_rooms(params.num_treasure_rooms)
        self._assign_encounters(params.difficulty)
        self._validate()

        logger.info("Dungeon generation complete! Generated %d rooms.", len(self._rooms))
        return list(self._rooms)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < len(self._grid) and 0 <= x < len(self._grid[0])

    def _grid_rooms(self) -> Iterator[Room]:
        """Rooms in row-major grid order."""
        for row in self._grid:
            for room in row:
                if room is not None:
                    yield room

    def _neighbours(self, room: Room) -> Iterator[Room]:
        for dx, dy in _DIRECTIONS:
            nx, ny = room.x + dx, room.y + dy
            if self._in_bounds(nx, ny):
                neighbour = self._grid[ny][nx]
                if neighbour is not None:
                    yield neighbour

    def _describe(self, room_type: RoomType) -> str:
        if room_type is RoomType.NORMAL:
            return _NORMAL_DESCRIPTIONS[self._rng.randint(0, len(_NORMAL_DESCRIPTIONS) - 1)]
        return _FIXED_DESCRIPTIONS[room_type]

    def _place_new(self, room_type: RoomType, x: int, y: int) -> Room:
        room = Room(len(self._rooms), room_type)
        room.set_position(x, y)
        room.description = self._describe(room_type)
        self._grid[y][x] = room
        self._rooms.append(room)
        return room

    def _retype(self, room: Room, room_type: RoomType) -> None:
        room.type = room_type
        room.description = self._describe(room_type)

    def _place_fallback_exit(self) -> None:
        """Turn the normal room farthest from the entrance into the exit."""
        assert self.entrance_room is not None
        farthest: Optional[Room] = None
        best = 0
        for room in self._grid_rooms():
            distance = _manhattan(room, self.entrance_room)
            if distance > best and room.type is RoomType.NORMAL:
                best = distance
                farthest = room
        if farthest is not None:
            self._retype(farthest, RoomType.EXIT)
            self.exit_room = farthest

    def _place_fallback_boss(self) -> None:
        """Turn a normal room next to the exit into the boss room."""
        assert self.exit_room is not None
        for neighbour in self._neighbours(self.exit_room):
            if neighbour.type is RoomType.NORMAL:
                self._retype(neighbour, RoomType.BOSS)
                self.boss_room = neighbour
                return

    def _create_random_loops(self, loop_chance: float) -> None:
        if loop_chance <= 0.0:
            return
        for room in list(self._grid_rooms()):
            if self._rng.random() < loop_chance:
                for neighbour in self._neighbours(room):
                    if not room.is_connected_to(neighbour.id):
                        room.add_connection(neighbour)

    def _create_treasure_rooms(self, wanted: int) -> None:
        count = min(wanted, len(self._rooms) - 3)
        normal_rooms = [room for room in self._rooms if room.type is RoomType.NORMAL]
        self._rng.shuffle(normal_rooms)
        for room in normal_rooms[: max(0, count)]:
            self._retype(room, RoomType.TREASURE)

    def _assign_encounters(self, difficulty: int) -> None:
        assert self.entrance_room is not None
        span = len(self._grid) + len(self._grid[0])
        for room in self._rooms:
            if room.type is RoomType.NORMAL:
                distance = _manhattan(room, self.entrance_room)
                level = min(1 + (distance * difficulty) // span, difficulty + 2)
                room.encounter = CombatEncounter(
                    f"Combat Encounter {room.id}", level, rng=self._rng
                )
            elif room.type is RoomType.TREASURE:
                room.encounter = TreasureEncounter(
                    f"Treasure Chest {room.id}", 1 + difficulty // 2, rng=self._rng
                )
            elif room.type is RoomType.BOSS:
                room.encounter = CombatEncounter(
                    f"Boss Encounter {room.id}", difficulty + 3, rng=self._rng
                )

    def _validate(self) -> None:
        """Make sure the exit can be reached from the entrance."""
        if self.entrance_room is None:
            logger.error("Dungeon has no entrance room!")
        if self.exit_room is None:
            logger.error("Dungeon has no exit room!")
        if self.entrance_room is None or self.exit_room is None:
            return

        visited = {self.entrance_room.id}
        queue = deque([self.entrance_room])
        while queue:
            current = queue.popleft()
            for neighbour in current.connections:
                if neighbour.id not in visited:
                    visited.add(neighbour.id)
                    queue.append(neighbour)

        if self.exit_room.id not in visited:
            logger.error("Exit is not reachable from entrance!")
            reachable = [room for room in self._rooms if room.id in visited]
            if reachable:
                closest = min(reachable, key=lambda room: _manhattan(room, self.exit_room))
                logger.info(
                    "Fixing dungeon: Connecting room %d to exit (room %d)",
                    closest.id,
                    self.exit_room.id,
                )
                closest.add_connection(self.exit_room)

        for room in self._rooms:
            if room.id not in visited:
                logger.warning("Room %d is not reachable from entrance.", room.id)