"""Rooms of a dungeon floor and the links between them."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class RoomType(Enum):
    NORMAL = 0
    TREASURE = 1
    BOSS = 2
    ENTRANCE = 3
    EXIT = 4


_DEFAULT_DESCRIPTIONS = {
    RoomType.NORMAL: "A standard dungeon room with stone walls and dim lighting.",
    RoomType.TREASURE: "A room filled with glittering treasures and valuable items.",
    RoomType.BOSS: "A large chamber with ominous decorations, perfect for a powerful foe.",
    RoomType.ENTRANCE: "The entrance to this floor of the dungeon.",
    RoomType.EXIT: "A room with stairs leading to the next level of the dungeon.",
}


class Room:
    """A single room with a type, a grid position and two-way connections."""

    def __init__(self, room_id: int, room_type: RoomType) -> None:
        self.id = room_id
        self.type = room_type
        self.description = _DEFAULT_DESCRIPTIONS.get(
            room_type, "An unremarkable room in the dungeon."
        )
        self.visited = False
        self.cleared = False
        self.x = 0
        self.y = 0
        self.encounter: Optional[Any] = None
        self._connections: List[Room] = []
        self._properties: Dict[str, str] = {}
        logger.debug("Created room %d of type %d", room_id, room_type.value)

    @property
    def connections(self) -> Tuple["Room", ...]:
        return tuple(self._connections)

    def add_connection(self, room: Optional["Room"]) -> None:
        """Connect this room and ``room`` in both directions."""
        if room is None or self.is_connected_to(room.id):
            return
        self._connections.append(room)
        if not room.is_connected_to(self.id):
            room.add_connection(self)
        logger.debug("Connected room %d to room %d", self.id, room.id)

    def remove_connection(self, room_id: int) -> None:
        """Remove the connection to ``room_id`` in both directions."""
        for index, room in enumerate(self._connections):
            if room.id == room_id:
                del self._connections[index]
                if room.is_connected_to(self.id):
                    room.remove_connection(self.id)
                logger.debug(
                    "Removed connection between room %d and room %d", self.id, room_id
                )
                return

    def is_connected_to(self, room_id: int) -> bool:
        return any(room.id == room_id for room in self._connections)

    def visit(self) -> None:
        if not self.visited:
            self.visited = True
            logger.debug("Room %d has been visited", self.id)

    def clear(self) -> None:
        if not self.cleared:
            self.cleared = True
            logger.debug("Room %d has been cleared", self.id)

    def set_property(self, key: str, value: str) -> None:
        self._properties[key] = value

    def get_property(self, key: str) -> str:
        """Return the property value, or an empty string if it is not set."""
        return self._properties.get(key, "")

    def has_property(self, key: str) -> bool:
        return key in self._properties

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y