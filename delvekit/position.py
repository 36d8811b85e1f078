"""Position on a one-dimensional battlefield."""

from __future__ import annotations

import logging

from .component import Component

logger = logging.getLogger(__name__)


class PositionComponent(Component):
    """Tile index of an entity on a battlefield of fixed size (8 by default)."""

    def __init__(self) -> None:
        super().__init__()
        self._position = 0
        self._max_position = 7

    @property
    def position(self) -> int:
        return self._position

    @property
    def max_position(self) -> int:
        return self._max_position

    def _is_valid(self, pos: int) -> bool:
        return 0 <= pos <= self._max_position

    def set_position(self, new_position: int) -> None:
        """Set the position, clamping it into range if it is out of bounds."""
        if self._is_valid(new_position):
            self._position = new_position
        else:
            logger.warning(
                "Attempted to set invalid position %d. Valid range is 0-%d",
                new_position,
                self._max_position,
            )
            self._position = min(max(new_position, 0), self._max_position)

    def move_forward(self, steps: int = 1) -> bool:
        """Move towards higher positions; return False if the move is out of range."""
        target = self._position + steps
        if self.can_move_to(target):
            self._position = target
            return True
        return False

    def move_backward(self, steps: int = 1) -> bool:
        return self.move_forward(-steps)

    def is_at_left_edge(self) -> bool:
        return self._position <= 0

    def is_at_right_edge(self) -> bool:
        return self._position >= self._max_position

    def can_move_to(self, target: int) -> bool:
        return self._is_valid(target)

    def distance_to(self, other: "PositionComponent") -> int:
        return abs(self._position - other.position)

    def is_within_range(self, other: "PositionComponent", distance: int) -> bool:
        return self.distance_to(other) <= distance

    def direction_to(self, other: "PositionComponent") -> int:
        """1 if the other is forward, -1 if backward, 0 if on the same tile."""
        if self._position < other.position:
            return 1
        if self._position > other.position:
            return -1
        return 0

    def set_battlefield_size(self, size: int) -> None:
        """Resize the battlefield (minimum 2 tiles), pulling the position in if needed."""
        if size < 2:
            logger.warning("Minimum battlefield size is 2. Using 2 instead of %d", size)
            size = 2
        self._max_position = size - 1
        if self._position > self._max_position:
            logger.warning(
                "Current position %d is out of bounds after resize. Adjusting to %d",
                self._position,
                self._max_position,
            )
            self._position = self._max_position