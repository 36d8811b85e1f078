"""Base encounter types found in dungeon rooms."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

logger = logging.getLogger(__name__)


class EncounterType(Enum):
    COMBAT = 0
    TREASURE = 1
    EMPTY = 2


class EncounterResult(Enum):
    NONE = 0
    VICTORY = 1
    DEFEAT = 2
    COMPLETED = 3
    SKIPPED = 4


_DEFAULT_DESCRIPTIONS = {
    EncounterType.COMBAT: "A hostile group of enemies blocks your path.",
    EncounterType.TREASURE: "You discover a treasure chest containing valuable items.",
    EncounterType.EMPTY: "An empty area with nothing of interest.",
}


class Encounter(ABC):
    """Something that happens in a room; completed once, with a result."""

    def __init__(self, encounter_type: EncounterType, name: str) -> None:
        self.type = encounter_type
        self.name = name
        self.description = _DEFAULT_DESCRIPTIONS.get(
            encounter_type, "An unknown encounter."
        )
        self.completed = False
        self.result = EncounterResult.NONE
        logger.debug("Created encounter: %s of type %s", name, encounter_type.value)

    @abstractmethod
    def start(self) -> None:
        """Begin the encounter."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the encounter by ``delta_time`` seconds."""

    @abstractmethod
    def is_active(self) -> bool:
        """Return whether the encounter is in progress."""

    def complete(self, result: EncounterResult) -> None:
        """Record the result; later calls have no effect."""
        if self.completed:
            return
        self.completed = True
        self.result = result
        logger.debug("Encounter %s completed with result: %s", self.name, result.value)