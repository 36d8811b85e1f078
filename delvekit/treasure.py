"""Treasure encounters and the items they hold."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .encounter import Encounter, EncounterResult, EncounterType

logger = logging.getLogger(__name__)

_OPEN_DELAY = 5.0


@dataclass(frozen=True)
class TreasureItem:
    """One piece of loot in a treasure encounter."""

    id: str
    name: str
    description: str
    value: int


def _describe_quality(quality: int) -> str:
    if quality <= 1:
        return "A small chest with some basic loot."
    if quality <= 3:
        return "A medium-sized chest that might contain valuable items."
    if quality <= 5:
        return "A large ornate chest that looks very promising!"
    return "An ancient treasure hoard of legendary quality!"


class TreasureEncounter(Encounter):
    """A chest whose contents scale with its quality."""

    def __init__(
        self, name: str, quality: int, rng: Optional[random.Random] = None
    ) -> None:
        super().__init__(EncounterType.TREASURE, name)
        self.quality = max(1, quality)
        self.description = _describe_quality(quality)
        self._rng = rng if rng is not None else random.Random()
        self._items: List[TreasureItem] = []
        self._active = False
        self.time_elapsed = 0.0

    @property
    def items(self) -> Tuple[TreasureItem, ...]:
        return tuple(self._items)

    def start(self) -> None:
        """Begin the encounter, generating loot if the chest is empty."""
        if self.completed or self._active:
            return
        logger.debug("Starting treasure encounter: %s", self.name)
        if not self._items:
            self.generate_treasure()
        self._active = True
        self.time_elapsed = 0.0

    def update(self, delta_time: float) -> None:
        """Advance time; the chest is taken once five seconds have passed."""
        if self.completed or not self._active:
            return
        self.time_elapsed += delta_time
        if self.time_elapsed > _OPEN_DELAY:
            self.complete(EncounterResult.COMPLETED)

    def is_active(self) -> bool:
        return self._active and not self.completed

    def complete(self, result: EncounterResult) -> None:
        super().complete(result)
        self._active = False
        logger.debug("Treasure encounter completed! Items obtained:")
        for item in self._items:
            logger.debug("- %s (%d gold)", item.name, item.value)

    def add_treasure_item(self, item: TreasureItem) -> None:
        self._items.append(item)

    def generate_treasure(self) -> None:
        """Replace the contents with ``1 + quality // 2`` random items."""
        count = 1 + self.quality // 2
        self._items = [self._random_treasure(self.quality) for _ in range(count)]
        logger.debug(
            "Generated %d treasure items for encounter: %s", len(self._items), self.name
        )

    def _random_treasure(self, level: int) -> TreasureItem:
        kind = self._rng.randint(0, 3)
        item_number = self._rng.randint(1, 1000)
        base_value = 10 * level

        if kind == 0:
            item_id = f"gold_{item_number}"
            name = "Gold Coins"
            description = "A pile of shiny gold coins."
            base_value = 5 * level + level * level
        elif kind == 1:
            item_id = f"weapon_{item_number}"
            if level <= 2:
                name, description = "Common Sword", "A basic but functional sword."
            elif level <= 4:
                name, description = "Quality Blade", "A well-crafted blade of good steel."
                base_value *= 2
            else:
                name, description = "Legendary Weapon", "A weapon of extraordinary power."
                base_value *= 5
        elif kind == 2:
            item_id = f"armor_{item_number}"
            if level <= 2:
                name, description = "Leather Armor", "Basic protective gear made of leather."
            elif level <= 4:
                name, description = "Chain Mail", "Metal rings linked together for protection."
                base_value *= 2
            else:
                name, description = "Enchanted Plate", "Magical armor that seems to move with you."
                base_value *= 5
        else:
            item_id = f"potion_{item_number}"
            if level <= 2:
                name, description = "Minor Healing Potion", "Restores a small amount of health."
            elif level <= 4:
                name, description = "Healing Potion", "Restores a significant amount of health."
                base_value = int(base_value * 1.5)
            else:
                name = "Elixir of Life"
                description = (
                    "Completely restores health and grants temporary invulnerability."
                )
                base_value *= 3

        final_value = max(1, base_value + self._rng.randint(-level, level * 2))
        return TreasureItem(item_id, name, description, final_value)