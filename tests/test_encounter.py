import pytest

from delvekit.encounter import Encounter, EncounterResult, EncounterType


class _SimpleEncounter(Encounter):
    def __init__(self, encounter_type, name):
        super().__init__(encounter_type, name)
        self.running = False

    def start(self):
        self.running = True

    def update(self, delta_time):
        if self.running:
            self.complete(EncounterResult.COMPLETED)

    def is_active(self):
        return self.running and not self.completed


@pytest.mark.parametrize(
    "encounter_type, description",
    [
        (EncounterType.COMBAT, "A hostile group of enemies blocks your path."),
        (EncounterType.TREASURE, "You discover a treasure chest containing valuable items."),
        (EncounterType.EMPTY, "An empty area with nothing of interest."),
    ],
)
def test_default_description(encounter_type, description):
    encounter = _SimpleEncounter(encounter_type, "Test")
    assert encounter.description == description
    assert encounter.type is encounter_type


def test_initial_state_then_complete():
    encounter = _SimpleEncounter(EncounterType.EMPTY, "Quiet")
    assert encounter.name == "Quiet"
    assert encounter.completed is False
    assert encounter.result is EncounterResult.NONE
    Encounter.complete(encounter, EncounterResult.SKIPPED)
    assert encounter.completed is True
    assert encounter.result is EncounterResult.SKIPPED


def test_complete_records_result_once():
    encounter = _SimpleEncounter(EncounterType.COMBAT, "Fight")
    Encounter.complete(encounter, EncounterResult.VICTORY)
    Encounter.complete(encounter, EncounterResult.DEFEAT)
    assert encounter.completed is True
    assert encounter.result is EncounterResult.VICTORY


def test_lifecycle_through_subclass():
    encounter = _SimpleEncounter(EncounterType.TREASURE, "Chest")
    encounter.start()
    assert encounter.is_active() is True
    Encounter.complete(encounter, EncounterResult.COMPLETED)
    assert encounter.is_active() is False
    assert encounter.result is EncounterResult.COMPLETED


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Encounter(EncounterType.EMPTY, "Nothing")