"""Unit tests for the AnswerRecord model."""

import pytest
from pydantic import ValidationError

from psychsync.models import GOAL_OPTIONS, AnswerRecord


def test_new_record_has_documented_defaults() -> None:
    record = AnswerRecord()
    assert record.goals == []
    assert record.other_goal_text is None
    assert record.mood_index is None
    assert record.energy_level == 3
    assert record.sleep_quality is None
    assert record.check_in_frequency is None
    assert record.notifications_choice is None
    assert record.support_types == []
    assert record.completed_at is None
    assert record.is_complete is False


def test_record_accepts_camel_case_and_snake_case_names() -> None:
    """Wire names and attribute names should both populate the model."""
    by_alias = AnswerRecord.model_validate({"moodIndex": 1, "energyLevel": 4})
    by_name = AnswerRecord(mood_index=1, energy_level=4)
    assert by_alias == by_name


def test_completed_at_uses_completed_date_wire_name() -> None:
    record = AnswerRecord.model_validate({"completedDate": "2025-08-28T09:15:30Z"})
    assert record.completed_at is not None
    assert record.is_complete is True
    assert "completedDate" in record.model_dump(by_alias=True)


@pytest.mark.parametrize(
    "payload",
    [
        {"moodIndex": 5},
        {"energyLevel": 0},
        {"energyLevel": 6},
        {"sleepQuality": "Great"},
        {"checkInFrequency": "Hourly"},
        {"notificationsChoice": "Never"},
        {"supportTypes": ["Breathing"]},
    ],
)
def test_record_rejects_out_of_domain_values(payload: dict) -> None:
    with pytest.raises(ValidationError):
        AnswerRecord.model_validate(payload)


def test_goal_options_end_with_other() -> None:
    assert GOAL_OPTIONS[0] == "Reduce stress"
    assert GOAL_OPTIONS[-1] == "Other"
