"""Answer record collected by the onboarding wizard."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SleepQuality = Literal["Poor", "Fair", "Good"]
CheckInFrequency = Literal["Daily", "A few times a week", "Just when I feel like it"]
NotificationsChoice = Literal["Remind", "Decide later"]
SupportType = Literal[
    "Quick calming tools", "Journaling & reflection", "Data insights & patterns"
]

# Option lists in display order (first entry is the default where one applies)
GOAL_OPTIONS: tuple[str, ...] = (
    "Reduce stress",
    "Understand mood & body patterns",
    "Build healthier habits",
    "Track symptoms",
    "Other",
)
OTHER_GOAL = "Other"
SLEEP_QUALITY_OPTIONS: tuple[SleepQuality, ...] = ("Poor", "Fair", "Good")
CHECK_IN_FREQUENCY_OPTIONS: tuple[CheckInFrequency, ...] = (
    "Daily",
    "A few times a week",
    "Just when I feel like it",
)
NOTIFICATION_OPTIONS: tuple[NotificationsChoice, ...] = ("Remind", "Decide later")
SUPPORT_TYPE_OPTIONS: tuple[SupportType, ...] = (
    "Quick calming tools",
    "Journaling & reflection",
    "Data insights & patterns",
)

NOTIFICATION_LABELS: dict[str, str] = {
    "Remind": "Yes, send me reminders",
    "Decide later": "I'll decide later",
}

# Mood compass, low -> high
MOOD_SCALE: tuple[str, ...] = ("😔", "😕", "😐", "🙂", "😄")
MOOD_MIN = 0
MOOD_MAX = len(MOOD_SCALE) - 1
ENERGY_MIN = 1
ENERGY_MAX = 5
DEFAULT_ENERGY = 3


class AnswerRecord(BaseModel):
    """Answers for one onboarding session.

    Attribute names are snake_case; the JSON form uses camelCase keys,
    with ``completed_at`` exported as ``completedDate``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Goals screen
    goals: list[str] = Field(default_factory=list)
    other_goal_text: Optional[str] = None

    # Baseline screen
    mood_index: Optional[int] = Field(None, ge=MOOD_MIN, le=MOOD_MAX)
    energy_level: int = Field(DEFAULT_ENERGY, ge=ENERGY_MIN, le=ENERGY_MAX)
    sleep_quality: Optional[SleepQuality] = None

    # Preferences screen
    check_in_frequency: Optional[CheckInFrequency] = None
    notifications_choice: Optional[NotificationsChoice] = None
    support_types: list[SupportType] = Field(default_factory=list)

    # Metadata
    completed_at: Optional[datetime] = Field(None, alias="completedDate")

    @property
    def is_complete(self) -> bool:
        """True once the flow has been finalized."""
        return self.completed_at is not None
