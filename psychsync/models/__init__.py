"""Data models for onboarding answers."""

from .answers import (
    CHECK_IN_FREQUENCY_OPTIONS,
    GOAL_OPTIONS,
    MOOD_SCALE,
    NOTIFICATION_LABELS,
    NOTIFICATION_OPTIONS,
    OTHER_GOAL,
    SLEEP_QUALITY_OPTIONS,
    SUPPORT_TYPE_OPTIONS,
    AnswerRecord,
    CheckInFrequency,
    NotificationsChoice,
    SleepQuality,
    SupportType,
)

__all__ = [
    "AnswerRecord",
    "CheckInFrequency",
    "NotificationsChoice",
    "SleepQuality",
    "SupportType",
    "CHECK_IN_FREQUENCY_OPTIONS",
    "GOAL_OPTIONS",
    "MOOD_SCALE",
    "NOTIFICATION_LABELS",
    "NOTIFICATION_OPTIONS",
    "OTHER_GOAL",
    "SLEEP_QUALITY_OPTIONS",
    "SUPPORT_TYPE_OPTIONS",
]
