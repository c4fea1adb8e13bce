"""In-progress onboarding answers and the step pointer.

Screens never write record fields directly. Every change goes through one of
the mutation methods below, which validate input before touching the record
and then notify subscribed listeners.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Iterable

from psychsync.core.errors import (
    InvalidEnumError,
    InvalidTextError,
    OutOfRangeError,
)
from psychsync.models.answers import (
    CHECK_IN_FREQUENCY_OPTIONS,
    ENERGY_MAX,
    ENERGY_MIN,
    MOOD_MAX,
    MOOD_MIN,
    NOTIFICATION_OPTIONS,
    SLEEP_QUALITY_OPTIONS,
    SUPPORT_TYPE_OPTIONS,
    AnswerRecord,
)

logger = logging.getLogger(__name__)

Listener = Callable[["OnboardingState"], None]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _toggle(items: list, name: str) -> None:
    """Remove ``name`` if present, otherwise append it."""
    if name in items:
        items.remove(name)
    else:
        items.append(name)


def _check_option(field: str, value: Any, options: Iterable[str]) -> None:
    if value not in options:
        raise InvalidEnumError(field, value, options)


class OnboardingState:
    """Answer record plus current step for one onboarding session."""

    def __init__(self) -> None:
        self._record = AnswerRecord()
        self._step = 0
        self._listeners: list[Listener] = []

    @property
    def record(self) -> AnswerRecord:
        return self._record

    @property
    def step(self) -> int:
        return self._step

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Args:
            listener: Called with this state after every successful mutation.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _changed(self, what: str) -> None:
        logger.debug("Onboarding state changed: %s", what)
        for listener in list(self._listeners):
            listener(self)

    # Goals

    def toggle_goal(self, name: str) -> None:
        """Select ``name`` if unselected, deselect it otherwise."""
        if not isinstance(name, str):
            raise InvalidTextError("goals", name)
        _toggle(self._record.goals, name)
        self._changed(f"goals={self._record.goals}")

    def set_other_goal_text(self, text: str) -> None:
        """Store free text for the "Other" goal. Goal selection is untouched."""
        if not isinstance(text, str):
            raise InvalidTextError("otherGoalText", text)
        self._record.other_goal_text = text
        self._changed("other_goal_text")

    # Baseline

    def set_mood(self, index: int) -> None:
        if not _is_int(index) or not MOOD_MIN <= index <= MOOD_MAX:
            raise OutOfRangeError("moodIndex", index, MOOD_MIN, MOOD_MAX)
        self._record.mood_index = index
        self._changed(f"mood_index={index}")

    def set_energy(self, level: int) -> None:
        """Set energy, clamping to the 1-5 scale."""
        if not _is_int(level):
            raise OutOfRangeError("energyLevel", level, ENERGY_MIN, ENERGY_MAX)
        clamped = max(ENERGY_MIN, min(ENERGY_MAX, level))
        self._record.energy_level = clamped
        self._changed(f"energy_level={clamped}")

    def set_sleep_quality(self, value: str) -> None:
        _check_option("sleepQuality", value, SLEEP_QUALITY_OPTIONS)
        self._record.sleep_quality = value  # type: ignore[assignment]
        self._changed(f"sleep_quality={value}")

    # Preferences

    def set_check_in_frequency(self, value: str) -> None:
        _check_option("checkInFrequency", value, CHECK_IN_FREQUENCY_OPTIONS)
        self._record.check_in_frequency = value  # type: ignore[assignment]
        self._changed(f"check_in_frequency={value}")

    def set_notifications_choice(self, value: str) -> None:
        _check_option("notificationsChoice", value, NOTIFICATION_OPTIONS)
        self._record.notifications_choice = value  # type: ignore[assignment]
        self._changed(f"notifications_choice={value}")

    def toggle_support_type(self, name: str) -> None:
        _check_option("supportTypes", name, SUPPORT_TYPE_OPTIONS)
        _toggle(self._record.support_types, name)
        self._changed(f"support_types={self._record.support_types}")

    # Lifecycle

    def reset(self) -> None:
        """Replace the record with an empty one and rewind to the first step."""
        self._record = AnswerRecord()
        self._step = 0
        self._changed("reset")

    def move_to(self, step: int) -> None:
        """Move the step pointer. Only the flow controller calls this."""
        self._step = step
        self._changed(f"step={step}")

    def mark_completed(self, completed_at: datetime) -> None:
        self._record.completed_at = completed_at
        self._changed(f"completed_at={completed_at.isoformat()}")
