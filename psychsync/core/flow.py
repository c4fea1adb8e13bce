"""Onboarding flow: step sequencing, default filling, and session phases.

Steps run Welcome -> Goals -> Baseline -> Preferences -> Gentle Start.
Leaving a step with ``advance()`` first fills any answer the user skipped, so
the flow never blocks on an empty selection. ``finalize()`` from the last
step timestamps the record and shows the results; ``dismiss_results()`` then
enters the main app and clears the persisted onboarding flag.
"""

import logging
from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Any, Callable, Iterable, Optional

from psychsync.core.errors import InvalidTransitionError
from psychsync.core.serializer import serialize
from psychsync.core.state import OnboardingState
from psychsync.models.answers import (
    CHECK_IN_FREQUENCY_OPTIONS,
    GOAL_OPTIONS,
    NOTIFICATION_OPTIONS,
    AnswerRecord,
)
from psychsync.storage.flags import ONBOARDING_FLAG, FlagStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEFAULT_SLEEP_QUALITY = "Fair"


class Step(IntEnum):
    """Onboarding screens in order."""

    WELCOME = 0
    GOALS = 1
    BASELINE = 2
    PREFERENCES = 3
    GENTLE_START = 4


LAST_STEP = Step.GENTLE_START


class SessionPhase(Enum):
    """Which part of the app the session is showing."""

    ONBOARDING = "onboarding"
    RESULTS_DISPLAY = "results_display"
    MAIN = "main"


# Values written when a step is left with the field still unset
STEP_DEFAULTS: dict[Step, dict[str, object]] = {
    Step.GOALS: {"goals": (GOAL_OPTIONS[0],)},
    Step.BASELINE: {"sleep_quality": DEFAULT_SLEEP_QUALITY},
    Step.PREFERENCES: {
        "check_in_frequency": CHECK_IN_FREQUENCY_OPTIONS[0],
        "notifications_choice": NOTIFICATION_OPTIONS[0],
    },
}


def defaults_for(step: int) -> dict[str, object]:
    """Return the fields ``advance()`` fills when leaving ``step``."""
    return dict(STEP_DEFAULTS.get(Step(step), {}))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FlowController:
    """Drives one onboarding session. Depends on a flag store for launch state."""

    def __init__(
        self,
        flag_store: FlagStore,
        state: Optional[OnboardingState] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._flags = flag_store
        self._state = state or OnboardingState()
        self._clock = clock or _utc_now
        # A missing flag means first launch: show onboarding
        if self._flags.get(ONBOARDING_FLAG, True):
            self._phase = SessionPhase.ONBOARDING
        else:
            self._phase = SessionPhase.MAIN
        logger.info("Session started in %s phase", self._phase.value)

    @property
    def state(self) -> OnboardingState:
        return self._state

    @property
    def record(self) -> AnswerRecord:
        return self._state.record

    @property
    def step(self) -> Step:
        return Step(self._state.step)

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    def _require_phase(self, action: str, phase: SessionPhase) -> None:
        if self._phase is not phase:
            raise InvalidTransitionError(action, self._phase, self._state.step)

    def _select_goals(self, goals: Iterable[str]) -> None:
        for goal in goals:
            self._state.toggle_goal(goal)

    def _fill_defaults(self, step: Step) -> None:
        """Apply the default-fill policy for ``step`` through the state setters."""
        state = self._state
        setters: dict[str, Callable[[Any], None]] = {
            "goals": self._select_goals,
            "sleep_quality": state.set_sleep_quality,
            "check_in_frequency": state.set_check_in_frequency,
            "notifications_choice": state.set_notifications_choice,
        }
        for field, value in STEP_DEFAULTS.get(step, {}).items():
            if getattr(state.record, field):
                continue
            logger.debug("Defaulting %s to %r on leaving %s", field, value, step.name)
            setters[field](value)

    def advance(self) -> Step:
        """Fill defaults for the current step, then move to the next one.

        The pointer stops at the last step; from there only ``finalize()``
        moves the session on.

        Returns:
            The step now showing.

        Raises:
            InvalidTransitionError: If the session is not onboarding.
        """
        self._require_phase("advance", SessionPhase.ONBOARDING)
        current = self.step
        if current is LAST_STEP:
            return current
        self._fill_defaults(current)
        self._state.move_to(current + 1)
        logger.info("Advanced from %s to %s", current.name, self.step.name)
        return self.step

    def finalize(self) -> AnswerRecord:
        """Timestamp the record and switch to the results display.

        Raises:
            InvalidTransitionError: If not on the last onboarding step.
        """
        if self._phase is not SessionPhase.ONBOARDING or self.step is not LAST_STEP:
            raise InvalidTransitionError("finalize", self._phase, self._state.step)
        completed_at = self._clock().astimezone(timezone.utc).replace(microsecond=0)
        self._state.mark_completed(completed_at)
        self._phase = SessionPhase.RESULTS_DISPLAY
        logger.info("Onboarding finalized at %s", completed_at.isoformat())
        return self._state.record

    def dismiss_results(self) -> None:
        """Leave the results display for the main app.

        Onboarding will not be shown on the next launch.
        """
        self._require_phase("dismiss results", SessionPhase.RESULTS_DISPLAY)
        self._flags.set(ONBOARDING_FLAG, False)
        self._phase = SessionPhase.MAIN
        logger.info("Results dismissed; onboarding flag cleared")

    def restart_from_main(self) -> None:
        """Start onboarding over with an empty record."""
        self._require_phase("restart onboarding", SessionPhase.MAIN)
        self._state.reset()
        self._flags.set(ONBOARDING_FLAG, True)
        self._phase = SessionPhase.ONBOARDING
        logger.info("Onboarding restarted")

    def results_json(self) -> str:
        """Pretty JSON of the record, as shown on the results screen."""
        return serialize(self._state.record)
