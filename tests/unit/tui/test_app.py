"""Unit tests for onboarding app screen routing."""

from __future__ import annotations

import pytest

from psychsync.core.flow import FlowController, Step
from psychsync.storage.flags import ONBOARDING_FLAG, InMemoryFlagStore
from psychsync.tui.app import OnboardingApp, build_screen


@pytest.mark.parametrize(
    ("step", "screen_name"),
    [
        (Step.WELCOME, "WelcomeScreen"),
        (Step.GOALS, "GoalsScreen"),
        (Step.BASELINE, "BaselineScreen"),
        (Step.PREFERENCES, "PreferencesScreen"),
        (Step.GENTLE_START, "GentleStartScreen"),
    ],
)
def test_build_screen_follows_step(
    controller: FlowController, step: Step, screen_name: str
) -> None:
    while controller.step < step:
        controller.advance()
    assert build_screen(controller).__class__.__name__ == screen_name


def test_build_screen_results_after_finalize(controller: FlowController) -> None:
    while controller.step < Step.GENTLE_START:
        controller.advance()
    controller.finalize()
    assert build_screen(controller).__class__.__name__ == "ResultsScreen"


def test_build_screen_home_when_onboarding_done() -> None:
    controller = FlowController(InMemoryFlagStore({ONBOARDING_FLAG: False}))
    assert build_screen(controller).__class__.__name__ == "HomeScreen"


def test_get_result_only_returns_finished_record(controller: FlowController) -> None:
    app = OnboardingApp(controller)
    assert app.get_result() is None

    while controller.step < Step.GENTLE_START:
        controller.advance()
    controller.finalize()
    assert app.get_result() is controller.record
