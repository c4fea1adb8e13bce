"""Onboarding TUI App.

Renders whichever screen matches the controller's phase and step. Screens
call controller transitions and then ask the app to show the current screen.
"""

import logging
from typing import Optional

from textual.app import App
from textual.screen import Screen

from psychsync.core.flow import FlowController, SessionPhase, Step
from psychsync.models.answers import AnswerRecord

logger = logging.getLogger(__name__)


def build_screen(controller: FlowController) -> Screen:
    """Return a fresh screen for the controller's current phase and step."""
    # Lazy imports: screens import the app module for type hints
    from psychsync.tui.screens.baseline import BaselineScreen
    from psychsync.tui.screens.gentle_start import GentleStartScreen
    from psychsync.tui.screens.goals import GoalsScreen
    from psychsync.tui.screens.home import HomeScreen
    from psychsync.tui.screens.preferences import PreferencesScreen
    from psychsync.tui.screens.results import ResultsScreen
    from psychsync.tui.screens.welcome import WelcomeScreen

    if controller.phase is SessionPhase.RESULTS_DISPLAY:
        return ResultsScreen()
    if controller.phase is SessionPhase.MAIN:
        return HomeScreen()

    screens: dict[Step, type[Screen]] = {
        Step.WELCOME: WelcomeScreen,
        Step.GOALS: GoalsScreen,
        Step.BASELINE: BaselineScreen,
        Step.PREFERENCES: PreferencesScreen,
        Step.GENTLE_START: GentleStartScreen,
    }
    return screens[controller.step]()


class OnboardingApp(App):
    """PsychSync onboarding wizard.

    Welcome -> Goals -> Baseline -> Preferences -> Gentle Start, then the
    JSON results and the main screen.
    """

    TITLE = "PsychSync"
    SUB_TITLE = "Welcome"

    BINDINGS = [
        ("q", "app.quit", "Quit"),
    ]

    def __init__(self, controller: FlowController) -> None:
        super().__init__()
        self.controller = controller

    def on_mount(self) -> None:
        """Push the screen for the starting phase."""
        self.show_current()

    def show_current(self) -> None:
        """Replace the visible screen with the one for the current step."""
        screen = build_screen(self.controller)
        logger.debug(
            "Showing %s (%s, step %d)",
            type(screen).__name__,
            self.controller.phase.value,
            self.controller.step,
        )
        if len(self.screen_stack) > 1:
            self.switch_screen(screen)
        else:
            self.push_screen(screen)

    def get_result(self) -> Optional[AnswerRecord]:
        """Return the finished record, or None if onboarding wasn't completed."""
        record = self.controller.record
        return record if record.is_complete else None
