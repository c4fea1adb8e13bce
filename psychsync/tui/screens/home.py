"""Main app placeholder with a way back into onboarding."""

from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Button, Footer, Header, Static

from psychsync.tui.keybindings import (
    QUIT_Q_BINDING,
    RESTART_R_BINDING,
    compose_bindings,
)
from psychsync.tui.screens.base import OnboardingScreen


class HomeScreen(OnboardingScreen):
    """Post-onboarding main screen."""

    BINDINGS = compose_bindings(QUIT_Q_BINDING, RESTART_R_BINDING)

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="home-container"):
            yield Static("PsychSync", id="home-title")
            yield Static("Main app content goes here.", id="home-subtitle")
            yield Button("Restart Onboarding", id="restart-btn")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "restart-btn":
            self.action_restart()

    def action_restart(self) -> None:
        """Clear the answers and show onboarding again."""
        self.controller.restart_from_main()
        self._show_current()
