"""Screen 1: Welcome."""

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.widgets import Button, Footer, Header, Static

from psychsync.tui.keybindings import (
    CONFIRM_C_BINDING,
    CONFIRM_ENTER_BINDING,
    QUIT_Q_BINDING,
    compose_bindings,
)
from psychsync.tui.screens.base import OnboardingScreen


class WelcomeScreen(OnboardingScreen):
    """Introduce the app before collecting answers."""

    BINDINGS = compose_bindings(
        QUIT_Q_BINDING,
        CONFIRM_ENTER_BINDING,
        CONFIRM_C_BINDING,
    )

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="welcome-container"):
            with Vertical(id="welcome-card"):
                yield Static("PsychSync", id="welcome-title")
                yield Static(
                    "This is your space to understand your mood, your body, "
                    "and the patterns between them. Ready to begin?",
                    id="welcome-subtitle",
                )
            yield Button("Get Started", id="start-btn", variant="primary")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "start-btn":
            self.action_confirm()

    def action_confirm(self) -> None:
        """Move on to the goals screen."""
        self.controller.advance()
        self._show_current()
