"""Screen 5: Gentle start (finishes onboarding)."""

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


class GentleStartScreen(OnboardingScreen):
    """Last onboarding step; its action finalizes the record."""

    BINDINGS = compose_bindings(
        QUIT_Q_BINDING,
        CONFIRM_ENTER_BINDING,
        CONFIRM_C_BINDING,
    )

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="gentle-start-container"):
            with Vertical(id="gentle-start-card"):
                yield Static("You're all set 🌿", id="gentle-start-title")
                yield Static(
                    "We'll guide you through your first check-in now. The more you "
                    "log, the more insights you'll discover about your unique "
                    "mind-body patterns.",
                    id="gentle-start-subtitle",
                )
            yield Button("Start First Check-In", id="finish-btn", variant="primary")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "finish-btn":
            self.action_confirm()

    def action_confirm(self) -> None:
        """Timestamp the answers and show them."""
        self.controller.finalize()
        self._show_current()
