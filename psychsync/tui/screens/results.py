"""Results: the collected answers as JSON."""

from textual.app import ComposeResult
from textual.containers import Container, VerticalScroll
from textual.widgets import Button, Footer, Header, Static

from psychsync.tui.keybindings import (
    DONE_ENTER_BINDING,
    QUIT_Q_BINDING,
    compose_bindings,
)
from psychsync.tui.screens.base import OnboardingScreen


class ResultsScreen(OnboardingScreen):
    """Show the finished record before entering the main app."""

    BINDINGS = compose_bindings(QUIT_Q_BINDING, DONE_ENTER_BINDING)

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="results-container"):
            yield Static("Onboarding Complete", id="results-title")
            yield Static("Here's the data you provided (JSON):", id="results-subtitle")
            with VerticalScroll(id="results-scroll"):
                yield Static(
                    self.controller.results_json(), id="results-json", markup=False
                )
            yield Button("Done", id="done-btn", variant="primary")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "done-btn":
            self.action_done()

    def action_done(self) -> None:
        """Enter the main app; onboarding won't show on next launch."""
        self.controller.dismiss_results()
        self._show_current()
