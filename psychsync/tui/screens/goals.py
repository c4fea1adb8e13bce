"""Screen 2: Goals (multi-select, with free text for "Other")."""

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.widgets import Button, Footer, Header, Input, Static

from psychsync.models.answers import GOAL_OPTIONS, OTHER_GOAL
from psychsync.tui.keybindings import (
    CONFIRM_C_BINDING,
    QUIT_Q_BINDING,
    compose_bindings,
)
from psychsync.tui.screens.base import (
    OnboardingScreen,
    checked_label,
    option_buttons,
    parse_option_id,
)


class GoalsScreen(OnboardingScreen):
    """Pick one or more reasons for using the app."""

    BINDINGS = compose_bindings(QUIT_Q_BINDING, CONFIRM_C_BINDING)

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="goals-container"):
            yield Static("What brings you here?", id="goals-title")
            yield Static(
                "Choose the option(s) that best fit your goal.", id="goals-subtitle"
            )
            with Vertical(id="goal-options"):
                yield from option_buttons("goal", GOAL_OPTIONS)
            yield Input(
                placeholder="Tell us what brings you here...",
                id="other-goal-input",
            )
            yield Button("Continue", id="continue-btn", variant="primary")
        yield Footer()

    def refresh_view(self) -> None:
        record = self.onboarding_state.record
        for i, goal in enumerate(GOAL_OPTIONS):
            button = self.query_one(f"#goal-{i}", Button)
            button.label = checked_label(goal, goal in record.goals)
        other_input = self.query_one("#other-goal-input", Input)
        other_input.display = OTHER_GOAL in record.goals

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "continue-btn":
            self.action_confirm()
            return
        parsed = parse_option_id(event.button.id)
        if parsed and parsed[0] == "goal":
            self.toggle_goal(parsed[1])

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "other-goal-input":
            return
        state = self.onboarding_state
        # Leave the field unset until something is typed
        if not event.value and state.record.other_goal_text is None:
            return
        state.set_other_goal_text(event.value)

    def toggle_goal(self, index: int) -> None:
        self.onboarding_state.toggle_goal(GOAL_OPTIONS[index])

    def action_confirm(self) -> None:
        """Continue; an empty selection is filled in by the controller."""
        self.controller.advance()
        self._show_current()
