"""Screen 3: Current state baseline (mood, energy, sleep)."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Footer, Header, ProgressBar, Static

from psychsync.core.flow import DEFAULT_SLEEP_QUALITY
from psychsync.models.answers import (
    ENERGY_MAX,
    ENERGY_MIN,
    MOOD_SCALE,
    SLEEP_QUALITY_OPTIONS,
)
from psychsync.tui.keybindings import (
    CONFIRM_C_BINDING,
    DECREASE_ENERGY_BINDING,
    INCREASE_ENERGY_BINDING,
    QUIT_Q_BINDING,
    compose_bindings,
)
from psychsync.tui.screens.base import OnboardingScreen, option_buttons, parse_option_id

# Face highlighted while the user hasn't picked a mood yet
DISPLAY_MOOD_INDEX = len(MOOD_SCALE) // 2


class BaselineScreen(OnboardingScreen):
    """Snapshot of how the user is doing today."""

    BINDINGS = compose_bindings(
        QUIT_Q_BINDING,
        DECREASE_ENERGY_BINDING,
        INCREASE_ENERGY_BINDING,
        CONFIRM_C_BINDING,
    )

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="baseline-container"):
            yield Static(
                "Let's get a snapshot of how you're doing today.", id="baseline-title"
            )
            yield Static("This helps us build your baseline.", id="baseline-subtitle")

            yield Static("Mood", classes="field-label")
            with Horizontal(id="mood-options"):
                yield from option_buttons("mood", MOOD_SCALE)

            yield Static("Energy", classes="field-label", id="energy-label")
            with Horizontal(id="energy-row"):
                yield Button("-", id="energy-down")
                yield ProgressBar(
                    total=ENERGY_MAX - ENERGY_MIN,
                    show_eta=False,
                    show_percentage=False,
                    id="energy-bar",
                )
                yield Button("+", id="energy-up")

            yield Static("Sleep quality", classes="field-label")
            with Horizontal(id="sleep-options"):
                yield from option_buttons("sleep", SLEEP_QUALITY_OPTIONS)

            yield Button("Continue", id="continue-btn", variant="primary")
        yield Footer()

    def refresh_view(self) -> None:
        record = self.onboarding_state.record
        mood = DISPLAY_MOOD_INDEX if record.mood_index is None else record.mood_index
        for i in range(len(MOOD_SCALE)):
            self.query_one(f"#mood-{i}", Button).variant = (
                "primary" if i == mood else "default"
            )

        self.query_one("#energy-label", Static).update(f"Energy  {record.energy_level}")
        self.query_one("#energy-bar", ProgressBar).update(
            progress=record.energy_level - ENERGY_MIN
        )

        sleep = record.sleep_quality or DEFAULT_SLEEP_QUALITY
        for i, option in enumerate(SLEEP_QUALITY_OPTIONS):
            self.query_one(f"#sleep-{i}", Button).variant = (
                "primary" if option == sleep else "default"
            )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "continue-btn":
            self.action_confirm()
        elif button_id == "energy-down":
            self.action_decrease_energy()
        elif button_id == "energy-up":
            self.action_increase_energy()
        else:
            parsed = parse_option_id(button_id)
            if parsed is None:
                return
            prefix, index = parsed
            state = self.onboarding_state
            if prefix == "mood":
                state.set_mood(index)
            elif prefix == "sleep":
                state.set_sleep_quality(SLEEP_QUALITY_OPTIONS[index])

    def action_decrease_energy(self) -> None:
        state = self.onboarding_state
        state.set_energy(state.record.energy_level - 1)

    def action_increase_energy(self) -> None:
        state = self.onboarding_state
        state.set_energy(state.record.energy_level + 1)

    def action_confirm(self) -> None:
        """Continue to preferences; unset sleep quality becomes "Fair"."""
        self.controller.advance()
        self._show_current()
