"""Screen 4: Preferences (check-in frequency, notifications, support)."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from psychsync.core.flow import Step, defaults_for
from psychsync.models.answers import (
    CHECK_IN_FREQUENCY_OPTIONS,
    NOTIFICATION_LABELS,
    NOTIFICATION_OPTIONS,
    SUPPORT_TYPE_OPTIONS,
)
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


class PreferencesScreen(OnboardingScreen):
    """How the user wants to use the app."""

    BINDINGS = compose_bindings(QUIT_Q_BINDING, CONFIRM_C_BINDING)

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="preferences-container"):
            yield Static("How would you like to use the app?", id="preferences-title")
            yield Static(
                "Choose the settings that feel right for you.",
                id="preferences-subtitle",
            )

            yield Static("Check-in frequency", classes="field-label")
            with Vertical(id="frequency-options"):
                yield from option_buttons("frequency", CHECK_IN_FREQUENCY_OPTIONS)

            yield Static("Notifications", classes="field-label")
            with Horizontal(id="notification-options"):
                yield from option_buttons(
                    "notify", (NOTIFICATION_LABELS[n] for n in NOTIFICATION_OPTIONS)
                )

            yield Static("Support type", classes="field-label")
            with Vertical(id="support-options"):
                yield from option_buttons("support", SUPPORT_TYPE_OPTIONS)

            yield Button("Continue", id="continue-btn", variant="primary")
        yield Footer()

    def refresh_view(self) -> None:
        record = self.onboarding_state.record
        shown = defaults_for(Step.PREFERENCES)
        frequency = record.check_in_frequency or shown["check_in_frequency"]
        notifications = record.notifications_choice or shown["notifications_choice"]

        for i, option in enumerate(CHECK_IN_FREQUENCY_OPTIONS):
            self.query_one(f"#frequency-{i}", Button).variant = (
                "primary" if option == frequency else "default"
            )
        for i, option in enumerate(NOTIFICATION_OPTIONS):
            self.query_one(f"#notify-{i}", Button).variant = (
                "primary" if option == notifications else "default"
            )
        for i, option in enumerate(SUPPORT_TYPE_OPTIONS):
            self.query_one(f"#support-{i}", Button).label = checked_label(
                option, option in record.support_types
            )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "continue-btn":
            self.action_confirm()
            return
        parsed = parse_option_id(event.button.id)
        if parsed is None:
            return
        prefix, index = parsed
        state = self.onboarding_state
        if prefix == "frequency":
            state.set_check_in_frequency(CHECK_IN_FREQUENCY_OPTIONS[index])
        elif prefix == "notify":
            state.set_notifications_choice(NOTIFICATION_OPTIONS[index])
        elif prefix == "support":
            state.toggle_support_type(SUPPORT_TYPE_OPTIONS[index])

    def action_confirm(self) -> None:
        """Continue; unset choices fall back to the first option."""
        self.controller.advance()
        self._show_current()
