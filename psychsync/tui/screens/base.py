"""Base screen wiring a view to the running flow controller."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Optional

from rich.text import Text
from textual.screen import Screen
from textual.widgets import Button

from psychsync.tui.keybindings import QUIT_Q_BINDING, compose_bindings

if TYPE_CHECKING:
    from psychsync.core.flow import FlowController
    from psychsync.core.state import OnboardingState
    from psychsync.tui.app import OnboardingApp


CHECK = "✓"


def checked_label(option: str, selected: bool) -> Text:
    """Option label with a check mark slot that never shifts the text."""
    label = Text(option)
    label.append(f"  {CHECK if selected else ' '}", style="bold green")
    return label


def option_buttons(prefix: str, labels: Iterable[str]) -> list[Button]:
    """Build one button per option, with ids ``{prefix}-{index}``."""
    return [Button(label, id=f"{prefix}-{i}") for i, label in enumerate(labels)]


def parse_option_id(button_id: Optional[str]) -> tuple[str, int] | None:
    """Split ``"{prefix}-{index}"`` back into its parts."""
    if not button_id or "-" not in button_id:
        return None
    prefix, _, index = button_id.rpartition("-")
    if not index.isdigit():
        return None
    return prefix, int(index)


class OnboardingScreen(Screen):
    """Screen bound to the app's flow controller.

    Subclasses read answers from ``self.onboarding_state.record``, write
    them through the state setters, and call one controller transition on
    their primary action followed by ``self._show_current()``.
    """

    BINDINGS = compose_bindings(QUIT_Q_BINDING)

    _state_unsubscribe: Optional[Callable[[], None]] = None

    @property
    def onboarding_app(self) -> OnboardingApp:
        return self.app  # type: ignore[return-value]

    @property
    def controller(self) -> FlowController:
        return self.onboarding_app.controller

    @property
    def onboarding_state(self) -> OnboardingState:
        return self.controller.state

    def on_mount(self) -> None:
        """Re-render whenever the answers change."""
        self._state_unsubscribe = self.onboarding_state.subscribe(
            lambda _state: self.refresh_view()
        )
        self.refresh_view()

    def on_unmount(self) -> None:
        if self._state_unsubscribe is not None:
            self._state_unsubscribe()
            self._state_unsubscribe = None

    def refresh_view(self) -> None:
        """Sync widgets with the current record. No-op by default."""
        return

    def _show_current(self) -> None:
        self.onboarding_app.show_current()

    def action_quit(self) -> None:
        """Exit the application."""
        self.onboarding_app.exit(self.onboarding_app.get_result())
