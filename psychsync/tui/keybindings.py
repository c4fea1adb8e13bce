"""Shared keybinding contract for onboarding screens."""

from __future__ import annotations

from typing import TypeAlias

Binding: TypeAlias = tuple[str, str, str]

QUIT_Q_BINDING: Binding = ("q", "quit", "Quit")
CONFIRM_ENTER_BINDING: Binding = ("enter", "confirm", "Continue")
CONFIRM_C_BINDING: Binding = ("c", "confirm", "Continue")
DECREASE_ENERGY_BINDING: Binding = ("h", "decrease_energy", "Less energy")
INCREASE_ENERGY_BINDING: Binding = ("l", "increase_energy", "More energy")
DONE_ENTER_BINDING: Binding = ("enter", "done", "Done")
RESTART_R_BINDING: Binding = ("r", "restart", "Restart onboarding")


def compose_bindings(*bindings: Binding) -> list[Binding]:
    """Return binding tuples in order."""
    return list(bindings)
