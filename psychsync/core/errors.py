"""Errors raised by the onboarding core."""

from typing import Any, Iterable, Optional


class OnboardingError(Exception):
    """Base class for onboarding core errors."""


class OutOfRangeError(OnboardingError, ValueError):
    """A numeric answer fell outside its declared domain."""

    def __init__(self, field: str, value: Any, low: int, high: int) -> None:
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        super().__init__(
            f"{field} must be an integer in [{low}, {high}], got {value!r}"
        )


class InvalidEnumError(OnboardingError, ValueError):
    """A string answer was not one of the field's declared options."""

    def __init__(self, field: str, value: Any, options: Iterable[str]) -> None:
        self.field = field
        self.value = value
        self.options = tuple(options)
        allowed = ", ".join(repr(o) for o in self.options)
        super().__init__(f"{field} must be one of {allowed}, got {value!r}")


class InvalidTransitionError(OnboardingError, RuntimeError):
    """A flow transition was requested from the wrong phase or step.

    This signals misuse by the rendering layer, not a user error.
    """

    def __init__(self, action: str, phase: Any, step: Optional[int] = None) -> None:
        self.action = action
        self.phase = phase
        self.step = step
        phase_name = getattr(phase, "value", phase)
        where = f"phase {phase_name}"
        if step is not None:
            where += f", step {step}"
        super().__init__(f"Cannot {action} from {where}")


class InvalidTextError(OnboardingError, TypeError):
    """A text answer was not a string."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"{field} must be a string, got {type(value).__name__}"
        )
