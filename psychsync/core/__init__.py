"""Onboarding core: answer state, flow sequencing, serialization."""

from .errors import (
    InvalidEnumError,
    InvalidTextError,
    InvalidTransitionError,
    OnboardingError,
    OutOfRangeError,
)
from .flow import FlowController, SessionPhase, Step, defaults_for
from .serializer import deserialize, serialize, to_payload
from .state import OnboardingState

__all__ = [
    "FlowController",
    "InvalidEnumError",
    "InvalidTextError",
    "InvalidTransitionError",
    "OnboardingError",
    "OnboardingState",
    "OutOfRangeError",
    "SessionPhase",
    "Step",
    "defaults_for",
    "deserialize",
    "serialize",
    "to_payload",
]
