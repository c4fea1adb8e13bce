"""Global fixtures: in-memory flag store, fixed clock, fresh controller."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from psychsync.core.flow import FlowController
from psychsync.core.state import OnboardingState
from psychsync.storage.flags import InMemoryFlagStore

FIXED_NOW = datetime(2025, 8, 28, 9, 15, 30, 123456, tzinfo=timezone.utc)


@pytest.fixture
def flag_store() -> InMemoryFlagStore:
    """Empty flag store (first launch)."""
    return InMemoryFlagStore()


@pytest.fixture
def state() -> OnboardingState:
    return OnboardingState()


@pytest.fixture
def controller(flag_store: InMemoryFlagStore, state: OnboardingState) -> FlowController:
    """Controller at step 0 in the onboarding phase, with a fixed clock."""
    return FlowController(flag_store, state=state, clock=lambda: FIXED_NOW)


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    """Flag file path inside a not-yet-created directory."""
    return tmp_path / "psychsync" / "state.toml"
