"""Persistence for onboarding flags."""

from .flags import (
    DEFAULT_STATE_PATH,
    ONBOARDING_FLAG,
    FlagStore,
    InMemoryFlagStore,
    TomlFlagStore,
)

__all__ = [
    "DEFAULT_STATE_PATH",
    "ONBOARDING_FLAG",
    "FlagStore",
    "InMemoryFlagStore",
    "TomlFlagStore",
]
