"""Environment and settings (Pydantic Settings)."""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory: ~/.psychsync/
_data_dir = Path.home() / ".psychsync"


class Settings(BaseSettings):
    """PsychSync settings loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_prefix="PSYCHSYNC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Flag file holding onboarding_in_progress
    state_path: Path = _data_dir / "state.toml"

    # Where to write the finished answer record (unset: don't export)
    export_path: Optional[Path] = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Path = _data_dir / "psychsync.log"


def get_settings() -> Settings:
    """Return application settings (singleton-like)."""
    return Settings()
