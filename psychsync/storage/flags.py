"""Boolean flag stores used to remember onboarding status between launches.

The flow controller only sees the :class:`FlagStore` protocol, so tests can
pass an in-memory store while the app uses a TOML file on disk.
"""

import logging
import os
import re
import tomllib
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

# Key read at session start to decide whether onboarding is shown
ONBOARDING_FLAG = "onboarding_in_progress"

DEFAULT_STATE_PATH = Path.home() / ".psychsync" / "state.toml"


class FlagStore(Protocol):
    """Key-value store of boolean flags."""

    def get(self, key: str, default: bool = False) -> bool: ...

    def set(self, key: str, value: bool) -> None: ...


class InMemoryFlagStore:
    """Flag store kept in a dict; nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, bool]] = None) -> None:
        self._flags: dict[str, bool] = dict(initial or {})

    def get(self, key: str, default: bool = False) -> bool:
        return self._flags.get(key, default)

    def set(self, key: str, value: bool) -> None:
        self._flags[key] = value


def _load_toml(path: Path) -> dict:
    """Load a TOML file, returning an empty dict if it doesn't exist."""
    if not path.exists():
        return {}
    with open(path, "rb") as f:
        return tomllib.load(f)


def _upsert_top_level_key(content: str, key: str, value_repr: str) -> str:
    """Set a top-level TOML key without rewriting section contents."""
    section_match = re.search(r"(?m)^\[", content)
    if section_match:
        top_level_block = content[: section_match.start()]
        section_block = content[section_match.start() :]
    else:
        top_level_block = content
        section_block = ""

    key_pattern = re.compile(rf"(?m)^{re.escape(key)}\s*=.*$")
    replacement = f"{key} = {value_repr}"
    if key_pattern.search(top_level_block):
        updated_top_level = key_pattern.sub(replacement, top_level_block, count=1)
        return f"{updated_top_level}{section_block}"

    joiner = "" if not top_level_block or top_level_block.endswith("\n") else "\n"
    return f"{top_level_block}{joiner}{replacement}\n{section_block}"


class TomlFlagStore:
    """Flags persisted as top-level booleans in a TOML file.

    Other keys and sections in the file are preserved on write.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or DEFAULT_STATE_PATH

    def get(self, key: str, default: bool = False) -> bool:
        """Read a flag.

        Args:
            key: Top-level TOML key.
            default: Returned when the file or key is missing or not a bool.

        Returns:
            The stored boolean, or ``default``.
        """
        value = _load_toml(self.path).get(key, default)
        if not isinstance(value, bool):
            logger.warning(
                "Ignoring non-boolean flag %s=%r in %s", key, value, self.path
            )
            return default
        return value

    def set(self, key: str, value: bool) -> None:
        """Write a flag, creating the file with owner-only permissions if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = self.path.read_text() if self.path.exists() else "# PsychSync state\n"
        content = _upsert_top_level_key(content, key, str(value).lower())
        self.path.write_text(content)
        os.chmod(self.path, 0o600)
        logger.debug("Flag %s set to %s in %s", key, value, self.path)
