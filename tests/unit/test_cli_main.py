"""Unit tests for CLI entry behavior."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from typer.testing import CliRunner

from psychsync.cli import _launch_tui, app, main
from psychsync.config import Settings
from psychsync.models import AnswerRecord
from psychsync.storage.flags import ONBOARDING_FLAG, TomlFlagStore

runner = CliRunner()


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Settings:
    """Settings pointing at a temp state file, patched into the CLI."""
    s = Settings(state_path=tmp_path / "state.toml", log_file=tmp_path / "log.txt")
    monkeypatch.setattr("psychsync.cli.get_settings", lambda: s)
    return s


def test_main_without_subcommand_launches_tui(monkeypatch: Any) -> None:
    """Bare `psychsync` should open the onboarding TUI."""
    calls: list[object] = []
    monkeypatch.setattr(
        "psychsync.cli._launch_tui", lambda export=None: calls.append(export)
    )

    main(ctx=SimpleNamespace(invoked_subcommand=None), version=False, export=None)

    assert calls == [None]


def test_status_reports_pending_on_first_launch(settings: Settings) -> None:
    result = runner.invoke(app, ["status"])
    assert result.exit_code == 0
    assert "pending" in result.output


def test_status_reports_completed_when_flag_cleared(settings: Settings) -> None:
    TomlFlagStore(settings.state_path).set(ONBOARDING_FLAG, False)
    result = runner.invoke(app, ["status"])
    assert "completed" in result.output


def test_restart_sets_flag_from_main(settings: Settings) -> None:
    store = TomlFlagStore(settings.state_path)
    store.set(ONBOARDING_FLAG, False)

    result = runner.invoke(app, ["restart"])

    assert result.exit_code == 0
    assert store.get(ONBOARDING_FLAG, False) is True


def test_restart_is_noop_when_onboarding_pending(settings: Settings) -> None:
    result = runner.invoke(app, ["restart"])
    assert result.exit_code == 0
    assert "already pending" in result.output
    assert not settings.state_path.exists()


def test_launch_tui_exports_finished_record(
    monkeypatch: Any, settings: Settings, tmp_path: Path
) -> None:
    record = AnswerRecord(
        goals=["Reduce stress"],
        completed_at=datetime(2025, 8, 28, 9, 0, tzinfo=timezone.utc),
    )

    class _FakeOnboardingApp:
        def __init__(self, controller: object) -> None:
            self.controller = controller

        def run(self) -> AnswerRecord:
            return record

    monkeypatch.setattr("psychsync.tui.app.OnboardingApp", _FakeOnboardingApp)
    export_path = tmp_path / "out" / "answers.json"

    _launch_tui(export_path)

    payload = json.loads(export_path.read_text())
    assert payload["goals"] == ["Reduce stress"]
    assert payload["completedDate"] == "2025-08-28T09:00:00Z"


def test_launch_tui_skips_export_when_quit_early(
    monkeypatch: Any, settings: Settings, tmp_path: Path
) -> None:
    class _FakeOnboardingApp:
        def __init__(self, controller: object) -> None:
            pass

        def run(self) -> None:
            return None

    monkeypatch.setattr("psychsync.tui.app.OnboardingApp", _FakeOnboardingApp)
    export_path = tmp_path / "answers.json"

    _launch_tui(export_path)

    assert not export_path.exists()


def test_version_flag_prints_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("psychsync ")
