"""[Layer: Presentation] Typer CLI Commands."""

import logging
from importlib.metadata import PackageNotFoundError, version as get_package_version
from pathlib import Path
from typing import Optional

import typer

from psychsync.config import get_settings
from psychsync.core.flow import FlowController, SessionPhase
from psychsync.core.serializer import serialize
from psychsync.models.answers import AnswerRecord
from psychsync.storage.flags import TomlFlagStore

logger = logging.getLogger(__name__)


def _get_version() -> str:
    """Get version from package metadata (single source of truth: pyproject.toml)."""
    try:
        return get_package_version("psychsync")
    except PackageNotFoundError:
        return "0.0.0-dev"


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"psychsync {_get_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="psychsync",
    help="PsychSync onboarding: goals, baseline, and preferences.",
)


def _build_controller() -> FlowController:
    settings = get_settings()
    return FlowController(TomlFlagStore(settings.state_path))


def _export_record(record: AnswerRecord, path: Path) -> None:
    """Write the serialized record to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(record) + "\n", encoding="utf-8")
    logger.info("Exported onboarding answers to %s", path)


def _launch_tui(export_path: Optional[Path] = None) -> None:
    """Run the onboarding app and export the finished record if asked to."""
    # Lazy import: OnboardingApp has heavy TUI dependencies
    from psychsync.tui.app import OnboardingApp

    result = OnboardingApp(_build_controller()).run()
    target = export_path or get_settings().export_path
    if isinstance(result, AnswerRecord) and target is not None:
        _export_record(result, target)
        typer.echo(f"Saved answers to {target}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    export: Optional[Path] = typer.Option(
        None,
        "--export",
        "-o",
        help="Write the finished answers as JSON to this file.",
    ),
) -> None:
    """Launch the onboarding TUI by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        _launch_tui(export)


@app.command()
def status() -> None:
    """Show whether onboarding will run on next launch."""
    controller = _build_controller()
    if controller.phase is SessionPhase.ONBOARDING:
        typer.echo("Onboarding: pending (will show on next launch)")
    else:
        typer.echo("Onboarding: completed")


@app.command()
def restart() -> None:
    """Show onboarding again on next launch."""
    controller = _build_controller()
    if controller.phase is not SessionPhase.MAIN:
        typer.echo("Onboarding is already pending.")
        return
    controller.restart_from_main()
    typer.echo("Onboarding will show on next launch.")


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(f"psychsync {_get_version()}")
