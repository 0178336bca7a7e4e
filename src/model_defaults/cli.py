"""Typer CLI for persisting model defaults."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich import print as rprint
from rich.markup import escape

from .config import ReasoningEffort, load_home_settings
from .errors import ModelDefaultsError
from .overrides import read_defaults, set_default_effort_for_profile, set_default_model_for_profile

app = typer.Typer(help="Persist the default model and reasoning effort in config.toml")

HOME_HELP = "Configuration home (defaults to $MODEL_DEFAULTS_HOME or ~/.model-defaults)"
PROFILE_HELP = "Write under [profiles.<name>] instead of the active profile"


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("model_defaults").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _fail(exc: Exception) -> None:
    rprint(f"[red]{escape(str(exc))}[/red]")
    raise typer.Exit(code=1)


@app.command("set-model")
def set_model(
    model: str = typer.Argument(..., help="Model identifier, e.g. gpt-5"),
    profile: Optional[str] = typer.Option(None, help=PROFILE_HELP),
    home: Optional[str] = typer.Option(None, help=HOME_HELP),
) -> None:
    settings = load_home_settings(home)
    try:
        path = set_default_model_for_profile(settings.home, profile, model)
    except (ModelDefaultsError, OSError) as exc:
        _fail(exc)
    rprint(f"[green]Default model set to {escape(model)}[/green] ({path})")


@app.command("set-effort")
def set_effort(
    effort: ReasoningEffort = typer.Argument(..., help="Reasoning effort level"),
    profile: Optional[str] = typer.Option(None, help=PROFILE_HELP),
    home: Optional[str] = typer.Option(None, help=HOME_HELP),
) -> None:
    settings = load_home_settings(home)
    try:
        path = set_default_effort_for_profile(settings.home, profile, effort)
    except (ModelDefaultsError, OSError) as exc:
        _fail(exc)
    rprint(f"[green]Default reasoning effort set to {effort.value}[/green] ({path})")


@app.command()
def show(
    profile: Optional[str] = typer.Option(None, help="Profile to inspect instead of the active one"),
    home: Optional[str] = typer.Option(None, help=HOME_HELP),
) -> None:
    settings = load_home_settings(home)
    try:
        defaults = read_defaults(settings.home, profile)
    except (ModelDefaultsError, OSError) as exc:
        _fail(exc)
    rprint(
        {
            "config": str(settings.config_path),
            "profile": defaults.profile,
            "model": defaults.model,
            "model_reasoning_effort": defaults.effort,
        }
    )


if __name__ == "__main__":
    app()
