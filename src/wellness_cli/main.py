import typer
import tomli_w

from pathlib import Path
from typing import Optional

from rich.console import Console

from wellness import __version__
from wellness.core import Config, Workspace
from wellness.core.activity_file import parse_duration
from wellness.models import Outcome

from wellness_cli.activity_formatter import ActivityFormatter
from wellness_cli.menu import run_menu
from wellness_cli.utils import edit_file, format_minutes, setup_logging

cli = typer.Typer(help="Log and review your wellness activities.")

# These only touch the configuration file, not the journal.
NO_WORKSPACE_COMMANDS = ("init", "config")

@cli.callback(invoke_without_command=True)
def main(ctx: typer.Context,
         data_file: Optional[Path] = typer.Option(None, "--data-file", help="Journal file to use instead of the configured one."),
         verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging.")):
    """
    cli: wellness
    With no command, start the interactive menu.
    """
    setup_logging(verbose)

    if ctx.invoked_subcommand in NO_WORKSPACE_COMMANDS:
        ctx.obj = None
        return

    config = Config.load()
    if data_file is not None:
        config.data_file = data_file
    ctx.obj = Workspace(config)

    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)

def _require(outcome: Outcome) -> Outcome:
    """Report a failed outcome and stop with a non-zero exit code."""
    if not outcome.ok:
        typer.echo(f"Error: {outcome.message}", err=True)
        raise typer.Exit(1)
    return outcome

def _save(ws: Workspace) -> None:
    _require(ws.save())

@cli.command()
def init(ctx: typer.Context):
    """
    cli: wellness init
    Write a default configuration file.
    """
    path = Config.config_path()
    if path.exists():
        typer.echo(f"Configuration file {path} already exists.")
        raise typer.Exit(1)

    path.write_text(tomli_w.dumps(Config().to_dict()))
    typer.echo(f"Wrote default configuration to {path}.")

@cli.command()
def config(ctx: typer.Context):
    """
    cli: wellness config
    Edit the configuration in your preferred editor.
    """
    path = Config.config_path()
    if not path.exists():
        typer.echo(f"No configuration file at {path}. Run `wellness init` first.")
        raise typer.Exit(1)

    if edit_file(path):
        typer.echo("Configuration file was updated.")
    else:
        typer.echo("No changes detected.")

@cli.command()
def add(ctx: typer.Context,
        type: str,
        duration: str,
        date: str,
        notes: str = typer.Option("", "--notes", "-n")):
    """
    cli: wellness add
    Log a new activity, e.g. `wellness add Exercise 30 01.03.2025 --notes "Long run"`.
    """
    ws: Workspace = ctx.obj
    minutes = _require(parse_duration(duration)).value
    day = _require(ws.parse_date(date)).value

    ws.store.add(type, minutes, day, notes)
    _save(ws)
    typer.echo(f"Activity added at index {len(ws.store) - 1}.")

@cli.command(name="list") # To avoid conflict with list type
def activity_list(ctx: typer.Context):
    """
    cli: wellness list
    Show every logged activity.
    """
    ws: Workspace = ctx.obj
    activities = ws.store.list()
    if not activities:
        typer.echo("No activities recorded.")
        return
    Console().print(ActivityFormatter.activity_table(activities))

@cli.command()
def update(ctx: typer.Context,
           index: int,
           type: str,
           duration: str,
           date: str,
           notes: str = typer.Option("", "--notes", "-n")):
    """
    cli: wellness update
    Replace the activity at INDEX with a new one.
    """
    ws: Workspace = ctx.obj
    minutes = _require(parse_duration(duration)).value
    day = _require(ws.parse_date(date)).value

    outcome = _require(ws.store.update(index, type, minutes, day, notes))
    _save(ws)
    typer.echo(outcome.message)

@cli.command()
def rm(ctx: typer.Context, index: int):
    """
    cli: wellness rm
    Delete the activity at INDEX. Later activities move up by one.
    """
    ws: Workspace = ctx.obj
    outcome = _require(ws.store.delete(index))
    _save(ws)
    typer.echo(outcome.message)

@cli.command()
def summary(ctx: typer.Context):
    """
    cli: wellness summary
    Show exercise activities, the total time logged, and activities by type.
    """
    ws: Workspace = ctx.obj
    if ws.store.is_empty():
        typer.echo("No activities to process.")
        return
    typer.echo(ActivityFormatter.format_summary(ws.store.summarize(), ws.config.exercise_type))

@cli.command()
def status(ctx: typer.Context):
    """
    cli: wellness status
    Show where the journal lives and how much it holds.
    """
    ws: Workspace = ctx.obj
    typer.echo(f"wellness version: {__version__}")
    typer.echo(f"Journal file: {ws.config.data_file}")
    typer.echo(f"Activities recorded: {len(ws.store)}")
    total = sum(activity.duration for activity in ws.store)
    typer.echo(f"Total recorded time: {format_minutes(total)}")
