"""
The interactive numbered menu. Every action reports its own failures and
hands control back to the menu; only Exit (or end of input) leaves the loop,
and leaving always saves.
"""
import typer

from typing import Callable, Dict, Optional

from wellness.core import Workspace
from wellness.core.activity_file import parse_duration
from wellness.models import Outcome

from wellness_cli.activity_formatter import ActivityFormatter

MENU = """
Student Wellness Tracker
1. Add Wellness Activity
2. View Wellness Activities
3. Update Wellness Activity
4. Delete Wellness Activity
5. Process Activities (Summary)
6. Exit"""

def _ask(prompt: str) -> str:
    return typer.prompt(prompt, default="", show_default=False)

def _ask_index(prompt: str) -> Optional[int]:
    text = _ask(prompt)
    try:
        return int(text)
    except ValueError:
        typer.echo(f"Invalid index: {text!r}")
        return None

def _ask_fields(ws: Workspace, prefix: str = "") -> Optional[tuple]:
    """
    Ask for type, duration, date and notes. Returns None (after reporting
    why) if the duration or date can't be parsed.
    """
    type = _ask(f"Enter {prefix}Activity Type (Exercise, Study, Meditation, etc.)")

    duration = parse_duration(_ask(f"Enter {prefix}Duration (in minutes)").strip())
    if not duration.ok:
        typer.echo(f"Error parsing duration: {duration.message}")
        return None

    date = ws.parse_date(_ask(f"Enter {prefix}Date (dd.MM.yyyy)"))
    if not date.ok:
        typer.echo(f"Error parsing date: {date.message}")
        return None

    notes = _ask(f"Enter {prefix}Notes")
    return type, duration.value, date.value, notes

def add_activity(ws: Workspace) -> None:
    fields = _ask_fields(ws)
    if fields is None:
        return
    ws.store.add(*fields)
    typer.echo("Activity added successfully!")

def view_activities(ws: Workspace) -> None:
    typer.echo(ActivityFormatter.format_listing(ws.store.list()))

def update_activity(ws: Workspace) -> None:
    index = _ask_index("Enter Activity Index to Update")
    if index is None:
        return
    existing = ws.store.get(index)
    if not existing.ok:
        typer.echo(existing.message)
        return
    fields = _ask_fields(ws, prefix="New ")
    if fields is None:
        return
    outcome: Outcome = ws.store.update(index, *fields)
    typer.echo(outcome.message)

def delete_activity(ws: Workspace) -> None:
    index = _ask_index("Enter Activity Index to Delete")
    if index is None:
        return
    typer.echo(ws.store.delete(index).message)

def summarize_activities(ws: Workspace) -> None:
    if ws.store.is_empty():
        typer.echo("No activities to process.")
        return
    typer.echo(ActivityFormatter.format_summary(ws.store.summarize(), ws.config.exercise_type))

ACTIONS: Dict[str, Callable[[Workspace], None]] = {
    "1": add_activity,
    "2": view_activities,
    "3": update_activity,
    "4": delete_activity,
    "5": summarize_activities,
}

EXIT_CHOICE = "6"

def run_menu(ws: Workspace) -> None:
    while True:
        typer.echo(MENU)
        try:
            choice = _ask("Enter your choice").strip()
            if choice == EXIT_CHOICE:
                break
            action = ACTIONS.get(choice)
            if action is None:
                typer.echo("Invalid choice. Please try again.")
                continue
            action(ws)
        except typer.Abort:
            # End of input behaves like Exit
            typer.echo()
            break

    # Save failures are already logged by the activity file
    saved = ws.save()
    if saved.ok:
        typer.echo(saved.message)
    typer.echo("Exiting the application...")
