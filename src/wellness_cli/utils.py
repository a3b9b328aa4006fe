import os
import subprocess
import humanize
import logging
import typer

from datetime import timedelta
from pathlib import Path

def edit_file(path: Path) -> bool:
    """
    Open a file in the user's preferred editor and check if it was modified.
    If the file was modified, return True. Otherwise, return False.
    """
    editor = os.getenv("EDITOR", "vim") # Default to vim if $EDITOR is not set

    pre_edit = path.read_text()

    subprocess.run([editor, str(path)], check=True)

    post_edit = path.read_text()

    # Editors like vim add a trailing newline on save, which isn't a real change.
    return pre_edit.strip() != post_edit.strip()

def format_minutes(minutes: int) -> str:
    """
    Render a number of minutes for people, e.g. 105 -> "1 hour and 45 minutes".
    """
    if minutes <= 0:
        return f"{minutes} minutes"
    return humanize.precisedelta(timedelta(minutes=minutes), minimum_unit="minutes")

class EchoHandler(logging.Handler):
    """Send log records to stderr through typer.echo."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            typer.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)

def setup_logging(verbose: bool = False) -> None:
    logger = logging.getLogger("wellness")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, EchoHandler) for h in logger.handlers):
        handler = EchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)
