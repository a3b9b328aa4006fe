"""
Reading and writing the flat activity file.

Each activity is one line, fields joined by commas in the order
type,duration,date,notes with the date as dd.MM.yyyy. Nothing is escaped, so
a comma inside a type or a note does not survive a save and load.
"""
from wellness.core.store import ActivityStore
from wellness.models import Activity, DATE_FORMAT, ErrorKind, Outcome

import logging
import re
import pendulum

from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
FIELD_COUNT = 4

_DURATION_PATTERN = re.compile(r"[+-]?\d+")


def format_line(activity: Activity) -> str:
    return FIELD_SEPARATOR.join([
        activity.type,
        str(activity.duration),
        activity.formatted_date(),
        activity.notes,
    ])


def parse_duration(text: str) -> Outcome:
    """
    Parse a whole number of minutes. Only an optional sign followed by
    digits is accepted; surrounding whitespace is not.
    """
    if not _DURATION_PATTERN.fullmatch(text):
        return Outcome.failure(ErrorKind.PARSE_ERROR, f"Invalid duration: {text!r}. Expected a whole number of minutes.")
    return Outcome.success(int(text))


def parse_date(text: str) -> Outcome:
    try:
        return Outcome.success(pendulum.from_format(text, DATE_FORMAT).date())
    except ValueError:
        return Outcome.failure(ErrorKind.PARSE_ERROR, f"Invalid date: {text!r}. Expected dd.MM.yyyy.")


class ActivityFile:
    """Persists an ActivityStore to a single text file."""

    def __init__(self, path: Path, exercise_type: str = "Exercise"):
        self.path = Path(path)
        self.exercise_type = exercise_type

    def save(self, store: ActivityStore) -> Outcome:
        """
        Overwrite the file with every activity in the store. Failures are
        logged and returned, never raised.
        """
        try:
            with self.path.open("w", encoding="utf-8", newline="\n") as f:
                for activity in store.list():
                    f.write(format_line(activity) + "\n")
        except OSError as e:
            logger.error("Error saving activity data to %s: %s", self.path, e)
            return Outcome.failure(ErrorKind.IO_ERROR, f"Error saving activity data: {e}")

        logger.info("Saved %d activities to %s", len(store), self.path)
        return Outcome.success(self.path, f"Activity data saved successfully to {self.path}")

    def load(self) -> ActivityStore:
        """
        Build a fresh store from the file.

        A missing file gives an empty store. Lines without exactly four
        fields are skipped, but a four-field line whose duration or date
        cannot be parsed abandons the whole load and gives an empty store.
        """
        if not self.path.exists():
            logger.info("No existing data found at %s, starting with an empty journal.", self.path)
            return self._empty_store()

        activities: List[Activity] = []
        try:
            with self.path.open("r", encoding="utf-8") as f:
                for line in f:
                    line = line.rstrip("\n")
                    fields = line.split(FIELD_SEPARATOR)
                    if len(fields) != FIELD_COUNT:
                        logger.warning("Skipping invalid line: %s", line)
                        continue

                    type, duration_text, date_text, notes = fields
                    duration = parse_duration(duration_text)
                    date = parse_date(date_text)
                    for parsed in (duration, date):
                        if not parsed.ok:
                            logger.error("Error loading activity data from %s: %s", self.path, parsed.message)
                            return self._empty_store()

                    activities.append(Activity(type, duration.value, date.value, notes))
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error loading activity data from %s: %s", self.path, e)
            return self._empty_store()

        logger.info("Loaded %d activities from %s", len(activities), self.path)
        return ActivityStore(activities, exercise_type=self.exercise_type)

    def _empty_store(self) -> ActivityStore:
        return ActivityStore(exercise_type=self.exercise_type)
