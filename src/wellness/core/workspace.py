from wellness.core.activity_file import ActivityFile, parse_date
from wellness.core.config import Config
from wellness.core.store import ActivityStore
from wellness.models import ErrorKind, Outcome

import dateparser
import re
import pendulum

from datetime import datetime, time
from typing import Optional

# Whole words and plain numbers only, e.g. "yesterday" or "2 days ago".
_PHRASE_PATTERN = re.compile(r"(?:[^\W\d_]+|\d+)(?:\s+(?:[^\W\d_]+|\d+))*")
_WORD_PATTERN = re.compile(r"[^\W\d_]")


def _is_phrase(text: str) -> bool:
    return bool(_PHRASE_PATTERN.fullmatch(text)) and bool(_WORD_PATTERN.search(text))


class Workspace:
    """
    Everything a command needs: the configuration, the activity file and the
    store loaded from it. Built once per process and handed to each command.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config.load()
        self.file = ActivityFile(self.config.data_file, exercise_type=self.config.exercise_type)
        self.store: ActivityStore = self.file.load()

    def today(self) -> pendulum.Date:
        """
        Get today's date.
        """
        return pendulum.today().date()

    def parse_date(self, text: Optional[str]) -> Outcome:
        """
        Resolve a date typed by the user. The journal's own dd.MM.yyyy format
        wins; otherwise phrases of words and plain numbers such as "today" or
        "2 days ago" are accepted, read day-first. Anything else that misses
        the fixed format is a parse error.
        """
        if text is None or not text.strip():
            return Outcome.failure(ErrorKind.PARSE_ERROR, "A date is required (dd.MM.yyyy).")

        exact = parse_date(text.strip())
        if exact.ok:
            return exact

        if not _is_phrase(text.strip()):
            return exact

        today = self.today()
        dt = dateparser.parse(
            text,
            settings={
                "DATE_ORDER": "DMY",
                "PREFER_DATES_FROM": "past",
                "RELATIVE_BASE": datetime.combine(today, time.min),
                "RETURN_AS_TIMEZONE_AWARE": False,
                "STRICT_PARSING": True,
            },
        )
        if dt is None:
            return exact

        return Outcome.success(pendulum.date(dt.year, dt.month, dt.day))

    def save(self) -> Outcome:
        return self.file.save(self.store)
