from __future__ import annotations

import pendulum

from dataclasses import dataclass
from datetime import timedelta

DATE_FORMAT = "DD.MM.YYYY"

@dataclass(frozen=True)
class Activity:
    """One logged wellness event. Replaced wholesale, never edited in place."""
    type: str  # Free-text category, e.g. "Exercise" or "Study"
    duration: int  # Minutes
    date: pendulum.Date
    notes: str = ""

    def duration_delta(self) -> timedelta:
        return timedelta(minutes=self.duration)

    def formatted_date(self) -> str:
        return self.date.format(DATE_FORMAT)

    def __str__(self) -> str:
        return (f"{self.type} | Duration: {self.duration} mins | "
                f"Date: {self.formatted_date()} | Notes: {self.notes}")
