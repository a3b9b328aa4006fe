from __future__ import annotations

from wellness.models import Activity, ErrorKind, Outcome, Summary

import pendulum

from typing import Dict, Iterator, List


class ActivityStore:
    """
    The activities logged in this session, in insertion order.

    An activity's position in the store is its only identifier, so deleting
    one shifts every later activity down by one.
    """

    def __init__(self, activities: List[Activity] | None = None, exercise_type: str = "Exercise"):
        self._activities: List[Activity] = list(activities or [])
        self.exercise_type = exercise_type

    def __len__(self) -> int:
        return len(self._activities)

    def __iter__(self) -> Iterator[Activity]:
        return iter(list(self._activities))

    def is_empty(self) -> bool:
        return not self._activities

    def add(self, type: str, duration: int, date: pendulum.Date, notes: str) -> Activity:
        activity = Activity(type, duration, date, notes)
        self._activities.append(activity)
        return activity

    def get(self, index: int) -> Outcome:
        if not self._in_range(index):
            return self._not_found(index)
        return Outcome.success(self._activities[index])

    def update(self, index: int, type: str, duration: int, date: pendulum.Date, notes: str) -> Outcome:
        """
        Replace the activity at the given position with a new one.
        """
        if not self._in_range(index):
            return self._not_found(index)
        activity = Activity(type, duration, date, notes)
        self._activities[index] = activity
        return Outcome.success(activity, "Activity updated successfully!")

    def delete(self, index: int) -> Outcome:
        if not self._in_range(index):
            return self._not_found(index)
        removed = self._activities.pop(index)
        return Outcome.success(removed, "Activity deleted successfully!")

    def list(self) -> List[Activity]:
        return list(self._activities)

    def summarize(self) -> Summary:
        """
        Exercise activities (case-insensitive match on type), the total
        duration, and every activity grouped by its exact type.
        """
        wanted = self.exercise_type.lower()
        exercise = tuple(a for a in self._activities if a.type.lower() == wanted)
        total_duration = sum(a.duration for a in self._activities)

        # dicts keep insertion order, so buckets follow first occurrence
        by_type: Dict[str, List[Activity]] = {}
        for activity in self._activities:
            by_type.setdefault(activity.type, []).append(activity)

        return Summary(
            exercise=exercise,
            total_duration=total_duration,
            by_type={t: tuple(group) for t, group in by_type.items()},
        )

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._activities)

    def _not_found(self, index: int) -> Outcome:
        return Outcome.failure(ErrorKind.NOT_FOUND, f"Activity not found at index {index}.")
