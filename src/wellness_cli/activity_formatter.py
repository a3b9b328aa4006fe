from wellness.models import Activity, Summary

from wellness_cli.utils import format_minutes

from rich.table import Table

from typing import List

class ActivityFormatter:

    @classmethod
    def format_listing(cls, activities: List[Activity]) -> str:
        if not activities:
            return "No activities recorded."
        return "\n".join(f"{index}: {activity}" for index, activity in enumerate(activities))

    @classmethod
    def format_summary(cls, summary: Summary, exercise_type: str = "Exercise") -> str:
        lines = []
        lines.append(f"{exercise_type} Activities:")
        if summary.exercise:
            lines.extend(str(activity) for activity in summary.exercise)
        else:
            lines.append("(none)")

        lines.append("")
        total = f"Total Duration of all activities: {summary.total_duration} minutes"
        if summary.total_duration > 0:
            total += f" ({format_minutes(summary.total_duration)})"
        lines.append(total)

        lines.append("")
        lines.append("Activities grouped by type:")
        for type, activities in summary.by_type.items():
            lines.append(f"{type}:")
            lines.extend(f"  {activity}" for activity in activities)

        return "\n".join(lines)

    @classmethod
    def activity_table(cls, activities: List[Activity]) -> Table:
        """
        ┌───┬──────────┬──────────┬────────────┬────────────┐
        │ # │ Type     │ Duration │ Date       │ Notes      │
        ├───┼──────────┼──────────┼────────────┼────────────┤
        │ 0 │ Exercise │ 30m      │ 01.03.2025 │ Long run   │
        └───┴──────────┴──────────┴────────────┴────────────┘
        """
        table = Table()
        table.add_column("#", justify="right")
        table.add_column("Type")
        table.add_column("Duration", justify="right")
        table.add_column("Date")
        table.add_column("Notes")

        for index, activity in enumerate(activities):
            table.add_row(str(index), activity.type, cls._short_duration(activity),
                          activity.formatted_date(), activity.notes)

        table.add_section()
        total = sum(activity.duration for activity in activities)
        table.add_row("", "TOTAL", f"{total}m", "", "")
        return table

    @classmethod
    def _short_duration(cls, activity: Activity) -> str:
        hours, minutes = divmod(activity.duration, 60)
        if hours > 0:
            return f"{hours}h {minutes}m"
        return f"{activity.duration}m"
