"""Schedule Shaping — calendar entries passed through without date handling."""

from app.core.espn_types import CalendarEntry

REPORT_SCHEDULE_SIZE = 5


def schedule_entries(calendar: list[CalendarEntry], limit: int) -> list[dict]:
    return [
        {
            "id": entry.id,
            "name": entry.label,
            "startDate": entry.start_date,
            "endDate": entry.end_date,
        }
        for entry in calendar[:limit]
    ]


def upcoming_entries(calendar: list[CalendarEntry]) -> list[dict]:
    """Short schedule for the full report: name and start date only."""
    return [
        {"name": entry.label, "startDate": entry.start_date}
        for entry in calendar[:REPORT_SCHEDULE_SIZE]
    ]
