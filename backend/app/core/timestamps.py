"""Response timestamps — ISO-8601 UTC with millisecond precision and Z suffix."""

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Current time formatted like 2026-03-01T18:04:05.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
