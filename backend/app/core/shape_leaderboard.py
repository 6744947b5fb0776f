"""Leaderboard Shaping — pure mapping from ESPN events/competitors to output contracts.

Invariants:
    - Positions are 1..N in upstream order; nothing is sorted
    - Limits only truncate; a limit above the field size returns every competitor
    - Missing fields degrade to sentinels ('N/A', 'Unknown', 'F', None), never raise
    - No IO, no clock: callers add fetchedAt/generatedAt
"""

from app.core.country import country_from_logo_url, country_from_short_name
from app.core.espn_types import Competitor, Event

OVERVIEW_SIZE = 10
REPORT_TOP_PLAYERS = 10


def tournament_summary(event: Event) -> dict:
    """Tournament block used by the full leaderboards."""
    return {
        "id": event.id,
        "name": event.name,
        "status": event.status_description(),
        "round": event.display_period(),
        "date": event.date,
    }


def overview_section(event: Event) -> dict:
    """Free overview: top 10 with country from the dotted shortName."""
    competitors = (event.competitors or [])[:OVERVIEW_SIZE]
    return {
        "tournament": event.name,
        "status": event.status_description() or "Unknown",
        "round": event.display_period() or "N/A",
        "leaderboard": [
            {
                "position": i + 1,
                "name": c.display_name,
                "score": c.score,
                "country": country_from_short_name(c.short_name),
            }
            for i, c in enumerate(competitors)
        ],
    }


def pga_leaderboard_entries(competitors: list[Competitor], limit: int) -> list[dict]:
    """Scoreboard competitors with athlete details and holes-completed status."""
    return [
        {
            "position": i + 1,
            "playerId": c.id,
            "name": c.athlete_name(),
            "score": c.score,
            "country": c.flag_country(),
            "thru": (c.status.thru if c.status else None) or "F",
        }
        for i, c in enumerate(competitors[:limit])
    ]


def lpga_leaderboard_entries(competitors: list[Competitor], limit: int) -> list[dict]:
    """LPGA events-feed competitors with country parsed from the logo URL."""
    return [
        {
            "position": i + 1,
            "name": c.display_name,
            "score": c.score,
            "country": country_from_logo_url(c.logo),
        }
        for i, c in enumerate(competitors[:limit])
    ]


def report_section(event: Event | None) -> dict | None:
    """One tour's block of the full report. None when the tour has no event."""
    if event is None:
        return None
    competitors = (event.competitors or [])[:REPORT_TOP_PLAYERS]
    return {
        "tournament": event.name,
        "status": event.status_description(),
        "round": event.display_period(),
        "topPlayers": [
            {"position": i + 1, "name": c.display_name, "score": c.score}
            for i, c in enumerate(competitors)
        ],
    }
