"""Golf Handlers — upstream fetch + shaping for the six golf entrypoints.

Invariants:
    - "No active tournament" and "player not found" return normal output with an
      `error` (or `message`) field; only upstream failures raise
    - Every output carries a timestamp captured after the fetches complete
    - full_report fetches its three sources concurrently; one failure fails the call

Design Decisions:
    - Handlers fetch and orchestrate, shaping lives in core/shape_* (pure, tested alone)
    - Fixed-arity asyncio.gather for the report: the fan-out is always exactly three
"""

import asyncio

from app.core.domain_types import Tour
from app.core.shape_leaderboard import (
    lpga_leaderboard_entries,
    overview_section,
    pga_leaderboard_entries,
    report_section,
    tournament_summary,
)
from app.core.shape_schedule import schedule_entries, upcoming_entries
from app.core.shape_scorecard import (
    available_players,
    find_competitor,
    player_identity,
    shape_rounds,
)
from app.core.timestamps import utc_now_iso
from app.infrastructure.espn_client import EspnClient
from app.schemas.entrypoints import (
    EmptyInput,
    LpgaLeaderboardInput,
    PgaLeaderboardInput,
    PlayerScorecardInput,
    ScheduleInput,
)

DATA_SOURCE = "ESPN Golf API (live)"


class GolfHandlers:
    """Leaderboards, scorecard, schedule and report entrypoints."""

    def __init__(self, client: EspnClient):
        self.client = client

    async def overview(self, input_data: EmptyInput) -> dict:
        """Free top-10 PGA leaderboard."""
        events = await self.client.events(Tour.PGA)
        event = events.current_event()
        if event is None:
            return {"message": "No active tournament", "fetchedAt": utc_now_iso()}
        return {
            **overview_section(event),
            "fetchedAt": utc_now_iso(),
            "dataSource": DATA_SOURCE,
        }

    async def pga_leaderboard(self, input_data: PgaLeaderboardInput) -> dict:
        events = await self.client.events(Tour.PGA)
        event = events.current_event()
        if event is None:
            return {"error": "No active PGA tournament"}

        scoreboard = await self.client.scoreboard(Tour.PGA, event.id)
        competitors = scoreboard.competitors()
        return {
            "tournament": tournament_summary(event),
            "leaderboard": pga_leaderboard_entries(competitors, input_data.limit),
            "totalPlayers": len(competitors),
            "fetchedAt": utc_now_iso(),
        }

    async def player_scorecard(self, input_data: PlayerScorecardInput) -> dict:
        """Hole-by-hole rounds for one player in the current PGA event."""
        events = await self.client.events(Tour.PGA)
        event = events.current_event()
        if event is None:
            return {"error": "No active tournament"}

        scoreboard = await self.client.scoreboard(Tour.PGA, event.id)
        competitors = scoreboard.competitors()
        player = find_competitor(competitors, input_data.player_id)
        if player is None:
            return {
                "error": "Player not found in current tournament",
                "availablePlayers": available_players(competitors),
            }
        return {
            "tournament": event.name,
            "player": player_identity(player),
            "rounds": shape_rounds(player.linescores),
            "fetchedAt": utc_now_iso(),
        }

    async def pga_schedule(self, input_data: ScheduleInput) -> dict:
        scoreboard = await self.client.scoreboard(Tour.PGA)
        league = scoreboard.league()
        season = league.season if league else None
        return {
            "season": season.display_name if season else None,
            "events": schedule_entries(scoreboard.calendar(), input_data.limit),
            "fetchedAt": utc_now_iso(),
        }

    async def lpga_leaderboard(self, input_data: LpgaLeaderboardInput) -> dict:
        """LPGA leaderboard straight from the events feed (no scoreboard call)."""
        events = await self.client.events(Tour.LPGA)
        event = events.current_event()
        if event is None:
            return {"error": "No active LPGA tournament"}
        return {
            "tournament": tournament_summary(event),
            "leaderboard": lpga_leaderboard_entries(
                event.competitors or [], input_data.limit,
            ),
            "fetchedAt": utc_now_iso(),
        }

    async def full_report(self, input_data: EmptyInput) -> dict:
        """Both tours' current events plus the next five PGA dates."""
        pga_events, lpga_events, pga_scoreboard = await asyncio.gather(
            self.client.events(Tour.PGA),
            self.client.events(Tour.LPGA),
            self.client.scoreboard(Tour.PGA),
        )
        return {
            "pga": report_section(pga_events.current_event()),
            "lpga": report_section(lpga_events.current_event()),
            "upcomingPGA": upcoming_entries(pga_scoreboard.calendar()),
            "generatedAt": utc_now_iso(),
        }
