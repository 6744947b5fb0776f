"""Scorecard Shaping — player lookup and round/hole mapping.

Invariants:
    - Lookup is exact string equality on competitor id, first match wins
    - A miss is answered with at most 10 id/name hints, never an exception
    - Rounds are numbered 1..N in upstream order; holes keep upstream order
"""

from app.core.domain_types import PlayerId
from app.core.espn_types import Competitor, RoundLinescore

MAX_PLAYER_HINTS = 10


def find_competitor(competitors: list[Competitor], player_id: PlayerId) -> Competitor | None:
    for competitor in competitors:
        if competitor.id == player_id:
            return competitor
    return None


def available_players(competitors: list[Competitor]) -> list[dict]:
    """Discovery hints returned when the requested player is not in the field."""
    return [
        {
            "id": c.id,
            "name": c.athlete.display_name if c.athlete else None,
        }
        for c in competitors[:MAX_PLAYER_HINTS]
    ]


def player_identity(competitor: Competitor) -> dict:
    return {
        "id": competitor.id,
        "name": competitor.athlete_name(),
        "country": competitor.flag_country(),
        "totalScore": competitor.score,
    }


def shape_rounds(linescores: list[RoundLinescore] | None) -> list[dict]:
    """Round-by-round scorecard; a round without hole data gets holes=[]."""
    return [
        {
            "round": i + 1,
            "score": rnd.display_value,
            "holes": [
                {
                    "hole": hole.period,
                    "strokes": hole.value,
                    "toPar": hole.score_type.display_value if hole.score_type else None,
                }
                for hole in rnd.linescores or []
            ],
        }
        for i, rnd in enumerate(linescores or [])
    ]
