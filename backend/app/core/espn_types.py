"""ESPN Payload Types — explicit optional-field schema for the upstream golf API.

Invariants:
    - Every field is optional; absent or wrongly typed upstream data becomes None, never an error
    - Only a body that is not a JSON object fails validation
    - Field names are snake_case in Python, camelCase on the wire (alias generator)
    - Unknown upstream fields are ignored
    - Numeric ids/names are coerced to str so playerId equality is exact string equality

Design Decisions:
    - Score, strokes, period and thru stay Any: ESPN returns strings on some feeds
      and numbers on others, and they are passed through unchanged
    - Navigation helpers (current_event, competitors, league) live on the
      response models so shaping code never indexes raw lists
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel


class EspnModel(BaseModel):
    """Base for all upstream payload models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def degrade_malformed(cls, value, handler, info):
        """A wrongly typed field becomes its default (None) instead of failing the payload."""
        try:
            return handler(value)
        except ValidationError:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


# ─── Status ──────────────────────────────────────────────────────

class StatusType(EspnModel):
    description: str | None = None


class FullStatus(EspnModel):
    type: StatusType | None = None
    display_period: Any = None


class CompetitorStatus(EspnModel):
    thru: Any = None


# ─── Athletes & Linescores ───────────────────────────────────────

class Flag(EspnModel):
    alt: str | None = None


class Athlete(EspnModel):
    display_name: str | None = None
    flag: Flag | None = None


class ScoreType(EspnModel):
    display_value: str | None = None


class HoleLinescore(EspnModel):
    """One hole within a round: period is the hole number, value the strokes."""
    period: Any = None
    value: Any = None
    score_type: ScoreType | None = None


class RoundLinescore(EspnModel):
    """One round: display_value is the round score, linescores the holes."""
    display_value: str | None = None
    linescores: list[HoleLinescore] | None = None


class Competitor(EspnModel):
    id: str | None = None
    display_name: str | None = None
    short_name: str | None = None
    score: Any = None
    logo: str | None = None
    athlete: Athlete | None = None
    status: CompetitorStatus | None = None
    linescores: list[RoundLinescore] | None = None

    def athlete_name(self) -> str | None:
        """Athlete display name, falling back to the competitor display name."""
        athlete_name = self.athlete.display_name if self.athlete else None
        return athlete_name or self.display_name

    def flag_country(self) -> str:
        """Country from the athlete flag, 'Unknown' when absent."""
        if self.athlete and self.athlete.flag and self.athlete.flag.alt:
            return self.athlete.flag.alt
        return "Unknown"


# ─── Events ──────────────────────────────────────────────────────

class Competition(EspnModel):
    competitors: list[Competitor] | None = None


class Event(EspnModel):
    id: str | None = None
    name: str | None = None
    date: str | None = None
    full_status: FullStatus | None = None
    competitors: list[Competitor] | None = None
    competitions: list[Competition] | None = None

    def status_description(self) -> str | None:
        if self.full_status and self.full_status.type:
            return self.full_status.type.description
        return None

    def display_period(self) -> Any:
        return self.full_status.display_period if self.full_status else None


class CalendarEntry(EspnModel):
    id: str | None = None
    label: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class Season(EspnModel):
    display_name: str | None = None


class League(EspnModel):
    calendar: list[CalendarEntry] | None = None
    season: Season | None = None


# ─── Responses ───────────────────────────────────────────────────

class EventsResponse(EspnModel):
    """GET /{tour}/events"""
    events: list[Event] | None = None

    def current_event(self) -> Event | None:
        """First listed event, or None when there is no active tournament."""
        return self.events[0] if self.events else None


class ScoreboardResponse(EspnModel):
    """GET /{tour}/scoreboard[?event=ID]"""
    events: list[Event] | None = None
    leagues: list[League] | None = None

    def competitors(self) -> list[Competitor]:
        """events[0].competitions[0].competitors, or [] at any missing level."""
        if not self.events:
            return []
        competitions = self.events[0].competitions
        if not competitions:
            return []
        return competitions[0].competitors or []

    def league(self) -> League | None:
        return self.leagues[0] if self.leagues else None

    def calendar(self) -> list[CalendarEntry]:
        league = self.league()
        return (league.calendar if league else None) or []
