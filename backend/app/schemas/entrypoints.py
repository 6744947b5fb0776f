"""Entrypoint Schemas — typed inputs with defaults, plus the invoke request envelope.

Invariants:
    - Inputs are camelCase on the wire (playerId, windowMs), snake_case in Python
    - limit defaults differ per entrypoint and are not capped: a large limit returns everything
    - playerId is the only required input across all entrypoints

Design Decisions:
    - One model per distinct input shape; entrypoints with the same shape share a model
    - JSON schema for the manifest comes from model_json_schema(by_alias=True)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.core.domain_types import PlayerId


class EntrypointInput(BaseModel):
    """Base for entrypoint inputs: accepts both aliases and field names."""
    model_config = ConfigDict(populate_by_name=True)


class EmptyInput(EntrypointInput):
    """Entrypoints that take no input (overview, full-report)."""


class PgaLeaderboardInput(EntrypointInput):
    limit: int = Field(50, description="Number of players to return")


class LpgaLeaderboardInput(EntrypointInput):
    limit: int = Field(30, description="Number of players")


class ScheduleInput(EntrypointInput):
    limit: int = Field(10, description="Number of upcoming events")


class PlayerScorecardInput(EntrypointInput):
    player_id: PlayerId = Field(
        alias="playerId",
        description='ESPN player ID (e.g., "569" for Justin Rose)',
    )


class AnalyticsInput(EntrypointInput):
    window_ms: int | None = Field(
        None, alias="windowMs", description="Time window in ms",
    )


class AnalyticsTransactionsInput(EntrypointInput):
    window_ms: int | None = Field(None, alias="windowMs")
    limit: int = 50


class InvokeRequest(BaseModel):
    """Body of POST /entrypoints/{key}/invoke. Input is validated per entrypoint."""
    input: dict[str, Any] = Field(default_factory=dict)
