"""Entrypoint Registry — explicit key -> (input schema, price, handler) routing.

Invariants:
    - Every key -> handler mapping is visible in build_entrypoints(); no auto-discovery
    - Input is validated against the entrypoint's model before the handler runs
    - invoke() always returns an {"output": ...} envelope; unknown keys raise
      EntrypointNotFoundError, invalid input raises InputValidationError
    - Prices are declared here and only reported; charging happens outside this service

Design Decisions:
    - Frozen dataclass per entrypoint: the manifest and the dispatcher read the same record
    - Registration order is preserved for the manifest listing
"""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from app.core.domain_types import PriceMinorUnits
from app.core.errors import EntrypointNotFoundError, InputValidationError
from app.core.payment_protocols import PaymentTracker
from app.infrastructure.espn_client import EspnClient
from app.schemas.entrypoints import (
    AnalyticsInput,
    AnalyticsTransactionsInput,
    EmptyInput,
    LpgaLeaderboardInput,
    PgaLeaderboardInput,
    PlayerScorecardInput,
    ScheduleInput,
)
from app.services.handle_analytics import AnalyticsHandlers
from app.services.handle_golf import GolfHandlers

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Awaitable[dict]]


@dataclass(frozen=True)
class Entrypoint:
    """A named, priced, independently invocable capability."""
    key: str
    description: str
    input_model: type[BaseModel]
    price: PriceMinorUnits
    handler: Handler

    def describe(self) -> dict:
        """Manifest entry: key, description, price and JSON input schema."""
        return {
            "key": self.key,
            "description": self.description,
            "price": {"amount": self.price},
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
        }


class EntrypointRegistry:
    """Ordered collection of entrypoints with validated dispatch."""

    def __init__(self, entrypoints: list[Entrypoint]):
        self._entrypoints: dict[str, Entrypoint] = {}
        for entrypoint in entrypoints:
            if entrypoint.key in self._entrypoints:
                raise ValueError(f"Duplicate entrypoint key: {entrypoint.key}")
            self._entrypoints[entrypoint.key] = entrypoint

    def __contains__(self, key: str) -> bool:
        return key in self._entrypoints

    def __iter__(self):
        return iter(self._entrypoints.values())

    def __len__(self) -> int:
        return len(self._entrypoints)

    def get(self, key: str) -> Entrypoint:
        entrypoint = self._entrypoints.get(key)
        if entrypoint is None:
            raise EntrypointNotFoundError(key)
        return entrypoint

    def manifest(self) -> list[dict]:
        return [entrypoint.describe() for entrypoint in self]

    async def invoke(self, key: str, raw_input: dict | None = None) -> dict:
        """Validate input, run the handler, wrap the result as {"output": ...}."""
        entrypoint = self.get(key)
        try:
            input_data = entrypoint.input_model.model_validate(raw_input or {})
        except ValidationError as e:
            raise InputValidationError(key, _validation_details(e)) from e

        started = time.perf_counter()
        output = await entrypoint.handler(input_data)
        logger.info(
            f"Entrypoint {key} completed",
            extra={
                "entrypoint": key,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return {"output": output}


def _validation_details(exc: ValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]


def build_entrypoints(
    client: EspnClient, tracker: PaymentTracker | None,
) -> EntrypointRegistry:
    """Declare every entrypoint. Adding one requires editing this list."""
    golf = GolfHandlers(client)
    analytics = AnalyticsHandlers(tracker)

    return EntrypointRegistry([
        # Free tier
        Entrypoint(
            "overview",
            "Free overview - current PGA Tour leaderboard (top 10 players)",
            EmptyInput, PriceMinorUnits(0), golf.overview,
        ),

        # Paid golf data
        Entrypoint(
            "pga-leaderboard",
            "Full PGA Tour tournament leaderboard with all players",
            PgaLeaderboardInput, PriceMinorUnits(1000), golf.pga_leaderboard,
        ),
        Entrypoint(
            "player-scorecard",
            "Get detailed hole-by-hole scores for a specific player in current tournament",
            PlayerScorecardInput, PriceMinorUnits(2000), golf.player_scorecard,
        ),
        Entrypoint(
            "pga-schedule",
            "Upcoming PGA Tour tournament schedule",
            ScheduleInput, PriceMinorUnits(2000), golf.pga_schedule,
        ),
        Entrypoint(
            "lpga-leaderboard",
            "Current LPGA Tour leaderboard",
            LpgaLeaderboardInput, PriceMinorUnits(3000), golf.lpga_leaderboard,
        ),
        Entrypoint(
            "full-report",
            "Comprehensive report: PGA + LPGA leaderboards and upcoming schedule",
            EmptyInput, PriceMinorUnits(5000), golf.full_report,
        ),

        # Analytics (free)
        Entrypoint(
            "analytics",
            "Payment analytics summary",
            AnalyticsInput, PriceMinorUnits(0), analytics.summary,
        ),
        Entrypoint(
            "analytics-transactions",
            "Recent payment transactions",
            AnalyticsTransactionsInput, PriceMinorUnits(0), analytics.transactions,
        ),
        Entrypoint(
            "analytics-csv",
            "Export payment data as CSV",
            AnalyticsInput, PriceMinorUnits(0), analytics.csv,
        ),
    ])
