"""ESPN Client — thin async wrapper over httpx for the public ESPN golf API.

Invariants:
    - Every request carries the static User-Agent header
    - Non-2xx responses raise UpstreamAPIError with the HTTP status; no retry, no backoff
    - Transport failures, non-JSON bodies and non-object bodies also map to UpstreamAPIError (status_code=None)
    - No explicit timeout: the httpx client's own default applies

Design Decisions:
    - The httpx.AsyncClient is injected, not created here: the app lifespan owns
      its lifetime and tests pass one built on httpx.MockTransport
    - Responses parsed into core/espn_types models at this boundary
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from app.core.domain_types import Tour
from app.core.errors import ErrorContext, UpstreamAPIError
from app.core.espn_types import EspnModel, EventsResponse, ScoreboardResponse

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=EspnModel)

DEFAULT_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports/golf"
DEFAULT_USER_AGENT = "golf-intel-agent/1.0"


class EspnClient:
    """Read-only client for /{tour}/events and /{tour}/scoreboard."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self._http = http
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent

    async def fetch_json(
        self, path: str, params: dict[str, str] | None = None,
    ) -> Any:
        """GET base_url + path and return the decoded JSON body."""
        context = ErrorContext(upstream_path=path)
        try:
            response = await self._http.get(
                f"{self.base_url}{path}",
                params=params,
                headers={"User-Agent": self.user_agent},
            )
        except httpx.TransportError as e:
            logger.warning(
                f"Upstream transport error: {e}",
                extra={"upstream_path": path},
            )
            raise UpstreamAPIError(
                f"API transport error: {e}", context=context,
            ) from e

        if not response.is_success:
            logger.warning(
                f"Upstream returned {response.status_code}",
                extra={"upstream_path": path, "status_code": response.status_code},
            )
            raise UpstreamAPIError(
                f"API error: {response.status_code}",
                status_code=response.status_code, context=context,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamAPIError(
                "API returned a non-JSON body",
                status_code=response.status_code, context=context,
            ) from e

    async def events(self, tour: Tour) -> EventsResponse:
        path = f"/{tour.value}/events"
        return self._parse(EventsResponse, await self.fetch_json(path), path)

    async def scoreboard(
        self, tour: Tour, event_id: str | None = None,
    ) -> ScoreboardResponse:
        path = f"/{tour.value}/scoreboard"
        params = {"event": event_id} if event_id else None
        data = await self.fetch_json(path, params=params)
        return self._parse(ScoreboardResponse, data, path)

    @staticmethod
    def _parse(model: type[ModelT], data: Any, path: str) -> ModelT:
        """Validate the body. Malformed fields degrade to None in the models;
        only a body that is not a JSON object is an upstream failure.
        """
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(
                f"Unexpected upstream payload: {e.error_count()} errors",
                extra={"upstream_path": path},
            )
            raise UpstreamAPIError(
                "API returned an unexpected payload",
                context=ErrorContext(upstream_path=path),
            ) from e
