"""Service test fixtures — fake ESPN upstream + FastAPI test client.

Invariants:
    - Every test gets a fresh FakeEspn with no routes configured
    - get_agent dependency overridden with an agent wired to the fake upstream
    - The FastAPI lifespan does not run under ASGITransport; no real network access

Design Decisions:
    - httpx.MockTransport over patching EspnClient: exercises the real client code
"""

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_agent
from app.config import Settings
from app.infrastructure.espn_client import EspnClient
from app.main import app
from app.services.agent import build_agent
from app.services.handle_golf import GolfHandlers
from tests.services.mock_espn import BASE_URL, FakeEspn


@pytest.fixture
def fake_espn():
    return FakeEspn()


@pytest.fixture
async def espn_client(fake_espn):
    async with httpx.AsyncClient(transport=fake_espn.transport()) as http:
        yield EspnClient(http, base_url=BASE_URL)


@pytest.fixture
def golf(espn_client):
    return GolfHandlers(espn_client)


@pytest.fixture
def payment_tracker():
    """Override in a test module to supply a tracker to the agent."""
    return None


@pytest.fixture
def agent(espn_client, payment_tracker):
    return build_agent(Settings(), espn_client, payment_tracker)


@pytest.fixture
async def client(agent):
    """FastAPI test client with the agent dependency overridden."""
    app.dependency_overrides[get_agent] = lambda: agent

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
