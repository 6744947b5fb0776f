"""ESPN Client — URL building, header, status and payload error mapping."""

import httpx
import pytest

from app.core.domain_types import Tour
from app.core.errors import UpstreamAPIError
from app.infrastructure.espn_client import EspnClient
from tests.services.mock_espn import BASE_URL, events_payload, event


async def test_fetch_json_builds_url_from_base(espn_client, fake_espn):
    fake_espn.routes["lpga/events"] = events_payload()
    await espn_client.fetch_json("/lpga/events")
    assert str(fake_espn.requests[0].url) == f"{BASE_URL}/lpga/events"


async def test_non_success_status_raises_with_code(espn_client, fake_espn):
    fake_espn.routes["pga/events"] = 429
    with pytest.raises(UpstreamAPIError) as exc_info:
        await espn_client.events(Tour.PGA)
    assert exc_info.value.status_code == 429
    assert exc_info.value.message == "API error: 429"
    assert exc_info.value.context.upstream_path == "/pga/events"


async def test_missing_route_is_upstream_404(espn_client):
    with pytest.raises(UpstreamAPIError) as exc_info:
        await espn_client.events(Tour.LPGA)
    assert exc_info.value.status_code == 404


async def test_no_retry_on_failure(espn_client, fake_espn):
    fake_espn.routes["pga/events"] = 502
    with pytest.raises(UpstreamAPIError):
        await espn_client.events(Tour.PGA)
    assert len(fake_espn.requests) == 1


async def test_scoreboard_event_param(espn_client, fake_espn):
    fake_espn.routes["pga/scoreboard"] = {}
    await espn_client.scoreboard(Tour.PGA, "401")
    await espn_client.scoreboard(Tour.PGA)
    assert fake_espn.requests[0].url.params.get("event") == "401"
    assert "event" not in fake_espn.requests[1].url.params


async def test_events_parsed_into_model(espn_client, fake_espn):
    fake_espn.routes["pga/events"] = events_payload(event(name="Genesis"))
    resp = await espn_client.events(Tour.PGA)
    assert resp.current_event().name == "Genesis"


async def test_non_object_payload_is_upstream_error(espn_client, fake_espn):
    fake_espn.routes["pga/events"] = ["not", "an", "object"]
    with pytest.raises(UpstreamAPIError):
        await espn_client.events(Tour.PGA)


async def test_wrongly_typed_events_degrade_to_no_event(espn_client, fake_espn):
    fake_espn.routes["pga/events"] = {"events": "not-a-list"}
    resp = await espn_client.events(Tour.PGA)
    assert resp.current_event() is None


async def test_transport_error_maps_to_upstream_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(refuse)) as http:
        client = EspnClient(http, base_url=BASE_URL)
        with pytest.raises(UpstreamAPIError) as exc_info:
            await client.events(Tour.PGA)
    assert exc_info.value.status_code is None


async def test_non_json_body_is_upstream_error():
    def html(request):
        return httpx.Response(200, text="<html>maintenance</html>")

    async with httpx.AsyncClient(transport=httpx.MockTransport(html)) as http:
        client = EspnClient(http, base_url=BASE_URL)
        with pytest.raises(UpstreamAPIError):
            await client.fetch_json("/pga/events")
