"""Entrypoint Routes — HTTP surface for listing and invoking entrypoints.

Invariants:
    - Not-found conditions are 200 responses with an `error` field
    - Upstream failures map to 502 with a structured error body
"""

import pytest

from tests.services.mock_espn import (
    event,
    events_payload,
    scoreboard_competitor,
    scoreboard_payload,
)


async def test_list_entrypoints(client):
    res = await client.get("/entrypoints")
    assert res.status_code == 200
    keys = [item["key"] for item in res.json()["items"]]
    assert "overview" in keys and "full-report" in keys
    overview = res.json()["items"][0]
    assert overview["price"] == {"amount": 0}


async def test_invoke_without_body(client, fake_espn):
    fake_espn.routes["pga/events"] = events_payload()
    res = await client.post("/entrypoints/overview/invoke")
    assert res.status_code == 200
    assert res.json()["output"]["message"] == "No active tournament"


async def test_invoke_with_input(client, fake_espn):
    fake_espn.routes["pga/events"] = events_payload(event())
    fake_espn.routes["pga/scoreboard"] = scoreboard_payload(
        [scoreboard_competitor(i) for i in range(20)],
    )
    res = await client.post(
        "/entrypoints/pga-leaderboard/invoke", json={"input": {"limit": 5}},
    )
    assert res.status_code == 200
    assert len(res.json()["output"]["leaderboard"]) == 5


async def test_unknown_player_is_success_with_hints(client, fake_espn):
    fake_espn.routes["pga/events"] = events_payload(event())
    fake_espn.routes["pga/scoreboard"] = scoreboard_payload([scoreboard_competitor(1)])
    res = await client.post(
        "/entrypoints/player-scorecard/invoke", json={"input": {"playerId": "x"}},
    )
    assert res.status_code == 200
    body = res.json()["output"]
    assert body["error"] == "Player not found in current tournament"
    assert len(body["availablePlayers"]) == 1


async def test_unknown_entrypoint_is_404(client):
    res = await client.post("/entrypoints/tee-times/invoke", json={"input": {}})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "ENTRYPOINT_NOT_FOUND"


async def test_missing_required_input_is_400(client):
    res = await client.post("/entrypoints/player-scorecard/invoke", json={"input": {}})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize("failing", ["pga/events", "lpga/events", "pga/scoreboard"])
async def test_full_report_upstream_failure_is_502(client, fake_espn, failing):
    fake_espn.routes["pga/events"] = events_payload(event())
    fake_espn.routes["lpga/events"] = events_payload(event())
    fake_espn.routes["pga/scoreboard"] = scoreboard_payload()
    fake_espn.routes[failing] = 500
    res = await client.post("/entrypoints/full-report/invoke")
    assert res.status_code == 502
    body = res.json()
    assert "output" not in body
    assert body["error"]["code"] == "UPSTREAM_API_ERROR"


async def test_analytics_entrypoints_degrade_without_tracker(client):
    summary = await client.post("/entrypoints/analytics/invoke", json={"input": {}})
    txs = await client.post(
        "/entrypoints/analytics-transactions/invoke", json={"input": {"limit": 5}},
    )
    csv = await client.post("/entrypoints/analytics-csv/invoke")
    assert summary.json()["output"]["payments"] == []
    assert txs.json()["output"] == {"transactions": []}
    assert csv.json()["output"] == {"csv": ""}
