"""Tests for the error hierarchy — codes, statuses and response envelopes."""

from app.core.errors import (
    EntrypointNotFoundError,
    ErrorCategory,
    ErrorContext,
    InputValidationError,
    UpstreamAPIError,
)


def test_upstream_error_carries_status_and_502():
    err = UpstreamAPIError(
        "API error: 503", status_code=503,
        context=ErrorContext(upstream_path="/pga/events"),
    )
    assert err.status_code == 503
    assert err.http_status == 502
    assert err.category == ErrorCategory.EXTERNAL_API
    body = err.to_response()["error"]
    assert body["code"] == "UPSTREAM_API_ERROR"
    assert body["context"]["upstream_path"] == "/pga/events"


def test_entrypoint_not_found_is_404():
    err = EntrypointNotFoundError("nope")
    assert err.http_status == 404
    assert err.to_response()["error"]["context"]["entrypoint"] == "nope"


def test_input_validation_error_includes_details():
    details = [{"field": "playerId", "message": "Field required", "type": "missing"}]
    err = InputValidationError("player-scorecard", details)
    assert err.http_status == 400
    assert err.to_response()["error"]["details"] == details
