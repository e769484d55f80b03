"""Tests for error response classification."""

import json

import pytest
from httpx import Response

from nylas_client_core.errors.exceptions import (
    NylasApiError,
    NylasAuthError,
    NylasTokenValidationError,
    NylasUnparseableErrorResponse,
)
from nylas_client_core.errors.handler import classify_error, match_rule, path_matches, raise_for_status
from nylas_client_core.validation import ValidationResult

AUTH_PAYLOAD = {
    "requestId": "abc123",
    "error": "Test error",
    "errorCode": 400,
    "errorDescription": "Nylas SDK Test error",
    "errorUri": "https://test.api.nylas.com/docs/errors#test-error",
}

TOKEN_INFO_PAYLOAD = {
    "success": False,
    "error": {
        "httpCode": 400,
        "eventCode": 10020,
        "message": "Invalid access token",
        "type": "AuthenticationError",
        "requestId": "abc123",
    },
}

API_PAYLOAD = {
    "requestId": "abc123",
    "error": {"type": "invalid_request_error", "message": "Invalid request"},
}


@pytest.mark.unit
@pytest.mark.parametrize("path", ["/connect/token", "/connect/revoke", "/v3/connect/token", "/connect/token/"])
def test_auth_endpoints_raise_auth_error(path):
    error = classify_error(path, 400, json.dumps(AUTH_PAYLOAD))

    assert isinstance(error, NylasAuthError)
    assert error.error_description == "Nylas SDK Test error"
    assert error.request_id == "abc123"
    assert error.status_code == 400


@pytest.mark.unit
def test_tokeninfo_raises_token_validation_error():
    error = classify_error("/connect/tokeninfo", 400, json.dumps(TOKEN_INFO_PAYLOAD))

    assert isinstance(error, NylasTokenValidationError)
    assert error.event_code == 10020
    assert str(error) == "Invalid access token"


@pytest.mark.unit
def test_tokeninfo_with_query_string():
    error = classify_error("/v3/connect/tokeninfo?id_token=abc", 400, json.dumps(TOKEN_INFO_PAYLOAD))

    assert isinstance(error, NylasTokenValidationError)


@pytest.mark.unit
def test_other_endpoints_raise_api_error():
    error = classify_error("/events", 400, json.dumps(API_PAYLOAD))

    assert isinstance(error, NylasApiError)
    assert error.type == "invalid_request_error"
    assert str(error) == "Invalid request"


@pytest.mark.unit
def test_no_guessing_across_categories():
    """An auth-shaped body on a regular endpoint is not an auth error."""
    error = classify_error("/events", 400, json.dumps(AUTH_PAYLOAD))

    assert isinstance(error, NylasUnparseableErrorResponse)


@pytest.mark.unit
def test_auth_endpoint_with_api_shape_is_unparseable():
    text = json.dumps(API_PAYLOAD)

    error = classify_error("/connect/token", 400, text)

    assert isinstance(error, NylasUnparseableErrorResponse)
    assert text in str(error)


@pytest.mark.unit
@pytest.mark.parametrize("text", ['{"invalid": true}', "<html>Bad Gateway</html>", ""])
def test_unexpected_body_is_unparseable(text):
    error = classify_error("/test", 502, text)

    assert isinstance(error, NylasUnparseableErrorResponse)
    assert error.raw_payload == text
    assert error.status_code == 502
    assert str(error).startswith("Received an error but could not validate error response from server: ")


@pytest.mark.unit
def test_custom_validator_is_used():
    class RejectAll:
        def validate(self, schema, data):
            return ValidationResult.fail(ValueError("rejected"))

    error = classify_error("/events", 400, json.dumps(API_PAYLOAD), RejectAll())

    assert isinstance(error, NylasUnparseableErrorResponse)


@pytest.mark.unit
def test_path_matching():
    assert path_matches("/connect/token", "/connect/token")
    assert path_matches("/v3/connect/token", "/connect/token")
    assert not path_matches("/connect/tokeninfo", "/connect/token")
    assert not path_matches("/reconnect/token", "/connect/token")


@pytest.mark.unit
def test_match_rule_order():
    assert match_rule("/connect/token").name == "auth"
    assert match_rule("/connect/revoke").name == "auth"
    assert match_rule("/connect/tokeninfo").name == "token_validation"
    assert match_rule("/v3/grants").name == "api"


@pytest.mark.unit
async def test_raise_for_status_success_response():
    """Test raise_for_status doesn't raise for successful responses."""
    await raise_for_status(Response(status_code=200, json={"ok": True}), "/events")


@pytest.mark.unit
async def test_raise_for_status_raises_classified_error():
    response = Response(status_code=404, json={"request_id": "r1", "error": {"type": "not_found", "message": "Gone"}})

    with pytest.raises(NylasApiError) as exc_info:
        await raise_for_status(response, "/v3/grants/abc")

    assert exc_info.value.status_code == 404
    assert exc_info.value.request_id == "r1"
