"""Tests for Nylas error payload models."""

import pydantic
import pytest

from nylas_client_core.errors.models import ApiErrorPayload, AuthErrorPayload, TokenValidationErrorPayload


@pytest.mark.unit
def test_auth_error_payload_camel_case():
    payload = AuthErrorPayload.model_validate(
        {
            "requestId": "abc123",
            "error": "invalid_grant",
            "errorCode": 400,
            "errorDescription": "Nylas SDK Test error",
            "errorUri": "https://test.api.nylas.com/docs/errors#test-error",
        }
    )

    assert payload.request_id == "abc123"
    assert payload.error_code == 400
    assert payload.error_description == "Nylas SDK Test error"


@pytest.mark.unit
def test_auth_error_payload_snake_case():
    payload = AuthErrorPayload.model_validate(
        {
            "error": "invalid_grant",
            "error_code": 400,
            "error_description": "Bad code",
            "error_uri": "https://docs.nylas.com",
        }
    )

    assert payload.error_uri == "https://docs.nylas.com"
    assert payload.request_id is None


@pytest.mark.unit
def test_auth_error_payload_requires_description():
    with pytest.raises(pydantic.ValidationError):
        AuthErrorPayload.model_validate({"error": "invalid_grant", "errorCode": 400})


@pytest.mark.unit
def test_token_validation_payload():
    payload = TokenValidationErrorPayload.model_validate(
        {
            "success": False,
            "error": {
                "httpCode": 400,
                "eventCode": 10020,
                "message": "Invalid access token",
                "type": "AuthenticationError",
                "requestId": "abc123",
            },
        }
    )

    assert payload.error.http_code == 400
    assert payload.error.event_code == 10020
    assert payload.error.request_id == "abc123"


@pytest.mark.unit
def test_token_validation_payload_rejects_success_true():
    with pytest.raises(pydantic.ValidationError):
        TokenValidationErrorPayload.model_validate(
            {
                "success": True,
                "error": {"httpCode": 400, "eventCode": 1, "message": "m", "type": "t"},
            }
        )


@pytest.mark.unit
def test_api_error_payload_with_provider_error():
    payload = ApiErrorPayload.model_validate(
        {
            "request_id": "abc123",
            "error": {
                "type": "provider_error",
                "message": "Upstream failure",
                "provider_error": {"code": 503},
            },
        }
    )

    assert payload.error.type == "provider_error"
    assert payload.error.provider_error == {"code": 503}


@pytest.mark.unit
def test_api_error_payload_requires_request_id():
    with pytest.raises(pydantic.ValidationError):
        ApiErrorPayload.model_validate({"error": {"type": "t", "message": "m"}})
