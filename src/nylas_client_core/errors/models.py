"""Pydantic models for the error payloads returned by the Nylas API.

The API sends snake_case keys; payloads that have already been converted to
camelCase are accepted as well.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _ErrorPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class AuthErrorPayload(_ErrorPayload):
    """Error body from the OAuth token and revoke endpoints."""

    error: str
    error_code: int
    error_description: str
    error_uri: str
    request_id: str | None = None


class TokenValidationErrorDetail(_ErrorPayload):
    http_code: int
    event_code: int
    message: str
    type: str
    request_id: str | None = None


class TokenValidationErrorPayload(_ErrorPayload):
    """Error body from the token introspection endpoint."""

    success: Literal[False]
    error: TokenValidationErrorDetail


class ApiErrorDetail(_ErrorPayload):
    type: str
    message: str
    provider_error: dict[str, Any] | None = None


class ApiErrorPayload(_ErrorPayload):
    """Error body from every other endpoint."""

    request_id: str
    error: ApiErrorDetail
