"""Structured exceptions raised by the Nylas client."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from nylas_client_core.errors.models import (
        ApiErrorPayload,
        AuthErrorPayload,
        TokenValidationErrorPayload,
    )


class NylasError(Exception):
    """Base exception for everything the client raises."""

    pass


class NylasTransportError(NylasError):
    """The transport never produced a response."""

    def __init__(self, message: str = "Failed to fetch response"):
        super().__init__(message)


class NylasResponseValidationError(NylasError):
    """A successful response whose body does not match the expected schema."""

    def __init__(self, validation_error: Exception | None = None):
        super().__init__(f"Could not validate response from the server. {validation_error}")
        self.validation_error = validation_error


class NylasHTTPError(NylasError):
    """Base exception for HTTP error responses."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NylasApiError(NylasHTTPError):
    """Error response from a regular API endpoint."""

    def __init__(
        self,
        message: str,
        *,
        type: str,
        request_id: str | None = None,
        provider_error: dict[str, Any] | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, status_code=status_code)
        self.type = type
        self.request_id = request_id
        self.provider_error = provider_error

    @classmethod
    def from_payload(cls, payload: "ApiErrorPayload", status_code: int | None = None) -> "NylasApiError":
        return cls(
            payload.error.message,
            type=payload.error.type,
            request_id=payload.request_id,
            provider_error=payload.error.provider_error,
            status_code=status_code,
        )


class NylasAuthError(NylasHTTPError):
    """Error response from the OAuth token or revoke endpoints."""

    def __init__(
        self,
        message: str,
        *,
        error: str,
        error_code: int,
        error_uri: str | None = None,
        request_id: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, status_code=status_code)
        self.error = error
        self.error_code = error_code
        self.error_description = message
        self.error_uri = error_uri
        self.request_id = request_id

    @classmethod
    def from_payload(cls, payload: "AuthErrorPayload", status_code: int | None = None) -> "NylasAuthError":
        return cls(
            payload.error_description,
            error=payload.error,
            error_code=payload.error_code,
            error_uri=payload.error_uri,
            request_id=payload.request_id,
            status_code=status_code,
        )


class NylasTokenValidationError(NylasHTTPError):
    """Error response from the token introspection endpoint."""

    def __init__(
        self,
        message: str,
        *,
        type: str,
        http_code: int,
        event_code: int,
        request_id: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, status_code=status_code)
        self.type = type
        self.http_code = http_code
        self.event_code = event_code
        self.request_id = request_id

    @classmethod
    def from_payload(
        cls, payload: "TokenValidationErrorPayload", status_code: int | None = None
    ) -> "NylasTokenValidationError":
        detail = payload.error
        return cls(
            detail.message,
            type=detail.type,
            http_code=detail.http_code,
            event_code=detail.event_code,
            request_id=detail.request_id,
            status_code=status_code,
        )


class NylasUnparseableErrorResponse(NylasHTTPError):
    """Error response whose body does not match the shape expected for its endpoint."""

    def __init__(self, raw_payload: str, status_code: int | None = None):
        super().__init__(
            f"Received an error but could not validate error response from server: {raw_payload}",
            status_code=status_code,
        )
        self.raw_payload = raw_payload
