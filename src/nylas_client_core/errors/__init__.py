"""Error types and error payload models for the Nylas API.

Classification of error responses lives in `nylas_client_core.errors.handler`.
"""

from nylas_client_core.errors.exceptions import (
    NylasApiError,
    NylasAuthError,
    NylasError,
    NylasHTTPError,
    NylasResponseValidationError,
    NylasTokenValidationError,
    NylasTransportError,
    NylasUnparseableErrorResponse,
)
from nylas_client_core.errors.models import (
    ApiErrorDetail,
    ApiErrorPayload,
    AuthErrorPayload,
    TokenValidationErrorDetail,
    TokenValidationErrorPayload,
)

__all__ = [
    "ApiErrorDetail",
    "ApiErrorPayload",
    "AuthErrorPayload",
    "NylasApiError",
    "NylasAuthError",
    "NylasError",
    "NylasHTTPError",
    "NylasResponseValidationError",
    "NylasTokenValidationError",
    "NylasTransportError",
    "NylasUnparseableErrorResponse",
    "TokenValidationErrorDetail",
    "TokenValidationErrorPayload",
]
