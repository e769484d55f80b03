"""Classification of HTTP error responses by endpoint."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from nylas_client_core.errors.exceptions import (
    NylasApiError,
    NylasAuthError,
    NylasHTTPError,
    NylasTokenValidationError,
    NylasUnparseableErrorResponse,
)
from nylas_client_core.errors.models import ApiErrorPayload, AuthErrorPayload, TokenValidationErrorPayload
from nylas_client_core.validation import Validator, decode_payload, read_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorRule:
    """Maps endpoints to the error shape they return and the exception to raise."""

    name: str
    endpoints: tuple[str, ...]
    schema: type
    build: Callable[[Any, int | None], NylasHTTPError]

    def matches(self, path: str) -> bool:
        # An empty endpoint tuple matches every path
        if not self.endpoints:
            return True
        return any(path_matches(path, endpoint) for endpoint in self.endpoints)


ERROR_RULES: tuple[ErrorRule, ...] = (
    ErrorRule("auth", ("/connect/token", "/connect/revoke"), AuthErrorPayload, NylasAuthError.from_payload),
    ErrorRule(
        "token_validation",
        ("/connect/tokeninfo",),
        TokenValidationErrorPayload,
        NylasTokenValidationError.from_payload,
    ),
    ErrorRule("api", (), ApiErrorPayload, NylasApiError.from_payload),
)


def normalize_path(path: str) -> str:
    path = path.split("?", 1)[0]
    return path.rstrip("/") or "/"


def path_matches(path: str, endpoint: str) -> bool:
    """Return True when `path` is `endpoint`, or ends with it on a segment boundary.

    ``/v3/connect/token`` matches ``/connect/token``; ``/connect/tokeninfo``
    does not.
    """
    path = normalize_path(path)
    return path == endpoint or path.endswith(endpoint)


def match_rule(path: str) -> ErrorRule:
    # The last rule matches every path
    return next(rule for rule in ERROR_RULES if rule.matches(path))


def classify_error(
    path: str,
    status_code: int | None,
    text: str,
    validator: Validator | None = None,
) -> NylasHTTPError:
    """Build the error for a failed response.

    The request path alone decides which payload shape is expected; the
    classifier never tries the shape of another category.

    Args:
        path: Path of the request that failed.
        status_code: HTTP status of the response.
        text: Raw response body.
        validator: Validation capability, defaults to pydantic.

    Returns:
        The classified error, or NylasUnparseableErrorResponse when the body
        does not match the expected shape.
    """
    rule = match_rule(path)
    result = decode_payload(text, rule.schema, validator)

    if not result.success:
        logger.debug(f"Error response from {path} ({status_code}) does not match the {rule.name} error shape")
        return NylasUnparseableErrorResponse(text, status_code=status_code)

    logger.debug(f"Classified error response from {path} ({status_code}) as {rule.name} error")
    return rule.build(result.value, status_code)


async def raise_for_status(response: httpx.Response, path: str, validator: Validator | None = None) -> None:
    """Raise the classified error if `response` is not a 2xx response.

    Args:
        response: HTTP response object
        path: Path of the request that produced it
        validator: Validation capability, defaults to pydantic

    Raises:
        NylasHTTPError subclass based on the request path
    """
    if response.is_success:
        return

    text = await read_text(response)
    raise classify_error(path, response.status_code, text, validator)
