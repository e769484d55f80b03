"""Turn a logical request description into wire-ready request options.

Everything in this module is pure: no network access, no logging of
credentials, no mutation of the client configuration.
"""

import json
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from nylas_client_core._version import SDK_NAME, __version__
from nylas_client_core.config import DEFAULT_SERVER_URL, ClientConfig

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# Headers callers are not allowed to replace
_PROTECTED_HEADERS = frozenset(["authorization", "user-agent"])


@dataclass(frozen=True)
class RequestOverrides:
    """Per-request replacements for client-level settings."""

    server_url: str | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class RequestDescriptor:
    """A caller's logical request, before client defaults are applied."""

    path: str
    method: str
    headers: Mapping[str, str] | None = None
    query_params: Mapping[str, Any] | None = None
    body: Any = None
    overrides: RequestOverrides | None = None


@dataclass(frozen=True)
class RequestOptions:
    """A fully resolved request.

    `body` is None when the descriptor carried no body, in which case no
    Content-Type header is present either.
    """

    method: str
    url: httpx.URL
    headers: dict[str, str]
    body: str | None = None
    timeout: float | None = None


def user_agent() -> str:
    return f"{SDK_NAME} v{__version__}"


def to_snake_case(key: str) -> str:
    """Convert a camelCase query key to the snake_case the API expects."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def serialize_query_params(query_params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten query parameters into ordered key/value pairs.

    Mapping values (such as a metadata pair filter) collapse into a single
    ``key:value,key:value`` string, lists repeat the key, and None values
    are dropped.

    Args:
        query_params: Parameters as supplied by the caller.

    Returns:
        List of (key, value) string pairs, ready for URL encoding.
    """
    items: list[tuple[str, str]] = []
    if not query_params:
        return items

    for key, value in query_params.items():
        if value is None:
            continue
        name = to_snake_case(key)

        if isinstance(value, Mapping):
            pairs = [f"{k}:{_format_value(v)}" for k, v in value.items()]
            items.append((name, ",".join(pairs)))
        elif isinstance(value, (list, tuple)):
            items.extend((name, _format_value(item)) for item in value)
        else:
            items.append((name, _format_value(value)))

    return items


def _json_safe(value: Any) -> Any:
    """Replace NaN and infinities with None, as JSON.stringify does."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def serialize_body(body: Any) -> str:
    """Serialize a request body as compact JSON text.

    Non-finite floats become `null`, so the output is always valid JSON.
    """
    return json.dumps(_json_safe(body), separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def build_url(path: str, config: ClientConfig, overrides: RequestOverrides | None = None) -> httpx.URL:
    """Join the resolved base URL with `path` and nothing else."""
    base_url = (overrides and overrides.server_url) or config.server_url or DEFAULT_SERVER_URL
    return httpx.URL(f"{base_url.rstrip('/')}{path}")


def build_headers(
    api_key: str,
    extra_headers: Mapping[str, str] | None = None,
    has_body: bool = False,
) -> dict[str, str]:
    """Build request headers.

    Caller headers override defaults case-insensitively, except for
    Authorization and User-Agent.
    """
    headers = {
        "Accept": "application/json",
        "Authorization": f"Bearer {api_key}",
    }
    if has_body:
        headers["Content-Type"] = "application/json"
    headers["User-Agent"] = user_agent()

    for name, value in (extra_headers or {}).items():
        lowered = name.lower()
        if lowered in _PROTECTED_HEADERS:
            continue
        for existing in [h for h in headers if h.lower() == lowered]:
            del headers[existing]
        headers[name] = value

    return headers


def build_request_options(descriptor: RequestDescriptor, config: ClientConfig) -> RequestOptions:
    """Resolve a RequestDescriptor against the client configuration.

    Args:
        descriptor: The logical request.
        config: Client configuration, read only.

    Returns:
        RequestOptions with URL, headers, serialized body and timeout.
    """
    overrides = descriptor.overrides
    has_body = descriptor.body is not None

    url = build_url(descriptor.path, config, overrides)
    params = serialize_query_params(descriptor.query_params)
    if params:
        url = url.copy_merge_params(httpx.QueryParams(params))

    timeout = config.timeout
    if overrides and overrides.timeout is not None:
        timeout = overrides.timeout

    return RequestOptions(
        method=descriptor.method.upper(),
        url=url,
        headers=build_headers(config.api_key, descriptor.headers, has_body=has_body),
        body=serialize_body(descriptor.body) if has_body else None,
        timeout=timeout,
    )
