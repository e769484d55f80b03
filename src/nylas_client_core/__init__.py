"""Nylas Client Core - request/response pipeline for the Nylas API.

This library provides the pieces every Nylas resource wrapper sits on:
- Request construction (URL, query strings, headers, JSON body)
- A single-attempt async transport built on httpx
- Schema-validated response decoding with pydantic
- Endpoint-based classification of error responses

Example:
    ```python
    from typing import Any

    from nylas_client_core import APIClient, ClientConfig, RequestDescriptor

    client = APIClient(ClientConfig(api_key="nyk_..."))

    payload = await client.request(
        RequestDescriptor(path="/v3/grants", method="GET", query_params={"limit": 5}),
        response_schema=dict[str, Any],
    )
    ```
"""

from nylas_client_core._version import SDK_NAME, __version__
from nylas_client_core.client import APIClient
from nylas_client_core.config import ClientConfig, Region
from nylas_client_core.request import RequestDescriptor, RequestOptions, RequestOverrides

__all__ = [
    "SDK_NAME",
    "APIClient",
    "ClientConfig",
    "Region",
    "RequestDescriptor",
    "RequestOptions",
    "RequestOverrides",
    "__version__",
]
