"""Single-attempt HTTP transport built on httpx.

The client talks to the network through a *send* capability: an async
callable that takes `RequestOptions` and returns an `httpx.Response`, or None
when no response could be obtained. `HttpxTransport` is the default
implementation.

Example:
    ```python
    import httpx

    from nylas_client_core.transport import HttpxTransport

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"request_id": "abc123"})

    transport = HttpxTransport(transport=httpx.MockTransport(handler))
    response = await transport.send(options)
    ```
"""

import logging
from collections.abc import Awaitable, Callable

import httpx

from nylas_client_core.errors.exceptions import NylasTransportError
from nylas_client_core.request import RequestOptions

logger = logging.getLogger(__name__)

SendFn = Callable[[RequestOptions], Awaitable[httpx.Response | None]]


def build_httpx_request(options: RequestOptions) -> httpx.Request:
    """Build the `httpx.Request` described by `options`."""
    content = options.body.encode("utf-8") if options.body is not None else None
    return httpx.Request(
        options.method,
        options.url,
        headers=options.headers,
        content=content,
        extensions={"timeout": httpx.Timeout(options.timeout).as_dict()},
    )


class HttpxTransport:
    """Send each request once, by default through a short-lived `httpx.AsyncClient`.

    Nothing is kept between calls, so one instance can be shared by any
    number of concurrent requests.

    Args:
        transport: Optional httpx transport, e.g. `httpx.MockTransport` in tests.
            The caller owns it; it is used directly and never closed here.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    async def send(self, options: RequestOptions) -> httpx.Response:
        request = build_httpx_request(options)

        # An injected transport belongs to the caller and is never closed here
        if self._transport is not None:
            response = await self._transport.handle_async_request(request)
            response.request = request
            await response.aread()
            return response

        async with httpx.AsyncClient() as client:
            response = await client.send(request)
            await response.aread()
        return response


async def invoke(send: SendFn, options: RequestOptions) -> httpx.Response:
    """Perform exactly one network call.

    Args:
        send: Send capability.
        options: The resolved request.

    Returns:
        The raw response, whatever its status code.

    Raises:
        NylasTransportError: If no response was obtained at all.
    """
    logger.debug(f"{options.method} {options.url}")
    try:
        response = await send(options)
    except httpx.TransportError as e:
        logger.debug(f"{options.method} {options.url} failed before a response arrived: {e}")
        raise NylasTransportError() from e

    if response is None:
        raise NylasTransportError()

    logger.debug(f"{options.method} {options.url} -> {response.status_code}")
    return response
