"""Transport layer: one network call per request, no retries.

Example:
    ```python
    from nylas_client_core.transport import HttpxTransport, invoke

    response = await invoke(HttpxTransport().send, options)
    ```
"""

from nylas_client_core.transport.http import HttpxTransport, SendFn, build_httpx_request, invoke

__all__ = [
    "HttpxTransport",
    "SendFn",
    "build_httpx_request",
    "invoke",
]
