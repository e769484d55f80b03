"""The Nylas API client facade."""

from typing import Any

import httpx

from nylas_client_core.config import ClientConfig
from nylas_client_core.errors.handler import raise_for_status
from nylas_client_core.request import RequestDescriptor, RequestOptions, build_request_options
from nylas_client_core.transport.http import HttpxTransport, SendFn, build_httpx_request, invoke
from nylas_client_core.validation import Validator, default_validator, read_response


class APIClient:
    """Build, send and decode requests against the Nylas API.

    The client holds only its immutable configuration and the send and
    validator capabilities, so concurrent `request()` calls are independent.

    Args:
        config: Client configuration.
        send: Async callable performing the network call. Defaults to
            `HttpxTransport().send`.
        validator: Schema validation capability. Defaults to pydantic.

    Example:
        ```python
        client = APIClient(ClientConfig(api_key="nyk_..."))
        grant = await client.request(
            RequestDescriptor(path="/v3/grants/abc123", method="GET"),
            response_schema=GrantResponse,
        )
        ```
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        send: SendFn | None = None,
        validator: Validator | None = None,
    ) -> None:
        self._config = config
        self._send = send or HttpxTransport().send
        self._validator = validator or default_validator

    @classmethod
    def from_env(cls, **kwargs: Any) -> "APIClient":
        """Create a client from NYLAS_* environment variables."""
        return cls(ClientConfig.from_env(), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def server_url(self) -> str:
        return self._config.server_url

    @property
    def client_id(self) -> str | None:
        return self._config.client_id

    @property
    def client_secret(self) -> str | None:
        return self._config.client_secret

    def request_options(self, descriptor: RequestDescriptor) -> RequestOptions:
        return build_request_options(descriptor, self._config)

    def new_request(self, descriptor: RequestDescriptor) -> httpx.Request:
        return build_httpx_request(self.request_options(descriptor))

    async def request_with_response(self, response: httpx.Response, *, response_schema: Any) -> Any:
        """Validate the body of an already received response."""
        return await read_response(response, response_schema, self._validator)

    async def request(self, descriptor: RequestDescriptor, *, response_schema: Any) -> Any:
        """Send a request and return its validated payload.

        Args:
            descriptor: The logical request.
            response_schema: Expected shape of a successful response body.

        Returns:
            The payload validated against `response_schema`.

        Raises:
            NylasTransportError: If no response was obtained.
            NylasResponseValidationError: If a 2xx body does not match the schema.
            NylasAuthError: On errors from the token and revoke endpoints.
            NylasTokenValidationError: On errors from the token info endpoint.
            NylasApiError: On errors from any other endpoint.
            NylasUnparseableErrorResponse: If an error body has an unexpected shape.
        """
        options = self.request_options(descriptor)
        response = await invoke(self._send, options)

        if not response.is_success:
            await raise_for_status(response, descriptor.path, self._validator)

        return await self.request_with_response(response, response_schema=response_schema)
