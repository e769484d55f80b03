"""Client configuration for the Nylas API."""

from dataclasses import dataclass
from enum import Enum

from nylas_client_core.auth.credentials import CredentialResolver


class Region(str, Enum):
    """Nylas data-residency regions and their API endpoints."""

    US = "https://api.us.nylas.com"
    EU = "https://api.eu.nylas.com"


DEFAULT_SERVER_URL = Region.US.value

# Seconds
DEFAULT_TIMEOUT = 90.0


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings shared read-only by every request of a client.

    Attributes:
        api_key: Nylas API key, sent as a bearer token.
        server_url: Base URL of the API. Defaults to the US region.
        client_id: OAuth application client id.
        client_secret: OAuth application client secret.
        timeout: Per-request timeout in seconds.
    """

    api_key: str
    server_url: str = DEFAULT_SERVER_URL
    client_id: str | None = None
    client_secret: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ValueError("api_key must be a non-empty string")
        if isinstance(self.server_url, Region):
            object.__setattr__(self, "server_url", self.server_url.value)
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', server_url={self.server_url!r}, "
            f"client_id={self.client_id!r}, timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None) -> "ClientConfig":
        """Build a config from NYLAS_* environment variables (and .env).

        Raises:
            CredentialNotFoundError: If NYLAS_API_KEY is not set.
            ValueError: If NYLAS_TIMEOUT is not a number.
        """
        resolver = resolver or CredentialResolver()

        api_key = resolver.resolve(env_var_name="NYLAS_API_KEY", required=True)
        server_url = resolver.resolve(env_var_name="NYLAS_API_URI", default=DEFAULT_SERVER_URL, secret=False)
        client_id = resolver.resolve(env_var_name="NYLAS_CLIENT_ID", secret=False)
        client_secret = resolver.resolve(env_var_name="NYLAS_CLIENT_SECRET")
        raw_timeout = resolver.resolve(env_var_name="NYLAS_TIMEOUT", secret=False)

        timeout = DEFAULT_TIMEOUT
        if raw_timeout is not None:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"NYLAS_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from None

        return cls(
            api_key=api_key,
            server_url=server_url,
            client_id=client_id,
            client_secret=client_secret,
            timeout=timeout,
        )
