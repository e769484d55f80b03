"""Credential resolution for Nylas client configuration.

Example:
    ```python
    from nylas_client_core.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="NYLAS_API_KEY", required=True)
    ```
"""

from nylas_client_core.auth.credentials import CredentialResolver
from nylas_client_core.auth.exceptions import CredentialError, CredentialNotFoundError

__all__ = [
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
