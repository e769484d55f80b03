"""Credential resolution for the Nylas client configuration.

Values are looked up in priority order:
1. Explicitly provided value
2. Environment variable (including variables loaded from a .env file)
3. Default value

Example:
    ```python
    from nylas_client_core.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="NYLAS_API_KEY", required=True)
    ```

Credentials are never logged in clear; only the source they came from is.
"""

import logging
import os
from threading import Lock

from dotenv import load_dotenv

from nylas_client_core.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve settings from explicit values, the environment, or defaults.

    A `.env` file is loaded once (python-dotenv does not override variables
    already present in the environment).
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to a .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Set to False to skip .env loading entirely.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for Nylas configuration")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Resolve a single setting.

        Args:
            value: Explicit value. Wins over every other source.
            env_var_name: Environment variable to check.
            default: Fallback when nothing else is set.
            required: Raise CredentialNotFoundError instead of returning None.
            secret: Mask the value in debug logs.

        Returns:
            The resolved value, or None.

        Raises:
            CredentialNotFoundError: If required and not found anywhere.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and os.environ.get(env_var_name):
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if secret else result
            logger.debug(f"Resolved {env_var_name or 'setting'} from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result
