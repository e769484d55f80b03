"""Tests for credential resolution exceptions."""

import pytest

from nylas_client_core.auth.exceptions import CredentialError, CredentialNotFoundError


class TestCredentialNotFoundError:
    """Test CredentialNotFoundError exception."""

    def test_is_credential_error(self):
        with pytest.raises(CredentialError):
            raise CredentialNotFoundError("Test error")

    def test_exception_message(self):
        error = CredentialNotFoundError("API key not found")

        assert str(error) == "API key not found"

    def test_env_var_name_attribute(self):
        error = CredentialNotFoundError("Test error", env_var_name="NYLAS_API_KEY")

        assert error.env_var_name == "NYLAS_API_KEY"

    def test_env_var_name_optional(self):
        assert CredentialNotFoundError("Test error").env_var_name is None
