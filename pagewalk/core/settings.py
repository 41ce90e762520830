"""Client configuration loaded from the environment.

Holds the API credential and the error threshold shared by every call made
through a client. Values come from ``PAGEWALK_*`` environment variables (or a
``.env`` file) and may be changed at runtime through the setters.

Usage:
    from pagewalk.core.settings import ClientSettings

    settings = ClientSettings(api_key="...", error_threshold=3)
    settings.set_error_threshold(5)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.hubapi.com"
DEFAULT_CREDENTIAL_PARAM = "hapikey"


class ClientSettings(BaseSettings):
    """Settings shared by the executor and paginator of one client."""

    # API Configuration
    api_key: SecretStr | None = Field(default=None)
    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    credential_param: str = Field(default=DEFAULT_CREDENTIAL_PARAM, min_length=1)
    request_timeout: float | None = Field(default=None, gt=0)

    # Retry Configuration
    error_threshold: int = Field(default=1, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="PAGEWALK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )

    def get_credential(self) -> str:
        """Return the API credential.

        Raises:
            ConfigurationError: If no credential has been configured
        """
        if self.api_key is None or not self.api_key.get_secret_value():
            raise ConfigurationError("no API key present")
        return self.api_key.get_secret_value()

    def set_api_key(self, key: str) -> None:
        self.api_key = SecretStr(key)

    def set_error_threshold(self, threshold: int) -> None:
        """Set the number of failures tolerated within one call."""
        if threshold < 1:
            raise ConfigurationError("error threshold must be at least 1")
        self.error_threshold = threshold


@lru_cache()
def get_settings() -> ClientSettings:
    """Get the cached process-wide settings instance.

    Clients fall back to this instance only when no settings are passed in.
    """
    return ClientSettings()
