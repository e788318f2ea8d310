"""Configuration management for ghrelease."""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigurationError


DEFAULT_API_URL = "https://api.github.com/"


class Settings(BaseSettings):
    """Configuration settings for ghrelease.

    The GitHub credentials are read from ``GITHUB_ACCESS_TOKEN`` and
    ``GITHUB_USERNAME``; everything else uses the ``GHRELEASE_`` prefix.
    """

    model_config = SettingsConfigDict(env_prefix="GHRELEASE_", case_sensitive=False)

    github_access_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_ACCESS_TOKEN", "github_access_token"),
    )
    github_username: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_USERNAME", "github_username"),
    )
    api_url: str = DEFAULT_API_URL
    timeout: int = 30
    batch_size: int = Field(default=10, ge=1)
    batch_delay: float = Field(default=0.1, ge=0)

    @field_validator('api_url')
    @classmethod
    def normalize_api_url(cls, v):
        """Ensure the API URL has a protocol and a trailing slash."""
        if v and not v.startswith(('http://', 'https://')):
            v = f"https://{v}"
        if not v.endswith('/'):
            v = f"{v}/"
        return v

    def require_credentials(self) -> None:
        """Fail unless both GitHub credentials are set.

        Raises:
            ConfigurationError: If the token or the username is missing
        """
        if not self.github_access_token or not self.github_username:
            raise ConfigurationError(
                "GitHub credentials required. Set GITHUB_ACCESS_TOKEN and "
                "GITHUB_USERNAME environment variables."
            )


def get_settings(**overrides) -> Settings:
    """Load settings from the environment, applying explicit overrides.

    Args:
        **overrides: Field values taking precedence over the environment;
            ``None`` values are ignored

    Returns:
        Settings object
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return Settings(**overrides)
