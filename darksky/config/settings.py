"""
Configuration settings for the Dark Sky client.

This module provides type-safe configuration management using Pydantic.
Settings are loaded from environment variables and .env file.

Usage:
    from darksky.config.settings import get_settings

    settings = get_settings()
    print(settings.darksky_api_base_url)
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from darksky.data.options import Language, Unit


DEFAULT_API_URL = "https://api.darksky.net"


class Settings(BaseSettings):
    """
    Client settings with validation.

    Settings are loaded from environment variables, with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    darksky_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("darksky_api_key", "forecast_token"),
        description="Dark Sky secret key used in the request path",
    )

    darksky_api_base_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL for the Dark Sky API",
    )

    request_timeout: int = Field(
        default=30,
        ge=1,
        le=120,
        description="API request timeout in seconds",
    )

    user_agent: str = Field(
        default="darksky-python/0.9",
        description="User-Agent header sent with every request",
    )

    # ==========================================================================
    # Request Defaults
    # ==========================================================================
    default_units: Unit = Field(
        default=Unit.AUTO,
        description="Unit system used by the command line when none is given",
    )

    default_language: Optional[Language] = Field(
        default=None,
        description="Summary language used by the command line when none is given",
    )

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("default_units", "default_language", mode="before")
    @classmethod
    def normalize_case(cls, v):
        """Accept option values in any case."""
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @field_validator("darksky_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # ==========================================================================
    # Properties
    # ==========================================================================
    @property
    def has_api_key(self) -> bool:
        """Check if a usable API key is configured."""
        return bool(self.darksky_api_key and self.darksky_api_key != "your_api_key_here")

    # ==========================================================================
    # Methods
    # ==========================================================================
    def get_api_key(self) -> str:
        """
        Get the API key, raising an error if not configured.

        Raises:
            ValueError: If API key is not configured
        """
        if not self.has_api_key:
            raise ValueError(
                "Dark Sky API key not configured!\n"
                "Please set DARKSKY_API_KEY (or FORECAST_TOKEN) in your environment "
                "or .env file."
            )
        return self.darksky_api_key


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance (cached for performance)

    Note:
        Uses lru_cache to avoid re-reading .env file on every call.
        Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Force reload settings from environment.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()


# =============================================================================
# Preset Locations (commonly used coordinates)
# =============================================================================
PRESET_LOCATIONS = {
    "Alcatraz Island, CA": {"latitude": 37.8267, "longitude": -122.423},
    "Mexico City, MX": {"latitude": 19.2465, "longitude": -99.1013},
    "London, UK": {"latitude": 51.5074, "longitude": -0.1278},
    "New York, NY": {"latitude": 40.7128, "longitude": -74.0060},
    "Tokyo, JP": {"latitude": 35.6762, "longitude": 139.6503},
    "Sydney, AU": {"latitude": -33.8688, "longitude": 151.2093},
}
