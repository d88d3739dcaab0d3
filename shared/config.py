"""
Shared configuration management for 254Carbon Access Layer.
"""

from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ACCESS_",
        case_sensitive=False,
        extra="allow"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")


class ClaimsSettings(BaseConfig):
    """Settings consumed by the claims verification engine."""

    # Tolerated clock skew for timestamp claims, in milliseconds.
    allowed_drift: int = Field(default=0)

    # Expected `iss` claim for the standard issuer verifier.
    token_issuer: Optional[str] = Field(default=None)

    @field_validator("allowed_drift")
    @classmethod
    def _non_negative_drift(cls, value: int) -> int:
        if value < 0:
            raise ConfigurationError(
                "allowed_drift must be non-negative",
                details={"allowed_drift": value}
            )
        return value


def get_claims_settings(**overrides: Any) -> ClaimsSettings:
    """Get claims settings from the environment, with explicit overrides."""
    return ClaimsSettings(**overrides)


class SettingsConfigAccessor:
    """Resolve configuration values for a verification context.

    Settings attached to the context (as ``context.settings``) take
    precedence over the accessor's own settings.
    """

    def __init__(self, settings: Optional[BaseConfig] = None):
        self.settings = settings if settings is not None else get_claims_settings()

    def __call__(self, context: Any, key: str, default: Any = None) -> Any:
        settings = getattr(context, "settings", None)
        if not isinstance(settings, BaseConfig):
            settings = self.settings
        value = getattr(settings, key, None)
        return default if value is None else value


@lru_cache(maxsize=None)
def default_config_accessor() -> SettingsConfigAccessor:
    """Process-wide accessor over settings read from the environment once."""
    return SettingsConfigAccessor()
