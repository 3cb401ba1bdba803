"""
Configuration for robotrules.

Uses Pydantic Settings for type-safe environment variable loading.
"""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

import robotrules
from robotrules.exceptions import ConfigurationError

load_dotenv()

DEFAULT_USER_AGENT = f"robotrules/{robotrules.__version__}"


class RobotRulesSettings(BaseSettings):
    """robotrules settings, read from ``ROBOTRULES_*`` environment variables."""

    model_config = ConfigDict(
        env_prefix="ROBOTRULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Retrieval
    timeout: float = Field(default=30.0, gt=0, le=300, description="HTTP timeout (seconds)")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header sent when fetching")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects when fetching")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper


def load_settings(**overrides) -> RobotRulesSettings:
    """
    Build settings from the environment, applying explicit overrides.

    Args:
        **overrides: Field values taking precedence over the environment.
            ``None`` values are ignored.

    Returns:
        Validated settings.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return RobotRulesSettings(**values)
    except ValidationError as e:
        errors = e.errors()
        setting = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
        raise ConfigurationError(f"Invalid robotrules settings: {e}", setting=setting) from e


@lru_cache
def get_settings() -> RobotRulesSettings:
    """Get cached settings instance."""
    return load_settings()
