"""Configuration system for secure-random.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (SECURE_RANDOM_*) -> .env file -> field defaults.

Configuration only selects *which* CSPRNG-backed source is acquired and how
operations are logged. It never carries seeds: output is non-reproducible.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from secure_random.exceptions import ConfigValidationError


class SecureRandomConfig(BaseSettings):
    """Configuration for secure-random.

    Resolution order: init kwargs -> env vars (SECURE_RANDOM_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="SECURE_RANDOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Entropy source ---

    entropy_source_type: str = Field(
        default="system",
        min_length=1,
        description="Registered entropy source identifier ('system', 'getrandom', ...)",
    )

    # --- Logging ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="none",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all sample records in memory for analysis",
    )


def load_config(**overrides: Any) -> SecureRandomConfig:
    """Load configuration from the environment with keyword overrides.

    Args:
        **overrides: Field values taking precedence over environment and
            defaults.

    Returns:
        A validated SecureRandomConfig.

    Raises:
        ConfigValidationError: If any value fails validation.
    """
    try:
        return SecureRandomConfig(**overrides)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
