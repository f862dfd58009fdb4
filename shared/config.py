"""
Shared configuration management for the marketplace permissions engine.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PolicyConfig(BaseSettings):
    """Engine configuration, read from POLICY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POLICY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    service_name: str = Field(default="permissions")
    log_level: str = Field(default="info")

    # Install the JSON structlog pipeline when an engine is created
    configure_logging: bool = Field(default=False)

    # Emit a debug log line for every decision
    log_decisions: bool = Field(default=False)

    # Prometheus decision counters
    enable_metrics: bool = Field(default=True)


def get_config(**overrides) -> PolicyConfig:
    """Get engine configuration, with optional explicit overrides."""
    return PolicyConfig(**overrides)
