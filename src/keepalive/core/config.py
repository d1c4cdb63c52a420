"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Cache settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="KEEPALIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Caching
    default_max: int | None = Field(
        default=None, gt=0, description="Entry bound when a cache is created without max"
    )
    strict_pending: bool = Field(
        default=True, description="Reject a render that would overwrite an unconfirmed pending slot"
    )

    # Metrics
    enable_metrics: bool = Field(default=True, description="Record Prometheus cache metrics")
    metrics_prefix: str = Field(default="keepalive", description="Prometheus metric name prefix")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
