"""Configuration management for the AWS service clients.

This module handles loading and validating client configuration from
environment variables with sensible defaults.
"""

from typing import Optional
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.

    All settings have sensible defaults. Every service client built
    without explicit settings uses the global instance returned by
    ``settings()``.
    """

    # Endpoint Configuration
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region used for endpoint resolution and signing",
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION")
    )
    endpoint_url: Optional[str] = Field(
        default=None,
        description="Explicit endpoint overriding regional resolution",
        validation_alias="AWS_ENDPOINT_URL"
    )
    use_fips_endpoint: bool = Field(
        default=False,
        description="Resolve FIPS endpoints",
        validation_alias="AWS_USE_FIPS_ENDPOINT"
    )
    use_dualstack_endpoint: bool = Field(
        default=False,
        description="Resolve dual-stack (IPv4/IPv6) endpoints",
        validation_alias="AWS_USE_DUALSTACK_ENDPOINT"
    )

    # HTTP Configuration
    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Total attempts per request, including the first",
        validation_alias=AliasChoices("AWS_MAX_ATTEMPTS", "MAX_ATTEMPTS")
    )
    retry_base_delay: float = Field(
        default=0.1,
        ge=0.0,
        description="Base delay in seconds for exponential backoff",
        validation_alias="RETRY_BASE_DELAY"
    )
    retry_max_delay: float = Field(
        default=20.0,
        ge=0.0,
        description="Upper bound in seconds for a single backoff delay",
        validation_alias="RETRY_MAX_DELAY"
    )
    connect_timeout: float = Field(
        default=60.0,
        description="Connection timeout in seconds",
        validation_alias="CONNECT_TIMEOUT"
    )
    read_timeout: float = Field(
        default=60.0,
        description="Read timeout in seconds",
        validation_alias="READ_TIMEOUT"
    )
    max_pool_connections: int = Field(
        default=25,
        ge=1,
        description="Maximum pooled HTTP connections",
        validation_alias="MAX_POOL_CONNECTIONS"
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates",
        validation_alias="VERIFY_SSL"
    )

    # Executor Configuration
    executor_max_workers: int = Field(
        default=8,
        ge=1,
        description="Worker threads for callable and async operations",
        validation_alias="EXECUTOR_MAX_WORKERS"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="LOG_LEVEL"
    )
    cloudwatch_logging_enabled: bool = Field(
        default=False,
        description="Ship client logs to CloudWatch Logs",
        validation_alias=AliasChoices("CLOUDWATCH_LOGGING_ENABLED", "CLOUDWATCH_ENABLED")
    )
    cloudwatch_log_group: str = Field(
        default="/aws-service-clients",
        description="CloudWatch log group name",
        validation_alias="CLOUDWATCH_LOG_GROUP"
    )
    cloudwatch_log_stream: Optional[str] = Field(
        default=None,
        description="CloudWatch log stream name (auto-generated if not set)",
        validation_alias="CLOUDWATCH_LOG_STREAM"
    )

    model_config = SettingsConfigDict(
        env_prefix="",  # No prefix for environment variables
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )


def get_settings() -> Settings:
    """
    Get client settings.

    Loads settings from environment variables and .env file.

    Returns:
        Settings instance with all configuration values
    """
    return Settings()


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def settings() -> Settings:
    """
    Get the global settings instance.

    Creates the settings instance on first call and caches it.

    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings
