"""Configuration for the AWS attribute sync services."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from aws_lambda_powertools import Logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from resource_attrmap.core.errors import ConfigurationError

SERVICE_NAME = "resource-attrmap"

logger = Logger(service=SERVICE_NAME, level=os.getenv("LOG_LEVEL", "INFO"))

# Environment variable -> SyncConfig field
ENV_OVERRIDES: dict[str, str] = {
    "AWS_REGION": "region",
    "ATTRMAP_ENDPOINT_URL": "endpoint_url",
    "ATTRMAP_MAX_RETRIES": "max_retries",
    "ATTRMAP_LOG_LEVEL": "log_level",
}

CONFIG_FILE_ENV = "ATTRMAP_CONFIG_FILE"


class SyncConfig(BaseModel):
    """Settings shared by the queue and topic attribute sync services."""

    region: str = "us-east-1"
    endpoint_url: Optional[str] = None
    max_retries: int = Field(default=3, ge=0, le=10)
    initial_backoff_seconds: float = Field(default=1.0, gt=0)
    backoff_multiplier: float = Field(default=2.0, ge=1)
    max_backoff_seconds: float = Field(default=8.0, gt=0)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("endpoint_url")
    @classmethod
    def validate_endpoint_url(cls, v):
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError("endpoint_url must start with http:// or https://")
        return v

    @field_validator("region")
    @classmethod
    def validate_region(cls, v):
        if not v or not v.strip():
            raise ValueError("region cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def check_backoff_bounds(self):
        if self.initial_backoff_seconds > self.max_backoff_seconds:
            raise ValueError(
                "initial_backoff_seconds cannot exceed max_backoff_seconds"
            )
        return self

    def retry_config(self):
        """Build the RetryConfig used by the sync services."""
        from resource_attrmap.aws.retry import RetryConfig

        return RetryConfig(
            max_retries=self.max_retries,
            initial_backoff_seconds=self.initial_backoff_seconds,
            backoff_multiplier=self.backoff_multiplier,
            max_backoff_seconds=self.max_backoff_seconds,
        )

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "SyncConfig":
        """Load configuration from a JSON file and the environment.

        Environment variables take precedence over file values. When no path
        is given, ATTRMAP_CONFIG_FILE is used if set.

        Args:
            path: Optional path to a JSON configuration file

        Returns:
            Validated SyncConfig

        Raises:
            ConfigurationError: If the file is unreadable or values are invalid
        """
        if path is None and os.getenv(CONFIG_FILE_ENV):
            path = Path(os.environ[CONFIG_FILE_ENV])

        data: dict[str, Any] = {}

        if path is not None:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except FileNotFoundError as e:
                raise ConfigurationError(
                    f"Configuration file '{path}' not found", details=str(e)
                ) from e
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Invalid JSON format in configuration file '{path}'",
                    details=f"line {e.lineno}, column {e.colno}: {e.msg}",
                ) from e

            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"Configuration file '{path}' must contain a JSON object"
                )

        for env_name, field_name in ENV_OVERRIDES.items():
            env_value = os.getenv(env_name)
            if env_value:
                data[field_name] = env_value

        try:
            instance = cls(**data)
        except ValidationError as e:
            error_details = []
            for error in e.errors():
                field_path = " -> ".join(str(loc) for loc in error["loc"])
                error_details.append(f"Field '{field_path}': {error['msg']}")
            raise ConfigurationError(
                "Invalid configuration", details="; ".join(error_details)
            ) from e

        logger.debug(
            "Configuration loaded",
            extra={
                "config_file": str(path) if path else None,
                "region": instance.region,
                "endpoint_url": instance.endpoint_url,
                "max_retries": instance.max_retries,
            },
        )
        return instance


def configure_logging(config: SyncConfig) -> None:
    """Apply the configured log level to the package logger."""
    logger.setLevel(config.log_level)
