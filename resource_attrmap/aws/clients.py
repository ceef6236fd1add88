"""boto3 client construction for the attribute sync services."""

from typing import Any

import boto3
from aws_lambda_powertools import Logger
from botocore.config import Config as BotoConfig

from resource_attrmap.core.config import SERVICE_NAME, SyncConfig

logger = Logger(service=SERVICE_NAME, child=True)

# Retries are handled by resource_attrmap.aws.retry, so botocore makes a single attempt
_BOTO_CONFIG = BotoConfig(retries={"mode": "standard", "max_attempts": 1})


def create_client(service_name: str, config: SyncConfig | None = None) -> Any:
    """Create a boto3 client for an attribute API.

    Args:
        service_name: boto3 service name ("sqs", "sns")
        config: Sync configuration; defaults are used when omitted

    Returns:
        boto3 client
    """
    config = config or SyncConfig()

    client_kwargs: dict[str, Any] = {
        "region_name": config.region,
        "config": _BOTO_CONFIG,
    }
    if config.endpoint_url:
        client_kwargs["endpoint_url"] = config.endpoint_url

    logger.debug(
        "Creating boto3 client",
        extra={
            "service_name": service_name,
            "region": config.region,
            "endpoint_url": config.endpoint_url,
        },
    )
    return boto3.client(service_name, **client_kwargs)
