"""Base class for AWS attribute sync services.

A sync service binds an AttributeMap to a boto3 client. Subclasses
implement the create/read/update/delete calls of one AWS resource kind;
this base handles retries, error translation and applied-state bookkeeping.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from resource_attrmap.aws.clients import create_client
from resource_attrmap.aws.retry import execute_with_retry, get_error_code
from resource_attrmap.core.attribute_map import AttributeMap
from resource_attrmap.core.config import SERVICE_NAME, SyncConfig, configure_logging
from resource_attrmap.core.errors import AttributeSyncError
from resource_attrmap.store.resource_data import ResourceData

logger = Logger(service=SERVICE_NAME, child=True)


class AttributeSync(ABC):
    """Abstract base class for resource attribute sync services.

    Attributes:
        attribute_map: Field name to API attribute name mapping
        client: boto3 client for the resource's service
        config: Sync configuration
    """

    service_name: str = ""

    def __init__(
        self,
        attribute_map: AttributeMap,
        client: Any = None,
        config: SyncConfig | None = None,
    ):
        self.attribute_map: AttributeMap = attribute_map
        if config is not None:
            configure_logging(config)
        self.config: SyncConfig = config or SyncConfig()
        self.client: Any = client or create_client(self.service_name, self.config)
        self.retry_config = self.config.retry_config()

    @abstractmethod
    def create(self, name: str, data: ResourceData) -> str:
        """Create the resource with all present fields.

        Returns:
            Identifier of the new resource (queue URL, topic ARN)
        """

    @abstractmethod
    def read(self, identifier: str, data: ResourceData) -> None:
        """Import the resource's current attributes into data."""

    @abstractmethod
    def update(self, identifier: str, data: ResourceData) -> dict[str, str]:
        """Send changed fields and return the attributes that were sent."""

    @abstractmethod
    def delete(self, identifier: str) -> None:
        """Delete the resource."""

    def import_attributes(
        self, api_attributes: Mapping[str, str], data: ResourceData
    ) -> None:
        """Write API attributes into data and record them as applied."""
        self.attribute_map.api_attributes_to_resource_data(api_attributes, data)
        data.mark_applied()

    def _call(self, operation: str, resource: str, **params: Any) -> Any:
        """Invoke a client operation with retries.

        Args:
            operation: boto3 client method name (e.g. "create_queue")
            resource: Resource name or identifier, for error reporting
            **params: Operation parameters

        Returns:
            The operation's response

        Raises:
            AttributeSyncError: If the call fails after retries
        """
        method = getattr(self.client, operation)

        result = execute_with_retry(
            operation=lambda: method(**params),
            config=self.retry_config,
            operation_name=operation,
        )
        if result.success:
            return result.result

        error = result.last_error
        error_code = get_error_code(error) if error is not None else None
        logger.error(
            f"Failed to {operation.replace('_', ' ')}",
            extra={
                "service_name": self.service_name,
                "operation": operation,
                "resource": resource,
                "error_code": error_code,
                "attempts": result.attempt_count,
                "error": result.error_message,
            },
        )
        raise AttributeSyncError(
            operation,
            resource=resource,
            error_code=error_code,
            details=result.error_message,
        ) from error
