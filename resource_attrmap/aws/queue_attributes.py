"""SQS queue attribute sync."""

from typing import Any

from aws_lambda_powertools import Logger

from resource_attrmap.aws.base import AttributeSync
from resource_attrmap.core.attribute_map import AttributeMap
from resource_attrmap.core.config import SERVICE_NAME, SyncConfig
from resource_attrmap.resources.sqs_queue import QUEUE_ATTRIBUTE_MAP
from resource_attrmap.store.resource_data import ResourceData

logger = Logger(service=SERVICE_NAME, child=True)


class QueueAttributeSync(AttributeSync):
    """Create, read and update SQS queues from queue ResourceData.

    Example:
        >>> sync = QueueAttributeSync()
        >>> data = new_queue_data(delay_seconds=30, fifo_queue=False)
        >>> queue_url = sync.create("orders", data)
        >>> data.assign("delay_seconds", 45)
        >>> sync.update(queue_url, data)
        {'DelaySeconds': '45'}
    """

    service_name = "sqs"

    def __init__(
        self,
        client: Any = None,
        config: SyncConfig | None = None,
        attribute_map: AttributeMap = QUEUE_ATTRIBUTE_MAP,
    ):
        super().__init__(attribute_map, client=client, config=config)

    def create(self, name: str, data: ResourceData) -> str:
        attributes = self.attribute_map.resource_data_to_api_attributes_create(data)

        params: dict[str, Any] = {"QueueName": name}
        if attributes:
            params["Attributes"] = attributes

        response = self._call("create_queue", name, **params)
        queue_url: str = response["QueueUrl"]
        data.mark_applied()

        logger.info(
            "Created SQS queue",
            extra={
                "queue_name": name,
                "queue_url": queue_url,
                "attributes": sorted(attributes),
            },
        )
        return queue_url

    def read(self, identifier: str, data: ResourceData) -> None:
        response = self._call(
            "get_queue_attributes",
            identifier,
            QueueUrl=identifier,
            AttributeNames=self.attribute_map.api_attribute_names(),
        )
        attributes: dict[str, str] = response.get("Attributes", {})
        self.import_attributes(attributes, data)

        logger.debug(
            "Read SQS queue attributes",
            extra={"queue_url": identifier, "attribute_count": len(attributes)},
        )

    def update(self, identifier: str, data: ResourceData) -> dict[str, str]:
        attributes = self.attribute_map.resource_data_to_api_attributes_update(data)

        if not attributes:
            logger.debug("No SQS queue attribute changes", extra={"queue_url": identifier})
            return attributes

        self._call(
            "set_queue_attributes",
            identifier,
            QueueUrl=identifier,
            Attributes=attributes,
        )
        data.mark_applied()

        logger.info(
            "Updated SQS queue attributes",
            extra={"queue_url": identifier, "attributes": sorted(attributes)},
        )
        return attributes

    def delete(self, identifier: str) -> None:
        self._call("delete_queue", identifier, QueueUrl=identifier)
        logger.info("Deleted SQS queue", extra={"queue_url": identifier})
