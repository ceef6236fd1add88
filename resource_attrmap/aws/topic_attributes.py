"""SNS topic attribute sync.

SetTopicAttributes accepts a single attribute per call, so updates are sent
one attribute at a time in mapping order. If a call fails, attributes sent
before it stay applied remotely and the applied state in ResourceData is
left untouched.
"""

from typing import Any

from aws_lambda_powertools import Logger

from resource_attrmap.aws.base import AttributeSync
from resource_attrmap.core.attribute_map import AttributeMap
from resource_attrmap.core.config import SERVICE_NAME, SyncConfig
from resource_attrmap.resources.sns_topic import TOPIC_ATTRIBUTE_MAP
from resource_attrmap.store.resource_data import ResourceData

logger = Logger(service=SERVICE_NAME, child=True)


class TopicAttributeSync(AttributeSync):
    """Create, read and update SNS topics from topic ResourceData."""

    service_name = "sns"

    def __init__(
        self,
        client: Any = None,
        config: SyncConfig | None = None,
        attribute_map: AttributeMap = TOPIC_ATTRIBUTE_MAP,
    ):
        super().__init__(attribute_map, client=client, config=config)

    def create(self, name: str, data: ResourceData) -> str:
        attributes = self.attribute_map.resource_data_to_api_attributes_create(data)

        params: dict[str, Any] = {"Name": name}
        if attributes:
            params["Attributes"] = attributes

        response = self._call("create_topic", name, **params)
        topic_arn: str = response["TopicArn"]
        data.mark_applied()

        logger.info(
            "Created SNS topic",
            extra={
                "topic_name": name,
                "topic_arn": topic_arn,
                "attributes": sorted(attributes),
            },
        )
        return topic_arn

    def read(self, identifier: str, data: ResourceData) -> None:
        response = self._call("get_topic_attributes", identifier, TopicArn=identifier)
        self.import_attributes(response.get("Attributes", {}), data)

    def update(self, identifier: str, data: ResourceData) -> dict[str, str]:
        attributes = self.attribute_map.resource_data_to_api_attributes_update(data)

        for attribute_name, attribute_value in attributes.items():
            self._call(
                "set_topic_attributes",
                identifier,
                TopicArn=identifier,
                AttributeName=attribute_name,
                AttributeValue=attribute_value,
            )

        if attributes:
            data.mark_applied()
            logger.info(
                "Updated SNS topic attributes",
                extra={"topic_arn": identifier, "attributes": sorted(attributes)},
            )
        return attributes

    def delete(self, identifier: str) -> None:
        self._call("delete_topic", identifier, TopicArn=identifier)
        logger.info("Deleted SNS topic", extra={"topic_arn": identifier})
