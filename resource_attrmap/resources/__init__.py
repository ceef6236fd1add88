"""Resource definitions: schemas and attribute maps per AWS resource kind."""

from resource_attrmap.resources.sns_topic import (
    TOPIC_ATTRIBUTE_MAP,
    TOPIC_SCHEMA,
    new_topic_data,
)
from resource_attrmap.resources.sqs_queue import (
    QUEUE_ATTRIBUTE_MAP,
    QUEUE_SCHEMA,
    new_queue_data,
)

__all__ = [
    "QUEUE_ATTRIBUTE_MAP",
    "QUEUE_SCHEMA",
    "new_queue_data",
    "TOPIC_ATTRIBUTE_MAP",
    "TOPIC_SCHEMA",
    "new_topic_data",
]
