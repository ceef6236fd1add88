"""SQS queue resource schema and attribute map.

Field names follow the snake_case configuration names; API names are the
attribute keys accepted by CreateQueue / SetQueueAttributes and returned by
GetQueueAttributes.
"""

from typing import Any

from resource_attrmap.core.attribute_map import AttributeMap
from resource_attrmap.store.resource_data import ResourceData
from resource_attrmap.store.schema import (
    FieldSchema,
    FieldType,
    ResourceSchema,
    validate_attribute_map,
)

# Defaults documented by SQS for a newly created queue
DEFAULT_DELAY_SECONDS = 0
DEFAULT_MAX_MESSAGE_SIZE = 262144
DEFAULT_MESSAGE_RETENTION_SECONDS = 345600
DEFAULT_RECEIVE_WAIT_TIME_SECONDS = 0
DEFAULT_VISIBILITY_TIMEOUT_SECONDS = 30
DEFAULT_KMS_DATA_KEY_REUSE_PERIOD_SECONDS = 300

QUEUE_SCHEMA = ResourceSchema(
    "sqs_queue",
    [
        FieldSchema("delay_seconds", FieldType.INT, DEFAULT_DELAY_SECONDS),
        FieldSchema("max_message_size", FieldType.INT, DEFAULT_MAX_MESSAGE_SIZE),
        FieldSchema(
            "message_retention_seconds",
            FieldType.INT,
            DEFAULT_MESSAGE_RETENTION_SECONDS,
        ),
        FieldSchema(
            "receive_wait_time_seconds",
            FieldType.INT,
            DEFAULT_RECEIVE_WAIT_TIME_SECONDS,
        ),
        FieldSchema(
            "visibility_timeout_seconds",
            FieldType.INT,
            DEFAULT_VISIBILITY_TIMEOUT_SECONDS,
        ),
        FieldSchema("policy", FieldType.STRING, description="Access policy JSON"),
        FieldSchema("redrive_policy", FieldType.STRING, description="Dead-letter queue JSON"),
        FieldSchema("redrive_allow_policy", FieldType.STRING),
        FieldSchema("fifo_queue", FieldType.BOOL),
        FieldSchema("content_based_deduplication", FieldType.BOOL),
        FieldSchema("deduplication_scope", FieldType.STRING),
        FieldSchema("fifo_throughput_limit", FieldType.STRING),
        FieldSchema("kms_master_key_id", FieldType.STRING),
        FieldSchema(
            "kms_data_key_reuse_period_seconds",
            FieldType.INT,
            DEFAULT_KMS_DATA_KEY_REUSE_PERIOD_SECONDS,
        ),
        FieldSchema("sqs_managed_sse_enabled", FieldType.BOOL),
    ],
)

QUEUE_ATTRIBUTE_MAP = AttributeMap(
    {
        "delay_seconds": "DelaySeconds",
        "max_message_size": "MaximumMessageSize",
        "message_retention_seconds": "MessageRetentionPeriod",
        "receive_wait_time_seconds": "ReceiveMessageWaitTimeSeconds",
        "visibility_timeout_seconds": "VisibilityTimeout",
        "policy": "Policy",
        "redrive_policy": "RedrivePolicy",
        "redrive_allow_policy": "RedriveAllowPolicy",
        "fifo_queue": "FifoQueue",
        "content_based_deduplication": "ContentBasedDeduplication",
        "deduplication_scope": "DeduplicationScope",
        "fifo_throughput_limit": "FifoThroughputLimit",
        "kms_master_key_id": "KmsMasterKeyId",
        "kms_data_key_reuse_period_seconds": "KmsDataKeyReusePeriodSeconds",
        "sqs_managed_sse_enabled": "SqsManagedSseEnabled",
    }
)

validate_attribute_map(QUEUE_ATTRIBUTE_MAP, QUEUE_SCHEMA)


def new_queue_data(
    applied: dict[str, Any] | None = None, **config: Any
) -> ResourceData:
    """Create a ResourceData for an SQS queue.

    Args:
        applied: Last applied field values, if the queue already exists
        **config: Configured field values (e.g. delay_seconds=30)

    Returns:
        ResourceData bound to QUEUE_SCHEMA
    """
    return ResourceData(QUEUE_SCHEMA, config=config, applied=applied)
