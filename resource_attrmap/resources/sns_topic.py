"""SNS topic resource schema and attribute map."""

from typing import Any

from resource_attrmap.core.attribute_map import AttributeMap
from resource_attrmap.store.resource_data import ResourceData
from resource_attrmap.store.schema import (
    FieldSchema,
    FieldType,
    ResourceSchema,
    validate_attribute_map,
)

TOPIC_SCHEMA = ResourceSchema(
    "sns_topic",
    [
        FieldSchema("display_name", FieldType.STRING),
        FieldSchema("policy", FieldType.STRING),
        FieldSchema("delivery_policy", FieldType.STRING),
        FieldSchema("kms_master_key_id", FieldType.STRING),
        FieldSchema("fifo_topic", FieldType.BOOL),
        FieldSchema("content_based_deduplication", FieldType.BOOL),
        FieldSchema("signature_version", FieldType.INT),
        FieldSchema("tracing_config", FieldType.STRING),
        FieldSchema("application_success_feedback_role_arn", FieldType.STRING),
        FieldSchema("application_success_feedback_sample_rate", FieldType.INT),
        FieldSchema("application_failure_feedback_role_arn", FieldType.STRING),
        FieldSchema("http_success_feedback_role_arn", FieldType.STRING),
        FieldSchema("http_success_feedback_sample_rate", FieldType.INT),
        FieldSchema("http_failure_feedback_role_arn", FieldType.STRING),
        FieldSchema("lambda_success_feedback_role_arn", FieldType.STRING),
        FieldSchema("lambda_success_feedback_sample_rate", FieldType.INT),
        FieldSchema("lambda_failure_feedback_role_arn", FieldType.STRING),
        FieldSchema("sqs_success_feedback_role_arn", FieldType.STRING),
        FieldSchema("sqs_success_feedback_sample_rate", FieldType.INT),
        FieldSchema("sqs_failure_feedback_role_arn", FieldType.STRING),
    ],
)

TOPIC_ATTRIBUTE_MAP = AttributeMap(
    {
        "display_name": "DisplayName",
        "policy": "Policy",
        "delivery_policy": "DeliveryPolicy",
        "kms_master_key_id": "KmsMasterKeyId",
        "fifo_topic": "FifoTopic",
        "content_based_deduplication": "ContentBasedDeduplication",
        "signature_version": "SignatureVersion",
        "tracing_config": "TracingConfig",
        "application_success_feedback_role_arn": "ApplicationSuccessFeedbackRoleArn",
        "application_success_feedback_sample_rate": "ApplicationSuccessFeedbackSampleRate",
        "application_failure_feedback_role_arn": "ApplicationFailureFeedbackRoleArn",
        "http_success_feedback_role_arn": "HTTPSuccessFeedbackRoleArn",
        "http_success_feedback_sample_rate": "HTTPSuccessFeedbackSampleRate",
        "http_failure_feedback_role_arn": "HTTPFailureFeedbackRoleArn",
        "lambda_success_feedback_role_arn": "LambdaSuccessFeedbackRoleArn",
        "lambda_success_feedback_sample_rate": "LambdaSuccessFeedbackSampleRate",
        "lambda_failure_feedback_role_arn": "LambdaFailureFeedbackRoleArn",
        "sqs_success_feedback_role_arn": "SQSSuccessFeedbackRoleArn",
        "sqs_success_feedback_sample_rate": "SQSSuccessFeedbackSampleRate",
        "sqs_failure_feedback_role_arn": "SQSFailureFeedbackRoleArn",
    }
)

validate_attribute_map(TOPIC_ATTRIBUTE_MAP, TOPIC_SCHEMA)


def new_topic_data(
    applied: dict[str, Any] | None = None, **config: Any
) -> ResourceData:
    """Create a ResourceData for an SNS topic."""
    return ResourceData(TOPIC_SCHEMA, config=config, applied=applied)
