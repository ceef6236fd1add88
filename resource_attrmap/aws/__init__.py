"""AWS attribute sync services built on boto3.

Example:
    >>> from resource_attrmap.aws import QueueAttributeSync
    >>> from resource_attrmap.resources import new_queue_data
    >>> sync = QueueAttributeSync()
    >>> queue_url = sync.create("orders", new_queue_data(delay_seconds=30))
"""

from resource_attrmap.aws.base import AttributeSync
from resource_attrmap.aws.clients import create_client
from resource_attrmap.aws.queue_attributes import QueueAttributeSync
from resource_attrmap.aws.retry import RetryConfig, RetryResult, execute_with_retry
from resource_attrmap.aws.topic_attributes import TopicAttributeSync

__all__ = [
    "AttributeSync",
    "QueueAttributeSync",
    "TopicAttributeSync",
    "create_client",
    "RetryConfig",
    "RetryResult",
    "execute_with_retry",
]
