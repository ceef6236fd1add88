"""
Shared fixtures for resource-attrmap tests.
"""

import boto3
import pytest
from botocore.stub import Stubber

from resource_attrmap.core.config import SyncConfig
from resource_attrmap.store.schema import FieldSchema, FieldType, ResourceSchema


@pytest.fixture
def sample_schema():
    """Schema used by the translator examples: a queue with name, delay and fifo."""
    return ResourceSchema(
        "sample_queue",
        [
            FieldSchema("name", FieldType.STRING),
            FieldSchema("delay", FieldType.INT),
            FieldSchema("fifo", FieldType.BOOL),
            FieldSchema("ratio", FieldType.FLOAT),
        ],
    )


@pytest.fixture
def sync_config():
    """Config without retries so failing stubs do not sleep."""
    return SyncConfig(region="us-east-1", max_retries=0)


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip backoff delays in retry tests."""
    delays = []
    monkeypatch.setattr("resource_attrmap.aws.retry.time.sleep", delays.append)
    return delays


def _client(service_name):
    return boto3.client(
        service_name,
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def sqs_stub():
    client = _client("sqs")
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def sns_stub():
    client = _client("sns")
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()
