"""
Unit tests for AttributeMap import and export.
"""

import pytest

from resource_attrmap.core.attribute_map import AttributeMap
from resource_attrmap.core.errors import (
    FieldWriteError,
    SchemaError,
    UnknownFieldError,
    UnsupportedValueKindError,
)
from resource_attrmap.store.base import ConfigurationStore
from resource_attrmap.store.resource_data import ResourceData

QUEUE_MAP = {"name": "QueueName", "delay": "DelaySeconds", "fifo": "FifoQueue"}


class RecordingStore(ConfigurationStore):
    """Minimal store returning fixed values and recording writes."""

    def __init__(self, present=None, current=None, changed=(), fail_on=()):
        self.present = dict(present or {})
        self.current = dict(current or {})
        self.changed = set(changed)
        self.fail_on = set(fail_on)
        self.writes = []

    def set_field(self, name, value):
        if name in self.fail_on:
            raise ValueError(f"cannot parse {value!r}")
        self.writes.append((name, value))

    def get_field_if_present(self, name):
        return self.present.get(name)

    def get_field(self, name):
        return self.current[name]

    def has_field_changed(self, name):
        return name in self.changed


@pytest.fixture
def attribute_map():
    return AttributeMap(QUEUE_MAP)


class TestConstruction:
    """Tests for building attribute maps."""

    def test_behaves_like_mapping(self, attribute_map):
        assert len(attribute_map) == 3
        assert attribute_map["delay"] == "DelaySeconds"
        assert list(attribute_map) == ["name", "delay", "fifo"]
        assert dict(attribute_map) == QUEUE_MAP

    def test_is_immutable(self, attribute_map):
        with pytest.raises(TypeError):
            attribute_map["delay"] = "Other"

    def test_copy_is_independent_of_source(self):
        source = {"delay": "DelaySeconds"}
        attribute_map = AttributeMap(source)
        source["fifo"] = "FifoQueue"
        assert "fifo" not in attribute_map

    def test_api_attribute_names(self, attribute_map):
        assert attribute_map.api_attribute_names() == [
            "QueueName",
            "DelaySeconds",
            "FifoQueue",
        ]

    @pytest.mark.parametrize(
        "attributes",
        [{"": "DelaySeconds"}, {"delay": ""}, {"delay": 5}, {7: "DelaySeconds"}],
    )
    def test_rejects_invalid_names(self, attributes):
        with pytest.raises(SchemaError):
            AttributeMap(attributes)


class TestImport:
    """Tests for api_attributes_to_resource_data."""

    def test_sets_typed_values(self, attribute_map, sample_schema):
        data = ResourceData(sample_schema)

        attribute_map.api_attributes_to_resource_data(
            {"QueueName": "orders", "DelaySeconds": "30", "FifoQueue": "true"}, data
        )

        assert data.get_field("name") == "orders"
        assert data.get_field("delay") == 30
        assert data.get_field("fifo") is True

    def test_missing_attributes_leave_fields_untouched(self, attribute_map, sample_schema):
        data = ResourceData(sample_schema, config={"name": "old", "delay": 10})

        attribute_map.api_attributes_to_resource_data({"DelaySeconds": "15"}, data)

        assert data.get_field("delay") == 15
        assert data.get_field("name") == "old"
        assert data.get_field_if_present("fifo") is None

    def test_unmapped_api_attributes_are_ignored(self, attribute_map):
        store = RecordingStore()

        attribute_map.api_attributes_to_resource_data(
            {"DelaySeconds": "5", "QueueArn": "arn:aws:sqs:us-east-1:123456789012:orders"},
            store,
        )

        assert store.writes == [("delay", "5")]

    def test_values_are_passed_as_strings(self, attribute_map):
        store = RecordingStore()

        attribute_map.api_attributes_to_resource_data(
            {"QueueName": "orders", "DelaySeconds": "30", "FifoQueue": "true"}, store
        )

        assert store.writes == [
            ("name", "orders"),
            ("delay", "30"),
            ("fifo", "true"),
        ]

    def test_empty_input_writes_nothing(self, attribute_map):
        store = RecordingStore()
        attribute_map.api_attributes_to_resource_data({}, store)
        assert store.writes == []

    def test_write_failure_stops_import(self, attribute_map):
        store = RecordingStore(fail_on={"delay"})

        with pytest.raises(FieldWriteError) as exc_info:
            attribute_map.api_attributes_to_resource_data(
                {"QueueName": "orders", "DelaySeconds": "x", "FifoQueue": "true"}, store
            )

        assert exc_info.value.field_name == "delay"
        assert isinstance(exc_info.value.__cause__, ValueError)
        # earlier writes are kept, later fields are not processed
        assert store.writes == [("name", "orders")]

    def test_store_coercion_error_is_wrapped(self, attribute_map, sample_schema):
        data = ResourceData(sample_schema)

        with pytest.raises(FieldWriteError) as exc_info:
            attribute_map.api_attributes_to_resource_data({"FifoQueue": "maybe"}, data)

        assert exc_info.value.field_name == "fifo"
        assert "error setting fifo" in str(exc_info.value)

    def test_unknown_field_is_wrapped(self, sample_schema):
        attribute_map = AttributeMap({"missing": "Missing"})
        data = ResourceData(sample_schema)

        with pytest.raises(FieldWriteError) as exc_info:
            attribute_map.api_attributes_to_resource_data({"Missing": "1"}, data)

        assert isinstance(exc_info.value.cause, UnknownFieldError)

    @pytest.mark.parametrize(
        "error",
        [RuntimeError("backend down"), AttributeError("no slot"), LookupError("y")],
    )
    def test_any_store_failure_is_wrapped(self, error):
        class BrokenStore(RecordingStore):
            def set_field(self, name, value):
                raise error

        attribute_map = AttributeMap({"delay": "DelaySeconds"})

        with pytest.raises(FieldWriteError) as exc_info:
            attribute_map.api_attributes_to_resource_data({"DelaySeconds": "5"}, BrokenStore())

        assert exc_info.value.field_name == "delay"
        assert exc_info.value.__cause__ is error
        assert str(exc_info.value).startswith("error setting delay: ")


class TestExportCreate:
    """Tests for resource_data_to_api_attributes_create."""

    def test_includes_only_present_fields(self, attribute_map, sample_schema):
        data = ResourceData(sample_schema, config={"name": "orders", "fifo": False})

        assert attribute_map.resource_data_to_api_attributes_create(data) == {
            "QueueName": "orders",
            "FifoQueue": "false",
        }

    def test_absent_fields_never_appear(self, attribute_map, sample_schema):
        data = ResourceData(sample_schema)
        assert attribute_map.resource_data_to_api_attributes_create(data) == {}

    def test_negative_integer(self, attribute_map, sample_schema):
        data = ResourceData(sample_schema, config={"delay": -5})
        assert attribute_map.resource_data_to_api_attributes_create(data) == {
            "DelaySeconds": "-5"
        }

    def test_presence_is_decided_by_store(self, attribute_map):
        store = RecordingStore(present={"delay": 0, "fifo": True})

        assert attribute_map.resource_data_to_api_attributes_create(store) == {
            "DelaySeconds": "0",
            "FifoQueue": "true",
        }

    def test_is_idempotent(self, attribute_map, sample_schema):
        data = ResourceData(sample_schema, config={"name": "orders", "delay": 30})

        first = attribute_map.resource_data_to_api_attributes_create(data)
        second = attribute_map.resource_data_to_api_attributes_create(data)

        assert first == second

    def test_float_value_is_rejected(self, sample_schema):
        attribute_map = AttributeMap({"name": "QueueName", "ratio": "Ratio"})
        data = ResourceData(sample_schema, config={"name": "orders", "ratio": 0.5})

        with pytest.raises(UnsupportedValueKindError) as exc_info:
            attribute_map.resource_data_to_api_attributes_create(data)

        assert exc_info.value.field_name == "ratio"
        assert exc_info.value.kind == "float"

    @pytest.mark.parametrize("value", [1.5, [1, 2], {"a": "b"}, b"bytes"])
    def test_unsupported_kinds(self, attribute_map, value):
        store = RecordingStore(present={"name": value})

        with pytest.raises(UnsupportedValueKindError):
            attribute_map.resource_data_to_api_attributes_create(store)


class TestExportUpdate:
    """Tests for resource_data_to_api_attributes_update."""

    def test_includes_only_changed_fields(self, attribute_map, sample_schema):
        data = ResourceData(
            sample_schema,
            config={"name": "orders", "delay": 45, "fifo": False},
            applied={"name": "orders", "delay": 30, "fifo": False},
        )

        assert attribute_map.resource_data_to_api_attributes_update(data) == {
            "DelaySeconds": "45"
        }

    def test_change_to_zero_value_is_included(self, attribute_map, sample_schema):
        data = ResourceData(
            sample_schema,
            config={"name": "", "delay": 0, "fifo": False},
            applied={"name": "orders", "delay": 30, "fifo": True},
        )

        assert attribute_map.resource_data_to_api_attributes_update(data) == {
            "QueueName": "",
            "DelaySeconds": "0",
            "FifoQueue": "false",
        }

    def test_reads_current_value(self, attribute_map):
        store = RecordingStore(
            present={"delay": 1}, current={"delay": 99}, changed={"delay"}
        )

        assert attribute_map.resource_data_to_api_attributes_update(store) == {
            "DelaySeconds": "99"
        }

    def test_no_changes(self, attribute_map, sample_schema):
        data = ResourceData(sample_schema, config={"delay": 30}, applied={"delay": 30})
        assert attribute_map.resource_data_to_api_attributes_update(data) == {}

    def test_float_value_is_rejected(self, sample_schema):
        attribute_map = AttributeMap({"delay": "DelaySeconds", "ratio": "Ratio"})
        data = ResourceData(sample_schema, config={"delay": 5, "ratio": 2.5})

        with pytest.raises(UnsupportedValueKindError) as exc_info:
            attribute_map.resource_data_to_api_attributes_update(data)

        assert exc_info.value.field_name == "ratio"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
