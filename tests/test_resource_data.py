"""
Unit tests for schemas and the ResourceData store.
"""

import pytest

from resource_attrmap.core.errors import FieldValueError, SchemaError, UnknownFieldError
from resource_attrmap.store.resource_data import ResourceData
from resource_attrmap.store.schema import (
    FieldSchema,
    FieldType,
    ResourceSchema,
    validate_attribute_map,
)


class TestFieldSchema:
    """Tests for parsing and validating field values."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("30", 30), ("-5", -5), ("+7", 7), (" 12 ", 12), ("0", 0)],
    )
    def test_parse_int(self, raw, expected):
        assert FieldSchema("delay", FieldType.INT).parse(raw) == expected

    @pytest.mark.parametrize("raw", ["", "1.5", "abc", "1e3"])
    def test_parse_int_rejects(self, raw):
        with pytest.raises(FieldValueError):
            FieldSchema("delay", FieldType.INT).parse(raw)

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("TRUE", True), ("1", True), ("false", False), ("False", False), ("0", False)],
    )
    def test_parse_bool(self, raw, expected):
        assert FieldSchema("fifo", FieldType.BOOL).parse(raw) is expected

    def test_parse_bool_rejects(self):
        with pytest.raises(FieldValueError) as exc_info:
            FieldSchema("fifo", FieldType.BOOL).parse("yes")

        assert exc_info.value.field_name == "fifo"
        assert exc_info.value.field_type == "bool"

    def test_parse_string_is_unchanged(self):
        assert FieldSchema("policy", FieldType.STRING).parse(" {} ") == " {} "

    def test_parse_float(self):
        assert FieldSchema("ratio", FieldType.FLOAT).parse("0.25") == 0.25

    def test_parse_requires_string(self):
        with pytest.raises(FieldValueError):
            FieldSchema("delay", FieldType.INT).parse(30)

    def test_validate_rejects_bool_for_int(self):
        with pytest.raises(FieldValueError):
            FieldSchema("delay", FieldType.INT).validate(True)

    def test_validate_converts_int_for_float(self):
        assert FieldSchema("ratio", FieldType.FLOAT).validate(2) == 2.0

    def test_zero_value_uses_default(self):
        assert FieldSchema("timeout", FieldType.INT, 30).zero_value == 30
        assert FieldSchema("timeout", FieldType.INT).zero_value == 0
        assert FieldSchema("name", FieldType.STRING).zero_value == ""


class TestResourceSchema:
    """Tests for ResourceSchema."""

    def test_duplicate_fields(self):
        with pytest.raises(SchemaError):
            ResourceSchema(
                "dup",
                [FieldSchema("a", FieldType.INT), FieldSchema("a", FieldType.STRING)],
            )

    def test_invalid_default(self):
        with pytest.raises(FieldValueError):
            ResourceSchema("bad", [FieldSchema("a", FieldType.INT, "ten")])

    def test_unknown_field(self, sample_schema):
        with pytest.raises(UnknownFieldError) as exc_info:
            sample_schema.field("nope")

        assert "sample_queue" in str(exc_info.value)

    def test_field_names_keep_order(self, sample_schema):
        assert sample_schema.field_names() == ["name", "delay", "fifo", "ratio"]
        assert "delay" in sample_schema
        assert len(sample_schema) == 4

    def test_validate_attribute_map(self, sample_schema):
        validate_attribute_map({"delay": "DelaySeconds"}, sample_schema)

        with pytest.raises(SchemaError) as exc_info:
            validate_attribute_map({"delay": "DelaySeconds", "other": "Other"}, sample_schema)

        assert "other" in str(exc_info.value)


class TestResourceData:
    """Tests for presence, current values and change tracking."""

    def test_presence(self, sample_schema):
        data = ResourceData(sample_schema, config={"name": "orders", "fifo": False, "delay": 0})

        assert data.get_field_if_present("name") == "orders"
        assert data.get_field_if_present("fifo") is False
        assert data.get_field_if_present("delay") == 0
        assert data.get_field_if_present("ratio") is None

    def test_empty_string_is_not_present(self, sample_schema):
        data = ResourceData(sample_schema, config={"name": ""})
        assert data.get_field_if_present("name") is None

    def test_applied_only_value_is_not_present(self, sample_schema):
        data = ResourceData(sample_schema, applied={"delay": 30})

        assert data.get_field_if_present("delay") is None
        assert data.get_field("delay") == 30

    def test_get_field_falls_back_to_zero_value(self, sample_schema):
        data = ResourceData(sample_schema)

        assert data.get_field("delay") == 0
        assert data.get_field("fifo") is False
        assert data.get_field("name") == ""

    def test_set_field_coerces(self, sample_schema):
        data = ResourceData(sample_schema)
        data.set_field("delay", "30")
        data.set_field("fifo", "true")

        assert data.get_field("delay") == 30
        assert data.get_field("fifo") is True

    def test_set_field_unknown(self, sample_schema):
        with pytest.raises(UnknownFieldError):
            ResourceData(sample_schema).set_field("nope", "1")

    def test_assign_validates_type(self, sample_schema):
        data = ResourceData(sample_schema)
        with pytest.raises(FieldValueError):
            data.assign("delay", "30")

    def test_config_validated_on_construction(self, sample_schema):
        with pytest.raises(FieldValueError):
            ResourceData(sample_schema, config={"fifo": "true"})

    def test_has_field_changed(self, sample_schema):
        data = ResourceData(
            sample_schema,
            config={"delay": 45, "name": "orders"},
            applied={"delay": 30, "name": "orders"},
        )

        assert data.has_field_changed("delay") is True
        assert data.has_field_changed("name") is False
        assert data.has_field_changed("fifo") is False
        assert data.changed_fields() == ["delay"]

    def test_new_resource_reports_configured_fields_as_changed(self, sample_schema):
        data = ResourceData(sample_schema, config={"delay": 10, "fifo": False})
        # fifo=False equals the zero value, so it is not a change
        assert data.changed_fields() == ["delay"]

    def test_mark_applied_clears_changes(self, sample_schema):
        data = ResourceData(sample_schema, config={"delay": 10})
        data.mark_applied()

        assert data.changed_fields() == []

        data.assign("delay", 20)
        assert data.changed_fields() == ["delay"]

    def test_to_dict(self, sample_schema):
        data = ResourceData(sample_schema, config={"name": "orders"})
        assert data.to_dict() == {"name": "orders", "delay": 0, "fifo": False, "ratio": 0.0}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
