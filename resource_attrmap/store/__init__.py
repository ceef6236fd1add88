"""Configuration stores for resource fields."""

from resource_attrmap.store.base import ConfigurationStore
from resource_attrmap.store.resource_data import ResourceData
from resource_attrmap.store.schema import (
    FieldSchema,
    FieldType,
    ResourceSchema,
    validate_attribute_map,
)

__all__ = [
    "ConfigurationStore",
    "ResourceData",
    "FieldSchema",
    "FieldType",
    "ResourceSchema",
    "validate_attribute_map",
]
