"""Core module for resource-attrmap."""

from resource_attrmap.core.version import __version__
from resource_attrmap.core.attribute_map import AttributeMap
from resource_attrmap.core.values import ValueKind, classify_value, to_api_string
from resource_attrmap.core.errors import (
    AttrMapError,
    FieldWriteError,
    UnsupportedValueKindError,
    SchemaError,
    StoreError,
    UnknownFieldError,
    FieldValueError,
    AttributeSyncError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    "AttributeMap",
    "ValueKind",
    "classify_value",
    "to_api_string",
    "AttrMapError",
    "FieldWriteError",
    "UnsupportedValueKindError",
    "SchemaError",
    "StoreError",
    "UnknownFieldError",
    "FieldValueError",
    "AttributeSyncError",
    "ConfigurationError",
]
