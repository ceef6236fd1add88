"""Resource schema declarations.

A ResourceSchema declares the typed fields of one resource kind (an SQS
queue, an SNS topic). Stores use it to coerce incoming strings and to
compute zero values; attribute maps are validated against it.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from resource_attrmap.core.errors import FieldValueError, SchemaError, UnknownFieldError

_INT_PATTERN = re.compile(r"^[+-]?\d+$")

_TRUE_STRINGS = {"true", "1"}
_FALSE_STRINGS = {"false", "0"}


class FieldType(Enum):
    """Declared type of a resource field."""

    INT = "int"
    BOOL = "bool"
    STRING = "string"
    FLOAT = "float"


ZERO_VALUES: dict[FieldType, Any] = {
    FieldType.INT: 0,
    FieldType.BOOL: False,
    FieldType.STRING: "",
    FieldType.FLOAT: 0.0,
}


@dataclass(frozen=True)
class FieldSchema:
    """Declaration of a single resource field.

    Attributes:
        name: Field name
        field_type: Declared type
        default: Value used when nothing is configured or applied
        description: Human-readable description
    """

    name: str
    field_type: FieldType
    default: Any | None = None
    description: str = ""

    def parse(self, raw: str) -> Any:
        """Coerce a raw API string into this field's type.

        Raises:
            FieldValueError: If the string is not valid for the declared type
        """
        if not isinstance(raw, str):
            raise FieldValueError(self.name, raw, self.field_type.value)

        if self.field_type is FieldType.STRING:
            return raw

        text = raw.strip()

        if self.field_type is FieldType.INT:
            if not _INT_PATTERN.match(text):
                raise FieldValueError(self.name, raw, self.field_type.value)
            return int(text)

        if self.field_type is FieldType.BOOL:
            lowered = text.lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
            raise FieldValueError(self.name, raw, self.field_type.value)

        try:
            return float(text)
        except ValueError as e:
            raise FieldValueError(self.name, raw, self.field_type.value) from e

    def validate(self, value: Any) -> Any:
        """Check that a typed value matches the declared type.

        None is accepted for every type and means "not set". Integers are
        accepted for FLOAT fields and converted.

        Raises:
            FieldValueError: If the value has the wrong type
        """
        if value is None:
            return None

        if self.field_type is FieldType.BOOL:
            valid = isinstance(value, bool)
        elif self.field_type is FieldType.INT:
            valid = isinstance(value, int) and not isinstance(value, bool)
        elif self.field_type is FieldType.FLOAT:
            valid = isinstance(value, (int, float)) and not isinstance(value, bool)
            if valid:
                value = float(value)
        else:
            valid = isinstance(value, str)

        if not valid:
            raise FieldValueError(self.name, value, self.field_type.value)
        return value

    @property
    def zero_value(self) -> Any:
        """Declared default, or the type's zero value."""
        if self.default is not None:
            return self.default
        return ZERO_VALUES[self.field_type]


class ResourceSchema:
    """Ordered collection of field declarations for one resource kind."""

    def __init__(self, name: str, fields: Iterable[FieldSchema]):
        self.name = name
        self._fields: dict[str, FieldSchema] = {}

        for field_schema in fields:
            if field_schema.name in self._fields:
                raise SchemaError(
                    f"Duplicate field in schema '{name}'",
                    details=field_schema.name,
                )
            if field_schema.default is not None:
                field_schema.validate(field_schema.default)
            self._fields[field_schema.name] = field_schema

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self):
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def field(self, name: str) -> FieldSchema:
        """Return the declaration of a field.

        Raises:
            UnknownFieldError: If the field is not declared
        """
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name, self.name) from None

    def field_names(self) -> list[str]:
        return list(self._fields)

    def zero_value(self, name: str) -> Any:
        return self.field(name).zero_value


def validate_attribute_map(attribute_map: Mapping[str, str], schema: ResourceSchema) -> None:
    """Check that every mapped resource field is declared in the schema.

    Args:
        attribute_map: Resource field name to API attribute name
        schema: Schema the fields must belong to

    Raises:
        SchemaError: If any mapped field is missing from the schema
    """
    missing = [name for name in attribute_map if name not in schema]
    if missing:
        raise SchemaError(
            f"Attribute map references fields not declared in schema '{schema.name}'",
            details=", ".join(missing),
        )
