"""Value kinds and API string coercion.

Store values arrive as plain Python objects. They are first classified into
a ValueKind, then converted to the canonical string form used by AWS
attribute APIs:

    integer -> base-10 digits ("-5", "30")
    boolean -> "true" / "false"
    string  -> unchanged

Any other kind (float, None, list, ...) is rejected with
UnsupportedValueKindError. There is no str() fallback.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from resource_attrmap.core.errors import UnsupportedValueKindError


class ValueKind(Enum):
    """Kind of a store value as seen by the attribute translator."""

    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ClassifiedValue:
    """A store value tagged with its kind.

    Attributes:
        kind: Classified kind of the value
        value: The original value
        type_name: Python type name, kept for error reporting
    """

    kind: ValueKind
    value: Any
    type_name: str


def classify_value(value: Any) -> ClassifiedValue:
    """Classify a store value.

    bool is checked before int since bool is a subclass of int.

    Args:
        value: Value returned by a configuration store

    Returns:
        ClassifiedValue with the detected kind
    """
    type_name = type(value).__name__

    if isinstance(value, bool):
        return ClassifiedValue(ValueKind.BOOLEAN, value, type_name)
    if isinstance(value, int):
        return ClassifiedValue(ValueKind.INTEGER, value, type_name)
    if isinstance(value, str):
        return ClassifiedValue(ValueKind.STRING, value, type_name)
    return ClassifiedValue(ValueKind.UNSUPPORTED, value, type_name)


def to_api_string(field_name: str, value: Any) -> str:
    """Convert a store value to its API attribute string.

    Args:
        field_name: Local field name, used in the error message
        value: Value read from the store

    Returns:
        Canonical string form of the value

    Raises:
        UnsupportedValueKindError: If the value is not an int, bool or str

    Examples:
        >>> to_api_string("delay_seconds", 30)
        '30'
        >>> to_api_string("fifo_queue", False)
        'false'
        >>> to_api_string("policy", "{}")
        '{}'
    """
    classified = classify_value(value)

    if classified.kind is ValueKind.INTEGER:
        return str(int(classified.value))
    if classified.kind is ValueKind.BOOLEAN:
        return "true" if classified.value else "false"
    if classified.kind is ValueKind.STRING:
        return classified.value

    raise UnsupportedValueKindError(field_name, classified.type_name)
