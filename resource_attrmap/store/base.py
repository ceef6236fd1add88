"""Configuration store interface consumed by the attribute translator.

A store holds the declared, typed and change-tracked fields of one
resource. The translator only talks to it through the four methods below;
schema knowledge (which field has which type) stays inside the store.
"""

from abc import ABC, abstractmethod
from typing import Any


class ConfigurationStore(ABC):
    """Abstract base class for typed, change-tracked resource field stores.

    Implementations signal failures by raising StoreError subclasses
    (UnknownFieldError, FieldValueError).

    Example:
        >>> data = ResourceData(QUEUE_SCHEMA, config={"delay_seconds": 30})
        >>> data.get_field_if_present("delay_seconds")
        30
        >>> data.has_field_changed("delay_seconds")
        True
    """

    @abstractmethod
    def set_field(self, name: str, value: str) -> None:
        """Write a string value into a field, coercing it to the field's type.

        Args:
            name: Local field name
            value: Raw string value, typically received from an AWS API

        Raises:
            UnknownFieldError: If the field is not declared
            FieldValueError: If the value cannot be coerced to the declared type
        """

    @abstractmethod
    def get_field_if_present(self, name: str) -> Any | None:
        """Return the field value, or None if the field is unset or zero-valued.

        Args:
            name: Local field name

        Returns:
            The current value, or None when the field is not present
        """

    @abstractmethod
    def get_field(self, name: str) -> Any:
        """Return the current value of a field regardless of presence.

        Args:
            name: Local field name

        Returns:
            The current value (the zero value when nothing is set)
        """

    @abstractmethod
    def has_field_changed(self, name: str) -> bool:
        """Whether the field differs from its last applied value.

        Args:
            name: Local field name

        Returns:
            True if the current value differs from the applied value
        """
