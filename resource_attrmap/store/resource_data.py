"""Schema-backed, change-tracked resource field store."""

from collections.abc import Mapping
from typing import Any

from resource_attrmap.store.base import ConfigurationStore
from resource_attrmap.store.schema import ResourceSchema


class ResourceData(ConfigurationStore):
    """Typed field values for one resource instance.

    Two layers of values are kept:

    - configured values: set explicitly through the constructor, assign()
      or set_field() (imports from AWS land here)
    - applied values: the last state known to be applied remotely

    The current value of a field is its configured value, else its applied
    value, else the schema's zero value. A field has changed when its
    current value differs from its applied value.

    A field is present when it was explicitly configured with a value other
    than None or the empty string. Explicit 0 and False count as present;
    schema defaults alone do not.

    Example:
        >>> data = ResourceData(QUEUE_SCHEMA, config={"fifo_queue": False})
        >>> data.get_field_if_present("fifo_queue")
        False
        >>> data.get_field_if_present("delay_seconds") is None
        True
    """

    def __init__(
        self,
        schema: ResourceSchema,
        config: Mapping[str, Any] | None = None,
        applied: Mapping[str, Any] | None = None,
    ):
        self.schema = schema
        self._config: dict[str, Any] = {}
        self._applied: dict[str, Any] = {}

        for name, value in (applied or {}).items():
            self._applied[name] = self.schema.field(name).validate(value)

        for name, value in (config or {}).items():
            self.assign(name, value)

    def __repr__(self) -> str:
        return f"ResourceData(schema={self.schema.name!r}, values={self.to_dict()!r})"

    def set_field(self, name: str, value: str) -> None:
        self._config[name] = self.schema.field(name).parse(value)

    def assign(self, name: str, value: Any) -> None:
        """Set a typed value on a field.

        Raises:
            UnknownFieldError: If the field is not declared
            FieldValueError: If the value does not match the declared type
        """
        self._config[name] = self.schema.field(name).validate(value)

    def get_field_if_present(self, name: str) -> Any | None:
        self.schema.field(name)

        value = self._config.get(name)
        if value is None or value == "":
            return None
        return value

    def get_field(self, name: str) -> Any:
        field_schema = self.schema.field(name)

        if name in self._config and self._config[name] is not None:
            return self._config[name]
        if name in self._applied and self._applied[name] is not None:
            return self._applied[name]
        return field_schema.zero_value

    def has_field_changed(self, name: str) -> bool:
        return self.get_field(name) != self._applied_value(name)

    def changed_fields(self) -> list[str]:
        """Return the names of all changed fields in schema order."""
        return [name for name in self.schema.field_names() if self.has_field_changed(name)]

    def mark_applied(self) -> None:
        """Record the current values as the applied state."""
        self._applied = self.to_dict()

    def to_dict(self) -> dict[str, Any]:
        """Return the current value of every declared field."""
        return {name: self.get_field(name) for name in self.schema.field_names()}

    def _applied_value(self, name: str) -> Any:
        value = self._applied.get(name)
        if value is None:
            return self.schema.zero_value(name)
        return value
