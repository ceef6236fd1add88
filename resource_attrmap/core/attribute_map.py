"""Translation between resource fields and flat AWS API attribute maps.

An AttributeMap maps local resource field names to AWS API attribute
names. Useful for SQS queue or SNS topic attribute handling, where the API
exchanges every setting as a string in a single flat dictionary.

The map never logs, retries or caches. Errors are raised to the caller:
FieldWriteError on import, UnsupportedValueKindError on export.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from resource_attrmap.core.errors import FieldWriteError, SchemaError
from resource_attrmap.core.values import to_api_string
from resource_attrmap.store.base import ConfigurationStore

class AttributeMap(Mapping):
    """Immutable map of resource field name to AWS API attribute name.

    Example:
        >>> attribute_map = AttributeMap({"delay_seconds": "DelaySeconds"})
        >>> attribute_map.resource_data_to_api_attributes_create(data)
        {'DelaySeconds': '30'}
    """

    def __init__(self, attributes: Mapping[str, str]):
        for resource_name, api_name in attributes.items():
            if not isinstance(resource_name, str) or not resource_name:
                raise SchemaError(
                    "Invalid attribute map",
                    details=f"resource attribute name must be a non-empty string, got {resource_name!r}",
                )
            if not isinstance(api_name, str) or not api_name:
                raise SchemaError(
                    "Invalid attribute map",
                    details=f"API attribute name for '{resource_name}' must be a non-empty string, got {api_name!r}",
                )

        self._attributes: Mapping[str, str] = MappingProxyType(dict(attributes))

    def __getitem__(self, resource_name: str) -> str:
        return self._attributes[resource_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"AttributeMap({dict(self._attributes)!r})"

    def api_attribute_names(self) -> list[str]:
        """Return the mapped API attribute names in mapping order."""
        return list(self._attributes.values())

    def api_attributes_to_resource_data(
        self, api_attributes: Mapping[str, str], store: ConfigurationStore
    ) -> None:
        """Set resource fields from a map of AWS API attributes.

        Attributes missing from api_attributes are skipped, and API
        attributes that are not mapped are ignored. Values are passed to the
        store as strings; the store coerces them to the declared field type.

        Fields are written in mapping order. The first failing write stops
        the import; fields written before it keep their new values.

        Args:
            api_attributes: Attribute name to string value, as returned by AWS
            store: Store receiving the values

        Raises:
            FieldWriteError: If the store fails to set a value, whatever the
                cause
        """
        for resource_name, api_name in self._attributes.items():
            if api_name not in api_attributes:
                continue

            try:
                store.set_field(resource_name, api_attributes[api_name])
            except Exception as e:
                raise FieldWriteError(resource_name, e) from e

    def resource_data_to_api_attributes_create(
        self, store: ConfigurationStore
    ) -> dict[str, str]:
        """Build a map of AWS API attributes suitable for resource create.

        Every field with a present value is included. Fields that are unset
        are left out entirely rather than sent as empty strings.

        Args:
            store: Store holding the resource configuration

        Returns:
            API attribute name to string value

        Raises:
            UnsupportedValueKindError: If a value is not an int, bool or str
        """
        api_attributes: dict[str, str] = {}

        for resource_name, api_name in self._attributes.items():
            value = store.get_field_if_present(resource_name)
            if value is None:
                continue

            api_attributes[api_name] = to_api_string(resource_name, value)

        return api_attributes

    def resource_data_to_api_attributes_update(
        self, store: ConfigurationStore
    ) -> dict[str, str]:
        """Build a map of AWS API attributes suitable for resource update.

        Only fields the store reports as changed are included, with their
        current value. A change to a zero value is still included.

        Args:
            store: Store holding the resource configuration

        Returns:
            API attribute name to string value

        Raises:
            UnsupportedValueKindError: If a value is not an int, bool or str
        """
        api_attributes: dict[str, str] = {}

        for resource_name, api_name in self._attributes.items():
            if not store.has_field_changed(resource_name):
                continue

            api_attributes[api_name] = to_api_string(
                resource_name, store.get_field(resource_name)
            )

        return api_attributes
