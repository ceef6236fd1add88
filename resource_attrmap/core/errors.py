"""Custom exceptions for resource-attrmap."""

from typing import Any


class AttrMapError(Exception):
    """Base exception for attribute mapping errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class FieldWriteError(AttrMapError):
    """Exception raised when a store rejects an imported attribute value."""

    def __init__(self, field_name: str, cause: Exception = None):
        self.field_name = field_name
        self.cause = cause
        super().__init__(
            f"error setting {field_name}",
            details=str(cause) if cause is not None else None,
        )


class UnsupportedValueKindError(AttrMapError):
    """Exception raised when a field value cannot be sent as an API attribute."""

    def __init__(self, field_name: str, kind: str):
        self.field_name = field_name
        self.kind = kind
        super().__init__(f"attribute {field_name} is of unsupported type: {kind}")


class SchemaError(AttrMapError):
    """Exception raised for invalid schema or attribute map definitions."""

    def __init__(self, message: str = "Invalid schema", details: str = None):
        super().__init__(message, details)


class StoreError(AttrMapError):
    """Base exception for configuration store failures."""


class UnknownFieldError(StoreError):
    """Exception raised when a field is not declared in the resource schema."""

    def __init__(self, field_name: str, resource: str = None):
        self.field_name = field_name
        self.resource = resource
        message = f"Unknown field '{field_name}'"
        if resource:
            message = f"Unknown field '{field_name}' for resource '{resource}'"
        super().__init__(message)


class FieldValueError(StoreError):
    """Exception raised when a value cannot be coerced to a field's declared type."""

    def __init__(self, field_name: str, value: Any, field_type: str):
        self.field_name = field_name
        self.value = value
        self.field_type = field_type
        super().__init__(
            f"Invalid value for field '{field_name}'",
            details=f"cannot use {value!r} as {field_type}",
        )


class AttributeSyncError(AttrMapError):
    """Exception raised when an AWS attribute API call fails."""

    def __init__(
        self,
        operation: str,
        resource: str = None,
        error_code: str = None,
        details: str = None,
    ):
        self.operation = operation
        self.resource = resource
        self.error_code = error_code
        message = f"{operation} failed"
        if resource:
            message = f"{operation} failed for '{resource}'"
        super().__init__(message, details)

    def __str__(self):
        parts = [self.message]
        if self.error_code:
            parts.append(f"Code: {self.error_code}")
        if self.details:
            parts.append(self.details)
        return " - ".join(parts)


class ConfigurationError(AttrMapError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str = "Configuration error", details: str = None):
        super().__init__(message, details)
