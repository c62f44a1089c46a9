"""
Typed errors raised by the order store, scalar layer and handlers
"""

from __future__ import annotations

from typing import Any


class OrderDeskError(Exception):
    """Base class for all orderdesk errors.

    Subclasses set ``code`` so callers (and GraphQL clients, via
    ``extensions.code``) can tell failure kinds apart without reading messages.
    """

    code = "ORDERDESK_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class ValidationError(OrderDeskError):
    """A required field is empty or otherwise invalid."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def to_extensions(self) -> dict[str, Any]:
        extensions = super().to_extensions()
        if self.field:
            extensions["field"] = self.field
        return extensions


class ScalarFormatError(OrderDeskError):
    """A scalar value could not be parsed into its canonical form."""

    code = "SCALAR_FORMAT_ERROR"

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class NotFoundError(OrderDeskError):
    """No record with the requested identifier exists."""

    code = "NOT_FOUND"

    def __init__(self, message: str, id: str | None = None) -> None:
        super().__init__(message)
        self.id = id

    def to_extensions(self) -> dict[str, Any]:
        extensions = super().to_extensions()
        if self.id is not None:
            extensions["id"] = self.id
        return extensions


class SchemaRegistryError(OrderDeskError):
    """The GraphQL schema and the operation handlers do not line up."""

    code = "SCHEMA_REGISTRY_ERROR"
