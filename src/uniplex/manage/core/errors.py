# uniplex/manage/core/errors.py
"""
Error taxonomy for operation dispatch.

Every failure surfaced to the caller of dispatch is a ``UniplexError``
carrying a human-readable message.
"""
from __future__ import annotations

from typing import Any


class UniplexError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConfigurationError(UniplexError):
    """Raised at bootstrap when required settings are missing."""


class UnknownOperationError(UniplexError, KeyError):
    """Raised when an operation name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingArgumentError(UniplexError, KeyError):
    """Raised by a translator when a required path identifier is absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required argument: {field}")


class ArgumentValidationError(UniplexError, ValueError):
    """Raised when an argument record does not match the operation schema."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "validation_error",
            "message": self.message,
            "errors": self.errors,
        }


class ApiError(UniplexError):
    """Raised for any non-2xx response from the management API."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class TransportError(UniplexError):
    """Raised when the HTTP request could not be completed at all."""
