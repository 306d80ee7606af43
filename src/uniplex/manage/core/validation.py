# uniplex/manage/core/validation.py
"""
Optional JSON-Schema validation of argument records.

Dispatch does not validate by default; the remote service owns business
validation. When enabled, records are checked against the operation's
advertised input schema before translation.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

import jsonschema

from uniplex.manage.contracts.operation import OperationDescriptor
from uniplex.manage.core.errors import ArgumentValidationError

logger = logging.getLogger(__name__)


class ArgumentValidator:
    """Stateless validator for argument records."""

    def validate(
        self,
        arguments: Mapping[str, Any],
        descriptor: OperationDescriptor,
    ) -> None:
        validator = jsonschema.Draft7Validator(descriptor.input_schema)
        errors = sorted(
            validator.iter_errors(dict(arguments)),
            key=lambda e: [str(p) for p in e.path],
        )
        if not errors:
            return

        messages = [_format(err) for err in errors]
        logger.warning(
            "Argument validation failed for '%s': %s", descriptor.name, messages
        )
        raise ArgumentValidationError(
            f"Invalid arguments for {descriptor.name}: {messages[0]}",
            errors=messages,
        )


def _format(error: jsonschema.ValidationError) -> str:
    if error.path:
        location = ".".join(str(p) for p in error.path)
        return f"{location}: {error.message}"
    return error.message


def check_schema(descriptor: OperationDescriptor) -> None:
    """Raise ``jsonschema.SchemaError`` if the descriptor's schema is malformed."""
    jsonschema.Draft7Validator.check_schema(descriptor.input_schema)
