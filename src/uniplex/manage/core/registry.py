# uniplex/manage/core/registry.py
"""
Registry for management operations.

The registry is filled once at startup from the static operation
families and only read afterwards.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from uniplex.manage.contracts.operation import Operation
from uniplex.manage.core.errors import UnknownOperationError

logger = logging.getLogger(__name__)


class OperationRegistry:
    """
    Registry of Operation instances keyed by name.

    Example:
        registry = OperationRegistry()
        registry.register_all(GATE_OPERATIONS)

        operation = registry.get("get_gate")
        request = operation.translate({"gate_id": "gate_acme"})
    """

    def __init__(self) -> None:
        self._operations: dict[str, Operation] = {}

    def register(self, operation: Operation) -> None:
        """
        Register an operation.

        Raises:
            ValueError: If an operation with this name already exists
        """
        name = operation.name
        if name in self._operations:
            raise ValueError(f"Operation '{name}' is already registered")

        self._operations[name] = operation
        logger.debug("Registered operation: %s (%s)", name, operation.family or "-")

    def register_all(self, operations: Iterable[Operation]) -> None:
        for operation in operations:
            self.register(operation)

    def get(self, name: str) -> Operation:
        """
        Get an operation by name.

        Raises:
            UnknownOperationError: If the name is not registered
        """
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def has(self, name: str) -> bool:
        return name in self._operations

    def keys(self) -> list[str]:
        return list(self._operations.keys())

    def describe(self) -> list[dict[str, Any]]:
        """Advertised catalog: one ``{name, description, inputSchema}`` per operation."""
        return [op.descriptor.describe() for op in self._operations.values()]

    def families(self) -> dict[str, list[str]]:
        """Operation names grouped by resource family, in registration order."""
        out: dict[str, list[str]] = {}
        for op in self._operations.values():
            out.setdefault(op.family, []).append(op.name)
        return out

    def items(self) -> Iterator[tuple[str, Operation]]:
        yield from self._operations.items()

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)
