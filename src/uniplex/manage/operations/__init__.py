"""Operation families and the assembled dispatch table."""
from __future__ import annotations

from uniplex.manage.contracts.operation import Operation
from uniplex.manage.core.registry import OperationRegistry
from uniplex.manage.operations import (
    anonymous,
    api_keys,
    attestations,
    catalogs,
    check,
    commerce,
    constraints,
    enforcement,
    gates,
    passports,
    state,
)

# Registration order is the advertised order
FAMILIES = [
    gates,
    passports,
    attestations,
    catalogs,
    check,
    constraints,
    enforcement,
    anonymous,
    state,
    commerce,
    api_keys,
]

ALL_OPERATIONS: list[Operation] = [op for family in FAMILIES for op in family.OPERATIONS]


def build_registry() -> OperationRegistry:
    """Build a fresh registry holding every operation."""
    registry = OperationRegistry()
    registry.register_all(ALL_OPERATIONS)
    return registry


__all__ = ["ALL_OPERATIONS", "FAMILIES", "build_registry"]
