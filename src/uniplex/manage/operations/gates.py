# uniplex/manage/operations/gates.py
"""
Gate operations.

A gate is a permission enforcement point: it owns a permission catalog
and a trust profile, and checks passports presented by agents.
"""
from __future__ import annotations

from typing import Any, Mapping

from uniplex.manage.contracts.operation import (
    Operation,
    OperationDescriptor,
    TranslatedRequest,
    schema,
)
from uniplex.manage.core.translate import pick, rest, take

FAMILY = "gates"

PROFILES = ["L1", "L2", "L3"]

_GATE_ID = {
    "type": "string",
    "description": 'The full gate ID (e.g., "gate_acme-travel")',
}


def list_gates(args: Mapping[str, Any]) -> TranslatedRequest:
    return TranslatedRequest("GET", "/api/gates")


def get_gate(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("GET", f"/api/gates/{gate_id}")


def create_gate(args: Mapping[str, Any]) -> TranslatedRequest:
    # gate_id is the requested suffix here, so it belongs in the body
    body = pick(args, "name", "gate_id", "description", "profile", "allow_self_issued")
    return TranslatedRequest("POST", "/api/gates", body=body)


def update_gate(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("PATCH", f"/api/gates/{gate_id}", body=rest(args, "gate_id"))


def delete_gate(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("DELETE", f"/api/gates/{gate_id}")


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="list_gates",
            description=(
                "List all gates you own. Gates are permission enforcement "
                "points that protect your tools."
            ),
            input_schema=schema(),
        ),
        list_gates,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="get_gate",
            description="Get details for a specific gate.",
            input_schema=schema({"gate_id": _GATE_ID}, required=["gate_id"]),
        ),
        get_gate,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="create_gate",
            description=(
                "Create a new gate. A gate defines what permissions exist and "
                "enforces access control for your tools."
            ),
            input_schema=schema(
                {
                    "name": {
                        "type": "string",
                        "description": 'Human-readable name for the gate (e.g., "Acme Travel API")',
                    },
                    "gate_id": {
                        "type": "string",
                        "description": (
                            'Unique identifier suffix. Will be prefixed with "gate_". '
                            "Use lowercase, numbers, hyphens, underscores "
                            '(e.g., "acme-travel")'
                        ),
                    },
                    "description": {
                        "type": "string",
                        "description": "Optional description of what this gate protects",
                    },
                    "profile": {
                        "type": "string",
                        "enum": PROFILES,
                        "description": (
                            "Trust profile: L1 (dev/test), L2 (production), "
                            "L3 (financial, requires proof-of-possession)"
                        ),
                    },
                    "allow_self_issued": {
                        "type": "boolean",
                        "description": "For L1 only: allow self-issued passports (default: false)",
                    },
                },
                required=["name", "gate_id", "profile"],
            ),
        ),
        create_gate,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="update_gate",
            description="Update settings for an existing gate.",
            input_schema=schema(
                {
                    "gate_id": _GATE_ID,
                    "name": {"type": "string", "description": "New name for the gate"},
                    "description": {"type": "string", "description": "New description"},
                    "profile": {
                        "type": "string",
                        "enum": PROFILES,
                        "description": "New trust profile",
                    },
                    "allow_self_issued": {
                        "type": "boolean",
                        "description": "Allow self-issued passports (L1 only)",
                    },
                },
                required=["gate_id"],
            ),
        ),
        update_gate,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="delete_gate",
            description="Delete (archive) a gate. This will deactivate all signing keys.",
            input_schema=schema(
                {"gate_id": {"type": "string", "description": "The full gate ID to delete"}},
                required=["gate_id"],
            ),
        ),
        delete_gate,
        FAMILY,
    ),
]
