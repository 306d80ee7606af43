# uniplex/manage/operations/check.py
"""Gate checks and dry-run authorization: preview a decision without acting."""
from __future__ import annotations

from typing import Any, Mapping

from uniplex.manage.contracts.operation import (
    Operation,
    OperationDescriptor,
    TranslatedRequest,
    schema,
)
from uniplex.manage.core.translate import pick, take

FAMILY = "check"


def check_gate(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    body = pick(args, "action", "passport_id", "target")
    return TranslatedRequest("POST", f"/api/gates/{gate_id}/check", body=body)


def authorize_dry_run(args: Mapping[str, Any]) -> TranslatedRequest:
    # gate_id travels in the body: the path is not gate-scoped
    body = pick(args, "gate_id", "passport", "requested_permission", "requested_constraints")
    return TranslatedRequest("POST", "/api/authorize/dry-run", body=body)


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="check_gate",
            description="Test a passport against a gate to preview the allow/deny decision.",
            input_schema=schema(
                {
                    "gate_id": {"type": "string", "description": "The gate ID to check against"},
                    "action": {
                        "type": "string",
                        "description": 'The action to check (e.g., "flights:search")',
                    },
                    "passport_id": {"type": "string", "description": "The passport ID to check"},
                    "target": {"type": "string", "description": "Optional target resource"},
                },
                required=["gate_id", "action"],
            ),
        ),
        check_gate,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="authorize_dry_run",
            description="Test authorization without executing. Simulates a full gate check.",
            input_schema=schema(
                {
                    "gate_id": {"type": "string", "description": "The gate ID"},
                    "passport": {"type": "object", "description": "Full passport object to test"},
                    "requested_permission": {
                        "type": "string",
                        "description": "Permission key to test",
                    },
                    "requested_constraints": {
                        "type": "object",
                        "description": "Optional constraints to include in simulation",
                    },
                },
                required=["gate_id", "passport", "requested_permission"],
            ),
        ),
        authorize_dry_run,
        FAMILY,
    ),
]
