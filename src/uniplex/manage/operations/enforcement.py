# uniplex/manage/operations/enforcement.py
"""
CEL enforcement.

Enforcing an action evaluates the passport's constraints server-side and
records a signed enforcement attestation of the decision.
"""
from __future__ import annotations

from typing import Any, Mapping

from uniplex.manage.contracts.operation import (
    Operation,
    OperationDescriptor,
    TranslatedRequest,
    schema,
)
from uniplex.manage.core.translate import pick, query, take

FAMILY = "enforcement"

DECISIONS = ["PERMIT", "BLOCK", "SUSPEND"]

_PASSPORT_ID = {"type": "string", "description": "The passport ID"}
_ATTESTATION_ID = {"type": "string", "description": "The enforcement attestation ID"}


def enforce_action(args: Mapping[str, Any]) -> TranslatedRequest:
    body = pick(args, "passport_id", "action", "target", "cost_cents", "metadata")
    return TranslatedRequest("POST", "/api/enforce", body=body)


def list_enforcement_attestations(args: Mapping[str, Any]) -> TranslatedRequest:
    (passport_id,) = take(args, "passport_id")
    return TranslatedRequest(
        "GET",
        f"/api/passports/{passport_id}/enforcement",
        query=query(args, "decision", "limit"),
    )


def get_enforcement_attestation(args: Mapping[str, Any]) -> TranslatedRequest:
    (attestation_id,) = take(args, "attestation_id")
    return TranslatedRequest("GET", f"/api/enforcement/{attestation_id}")


def verify_enforcement_attestation(args: Mapping[str, Any]) -> TranslatedRequest:
    # POST by API contract, with no payload
    (attestation_id,) = take(args, "attestation_id")
    return TranslatedRequest("POST", f"/api/enforcement/{attestation_id}/verify")


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="enforce_action",
            description="Evaluate constraints and record an enforcement attestation via CEL.",
            input_schema=schema(
                {
                    "passport_id": _PASSPORT_ID,
                    "action": {
                        "type": "string",
                        "description": 'Action to enforce (e.g., "flights:book")',
                    },
                    "target": {"type": "string", "description": "Optional target resource"},
                    "cost_cents": {
                        "type": "number",
                        "description": "Cost in cents for this action",
                    },
                    "metadata": {"type": "object", "description": "Optional metadata"},
                },
                required=["passport_id", "action"],
            ),
        ),
        enforce_action,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="list_enforcement_attestations",
            description="List enforcement attestations for a passport.",
            input_schema=schema(
                {
                    "passport_id": _PASSPORT_ID,
                    "decision": {
                        "type": "string",
                        "enum": DECISIONS,
                        "description": "Filter by decision",
                    },
                    "limit": {"type": "number", "description": "Max results to return"},
                },
                required=["passport_id"],
            ),
        ),
        list_enforcement_attestations,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="get_enforcement_attestation",
            description="Get a single enforcement attestation by ID.",
            input_schema=schema({"attestation_id": _ATTESTATION_ID}, required=["attestation_id"]),
        ),
        get_enforcement_attestation,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="verify_enforcement_attestation",
            description="Verify the cryptographic signature of an enforcement attestation.",
            input_schema=schema({"attestation_id": _ATTESTATION_ID}, required=["attestation_id"]),
        ),
        verify_enforcement_attestation,
        FAMILY,
    ),
]
