# uniplex/manage/operations/passports.py
"""
Passport operations.

A passport is a scoped, time-limited credential granting an agent a set
of permissions against one gate.
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

FAMILY = "passports"


def list_passports(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("GET", f"/api/gates/{gate_id}/passports")


def get_passport(args: Mapping[str, Any]) -> TranslatedRequest:
    gate_id, passport_id = take(args, "gate_id", "passport_id")
    return TranslatedRequest("GET", f"/api/gates/{gate_id}/passports/{passport_id}")


def issue_passport(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest(
        "POST", f"/api/gates/{gate_id}/passports", body=rest(args, "gate_id")
    )


def revoke_passport(args: Mapping[str, Any]) -> TranslatedRequest:
    gate_id, passport_id = take(args, "gate_id", "passport_id")
    return TranslatedRequest("DELETE", f"/api/gates/{gate_id}/passports/{passport_id}")


def reissue_passport(args: Mapping[str, Any]) -> TranslatedRequest:
    (passport_id,) = take(args, "passport_id")
    return TranslatedRequest(
        "POST",
        f"/api/passports/{passport_id}/reissue",
        body=pick(args, "accept_catalog_version"),
    )


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="list_passports",
            description="List all active passports for a gate.",
            input_schema=schema(
                {"gate_id": {"type": "string", "description": "The gate ID to list passports for"}},
                required=["gate_id"],
            ),
        ),
        list_passports,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="get_passport",
            description="Get details for a specific passport.",
            input_schema=schema(
                {
                    "gate_id": {"type": "string", "description": "The gate ID"},
                    "passport_id": {"type": "string", "description": "The passport ID"},
                },
                required=["gate_id", "passport_id"],
            ),
        ),
        get_passport,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="issue_passport",
            description=(
                "Issue a new passport to an agent. The passport grants the agent "
                "specific permissions for this gate."
            ),
            input_schema=schema(
                {
                    "gate_id": {
                        "type": "string",
                        "description": "The gate ID to issue passport for",
                    },
                    "agent_id": {
                        "type": "string",
                        "description": (
                            "Identifier for the agent receiving the passport "
                            '(e.g., "agent_claude-123")'
                        ),
                    },
                    "agent_name": {
                        "type": "string",
                        "description": "Human-readable name for the agent",
                    },
                    "public_key": {
                        "type": "string",
                        "description": "Agent public key, required for proof-of-possession on L3 gates",
                    },
                    "permissions": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": (
                            "List of permission keys to grant "
                            '(e.g., ["flights:search", "flights:book"])'
                        ),
                    },
                    "constraints": {
                        "type": "object",
                        "description": 'Optional constraints (e.g., { "core:cost:max": 100000 })',
                    },
                    "expires_in": {
                        "type": "string",
                        "description": 'How long until the passport expires (e.g., "1h", "24h", "7d")',
                    },
                    "metadata": {
                        "type": "object",
                        "description": "Optional metadata to attach to the passport",
                    },
                },
                required=["gate_id", "agent_id", "permissions"],
            ),
        ),
        issue_passport,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="revoke_passport",
            description="Revoke a passport immediately. The agent will no longer be able to use it.",
            input_schema=schema(
                {
                    "gate_id": {"type": "string", "description": "The gate ID"},
                    "passport_id": {"type": "string", "description": "The passport ID to revoke"},
                },
                required=["gate_id", "passport_id"],
            ),
        ),
        revoke_passport,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="reissue_passport",
            description=(
                "Reissue a passport against the gate's current published catalog. "
                "Optionally pin the catalog version the holder accepts."
            ),
            input_schema=schema(
                {
                    "passport_id": {"type": "string", "description": "The passport ID"},
                    "accept_catalog_version": {
                        "type": "number",
                        "description": "Catalog version to accept (default: latest published)",
                    },
                },
                required=["passport_id"],
            ),
        ),
        reissue_passport,
        FAMILY,
    ),
]
