# uniplex/manage/operations/attestations.py
"""Audit attestations: what agents did at a gate and whether it was allowed."""
from __future__ import annotations

from typing import Any, Mapping

from uniplex.manage.contracts.operation import (
    Operation,
    OperationDescriptor,
    TranslatedRequest,
    schema,
)
from uniplex.manage.core.translate import query, rest, take

FAMILY = "attestations"


def list_attestations(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest(
        "GET",
        f"/api/gates/{gate_id}/attestations",
        query=query(args, "passport_id", "agent_id", "permission", "since", "limit"),
    )


def record_attestation(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest(
        "POST", f"/api/gates/{gate_id}/attestations", body=rest(args, "gate_id")
    )


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="list_attestations",
            description=(
                "List attestations (audit log entries) for a gate. Shows what "
                "agents did and whether actions were allowed."
            ),
            input_schema=schema(
                {
                    "gate_id": {"type": "string", "description": "The gate ID"},
                    "passport_id": {"type": "string", "description": "Filter by passport ID"},
                    "agent_id": {"type": "string", "description": "Filter by agent ID"},
                    "permission": {"type": "string", "description": "Filter by permission key"},
                    "since": {
                        "type": "string",
                        "description": "ISO timestamp - only return attestations after this time",
                    },
                    "limit": {
                        "type": "number",
                        "description": "Max results to return (default: 100, max: 1000)",
                    },
                },
                required=["gate_id"],
            ),
        ),
        list_attestations,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="record_attestation",
            description=(
                "Record a new attestation. Usually called automatically by MCP "
                "servers, but can be called manually for testing."
            ),
            input_schema=schema(
                {
                    "gate_id": {"type": "string", "description": "The gate ID"},
                    "passport_id": {"type": "string", "description": "The passport that was used"},
                    "agent_id": {"type": "string", "description": "The agent that made the request"},
                    "permission": {"type": "string", "description": "The permission that was checked"},
                    "tool_name": {"type": "string", "description": "Name of the tool that was called"},
                    "result": {
                        "type": "string",
                        "enum": ["allowed", "denied"],
                        "description": "Whether the action was allowed or denied",
                    },
                    "denial_code": {"type": "string", "description": "If denied, the denial code"},
                    "input_hash": {
                        "type": "string",
                        "description": "SHA-256 hash of the input (for privacy)",
                    },
                    "output_hash": {
                        "type": "string",
                        "description": "SHA-256 hash of the output (for privacy)",
                    },
                    "constraints_used": {
                        "type": "object",
                        "description": "Constraints that were checked",
                    },
                    "execution_ms": {
                        "type": "number",
                        "description": "How long the tool call took in milliseconds",
                    },
                    "metadata": {"type": "object", "description": "Additional metadata"},
                },
                required=["gate_id", "passport_id", "agent_id", "permission", "tool_name", "result"],
            ),
        ),
        record_attestation,
        FAMILY,
    ),
]
