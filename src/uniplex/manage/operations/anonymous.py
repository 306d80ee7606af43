# uniplex/manage/operations/anonymous.py
"""Anonymous access: what a gate allows callers without a passport to do."""
from __future__ import annotations

from typing import Any, Mapping

from uniplex.manage.contracts.operation import (
    Operation,
    OperationDescriptor,
    TranslatedRequest,
    schema,
)
from uniplex.manage.core.translate import rest, take

FAMILY = "anonymous"

_GATE_ID = {"type": "string", "description": "The gate ID"}


def get_anonymous_policy(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("GET", f"/api/gates/{gate_id}/anonymous-policy")


def set_anonymous_policy(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest(
        "PUT", f"/api/gates/{gate_id}/anonymous-policy", body=rest(args, "gate_id")
    )


def get_anonymous_log(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("GET", f"/api/gates/{gate_id}/anonymous-log")


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="get_anonymous_policy",
            description="Get the anonymous access policy for a gate.",
            input_schema=schema({"gate_id": _GATE_ID}, required=["gate_id"]),
        ),
        get_anonymous_policy,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="set_anonymous_policy",
            description="Configure anonymous access policy on a gate.",
            input_schema=schema(
                {
                    "gate_id": _GATE_ID,
                    "enabled": {
                        "type": "boolean",
                        "description": "Enable or disable anonymous access",
                    },
                    "allowed_actions": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Actions allowed for anonymous access",
                    },
                    "blocked_actions": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Actions blocked for anonymous access",
                    },
                    "rate_limit_per_minute": {
                        "type": "number",
                        "description": "Rate limit per minute for anonymous requests",
                    },
                    "rate_limit_per_hour": {
                        "type": "number",
                        "description": "Rate limit per hour for anonymous requests",
                    },
                    "read_only": {
                        "type": "boolean",
                        "description": "Restrict anonymous access to read-only actions",
                    },
                    "upgrade_message": {
                        "type": "string",
                        "description": "Message shown when upgrade is needed",
                    },
                    "upgrade_url": {
                        "type": "string",
                        "description": "URL for upgrading to authenticated access",
                    },
                },
                required=["gate_id"],
            ),
        ),
        set_anonymous_policy,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="get_anonymous_log",
            description="Get the anonymous access audit log for a gate.",
            input_schema=schema({"gate_id": _GATE_ID}, required=["gate_id"]),
        ),
        get_anonymous_log,
        FAMILY,
    ),
]
