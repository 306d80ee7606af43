# uniplex/manage/operations/api_keys.py
"""API key management for the calling user."""
from __future__ import annotations

from typing import Any, Mapping

from uniplex.manage.contracts.operation import (
    Operation,
    OperationDescriptor,
    TranslatedRequest,
    schema,
)
from uniplex.manage.core.translate import pick, take

FAMILY = "api_keys"


def list_api_keys(args: Mapping[str, Any]) -> TranslatedRequest:
    return TranslatedRequest("GET", "/api/users/api-keys")


def create_api_key(args: Mapping[str, Any]) -> TranslatedRequest:
    return TranslatedRequest("POST", "/api/users/api-keys", body=pick(args, "name", "scopes"))


def revoke_api_key(args: Mapping[str, Any]) -> TranslatedRequest:
    (key_id,) = take(args, "key_id")
    return TranslatedRequest("DELETE", f"/api/users/api-keys/{key_id}")


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="list_api_keys",
            description="List your API keys.",
            input_schema=schema(),
        ),
        list_api_keys,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="create_api_key",
            description="Create a new API key.",
            input_schema=schema(
                {
                    "name": {"type": "string", "description": "Human-readable name for the key"},
                    "scopes": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": (
                            'Permission scopes (e.g., ["gates:read", "passports:write"])'
                        ),
                    },
                },
                required=["name"],
            ),
        ),
        create_api_key,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="revoke_api_key",
            description="Revoke an API key.",
            input_schema=schema(
                {"key_id": {"type": "string", "description": "The API key ID to revoke"}},
                required=["key_id"],
            ),
        ),
        revoke_api_key,
        FAMILY,
    ),
]
