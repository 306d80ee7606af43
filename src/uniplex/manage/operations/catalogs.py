# uniplex/manage/operations/catalogs.py
"""
Permission catalog operations.

A gate edits a draft catalog, then publishes signed, numbered versions.
Passports reference the published version they were issued against.
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

FAMILY = "catalogs"

RISK_LEVELS = ["low", "medium", "high", "critical"]
TRUST_LEVELS = [1, 2, 3]

_GATE_ID = {"type": "string", "description": "The gate ID"}

_PERMISSION = {
    "type": "object",
    "required": [
        "permission_key",
        "display_name",
        "description",
        "risk_level",
        "min_trust_level",
    ],
    "properties": {
        "permission_key": {"type": "string"},
        "display_name": {"type": "string"},
        "description": {"type": "string"},
        "risk_level": {"type": "string", "enum": RISK_LEVELS},
        "min_trust_level": {"type": "number", "enum": TRUST_LEVELS},
        "constraints": {"type": "object"},
    },
}


def get_catalog(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("GET", f"/api/gates/{gate_id}/catalog")


def create_catalog(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("POST", f"/api/gates/{gate_id}/catalog", body=rest(args, "gate_id"))


def publish_catalog(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest(
        "POST",
        f"/api/gates/{gate_id}/catalog/publish",
        body=pick(args, "change_summary", "effective_at"),
    )


def list_catalog_versions(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("GET", f"/api/gates/{gate_id}/catalog/versions")


def get_catalog_version(args: Mapping[str, Any]) -> TranslatedRequest:
    gate_id, version = take(args, "gate_id", "version")
    return TranslatedRequest("GET", f"/api/gates/{gate_id}/catalog/{version}")


def get_catalog_impact(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest("GET", f"/api/gates/{gate_id}/catalog/impact")


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="get_catalog",
            description="Get the active draft permission catalog for a gate.",
            input_schema=schema({"gate_id": _GATE_ID}, required=["gate_id"]),
        ),
        get_catalog,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="create_catalog",
            description=(
                "Create or update the permission catalog for a gate. Defines what "
                "permissions agents can request."
            ),
            input_schema=schema(
                {
                    "gate_id": _GATE_ID,
                    "version": {"type": "string", "description": 'Semver version (e.g., "1.0.0")'},
                    "catalog_name": {"type": "string", "description": "Human-readable name"},
                    "description": {"type": "string", "description": "Optional description"},
                    "permissions": {
                        "type": "array",
                        "description": "Permission definitions",
                        "items": _PERMISSION,
                    },
                    "is_active": {
                        "type": "boolean",
                        "description": "Whether this catalog is active (default: true)",
                    },
                },
                required=["gate_id", "permissions"],
            ),
        ),
        create_catalog,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="publish_catalog",
            description="Build, sign, and atomically publish a catalog snapshot.",
            input_schema=schema(
                {
                    "gate_id": _GATE_ID,
                    "change_summary": {
                        "type": "string",
                        "description": "Summary of changes in this version",
                    },
                    "effective_at": {
                        "type": "string",
                        "description": "ISO timestamp when this version becomes effective",
                    },
                },
                required=["gate_id"],
            ),
        ),
        publish_catalog,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="list_catalog_versions",
            description="List all published catalog versions (metadata only).",
            input_schema=schema({"gate_id": _GATE_ID}, required=["gate_id"]),
        ),
        list_catalog_versions,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="get_catalog_version",
            description="Get a specific published catalog version.",
            input_schema=schema(
                {
                    "gate_id": _GATE_ID,
                    "version": {"type": "number", "description": "Version number to retrieve"},
                },
                required=["gate_id", "version"],
            ),
        ),
        get_catalog_version,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="get_catalog_impact",
            description="Get impact analysis for pending catalog changes.",
            input_schema=schema({"gate_id": _GATE_ID}, required=["gate_id"]),
        ),
        get_catalog_impact,
        FAMILY,
    ),
]
