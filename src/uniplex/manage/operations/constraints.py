# uniplex/manage/operations/constraints.py
"""
Constraints and constraint templates.

Constraints are named limits (rate, cost, ...) attached to a passport.
They are set directly or copied from a system or user template.
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

FAMILY = "constraints"

_PASSPORT_ID = {"type": "string", "description": "The passport ID"}


def get_constraints(args: Mapping[str, Any]) -> TranslatedRequest:
    (passport_id,) = take(args, "passport_id")
    return TranslatedRequest("GET", f"/api/passports/{passport_id}/constraints")


def set_constraints(args: Mapping[str, Any]) -> TranslatedRequest:
    (passport_id,) = take(args, "passport_id")
    # The constraint map is the whole body, not wrapped
    return TranslatedRequest(
        "PUT", f"/api/passports/{passport_id}/constraints", body=args.get("constraints")
    )


def list_constraint_types(args: Mapping[str, Any]) -> TranslatedRequest:
    return TranslatedRequest("GET", "/api/constraints/types", query=query(args, "category"))


def list_constraint_templates(args: Mapping[str, Any]) -> TranslatedRequest:
    return TranslatedRequest("GET", "/api/constraint-templates", query=query(args, "category"))


def apply_constraint_template(args: Mapping[str, Any]) -> TranslatedRequest:
    (passport_id,) = take(args, "passport_id")
    return TranslatedRequest(
        "POST",
        f"/api/passports/{passport_id}/constraints",
        body=pick(args, "template_slug"),
    )


def create_constraint_template(args: Mapping[str, Any]) -> TranslatedRequest:
    return TranslatedRequest("POST", "/api/constraint-templates", body=dict(args))


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="get_constraints",
            description="Get constraints for a passport.",
            input_schema=schema({"passport_id": _PASSPORT_ID}, required=["passport_id"]),
        ),
        get_constraints,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="set_constraints",
            description="Set constraints on a passport.",
            input_schema=schema(
                {
                    "passport_id": _PASSPORT_ID,
                    "constraints": {
                        "type": "object",
                        "description": (
                            'Constraint map (e.g., { "read": { '
                            '"core:rate:max_per_minute": 100 } })'
                        ),
                    },
                },
                required=["passport_id", "constraints"],
            ),
        ),
        set_constraints,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="list_constraint_types",
            description="List available constraint type definitions.",
            input_schema=schema(
                {
                    "category": {
                        "type": "string",
                        "description": 'Filter by category (e.g., "cost", "rate")',
                    },
                }
            ),
        ),
        list_constraint_types,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="list_constraint_templates",
            description="List system and user constraint templates.",
            input_schema=schema(
                {"category": {"type": "string", "description": "Filter by category"}}
            ),
        ),
        list_constraint_templates,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="apply_constraint_template",
            description="Apply a constraint template to a passport.",
            input_schema=schema(
                {
                    "passport_id": _PASSPORT_ID,
                    "template_slug": {
                        "type": "string",
                        "description": 'Template slug to apply (e.g., "conservative-agent")',
                    },
                },
                required=["passport_id", "template_slug"],
            ),
        ),
        apply_constraint_template,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="create_constraint_template",
            description="Create a user constraint template.",
            input_schema=schema(
                {
                    "slug": {"type": "string", "description": "Unique slug identifier"},
                    "name": {"type": "string", "description": "Human-readable name"},
                    "description": {"type": "string", "description": "Optional description"},
                    "category": {"type": "string", "description": "Optional category"},
                    "constraints": {"type": "object", "description": "Constraint definitions"},
                },
                required=["slug", "name", "constraints"],
            ),
        ),
        create_constraint_template,
        FAMILY,
    ),
]
