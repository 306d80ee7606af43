# uniplex/manage/operations/commerce.py
"""
Commerce operations: service discovery, consumption metering, billing
settlements and SLA compliance.
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

FAMILY = "commerce"

OUTCOMES = ["success", "error", "timeout", "partial"]
PERIOD_TYPES = ["daily", "weekly", "monthly"]

DEFAULT_QUANTITY = 1


def discover_services(args: Mapping[str, Any]) -> TranslatedRequest:
    return TranslatedRequest(
        "GET",
        "/api/discover",
        query=query(
            args,
            "capability",
            "max_price_cents",
            "min_uptime_bp",
            "max_response_time_ms",
            "pricing_model",
            "sort",
            "limit",
            "offset",
        ),
    )


def issue_consumption_attestation(args: Mapping[str, Any]) -> TranslatedRequest:
    body = pick(args, "passport_id", "gate_id", "action", "outcome")
    quantity = args.get("quantity")
    body["quantity"] = DEFAULT_QUANTITY if quantity is None else quantity
    body.update(
        pick(
            args,
            "agent_pop",
            "request_payload_hash",
            "response_payload_hash",
            "metadata",
        )
    )
    return TranslatedRequest("POST", "/api/consume", body=body)


def generate_settlement(args: Mapping[str, Any]) -> TranslatedRequest:
    body = pick(args, "gate_id", "period_type", "period_start", "period_end", "agent_id")
    return TranslatedRequest("POST", "/api/billing", body=body)


def list_settlements(args: Mapping[str, Any]) -> TranslatedRequest:
    # The date range goes out as from/to
    params = {
        "gate_id": args.get("gate_id"),
        "agent_id": args.get("agent_id"),
        "period_type": args.get("period_type"),
        "status": args.get("status"),
        "from": args.get("from_date"),
        "to": args.get("to_date"),
        "limit": args.get("limit"),
        "offset": args.get("offset"),
    }
    return TranslatedRequest("GET", "/api/billing", query=params)


def get_settlement(args: Mapping[str, Any]) -> TranslatedRequest:
    (settlement_id,) = take(args, "settlement_id")
    return TranslatedRequest("GET", f"/api/billing/{settlement_id}")


def update_settlement_status(args: Mapping[str, Any]) -> TranslatedRequest:
    # POST rather than PATCH: a status transition, not a field update
    (settlement_id,) = take(args, "settlement_id")
    return TranslatedRequest(
        "POST", f"/api/billing/{settlement_id}/status", body=pick(args, "status")
    )


def get_sla_compliance(args: Mapping[str, Any]) -> TranslatedRequest:
    (gate_id,) = take(args, "gate_id")
    return TranslatedRequest(
        "GET",
        f"/api/gates/{gate_id}/sla",
        query=query(args, "period_start", "period_end", "permission_key"),
    )


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="discover_services",
            description="Discover services by capability (public, no auth required).",
            input_schema=schema(
                {
                    "capability": {
                        "type": "string",
                        "description": 'Wildcard pattern (e.g., "flights:*", "weather:forecast")',
                    },
                    "max_price_cents": {
                        "type": "number",
                        "description": "Maximum price in cents per call",
                    },
                    "min_uptime_bp": {
                        "type": "number",
                        "description": "Minimum uptime in basis points (e.g., 9995 = 99.95%)",
                    },
                    "max_response_time_ms": {
                        "type": "number",
                        "description": "Maximum response time in milliseconds",
                    },
                    "pricing_model": {
                        "type": "string",
                        "description": "Filter by pricing model (per_call, per_minute, subscription)",
                    },
                    "sort": {
                        "type": "string",
                        "description": 'Sort order (e.g., "price_asc", "uptime_desc")',
                    },
                    "limit": {"type": "number", "description": "Max results (default: 20)"},
                    "offset": {"type": "number", "description": "Pagination offset"},
                },
                required=["capability"],
            ),
        ),
        discover_services,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="issue_consumption_attestation",
            description="Issue a consumption attestation for bilateral metering.",
            input_schema=schema(
                {
                    "passport_id": {"type": "string", "description": "The passport ID"},
                    "gate_id": {"type": "string", "description": "The gate ID"},
                    "action": {
                        "type": "string",
                        "description": 'The action consumed (e.g., "flights:search")',
                    },
                    "outcome": {
                        "type": "string",
                        "enum": OUTCOMES,
                        "description": "Outcome of the action",
                    },
                    "quantity": {
                        "type": "number",
                        "description": "Number of units consumed (default: 1)",
                    },
                    "agent_pop": {"type": "object", "description": "Agent proof-of-possession"},
                    "request_payload_hash": {
                        "type": "string",
                        "description": "SHA-256 hash of the request",
                    },
                    "response_payload_hash": {
                        "type": "string",
                        "description": "SHA-256 hash of the response",
                    },
                    "metadata": {"type": "object", "description": "Optional metadata"},
                },
                required=["passport_id", "gate_id", "action", "outcome"],
            ),
        ),
        issue_consumption_attestation,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="generate_settlement",
            description="Generate a billing settlement for a period.",
            input_schema=schema(
                {
                    "gate_id": {"type": "string", "description": "The gate ID"},
                    "period_type": {
                        "type": "string",
                        "enum": PERIOD_TYPES,
                        "description": "Settlement period type",
                    },
                    "period_start": {
                        "type": "string",
                        "description": "Period start date (YYYY-MM-DD)",
                    },
                    "period_end": {
                        "type": "string",
                        "description": "Period end date (YYYY-MM-DD)",
                    },
                    "agent_id": {
                        "type": "string",
                        "description": "Optional: settle for a specific agent",
                    },
                },
                required=["gate_id", "period_type", "period_start", "period_end"],
            ),
        ),
        generate_settlement,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="list_settlements",
            description="List settlement summaries.",
            input_schema=schema(
                {
                    "gate_id": {"type": "string", "description": "Filter by gate ID"},
                    "agent_id": {"type": "string", "description": "Filter by agent ID"},
                    "period_type": {"type": "string", "description": "Filter by period type"},
                    "status": {
                        "type": "string",
                        "description": 'Filter by status (e.g., "pending", "invoiced")',
                    },
                    "from_date": {
                        "type": "string",
                        "description": "Filter from date (YYYY-MM-DD)",
                    },
                    "to_date": {"type": "string", "description": "Filter to date (YYYY-MM-DD)"},
                    "limit": {"type": "number", "description": "Max results (default: 20)"},
                    "offset": {"type": "number", "description": "Pagination offset"},
                }
            ),
        ),
        list_settlements,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="get_settlement",
            description="Get a settlement by ID.",
            input_schema=schema(
                {"settlement_id": {"type": "string", "description": "The settlement ID"}},
                required=["settlement_id"],
            ),
        ),
        get_settlement,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="update_settlement_status",
            description="Transition a settlement to a new status.",
            input_schema=schema(
                {
                    "settlement_id": {"type": "string", "description": "The settlement ID"},
                    "status": {
                        "type": "string",
                        "description": 'New status (e.g., "invoiced", "paid", "disputed")',
                    },
                },
                required=["settlement_id", "status"],
            ),
        ),
        update_settlement_status,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="get_sla_compliance",
            description="Get SLA compliance metrics for a gate.",
            input_schema=schema(
                {
                    "gate_id": {"type": "string", "description": "The gate ID"},
                    "period_start": {"type": "string", "description": "Period start (YYYY-MM-DD)"},
                    "period_end": {"type": "string", "description": "Period end (YYYY-MM-DD)"},
                    "permission_key": {
                        "type": "string",
                        "description": "Filter by permission key",
                    },
                },
                required=["gate_id", "period_start", "period_end"],
            ),
        ),
        get_sla_compliance,
        FAMILY,
    ),
]
