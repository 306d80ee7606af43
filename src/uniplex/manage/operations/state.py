# uniplex/manage/operations/state.py
"""Cumulative spending and rate-limit counters tracked per passport."""
from __future__ import annotations

from typing import Any, Mapping

from uniplex.manage.contracts.operation import (
    Operation,
    OperationDescriptor,
    TranslatedRequest,
    schema,
)
from uniplex.manage.core.translate import pick, take

FAMILY = "state"

_PASSPORT_ID = {"type": "string", "description": "The passport ID"}


def get_cumulative_state(args: Mapping[str, Any]) -> TranslatedRequest:
    (passport_id,) = take(args, "passport_id")
    return TranslatedRequest("GET", f"/api/passports/{passport_id}/state")


def reset_cumulative_state(args: Mapping[str, Any]) -> TranslatedRequest:
    (passport_id,) = take(args, "passport_id")
    return TranslatedRequest(
        "POST",
        f"/api/passports/{passport_id}/state/reset",
        body=pick(args, "window_type"),
    )


OPERATIONS: list[Operation] = [
    Operation(
        OperationDescriptor(
            name="get_cumulative_state",
            description="Get spending and rate limit state for a passport.",
            input_schema=schema({"passport_id": _PASSPORT_ID}, required=["passport_id"]),
        ),
        get_cumulative_state,
        FAMILY,
    ),
    Operation(
        OperationDescriptor(
            name="reset_cumulative_state",
            description="Reset cumulative spending and rate counters for a passport.",
            input_schema=schema(
                {
                    "passport_id": _PASSPORT_ID,
                    "window_type": {
                        "type": "string",
                        "description": 'Window type to reset (e.g., "daily", "hourly")',
                    },
                },
                required=["passport_id"],
            ),
        ),
        reset_cumulative_state,
        FAMILY,
    ),
]
