# tests/operations/test_catalog_contract.py
"""
Every operation, called with its minimal argument set, sends exactly one
request with the documented method, path, query and body.
"""
from __future__ import annotations

import jsonschema
import pytest

from uniplex.manage.core.dispatch import handle_tool_call
from uniplex.manage.operations import ALL_OPERATIONS, build_registry

G = "gate_test-1"
P = "pp_abc"

# name -> (minimal args, method, path, expected params, expected body)
CONTRACT = {
    "list_gates": ({}, "GET", "/api/gates", {}, None),
    "get_gate": ({"gate_id": G}, "GET", f"/api/gates/{G}", {}, None),
    "create_gate": (
        {"name": "New", "gate_id": "gate_new", "profile": "L1"},
        "POST",
        "/api/gates",
        {},
        {"name": "New", "gate_id": "gate_new", "profile": "L1"},
    ),
    "update_gate": ({"gate_id": G}, "PATCH", f"/api/gates/{G}", {}, {}),
    "delete_gate": ({"gate_id": G}, "DELETE", f"/api/gates/{G}", {}, None),
    "list_passports": ({"gate_id": G}, "GET", f"/api/gates/{G}/passports", {}, None),
    "get_passport": (
        {"gate_id": G, "passport_id": P},
        "GET",
        f"/api/gates/{G}/passports/{P}",
        {},
        None,
    ),
    "issue_passport": (
        {"gate_id": G, "agent_id": "agent-1", "permissions": ["read"]},
        "POST",
        f"/api/gates/{G}/passports",
        {},
        {"agent_id": "agent-1", "permissions": ["read"]},
    ),
    "revoke_passport": (
        {"gate_id": G, "passport_id": P},
        "DELETE",
        f"/api/gates/{G}/passports/{P}",
        {},
        None,
    ),
    "reissue_passport": ({"passport_id": P}, "POST", f"/api/passports/{P}/reissue", {}, {}),
    "list_attestations": ({"gate_id": G}, "GET", f"/api/gates/{G}/attestations", {}, None),
    "record_attestation": (
        {
            "gate_id": G,
            "passport_id": P,
            "agent_id": "agent-1",
            "permission": "read",
            "tool_name": "search",
            "result": "allowed",
        },
        "POST",
        f"/api/gates/{G}/attestations",
        {},
        {
            "passport_id": P,
            "agent_id": "agent-1",
            "permission": "read",
            "tool_name": "search",
            "result": "allowed",
        },
    ),
    "get_catalog": ({"gate_id": G}, "GET", f"/api/gates/{G}/catalog", {}, None),
    "create_catalog": (
        {"gate_id": G, "permissions": []},
        "POST",
        f"/api/gates/{G}/catalog",
        {},
        {"permissions": []},
    ),
    "publish_catalog": ({"gate_id": G}, "POST", f"/api/gates/{G}/catalog/publish", {}, {}),
    "list_catalog_versions": (
        {"gate_id": G},
        "GET",
        f"/api/gates/{G}/catalog/versions",
        {},
        None,
    ),
    "get_catalog_version": (
        {"gate_id": G, "version": 1},
        "GET",
        f"/api/gates/{G}/catalog/1",
        {},
        None,
    ),
    "get_catalog_impact": ({"gate_id": G}, "GET", f"/api/gates/{G}/catalog/impact", {}, None),
    "check_gate": (
        {"gate_id": G, "action": "write"},
        "POST",
        f"/api/gates/{G}/check",
        {},
        {"action": "write"},
    ),
    "authorize_dry_run": (
        {"gate_id": G, "passport": {"passport_id": P}, "requested_permission": "read"},
        "POST",
        "/api/authorize/dry-run",
        {},
        {"gate_id": G, "passport": {"passport_id": P}, "requested_permission": "read"},
    ),
    "get_constraints": ({"passport_id": P}, "GET", f"/api/passports/{P}/constraints", {}, None),
    "set_constraints": (
        {"passport_id": P, "constraints": {"core:rate:max_per_minute": 120}},
        "PUT",
        f"/api/passports/{P}/constraints",
        {},
        {"core:rate:max_per_minute": 120},
    ),
    "list_constraint_types": ({}, "GET", "/api/constraints/types", {}, None),
    "list_constraint_templates": ({}, "GET", "/api/constraint-templates", {}, None),
    "apply_constraint_template": (
        {"passport_id": P, "template_slug": "conservative-agent"},
        "POST",
        f"/api/passports/{P}/constraints",
        {},
        {"template_slug": "conservative-agent"},
    ),
    "create_constraint_template": (
        {"slug": "custom", "name": "Custom", "constraints": {}},
        "POST",
        "/api/constraint-templates",
        {},
        {"slug": "custom", "name": "Custom", "constraints": {}},
    ),
    "enforce_action": (
        {"passport_id": P, "action": "write"},
        "POST",
        "/api/enforce",
        {},
        {"passport_id": P, "action": "write"},
    ),
    "list_enforcement_attestations": (
        {"passport_id": P},
        "GET",
        f"/api/passports/{P}/enforcement",
        {},
        None,
    ),
    "get_enforcement_attestation": (
        {"attestation_id": "enf_1"},
        "GET",
        "/api/enforcement/enf_1",
        {},
        None,
    ),
    "verify_enforcement_attestation": (
        {"attestation_id": "enf_1"},
        "POST",
        "/api/enforcement/enf_1/verify",
        {},
        None,
    ),
    "get_anonymous_policy": ({"gate_id": G}, "GET", f"/api/gates/{G}/anonymous-policy", {}, None),
    "set_anonymous_policy": ({"gate_id": G}, "PUT", f"/api/gates/{G}/anonymous-policy", {}, {}),
    "get_anonymous_log": ({"gate_id": G}, "GET", f"/api/gates/{G}/anonymous-log", {}, None),
    "get_cumulative_state": ({"passport_id": P}, "GET", f"/api/passports/{P}/state", {}, None),
    "reset_cumulative_state": (
        {"passport_id": P},
        "POST",
        f"/api/passports/{P}/state/reset",
        {},
        {},
    ),
    "discover_services": (
        {"capability": "translation"},
        "GET",
        "/api/discover",
        {"capability": "translation"},
        None,
    ),
    "issue_consumption_attestation": (
        {"passport_id": P, "gate_id": G, "action": "translate", "outcome": "success"},
        "POST",
        "/api/consume",
        {},
        {"passport_id": P, "gate_id": G, "action": "translate", "outcome": "success", "quantity": 1},
    ),
    "generate_settlement": (
        {"gate_id": G, "period_type": "monthly", "period_start": "2024-01-01", "period_end": "2024-01-31"},
        "POST",
        "/api/billing",
        {},
        {"gate_id": G, "period_type": "monthly", "period_start": "2024-01-01", "period_end": "2024-01-31"},
    ),
    "list_settlements": ({}, "GET", "/api/billing", {}, None),
    "get_settlement": ({"settlement_id": "stl_1"}, "GET", "/api/billing/stl_1", {}, None),
    "update_settlement_status": (
        {"settlement_id": "stl_1", "status": "paid"},
        "POST",
        "/api/billing/stl_1/status",
        {},
        {"status": "paid"},
    ),
    "get_sla_compliance": (
        {"gate_id": G, "period_start": "2024-01-01", "period_end": "2024-01-31"},
        "GET",
        f"/api/gates/{G}/sla",
        {"period_start": "2024-01-01", "period_end": "2024-01-31"},
        None,
    ),
    "list_api_keys": ({}, "GET", "/api/users/api-keys", {}, None),
    "create_api_key": (
        {"name": "Default Key"},
        "POST",
        "/api/users/api-keys",
        {},
        {"name": "Default Key"},
    ),
    "revoke_api_key": ({"key_id": "key_1"}, "DELETE", "/api/users/api-keys/key_1", {}, None),
}


def test_catalog_has_45_operations():
    assert len(build_registry()) == 45


def test_contract_covers_every_operation():
    assert set(CONTRACT) == set(build_registry().keys())


@pytest.mark.asyncio
@pytest.mark.parametrize("name", list(CONTRACT))
async def test_minimal_call_matches_contract(client, recorder, name):
    args, method, path, params, body = CONTRACT[name]

    await handle_tool_call(client, name, args)

    assert len(recorder.calls) == 1
    call = recorder.last
    assert call.method == method
    assert call.path == path
    assert call.params == params
    assert call.body == body


@pytest.mark.parametrize("name", list(CONTRACT))
def test_translation_is_deterministic(name):
    args = CONTRACT[name][0]
    operation = build_registry().get(name)

    assert operation.translate(dict(args)) == operation.translate(dict(args))


@pytest.mark.parametrize("name", list(CONTRACT))
def test_path_ids_never_leak_into_body_or_query(name):
    args = CONTRACT[name][0]
    request = build_registry().get(name).translate(args)

    for key, value in args.items():
        if isinstance(value, str) and f"/{value}" in request.path:
            if isinstance(request.body, dict):
                assert key not in request.body
            assert key not in (request.query or {})


def test_every_advertised_name_has_a_handler():
    registry = build_registry()

    for tool in registry.describe():
        assert registry.get(tool["name"]).name == tool["name"]


@pytest.mark.parametrize("op", ALL_OPERATIONS, ids=lambda op: op.name)
def test_input_schema_is_valid(op):
    jsonschema.Draft7Validator.check_schema(op.descriptor.input_schema)
    assert op.descriptor.input_schema["type"] == "object"
    assert set(op.descriptor.required) <= set(op.descriptor.properties)
    assert op.descriptor.description
    assert op.family


def test_operation_names_are_unique():
    names = [op.name for op in ALL_OPERATIONS]
    assert len(names) == len(set(names))
