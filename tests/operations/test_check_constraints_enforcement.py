# tests/operations/test_check_constraints_enforcement.py
from __future__ import annotations

import pytest

from uniplex.manage.core.dispatch import handle_tool_call
from uniplex.manage.operations.constraints import set_constraints


class TestCheck:
    @pytest.mark.asyncio
    async def test_check_gate_full_body(self, client, recorder):
        recorder.reply(200, {"allowed": True})

        result = await handle_tool_call(
            client,
            "check_gate",
            {"gate_id": "gate_test-1", "action": "read", "passport_id": "pp_abc", "target": "doc-1"},
        )

        assert result == {"allowed": True}
        assert recorder.last.body == {"action": "read", "passport_id": "pp_abc", "target": "doc-1"}

    @pytest.mark.asyncio
    async def test_check_gate_omits_unsupplied_fields(self, client, recorder):
        await handle_tool_call(client, "check_gate", {"gate_id": "gate_test-1", "action": "write"})

        assert recorder.last.body == {"action": "write"}

    @pytest.mark.asyncio
    async def test_dry_run_with_requested_constraints(self, client, recorder):
        recorder.reply(200, {"decision": "PERMIT"})
        passport = {"passport_id": "pp_abc", "permissions": ["read"]}

        await handle_tool_call(
            client,
            "authorize_dry_run",
            {
                "gate_id": "gate_test-1",
                "passport": passport,
                "requested_permission": "read",
                "requested_constraints": {"core:cost:max_per_action": 50},
            },
        )

        assert recorder.last.body == {
            "gate_id": "gate_test-1",
            "passport": passport,
            "requested_permission": "read",
            "requested_constraints": {"core:cost:max_per_action": 50},
        }

    @pytest.mark.asyncio
    async def test_dry_run_without_requested_constraints(self, client, recorder):
        await handle_tool_call(
            client,
            "authorize_dry_run",
            {"gate_id": "gate_test-1", "passport": {}, "requested_permission": "read"},
        )

        assert "requested_constraints" not in recorder.last.body


class TestConstraints:
    @pytest.mark.asyncio
    async def test_set_constraints_sends_map_unwrapped(self, client, recorder):
        constraints = {"core:rate:max_per_minute": 120, "core:cost:max_per_action": 10}

        await handle_tool_call(
            client, "set_constraints", {"passport_id": "pp_abc", "constraints": constraints}
        )

        assert recorder.last.method == "PUT"
        assert recorder.last.body == constraints

    def test_set_constraints_without_map_has_no_body(self):
        request = set_constraints({"passport_id": "pp_abc"})

        assert request.body is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["list_constraint_types", "list_constraint_templates"])
    async def test_category_filter(self, client, recorder, name):
        await handle_tool_call(client, name, {"category": "cost"})

        assert recorder.last.params == {"category": "cost"}

    @pytest.mark.asyncio
    async def test_create_template_passes_every_argument(self, client, recorder):
        args = {
            "slug": "custom",
            "name": "Custom",
            "description": "Tight limits",
            "category": "cost",
            "constraints": {"core:cost:max_per_action": 5},
        }

        await handle_tool_call(client, "create_constraint_template", args)

        assert recorder.last.body == args


class TestEnforcement:
    @pytest.mark.asyncio
    async def test_enforce_action_full(self, client, recorder):
        recorder.reply(200, {"decision": "PERMIT", "attestation_id": "enf_1"})

        result = await handle_tool_call(
            client,
            "enforce_action",
            {
                "passport_id": "pp_abc",
                "action": "purchase",
                "target": "sku-9",
                "cost_cents": 250,
                "metadata": {"order": "o-1"},
            },
        )

        assert result["decision"] == "PERMIT"
        assert recorder.last.body == {
            "passport_id": "pp_abc",
            "action": "purchase",
            "target": "sku-9",
            "cost_cents": 250,
            "metadata": {"order": "o-1"},
        }

    @pytest.mark.asyncio
    async def test_enforce_action_minimal(self, client, recorder):
        await handle_tool_call(client, "enforce_action", {"passport_id": "pp_abc", "action": "read"})

        assert recorder.last.body == {"passport_id": "pp_abc", "action": "read"}

    @pytest.mark.asyncio
    async def test_enforcement_list_filters(self, client, recorder):
        recorder.reply(200, [])

        await handle_tool_call(
            client,
            "list_enforcement_attestations",
            {"passport_id": "pp_abc", "decision": "PERMIT", "limit": 5},
        )

        assert recorder.last.path == "/api/passports/pp_abc/enforcement"
        assert recorder.last.params == {"decision": "PERMIT", "limit": "5"}

    @pytest.mark.asyncio
    async def test_verify_is_a_bodiless_post(self, client, recorder):
        recorder.reply(200, {"valid": True})

        result = await handle_tool_call(
            client, "verify_enforcement_attestation", {"attestation_id": "enf_1"}
        )

        assert result == {"valid": True}
        assert recorder.last.method == "POST"
        assert recorder.last.content == b""
