# tests/core/test_registry.py
from __future__ import annotations

import pytest

from uniplex.manage.contracts.operation import (
    Operation,
    OperationDescriptor,
    TranslatedRequest,
    schema,
)
from uniplex.manage.core.errors import UnknownOperationError
from uniplex.manage.core.registry import OperationRegistry


def _op(name: str, family: str = "test") -> Operation:
    return Operation(
        OperationDescriptor(name=name, description=f"{name} op", input_schema=schema()),
        lambda args: TranslatedRequest("GET", f"/{name}"),
        family,
    )


class TestOperationRegistry:
    def test_register_and_get(self):
        registry = OperationRegistry()
        op = _op("ping")

        registry.register(op)

        assert registry.get("ping") is op

    def test_register_duplicate_raises(self):
        registry = OperationRegistry()
        registry.register(_op("ping"))

        with pytest.raises(ValueError, match="already registered"):
            registry.register(_op("ping"))

    def test_get_unknown_raises(self):
        registry = OperationRegistry()

        with pytest.raises(UnknownOperationError, match="Unknown tool: nope"):
            registry.get("nope")

    def test_unknown_error_is_a_key_error(self):
        with pytest.raises(KeyError):
            OperationRegistry().get("nope")

    def test_has_and_contains(self):
        registry = OperationRegistry()
        registry.register(_op("ping"))

        assert registry.has("ping") is True
        assert registry.has("pong") is False
        assert "ping" in registry
        assert "pong" not in registry

    def test_keys_keep_registration_order(self):
        registry = OperationRegistry()
        registry.register_all([_op("b"), _op("a"), _op("c")])

        assert registry.keys() == ["b", "a", "c"]
        assert list(registry) == ["b", "a", "c"]

    def test_len(self):
        registry = OperationRegistry()
        assert len(registry) == 0

        registry.register(_op("a"))
        assert len(registry) == 1

    def test_describe_uses_wire_field_names(self):
        registry = OperationRegistry()
        registry.register(_op("ping"))

        (entry,) = registry.describe()

        assert entry == {
            "name": "ping",
            "description": "ping op",
            "inputSchema": {"type": "object", "properties": {}},
        }

    def test_families(self):
        registry = OperationRegistry()
        registry.register_all([_op("a", "x"), _op("b", "y"), _op("c", "x")])

        assert registry.families() == {"x": ["a", "c"], "y": ["b"]}

    def test_items(self):
        registry = OperationRegistry()
        op = _op("a")
        registry.register(op)

        assert dict(registry.items()) == {"a": op}
