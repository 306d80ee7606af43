# uniplex/manage/core/dispatch.py
"""
Dispatch entry point: operation name + arguments -> one API call.

The name is resolved before anything else, so an unknown operation never
reaches validation or the network.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from uniplex.manage.core.client import ApiClient
from uniplex.manage.core.registry import OperationRegistry
from uniplex.manage.core.validation import ArgumentValidator
from uniplex.manage.operations import build_registry

logger = logging.getLogger(__name__)


class Dispatcher:
    """Resolves operations from a registry and executes them on a client."""

    def __init__(
        self,
        registry: OperationRegistry,
        *,
        validator: ArgumentValidator | None = None,
    ) -> None:
        self._registry = registry
        self._validator = validator

    @property
    def registry(self) -> OperationRegistry:
        return self._registry

    async def call(
        self,
        client: ApiClient,
        name: str,
        arguments: Mapping[str, Any] | None = None,
    ) -> Any:
        operation = self._registry.get(name)
        args = arguments or {}

        if self._validator is not None:
            self._validator.validate(args, operation.descriptor)

        request = operation.translate(args)
        logger.info("Dispatching %s -> %s %s", name, request.method, request.path)
        return await client.send(request)


# Built once at import; read-only afterwards
_DEFAULT = Dispatcher(build_registry())


def default_dispatcher() -> Dispatcher:
    """Dispatcher over the full operation catalog."""
    return _DEFAULT


async def handle_tool_call(
    client: ApiClient,
    name: str,
    arguments: Mapping[str, Any] | None = None,
) -> Any:
    """Dispatch ``name`` with ``arguments`` using the full operation catalog."""
    return await default_dispatcher().call(client, name, arguments)


def list_tools() -> list[dict[str, Any]]:
    """Advertised catalog of every operation."""
    return default_dispatcher().registry.describe()
