# uniplex/manage/main.py
"""
Runtime factory.

Wires settings, logging, the API client and the dispatcher. The outer
transport (MCP stdio or otherwise) receives a ``Runtime`` and only ever
calls ``tools()`` and ``call()``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from uniplex.manage.core.client import ApiClient
from uniplex.manage.core.config import Settings, settings as default_settings
from uniplex.manage.core.dispatch import Dispatcher
from uniplex.manage.core.errors import ConfigurationError
from uniplex.manage.core.logging import configure_logging, redact_key
from uniplex.manage.core.validation import ArgumentValidator
from uniplex.manage.operations import build_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Runtime:
    """A configured client bound to the operation catalog."""

    client: ApiClient
    dispatcher: Dispatcher

    def tools(self) -> list[dict[str, Any]]:
        return self.dispatcher.registry.describe()

    async def call(self, name: str, arguments: Mapping[str, Any] | None = None) -> Any:
        return await self.dispatcher.call(self.client, name, arguments)


def create_runtime(
    cfg: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    setup_logging: bool = True,
) -> Runtime:
    """Build a runtime from settings.

    Raises:
        ConfigurationError: If no API key is configured.
    """
    cfg = cfg or default_settings
    if setup_logging:
        configure_logging(cfg.log_level, json=cfg.log_json)

    if not cfg.api_key:
        raise ConfigurationError(
            "UNIPLEX_API_KEY environment variable is required "
            "(e.g. UNIPLEX_API_KEY=sk_xxx)"
        )

    client = ApiClient(
        base_url=cfg.api_url,
        api_key=cfg.api_key,
        timeout=cfg.timeout,
        transport=transport,
    )
    registry = build_registry()
    validator = ArgumentValidator() if cfg.validate_arguments else None
    dispatcher = Dispatcher(registry, validator=validator)

    logger.info(
        "Uniplex management runtime ready: %d operation(s), api_url=%s, api_key=%s",
        len(registry),
        client.base_url,
        redact_key(cfg.api_key),
    )
    return Runtime(client=client, dispatcher=dispatcher)
