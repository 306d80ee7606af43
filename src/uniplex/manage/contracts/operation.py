# uniplex/manage/contracts/operation.py
"""
Operation contracts.

An operation is a named, schema-described call that a translator turns
into exactly one HTTP request against the management API:

    Operation(descriptor, translate)
        descriptor: what the caller sees (name, description, input schema)
        translate:  Mapping[str, Any] -> TranslatedRequest

Translators are pure. They never perform I/O and return the same request
for the same arguments.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


@dataclass(frozen=True)
class TranslatedRequest:
    """A concrete HTTP request produced by a translator.

    Attributes:
        method: HTTP verb.
        path: Path relative to the API base URL, identifiers already
            interpolated.
        query: Query parameters for reads. ``None`` values are dropped by
            the client.
        body: JSON payload for writes. ``None`` means no payload at all;
            an empty dict is still sent as ``{}``.
    """

    method: HttpMethod
    path: str
    query: Mapping[str, Any] | None = None
    body: Any = None


Translator = Callable[[Mapping[str, Any]], TranslatedRequest]


class OperationDescriptor(BaseModel):
    """Advertised description of an operation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}},
        alias="inputSchema",
    )

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))

    @property
    def properties(self) -> dict[str, Any]:
        return dict(self.input_schema.get("properties", {}))

    def describe(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class Operation:
    """Descriptor bound to its translator."""

    descriptor: OperationDescriptor
    translate: Translator
    family: str = ""

    @property
    def name(self) -> str:
        return self.descriptor.name


def schema(
    properties: dict[str, Any] | None = None,
    required: list[str] | None = None,
) -> dict[str, Any]:
    """Build an object JSON Schema for an operation's arguments."""
    out: dict[str, Any] = {"type": "object", "properties": properties or {}}
    if required:
        out["required"] = list(required)
    return out
