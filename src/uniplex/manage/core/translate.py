# uniplex/manage/core/translate.py
"""
Building blocks shared by the request translators.

Path identifiers are pulled out with ``take`` before a body is assembled,
so a body built with ``rest`` cannot contain them. ``pick`` copies
optional fields one by one and leaves unsupplied ones out entirely.
"""
from __future__ import annotations

from typing import Any, Mapping

from uniplex.manage.core.errors import MissingArgumentError


def stringify(value: Any) -> str:
    """Render a scalar the way it appears in a URL."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def take(args: Mapping[str, Any], *names: str) -> tuple[str, ...]:
    """Return required path identifiers, in order, rendered with ``stringify``.

    Raises:
        MissingArgumentError: If any of ``names`` is absent or ``None``.
    """
    values = []
    for name in names:
        value = args.get(name)
        if value is None:
            raise MissingArgumentError(name)
        values.append(stringify(value))
    return tuple(values)


def rest(args: Mapping[str, Any], *exclude: str) -> dict[str, Any]:
    """Pass-through copy of ``args`` without the ``exclude`` keys."""
    return {k: v for k, v in args.items() if k not in exclude}


def pick(args: Mapping[str, Any], *names: str) -> dict[str, Any]:
    """Copy only the ``names`` that were supplied."""
    out: dict[str, Any] = {}
    for name in names:
        if args.get(name) is not None:
            out[name] = args[name]
    return out


def query(args: Mapping[str, Any], *names: str) -> dict[str, Any]:
    """Query mapping for a read; unsupplied names map to ``None``."""
    return {name: args.get(name) for name in names}
