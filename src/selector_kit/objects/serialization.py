"""Generic JSON helpers: encode objects and rebuild them from a prototype."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

__all__ = ["SchemaMismatch", "to_json", "from_json"]

logger = logging.getLogger(__name__)

# Same output as JSON.stringify: no whitespace between tokens.
_COMPACT = (",", ":")


class SchemaMismatch(ValueError):
    """Raised when JSON data cannot populate the requested type."""

    def __init__(self, message: str, *, keys: list[str] | None = None) -> None:
        super().__init__(message)
        self.keys = keys or []


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, *, indent: int | None = None) -> str:
    """Return the JSON representation of *obj*.

    Dataclasses are encoded as their fields and plain objects as their public
    attributes. Without *indent* the output is compact, e.g. ``[1,2,3]``.
    """
    separators = _COMPACT if indent is None else None
    return json.dumps(obj, default=_default, indent=indent, separators=separators)


def from_json(prototype: Any, json_text: str, *, strict: bool = False) -> Any:
    """Build an instance of *prototype*'s type from a JSON object.

    *prototype* may be a class or an instance of it. The instance is created
    without calling ``__init__`` and every decoded key is set as an attribute,
    so methods come from the prototype and data from the JSON. With
    *strict* and a dataclass prototype, keys that are not fields are rejected.
    """
    cls = prototype if isinstance(prototype, type) else type(prototype)
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise SchemaMismatch(f"Invalid JSON for {cls.__name__}: {exc}") from exc
    if not isinstance(data, dict):
        raise SchemaMismatch(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    if strict and dataclasses.is_dataclass(cls):
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(k for k in data if k not in allowed)
        if unknown:
            raise SchemaMismatch(
                f"Unknown fields for {cls.__name__}: {', '.join(unknown)}",
                keys=unknown,
            )

    obj = cls.__new__(cls)
    for key, value in data.items():
        try:
            object.__setattr__(obj, key, value)
        except (AttributeError, TypeError) as exc:
            raise SchemaMismatch(
                f"Cannot set {key!r} on {cls.__name__}: {exc}", keys=[key]
            ) from exc
    logger.debug("Decoded %s with keys %s", cls.__name__, list(data))
    return obj
