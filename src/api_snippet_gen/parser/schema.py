"""Example value resolution for OpenAPI schema objects."""

import copy
from typing import Any, Callable

PLACEHOLDER = "unknown"
NIL_UUID = "00000000-0000-0000-0000-000000000000"

# Recursion guard for self-referential schema graphs.
MAX_DEPTH = 32


def resolve_example(schema: Any, depth: int = 0) -> Any:
    """Return a representative example value for a schema node.

    An explicit ``example`` always wins, even when it is falsy. Otherwise
    the value is derived from ``type``; unknown or missing types, missing
    schemas and anything nested deeper than ``MAX_DEPTH`` resolve to
    ``"unknown"``.
    """
    if not schema or not isinstance(schema, dict):
        return PLACEHOLDER
    if depth > MAX_DEPTH:
        return PLACEHOLDER
    if "example" in schema:
        return copy.deepcopy(schema["example"])

    schema_type = schema.get("type")
    if not isinstance(schema_type, str):
        return PLACEHOLDER
    handler = _HANDLERS.get(schema_type)
    if handler is None:
        return PLACEHOLDER
    return handler(schema, depth)


def _string(schema: dict, depth: int) -> str:
    if schema.get("format") == "uuid":
        return NIL_UUID
    return "string"


def _number(schema: dict, depth: int) -> int:
    return 0


def _boolean(schema: dict, depth: int) -> bool:
    return True


def _object(schema: dict, depth: int) -> dict:
    properties = schema.get("properties") or {}
    if not isinstance(properties, dict):
        return {}
    return {name: resolve_example(prop, depth + 1) for name, prop in properties.items()}


def _array(schema: dict, depth: int) -> list:
    items = schema.get("items")
    if items is None:
        return []
    return [resolve_example(items, depth + 1)]


_HANDLERS: dict[str, Callable[[dict, int], Any]] = {
    "string": _string,
    "number": _number,
    "integer": _number,
    "boolean": _boolean,
    "object": _object,
    "array": _array,
}
