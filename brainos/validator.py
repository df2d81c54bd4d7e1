"""Check tool arguments against a JSON schema."""

from __future__ import annotations

from typing import Any

from brainos.tool_base import SchemaMismatchError


def validate_args(schema: Any, args: Any) -> None:
    """Raise SchemaMismatchError if ``args`` does not satisfy ``schema``."""
    schema_type = _type_of(schema)
    if schema_type is None:
        schema_type = "object"
    if schema_type == "object":
        _validate_object(schema, args)


def _type_of(schema: Any) -> str | None:
    if isinstance(schema, dict):
        kind = schema.get("type")
        if isinstance(kind, str):
            return kind
    return None


def _validate_object(schema: Any, args: Any) -> None:
    if not isinstance(args, dict):
        raise SchemaMismatchError("args must be an object")

    schema_map = schema if isinstance(schema, dict) else {}

    required = schema_map.get("required")
    if isinstance(required, list):
        for field_name in required:
            if not isinstance(field_name, str):
                raise SchemaMismatchError("invalid required field name")
            if field_name not in args:
                raise SchemaMismatchError(f"missing required field: {field_name}")

    props = schema_map.get("properties")
    if isinstance(props, dict):
        for field_name, field_schema in sorted(props.items()):
            if field_name in args:
                _validate_field(field_name, field_schema, args[field_name])


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parses_as_number(text: str) -> bool:
    if not text or text != text.strip() or "_" in text:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


def _matches(expected: str, value: Any) -> bool:
    if expected == "string":
        return isinstance(value, str)
    if expected in ("number", "integer"):
        return _is_number(value) or (isinstance(value, str) and _parses_as_number(value))
    if expected == "boolean":
        return isinstance(value, bool)
    if expected == "array":
        return isinstance(value, list)
    if expected == "object":
        return isinstance(value, dict)
    if expected == "null":
        return value is None
    return True


def _validate_field(name: str, schema: Any, value: Any) -> None:
    expected = _type_of(schema) or "any"

    if not _matches(expected, value):
        raise SchemaMismatchError(
            f"field '{name}' expected type {expected}, got {_value_type(value)}"
        )

    if expected == "object":
        _validate_object(schema, value)

    if expected == "array" and isinstance(schema, dict) and "items" in schema:
        items_schema = schema["items"]
        for index, item in enumerate(value):
            _validate_field(f"{name}[{index}]", items_schema, item)


def _value_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__