"""Compact, human-readable descriptions of JSON schemas."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _format_number(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    text = repr(value)
    if "e" in text and math.isfinite(value):
        return format(Decimal(text), "f")
    return text


def describe_schema(schema: Any) -> str:
    """Describe a JSON schema in a short type notation."""
    kind = schema.get("type") if isinstance(schema, dict) else None
    if kind == "object":
        return _describe_object(schema)
    if kind == "array":
        return _describe_array(schema)
    if kind == "string":
        return _describe_string(schema)
    if kind in ("number", "integer"):
        return _describe_number(schema)
    if kind == "boolean":
        return "boolean"
    if kind == "null":
        return "null"
    return _compact_json(schema)


def _describe_object(schema: dict) -> str:
    props = schema.get("properties")
    required = schema.get("required")
    required_names = (
        {item for item in required if isinstance(item, str)}
        if isinstance(required, list)
        else set()
    )
    parts = []
    if isinstance(props, dict):
        for name, prop in sorted(props.items()):
            marker = "" if name in required_names else "?"
            parts.append(f"{name}{marker}: {describe_schema(prop)}")
    return f"object({', '.join(parts)})"


def _describe_array(schema: dict) -> str:
    items = describe_schema(schema["items"]) if "items" in schema else "any"
    return f"array[{items}]"


def _describe_string(schema: dict) -> str:
    values = schema.get("enum")
    if isinstance(values, list):
        names = [value for value in values if isinstance(value, str)]
        return f"string(one of: {', '.join(names)})"
    description = schema.get("description")
    if isinstance(description, str):
        return f"string - {description}"
    return "string"


def _describe_number(schema: dict) -> str:
    low = _as_number(schema.get("minimum"))
    high = _as_number(schema.get("maximum"))
    if low is not None and high is not None:
        return f"number({_format_number(low)}..={_format_number(high)})"
    if low is not None:
        return f"number({_format_number(low)}..)"
    if high is not None:
        return f"number(..={_format_number(high)})"
    return "number"