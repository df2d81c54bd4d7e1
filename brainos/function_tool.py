"""A tool built from a plain function over JSON arguments."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from brainos.tool_base import Tool, ToolDescription

_NUMERIC_PARAMS = ("a", "b", "c", "d", "e")


class FunctionTool(Tool):
    """Wraps a function taking JSON arguments and returning a JSON result."""

    def __init__(
        self,
        name: str,
        description: str,
        schema: Any,
        func: Callable[[Any], Any],
    ) -> None:
        self._name = name
        self._description = ToolDescription(
            short=description,
            parameters="JSON object with function parameters",
        )
        self._schema = schema
        self._func = func

    @classmethod
    def numeric(
        cls,
        name: str,
        description: str,
        num_params: int,
        func: Callable[[Any], Any],
    ) -> "FunctionTool":
        """Build a tool whose schema asks for up to five numbers named a to e."""
        if not 0 <= num_params <= len(_NUMERIC_PARAMS):
            raise ValueError(
                f"num_params must be between 0 and {len(_NUMERIC_PARAMS)}, got {num_params}"
            )
        names = _NUMERIC_PARAMS[:num_params]
        schema = {
            "type": "object",
            "properties": {
                param: {"type": "number", "description": f"Parameter {param}"}
                for param in names
            },
            "required": list(names),
        }
        return cls(name, description, schema, func)

    def name(self) -> str:
        return self._name

    def description(self) -> ToolDescription:
        return self._description

    def json_schema(self) -> Any:
        return self._schema

    async def execute(self, args: Any) -> Any:
        return self._func(args)