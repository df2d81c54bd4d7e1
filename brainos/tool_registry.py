"""A registry of tools, with optional namespaces, validation and batch execution."""

from __future__ import annotations

import asyncio
import copy
from collections.abc import Iterable
from typing import Any

from brainos.tool_base import (
    Tool,
    ToolDescription,
    ToolError,
    ToolExecutionError,
    ToolNotFoundError,
)
from brainos.validator import validate_args


class NamespacedTool(Tool):
    """Presents another tool under a ``namespace/name`` name."""

    def __init__(self, inner: Tool, namespaced_name: str) -> None:
        self._inner = inner
        self._namespaced_name = namespaced_name

    def name(self) -> str:
        return self._namespaced_name

    def description(self) -> ToolDescription:
        return self._inner.description()

    def json_schema(self) -> Any:
        return self._inner.json_schema()

    async def execute(self, args: Any) -> Any:
        return await self._inner.execute(args)


def _openai_entry(tool: Tool) -> dict:
    return {
        "type": "function",
        "function": {
            "name": tool.name(),
            "description": tool.description().short,
            "parameters": copy.deepcopy(tool.cached_schema()),
        },
    }


class ToolRegistry:
    """Holds tools by name and runs them after checking their arguments."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}
        self._name_index: dict[str, list[Tool]] = {}
        self._namespaced_index: dict[str, dict[str, Tool]] = {}
        self._namespace_index: dict[str, list[str]] = {}
        self._namespaces: list[str] = []
        self._schema_cache: dict[str, Any] = {}
        self._openai_format: list[dict] = []

    def register(self, tool: Tool) -> None:
        """Register a tool under its own name; raises on a duplicate name."""
        name = tool.name()
        if name in self._tools:
            raise ToolExecutionError(f"duplicate tool: {name}")
        self._name_index.setdefault(name, []).append(tool)
        self._schema_cache[name] = tool.cached_schema()
        self._openai_format.append(_openai_entry(tool))
        self._tools[name] = tool

    def register_with_namespace(self, tool: Tool, namespace: str) -> None:
        """Register a tool as ``{namespace}/{name}``; raises on a duplicate."""
        tool_name = tool.name()
        namespaced_name = f"{namespace}/{tool_name}"
        if namespaced_name in self._tools:
            raise ToolExecutionError(
                f"duplicate tool in namespace '{namespace}': {tool_name}"
            )

        wrapped = NamespacedTool(tool, namespaced_name)
        self._name_index.setdefault(tool_name, []).append(wrapped)
        self._namespaced_index.setdefault(namespace, {})[tool_name] = wrapped

        entries = self._namespace_index.setdefault(namespace, [])
        if not entries:
            self._namespaces.append(namespace)
        entries.append(namespaced_name)

        self._schema_cache[namespaced_name] = wrapped.cached_schema()
        self._openai_format.append(_openai_entry(wrapped))
        self._tools[namespaced_name] = wrapped

    def register_from_skill(self, skill_name: str, tools: Iterable[Tool]) -> None:
        """Register every tool under the skill's namespace, stopping at the first error."""
        for tool in tools:
            self.register_with_namespace(tool, skill_name)

    def get(self, name: str) -> Tool | None:
        """Find a tool by exact name, or by its plain name within any namespace."""
        tool = self._tools.get(name)
        if tool is not None:
            return tool
        candidates = self._name_index.get(name)
        return candidates[0] if candidates else None

    def get_from_namespace(self, name: str, namespace: str) -> Tool | None:
        return self._namespaced_index.get(namespace, {}).get(name)

    def list(self) -> list[str]:
        return [*self._tools]

    def list_namespace(self, namespace: str) -> list[str]:
        return [*self._namespace_index.get(namespace, ())]

    def list_namespaces(self) -> list[str]:
        return [*self._namespaces]

    def _schema_for(self, name: str, tool: Tool) -> Any:
        if name not in self._schema_cache:
            self._schema_cache[name] = tool.cached_schema()
        return self._schema_cache[name]

    async def execute(self, name: str, args: Any) -> Any:
        """Validate ``args`` against the tool's schema and run the tool."""
        tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)
        validate_args(self._schema_for(name, tool), args)
        return await tool.execute(args)

    async def _execute_captured(self, name: str, args: Any) -> Any:
        try:
            return await self.execute(name, args)
        except ToolError as exc:
            return exc

    async def execute_batch(self, requests: Iterable[tuple[str, Any]]) -> list[Any]:
        """Run several tools concurrently.

        Results come back in request order; a request that failed yields its
        ToolError instance in place of a result.
        """
        return await asyncio.gather(
            *(self._execute_captured(name, args) for name, args in requests)
        )

    def to_openai_format(self) -> list[dict]:
        """Function-calling descriptions of the registered tools, in registration order."""
        return copy.deepcopy(self._openai_format)

    def __copy__(self) -> "ToolRegistry":
        clone = ToolRegistry()
        clone._tools = dict(self._tools)
        clone._name_index = {k: list(v) for k, v in self._name_index.items()}
        clone._namespaced_index = {
            k: dict(v) for k, v in self._namespaced_index.items()
        }
        clone._namespace_index = {k: list(v) for k, v in self._namespace_index.items()}
        clone._namespaces = list(self._namespaces)
        return clone