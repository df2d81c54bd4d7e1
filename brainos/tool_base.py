"""Tool errors, tool descriptions and the abstract tool interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class ToolError(Exception):
    """Base class for errors raised by tools and the tool registry."""


class ToolNotFoundError(ToolError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"tool not found: {name}")


class ToolExecutionError(ToolError):
    """A tool failed while running, or could not be registered."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"execution failed: {message}")


class SchemaMismatchError(ToolError):
    """Arguments did not match the tool's JSON schema."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"schema mismatch: {message}")


@dataclass(frozen=True)
class ToolDescription:
    """A short description of a tool and a note on its parameters."""

    short: str
    parameters: str


class Tool(ABC):
    """Something an agent can call with JSON arguments."""

    @abstractmethod
    def name(self) -> str:
        """The name the tool is called by."""

    @abstractmethod
    def description(self) -> ToolDescription:
        """What the tool does."""

    @abstractmethod
    def json_schema(self) -> Any:
        """The JSON schema its arguments must satisfy."""

    def cached_schema(self) -> Any:
        """The schema to keep for repeated validation; by default ``json_schema()``."""
        return self.json_schema()

    @abstractmethod
    async def execute(self, args: Any) -> Any:
        """Run the tool with the given arguments and return its JSON result."""