"""Configuration formats, merge strategies, sources, metadata and errors."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import PurePath
from typing import Any


class ConfigError(Exception):
    """Base class for configuration errors."""

    prefix = ""

    def __init__(self, detail: str = "") -> None:
        self.detail = str(detail)
        message = f"{self.prefix}: {self.detail}" if self.prefix else self.detail
        super().__init__(message)


class UnsupportedFormatError(ConfigError):
    """The file extension does not name a known format."""

    prefix = "Unsupported file format"


class ConfigParseError(ConfigError):
    """The content of a configuration source could not be parsed."""

    def __init__(self, fmt: "ConfigFormat", detail: str) -> None:
        self.format = fmt
        self.prefix = f"{fmt.value} parse error"
        super().__init__(detail)


class ConfigNotFoundError(ConfigError):
    """A configuration file or directory does not exist."""

    prefix = "Config file not found"


class MergeError(ConfigError):
    """Merging configuration values failed."""

    prefix = "Merge error"


class LoadError(ConfigError):
    """Loading the configuration failed as a whole."""

    prefix = "Load error"


class CustomSourceError(ConfigError):
    """A custom configuration source failed to load."""

    prefix = "Custom source error"


class ConfigFormat(Enum):
    """Supported configuration file formats; the value is the display name."""

    TOML = "TOML"
    YAML = "YAML"
    JSON = "JSON"

    @classmethod
    def from_path(cls, path: str) -> "ConfigFormat | None":
        """Infer the format from a file's extension, or None if unknown."""
        suffix = PurePath(str(path)).suffix
        if not suffix:
            return None
        return _EXTENSIONS.get(suffix[1:].lower())


_EXTENSIONS = {
    "toml": ConfigFormat.TOML,
    "yaml": ConfigFormat.YAML,
    "yml": ConfigFormat.YAML,
    "json": ConfigFormat.JSON,
}


class ConfigMergeStrategy(Enum):
    """How several configuration sources are combined."""

    OVERRIDE = "override"
    DEEP_MERGE = "deep_merge"
    FIRST = "first"
    ACCUMULATE = "accumulate"

    @classmethod
    def default(cls) -> "ConfigMergeStrategy":
        return cls.OVERRIDE


class SourceKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    INLINE = "inline"
    CUSTOM = "custom"


class CustomConfigSource(ABC):
    """A user-supplied source of configuration values."""

    @abstractmethod
    def load(self) -> Any:
        """Return the configuration value this source provides."""


@dataclass(frozen=True)
class ConfigSource:
    """One place configuration is read from."""

    kind: SourceKind
    value: Any

    @classmethod
    def file(cls, path: Any) -> "ConfigSource":
        return cls(SourceKind.FILE, str(path))

    @classmethod
    def directory(cls, path: Any) -> "ConfigSource":
        return cls(SourceKind.DIRECTORY, str(path))

    @classmethod
    def inline(cls, value: Any) -> "ConfigSource":
        return cls(SourceKind.INLINE, value)

    @classmethod
    def custom(cls, source: CustomConfigSource) -> "ConfigSource":
        return cls(SourceKind.CUSTOM, source)

    def __copy__(self) -> "ConfigSource":
        if self.kind is SourceKind.CUSTOM:
            raise TypeError(
                "Cannot clone Custom config source. Use a different approach."
            )
        if self.kind is SourceKind.INLINE:
            return ConfigSource(self.kind, copy.deepcopy(self.value))
        return ConfigSource(self.kind, self.value)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ConfigMetadata:
    """What was loaded, how and when."""

    strategy: ConfigMergeStrategy
    sources: list[str] = field(default_factory=list)
    format: ConfigFormat | None = None
    loaded_at: datetime = field(default_factory=_utc_now)