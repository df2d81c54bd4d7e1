"""Load configuration from files, directories, inline values and custom sources."""

from __future__ import annotations

import asyncio
import copy
import json
import logging
import tomllib
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, TypeVar

import yaml

from brainos.config_types import (
    ConfigError,
    ConfigFormat,
    ConfigMergeStrategy,
    ConfigMetadata,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigSource,
    CustomSourceError,
    LoadError,
    SourceKind,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ALL_FAILED = "all configuration sources failed to load"


def parse_content(content: str, fmt: ConfigFormat) -> Any:
    """Parse text in the given format into plain Python values."""
    try:
        if fmt is ConfigFormat.TOML:
            return tomllib.loads(content)
        if fmt is ConfigFormat.YAML:
            return yaml.safe_load(content)
        return json.loads(content)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, ValueError) as exc:
        raise ConfigParseError(fmt, str(exc)) from exc


def _merge_maps(base: dict, merge: dict, combine: Callable[[Any, Any], Any]) -> dict:
    merged = dict(base)
    for key, value in merge.items():
        merged[key] = combine(merged[key], value) if key in merged else value
    return merged


def deep_merge(base: Any, merge: Any) -> Any:
    """Merge mappings recursively; anything else is replaced by ``merge``."""
    if isinstance(base, dict) and isinstance(merge, dict):
        return _merge_maps(base, merge, deep_merge)
    return merge


def override_merge(base: Any, merge: Any) -> Any:
    """Merge mappings key by key, later values replacing earlier ones."""
    if isinstance(base, dict) and isinstance(merge, dict):
        return _merge_maps(base, merge, override_merge)
    return merge


def accumulate_merge(base: Any, merge: Any) -> Any:
    """Like a deep merge, but lists found on both sides are concatenated."""
    if isinstance(base, list) and isinstance(merge, list):
        return base + merge
    if isinstance(base, dict) and isinstance(merge, dict):
        return _merge_maps(base, merge, accumulate_merge)
    return merge


_MERGERS: dict[ConfigMergeStrategy, Callable[[Any, Any], Any]] = {
    ConfigMergeStrategy.OVERRIDE: override_merge,
    ConfigMergeStrategy.DEEP_MERGE: deep_merge,
    ConfigMergeStrategy.ACCUMULATE: accumulate_merge,
}


def _read_file(path: str) -> Any:
    path_obj = Path(path)
    if not path_obj.exists():
        raise ConfigNotFoundError(path)
    fmt = ConfigFormat.from_path(path)
    if fmt is None:
        raise UnsupportedFormatError(path)
    return parse_content(path_obj.read_text(encoding="utf-8"), fmt)


def _read_directory(directory: str) -> Any:
    files = sorted(
        entry
        for entry in Path(directory).iterdir()
        if entry.is_file() and ConfigFormat.from_path(str(entry)) is not None
    )
    merged: Any = {}
    for entry in files:
        try:
            value = _read_file(str(entry))
        except (ConfigError, OSError) as exc:
            logger.debug("skipping file %s: %s", entry, exc)
            continue
        merged = deep_merge(merged, value)
    return merged


class ConfigLoader:
    """Collects configuration sources and combines them with a merge strategy."""

    def __init__(self) -> None:
        self._sources: list[ConfigSource] = []
        self._strategy = ConfigMergeStrategy.default()
        self._metadata: ConfigMetadata | None = None
        self._cached: Any = None
        self._loaded = False

    def _invalidate(self) -> None:
        self._cached = None
        self._loaded = False

    def with_strategy(self, strategy: ConfigMergeStrategy) -> "ConfigLoader":
        self._strategy = strategy
        return self

    def add_source(self, source: ConfigSource) -> "ConfigLoader":
        self._sources.append(source)
        self._invalidate()
        return self

    def add_file(self, path: str | Path) -> "ConfigLoader":
        return self.add_source(ConfigSource.file(path))

    def add_files(self, paths: Iterable[str | Path]) -> "ConfigLoader":
        self._sources.extend(ConfigSource.file(path) for path in paths)
        self._invalidate()
        return self

    def add_directory(self, path: str | Path) -> "ConfigLoader":
        """Add a directory source; raises ConfigNotFoundError if it does not exist."""
        if not Path(path).exists():
            raise ConfigNotFoundError(str(path))
        return self.add_source(ConfigSource.directory(path))

    def add_inline(self, value: Any) -> "ConfigLoader":
        return self.add_source(ConfigSource.inline(value))

    def _load_source(self, source: ConfigSource, metadata: ConfigMetadata) -> Any:
        if source.kind is SourceKind.FILE:
            name, value = source.value, _read_file(source.value)
        elif source.kind is SourceKind.DIRECTORY:
            name, value = source.value, _read_directory(source.value)
            metadata.format = None
        elif source.kind is SourceKind.INLINE:
            name, value = "inline", copy.deepcopy(source.value)
        else:
            try:
                value = source.value.load()
            except Exception as exc:
                raise CustomSourceError(str(exc)) from exc
            name = "custom"
        metadata.sources.append(name)
        return value

    def _try_sources(self, metadata: ConfigMetadata) -> Iterable[Any]:
        for source in self._sources:
            try:
                yield self._load_source(source, metadata)
            except (ConfigError, OSError) as exc:
                logger.debug("failed to load config source: %s, skipping", exc)

    def _load(self) -> Any:
        if self._loaded:
            logger.debug("using cached configuration")
            return self._cached

        logger.info("loading configuration, strategy: %s", self._strategy.value)
        logger.debug("number of config sources: %d", len(self._sources))
        metadata = ConfigMetadata(self._strategy)

        if not self._sources:
            logger.warning("no configuration sources given, using empty config")
            result: Any = {}
        elif self._strategy is ConfigMergeStrategy.FIRST:
            result = next(iter(self._try_sources(metadata)), _MISSING)
        else:
            merger = _MERGERS[self._strategy]
            result = _MISSING
            for value in self._try_sources(metadata):
                result = merger({} if result is _MISSING else result, value)

        if result is _MISSING:
            raise LoadError(_ALL_FAILED)
        self._cached = result
        self._loaded = True
        self._metadata = metadata
        return result

    async def load(self) -> Any:
        """Load and combine all sources, reusing the cached result if present."""
        if self._loaded:
            return self._cached
        return await asyncio.to_thread(self._load)

    def load_sync(self) -> Any:
        """Load without an event loop; returns a copy of the combined value."""
        return copy.deepcopy(self._load())

    async def load_typed(self, model: Callable[..., T]) -> T:
        """Load and build ``model`` from the result (mappings become keyword arguments)."""
        value = copy.deepcopy(await self.load())
        try:
            return model(**value) if isinstance(value, dict) else model(value)
        except (TypeError, ValueError) as exc:
            raise ConfigParseError(ConfigFormat.JSON, str(exc)) from exc

    def get(self) -> Any:
        """The cached configuration, or None if nothing is loaded."""
        return self._cached if self._loaded else None

    def metadata(self) -> ConfigMetadata | None:
        return self._metadata

    def sources(self) -> list[ConfigSource]:
        return list(self._sources)

    def strategy(self) -> ConfigMergeStrategy:
        return self._strategy

    def reset(self) -> None:
        self._invalidate()
        self._metadata = None

    async def reload(self) -> Any:
        self.reset()
        return await self.load()


class _Missing:
    pass


_MISSING = _Missing()