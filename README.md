# brainos

Building blocks for agent runtimes:

- **Layered configuration** from TOML, YAML and JSON files, whole directories,
  inline values or custom sources, combined with a chosen merge strategy.
- **Logging setup** with a readable console format and size-rotated log files.
- **Tools**: wrap plain functions as tools with a JSON schema, validate call
  arguments against it, describe schemas in short text, and keep tools in a
  registry with namespaces and OpenAI-style function listings.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

```python
from brainos.config_loader import ConfigLoader
from brainos.config_types import ConfigMergeStrategy

loader = (
    ConfigLoader()
    .with_strategy(ConfigMergeStrategy.DEEP_MERGE)
    .add_file("defaults.toml")
    .add_file("local.yaml")
    .add_inline({"server": {"port": 8080}})
)
config = loader.load_sync()        # or: config = await loader.load()
print(loader.metadata().sources)
```

Strategies:

| Strategy     | Behaviour                                               |
|--------------|---------------------------------------------------------|
| `OVERRIDE`   | later sources replace earlier ones, key by key (default) |
| `DEEP_MERGE` | nested mappings are merged recursively                  |
| `FIRST`      | only the first source that loads is used                |
| `ACCUMULATE` | lists are concatenated, other values are replaced       |

Sources that fail to load are skipped; if none loads, a `LoadError` is raised.
A loader with no sources yields an empty mapping. Results are cached until
`reset()` or `reload()`.

The format of a file is taken from its extension (`.toml`, `.yaml`, `.yml`,
`.json`, case-insensitive) — see `ConfigFormat.from_path`.

## Logging

```python
from brainos.logsetup import init_logging

init_logging()   # level from BOS_LOG (error, warn, info, debug, trace); files under ./log
```

## Tools

```python
import asyncio
from brainos.function_tool import FunctionTool
from brainos.tool_registry import ToolRegistry
from brainos.schema_description import describe_schema

add = FunctionTool.numeric("add", "Add two numbers", 2, lambda a: a["a"] + a["b"])

registry = ToolRegistry()
registry.register_with_namespace(add, "calculator")

print(describe_schema(add.json_schema()))
print(asyncio.run(registry.execute("calculator/add", {"a": 3, "b": 4})))
print(registry.to_openai_format())
```

Arguments are checked against the tool's schema before it runs; mismatches raise
`SchemaMismatchError`, unknown tools raise `ToolNotFoundError`.
`execute_batch` runs several calls concurrently and returns results (or the
exceptions raised) in request order.