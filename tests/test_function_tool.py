import pytest

from brainos.function_tool import FunctionTool
from brainos.tool_base import ToolExecutionError


def _number(args, key):
    value = args.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ToolExecutionError(f"{key} required")
    return float(value)


def _add(args):
    return _number(args, "a") + _number(args, "b")


def _multiply(args):
    return _number(args, "a") * _number(args, "b")


def test_function_tool_basic():
    tool = FunctionTool(
        "echo",
        "Echo the input",
        {"type": "object", "properties": {"message": {"type": "string"}}},
        lambda args: args,
    )
    assert tool.name() == "echo"
    assert tool.description().short == "Echo the input"
    assert tool.description().parameters == "JSON object with function parameters"


def test_function_tool_numeric():
    tool = FunctionTool.numeric("add", "Add two numbers", 2, _add)
    assert tool.name() == "add"
    schema = tool.json_schema()
    assert schema["type"] == "object"
    assert schema["properties"]["a"]["type"] == "number"
    assert schema["required"] == ["a", "b"]
    assert schema["properties"]["b"]["description"] == "Parameter b"


def test_function_tool_numeric_zero_params():
    tool = FunctionTool.numeric("none", "No params", 0, lambda args: 0)
    assert tool.json_schema()["required"] == []
    assert tool.json_schema()["properties"] == {}


def test_function_tool_numeric_five_params():
    tool = FunctionTool.numeric("five", "Five params", 5, lambda args: 0)
    assert tool.json_schema()["required"] == ["a", "b", "c", "d", "e"]


def test_function_tool_numeric_too_many_params():
    with pytest.raises(ValueError):
        FunctionTool.numeric("six", "Six params", 6, lambda args: 0)


@pytest.mark.asyncio
async def test_function_tool_execute():
    tool = FunctionTool.numeric("multiply", "Multiply two numbers", 2, _multiply)
    result = await tool.execute({"a": 3.0, "b": 4.0})
    assert result == 12.0


@pytest.mark.asyncio
async def test_function_tool_execute_error_propagates():
    tool = FunctionTool.numeric("multiply", "Multiply two numbers", 2, _multiply)
    with pytest.raises(ToolExecutionError) as info:
        await tool.execute({"b": 4.0})
    assert info.value.message == "a required"


def test_cached_schema_matches_schema():
    tool = FunctionTool.numeric("add", "Add two numbers", 2, _add)
    assert tool.cached_schema() == tool.json_schema()