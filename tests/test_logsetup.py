import logging
import re

import pytest

from brainos.logsetup import (
    PrettyFormatter,
    init_logging,
    pretty_message,
    resolve_level,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("INFO", "info"),
        ("warn", "warn"),
        ("Trace", "trace"),
        ("verbose", "error"),
        ("", "error"),
        (None, "error"),
    ],
)
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_pretty_message_json_is_sorted_and_indented():
    assert pretty_message('{"b": 1, "a": [true]}') == (
        '📦 JSON:\n{\n  "a": [\n    true\n  ],\n  "b": 1\n}'
    )


def test_pretty_message_llm_request():
    result = pretty_message("LlmRequest { messages: [System, User] }")
    assert result == (
        "LlmRequest { \n📨 messages:\n [\n  🧠 System, \n  👤 User] }"
    )


def test_pretty_message_plain_text_unchanged():
    assert pretty_message("Hello, world!") == "Hello, world!"


def test_pretty_message_rejects_nan_as_json():
    assert pretty_message("NaN") == "NaN"


def test_pretty_formatter_layout():
    record = logging.LogRecord(
        "brainos", logging.WARNING, "agent.py", 12, "hello %s", ("there",), None
    )
    text = PrettyFormatter().format(record)
    header, body = text.split("\n", 1)
    assert body == "hello there"
    assert header.startswith("🕒 ")
    assert header.endswith(" │ WARN  │ agent.py:12")
    timestamp = header[len("🕒 "):].split(" │ ")[0]
    assert len(timestamp) == 12
    assert bool(re.fullmatch(r"\d{2}:\d{2}:\d{2}\.\d{3}", timestamp)) is True


def test_init_logging_writes_file(tmp_path):
    root = init_logging(tmp_path / "logs", "bos", {"BOS_LOG": "info"})
    try:
        assert root.level == logging.INFO
        logging.getLogger("brainos.test").info("Hello, world!")
        for handler in root.handlers:
            handler.flush()
        content = (tmp_path / "logs" / "bos.log").read_text(encoding="utf-8")
        assert "INFO [brainos.test]" in content
        assert "Hello, world!" in content
    finally:
        init_logging(tmp_path / "logs", "bos", {"BOS_LOG": "error"})
        for handler in list(root.handlers):
            if getattr(handler, "baseFilename", "").startswith(str(tmp_path)):
                root.removeHandler(handler)
                handler.close()


def test_init_logging_invalid_level_defaults_to_error(tmp_path):
    root = init_logging(tmp_path, "bos", {"BOS_LOG": "loud"})
    try:
        assert root.level == logging.ERROR
    finally:
        for handler in list(root.handlers):
            if getattr(handler, "baseFilename", "").startswith(str(tmp_path)):
                root.removeHandler(handler)
                handler.close()