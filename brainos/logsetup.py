"""Logging setup: level from the environment, rotating file and pretty console output."""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Mapping
from datetime import datetime
from logging.handlers import RotatingFileHandler

TRACE = 5
VALID_LEVELS = ("error", "warn", "info", "debug", "trace")
_LEVEL_NUMBERS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}
_LEVEL_LABELS = {
    logging.CRITICAL: "ERROR",
    logging.ERROR: "ERROR",
    logging.WARNING: "WARN",
    logging.INFO: "INFO",
    logging.DEBUG: "DEBUG",
    TRACE: "TRACE",
}
MAX_BYTES = 10_000_000
BACKUP_COUNT = 10

_installed_handlers: list[logging.Handler] = []


def resolve_level(value: str | None) -> str:
    """Return the lower-cased level name, or "error" when it is not a known level."""
    if value is None:
        return "error"
    level = value.lower()
    return level if level in VALID_LEVELS else "error"


def _reject_constant(name: str) -> None:
    raise ValueError(f"not a JSON value: {name}")


def pretty_message(msg: str) -> str:
    """Reformat JSON messages and agent request dumps for reading on a console."""
    try:
        parsed = json.loads(msg, parse_constant=_reject_constant)
    except ValueError:
        pass
    else:
        pretty = json.dumps(parsed, indent=2, sort_keys=True, ensure_ascii=False)
        return f"📦 JSON:\n{pretty}"

    if "LlmRequest" in msg:
        return (
            msg.replace("messages:", "\n📨 messages:\n")
            .replace("System", "\n  🧠 System")
            .replace("User", "\n  👤 User")
            .replace("AssistantToolCall", "\n  🔧 ToolCall")
            .replace("ToolResult", "\n  ✅ ToolResult")
        )
    return msg


def _level_label(record: logging.LogRecord) -> str:
    return _LEVEL_LABELS.get(record.levelno, record.levelname)


class PrettyFormatter(logging.Formatter):
    """Console format: time, level and location on one line, the message below."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created)
        ts = stamp.strftime("%H:%M:%S") + f".{stamp.microsecond // 1000:03d}"
        location = f"{record.pathname or 'unknown'}:{record.lineno or 0}"
        message = pretty_message(record.getMessage())
        return f"🕒 {ts} │ {_level_label(record):<5} │ {location}\n{message}"


class _DetailedFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).astimezone()
        ts = stamp.strftime("%Y-%m-%d %H:%M:%S.%f %z")
        return (
            f"[{ts}] {_level_label(record)} [{record.name}] "
            f"{record.pathname}:{record.lineno}: {record.getMessage()}"
        )


def init_logging(
    directory: str | os.PathLike = "log",
    basename: str = "bos",
    env: Mapping[str, str] | None = None,
) -> logging.Logger:
    """Configure the root logger from BOS_LOG, logging to a rotating file and stdout."""
    env = os.environ if env is None else env
    level = resolve_level(env.get("BOS_LOG"))
    logging.addLevelName(TRACE, "TRACE")

    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    os.makedirs(directory, exist_ok=True)
    file_handler = RotatingFileHandler(
        os.path.join(directory, f"{basename}.log"),
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(_DetailedFormatter())

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(PrettyFormatter())

    for handler in (file_handler, console_handler):
        root.addHandler(handler)
        _installed_handlers.append(handler)
    root.setLevel(_LEVEL_NUMBERS[level])
    return root