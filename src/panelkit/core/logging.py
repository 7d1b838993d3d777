"""
panelkit logging setup.

Console output is human-readable by default; ``json_format`` switches to
JSON Lines so that log output can be consumed by agents and log shippers.
Both formatters read an optional ``component`` attribute from the record
(pass it through ``extra={"component": ...}``).
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any

LOGGER_NAMES = ("panelkit", "panelkit_ui")

_NO_COLOR = bool(os.environ.get("NO_COLOR")) or not sys.stderr.isatty()


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "" if _NO_COLOR else "\033[0m"
    DIM = "" if _NO_COLOR else "\033[2m"

    DEBUG = "" if _NO_COLOR else "\033[36m"  # Cyan
    INFO = "" if _NO_COLOR else "\033[32m"  # Green
    WARNING = "" if _NO_COLOR else "\033[33m"  # Yellow
    ERROR = "" if _NO_COLOR else "\033[31m"  # Red
    CRITICAL = "" if _NO_COLOR else "\033[35m"  # Magenta
    COMPONENT = "" if _NO_COLOR else "\033[34m"  # Blue


def _component(record: logging.LogRecord) -> str:
    component = getattr(record, "component", None)
    if component:
        return str(component)
    # panelkit_ui.converters.block_compiler -> block_compiler
    return record.name.rsplit(".", 1)[-1]


class JSONLFormatter(logging.Formatter):
    """
    Formats log records as one JSON object per line.

    Example output:
    {"timestamp":"2024-01-15T10:30:45.123000+00:00","level":"WARNING","component":"interpreter","message":"LLM interpreter failed, falling back to mock"}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "component": _component(record),
            "message": record.getMessage(),
        }

        context = getattr(record, "context", None)
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.CRITICAL,
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        component = _component(record)

        if _NO_COLOR:
            prefix = f"[{timestamp}] [{component}]"
        else:
            prefix = (
                f"{Colors.DIM}{timestamp}{Colors.RESET} "
                f"{Colors.COMPONENT}[{component}]{Colors.RESET}"
            )

        if record.levelno != logging.INFO:
            level_name = record.levelname
            if not _NO_COLOR:
                level_name = f"{self.LEVEL_COLORS.get(record.levelno, '')}{level_name}{Colors.RESET}"
            prefix = f"{prefix} {level_name}:"

        message = f"{prefix} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def resolve_level(level: int | str | None = None) -> int:
    """Resolve a level name or number, defaulting to ``LOG_LEVEL`` or WARNING."""
    if level is None:
        level = os.environ.get("LOG_LEVEL", "WARNING")
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.WARNING)


def setup_logging(level: int | str | None = None, json_format: bool = False) -> None:
    """
    Configure the panelkit loggers.

    Args:
        level: Minimum level (name or number). Defaults to ``LOG_LEVEL``.
        json_format: Emit JSON Lines instead of human-readable output
    """
    resolved = resolve_level(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONLFormatter() if json_format else ConsoleFormatter())
    handler.setLevel(resolved)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(resolved)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.propagate = False
