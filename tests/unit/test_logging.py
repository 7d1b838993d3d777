"""Tests for logging setup."""

import json
import logging

from panelkit.core.logging import JSONLFormatter, resolve_level, setup_logging


def _record(name: str = "panelkit_ui.converters.block_compiler", **extra) -> logging.LogRecord:
    record = logging.LogRecord(name, logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONLFormatter:
    """JSON Lines output."""

    def test_fields(self):
        entry = json.loads(JSONLFormatter().format(_record()))
        assert entry["level"] == "WARNING"
        assert entry["component"] == "block_compiler"
        assert entry["message"] == "hello world"
        assert "context" not in entry

    def test_component_and_context_extras(self):
        entry = json.loads(JSONLFormatter().format(_record(component="cli", context={"a": 1})))
        assert entry["component"] == "cli"
        assert entry["context"] == {"a": 1}


class TestSetupLogging:
    """Logger configuration."""

    def test_resolve_level(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert resolve_level() == logging.WARNING
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(logging.INFO) == logging.INFO
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert resolve_level() == logging.ERROR

    def test_configures_both_packages(self):
        setup_logging("INFO", json_format=True)
        for name in ("panelkit", "panelkit_ui"):
            logger = logging.getLogger(name)
            assert logger.level == logging.INFO
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0].formatter, JSONLFormatter)
            assert logger.propagate is False
