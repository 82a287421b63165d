"""Tests for logging utilities."""

import json
import logging

from rich.logging import RichHandler
from outcomes.dispatcher import Dispatcher
from outcomes.utils import StructuredFormatter, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_pretty_uses_rich(self):
        logger = setup_logging("debug", "pretty")
        assert logger.name == "outcomes"
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_replaces_handlers(self):
        setup_logging("INFO", "pretty")
        logger = setup_logging("INFO", "pretty")
        assert len(logger.handlers) == 1

    def test_no_console(self):
        logger = setup_logging("INFO", console_output=False)
        assert logger.handlers == []

    def test_structured_file(self, tmp_path):
        log_file = tmp_path / "logs" / "outcomes.log"
        logger = setup_logging("INFO", "structured", log_file=log_file, console_output=False)
        logging.getLogger("outcomes.dispatcher").info("dispatched")
        for handler in logger.handlers:
            handler.flush()
            handler.close()

        entry = json.loads(log_file.read_text().splitlines()[0])
        assert entry["message"] == "dispatched"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "outcomes.dispatcher"


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def _record(self, **extra):
        record = logging.LogRecord("outcomes", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_formats_json(self):
        data = json.loads(StructuredFormatter().format(self._record()))
        assert data["message"] == "hello world"
        assert data["level"] == "WARNING"
        assert data["timestamp"].endswith("Z")

    def test_includes_outcome_extra(self):
        data = json.loads(StructuredFormatter().format(self._record(outcome="success")))
        assert data["outcome"] == "'success'"

    def test_dispatch_writes_outcome_field(self, tmp_path):
        log_file = tmp_path / "outcomes.log"
        logger = setup_logging("DEBUG", "structured", log_file=log_file, console_output=False)
        Dispatcher("success", "failure", handler=lambda r: None).dispatch("success", "ok")
        for handler in logger.handlers:
            handler.close()

        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert [e["outcome"] for e in entries if "outcome" in e] == ["'success'"]
