"""
Tests for the context-aware logger.
"""

import json
import logging

import pytest

from store_admin.core.shared.logger import (
    ColoredFormatter,
    JSONFormatter,
    configure_logging,
    get_logger,
    get_repository_logger,
    get_service_logger,
)


def make_record(extra_data=None) -> logging.LogRecord:
    record = logging.LogRecord("service.test", logging.INFO, __file__, 10, "hello", None, None)
    if extra_data is not None:
        record.extra_data = extra_data
    return record


@pytest.mark.unit
class TestContextLogger:
    def test_component_loggers(self, caplog):
        with caplog.at_level(logging.INFO):
            get_service_logger("store_config").info("loaded")
            get_repository_logger("domains").info("saved")

        service, repository = caplog.records[-2:]
        assert service.name == "service.store_config"
        assert service.extra_data == {"component": "service", "service": "store_config"}
        assert repository.name == "repository.domains"

    def test_call_context_overrides_defaults(self, caplog):
        logger = get_logger("test.override", {"store_id": "s-1", "operation": "load"})

        with caplog.at_level(logging.WARNING, logger="test.override"):
            logger.warning("rejected", operation="add_domain")

        assert caplog.records[-1].extra_data == {"store_id": "s-1", "operation": "add_domain"}

    def test_context_reaches_record(self, caplog):
        logger = get_logger("test.context", {"store_id": "s-1"})

        with caplog.at_level(logging.INFO, logger="test.context"):
            logger.info("saved", version=2)

        record = caplog.records[-1]
        assert record.getMessage() == "saved"
        assert record.extra_data == {"store_id": "s-1", "version": 2}


@pytest.mark.unit
class TestFormatters:
    def test_json_formatter(self):
        payload = json.loads(JSONFormatter().format(make_record({"store_id": "s-1"})))

        assert payload["level"] == "INFO"
        assert payload["message"] == "hello"
        assert payload["extra"] == {"store_id": "s-1"}

    def test_colored_formatter_appends_context(self):
        formatted = ColoredFormatter("%(levelname)s %(message)s").format(make_record({"store_id": "s-1"}))

        assert formatted.endswith("| store_id=s-1")
        assert "hello" in formatted


@pytest.mark.unit
def test_configure_logging_sets_level():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        configure_logging("warning", "json")

        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JSONFormatter)
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
