"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from mp_reframe.config import ReframeSettings
from mp_reframe.observability.logging import (
    EventTypeProcessor,
    JsonLoggerFactory,
    configure_logging,
    get_logger,
)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class _Payload:
    pass


# ---------------------------------------------------------------------------
# EventTypeProcessor
# ---------------------------------------------------------------------------


class TestEventTypeProcessor:
    def test_replaces_objects_with_type_name(self) -> None:
        out = EventTypeProcessor()(None, "debug", {"event": "x", "dispatched": _Payload(), "origin": _Payload()})
        assert out["dispatched"] == "_Payload"
        assert out["origin"] == "_Payload"

    def test_leaves_strings_and_missing_keys(self) -> None:
        out = EventTypeProcessor()(None, "debug", {"event": "x", "dispatched": "Named"})
        assert out == {"event": "x", "dispatched": "Named"}

    def test_other_keys_untouched(self) -> None:
        payload = _Payload()
        out = EventTypeProcessor()(None, "debug", {"event": "x", "value": payload})
        assert out["value"] is payload


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("test", component="store").info("hello")
        assert logs == [{"component": "store", "event": "hello", "log_level": "info"}]

    def test_without_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger().warning("careful", n=1)
        assert logs[0]["n"] == 1


# ---------------------------------------------------------------------------
# JsonLoggerFactory / configure_logging
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("restore_logging")
class TestJsonLoggerFactory:
    def test_configures_root_handler_and_level(self) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_console_renderer(self) -> None:
        JsonLoggerFactory.configure(json=False)
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_from_settings(self) -> None:
        configure_logging(ReframeSettings(log_level="debug", json_logs=False))
        assert logging.getLogger().level == logging.DEBUG
