"""Observability – structured logging helpers."""
from mp_reframe.observability.logging.factory import JsonLoggerFactory, configure_logging
from mp_reframe.observability.logging.processors import EventTypeProcessor, get_logger

__all__ = [
    "EventTypeProcessor",
    "JsonLoggerFactory",
    "configure_logging",
    "get_logger",
]
