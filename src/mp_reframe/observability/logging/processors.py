"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class EventTypeProcessor:
    """structlog processor that renders ``event``/``value`` objects as their type names.

    Dispatch log calls bind the dispatched object itself; rendering its class
    name keeps JSON output small and free of application payloads.

    Usage::

        structlog.configure(processors=[EventTypeProcessor(), ...])
    """

    KEYS: tuple[str, ...] = ("dispatched", "origin")

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key in self.KEYS:
            value = event_dict.get(key)
            if value is not None and not isinstance(value, str):
                event_dict[key] = type(value).__name__
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["EventTypeProcessor", "get_logger"]
