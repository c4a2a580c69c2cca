"""conftest.py for benchmarks.

Provides a reusable event loop for benchmarks that settle side-effects.

The ``event_loop`` fixture is session-scoped so every benchmark in the
session shares a single asyncio event loop — this amortises the
``asyncio.new_event_loop()`` startup cost and gives more stable timing.
"""

from __future__ import annotations

import asyncio

import pytest


@pytest.fixture(scope="session")
def event_loop():
    """Session-scoped event loop shared by all async benchmark helpers."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()
