"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from pairrank.engine.metrics import RankingMetrics


@pytest.fixture(autouse=True)
def _reset_global_state() -> Iterator[None]:
    """Give each test fresh metrics and default logging."""
    RankingMetrics.reset()
    structlog.contextvars.clear_contextvars()
    yield
    RankingMetrics.reset()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
