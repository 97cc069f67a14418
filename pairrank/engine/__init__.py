"""Ranking engine: pure binary-insertion session transitions.

Sessions are immutable values. initialize builds the first one from an
item list, and decide, skip and restart each return a new session.
"""

from pairrank.engine.engine import decide, initialize, restart, skip
from pairrank.engine.errors import (
    InvalidInputError,
    RankingError,
    SessionCompleteError,
)
from pairrank.engine.events import Decide, Event, Restart, Skip, apply_event
from pairrank.engine.metrics import RankingMetrics
from pairrank.engine.models import CompleteSession, RankingSession, Session
from pairrank.engine.shuffle import fair_shuffle


__all__ = [
    "CompleteSession",
    "Decide",
    "Event",
    "InvalidInputError",
    "RankingError",
    "RankingMetrics",
    "RankingSession",
    "Restart",
    "Session",
    "SessionCompleteError",
    "Skip",
    "apply_event",
    "decide",
    "fair_shuffle",
    "initialize",
    "restart",
    "skip",
]
