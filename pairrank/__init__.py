"""Pairwise preference ranking.

Builds a total ordering over a list of items from a sequence of
"which do you prefer" answers, using binary insertion.
"""

from pairrank.engine import (
    CompleteSession,
    Decide,
    InvalidInputError,
    RankingError,
    RankingSession,
    Restart,
    Session,
    SessionCompleteError,
    Skip,
    apply_event,
    decide,
    initialize,
    restart,
    skip,
)


__all__ = [
    "CompleteSession",
    "Decide",
    "InvalidInputError",
    "RankingError",
    "RankingSession",
    "Restart",
    "Session",
    "SessionCompleteError",
    "Skip",
    "apply_event",
    "decide",
    "initialize",
    "restart",
    "skip",
]
