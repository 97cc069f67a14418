"""Live ranking session control."""

from pairrank.session.controller import (
    ComparisonPair,
    Progress,
    RankingController,
    SessionStats,
)


__all__ = ["ComparisonPair", "Progress", "RankingController", "SessionStats"]
