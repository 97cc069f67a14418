"""Metrics collection for ranking sessions."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class RankingMetrics:
    """Metrics for ranking sessions.

    Attributes:
        sessions_started: Sessions created from an item list.
        sessions_completed: Sessions that reached the complete state.
        comparisons: Comparison answers applied.
        skips: Items dropped without placement.
        restarts: Sessions discarded and rebuilt.
        comparisons_per_item: Answers needed to place each item, in order.
    """

    sessions_started: int = 0
    sessions_completed: int = 0
    comparisons: int = 0
    skips: int = 0
    restarts: int = 0
    comparisons_per_item: list[int] = field(default_factory=list)

    _instance: ClassVar["RankingMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "RankingMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_session_started(self) -> None:
        """Record a newly created session."""
        self.sessions_started += 1

    def record_session_completed(self) -> None:
        """Record a session reaching the complete state."""
        self.sessions_completed += 1

    def record_comparison(self) -> None:
        """Record one applied comparison answer."""
        self.comparisons += 1

    def record_placement(self, comparisons: int) -> None:
        """Record the answers needed to place one item.

        Args:
            comparisons: Number of answers the insertion search took.
        """
        self.comparisons_per_item.append(comparisons)

    def record_skip(self) -> None:
        """Record a skipped item."""
        self.skips += 1

    def record_restart(self) -> None:
        """Record a restarted session."""
        self.restarts += 1

    def to_dict(self) -> dict[str, object]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        placed = len(self.comparisons_per_item)
        return {
            "sessions_started": self.sessions_started,
            "sessions_completed": self.sessions_completed,
            "comparisons": self.comparisons,
            "skips": self.skips,
            "restarts": self.restarts,
            "items_placed": placed,
            "max_comparisons_per_item": max(self.comparisons_per_item, default=0),
            "avg_comparisons_per_item": (
                round(sum(self.comparisons_per_item) / placed, 3) if placed else 0.0
            ),
        }
