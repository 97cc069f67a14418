"""Stateful driver for a single ranking session.

The controller owns the live session value, caches the original item list
for restarts, and is the only place that feeds events into the engine.
Views such as the current comparison pair and progress are read off the
session without changing it.
"""

import random
import uuid
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from pairrank.constants import COMPONENT_CONTROLLER
from pairrank.engine.engine import initialize
from pairrank.engine.errors import SessionCompleteError
from pairrank.engine.events import Decide, Event, Restart, Skip, apply_event
from pairrank.engine.metrics import RankingMetrics
from pairrank.engine.models import CompleteSession, RankingSession, Session


logger = structlog.get_logger()


@dataclass(frozen=True)
class ComparisonPair:
    """The two items offered for the next comparison.

    Attributes:
        target: Already placed item probed by the search.
        candidate: Item currently being placed.
    """

    target: str
    candidate: str


@dataclass(frozen=True)
class Progress:
    """How far the session is through the item list.

    Attributes:
        placed: Items placed in the ranking so far.
        total: Items still in play, placed or not.
        percent: placed / total as a percentage, one decimal.
    """

    placed: int
    total: int
    percent: float


@dataclass(frozen=True)
class SessionStats:
    """Counters for the live session since its last (re)start.

    Attributes:
        comparisons: Comparison answers applied.
        skips: Items skipped.
        restarts: Restarts issued over the controller's lifetime.
    """

    comparisons: int
    skips: int
    restarts: int


class RankingController:
    """Drives one ranking session from start to completion.

    Typical usage:
        controller = RankingController(items, rng=random.Random(7))
        while not controller.is_complete:
            pair = controller.current_pair()
            controller.choose(prefer_current=ask_user(pair))
        ranking = controller.current_ranking()
    """

    def __init__(
        self,
        items: Sequence[str],
        rng: random.Random | None = None,
        session_id: str | None = None,
        metrics: RankingMetrics | None = None,
    ) -> None:
        """Initialize the controller and build the first session.

        Args:
            items: Item labels in their original order.
            rng: Randomness source for shuffles.
            session_id: Identifier for logging. Generated if omitted.
            metrics: Optional metrics instance.

        Raises:
            InvalidInputError: If items is empty.
        """
        self._original_items = tuple(items)
        self._rng = rng or random.Random()
        self._session_id = session_id or str(uuid.uuid4())
        self._metrics = metrics or RankingMetrics.get_instance()

        self._comparisons = 0
        self._skips = 0
        self._restarts = 0
        self._item_comparisons = 0

        self._log = logger.bind(
            component=COMPONENT_CONTROLLER,
            session_id=self._session_id,
        )

        self._session: Session = initialize(self._original_items, self._rng)
        self._metrics.record_session_started()
        self._log.info(
            "ranking_session_started",
            items_total=len(self._original_items),
            complete=self._session.is_complete,
        )
        self._note_if_complete()

    @property
    def session(self) -> Session:
        """Get the current session value."""
        return self._session

    @property
    def session_id(self) -> str:
        """Get the session identifier."""
        return self._session_id

    @property
    def original_items(self) -> tuple[str, ...]:
        """Get the original, pre-shuffle items."""
        return self._original_items

    @property
    def is_complete(self) -> bool:
        """Check if the session has finished."""
        return self._session.is_complete

    def current_pair(self) -> ComparisonPair | None:
        """Get the pair the user should compare next.

        Returns:
            The comparison pair, or None once the session is complete.
        """
        if isinstance(self._session, CompleteSession):
            return None
        return ComparisonPair(
            target=self._session.target,
            candidate=self._session.current_item,
        )

    def progress(self) -> Progress:
        """Compute placement progress.

        Returns:
            Progress for the current session.
        """
        session = self._session
        if isinstance(session, CompleteSession):
            count = len(session.ranking)
            return Progress(placed=count, total=count, percent=100.0)

        placed = len(session.sorted)
        total = session.remaining
        return Progress(
            placed=placed,
            total=total,
            percent=round(placed / total * 100, 1),
        )

    def current_ranking(self) -> tuple[str, ...]:
        """Get the ranking as it stands.

        Returns:
            Placed items while ranking, the final order once complete.
        """
        if isinstance(self._session, CompleteSession):
            return self._session.ranking
        return self._session.sorted

    def stats(self) -> SessionStats:
        """Get counters for the live session."""
        return SessionStats(
            comparisons=self._comparisons,
            skips=self._skips,
            restarts=self._restarts,
        )

    def choose(self, prefer_current: bool) -> Session:
        """Answer the current comparison.

        Args:
            prefer_current: True if the candidate beats the target.

        Returns:
            The new session value.

        Raises:
            SessionCompleteError: If the session is already complete.
        """
        before = self._session
        self._session = self._apply(Decide(prefer_current=prefer_current))
        self._comparisons += 1
        self._item_comparisons += 1
        self._metrics.record_comparison()

        if isinstance(before, RankingSession):
            self._log.debug(
                "comparison_resolved",
                target=before.target,
                candidate=before.current_item,
                prefer_current=prefer_current,
            )
            if self._placed(before):
                self._log.info(
                    "item_placed",
                    item=before.current_item,
                    comparisons=self._item_comparisons,
                    sorted_len=len(before.sorted) + 1,
                )
                self._metrics.record_placement(self._item_comparisons)
                self._item_comparisons = 0

        self._note_if_complete()
        return self._session

    def skip(self) -> Session:
        """Drop the current candidate from the ranking for good.

        Returns:
            The new session value.

        Raises:
            SessionCompleteError: If the session is already complete.
        """
        before = self._session
        self._session = self._apply(Skip())
        self._skips += 1
        self._item_comparisons = 0
        self._metrics.record_skip()

        if isinstance(before, RankingSession):
            self._log.info(
                "item_skipped",
                item=before.current_item,
                unsorted_left=len(before.unsorted),
            )

        self._note_if_complete()
        return self._session

    def restart(self) -> Session:
        """Discard all progress and reshuffle the original items.

        Returns:
            The new session value.
        """
        self._session = self._apply(Restart(items=self._original_items))
        self._comparisons = 0
        self._skips = 0
        self._item_comparisons = 0
        self._restarts += 1
        self._metrics.record_restart()

        self._log.info(
            "ranking_session_restarted",
            items_total=len(self._original_items),
            restarts=self._restarts,
        )
        self._note_if_complete()
        return self._session

    def _apply(self, event: Event) -> Session:
        try:
            return apply_event(self._session, event, self._rng)
        except SessionCompleteError as e:
            self._log.warning("illegal_session_event", rejected_event=e.event)
            raise

    def _placed(self, before: RankingSession) -> bool:
        # Placement adds the candidate to sorted; narrowing leaves sorted as is.
        after = self._session
        if isinstance(after, CompleteSession):
            return len(after.ranking) > len(before.sorted)
        return len(after.sorted) > len(before.sorted)

    def _note_if_complete(self) -> None:
        if isinstance(self._session, CompleteSession):
            self._metrics.record_session_completed()
            self._log.info(
                "ranking_session_complete",
                ranking_len=len(self._session.ranking),
                comparisons=self._comparisons,
                skips=self._skips,
            )
