"""Binary-insertion ranking engine.

Pure transition functions over immutable Session values:

    initialize(items)          -> Session
    decide(session, preferred) -> Session
    skip(session)              -> Session
    restart(items)             -> Session

Each placed item costs at most ceil(log2(len(sorted) + 1)) decisions.
"""

import random
from collections.abc import Sequence

import structlog

from pairrank.constants import COMPONENT_ENGINE
from pairrank.engine.errors import InvalidInputError, SessionCompleteError
from pairrank.engine.models import CompleteSession, RankingSession, Session
from pairrank.engine.shuffle import fair_shuffle


logger = structlog.get_logger()


def initialize(
    items: Sequence[str],
    rng: random.Random | None = None,
) -> Session:
    """Build the first session for an item list.

    Args:
        items: Item labels in their original order.
        rng: Randomness source for the initial shuffle.

    Returns:
        A RankingSession, or a CompleteSession for a single item.

    Raises:
        InvalidInputError: If items is empty.
    """
    if not items:
        raise InvalidInputError()

    if len(items) == 1:
        return CompleteSession(ranking=tuple(items))

    first, current, *rest = fair_shuffle(items, rng)
    logger.debug(
        "session_initialized",
        component=COMPONENT_ENGINE,
        items_total=len(items),
    )
    return RankingSession(
        current_item=current,
        sorted=(first,),
        unsorted=tuple(rest),
        left=0,
        right=0,
    )


def _advance(
    sorted_items: tuple[str, ...],
    unsorted: tuple[str, ...],
) -> Session:
    """Move on to the next queued item, or finish if none remain."""
    if not unsorted:
        return CompleteSession(ranking=sorted_items)

    return RankingSession(
        current_item=unsorted[0],
        sorted=sorted_items,
        unsorted=unsorted[1:],
        left=0,
        right=len(sorted_items) - 1,
    )


def decide(
    session: Session,
    prefer_current: bool,
) -> Session:
    """Apply one comparison answer to the active insertion search.

    Args:
        session: Session being ranked.
        prefer_current: True if the current item ranks ahead of the
            comparison target.

    Returns:
        The narrowed session, the session for the next item once the
        current one is placed, or the completed session.

    Raises:
        SessionCompleteError: If the session is already complete.
    """
    if isinstance(session, CompleteSession):
        raise SessionCompleteError("decide")

    mid = session.mid
    if prefer_current:
        new_left, new_right = session.left, mid - 1
    else:
        new_left, new_right = mid + 1, session.right

    if new_left <= new_right:
        return RankingSession(
            current_item=session.current_item,
            sorted=session.sorted,
            unsorted=session.unsorted,
            left=new_left,
            right=new_right,
        )

    placed = (
        session.sorted[:new_left] + (session.current_item,) + session.sorted[new_left:]
    )
    logger.debug(
        "search_converged",
        component=COMPONENT_ENGINE,
        insertion_index=new_left,
        sorted_len=len(placed),
    )
    return _advance(placed, session.unsorted)


def skip(session: Session) -> Session:
    """Drop the current item from the ranking for good.

    Args:
        session: Session being ranked.

    Returns:
        The session for the next queued item, or the completed session.

    Raises:
        SessionCompleteError: If the session is already complete.
    """
    if isinstance(session, CompleteSession):
        raise SessionCompleteError("skip")

    return _advance(session.sorted, session.unsorted)


def restart(
    original_items: Sequence[str],
    rng: random.Random | None = None,
) -> Session:
    """Discard all progress and start over from the original items.

    Args:
        original_items: The pre-shuffle item list cached by the caller.
        rng: Randomness source for the fresh shuffle.

    Returns:
        A new session, exactly as initialize would build it.

    Raises:
        InvalidInputError: If original_items is empty.
    """
    return initialize(original_items, rng)
