"""Events accepted by the ranking engine and their dispatcher."""

import random
from dataclasses import dataclass

from pairrank.engine.engine import decide, restart, skip
from pairrank.engine.models import Session


@dataclass(frozen=True)
class Decide:
    """Comparison answer.

    Attributes:
        prefer_current: True if the current item beats the target.
    """

    prefer_current: bool


@dataclass(frozen=True)
class Skip:
    """Drop the current item without comparing it."""


@dataclass(frozen=True)
class Restart:
    """Start over from the original item list.

    Attributes:
        items: Original, pre-shuffle item labels.
    """

    items: tuple[str, ...]


Event = Decide | Skip | Restart


def apply_event(
    session: Session,
    event: Event,
    rng: random.Random | None = None,
) -> Session:
    """Apply one event to a session and return the resulting session.

    Args:
        session: Current session value.
        event: Event to apply.
        rng: Randomness source, used only by Restart.

    Returns:
        The new session value.

    Raises:
        SessionCompleteError: For Decide or Skip on a complete session.
        InvalidInputError: For Restart with an empty item list.
        TypeError: For an unknown event type.
    """
    if isinstance(event, Decide):
        return decide(session, event.prefer_current)
    if isinstance(event, Skip):
        return skip(session)
    if isinstance(event, Restart):
        return restart(event.items, rng)
    msg = f"Unknown ranking event: {event!r}"
    raise TypeError(msg)
