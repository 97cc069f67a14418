"""Exceptions raised by the ranking engine.

Every engine error derives from RankingError so callers can handle the
whole family at one seam.
"""


class RankingError(Exception):
    """Base exception for all ranking engine errors."""


class InvalidInputError(RankingError):
    """Raised when a session is requested for an unusable item list.

    The only rejected input is an empty list; duplicate labels are valid
    distinct items.
    """

    def __init__(self, message: str = "item list is empty") -> None:
        """Initialize the invalid input error.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message)


class SessionCompleteError(RankingError):
    """Raised when a ranking event is applied to a finished session.

    Decide and Skip are only defined while an item is being placed.
    """

    def __init__(self, event: str) -> None:
        """Initialize the error with the rejected event name.

        Args:
            event: Name of the event that was attempted.
        """
        self.event = event
        super().__init__(f"Cannot apply '{event}': ranking session is complete")
