"""Session values for the ranking engine."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RankingSession(BaseModel):
    """A session with an item still being placed.

    Attributes:
        current_item: Item whose insertion point is being searched.
        sorted: Items already placed, best first.
        unsorted: Items not yet considered, in processing order.
        left: Lowest insertion index still possible (inclusive).
        right: Highest probe index still possible (inclusive).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["ranking"] = "ranking"
    current_item: str
    sorted: Annotated[tuple[str, ...], Field(min_length=1)]
    unsorted: tuple[str, ...] = ()
    left: Annotated[int, Field(ge=0)] = 0
    right: Annotated[int, Field(ge=0)] = 0

    @model_validator(mode="after")
    def _check_bounds(self) -> "RankingSession":
        if not self.left <= self.right < len(self.sorted):
            msg = (
                f"search bounds ({self.left}, {self.right}) outside "
                f"sorted range of length {len(self.sorted)}"
            )
            raise ValueError(msg)
        return self

    @property
    def is_complete(self) -> bool:
        """Ranking sessions are never complete."""
        return False

    @property
    def mid(self) -> int:
        """Index within sorted probed by the next comparison."""
        return (self.left + self.right) // 2

    @property
    def target(self) -> str:
        """Placed item the current item is compared against next."""
        return self.sorted[self.mid]

    @property
    def remaining(self) -> int:
        """Number of items still in play, including the current one."""
        return len(self.sorted) + len(self.unsorted) + 1


class CompleteSession(BaseModel):
    """A finished session holding the final order.

    Attributes:
        ranking: Final ordering, best first. Skipped items are absent.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["complete"] = "complete"
    ranking: tuple[str, ...]

    @property
    def is_complete(self) -> bool:
        """Complete sessions are terminal."""
        return True

    @property
    def remaining(self) -> int:
        """Number of items in the final ranking."""
        return len(self.ranking)


Session = RankingSession | CompleteSession
