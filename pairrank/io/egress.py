"""Serialization of a final ranking."""

import csv
import io
from collections.abc import Sequence


def ranking_rows(ranking: Sequence[str]) -> list[tuple[int, str]]:
    """Pair each item with its 1-based rank.

    Args:
        ranking: Items, best first.

    Returns:
        (rank, label) tuples.
    """
    return list(enumerate(ranking, start=1))


def format_ranking_csv(ranking: Sequence[str]) -> str:
    """Render a ranking as "rank,label" lines.

    Labels containing the delimiter or quotes are quoted so the file
    reads back with the same labels.

    Args:
        ranking: Items, best first.

    Returns:
        CSV text with newline line endings.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(ranking_rows(ranking))
    return buffer.getvalue()
