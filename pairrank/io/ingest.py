"""Item ingestion from delimited text.

One item per line; the first comma-delimited field is the label. Blank
lines and lines with an empty first field are dropped.
"""

import csv
from pathlib import Path

import structlog

from pairrank.constants import COMPONENT_INGEST, FIELD_DELIMITER


logger = structlog.get_logger()


class ItemSourceError(Exception):
    """Raised when an item source cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize the error.

        Args:
            path: Path of the unreadable source.
            reason: Why it could not be read.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read items from '{path}': {reason}")


def parse_items(text: str) -> list[str]:
    """Extract item labels from delimited text.

    Args:
        text: Raw text, one item per line.

    Returns:
        Labels in file order, duplicates kept.

    Raises:
        csv.Error: If a field exceeds the csv field size limit.
    """
    items: list[str] = []
    for line in text.splitlines():
        # Quotes never span lines.
        row = next(csv.reader([line], delimiter=FIELD_DELIMITER), [])
        if not row:
            continue
        label = row[0].strip()
        if label:
            items.append(label)
    return items


def load_items(path: Path) -> list[str]:
    """Read and parse an item file.

    Args:
        path: UTF-8 text file (a leading BOM is ignored).

    Returns:
        Labels in file order. May be empty.

    Raises:
        ItemSourceError: If the file cannot be read, decoded or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise ItemSourceError(path, "not valid UTF-8 text") from e
    except OSError as e:
        raise ItemSourceError(path, e.strerror or str(e)) from e

    try:
        items = parse_items(text)
    except csv.Error as e:
        raise ItemSourceError(path, str(e)) from e

    logger.info(
        "items_loaded",
        component=COMPONENT_INGEST,
        path=str(path),
        items_count=len(items),
    )
    return items
