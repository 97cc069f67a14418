"""Item ingestion and ranking export."""

from pairrank.io.egress import format_ranking_csv, ranking_rows
from pairrank.io.ingest import ItemSourceError, load_items, parse_items
from pairrank.io.writer import AtomicWriter, GeneratedFile


__all__ = [
    "AtomicWriter",
    "GeneratedFile",
    "ItemSourceError",
    "format_ranking_csv",
    "load_items",
    "parse_items",
    "ranking_rows",
]
