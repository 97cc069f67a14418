"""Command-line interface."""

from pairrank.cli.rank import cli


__all__ = ["cli"]
