"""Entry point for ``python -m pairrank``."""

from pairrank.cli import cli


cli()
