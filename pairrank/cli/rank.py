"""CLI commands for interactive pairwise ranking."""

import json
import logging
import random
import sys
import uuid
from dataclasses import asdict
from pathlib import Path

import click
import structlog

from pairrank.constants import (
    CHOICE_CANDIDATE,
    CHOICE_QUIT,
    CHOICE_RESTART,
    CHOICE_SKIP,
    CHOICE_TARGET,
    CHOICE_VIEW,
    CLI_CHOICES,
    COMPONENT_CLI,
)
from pairrank.engine.errors import InvalidInputError
from pairrank.engine.metrics import RankingMetrics
from pairrank.io.egress import format_ranking_csv
from pairrank.io.ingest import ItemSourceError, load_items
from pairrank.io.writer import AtomicWriter
from pairrank.observability.logging import (
    bind_session_context,
    clear_session_context,
    configure_logging,
)
from pairrank.session.controller import RankingController
from pairrank.settings import get_settings


logger = structlog.get_logger()


def _load_or_exit(items_file: Path) -> list[str]:
    """Load items, exiting with a message on failure."""
    try:
        return load_items(items_file)
    except ItemSourceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _echo_ranking(title: str, ranking: tuple[str, ...]) -> None:
    """Print a numbered ranking."""
    click.echo(title)
    if not ranking:
        click.echo("  (no items ranked yet)")
        return
    width = len(str(len(ranking)))
    for index, item in enumerate(ranking, start=1):
        click.echo(f"  {index:>{width}}. {item}")


def _echo_round(controller: RankingController) -> None:
    """Print progress and the pair to compare."""
    progress = controller.progress()
    pair = controller.current_pair()
    if pair is None:
        return
    click.echo("")
    click.echo(
        f"Progress: {progress.placed} / {progress.total} items "
        f"({progress.percent:.1f}%)"
    )
    click.echo(f"  [{CHOICE_TARGET}] {pair.target}")
    click.echo("   vs")
    click.echo(f"  [{CHOICE_CANDIDATE}] {pair.candidate}")


def _run_interactive(controller: RankingController) -> bool:
    """Ask for answers until the session completes.

    Returns:
        True if the session completed, False if the user quit.
    """
    while not controller.is_complete:
        _echo_round(controller)
        pair = controller.current_pair()
        candidate = pair.candidate if pair else ""
        answer = click.prompt(
            f"Which do you prefer? ({CHOICE_SKIP}=skip \"{candidate}\", "
            f"{CHOICE_VIEW}=view, {CHOICE_RESTART}=start over, {CHOICE_QUIT}=quit)",
            type=click.Choice(CLI_CHOICES, case_sensitive=False),
            show_choices=False,
        ).lower()

        if answer == CHOICE_TARGET:
            controller.choose(prefer_current=False)
        elif answer == CHOICE_CANDIDATE:
            controller.choose(prefer_current=True)
        elif answer == CHOICE_SKIP:
            controller.skip()
        elif answer == CHOICE_VIEW:
            ranking = controller.current_ranking()
            _echo_ranking(f"Current rankings ({len(ranking)}):", ranking)
        elif answer == CHOICE_RESTART:
            if click.confirm("Discard all answers and start over?", default=False):
                controller.restart()
        elif answer == CHOICE_QUIT:
            return False
    return True


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """Rank a list of items by answering pairwise questions."""


@cli.command()
@click.argument(
    "items_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the final ranking CSV.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for the initial shuffle (reproducible sessions).",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=None,
    help="Emit logs as JSON lines.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
def rank(
    items_file: Path,
    output_path: Path | None,
    seed: int | None,
    json_logs: bool | None,
    verbose: bool,
) -> None:
    """Rank the items in ITEMS_FILE (one per line, first column used)."""
    settings = get_settings()
    output_path = output_path or settings.output_path
    seed = seed if seed is not None else settings.seed
    json_logs = settings.json_logs if json_logs is None else json_logs
    log_level = logging.DEBUG if verbose else settings.log_level_value

    configure_logging(level=log_level, json_format=json_logs)
    session_id = str(uuid.uuid4())
    bind_session_context(session_id)
    log = logger.bind(component=COMPONENT_CLI, command="rank")

    try:
        items = _load_or_exit(items_file)
        try:
            controller = RankingController(
                items,
                rng=random.Random(seed),
                session_id=session_id,
            )
        except InvalidInputError:
            log.warning("empty_item_list", items_file=str(items_file))
            click.echo(f"Error: {items_file} contains no items", err=True)
            sys.exit(1)

        click.echo(f"Loaded {len(items)} items from {items_file}")
        if not _run_interactive(controller):
            log.info("ranking_aborted", **asdict(controller.stats()))
            click.echo("Quit without saving.")
            sys.exit(1)

        ranking = controller.current_ranking()
        click.echo("")
        _echo_ranking("Final Ranking", ranking)

        writer = AtomicWriter(Path.cwd(), session_id=session_id)
        written = writer.write(output_path, format_ranking_csv(ranking))
        log.info(
            "ranking_written",
            path=written.path,
            bytes=written.bytes_written,
            metrics=RankingMetrics.get_instance().to_dict(),
        )
        click.echo(f"Ranking saved to {written.path}")
    finally:
        clear_session_context()


@cli.command()
@click.argument(
    "items_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Print the parsed items as JSON.",
)
def validate(items_file: Path, json_output: bool) -> None:
    """Check that ITEMS_FILE parses into a rankable item list."""
    settings = get_settings()
    configure_logging(level=settings.log_level_value, json_format=settings.json_logs)
    items = _load_or_exit(items_file)

    if json_output:
        click.echo(
            json.dumps(
                {"path": str(items_file), "count": len(items), "items": items},
                ensure_ascii=False,
                indent=2,
            )
        )
    else:
        click.echo(f"{items_file}: {len(items)} items")
        for item in items:
            click.echo(f"  - {item}")

    if not items:
        click.echo(f"Error: {items_file} contains no items", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
