"""Main CLI entry point for collections-showcase.

This module provides a command-line interface using Typer:

1.  `demo`: run one or more demonstration sections and print their output.
2.  `sections`: list the available section names.
3.  `transform`: apply one core sequence operation to integers given on the
    command line and print the result as JSON.

Settings (log level, default chunk/window/take parameters, default section
selection) come from `collections_showcase.config`; command-line options
override them.
"""
from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, List, Optional

import typer
from dotenv import find_dotenv, load_dotenv

from . import examples
from .config import get_settings
from .errors import ShowcaseError
from .sequences import operations as ops
from .showcase import run_sections, section_names

# Load .env file if present (before any config access)
_env_file = find_dotenv(usecwd=True)
if _env_file:
    load_dotenv(_env_file)

logger = logging.getLogger(__name__)

app = typer.Typer(help="collections-showcase CLI: runnable collection and language-feature examples")


class Operation(str, Enum):
    chunk = "chunk"
    window = "window"
    distinct_sorted = "distinct-sorted"
    group_parity = "group-parity"
    reduce_sum = "reduce-sum"
    take = "take"
    drop = "drop"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level)


def _fail(err: ShowcaseError) -> typer.Exit:
    typer.echo(f"Error: {err}", err=True)
    return typer.Exit(code=1)


@app.callback()
def main() -> None:  # pragma: no cover - simple callback
    """collections-showcase CLI.

    Use a subcommand like 'demo' to run the examples.
    """
    pass


@app.command(help="Run demonstration sections (all of them unless --section is given).")
def demo(
    section: Optional[List[str]] = typer.Option(
        None,
        "--section",
        "-s",
        help="Section to run; repeat for several. Defaults to SHOWCASE_SECTIONS, or all sections.",
    ),
) -> None:
    settings = get_settings()
    _configure_logging(settings.LOG_LEVEL)
    selected = section or settings.SHOWCASE_SECTIONS
    logger.info("Running sections: %s", ", ".join(selected) if selected else "all")
    try:
        lines = run_sections(selected, settings)
    except ShowcaseError as e:
        raise _fail(e) from e
    for line in lines:
        typer.echo(line)


@app.command(help="List available demonstration sections.")
def sections() -> None:
    for name in section_names():
        typer.echo(name)


@app.command(
    help="Apply one sequence operation to integers and print the result as JSON.",
    # Negative integers such as -1 are inputs, not unknown options
    context_settings={"ignore_unknown_options": True},
)
def transform(
    operation: Operation = typer.Argument(..., help="Operation to apply"),
    numbers: List[int] = typer.Argument(..., help="Input integers"),
    size: Optional[int] = typer.Option(
        None, help="chunk/window size (defaults to CHUNK_SIZE / WINDOW_SIZE)"
    ),
    step: Optional[int] = typer.Option(None, help="window step (defaults to WINDOW_STEP)"),
    partial: Optional[bool] = typer.Option(
        None,
        "--partial/--no-partial",
        help="Keep clipped trailing windows. If not specified, uses WINDOW_PARTIAL from config/env.",
    ),
    n: Optional[int] = typer.Option(
        None, "-n", min=0, help="take/drop count (defaults to TAKE_COUNT)"
    ),
) -> None:
    settings = get_settings()
    _configure_logging(settings.LOG_LEVEL)
    result: Any
    try:
        if operation is Operation.chunk:
            result = ops.chunk(numbers, size if size is not None else settings.CHUNK_SIZE)
        elif operation is Operation.window:
            result = ops.window(
                numbers,
                size if size is not None else settings.WINDOW_SIZE,
                step=step if step is not None else settings.WINDOW_STEP,
                allow_partial=partial if partial is not None else settings.WINDOW_PARTIAL,
            )
        elif operation is Operation.distinct_sorted:
            result = examples.distinct_sorted(numbers)
        elif operation is Operation.group_parity:
            result = examples.group_by_parity(numbers)
        elif operation is Operation.reduce_sum:
            result = examples.reduce_sum(numbers)
        elif operation is Operation.take:
            result = ops.take(numbers, n if n is not None else settings.TAKE_COUNT)
        else:
            result = ops.drop(numbers, n if n is not None else settings.TAKE_COUNT)
    except ShowcaseError as e:
        raise _fail(e) from e
    logger.debug("transform %s on %d number(s)", operation.value, len(numbers))
    typer.echo(json.dumps(result))


if __name__ == "__main__":  # pragma: no cover
    app()
