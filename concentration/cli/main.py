"""Typer entry-point wiring for the Concentration CLI."""

from __future__ import annotations

import logging
import random

import typer
from rich.console import Console

from ..state import BoardConfig, ConcentrationModel
from ..utils.logger import setup_logging
from .ptui import ConcentrationPTUI
from .textual import run_textual_app

app = typer.Typer(add_completion=False, rich_markup_mode="rich")

logger = logging.getLogger(__name__)


def _board_config(size: int) -> BoardConfig:
    try:
        return BoardConfig(size=size)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--size") from exc


def _configure_logging(log_level: str) -> None:
    try:
        setup_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


@app.command()
def play(
    size: int = typer.Option(4, min=1, help="Tiles per side; the board must hold an even number of tiles."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles (omit for randomness)."),
    log_level: str = typer.Option("WARNING", help="Logging level written to stderr."),
) -> None:
    """Play in the graphical terminal interface."""

    _configure_logging(log_level)
    config = _board_config(size)
    run_textual_app(size=config.size, seed=seed)


@app.command("console")
def console_cli(
    size: int = typer.Option(4, min=1, help="Tiles per side; the board must hold an even number of tiles."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible shuffles (omit for randomness)."),
    log_level: str = typer.Option("WARNING", help="Logging level written to stderr."),
) -> None:
    """Play with line commands on stdin/stdout."""

    _configure_logging(log_level)
    config = _board_config(size)
    rng = random.Random(seed)
    logger.info("Starting console game with size=%d seed=%s", config.size, seed)
    model = ConcentrationModel(config, rng=rng)
    ptui = ConcentrationPTUI(model, console=Console(highlight=False))
    ptui.run()


def main() -> None:
    """Entry-point for the ``concentration`` script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
