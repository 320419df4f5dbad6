#!/usr/bin/env python3
"""Mosaic Match.

Usage::

    python main.py                    # play in the terminal
    python main.py -s 42              # deterministic deal
    python main.py --show-rules       # open the rules first
    python main.py --log-file mosaic.log --log-level debug
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent  # mosaic-match/
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel, log_file: Optional[Path]) -> None:
    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    logging.basicConfig(
        level=getattr(logging, level.value.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[handler],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    seed: Optional[int] = typer.Option(
        None, "-s", "--seed",
        help="Seed for the deal. Omit for a random board.",
    ),
    show_rules: bool = typer.Option(
        False, "--show-rules",
        help="Show the rules before the first move.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Write logs to this file instead of stderr.",
    ),
) -> None:
    """Mosaic Match."""
    _configure_logging(log_level, log_file)

    from mosaic_frontend.cli.rich.app import run

    run(data_dir=DATA_DIR, seed=seed, show_rules=show_rules)


if __name__ == "__main__":
    app()
