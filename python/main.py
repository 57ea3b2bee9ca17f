#!/usr/bin/env python3
"""Picture Puzzle — slide the pieces back into place.

Usage::

    python main.py                        # PyQt window, Easy (3×3)
    python main.py -f rich -l hard        # Rich terminal, 5×5
    python main.py --shuffle permutation  # free shuffle, may be unsolvable
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import ShuffleStrategy  # noqa: E402
from backend.settings import DEFAULT_DIFFICULTY, Difficulty  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pyqt = "pyqt"


class Level(StrEnum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _load_runner(frontend: Frontend):
    """Import the frontend lazily so only its own GUI toolkit is needed."""
    return importlib.import_module(_RUNNERS[frontend]).run


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.pyqt, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    level: Level = typer.Option(
        Level(DEFAULT_DIFFICULTY.name.lower()), "-l", "--level",
        help="Difficulty: easy (3×3), medium (4×4) or hard (5×5).",
    ),
    shuffle: ShuffleStrategy = typer.Option(
        ShuffleStrategy.WALK, "--shuffle",
        help="walk: random legal moves (always solvable); "
        "permutation: free shuffle (may be unsolvable).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for shuffles and picture choice.",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Picture Puzzle."""
    _configure_logging(log_level)
    difficulty = Difficulty.from_label(level.value)
    logger.info(
        "Starting %s frontend: %s, %s shuffle, seed=%s",
        frontend.value, difficulty.label, shuffle.value, seed,
    )

    run = _load_runner(frontend)
    run(difficulty=difficulty, strategy=shuffle, rng=random.Random(seed))


if __name__ == "__main__":
    app()
