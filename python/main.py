#!/usr/bin/env python3
"""Replay tilts on a 2048 board.

Usage::

    python main.py                       # 4×4 board, opening tiles only
    python main.py -m uurdl --seed 7     # replay five tilts
    python main.py -s 3 -m lrlr --plain  # canonical text output
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DEFAULT_SIZE, MAX_PIECE, MAX_SIZE, MIN_SIZE  # noqa: E402
from frontend.cli.rich import app as rich_app  # noqa: E402


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    moves: str = typer.Option(
        "", "-m", "--moves",
        help="Tilts to replay: u(p), d(own), l(eft), r(ight).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for tile spawning.",
    ),
    max_piece: int = typer.Option(
        MAX_PIECE, "--max-piece",
        min=4,
        help="Tile value that ends the game.",
    ),
    plain: bool = typer.Option(
        False, "--plain",
        help="Print the plain text board instead of Rich panels.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every tilt and spawn.",
    ),
) -> None:
    """Replay a sequence of tilts on a fresh 2048 board."""
    _configure_logging(verbose)
    if max_piece & (max_piece - 1):
        raise typer.BadParameter(
            "must be a power of two", param_hint="--max-piece"
        )
    rich_app.run(
        size=size, moves=moves, seed=seed, max_piece=max_piece, plain=plain
    )


if __name__ == "__main__":
    app()
